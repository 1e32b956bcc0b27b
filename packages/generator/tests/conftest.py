"""Pytest fixtures for generator tests."""

from pathlib import Path

import pytest

from clientlib_generator import RecordingObserver


@pytest.fixture
def frontend(tmp_path: Path) -> Path:
    """Source tree with scripts, styles and an image folder.

    Layout::

        frontend/
            src/js/app.js
            src/js/nav.js
            src/js/vendor/jquery.js
            src/css/site.css
            src/img/logo.png
            src/fonts/           (empty directory)
    """
    root = tmp_path / "frontend"
    files = {
        "src/js/app.js": "console.log('app');\n",
        "src/js/nav.js": "console.log('nav');\n",
        "src/js/vendor/jquery.js": "/* jquery */\n",
        "src/css/site.css": "body { margin: 0; }\n",
        "src/img/logo.png": "PNG",
    }
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    (root / "src" / "fonts").mkdir(parents=True)
    return root


@pytest.fixture
def observer() -> RecordingObserver:
    """Observer collecting pipeline events."""
    return RecordingObserver()


@pytest.fixture
def site_item() -> dict:
    """Library item using every asset shape."""
    return {
        "name": "site.publish",
        "path": "clientlibs",
        "embed": ["site.base"],
        "dependencies": ["granite.jquery"],
        "mode": "json",
        "assets": {
            "js": ["src/js/app.js", "src/js/nav.js"],
            "css": ["src/css/site.css"],
            "resources": {
                "base": "resources",
                "files": [
                    {"src": "src/img/logo.png", "dest": "img/logo.png"},
                    "src/fonts",
                ],
            },
        },
    }
