"""Shared fixtures for integration tests.

Builds a realistic frontend project on disk (scripts, styles, vendor
files, images) so whole-batch runs can be compared byte for byte.
"""

from pathlib import Path

import pytest

from clientlib_common.config import get_settings
from clientlib_generator import RecordingObserver

SOURCES = {
    "src/vendor/jquery.js": "/*! jQuery */\n",
    "src/vendor/lodash.js": "/*! lodash */\n",
    "src/app/main.js": "init();\n",
    "src/app/nav/menu.js": "menu();\n",
    "src/styles/reset.css": "* { margin: 0; }\n",
    "src/styles/site.css": "body { color: #333; }\n",
    "src/img/logo.svg": "<svg/>\n",
    "src/img/hero.jpg": "JPEG",
}


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Ignore generator settings from the developer's environment."""
    for var in ("CLIENTLIB_ROOT", "CLIENTLIB_CWD", "XML_LEGACY_DEPENDENCIES"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Frontend project with source files under ``src/``."""
    root = tmp_path / "workspace"
    for rel, content in SOURCES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    (root / "src" / "fonts").mkdir()
    return root


@pytest.fixture
def libraries() -> list[dict]:
    """Three libraries covering every asset shape and both descriptor formats."""
    return [
        {
            "name": "acme.vendor",
            "mode": "json",
            "assets": {"js": ["src/vendor/jquery.js", "src/vendor/lodash.js"]},
        },
        {
            "name": "acme.site",
            "embed": ["acme.vendor"],
            "dependencies": ["granite.utils"],
            "assets": [
                {"type": "js", "base": "scripts", "files": ["src/app/main.js", "src/app/nav/menu.js"]},
                {
                    "type": "css",
                    "base": "styles",
                    "files": ["src/styles/reset.css", {"src": "src/styles/site.css", "dest": "theme/site.css"}],
                },
                {"type": "resources", "base": "resources", "files": ["src/img/logo.svg", "src/fonts"]},
            ],
        },
        {
            "name": "acme.images",
            "path": "apps/acme/clientlibs",
            "mode": "json",
            "assets": {"img": {"base": "img", "files": ["src/img/hero.jpg"]}},
        },
    ]


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()

