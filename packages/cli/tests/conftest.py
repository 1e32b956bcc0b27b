"""Pytest fixtures for CLI tests."""

import logging
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from clientlib_common.config import get_settings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Typer CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Isolate settings and logging configuration between CLI invocations."""
    for var in ("CLIENTLIB_ROOT", "CLIENTLIB_CWD", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Frontend project with sources and a YAML config.

    Layout::

        project/
            clientlib.config.yaml
            src/app.js
            src/site.css
    """
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "app.js").write_text("app();\n")
    (root / "src" / "site.css").write_text("body {}\n")
    (root / "clientlib.config.yaml").write_text(
        "clientLibRoot: dist/clientlibs\n"
        "libs:\n"
        "  - name: site.base\n"
        "    mode: json\n"
        "    assets:\n"
        "      js: [src/app.js]\n"
        "  - name: site.publish\n"
        "    embed: [site.base]\n"
        "    assets:\n"
        "      css: [src/site.css]\n"
    )
    return root
