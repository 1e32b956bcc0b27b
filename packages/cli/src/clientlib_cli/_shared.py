"""Shared enums and helpers for CLI commands.

Centralises config loading and logging setup so every command applies
``--cwd`` / ``--root`` overrides the same way.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from clientlib_common import ConfigurationError, configure_logging
from clientlib_generator import GeneratorConfig, load_config

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class OutputFormat(str, Enum):
    """Output format options."""

    markdown = "markdown"
    json = "json"


# ---------------------------------------------------------------------------
# Reusable options
# ---------------------------------------------------------------------------

CONFIG_ARGUMENT = typer.Argument(..., help="JSON or YAML file listing the clientlibs")
CWD_OPTION = typer.Option(
    None,
    "--cwd",
    help="Base directory for relative paths (overrides the config's context)",
)
ROOT_OPTION = typer.Option(
    None,
    "--root",
    "-r",
    help="Default clientlib root for libraries without 'path'",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def load_run_config(
    config_path: Path,
    cwd: Optional[Path] = None,
    root: Optional[str] = None,
) -> GeneratorConfig:
    """Load ``config_path`` and apply command-line overrides.

    Raises:
        ConfigurationError: If the file cannot be loaded
    """
    config = load_config(config_path)
    updates = {}
    if cwd is not None:
        updates["cwd"] = cwd.expanduser().absolute()
    if root is not None:
        updates["client_lib_root"] = root
    if updates:
        config.options = config.options.model_copy(update=updates)
    return config


def select_libraries(config: GeneratorConfig, name: Optional[str]) -> GeneratorConfig:
    """Restrict ``config`` to the library called ``name`` (if given).

    Raises:
        ConfigurationError: If no library has that name
    """
    if name is None:
        return config
    libs = [lib for lib in config.libs if lib.name == name]
    if not libs:
        raise ConfigurationError(f"No clientlib named '{name}' in {config.source}")
    return config.model_copy(update={"libs": libs})


def setup_logging(log_level: Optional[str], log_format: Optional[str]) -> None:
    """Configure structlog from CLI flags, falling back to Settings."""
    configure_logging(level=log_level, log_format=log_format)

