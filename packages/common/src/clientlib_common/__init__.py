"""Clientlib Common - shared errors, settings and logging.

Version: 1.0.0
"""

from clientlib_common.config import Settings, get_settings
from clientlib_common.errors import (
    AssetSpecError,
    BatchError,
    ClientlibError,
    ConfigurationError,
    MaterializationError,
)
from clientlib_common.logging_config import configure_logging, get_logger

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ClientlibError",
    "ConfigurationError",
    "AssetSpecError",
    "MaterializationError",
    "BatchError",
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
]
