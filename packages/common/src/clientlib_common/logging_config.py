"""Structured logging setup (structlog).

Usage:
    from clientlib_common import configure_logging, get_logger

    configure_logging()
    logger = get_logger(__name__)
    logger.info("file_copied", src="src/app.js", dest="dist/app/js/app.js")
"""

import logging
import sys
from typing import Optional

import structlog

from clientlib_common.config import get_settings


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name (default: ``Settings.log_level``)
        log_format: ``console`` or ``json`` (default: ``Settings.log_format``)
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    fmt = (log_format or settings.log_format).lower()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
