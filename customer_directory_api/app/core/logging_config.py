"""
Logging setup driven by ``Settings``.

``configure_logging`` installs a console handler on the root logger,
plus a file handler when ``settings.log_file`` is set, and applies
``settings.log_level``.  The root logger is only configured once per
process; later calls (one per ``create_app``) leave it alone.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number; default ``INFO``."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """Return the ``dictConfig`` mapping for ``settings``."""
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    }
    if settings.log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(settings.log_file).resolve()),
            "encoding": "utf-8",
        }
    return {
        "version": 1,
        # uvicorn and the test runner create their loggers first.
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "root": {"level": resolve_level(settings.log_level), "handlers": list(handlers)},
    }


def configure_logging(settings: Settings) -> bool:
    """Configure the root logger from ``settings``.

    Returns ``False`` without touching anything when the root logger
    already has handlers.
    """
    if logging.getLogger().handlers:
        return False
    logging.config.dictConfig(build_logging_config(settings))
    return True
