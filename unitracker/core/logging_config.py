"""
Logging setup for UniTracker.

Everything goes to the console. With UNITRACKER_LOG_TO_FILE enabled the same
records are also appended to ``<UNITRACKER_LOG_FILE_DIR>/unitracker.log``.
Defaults come from the server settings; :func:`setup_logging` arguments
override them.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

from unitracker.server.core.config import settings

LOG_FILE_NAME = "unitracker.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FORMATS = {
    "simple": "%(levelname)s %(name)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s",
    "json": (
        '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
        '"line": %(lineno)d, "message": "%(message)s"}'
    ),
}

# Per-logger levels; the console handler level still applies on top.
LOGGER_LEVELS = {
    "unitracker": "INFO",
    "unitracker.server.api": "DEBUG",
    "unitracker.server.services": "DEBUG",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
}


def build_logging_config(level: str, log_format: str, log_file: Optional[Path] = None) -> Dict[str, Any]:
    """Build a :func:`logging.config.dictConfig` dictionary.

    Unknown ``log_format`` names fall back to ``detailed``.
    """
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "level": level, "formatter": "default"},
    }
    if log_file is not None:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "default",
            "filename": str(log_file),
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMATS.get(log_format, LOG_FORMATS["detailed"]), "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "loggers": {name: {"level": logger_level} for name, logger_level in LOGGER_LEVELS.items()},
        "root": {"level": "DEBUG", "handlers": list(handlers)},
    }


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_to_file: Optional[bool] = None,
) -> None:
    """
    Configure the root logger. Calling it again replaces the previous handlers.

    Args:
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to UNITRACKER_LOG_LEVEL
        log_format: simple, detailed or json; defaults to UNITRACKER_LOG_FORMAT
        log_to_file: Also write to the log file; defaults to UNITRACKER_LOG_TO_FILE
    """
    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.log_format
    to_file = settings.log_to_file if log_to_file is None else log_to_file

    log_file = None
    if to_file:
        log_dir = Path(settings.log_file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

    logging.config.dictConfig(build_logging_config(level, fmt, log_file))
    logging.getLogger(__name__).info(f"Logging configured: level={level}, format={fmt}, file={log_file}")


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)
