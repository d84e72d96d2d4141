"""
Logging configuration module for the application.

Sets up console logging plus rotating text and JSON log files, with levels
and the log directory taken from the application settings.
"""

import json
import logging
import logging.config
import os
import sys
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from patchcanvas.core.config import get_settings

# LogRecord attributes that are not copied into the JSON payload as extras
_RESERVED_RECORD_KEYS = frozenset(
    [
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "id",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    ]
)


class StructuredJSONFormatter(logging.Formatter):
    """
    Formatter that outputs one JSON object per record.

    Carries timestamp, level, logger, message and source location, plus any
    values passed through ``extra=`` (for example ``file_path`` or
    ``hunk_count`` from the diff service).
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


@lru_cache()
def get_logging_config() -> Dict[str, Any]:
    """
    Create and return a cached logging configuration dictionary.

    Returns:
        Dict[str, Any]: The logging configuration dictionary
    """
    settings = get_settings()

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "patchcanvas.core.logging_config.StructuredJSONFormatter",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.LOG_LEVEL,
                "formatter": "default",
                "stream": sys.stdout,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": settings.LOG_LEVEL,
                "formatter": "default",
                "filename": os.path.join(settings.LOG_DIR, "patchcanvas.log"),
                "maxBytes": 10 * 1024 * 1024,  # 10 MB
                "backupCount": 10,
                "encoding": "utf-8",
            },
            "json_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": settings.LOG_LEVEL,
                "formatter": "json",
                "filename": os.path.join(settings.LOG_DIR, "patchcanvas.json.log"),
                "maxBytes": 10 * 1024 * 1024,  # 10 MB
                "backupCount": 10,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            "uvicorn": {
                "handlers": ["console", "file"],
                "level": settings.LOG_LEVEL,
                "propagate": False,
            },
            "fastapi": {
                "handlers": ["console", "file"],
                "level": settings.LOG_LEVEL,
                "propagate": False,
            },
            "patchcanvas": {
                "handlers": ["console", "file", "json_file"],
                "level": settings.LOG_LEVEL,
                "propagate": False,
            },
        },
        "root": {
            "level": settings.LOG_LEVEL,
            "handlers": ["console", "file"],
        },
    }


def setup_logging() -> None:
    """Configure the logging system from get_logging_config."""
    logging.config.dictConfig(get_logging_config())
    logger = logging.getLogger("patchcanvas")
    logger.debug("Logging system initialized")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``patchcanvas`` namespace.

    Args:
        name: The name for the logger, usually __name__ from the calling module

    Returns:
        logging.Logger: Configured logger instance
    """
    if name == "patchcanvas" or name.startswith("patchcanvas."):
        return logging.getLogger(name)
    return logging.getLogger(f"patchcanvas.{name}")
