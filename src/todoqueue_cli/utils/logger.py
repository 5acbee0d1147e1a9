"""Application-wide logger writing to platformdirs user_log_dir.

Components ask for a child logger (``get_logger("session")``) so each record
names where it came from; all of them share the one rotating file handler
attached to the ``todoqueue_cli`` logger.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "todoqueue_cli"
_LOG_FILE = "todoqueue.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def find_file_handler(
    logger: logging.Logger, path: Path
) -> logging.handlers.RotatingFileHandler | None:
    """Return the rotating handler already writing to *path*, if any."""
    target = os.path.abspath(path)
    for handler in logger.handlers:
        if (
            isinstance(handler, logging.handlers.RotatingFileHandler)
            and handler.baseFilename == target
        ):
            return handler
    return None


def _build_app_logger() -> logging.Logger:
    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    path = log_file_path()
    if find_file_handler(logger, path) is not None:
        return logger
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or its child *name*.

    The file handler is created on the first call.
    """
    global _logger
    if _logger is None:
        _logger = _build_app_logger()
    return _logger if name is None else _logger.getChild(name)


def set_log_level(level: str) -> None:
    """Apply a level name such as ``"DEBUG"`` to every application logger."""
    get_logger().setLevel(level.upper())
