"""gutimer's log file.

The status line owns stdout, so everything gutimer logs goes to a rotating
file under ``user_log_dir("gutimer")`` and nothing reaches the terminal.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "gutimer"
LOG_FILE_NAME = "gutimer.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    return Path(user_log_dir(LOGGER_NAME)) / LOG_FILE_NAME


def _file_handler(path: Path) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Return the gutimer logger, attaching the log file on first use.

    Only another ``RotatingFileHandler`` counts as already configured; handlers
    added by test harnesses or embedding applications are left alongside it.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        logger.addHandler(_file_handler(log_file_path()))
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    _logger = logger
    return _logger


def set_log_level(level: str) -> None:
    """Apply a configured level name such as ``"INFO"`` to the log file."""
    get_logger().setLevel(logging.getLevelName(level.upper()))
