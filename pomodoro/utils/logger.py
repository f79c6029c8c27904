"""Logging for the ``pomodoro`` package: a rotating file in the user log dir, plus an optional console stream."""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomodoro"
_LOG_FILE = "pomodoro.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def get_logger(console: bool = False) -> logging.Logger:
    """Return the ``pomodoro`` logger with its file handler attached.

    Modules log through ``logging.getLogger(__name__)`` and reach these
    handlers by propagation. Handlers installed by someone else (test
    capture, embedding apps) are left alone; only our own file and console
    handlers are checked for before adding them.
    """
    global _logger
    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    path = log_file_path()
    if not _has_file_handler(logger, path):
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(file_handler)

    if console and not _has_console_handler(logger):
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(logging.INFO)
        stream_handler.setFormatter(logging.Formatter("%(asctime)s %(message)s", datefmt="%H:%M:%S"))
        logger.addHandler(stream_handler)

    _logger = logger
    return _logger


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target = str(path.resolve())
    return any(
        isinstance(handler, logging.handlers.RotatingFileHandler)
        and str(Path(handler.baseFilename).resolve()) == target
        for handler in logger.handlers
    )


def _has_console_handler(logger: logging.Logger) -> bool:
    return any(
        type(handler) is logging.StreamHandler and handler.stream is sys.stderr
        for handler in logger.handlers
    )
