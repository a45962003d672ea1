"""File logging for the Textual app."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from lunchtray.config import LOG_LEVEL, LOG_PATH

LOGGER_NAME = "lunchtray"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(path: str | Path = LOG_PATH, level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a file handler to the app logger, once."""
    logger = logging.getLogger(LOGGER_NAME)
    try:
        logger.setLevel(level.upper())
    except ValueError:
        logger.setLevel(logging.DEBUG)
    log_file = Path(path)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_file):
            return logger

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # Logging must never interfere with app flow.
        return logger

    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    return logger
