"""Logging setup for applications embedding undo_history.

Library modules only create named loggers below :data:`config.LOGGER_NAME`;
handlers are attached here, on request, by the hosting application.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from . import config


def configure_logging(
    log_path: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Attach file and stdout handlers to the ``undo_history`` logger.

    Meant for host applications that want the history messages without
    wiring handlers themselves. *log_path* defaults to
    :data:`config.LOG_FILE_NAME` in the working directory. Returns the
    logger untouched when it already has handlers.
    """

    logger = logging.getLogger(config.LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(config.LOG_FORMAT)

    if log_path is None:
        log_path = Path.cwd() / config.LOG_FILE_NAME
    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)
    logger.propagate = False

    return logger
