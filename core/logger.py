"""Logging helpers for the meal recommendation service.

`get_logger` hands out loggers that share one stream handler and one rotating
file handler, so every module writes the same format to the console and to
`<LOG_DIR>/mealrec.log`.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from core.config import settings

LOG_DIR = settings.log_dir
os.makedirs(LOG_DIR, exist_ok=True)

LOG_FILE = os.path.join(LOG_DIR, "mealrec.log")

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
_file_handler.setFormatter(_formatter)


def get_logger(name: str = __name__, level: int = None) -> logging.Logger:
    """Return a logger wired to the shared stream and rotating file handlers.

    The level defaults to `LOG_LEVEL` from the environment. Handlers are only
    attached the first time a given name is requested.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level if level is not None else settings.log_level.upper())
        logger.addHandler(_stream_handler)
        logger.addHandler(_file_handler)
    return logger
