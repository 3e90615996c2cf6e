"""
utils/logger.py
---------------
Logging setup for the data-access layer.
Modules call `get_logger(__name__)`; the package logger ("questions") is
configured on first use from LOG_LEVEL and LOG_FILE.
"""

import logging
import sys

from config import LOG_FILE, LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_NAME = "questions"
_initialized = False


def _init_logging() -> None:
    """Attach handlers to the package logger once."""
    global _initialized
    if _initialized:
        return
    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)
    package_logger = logging.getLogger(_ROOT_NAME)
    package_logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    if LOG_FILE:
        file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module, e.g.
            ``repositories.base`` becomes ``questions.repositories.base``.
    """
    _init_logging()
    return logging.getLogger(f"{_ROOT_NAME}.{name}")
