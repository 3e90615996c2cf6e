"""
Logging setup tests.
"""

import logging

from utils.logger import get_logger


def test_loggers_live_under_package_namespace():
    logger = get_logger("repositories.base")
    assert logger.name == "questions.repositories.base"


def test_handlers_attached_once():
    get_logger("a")
    get_logger("b")
    package_logger = logging.getLogger("questions")
    stream_handlers = [
        h for h in package_logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    assert len(stream_handlers) == 1
