"""Logging configuration helpers."""

import logging

LOGGER_NAME = "nutrition_analytics"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the analytics logger once and return it.

    ``level`` may be a number or a level name such as ``"DEBUG"``; it is
    applied on every call, the handler only on the first.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
