"""Logging setup."""

import logging
from typing import Optional, Union

from ..config import Config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logger(level: Optional[Union[str, int]] = None, name: str = "tourism_helper") -> logging.Logger:
    """
    Configure the package logger once.

    Args:
        level: Log level name or number (defaults to Config.LOG_LEVEL)
        name: Logger to configure

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if isinstance(level, str) or level is None:
        level_name = (level or Config.LOG_LEVEL).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
