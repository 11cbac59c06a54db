"""
Logging setup for the request logger.

Lines go to stdout prefixed with a "2006/01/02 15:04:05" style timestamp.
"""

from __future__ import annotations

import logging
import sys

from requestlog.config import Settings, settings as default_settings
from requestlog.middleware import LOGGER_NAME

LOG_FORMAT = "%(asctime)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def configure_logging(settings: Settings = default_settings) -> logging.Logger:
    """
    Configure and return the request logger. Safe to call more than once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    if not any(getattr(h, "_requestlog_stdout", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._requestlog_stdout = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.propagate = False

    return logger
