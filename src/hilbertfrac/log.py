"""Logger setup shared by the package and the CLI"""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "hilbertfrac"


def _level(log_level: str) -> int:
    return getattr(logging, log_level.upper(), logging.WARNING)


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    if logger.handlers:
        # Configured elsewhere; keep the existing handlers.
        return

    level = _level(log_level)
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the package logger.

    The package logger gets a single stream handler the first time this
    is called; its level comes from the LOG_LEVEL environment variable.
    Module loggers inherit level and handler from it.
    """
    _configure_logger(
        logging.getLogger(PACKAGE_LOGGER),
        os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL),
    )
    return logging.getLogger(name)


def set_log_level(log_level: Optional[str]) -> None:
    """Override the package log level; None leaves it unchanged"""
    if log_level is None:
        return
    logging.getLogger(PACKAGE_LOGGER).setLevel(_level(log_level))
