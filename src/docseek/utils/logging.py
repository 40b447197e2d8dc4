"""Logging helpers for docseek."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "docseek"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "WARNING", fmt: Optional[str] = None, stream=None
) -> logging.Logger:
    """Configure the package logger.

    Log records go to stderr so that result lines on stdout stay clean
    when piped into other tools.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        fmt: Optional log format string
        stream: Optional stream (defaults to sys.stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

    # Replace handlers so repeated CLI invocations in one process don't stack them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger instance
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
