"""Utility helpers: configuration, logging and timing."""

from docseek.utils.config import Config, get_config, load_config, set_config
from docseek.utils.logging import get_logger, setup_logging
from docseek.utils.timing import TimingContext, timed

__all__ = [
    "Config",
    "get_config",
    "load_config",
    "set_config",
    "get_logger",
    "setup_logging",
    "TimingContext",
    "timed",
]
