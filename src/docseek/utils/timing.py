"""Timing utilities for logging the cost of pipeline stages."""

import functools
import time
from contextlib import contextmanager
from typing import Callable, Dict, Optional

from docseek.utils.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def TimingContext(operation: str, log_level: str = "debug"):
    """
    Context manager for timing a block of code.

    The yielded dict receives ``duration_ms`` once the block exits, so
    callers can report it after the fact.

    Example:
        with TimingContext("index_scan") as timing:
            rows = list(reader.records())
        print(timing["duration_ms"])

    Args:
        operation: Name of the operation being timed
        log_level: Logging level for the timing message
    """
    start_time = time.perf_counter()
    timing: Dict[str, float] = {}
    try:
        yield timing
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000
        timing["duration_ms"] = duration_ms

        log_fn = getattr(logger, log_level, logger.debug)
        log_fn(f"{operation} completed in {duration_ms:.3f}ms")


def timed(operation: Optional[str] = None, log_level: str = "debug"):
    """
    Decorator for timing function execution.

    Example:
        @timed("list_docsets")
        def list_docsets(path):
            ...

    Args:
        operation: Name of the operation (defaults to function name)
        log_level: Logging level for the timing message
    """

    def decorator(func: Callable) -> Callable:
        op_name = operation or f"{func.__module__}.{func.__qualname__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(op_name, log_level=log_level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
