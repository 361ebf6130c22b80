"""
Operation decorators.

Wraps async operations with entry/exit logging and timing.
"""

import functools
import time
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from loguru import logger


T = TypeVar("T")


def log_operation(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """
    Decorator to log an async operation with timing.

    Logs:
    - Operation entry
    - Operation exit with duration
    - Exceptions, which are re-raised unchanged

    Usage:
        @log_operation
        async def ensure_tables(db, ...):
            ...

    Args:
        func: Async function or method to wrap

    Returns:
        Wrapped async function
    """
    op_logger = logger.bind(operation=func.__qualname__)

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        start_time = time.perf_counter()
        op_logger.debug(f"Starting {func.__qualname__}")

        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            duration = time.perf_counter() - start_time
            op_logger.opt(exception=True).error(
                f"Failed {func.__qualname__} after {duration:.3f}s: "
                f"{type(e).__name__}: {e}"
            )
            raise

        duration = time.perf_counter() - start_time
        op_logger.info(f"Completed {func.__qualname__} in {duration:.3f}s")
        return result

    return wrapper
