"""Execution-time instrumentation."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from typing import ParamSpec, TypeVar

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def timed(name: str | None = None) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorate a function so each call logs its duration at DEBUG.

    Args:
        name: Label used in the log line; defaults to the function's
            qualified name.

    Example:
        ``"ResultManager.get_user_stats executed in 3ms"``
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        label = name or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000
                logger.debug("%s executed in %dms", label, round(elapsed_ms))

        return wrapper

    return decorator
