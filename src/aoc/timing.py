# src/aoc/timing.py
"""Wall-clock timing for solution functions."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Tuple, TypeVar

log = logging.getLogger(__name__)

R = TypeVar("R")


def measure(fn: Callable[[Any], R], arg: Any) -> Tuple[R, float]:
    """Call fn(arg) and return (result, elapsed milliseconds)."""
    start = time.perf_counter()
    result = fn(arg)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result, elapsed_ms


def timed(fn: Callable[[Any], R]) -> Callable[[Any], R]:
    """Decorator logging how long each call of a one-argument function takes."""

    @functools.wraps(fn)
    def wrapper(arg: Any) -> R:
        result, elapsed_ms = measure(fn, arg)
        log.info("Time taken: %.2fms", elapsed_ms)
        return result

    return wrapper
