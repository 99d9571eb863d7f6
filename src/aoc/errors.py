# src/aoc/errors.py
"""
Error types for puzzle solutions and the puzzle-server client.

- AoCError: a solution (or its input formatting) failed; carries day/part.
- solution_wrapper: decorator converting any failure into an AoCError.
- AoCClientError and subclasses: talking to the puzzle server failed.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


class AoCError(Exception):
    """A puzzle solution failed for a given day and part."""

    def __init__(
        self,
        message: str,
        day: int,
        part: int,
        original_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(f"Day {day}, Part {part}: {message}")
        self.message = message
        self.day = day
        self.part = part
        self.original_error = original_error


class AoCClientError(RuntimeError):
    """Base class for puzzle-server failures."""


class MissingSessionError(AoCClientError):
    """No session token is available for an authenticated request."""


class InputFetchError(AoCClientError):
    """Downloading puzzle input failed."""


class AnswerSubmitError(AoCClientError):
    """Submitting an answer failed."""


def solution_wrapper(
    day: int,
    part: int,
    description: Optional[str] = None,
) -> Callable[[F], F]:
    """
    Wrap a solution function so every failure surfaces as an AoCError.

    Usage:

        @solution_wrapper(18, 1, "solving part 1")
        def solve_part1(data): ...

    An AoCError raised inside passes through unchanged.
    """
    prefix = f"{description}: " if description else ""

    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return fn(*args, **kwargs)
            except AoCError:
                raise
            except Exception as exc:
                raise AoCError(f"Error {prefix}{exc}", day, part, exc) from exc

        return wrapper  # type: ignore[return-value]

    return decorator
