# tests/test_aoc_errors.py

from __future__ import annotations

import pytest

from aoc.errors import AoCError, solution_wrapper


def test_aoc_error_message_includes_day_and_part() -> None:
    cause = KeyError("x")
    err = AoCError("boom", 5, 2, cause)

    assert str(err) == "Day 5, Part 2: boom"
    assert err.day == 5
    assert err.part == 2
    assert err.original_error is cause


def test_solution_wrapper_passes_results_through() -> None:
    @solution_wrapper(3, 1, "solving part 1")
    def solve(data):
        return sum(data)

    assert solve([1, 2, 3]) == 6
    assert solve.__name__ == "solve"


def test_solution_wrapper_converts_failures() -> None:
    @solution_wrapper(3, 2, "solving part 2")
    def solve(data):
        return data["missing"]

    with pytest.raises(AoCError) as excinfo:
        solve({})

    err = excinfo.value
    assert str(err).startswith("Day 3, Part 2: Error solving part 2: ")
    assert isinstance(err.original_error, KeyError)
    assert err.__cause__ is err.original_error


def test_solution_wrapper_without_description() -> None:
    @solution_wrapper(1, 1)
    def solve(data):
        raise ValueError("bad")

    with pytest.raises(AoCError, match=r"Day 1, Part 1: Error bad"):
        solve(None)


def test_solution_wrapper_keeps_inner_aoc_error() -> None:
    inner = AoCError("inner", 9, 1)

    @solution_wrapper(9, 2, "outer")
    def solve(data):
        raise inner

    with pytest.raises(AoCError) as excinfo:
        solve(None)
    assert excinfo.value is inner
