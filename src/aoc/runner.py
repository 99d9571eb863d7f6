# src/aoc/runner.py
"""
Generic runner for one day's solution.

run_solution():
  1. obtains raw input (test input if given, otherwise fetch(year, day))
  2. formats it once
  3. solves part 1 and part 2, timing each
  4. optionally checks each answer against the server

Errors are not swallowed here; the CLI decides how fatal they are.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .client import AnswerResult
from .timing import measure

log = logging.getLogger(__name__)

Answer = Union[int, str]
FetchFn = Callable[[int, int], str]
CheckFn = Callable[[int, int, Answer, int], AnswerResult]


@dataclass
class PartResult:
    part: int
    answer: Answer
    elapsed_ms: float
    check: Optional[AnswerResult] = None


@dataclass
class SolutionReport:
    year: int
    day: int
    parts: List[PartResult] = field(default_factory=list)

    def answers(self) -> List[Answer]:
        return [p.answer for p in self.parts]


def run_solution(
    year: int,
    day: int,
    format_input: Callable[..., Any],
    solve_part1: Callable[[Any], Answer],
    solve_part2: Callable[[Any], Answer],
    test_input: Optional[str] = None,
    *,
    fetch: Optional[FetchFn] = None,
    format_options: Optional[Mapping[str, Any]] = None,
    check: Optional[CheckFn] = None,
) -> SolutionReport:
    """
    Run both parts of a day's solution and collect the answers.

    Args:
        test_input: raw input to use instead of fetching
        fetch: fetch(year, day) -> raw input; required without test_input
        format_options: extra keyword arguments for format_input
        check: check(year, day, answer, level) -> AnswerResult
    """
    if test_input is not None:
        raw_input = test_input
    elif fetch is not None:
        raw_input = fetch(year, day)
    else:
        raise ValueError("Either test_input or fetch must be provided")

    options: Dict[str, Any] = dict(format_options or {})
    formatted = format_input(raw_input, **options)

    report = SolutionReport(year=year, day=day)
    for part, solve in ((1, solve_part1), (2, solve_part2)):
        answer, elapsed_ms = measure(solve, formatted)
        log.info("Solution %d: %s (%.2fms)", part, answer, elapsed_ms)

        result = PartResult(part=part, answer=answer, elapsed_ms=elapsed_ms)
        if check is not None:
            result.check = check(year, day, answer, part)
        report.parts.append(result)

    return report
