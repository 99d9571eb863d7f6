# src/aoc/__init__.py
"""
Support layer for Advent of Code puzzle solutions.

Provides:
- AocConfig / load_config: YAML-backed settings
- configure_logging: root logging setup for entrypoints
- AoCError / solution_wrapper: per-day, per-part error wrapping
- get_input / check_answer: puzzle-server client with on-disk input cache
- run_solution: generic runner for a day's two parts
- create_day: scaffold a new day's module
"""

from __future__ import annotations

from .config import AocConfig, load_config
from .logging_config import configure_logging
from .errors import (
    AnswerSubmitError,
    AoCClientError,
    AoCError,
    InputFetchError,
    MissingSessionError,
    solution_wrapper,
)
from .cache import cache_input, get_cached_input
from .client import AnswerResult, check_answer, get_input, parse_answer_response
from .dates import current_year, extract_day_number
from .timing import measure, timed
from .runner import PartResult, SolutionReport, run_solution
from .scaffold import create_day

__all__ = [
    "AocConfig",
    "load_config",
    "configure_logging",
    "AnswerSubmitError",
    "AoCClientError",
    "AoCError",
    "InputFetchError",
    "MissingSessionError",
    "solution_wrapper",
    "cache_input",
    "get_cached_input",
    "AnswerResult",
    "check_answer",
    "get_input",
    "parse_answer_response",
    "current_year",
    "extract_day_number",
    "measure",
    "timed",
    "PartResult",
    "SolutionReport",
    "run_solution",
    "create_day",
]
