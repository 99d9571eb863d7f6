# src/solutions/__init__.py
"""
Per-day puzzle solutions.

Each day lives in solutions/day_NN.py and exposes:
- DAY, TEST_INPUT, optional TEST_FORMAT_OPTIONS
- format_input(raw, **options)
- solve_part1(data), solve_part2(data)

New days are created with `aoc new DAY`.
"""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from types import ModuleType
from typing import List

from aoc.dates import extract_day_number

_PACKAGE_DIR = Path(__file__).resolve().parent


def module_name(day: int) -> str:
    return f"{__name__}.day_{day:02d}"


def load_solution(day: int) -> ModuleType:
    """Import the solution module for `day`."""
    name = module_name(day)
    try:
        return importlib.import_module(name)
    except ModuleNotFoundError as exc:
        if exc.name != name:
            raise
        raise LookupError(f"No solution for day {day} (expected module {name})") from exc


def available_days() -> List[int]:
    days = [
        extract_day_number(info.name)
        for info in pkgutil.iter_modules([str(_PACKAGE_DIR)])
    ]
    return sorted(d for d in days if d > 0)
