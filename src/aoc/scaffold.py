# src/aoc/scaffold.py
"""
Create a new day's solution module from a template.

Safe to re-run: an existing solution file is never overwritten.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

log = logging.getLogger(__name__)

SOLUTIONS_DIR = Path(__file__).resolve().parents[1] / "solutions"

TEMPLATE = '''# src/solutions/day_{day:02d}.py
"""
Solution for Advent of Code - Day {day}
https://adventofcode.com/2024/day/{day}
"""

from __future__ import annotations

from typing import List

from aoc.errors import solution_wrapper
from aoc.timing import timed

DAY = {day}

TEST_INPUT = ""


@solution_wrapper(DAY, 1, "formatting input")
def format_input(raw: str) -> List[str]:
    return raw.strip().splitlines()


@solution_wrapper(DAY, 1, "solving part 1")
@timed
def solve_part1(data: List[str]) -> int:
    return 0


@solution_wrapper(DAY, 2, "solving part 2")
@timed
def solve_part2(data: List[str]) -> int:
    return 0
'''


def solution_filename(day: int) -> str:
    return f"day_{day:02d}.py"


def create_day(day: int, target_dir: Optional[Path] = None) -> Path:
    """Write the template for `day` and return its path."""
    if not 1 <= day <= 25:
        raise ValueError(f"day must be between 1 and 25, got {day}")

    target_dir = Path(target_dir) if target_dir is not None else SOLUTIONS_DIR
    path = target_dir / solution_filename(day)

    if path.exists():
        log.info("Solution for day %d already exists at %s", day, path)
        return path

    target_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(TEMPLATE.format(day=day), encoding="utf-8")
    log.info("Created solution template for day %d at %s", day, path)
    return path
