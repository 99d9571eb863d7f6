# tests/test_aoc_dates_scaffold.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from aoc.dates import current_year, extract_day_number
from aoc.scaffold import create_day


@pytest.mark.parametrize(
    "location,expected",
    [
        ("solutions/day-18/index.py", 18),
        ("/repo/src/solutions/day_07.py", 7),
        ("solutions.day_12", 12),
        ("solutions/template/template.py", 0),
        ("", 0),
    ],
)
def test_extract_day_number(location, expected) -> None:
    assert extract_day_number(location) == expected


def test_current_year() -> None:
    assert current_year() == date.today().year


def test_create_day_writes_template(tmp_path: Path) -> None:
    path = create_day(5, tmp_path)

    assert path == tmp_path / "day_05.py"
    text = path.read_text(encoding="utf-8")
    assert "DAY = 5" in text
    assert "def solve_part1" in text
    assert "def solve_part2" in text
    assert "Day 5" in text
    compile(text, str(path), "exec")


def test_create_day_never_overwrites(tmp_path: Path) -> None:
    existing = tmp_path / "day_09.py"
    existing.write_text("# my work\n", encoding="utf-8")

    assert create_day(9, tmp_path) == existing
    assert existing.read_text(encoding="utf-8") == "# my work\n"


@pytest.mark.parametrize("day", [0, 26])
def test_create_day_rejects_bad_day(tmp_path: Path, day: int) -> None:
    with pytest.raises(ValueError):
        create_day(day, tmp_path)


def test_template_times_both_parts(tmp_path: Path) -> None:
    text = create_day(6, tmp_path).read_text(encoding="utf-8")

    assert "from aoc.timing import timed" in text
    assert text.count("@timed") == 2
