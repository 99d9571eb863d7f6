# src/aoc/dates.py

from __future__ import annotations

import re
from datetime import date
from pathlib import Path
from typing import Union

_DAY_SEGMENT_RE = re.compile(r"^day[-_](\d+)")


def extract_day_number(location: Union[str, Path]) -> int:
    """
    Day number from a file path or dotted module name.

    Accepts "solutions/day-18/index.py", ".../day_18.py" or "solutions.day_18".
    Returns 0 if no day segment is found.
    """
    text = str(location).replace("\\", "/")
    for segment in re.split(r"[/.]", text):
        match = _DAY_SEGMENT_RE.match(segment)
        if match:
            return int(match.group(1))
    return 0


def current_year() -> int:
    return date.today().year
