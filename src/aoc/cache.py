# src/aoc/cache.py
"""
On-disk cache of puzzle inputs, one text file per (year, day).

Files are named {year}-{day}.txt inside the configured cache directory.
Cache writes are best effort: failures are logged, never raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

log = logging.getLogger(__name__)


def cache_path(year: int, day: int, cache_dir: Path) -> Path:
    return Path(cache_dir) / f"{year}-{day}.txt"


def get_cached_input(year: int, day: int, cache_dir: Path) -> Optional[str]:
    """Return cached input text, or None if absent or unreadable."""
    path = cache_path(year, day, cache_dir)
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        return None


def cache_input(year: int, day: int, text: str, cache_dir: Path) -> None:
    """Write input text to the cache, creating the directory if needed."""
    path = cache_path(year, day, cache_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        log.warning("Failed to cache input for day %d: %r", day, exc)
