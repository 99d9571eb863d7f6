# src/gridpath/heuristics.py
"""
Distance heuristics for A*.

Each one is admissible for a particular movement model:
- manhattan: 4-directional moves, unit cost
- euclidean: any-direction moves with Euclidean cost
- chebyshev: 8-directional moves, diagonal cost == cardinal cost
- octile: 8-directional moves, diagonal cost == sqrt(2) * cardinal cost
"""

from __future__ import annotations

import math
from typing import Callable, Dict

from .coords import Coord

Heuristic = Callable[[Coord, Coord], float]

_SQRT2_MINUS_ONE = math.sqrt(2) - 1


def manhattan(a: Coord, b: Coord) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Coord, b: Coord) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def chebyshev(a: Coord, b: Coord) -> float:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def octile(a: Coord, b: Coord) -> float:
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return max(dx, dy) + _SQRT2_MINUS_ONE * min(dx, dy)


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "chebyshev": chebyshev,
    "octile": octile,
}
