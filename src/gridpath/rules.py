# src/gridpath/rules.py
"""
Ready-made move rules for the searches.

The searches themselves know nothing about walls. Callers pass either an
is_valid_move predicate (bfs) or a get_cost function (dijkstra, astar);
these factories cover the common "some cell values are walls" case.
"""

from __future__ import annotations

from typing import Any, Callable

from .coords import Coord, Grid

MovePredicate = Callable[[Coord, Coord, Grid], bool]
CostFn = Callable[[Coord, Coord, Grid], float]


def open_cells(*blocked: Any) -> MovePredicate:
    """Predicate allowing any move whose destination value is not in blocked."""
    blocked_values = frozenset(blocked)

    def is_valid_move(current: Coord, nxt: Coord, grid: Grid) -> bool:
        return grid[nxt[0]][nxt[1]] not in blocked_values

    return is_valid_move


def uniform_cost(*blocked: Any, cost: float = 1) -> CostFn:
    """
    Cost function charging `cost` per step, or inf when stepping onto a
    blocked cell value.
    """
    blocked_values = frozenset(blocked)

    def get_cost(current: Coord, nxt: Coord, grid: Grid) -> float:
        if grid[nxt[0]][nxt[1]] in blocked_values:
            return float("inf")
        return cost

    return get_cost
