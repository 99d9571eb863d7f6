# src/gridpath/astar.py
"""
A* search over a grid.

- f = g + h, where g is the accumulated get_cost and h the heuristic.
- Open set is a binary heap ordered by (f, h, insertion order); the lower
  h prefers nodes closer to the goal among equal f.
- Closed nodes are never re-opened, so the heuristic should be consistent
  (all heuristics in gridpath.heuristics are, for their movement model).
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from typing import Dict, List, Sequence, Set, Tuple

from .coords import (
    Coord,
    Direction,
    Grid,
    neighbors,
    reconstruct_path,
    require_directions,
    require_in_bounds,
)
from .heuristics import Heuristic
from .rules import CostFn

log = logging.getLogger(__name__)


def astar(
    grid: Grid,
    start: Coord,
    end: Coord,
    directions: Sequence[Direction],
    get_cost: CostFn,
    heuristic: Heuristic,
) -> List[Coord]:
    """
    Weighted shortest path from start to end guided by heuristic(node, end).

    Returns:
        Coordinates from start to end inclusive, or [] if no path exists.

    Raises:
        OutOfBoundsError: if start or end is outside the grid.
        ValueError: if get_cost returns a negative cost.
    """
    require_in_bounds(grid, start, "start")
    require_in_bounds(grid, end, "end")
    require_directions(directions)

    g_score: Dict[Coord, float] = {start: 0}
    came_from: Dict[Coord, Coord] = {}
    closed: Set[Coord] = set()
    counter = itertools.count()

    h0 = heuristic(start, end)
    open_heap: List[Tuple[float, float, int, Coord]] = [(h0, h0, next(counter), start)]

    while open_heap:
        _, _, _, current = heapq.heappop(open_heap)
        if current in closed:
            continue

        if current == end:
            log.debug("astar reached %s after closing %d cells", end, len(closed))
            return reconstruct_path(came_from, start, end)

        closed.add(current)
        g_current = g_score[current]

        for nxt in neighbors(grid, current, directions):
            if nxt in closed:
                continue
            cost = get_cost(current, nxt, grid)
            if cost < 0:
                raise ValueError(f"Negative edge cost {cost} from {current} to {nxt}")
            if cost == math.inf:
                continue

            tentative_g = g_current + cost
            if tentative_g < g_score.get(nxt, math.inf):
                g_score[nxt] = tentative_g
                came_from[nxt] = current
                h = heuristic(nxt, end)
                heapq.heappush(open_heap, (tentative_g + h, h, next(counter), nxt))

    log.debug("astar exhausted the open set after closing %d cells", len(closed))
    return []
