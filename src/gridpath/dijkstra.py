# src/gridpath/dijkstra.py
"""
Dijkstra's algorithm over a grid with a pluggable edge cost.

- Binary heap with lazy deletion: stale heap entries are skipped on pop.
- Entries are ordered by (distance, insertion order), so equal distances
  pop first-in-first-out.
- get_cost(current, next, grid) returning inf marks the move impassable.
- Stops as soon as end is popped; the distance map still covers every cell
  (cells never reached keep inf).
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass
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
from .rules import CostFn

log = logging.getLogger(__name__)


@dataclass
class DijkstraResult:
    """Distances from start to every cell, plus the path to end."""

    distances: Dict[Coord, float]
    path: List[Coord]

    def distance_to(self, coord: Coord) -> float:
        return self.distances.get(coord, math.inf)

    def reachable(self, coord: Coord) -> bool:
        """
        Use this (not the path) to test reachability: an unreachable end
        still comes back with a best-effort path of [start, end].
        """
        return self.distance_to(coord) < math.inf


def dijkstra(
    grid: Grid,
    start: Coord,
    end: Coord,
    directions: Sequence[Direction],
    get_cost: CostFn,
) -> DijkstraResult:
    """
    Shortest weighted path from start to end.

    Raises:
        OutOfBoundsError: if start or end is outside the grid.
        ValueError: if get_cost returns a negative cost.
    """
    require_in_bounds(grid, start, "start")
    require_in_bounds(grid, end, "end")
    require_directions(directions)

    width = len(grid[0])
    distances: Dict[Coord, float] = {
        (row, col): math.inf for row in range(len(grid)) for col in range(width)
    }
    distances[start] = 0

    came_from: Dict[Coord, Coord] = {}
    visited: Set[Coord] = set()
    counter = itertools.count()
    heap: List[Tuple[float, int, Coord]] = [(0, next(counter), start)]

    while heap:
        dist, _, current = heapq.heappop(heap)
        if current in visited or dist > distances[current]:
            continue
        visited.add(current)

        if current == end:
            break

        for nxt in neighbors(grid, current, directions):
            if nxt in visited:
                continue
            cost = get_cost(current, nxt, grid)
            if cost < 0:
                raise ValueError(f"Negative edge cost {cost} from {current} to {nxt}")
            if cost == math.inf:
                continue

            candidate = dist + cost
            if candidate < distances[nxt]:
                distances[nxt] = candidate
                came_from[nxt] = current
                heapq.heappush(heap, (candidate, next(counter), nxt))

    log.debug(
        "dijkstra settled %d of %d cells, distance to %s = %s",
        len(visited),
        len(distances),
        end,
        distances[end],
    )
    return DijkstraResult(
        distances=distances,
        path=reconstruct_path(came_from, start, end),
    )
