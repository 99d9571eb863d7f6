# src/gridpath/bfs.py
"""
Breadth-first search over a grid.

- Unweighted shortest path (fewest steps).
- Obstacle handling is entirely up to the caller's is_valid_move predicate;
  the search itself only enforces grid bounds.
- Ties between equally short paths follow the order of `directions`.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Sequence, Set

from .coords import (
    Coord,
    Direction,
    Grid,
    neighbors,
    reconstruct_path,
    require_directions,
    require_in_bounds,
)
from .rules import MovePredicate

log = logging.getLogger(__name__)


def bfs(
    grid: Grid,
    start: Coord,
    end: Coord,
    directions: Sequence[Direction],
    is_valid_move: MovePredicate,
) -> List[Coord]:
    """
    Find the shortest path from start to end.

    Args:
        grid: rectangular grid addressed as grid[row][col]
        start, end: (row, col) coordinates
        directions: ordered (d_row, d_col) step vectors
        is_valid_move: is_valid_move(current, next, grid) -> bool

    Returns:
        Coordinates from start to end inclusive, or [] if end is unreachable.

    Raises:
        OutOfBoundsError: if start or end is outside the grid.
    """
    require_in_bounds(grid, start, "start")
    require_in_bounds(grid, end, "end")
    require_directions(directions)

    queue: Deque[Coord] = deque([start])
    visited: Set[Coord] = {start}
    came_from: Dict[Coord, Coord] = {}

    while queue:
        current = queue.popleft()
        if current == end:
            log.debug("bfs reached %s after visiting %d cells", end, len(visited))
            return reconstruct_path(came_from, start, end)

        for nxt in neighbors(grid, current, directions):
            if nxt in visited:
                continue
            if not is_valid_move(current, nxt, grid):
                continue
            visited.add(nxt)
            came_from[nxt] = current
            queue.append(nxt)

    log.debug("bfs exhausted %d cells without reaching %s", len(visited), end)
    return []
