# src/gridpath/__init__.py
"""
Generic pathfinding over 2D grids.

Provides:
- coordinate/grid primitives (coords): keys, bounds, direction tables
- bfs: unweighted shortest path with a move predicate
- dijkstra: weighted shortest path plus the full distance map
- astar: weighted shortest path guided by a heuristic
- heuristics: manhattan, euclidean, chebyshev, octile
- rules: open_cells / uniform_cost factories for wall-style grids

All coordinates are (row, col) tuples. Nothing here mutates the grid.
"""

from __future__ import annotations

from .coords import (
    ALL,
    CARDINAL,
    COORDINATE_CONVERTERS,
    DIAGONAL,
    GRID_DIRECTIONS,
    Coord,
    Direction,
    Grid,
    OutOfBoundsError,
    create_grid,
    is_in_bounds,
    key_to_tuple,
    tuple_to_key,
)
from .bfs import bfs
from .dijkstra import DijkstraResult, dijkstra
from .astar import astar
from .heuristics import HEURISTICS, Heuristic, chebyshev, euclidean, manhattan, octile
from .rules import open_cells, uniform_cost

__all__ = [
    "ALL",
    "CARDINAL",
    "COORDINATE_CONVERTERS",
    "DIAGONAL",
    "GRID_DIRECTIONS",
    "Coord",
    "Direction",
    "Grid",
    "OutOfBoundsError",
    "create_grid",
    "is_in_bounds",
    "key_to_tuple",
    "tuple_to_key",
    "bfs",
    "dijkstra",
    "DijkstraResult",
    "astar",
    "HEURISTICS",
    "Heuristic",
    "manhattan",
    "euclidean",
    "chebyshev",
    "octile",
    "open_cells",
    "uniform_cost",
]
