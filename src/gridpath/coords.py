# src/gridpath/coords.py
"""
Coordinate and grid primitives shared by the search algorithms.

Convention (public contract):
- A coordinate is a (row, col) tuple of ints.
- A direction is a (d_row, d_col) tuple of ints.
- A grid is addressed as grid[row][col] and is assumed rectangular.

Tuples are hashable, so the searches key their bookkeeping maps by the
coordinate itself. The string-key helpers (tuple_to_key / key_to_tuple)
are kept for callers that need a textual key, e.g. answers like "x,y".
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence, Tuple, TypeVar

T = TypeVar("T")

Coord = Tuple[int, int]
Direction = Tuple[int, int]
Grid = Sequence[Sequence[T]]

KEY_DELIMITER = ","


class OutOfBoundsError(ValueError):
    """Raised when a search is asked to start or end outside the grid."""


# ---------------------------------------------------------------------------
# Direction tables
# ---------------------------------------------------------------------------

CARDINAL: Tuple[Direction, ...] = (
    (0, 1),  # right
    (1, 0),  # down
    (0, -1),  # left
    (-1, 0),  # up
)

DIAGONAL: Tuple[Direction, ...] = (
    (1, 1),  # down-right
    (1, -1),  # down-left
    (-1, 1),  # up-right
    (-1, -1),  # up-left
)

ALL: Tuple[Direction, ...] = CARDINAL + DIAGONAL

GRID_DIRECTIONS: Dict[str, Tuple[Direction, ...]] = {
    "cardinal": CARDINAL,
    "diagonal": DIAGONAL,
    "all": ALL,
}


# ---------------------------------------------------------------------------
# String keys
# ---------------------------------------------------------------------------


def tuple_to_key(*values: Any) -> str:
    """Join an arbitrary-arity tuple into a canonical "a,b,..." key."""
    return KEY_DELIMITER.join(str(v) for v in values)


def key_to_tuple(key: str, converters: Sequence[Callable[[str], Any]]) -> Tuple[Any, ...]:
    """
    Split a key produced by tuple_to_key and decode each field positionally.

    Raises:
        TypeError: if the number of fields does not match the converters.
    """
    values = key.split(KEY_DELIMITER)
    if len(values) != len(converters):
        raise TypeError(
            f"Mismatch between number of values ({len(values)}) "
            f"and converters ({len(converters)})"
        )
    return tuple(convert(value) for convert, value in zip(converters, values))


COORDINATE_CONVERTERS: Dict[str, Tuple[Callable[[str], Any], ...]] = {
    "INT": (int, int),
}


# ---------------------------------------------------------------------------
# Grid helpers
# ---------------------------------------------------------------------------


def create_grid(text: str) -> List[List[str]]:
    """Build a grid of characters, one row per line of text."""
    return [list(line) for line in text.splitlines()]


def is_in_bounds(grid: Grid, row: int, col: int) -> bool:
    """
    True iff 0 <= row < len(grid) and 0 <= col < len(grid[0]).

    Width is always taken from row 0; ragged grids are not supported.
    """
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


def require_in_bounds(grid: Grid, coord: Coord, label: str) -> None:
    row, col = coord
    if not is_in_bounds(grid, row, col):
        raise OutOfBoundsError(f"{label} {coord} is outside the grid")


def require_directions(directions: Sequence[Direction]) -> None:
    if not directions:
        raise ValueError("At least one direction vector is required")


def neighbors(grid: Grid, coord: Coord, directions: Sequence[Direction]) -> List[Coord]:
    """In-bounds neighbors of coord, in direction-table order."""
    row, col = coord
    out: List[Coord] = []
    for d_row, d_col in directions:
        nxt = (row + d_row, col + d_col)
        if is_in_bounds(grid, nxt[0], nxt[1]):
            out.append(nxt)
    return out


def reconstruct_path(
    came_from: Dict[Coord, Coord],
    start: Coord,
    end: Coord,
) -> List[Coord]:
    """
    Walk predecessor links from end back to start.

    If the chain breaks before reaching start, the partial chain is still
    returned with start prepended, so an unreached end yields [start, end].
    """
    path: List[Coord] = [end]
    current = end
    while current != start and current in came_from:
        current = came_from[current]
        path.append(current)
    if path[-1] != start:
        path.append(start)
    path.reverse()
    return path
