# src/solutions/day_18.py
"""
Solution for Advent of Code 2024 - Day 18 (RAM Run)
https://adventofcode.com/2024/day/18

Bytes fall onto a square memory grid at the listed x,y positions and
corrupt those cells. Input "x,y" becomes grid coordinate (row=y, col=x).

- Part 1: fewest steps from the top-left to the bottom-right corner after
  the first `first` bytes have fallen.
- Part 2: the first byte whose fall cuts every path, as "x,y".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from aoc.errors import AoCError, solution_wrapper
from aoc.timing import timed
from gridpath import CARDINAL, dijkstra, tuple_to_key, uniform_cost

DAY = 18

CORRUPTED = "#"
SAFE = "."

TEST_INPUT = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0"""

TEST_FORMAT_OPTIONS = {"size": 7, "first": 12}

_step_cost = uniform_cost(CORRUPTED)


@dataclass
class MemorySpace:
    falling: List[Tuple[int, int]]  # (x, y) in input order
    size: int = 71
    first: int = 1024

    @property
    def start(self) -> Tuple[int, int]:
        return (0, 0)

    @property
    def exit(self) -> Tuple[int, int]:
        return (self.size - 1, self.size - 1)

    def grid_after(self, count: int) -> List[List[str]]:
        grid = [[SAFE] * self.size for _ in range(self.size)]
        for x, y in self.falling[:count]:
            grid[y][x] = CORRUPTED
        return grid

    def steps_to_exit(self, count: int) -> float:
        result = dijkstra(self.grid_after(count), self.start, self.exit, CARDINAL, _step_cost)
        return result.distance_to(self.exit)


@solution_wrapper(DAY, 1, "formatting input")
def format_input(raw: str, size: int = 71, first: int = 1024) -> MemorySpace:
    falling = []
    for line in raw.strip().splitlines():
        x, y = (int(v) for v in line.split(","))
        falling.append((x, y))
    return MemorySpace(falling=falling, size=size, first=first)


@solution_wrapper(DAY, 1, "solving part 1")
@timed
def solve_part1(space: MemorySpace) -> int:
    steps = space.steps_to_exit(space.first)
    if steps == float("inf"):
        raise AoCError("exit is unreachable", DAY, 1)
    return int(steps)


@solution_wrapper(DAY, 2, "solving part 2")
@timed
def solve_part2(space: MemorySpace) -> str:
    # Binary search for the smallest byte count that blocks the exit.
    left, right = 0, len(space.falling) - 1
    blocking = -1
    while left <= right:
        mid = (left + right) // 2
        if space.steps_to_exit(mid + 1) == float("inf"):
            blocking = mid
            right = mid - 1
        else:
            left = mid + 1

    if blocking < 0:
        raise AoCError("no byte blocks the exit", DAY, 2)
    return tuple_to_key(*space.falling[blocking])
