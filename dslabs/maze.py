"""Shortest path through a text maze found by breadth-first search."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from dslabs.fifo_queue import Queue

WALL = "#"
START = "X"
FINISH = "Y"
PATH = "x"
DEFAULT_INPUT = "vhod.txt"

_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))

Cell = tuple[int, int]


def _locate(grid: list[list[str]], mark: str) -> Optional[Cell]:
    found = None
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char == mark:
                found = (row, col)
    return found


def _is_open(grid: list[list[str]], cell: Cell) -> bool:
    row, col = cell
    return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] != WALL


def solve_maze(lines: Iterable[str]) -> Optional[list[str]]:
    """Mark the shortest path from 'X' to 'Y' with 'x'; return None if unreachable."""
    grid = [list(line.rstrip("\r\n")) for line in lines]
    start = _locate(grid, START)
    finish = _locate(grid, FINISH)
    if start is None:
        raise ValueError("maze has no start cell")
    if finish is None:
        raise ValueError("maze has no finish cell")

    distance = {start: 1}
    queue = Queue()
    queue.insert(start)
    while not queue.is_empty():
        row, col = queue.remove()
        for d_row, d_col in _STEPS:
            neighbour = (row + d_row, col + d_col)
            if neighbour not in distance and _is_open(grid, neighbour):
                distance[neighbour] = distance[(row, col)] + 1
                queue.insert(neighbour)

    if finish not in distance:
        return None

    current = finish
    while distance[current] - 1 != distance[start]:
        row, col = current
        for d_row, d_col in _STEPS:
            previous = (row + d_row, col + d_col)
            if distance.get(previous) == distance[current] - 1:
                grid[previous[0]][previous[1]] = PATH
                current = previous
                break
    return ["".join(line) for line in grid]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve the maze in the given file (default ``vhod.txt``) and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_INPUT
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
        solved = solve_maze(lines)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if solved is None:
        print("IMPOSSIBLE")
    else:
        print("\n".join(solved))
    return 0


if __name__ == "__main__":
    sys.exit(main())