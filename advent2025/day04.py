"""Day 4: finding paper rolls that a forklift can reach."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from advent2025.day01 import _run_day

DAY = "04"
ROLL = "@"
EMPTY = "."
REMOVED = "x"
MAX_NEIGHBOURS = 3

_NEIGHBOURS = (
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
    (-1, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
)

Grid = list[list[str]]


def parse_grid(lines: Iterable[str]) -> Grid:
    """Turn text lines into a mutable grid of single characters."""
    return [list(line) for line in lines]


def can_access(grid: Grid, row: int, col: int) -> bool:
    """Return whether the cell holds a roll with at most three neighbouring rolls."""
    if grid[row][col] in (EMPTY, REMOVED):
        return False
    height, width = len(grid), len(grid[0])
    neighbours = 0
    for d_row, d_col in _NEIGHBOURS:
        r, c = row + d_row, col + d_col
        if not (0 <= r < height and 0 <= c < width):
            continue
        if grid[r][c] == ROLL:
            neighbours += 1
            if neighbours > MAX_NEIGHBOURS:
                return False
    return True


def _accessible(grid: Grid) -> Iterator[tuple[int, int]]:
    for r, row in enumerate(grid):
        for c in range(len(row)):
            if can_access(grid, r, c):
                yield r, c


def can_remove(grid: Grid) -> bool:
    """Return whether any cell of the grid is accessible."""
    return next(_accessible(grid), None) is not None


def part1(lines: Iterable[str]) -> int:
    """Count the rolls that are accessible in the initial grid."""
    grid = parse_grid(lines)
    return sum(1 for _ in _accessible(grid))


def part2(lines: Iterable[str]) -> int:
    """Repeatedly remove all accessible rolls and count how many go in total."""
    grid = parse_grid(lines)
    removed = 0
    while can_remove(grid):
        cells = list(_accessible(grid))
        removed += len(cells)
        for r, c in cells:
            grid[r][c] = REMOVED
    return removed


def main(argv: list[str] | None = None) -> int:
    return _run_day(DAY, (part1, part2), argv)