"""Day 7: following tachyon beams through a manifold of splitters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from advent2025.day01 import _run_day

DAY = "07"
SOURCE = "S"
SPLITTER = "^"
EMPTY = "."
BEAM = "|"


def _start_column(lines: Sequence[str]) -> int:
    start = 0
    for line in lines:
        if SOURCE in line:
            start = line.index(SOURCE)
    return start


def _split_targets(row: Sequence[str], col: int) -> tuple[int, int]:
    if col == 0:
        raise IndexError(f"splitter at column {col} has no left neighbour")
    if col + 1 >= len(row):
        raise IndexError(f"splitter at column {col} has no right neighbour")
    return col - 1, col + 1


def count_timelines(grid: Sequence[Sequence[str]], start: int) -> int:
    """Count the distinct paths a single particle can take from row 1 to the bottom.

    An empty cell lets the particle fall straight down, a splitter sends it to
    the left and right neighbouring columns, and any other cell ends the path.
    """
    if not grid:
        raise IndexError("grid has no rows")
    paths: Counter[int] = Counter({start: 1})
    for row in grid[1:]:
        below: Counter[int] = Counter()
        for col, count in paths.items():
            if col >= len(row):
                raise IndexError(f"column {col} is outside the grid")
            cell = row[col]
            if cell == EMPTY:
                below[col] += count
            elif cell == SPLITTER:
                left, right = _split_targets(row, col)
                below[left] += count
                below[right] += count
        paths = below
    return sum(paths.values())


def part1(lines: Iterable[str]) -> int:
    """Count how many times a beam is split on its way down the manifold."""
    rows = list(lines)
    grid = [list(line) for line in rows]
    beams = {line.index(SOURCE) for line in rows if SOURCE in line}

    splits = 0
    for row in grid[1:]:
        next_beams: set[int] = set()
        for col, cell in enumerate(row):
            if col not in beams:
                continue
            if cell == SPLITTER:
                left, right = _split_targets(row, col)
                row[left] = BEAM
                row[right] = BEAM
                next_beams.update((left, right))
                splits += 1
                continue
            row[col] = BEAM
            next_beams.add(col)
        beams = next_beams
    return splits


def part2(lines: Iterable[str]) -> int:
    """Count the timelines a single particle ends up in."""
    rows = list(lines)
    return count_timelines(rows, _start_column(rows))


def main(argv: list[str] | None = None) -> int:
    return _run_day(DAY, (part1, part2), argv)