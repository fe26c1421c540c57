"""Starting point for a new puzzle day: counts the lines of its input."""

from __future__ import annotations

from collections.abc import Iterable

from advent2025.day01 import _run_day

DAY = "NN"


def part1(lines: Iterable[str]) -> int:
    """Return the number of input lines."""
    return sum(1 for _ in lines)


def main(argv: list[str] | None = None) -> int:
    return _run_day(DAY, (part1,), argv, timed=True)