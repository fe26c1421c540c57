"""Day 5: checking ingredient IDs against ranges of fresh IDs."""

from __future__ import annotations

from collections.abc import Iterable

from advent2025.day01 import _parse_int, _run_day

DAY = "05"


def _parse_range(line: str) -> tuple[int, int]:
    bounds = line.split("-")
    return _parse_int(bounds[0]), _parse_int(bounds[1])


def merge_ranges(ranges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort inclusive ranges by start and merge the overlapping ones."""
    merged: list[list[int]] = []
    for start, end in sorted(ranges, key=lambda bounds: bounds[0]):
        if not merged:
            merged.append([start, end])
            continue
        last = merged[-1]
        if start <= last[1] <= end:
            last[1] = end
        elif last[1] < start:
            merged.append([start, end])
    return [(start, end) for start, end in merged]


def part1(lines: Iterable[str]) -> int:
    """Count the IDs that fall inside a range listed before them."""
    ranges: list[tuple[int, int]] = []
    fresh = 0
    for line in lines:
        if "-" in line:
            ranges.append(_parse_range(line))
            continue
        if not line:
            continue
        ingredient = _parse_int(line)
        if any(start <= ingredient <= end for start, end in ranges):
            fresh += 1
    return fresh


def part2(lines: Iterable[str]) -> int:
    """Count how many distinct IDs the ranges before the first blank line cover."""
    ranges = []
    for line in lines:
        if not line:
            break
        if "-" in line:
            ranges.append(_parse_range(line))
    return sum(end - start + 1 for start, end in merge_ranges(ranges))


def main(argv: list[str] | None = None) -> int:
    return _run_day(DAY, (part1, part2), argv)