"""Day 2: summing product IDs made of repeated digit sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from advent2025.day01 import _parse_int, _run_day

DAY = "02"


def _ranges(lines: Iterable[str]) -> Iterator[range]:
    for line in lines:
        for id_range in line.split(","):
            bounds = id_range.split("-")
            if len(bounds) < 2:
                raise ValueError(f"invalid id range: {id_range!r}")
            lower, upper = _parse_int(bounds[0]), _parse_int(bounds[1])
            yield range(lower, upper + 1)


def _sum_matching(lines: Iterable[str], matches: Callable[[str], bool]) -> int:
    return sum(n for ids in _ranges(lines) for n in ids if matches(str(n)))


def is_doubled(id_text: str) -> bool:
    """Return whether the first half of ``id_text`` equals the second half."""
    half = len(id_text) // 2
    return id_text[:half] == id_text[half:]


def is_repeated(id_text: str) -> bool:
    """Return whether ``id_text`` is some sequence repeated at least twice."""
    length = len(id_text)
    if length < 2:
        return False
    return any(
        id_text[:size] * (length // size) == id_text
        for size in range(1, length // 2 + 1)
    )


def part1(lines: Iterable[str]) -> int:
    """Sum the IDs in every range that are a sequence repeated exactly twice."""
    return _sum_matching(lines, lambda text: len(text) % 2 == 0 and is_doubled(text))


def part2(lines: Iterable[str]) -> int:
    """Sum the IDs in every range that are a sequence repeated two or more times."""
    return _sum_matching(lines, is_repeated)


def main(argv: list[str] | None = None) -> int:
    return _run_day(DAY, (part1, part2), argv)