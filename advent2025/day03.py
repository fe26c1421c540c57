"""Day 3: picking the largest joltage from each bank of batteries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from advent2025.day01 import _parse_int, _run_day

DAY = "03"
BANK_SIZE = 12

_DIGITS = "0123456789"


def _digit(char: str) -> int:
    if len(char) != 1 or char not in _DIGITS:
        raise ValueError(f"invalid digit: {char!r}")
    return int(char)


def largest_digit(digits: Sequence[str], start: int, end: int) -> tuple[str, int]:
    """Return the first largest digit in ``digits[start:end]`` and its index.

    When the range is empty the digit at ``start`` is returned.
    """
    candidates = range(start, max(end, start + 1))
    best = max(candidates, key=lambda idx: _digit(digits[idx]))
    return digits[best], best


def part1(lines: Iterable[str]) -> int:
    """Sum, over all banks, the largest two-digit number keeping digit order."""
    joltage = 0
    for line in lines:
        if len(line) <= 2:
            joltage += _parse_int(line, signed=True)
            continue
        digits = [_digit(char) for char in line]
        first_idx = max(range(len(digits) - 1), key=digits.__getitem__)
        second = max(digits[first_idx + 1 :])
        joltage += 10 * digits[first_idx] + second
    return joltage


def part2(lines: Iterable[str]) -> int:
    """Sum, over all banks, the largest twelve-digit number keeping digit order."""
    joltage = 0
    for line in lines:
        if len(line) < BANK_SIZE:
            raise ValueError(f"bank needs at least {BANK_SIZE} batteries: {line!r}")
        chosen = []
        start = 0
        for remaining in reversed(range(BANK_SIZE)):
            char, idx = largest_digit(line, start, len(line) - remaining)
            chosen.append(char)
            start = idx + 1
        joltage += int("".join(chosen))
    return joltage


def main(argv: list[str] | None = None) -> int:
    return _run_day(DAY, (part1, part2), argv)