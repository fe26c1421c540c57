"""Day 1: counting how often a 100-position dial lands on, or passes, zero."""

from __future__ import annotations

import argparse
import re
import time
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from advent2025.common import input_path, read_lines, start_day

DAY = "01"
DIAL_SIZE = 100
START_POSITION = 50

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def _parse_int(text: str, *, signed: bool = False) -> int:
    """Parse a decimal integer strictly, rejecting blanks and stray characters."""
    pattern = _SIGNED_INT if signed else _UNSIGNED_INT
    if not pattern.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    return int(text)


def _run_day(
    day: str,
    parts: Sequence[Callable[[list[str]], int]],
    argv: list[str] | None,
    *,
    timed: bool = False,
) -> int:
    """Parse the command line, solve each part on the input file and print the results."""
    parser = argparse.ArgumentParser(prog=f"day{day}", description=f"Solve day {day}.")
    parser.add_argument("input", nargs="?", type=Path, default=input_path(day))
    args = parser.parse_args(argv)

    start_day(day)
    lines = read_lines(args.input)
    for number, solve in enumerate(parts, start=1):
        separator = "\n" if number > 1 else ""
        print(f"{separator}=== Part {number} ===")
        started = time.perf_counter()
        result = solve(lines)
        if timed:
            elapsed = time.perf_counter() - started
            print(f"{solve.__name__} took {elapsed * 1000:.3f} ms")
        print(f"Result = {result}")
    return 0


def _parse_rotation(line: str) -> tuple[str, int]:
    if not line:
        raise ValueError("empty rotation")
    return line[0], _parse_int(line[1:], signed=True)


def part1(lines: Iterable[str]) -> int:
    """Count the rotations after which the dial points at zero."""
    pointer = START_POSITION
    password = 0
    for line in lines:
        direction, moves = _parse_rotation(line)
        if direction == "R":
            pointer = (pointer + moves) % DIAL_SIZE
        elif direction == "L":
            pointer = (pointer - moves) % DIAL_SIZE
        if pointer == 0:
            password += 1
    return password


def part2(lines: Iterable[str]) -> int:
    """Count every click at which the dial points at zero."""
    pointer = START_POSITION
    password = 0
    for line in lines:
        direction, moves = _parse_rotation(line)
        if moves <= 0:
            continue
        if direction == "R":
            password += (pointer + moves) // DIAL_SIZE
            pointer = (pointer + moves) % DIAL_SIZE
        elif direction == "L":
            distance_to_zero = (-pointer) % DIAL_SIZE
            password += (distance_to_zero + moves) // DIAL_SIZE
            pointer = (pointer - moves) % DIAL_SIZE
    return password


def main(argv: list[str] | None = None) -> int:
    return _run_day(DAY, (part1, part2), argv)