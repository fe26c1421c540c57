"""Day 6: solving a worksheet of column-aligned arithmetic problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from advent2025.day01 import _parse_int, _run_day

DAY = "06"
OPERATORS = "+*"


def _is_operator_line(line: str) -> bool:
    return any(op in line for op in OPERATORS)


def _apply(op: str, values: Iterable[int]) -> int:
    return sum(values) if op == "+" else math.prod(values)


def get_digits(rows: Sequence[str]) -> list[int]:
    """Read the numbers written top to bottom in each column of ``rows``."""
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) < width for row in rows):
        raise ValueError("rows are shorter than the first row")
    return [
        _parse_int("".join(row[col] for row in rows).strip())
        for col in range(width)
    ]


def part1(lines: Iterable[str]) -> int:
    """Apply each operator to the numbers in its column and sum the results."""
    operands: list[list[int]] = []
    operations: list[str] = []
    for line in lines:
        if _is_operator_line(line):
            operations.extend(token[0] for token in line.split())
            continue
        operands.append([_parse_int(token) for token in line.split()])

    total = 0
    for col, op in enumerate(operations):
        if op not in OPERATORS:
            continue
        if any(len(row) <= col for row in operands):
            raise ValueError(f"missing operand in column {col}")
        total += _apply(op, (row[col] for row in operands))
    return total


def part2(lines: Iterable[str]) -> int:
    """Read each problem's numbers column by column and sum the results."""
    operands: list[str] = []
    operations = ""
    for line in lines:
        if _is_operator_line(line):
            operations += line
            continue
        operands.append(line)
    if not operands:
        raise ValueError("worksheet has no operand rows")

    total = 0
    idx = 0
    while idx < len(operations):
        end = idx + 1
        if end == len(operations):
            end = len(operands[0]) + 1
        while end < len(operations) and operations[end] not in OPERATORS:
            end += 1

        if any(len(row) < end - 1 for row in operands):
            raise ValueError(f"operand rows too short for problem at column {idx}")
        block = [row[idx : end - 1] for row in operands]

        op = operations[idx]
        if op in OPERATORS:
            total += _apply(op, get_digits(block))
        idx = end
    return total


def main(argv: list[str] | None = None) -> int:
    return _run_day(DAY, (part1, part2), argv)