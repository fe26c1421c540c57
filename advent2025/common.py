"""Helpers shared by the daily puzzle solutions."""

from __future__ import annotations

from pathlib import Path

INPUT_DIR = Path("input")


def start_day(day: str) -> str:
    """Print and return the banner for a puzzle day, zero-padded to two places."""
    header = f"Advent of Code 2025 - Day {day:0>2}"
    print(header)
    return header


def input_path(day: str) -> Path:
    """Return the default location of the puzzle input for ``day``."""
    return INPUT_DIR / f"{day}.txt"


def read_lines(path: str | Path) -> list[str]:
    """Read a text file and return its lines without line terminators."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]