"""Advent of Code 2025 puzzle solutions for days 1 to 7, with shared helpers."""

__version__ = "0.1.0"