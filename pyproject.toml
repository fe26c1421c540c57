[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2025"
version = "0.1.0"
description = "Solutions to the Advent of Code 2025 puzzles, days 1 to 7"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2025"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2025-day01 = "advent2025.day01:main"
advent2025-day02 = "advent2025.day02:main"
advent2025-day03 = "advent2025.day03:main"
advent2025-day04 = "advent2025.day04:main"
advent2025-day05 = "advent2025.day05:main"
advent2025-day06 = "advent2025.day06:main"
advent2025-day07 = "advent2025.day07:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2025"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
