# advent2025

Solutions to the Advent of Code 2025 puzzles, days 1 to 7. Each day is a
module (`advent2025.day01` to `advent2025.day07`) with `part1` and `part2`
functions. Both take an iterable of input lines, without line terminators,
and return the answer as an integer. Malformed input raises `ValueError`
(or `IndexError` where a grid position falls outside the grid).

## Installing

```
pip install .
```

## Running a day

Each command reads its puzzle input from `input/<DD>.txt`, relative to the
current directory, unless a path is given as its only argument:

```
advent2025-day01
advent2025-day02 path/to/02.txt
advent2025-day03
advent2025-day04
advent2025-day05
advent2025-day06
advent2025-day07
```

Each command prints a day banner, then the results of Part 1 and Part 2.

## Using the library

```python
from advent2025 import day05

lines = ["3-5", "10-14", "16-20", "12-18", "", "1", "5", "8", "11", "17", "32"]
print(day05.part1(lines))  # 3
print(day05.part2(lines))  # 14
```

Some days also expose the pieces they are built from:

- `day02.is_doubled` and `day02.is_repeated` test an ID string.
- `day03.largest_digit` finds the first largest digit in a slice.
- `day04.parse_grid`, `day04.can_access` and `day04.can_remove` work on the
  paper-roll grid.
- `day05.merge_ranges` merges inclusive `(start, end)` ranges.
- `day06.get_digits` reads numbers written down the columns of text rows.
- `day07.count_timelines` counts the paths through a splitter grid.

The helpers in `advent2025.common` do the shared work:

- `start_day` prints and returns the day banner.
- `input_path` gives the default input file path for a day.
- `read_lines` reads a file as lines.

`advent2025.template` is a starting point for a new day: its `part1` counts
the input lines, and its `main` reports the time taken.

## What it does not do

The package does not fetch puzzle inputs; each input file has to be put in
place by hand.

## Running the tests

```
pip install .[test]
pytest
```