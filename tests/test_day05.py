import pytest

from advent2025.day05 import main, merge_ranges, part1, part2

DATABASE = """\
3-5
10-14
16-20
12-18

1
5
8
11
17
32
""".splitlines()


@pytest.mark.parametrize(("solve", "expected"), [(part1, 3), (part2, 14)])
def test_example(solve, expected):
    assert solve(DATABASE) == expected


@pytest.mark.parametrize(
    ("ranges", "expected"),
    [
        ([(3, 5), (10, 14), (16, 20), (12, 18)], [(3, 5), (10, 20)]),
        ([(1, 10), (2, 3)], [(1, 10)]),
        ([], []),
    ],
)
def test_merge_ranges(ranges, expected):
    assert merge_ranges(ranges) == expected


def test_merge_ranges_output_is_sorted_and_disjoint():
    merged = merge_ranges([(50, 60), (1, 4), (3, 9), (20, 25), (55, 70)])
    for (_, prev_end), (next_start, _) in zip(merged, merged[1:]):
        assert prev_end < next_start
    assert [start for start, _ in merged] == sorted(start for start, _ in merged)


def test_part1_bounds_are_inclusive():
    assert part1(["3-5", "", "3", "5"]) == 2


def test_part1_ignores_ranges_after_id():
    assert part1(["4", "3-5"]) == 0


def test_part2_stops_at_blank_line():
    base = ["3-5", "10-14"]
    assert part2([*base, "", "100-200"]) == part2(base)


@pytest.mark.parametrize("database", [["a-b"], ["1-2", "", "abc"]])
def test_invalid_number_raises(database):
    with pytest.raises(ValueError):
        part1(database)


def test_main_output_order(tmp_path, capsys):
    database_file = tmp_path / "database.txt"
    database_file.write_text("\n".join(DATABASE), encoding="utf-8")
    assert main([str(database_file)]) == 0
    results = [
        line.split(" = ")[1]
        for line in capsys.readouterr().out.splitlines()
        if line.startswith("Result")
    ]
    assert results == ["3", "14"]