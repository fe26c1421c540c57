import pytest

from advent2025.day01 import main, part1, part2

ROTATIONS = ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]


@pytest.mark.parametrize(("solve", "expected"), [(part1, 3), (part2, 6)])
def test_example(solve, expected):
    assert solve(ROTATIONS) == expected


def test_part2_never_below_part1():
    assert part2(ROTATIONS) >= part1(ROTATIONS)


@pytest.mark.parametrize(
    ("whole", "pieces"),
    [(["R1000"], ["R500", "R500"]), (["L1000"], ["L250"] * 4)],
)
def test_part2_splitting_a_rotation_changes_nothing(whole, pieces):
    assert part2(whole) == part2(pieces)


@pytest.mark.parametrize("solve", [part1, part2])
def test_symmetric_from_start(solve):
    assert solve(["L50"]) == solve(["R50"])


def test_part2_full_turns_scale():
    assert part2(["R300"]) == 3 * part2(["R100"])


@pytest.mark.parametrize("solve", [part1, part2])
def test_unknown_direction_ignored(solve):
    assert solve(["X5", *ROTATIONS]) == solve(ROTATIONS)


@pytest.mark.parametrize("solve", [part1, part2])
@pytest.mark.parametrize("rotation", ["", "Rabc", "L"])
def test_malformed_rotation_raises(solve, rotation):
    with pytest.raises(ValueError):
        solve([rotation])


def test_main_prints_both_parts(tmp_path, capsys):
    rotations_file = tmp_path / "rotations.txt"
    rotations_file.write_text("\n".join(ROTATIONS) + "\n")
    status = main([str(rotations_file)])
    printed = capsys.readouterr().out
    assert status == 0
    assert printed.count("Result = ") == 2
    assert "Result = 3\n" in printed
    assert "Result = 6\n" in printed
    assert "=== Part 2 ===" in printed