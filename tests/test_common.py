from pathlib import Path

from advent2025.common import input_path, read_lines, start_day


def test_start_day_prints_banner(capsys):
    header = start_day("00")
    assert header == "Advent of Code 2025 - Day 00"
    assert capsys.readouterr().out == "Advent of Code 2025 - Day 00\n"


def test_start_day_pads_single_digit(capsys):
    assert start_day("7") == "Advent of Code 2025 - Day 07"
    assert "Day 07" in capsys.readouterr().out


def test_start_day_keeps_longer_names(capsys):
    assert start_day("NN").endswith("Day NN")
    capsys.readouterr()


def test_input_path():
    assert input_path("01") == Path("input") / "01.txt"


def test_read_lines_strips_terminators(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"first\r\nsecond\nthird")
    assert read_lines(path) == ["first", "second", "third"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert read_lines(path) == []