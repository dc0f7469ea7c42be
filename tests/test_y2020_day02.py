import pytest

from aocsolver.y2020_day02 import PasswordEntry, parse_line, solve_part1, solve_part2

EXAMPLE = ["1-3 a: abcde", "1-3 b: cdefg", "2-9 c: ccccccccc"]


def test_parse_line():
    assert parse_line("1-3 a: abcde") == PasswordEntry("a", 1, 3, "abcde")


def test_parse_line_malformed():
    with pytest.raises(ValueError):
        parse_line("1-3 a:")


def test_part1_validity():
    entries = [parse_line(line) for line in EXAMPLE]
    assert [e.valid_part1() for e in entries] == [True, False, True]


def test_part2_validity():
    entries = [parse_line(line) for line in EXAMPLE]
    assert [e.valid_part2() for e in entries] == [True, False, False]


def test_example_counts():
    entries = [parse_line(line) for line in EXAMPLE]
    assert solve_part1(entries) == 2
    assert solve_part2(entries) == 1