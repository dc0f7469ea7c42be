import pytest

from aocsolver.y2017_day01 import (
    inverse_captcha,
    parse_digits,
    solve_part1,
    solve_part2,
)


def test_parse_digits():
    assert parse_digits("0912\n") == [0, 9, 1, 2]


def test_part1_example():
    assert solve_part1(["1122"]) == 3


def test_part2_example():
    assert solve_part2(["1212"]) == 6


@pytest.mark.parametrize("digit, count", [(1, 4), (7, 3), (9, 10)])
def test_repeated_digit_counts_every_position(digit, count):
    digits = [digit] * count
    assert inverse_captcha(digits, 1) == digit * count


@pytest.mark.parametrize("line", ["91212129", "123425", "8"])
def test_full_turn_matches_every_digit(line):
    digits = parse_digits(line)
    assert inverse_captcha(digits, len(digits)) == sum(digits)


def test_part1_never_exceeds_digit_sum():
    digits = parse_digits("91212129")
    assert inverse_captcha(digits, 1) <= sum(digits)