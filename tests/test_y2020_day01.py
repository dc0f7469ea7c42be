import pytest

from aocsolver.y2020_day01 import parse_numbers, solve_part1, solve_part2

EXAMPLE = ["1721", "979", "366", "299", "675", "1456"]


def test_parse_numbers():
    assert parse_numbers(["12", "-3"]) == [12, -3]


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_numbers(["12", "abc"])


def test_example_pair():
    assert solve_part1(parse_numbers(EXAMPLE)) == 514579


def test_example_triple():
    assert solve_part2(parse_numbers(EXAMPLE)) == 241861950


def test_no_match_gives_zero():
    assert solve_part1([1, 2, 3]) == 0
    assert solve_part2([1, 2]) == 0


def test_pair_product_uses_matching_numbers():
    assert solve_part1([5, 2000, 20]) == 2000 * 20