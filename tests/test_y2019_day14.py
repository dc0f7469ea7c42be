import pytest

from aocsolver.y2019_day14 import (
    TRILLION,
    Chemical,
    ore_for_fuel,
    parse_input,
    solve_part1,
    solve_part2,
)

SMALL = [
    "10 ORE => 10 A",
    "1 ORE => 1 B",
    "7 A, 1 B => 1 C",
    "7 A, 1 C => 1 D",
    "7 A, 1 D => 1 E",
    "7 A, 1 E => 1 FUEL",
]

LARGER = [
    "157 ORE => 5 NZVS",
    "165 ORE => 6 DCFZ",
    "44 XJWVT, 5 KHKGT, 1 QDVJ, 29 NZVS, 9 GPVTF, 48 HKGWZ => 1 FUEL",
    "12 HKGWZ, 1 GPVTF, 8 PSHF => 9 QDVJ",
    "179 ORE => 7 PSHF",
    "177 ORE => 5 HKGWZ",
    "7 DCFZ, 7 PSHF => 2 XJWVT",
    "165 ORE => 2 GPVTF",
    "3 DCFZ, 7 NZVS, 5 HKGWZ, 10 PSHF => 8 KHKGT",
]


def test_parse_input():
    reactions = parse_input(SMALL)
    ingredients, product = reactions["C"]
    assert ingredients == [Chemical(7, "A"), Chemical(1, "B")]
    assert product == Chemical(1, "C")


def test_small_example():
    assert solve_part1(SMALL) == 31


def test_larger_example():
    assert solve_part1(LARGER) == 13312
    assert solve_part2(LARGER) == 82892753


def test_no_fuel_needs_no_ore():
    assert ore_for_fuel(0, parse_input(SMALL)) == 0


def test_leftovers_make_batches_cheaper():
    reactions = parse_input(LARGER)
    assert ore_for_fuel(2, reactions) <= 2 * ore_for_fuel(1, reactions)


def test_linear_reaction():
    reactions = parse_input(["3 ORE => 1 FUEL"])
    assert ore_for_fuel(5, reactions) == 5 * ore_for_fuel(1, reactions)
    fuel = solve_part2(["3 ORE => 1 FUEL"])
    assert 3 * fuel <= TRILLION < 3 * (fuel + 1)


def test_missing_reaction():
    with pytest.raises(ValueError):
        solve_part1(["1 X => 1 FUEL"])