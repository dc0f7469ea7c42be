from aocsolver.y2018_day12 import (
    grow,
    parse_input,
    solve_part1,
    sum_pot_numbers,
    transform,
)

EXAMPLE = [
    "initial state: #..#.#..##......###...###",
    "",
    "...## => #",
    "..#.. => #",
    ".#... => #",
    ".#.#. => #",
    ".#.## => #",
    ".##.. => #",
    ".#### => #",
    "#.#.# => #",
    "#.### => #",
    "##.#. => #",
    "##.## => #",
    "###.. => #",
    "###.# => #",
    "####. => #",
]


def test_parse_input():
    initial, rules = parse_input(EXAMPLE)
    assert initial == "#..#.#..##......###...###"
    assert len(rules) == 14
    assert rules["...##"] == "#"


def test_example_twenty_generations():
    assert solve_part1(EXAMPLE) == 325


def test_transform_result_is_trimmed():
    initial, rules = parse_input(EXAMPLE)
    pots, _ = transform(initial, rules)
    assert pots.startswith("#") and pots.endswith("#")


def test_transform_keeps_stable_single_plant_in_place():
    assert transform("#", {"..#..": "#"}) == ("#", 0)


def test_sum_pot_numbers():
    assert sum_pot_numbers("#..#", 0) == 3
    assert sum_pot_numbers("#..#", -2) == -1
    assert sum_pot_numbers("....", 7) == 0


def test_stable_plant_sums_to_zero():
    assert grow("#", {"..#..": "#"}, 1000) == 0


def test_drifting_plant_is_extrapolated():
    rules = {".#...": "#"}
    assert grow("#", rules, 20) == 20
    assert grow("#", rules, 50_000_000_000) == 50_000_000_000