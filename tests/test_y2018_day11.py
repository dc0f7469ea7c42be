from aocsolver.y2018_day11 import GRID_SIZE, power_level, solve_part1, solve_part2


def test_power_level_examples():
    assert power_level(3, 5, 8) == 4
    assert power_level(122, 79, 57) == -5


def test_power_levels_stay_in_range():
    levels = {power_level(x, y, 42) for x in range(1, 40) for y in range(1, 40)}
    assert levels <= set(range(-5, 5))


def test_part1_example():
    assert solve_part1(["18"]) == "33,45"


def test_part1_corner_fits_grid():
    x, y = (int(v) for v in solve_part1(["42"]).split(","))
    assert 1 <= x <= GRID_SIZE - 2
    assert 1 <= y <= GRID_SIZE - 2


def test_part2_square_fits_grid():
    x, y, size = (int(v) for v in solve_part2(["18"]).split(","))
    assert 1 <= size <= GRID_SIZE
    assert x + size - 1 <= GRID_SIZE
    assert y + size - 1 <= GRID_SIZE