import pytest

from aocsolver.y2017_day23 import is_prime, solve_part1, solve_part2


@pytest.mark.parametrize("n", [2, 3, 5, 7, 13, 97, 7919])
def test_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 15, 100, 7917])
def test_non_primes(n):
    assert is_prime(n) is False


def test_straight_line_multiplications_are_counted():
    assert solve_part1(["set a 3", "mul a 2", "mul a 2"]) == 2


def test_loop_counts_each_executed_mul():
    program = ["set a 3", "mul b 2", "sub a 1", "jnz a -2"]
    assert solve_part1(program) == 3


def test_jnz_on_literal_jumps_out():
    assert solve_part1(["jnz 1 5", "mul a 2"]) == 0


def test_part2_counts_within_range():
    result = solve_part2(["set b 99", "set c b"])
    assert 0 < result <= 1001


def test_part2_requires_seed_instruction():
    with pytest.raises(ValueError):
        solve_part2(["set a 1"])