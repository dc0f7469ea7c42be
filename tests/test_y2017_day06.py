import pytest

from aocsolver.y2017_day06 import solve


def test_example():
    assert solve(["0 2 7 0"]) == (5, 4)


@pytest.mark.parametrize("banks", ["0 2 7 0", "4 1 15 12 0 9 9 5", "3 3 3"])
def test_loop_fits_inside_cycle_count(banks):
    cycles, loop = solve([banks])
    assert 1 <= loop <= cycles


def test_state_inside_loop_repeats_after_loop_length():
    cycles, loop = solve(["0 2 7 0"])
    # the configuration reached after five cycles begins the loop again
    assert solve(["2 4 1 2"]) == (loop, loop)
    assert cycles > loop