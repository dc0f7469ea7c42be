import pytest

from aocsolver.y2017_day17 import _value_after_zero, solve_part1, spinlock


def test_example_buffer_after_nine():
    assert spinlock(3, 9)[0] == [0, 9, 5, 7, 2, 4, 3, 8, 6, 1]


def test_example_part1():
    assert solve_part1(["3"]) == 638


def test_no_insertions():
    assert spinlock(3, 0) == ([0], 0)


@pytest.mark.parametrize("step,iterations", [(3, 50), (7, 120), (1, 30)])
def test_buffer_holds_each_value_once(step, iterations):
    buffer, index = spinlock(step, iterations)
    assert sorted(buffer) == list(range(iterations + 1))
    assert buffer[index] == iterations
    assert buffer[0] == 0


@pytest.mark.parametrize("step", [3, 5, 12])
@pytest.mark.parametrize("insertions", [1, 9, 40, 200])
def test_value_after_zero_matches_buffer(step, insertions):
    buffer, _ = spinlock(step, insertions)
    assert _value_after_zero(step, insertions) == buffer[1]