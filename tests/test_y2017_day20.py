import pytest

from aocsolver.y2017_day20 import Particle, parse_input, solve_part1, solve_part2

NEAREST = [
    "p=< 3,0,0>, v=< 2,0,0>, a=<-1,0,0>",
    "p=< 4,0,0>, v=< 0,0,0>, a=<-2,0,0>",
]

COLLIDING = [
    "p=<-6,0,0>, v=< 3,0,0>, a=< 0,0,0>",
    "p=<-4,0,0>, v=< 2,0,0>, a=< 0,0,0>",
    "p=<-2,0,0>, v=< 1,0,0>, a=< 0,0,0>",
    "p=< 3,0,0>, v=<-1,0,0>, a=< 0,0,0>",
]


def test_parse_input():
    first = parse_input(COLLIDING)[0]
    assert first == Particle((-6, 0, 0), (3, 0, 0), (0, 0, 0))


def test_tick_accelerates_then_moves():
    particle = parse_input(NEAREST)[0]
    particle.tick()
    assert particle.velocity == (1, 0, 0)
    assert particle.position == (4, 0, 0)


def test_distance_from_origin():
    particle = Particle((-6, 2, -3), (0, 0, 0), (0, 0, 0))
    assert particle.distance_from_origin() == 6 + 2 + 3


def test_example_part1():
    assert solve_part1(NEAREST) == 0


def test_example_part2():
    assert solve_part2(COLLIDING) == 1


def test_no_collisions_keeps_everyone():
    lines = [f"p=<{n},0,0>, v=<{n},0,0>, a=<0,0,0>" for n in range(1, 5)]
    assert solve_part2(lines) == len(lines)


def test_part1_index_is_in_range():
    assert 0 <= solve_part1(COLLIDING) < len(COLLIDING)


def test_missing_vector_is_rejected():
    with pytest.raises(ValueError):
        parse_input(["p=<1,2,3>, v=<0,0,0>"])