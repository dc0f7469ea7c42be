import pytest

from aocsolver.y2015_day09 import (
    UNREACHABLE,
    build_matrix,
    longest_path,
    path_length,
    shortest_path,
    solve_part1,
    solve_part2,
)

EXAMPLE = [
    "London to Dublin = 464",
    "London to Belfast = 518",
    "Dublin to Belfast = 141",
]


def test_part1_example():
    assert solve_part1(EXAMPLE) == 605


def test_part2_example():
    assert solve_part2(EXAMPLE) == 982


def test_matrix_is_symmetric_with_zero_diagonal():
    matrix = build_matrix(EXAMPLE)
    assert len(matrix) == 3
    for i, row in enumerate(matrix):
        assert row[i] == 0
        for j, value in enumerate(row):
            assert value == matrix[j][i]
    assert matrix[0][1] == 464


def test_reversed_path_has_same_length():
    matrix = build_matrix(EXAMPLE)
    assert path_length([0, 1, 2], matrix) == path_length([2, 1, 0], matrix)


def test_single_city_path_is_empty():
    matrix = build_matrix(EXAMPLE)
    assert path_length([1], matrix) == 0


def test_shortest_not_longer_than_longest():
    matrix = build_matrix(EXAMPLE)
    assert shortest_path(matrix) <= longest_path(matrix)


def test_missing_edge_is_unreachable():
    matrix = build_matrix(["A to B = 3", "C to D = 4"])
    assert matrix[0][1] == 3
    assert matrix[0][2] == UNREACHABLE


@pytest.mark.parametrize("distance", [1, 7, 250])
def test_two_cities(distance):
    lines = [f"X to Y = {distance}"]
    assert solve_part1(lines) == distance
    assert solve_part2(lines) == distance