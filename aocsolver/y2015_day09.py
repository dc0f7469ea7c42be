"""Shortest and longest routes that visit every city exactly once."""

from __future__ import annotations

import sys
from itertools import pairwise, permutations
from typing import Iterable, Sequence

UNREACHABLE = sys.maxsize


def _parse_edge(line: str) -> tuple[str, str, int]:
    route, distance = line.split(" = ")
    start, end = route.split(" to ")
    return start, end, int(distance)


def build_matrix(lines: Iterable[str]) -> list[list[int]]:
    """Build a symmetric distance matrix; cities are indexed by first appearance."""
    cities: dict[str, None] = {}
    edges: dict[frozenset[str], int] = {}
    for line in lines:
        start, end, distance = _parse_edge(line)
        cities.setdefault(start)
        cities.setdefault(end)
        edges.setdefault(frozenset((start, end)), distance)
    names = list(cities)
    return [
        [
            0 if a == b else edges.get(frozenset((a, b)), UNREACHABLE)
            for b in names
        ]
        for a in names
    ]


def path_length(path: Sequence[int], matrix: Sequence[Sequence[int]]) -> int:
    """Total distance travelled along the given order of city indexes."""
    return sum(matrix[a][b] for a, b in pairwise(path))


def _all_lengths(matrix: Sequence[Sequence[int]]) -> list[int]:
    return [path_length(p, matrix) for p in permutations(range(len(matrix)))]


def shortest_path(matrix: Sequence[Sequence[int]]) -> int:
    """Length of the shortest route through every city."""
    return min([UNREACHABLE, *_all_lengths(matrix)])


def longest_path(matrix: Sequence[Sequence[int]]) -> int:
    """Length of the longest route through every city."""
    return max([0, *_all_lengths(matrix)])


def solve_part1(lines: Iterable[str]) -> int:
    return shortest_path(build_matrix(lines))


def solve_part2(lines: Iterable[str]) -> int:
    return longest_path(build_matrix(lines))