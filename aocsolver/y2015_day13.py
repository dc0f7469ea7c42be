"""Optimal seating around a circular table."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import permutations
from typing import Iterable, Sequence


@dataclass(frozen=True)
class HappinessPair:
    """How much one person's happiness changes when seated next to another."""

    person: str
    neighbour: str
    delta: int


def parse_line(line: str) -> HappinessPair:
    words = line.split(" ")
    delta = int(words[3])
    if words[2] == "lose":
        delta = -delta
    return HappinessPair(person=words[0], neighbour=words[-1][:-1], delta=delta)


def build_happiness_matrix(pairs: Iterable[HappinessPair]) -> list[list[int]]:
    """Matrix of deltas indexed by people in order of first appearance."""
    pairs = list(pairs)
    people: dict[str, int] = {}
    for pair in pairs:
        people.setdefault(pair.person, len(people))
        people.setdefault(pair.neighbour, len(people))
    matrix = [[0] * len(people) for _ in people]
    for pair in pairs:
        matrix[people[pair.person]][people[pair.neighbour]] = pair.delta
    return matrix


def net_happiness(matrix: Sequence[Sequence[int]], seating: Sequence[int]) -> int:
    """Total happiness change for a circular seating order."""
    size = len(seating)
    return sum(
        matrix[seat][seating[(i + 1) % size]] + matrix[seat][seating[(i - 1) % size]]
        for i, seat in enumerate(seating)
    )


def max_happiness(matrix: Sequence[Sequence[int]]) -> int:
    return max(
        net_happiness(matrix, seating)
        for seating in permutations(range(len(matrix)))
    )


def _matrix_from_lines(lines: Iterable[str]) -> list[list[int]]:
    return build_happiness_matrix(parse_line(line) for line in lines)


def solve_part1(lines: Iterable[str]) -> int:
    return max_happiness(_matrix_from_lines(lines))


def solve_part2(lines: Iterable[str]) -> int:
    """Best seating with one extra, indifferent guest added."""
    matrix = [row + [0] for row in _matrix_from_lines(lines)]
    matrix.append([0] * (len(matrix) + 1))
    return max_happiness(matrix)