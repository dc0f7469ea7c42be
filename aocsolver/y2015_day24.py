"""Balance sleigh packages into equal-weight groups."""

from __future__ import annotations

import sys
from itertools import combinations
from math import prod
from typing import Iterable, Sequence


def quantum_entanglement(group: Iterable[int]) -> int:
    return prod(group)


def find_minimum_group(weights: Sequence[int], groups: int) -> int:
    """Smallest quantum entanglement among the fewest packages reaching the target."""
    target = sum(weights) // groups
    valid: list[tuple[int, ...]] = []
    for size in range(len(weights)):
        valid = [c for c in combinations(weights, size) if sum(c) == target]
        if valid:
            break
    return min([sys.maxsize, *(quantum_entanglement(g) for g in valid)])


def _parse(lines: Iterable[str]) -> list[int]:
    return [int(line) for line in lines]


def solve_part1(lines: Iterable[str]) -> int:
    return find_minimum_group(_parse(lines), 3)


def solve_part2(lines: Iterable[str]) -> int:
    return find_minimum_group(_parse(lines), 4)