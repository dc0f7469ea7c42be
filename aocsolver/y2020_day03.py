"""Toboggan trajectory: trees hit on slopes through a repeating forest."""

from __future__ import annotations

from math import prod
from typing import Sequence

TREE = "#"
SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def trees_on_slope(forest: Sequence[str], right: int, down: int) -> int:
    """Trees met going ``right`` across and ``down`` each step; rows repeat sideways."""
    if down < 1:
        raise ValueError("the slope must move down at least one row")
    return sum(
        1
        for step, row in enumerate(forest[::down])
        if row[step * right % len(row)] == TREE
    )


def solve_part1(forest: Sequence[str]) -> int:
    return trees_on_slope(forest, 3, 1)


def solve_part2(forest: Sequence[str]) -> int:
    """Product of trees met on every listed slope."""
    return prod(trees_on_slope(forest, right, down) for right, down in SLOPES)