"""Report repair: entries that sum to 2020."""

from __future__ import annotations

from itertools import combinations
from math import prod
from typing import Iterable, Sequence

TARGET = 2020


def parse_numbers(lines: Iterable[str]) -> list[int]:
    """Parse one integer per line; raises ValueError on anything else."""
    return [int(line) for line in lines]


def _product_of_group(numbers: Sequence[int], size: int) -> int:
    return next(
        (prod(group) for group in combinations(numbers, size) if sum(group) == TARGET),
        0,
    )


def solve_part1(numbers: Sequence[int]) -> int:
    """Product of the first pair summing to 2020, or 0."""
    return _product_of_group(numbers, 2)


def solve_part2(numbers: Sequence[int]) -> int:
    """Product of the first triple summing to 2020, or 0."""
    return _product_of_group(numbers, 3)