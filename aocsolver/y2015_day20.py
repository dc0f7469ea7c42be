"""Elves delivering presents to an infinite street of houses."""

from __future__ import annotations

from math import isqrt
from typing import Sequence


def divisors(n: int) -> list[int]:
    """Sorted positive divisors of n."""
    small = [d for d in range(1, isqrt(n) + 1) if n % d == 0]
    return sorted({*small, *(n // d for d in small)})


def sum_of_divisors(n: int) -> int:
    return sum(divisors(n))


def solve_part1(lines: Sequence[str]) -> int:
    """Lowest house receiving at least the target number of presents."""
    target = int(lines[0])
    for house in range(1, target + 1):
        if sum_of_divisors(house) * 10 >= target:
            return house
    return 0


def solve_part2(lines: Sequence[str]) -> int:
    """Lowest house reaching the target when each elf visits only 50 houses."""
    target = int(lines[0])
    for house in range(1, target + 1):
        cutoff = house // 50
        presents = sum(d for d in divisors(house) if d > cutoff)
        if presents * 11 >= target:
            return house
    return 0