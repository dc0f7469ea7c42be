"""Dueling generators compared on their lowest sixteen bits."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Sequence

MODULUS = 2147483647
FACTOR_A = 16807
FACTOR_B = 48271
_LOW_BITS = 0xFFFF


def parse_input(lines: Sequence[str]) -> tuple[int, int]:
    """Starting values of generators A and B."""
    return int(lines[0].split()[-1]), int(lines[1].split()[-1])


def generator(start: int, factor: int, multiple: int = 1) -> Iterator[int]:
    """Endless stream of generated values that are divisible by ``multiple``."""
    value = start
    while True:
        value = value * factor % MODULUS
        if value % multiple == 0:
            yield value


def low_bits_match(a: int, b: int) -> bool:
    return (a ^ b) & _LOW_BITS == 0


def _count_matches(a_values: Iterator[int], b_values: Iterator[int], pairs: int) -> int:
    return sum(
        low_bits_match(a, b) for a, b in islice(zip(a_values, b_values), pairs)
    )


def solve_part1(lines: Sequence[str], pairs: int = 40_000_000) -> int:
    start_a, start_b = parse_input(lines)
    return _count_matches(
        generator(start_a, FACTOR_A), generator(start_b, FACTOR_B), pairs
    )


def solve_part2(lines: Sequence[str], pairs: int = 5_000_000) -> int:
    """Matches when A only offers multiples of 4 and B multiples of 8."""
    start_a, start_b = parse_input(lines)
    return _count_matches(
        generator(start_a, FACTOR_A, 4), generator(start_b, FACTOR_B, 8), pairs
    )