"""Spinlock circular buffer."""

from __future__ import annotations

from typing import Sequence

PART1_INSERTIONS = 2017
PART2_INSERTIONS = 50_000_000 - 1


def spinlock(step: int, iterations: int) -> tuple[list[int], int]:
    """Buffer after inserting 1..iterations, and the index of the last insert."""
    buffer = [0]
    index = 0
    for value in range(1, iterations + 1):
        index = (index + step) % len(buffer) + 1
        buffer.insert(index, value)
    return buffer, index


def _value_after_zero(step: int, insertions: int) -> int:
    """Value right after 0 once the given number of values were inserted."""
    index = zero_index = after_zero = 0
    for value in range(1, insertions + 1):
        index = (index + step) % value
        if index == zero_index:
            after_zero = value
        if index < zero_index:
            zero_index += 1
        index += 1
    return after_zero


def solve_part1(lines: Sequence[str]) -> int:
    """Value following the last one inserted."""
    buffer, index = spinlock(int(lines[0]), PART1_INSERTIONS)
    return buffer[index + 1]


def solve_part2(lines: Sequence[str]) -> int:
    """Value following 0 after fifty million steps."""
    return _value_after_zero(int(lines[0]), PART2_INSERTIONS)