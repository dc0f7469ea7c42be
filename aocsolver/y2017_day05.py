"""Jump offset maze."""

from __future__ import annotations

from typing import Callable, Iterable


def execute_instructions(
    offsets: Iterable[int], increment: Callable[[int], int]
) -> int:
    """Number of jumps until the pointer leaves the list.

    After each jump the used offset is changed by ``increment(offset)``.
    The given offsets are left untouched.
    """
    jumps = [int(offset) for offset in offsets]
    pointer = steps = 0
    while 0 <= pointer < len(jumps):
        offset = jumps[pointer]
        jumps[pointer] += increment(offset)
        pointer += offset
        steps += 1
    return steps


def solve_part1(offsets: Iterable[int]) -> int:
    return execute_instructions(offsets, lambda offset: 1)


def solve_part2(offsets: Iterable[int]) -> int:
    return execute_instructions(offsets, lambda offset: -1 if offset >= 3 else 1)