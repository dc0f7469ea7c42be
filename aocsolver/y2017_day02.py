"""Spreadsheet checksums."""

from __future__ import annotations

from typing import Iterable, Sequence


def parse_input(lines: Iterable[str]) -> list[list[int]]:
    return [[int(value) for value in line.split()] for line in lines]


def solve_part1(rows: Iterable[Sequence[int]]) -> int:
    """Sum over rows of the difference between largest and smallest value."""
    return sum(max(row) - min(row) for row in rows)


def solve_part2(rows: Iterable[Sequence[int]]) -> int:
    """Sum over rows of the quotients of distinct values that divide evenly."""
    return sum(
        value // candidate
        for row in rows
        for value in row
        for candidate in row
        if value % candidate == 0 and value != candidate
    )