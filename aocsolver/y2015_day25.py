"""Weather machine code at a given row and column of the manual's grid."""

from __future__ import annotations

from typing import Sequence

FIRST_CODE = 20151125
MULTIPLIER = 252533
MODULUS = 33554393


def parse_input(lines: Sequence[str]) -> tuple[int, int]:
    """Row and column named in the puzzle sentence."""
    words = lines[0].split()
    return int(words[15][:-1]), int(words[17][:-1])


def _position_index(row: int, col: int) -> int:
    """How many steps along the diagonal fill order the cell lies."""
    diagonal = row + col - 1
    return diagonal * (diagonal - 1) // 2 + col - 1


def solve_part1(lines: Sequence[str]) -> int:
    """Code found at the requested position of the grid."""
    row, col = parse_input(lines)
    if row < 1 or col < 1:
        raise ValueError(f"grid positions start at 1, got row {row}, column {col}")
    steps = _position_index(row, col)
    return FIRST_CODE * pow(MULTIPLIER, steps, MODULUS) % MODULUS