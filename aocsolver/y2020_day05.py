"""Binary boarding: decode seat identifiers."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable

_ROW_BITS = str.maketrans("FB", "01")
_COLUMN_BITS = str.maketrans("LR", "01")


def seat_id(code: str) -> int:
    """Row times eight plus column, read from a boarding pass code."""
    code = code.strip()
    row = int(code[:-3].translate(_ROW_BITS), 2)
    column = int(code[-3:].translate(_COLUMN_BITS), 2)
    return row * 8 + column


def solve_part1(lines: Iterable[str]) -> int:
    """Highest seat id, or 0 with no passes."""
    return max((seat_id(line) for line in lines), default=0)


def solve_part2(lines: Iterable[str]) -> int:
    """The missing seat id between two taken seats."""
    ids = sorted(seat_id(line) for line in lines)
    for current, following in pairwise(ids):
        if current != 0 and current + 1 != following:
            return current + 1
    raise ValueError("no free seat between taken seats")