"""Hex grid distances in axial coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Axial:
    q: int
    r: int

    def __add__(self, other: Axial) -> Axial:
        return Axial(self.q + other.q, self.r + other.r)


_ORIGIN = Axial(0, 0)
_STEPS = {
    "n": Axial(0, -1),
    "ne": Axial(1, -1),
    "se": Axial(1, 0),
    "s": Axial(0, 1),
    "sw": Axial(-1, 1),
    "nw": Axial(-1, 0),
}


def axial_distance(start: Axial, end: Axial) -> int:
    """Number of hex steps between two positions."""
    return (
        abs(start.q - end.q)
        + abs(start.q + start.r - end.q - end.r)
        + abs(start.r - end.r)
    ) // 2


def solve(lines: Sequence[str]) -> tuple[int, int]:
    """Final distance from the start, and the furthest distance reached.

    Unrecognised directions do not move.
    """
    position = _ORIGIN
    distance = furthest = 0
    for direction in lines[0].strip().split(","):
        position = position + _STEPS.get(direction, _ORIGIN)
        distance = axial_distance(_ORIGIN, position)
        furthest = max(furthest, distance)
    return distance, furthest