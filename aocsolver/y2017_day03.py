"""Spiral memory: distances and cumulative sums on a square spiral."""

from __future__ import annotations

from math import isqrt

# right, up, left, down
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_NEIGHBOURS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


def solve_part1(value: int) -> int:
    """Manhattan distance from square ``value`` to square 1."""
    if value < 1:
        raise ValueError("squares are numbered from 1")
    root = isqrt(value - 1) + 1
    if root % 2 == 0:
        root += 1
    layer = (root - 1) // 2
    remainder = root * root - value
    x, y = layer, -layer
    if remainder:
        edge = root - 1
        side = (remainder - 1) // edge
        along = remainder - side * edge
        if side == 0:
            x -= remainder
        elif side == 1:
            x -= edge
            y += along
        elif side == 2:
            y += edge
            x -= edge - along
        else:
            y += edge - along
    return abs(x) + abs(y)


def solve_part2(value: int) -> int:
    """First value written that is larger than ``value``."""
    values = {(0, 0): 1}
    x = y = 0
    direction, run = 0, 1
    while True:
        dx, dy = _DIRECTIONS[direction]
        for _ in range(run):
            x, y = x + dx, y + dy
            total = sum(values.get((x + a, y + b), 0) for a, b in _NEIGHBOURS)
            values[(x, y)] = total
            if total > value:
                return total
        direction = (direction + 1) % len(_DIRECTIONS)
        if direction in (0, 2):
            run += 1