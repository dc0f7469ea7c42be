"""Chronal charge: most powerful square of fuel cells."""

from __future__ import annotations

from typing import Sequence

GRID_SIZE = 300


def power_level(x: int, y: int, serial: int) -> int:
    """Power of the fuel cell at 1-based (x, y) for a grid serial number."""
    rack = x + 10
    power = (rack * y + serial) * rack
    hundreds = abs(power) // 100 % 10
    return (hundreds if power >= 0 else -hundreds) - 5


def _summed_area(serial: int) -> list[list[int]]:
    table = [[0] * (GRID_SIZE + 1) for _ in range(GRID_SIZE + 1)]
    for y in range(1, GRID_SIZE + 1):
        above, row = table[y - 1], table[y]
        running = 0
        for x in range(1, GRID_SIZE + 1):
            running += power_level(x, y, serial)
            row[x] = above[x] + running
    return table


def _best_of_size(table: list[list[int]], size: int) -> tuple[int, int, int]:
    """Largest total of a square of the size, with its 1-based top-left corner."""
    limit = GRID_SIZE - size + 1
    best: tuple[int, int, int] | None = None
    for y in range(limit):
        top, bottom = table[y], table[y + size]
        totals = [
            bottom[x + size] - bottom[x] - top[x + size] + top[x] for x in range(limit)
        ]
        peak = max(totals)
        if best is None or peak > best[0]:
            best = (peak, totals.index(peak) + 1, y + 1)
    assert best is not None
    return best


def solve_part1(lines: Sequence[str]) -> str:
    """Top-left corner ``x,y`` of the most powerful 3x3 square."""
    _, x, y = _best_of_size(_summed_area(int(lines[0])), 3)
    return f"{x},{y}"


def solve_part2(lines: Sequence[str]) -> str:
    """``x,y,size`` of the most powerful square of any size."""
    table = _summed_area(int(lines[0]))
    best: tuple[int, int, int, int] | None = None
    for size in range(1, GRID_SIZE + 1):
        total, x, y = _best_of_size(table, size)
        if best is None or total > best[0]:
            best = (total, x, y, size)
    assert best is not None
    _, x, y, size = best
    return f"{x},{y},{size}"