"""Animated grid of lights following Game of Life rules."""

from __future__ import annotations

from typing import Sequence

ON = "#"
OFF = "."


def is_corner(x: int, y: int, grid: Sequence[str]) -> bool:
    """Whether the cell lies in one of the four corners of the grid."""
    return x in (0, len(grid[0]) - 1) and y in (0, len(grid) - 1)


def is_on(x: int, y: int, grid: Sequence[str], corners_on: bool) -> bool:
    """Whether a light is lit, treating corners as always lit if requested."""
    if corners_on and is_corner(x, y, grid):
        return True
    return grid[y][x] == ON


def neighbors(x: int, y: int, width: int, height: int) -> list[tuple[int, int]]:
    """Coordinates of the in-bounds cells surrounding (x, y)."""
    return [
        (x + dx, y + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx, dy) != (0, 0) and 0 <= x + dx < width and 0 <= y + dy < height
    ]


def _next_light(x: int, y: int, grid: Sequence[str], corners_on: bool) -> str:
    if is_corner(x, y, grid):
        return ON
    lit = sum(
        is_on(nx, ny, grid, corners_on)
        for nx, ny in neighbors(x, y, len(grid[0]), len(grid))
    )
    if lit == 3 or (lit == 2 and is_on(x, y, grid, corners_on)):
        return ON
    return OFF


def step(grid: Sequence[str], corners_on: bool) -> list[str]:
    """Compute the next state of the grid; corners are always switched on."""
    return [
        "".join(_next_light(x, y, grid, corners_on) for x in range(len(row)))
        for y, row in enumerate(grid)
    ]


def simulate(grid: Sequence[str], steps: int, corners_on: bool) -> list[str]:
    """Run the animation for a number of steps without touching the input."""
    current = list(grid)
    for _ in range(steps):
        current = step(current, corners_on)
    return current


def count_on(grid: Sequence[str]) -> int:
    return sum(row.count(ON) for row in grid)


def solve_part1(lines: Sequence[str]) -> int:
    return count_on(simulate(lines, 100, False))


def solve_part2(lines: Sequence[str]) -> int:
    return count_on(simulate(lines, 100, True))