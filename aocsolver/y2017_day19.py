"""A series of tubes: follow the routing diagram."""

from __future__ import annotations

from typing import Sequence

_BLANK = " "


def follow_route(lines: Sequence[str]) -> tuple[str, int]:
    """Letters seen along the path, and the number of steps taken."""

    def at(x: int, y: int) -> str:
        if 0 <= y < len(lines) and 0 <= x < len(lines[y]):
            return lines[y][x]
        return _BLANK

    x = next((i for i, char in enumerate(lines[0]) if char != _BLANK), 0)
    y = 0
    dx, dy = 0, 1
    letters: list[str] = []
    steps = 0
    while 0 <= y < len(lines) and 0 <= x < len(lines[y]):
        cell = lines[y][x]
        if cell.isascii() and cell.isalpha():
            letters.append(cell)
        elif cell == _BLANK:
            break
        elif cell == "+":
            if dx and at(x, y + 1) != _BLANK:
                dx, dy = 0, 1
            elif dx and at(x, y - 1) != _BLANK:
                dx, dy = 0, -1
            elif dy and at(x + 1, y) != _BLANK:
                dx, dy = 1, 0
            elif dy and at(x - 1, y) != _BLANK:
                dx, dy = -1, 0
            else:
                break
        x += dx
        y += dy
        steps += 1
    return "".join(letters), steps