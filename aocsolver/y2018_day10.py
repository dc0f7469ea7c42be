"""The stars align: moving points that briefly spell a message."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

MAX_SPAN = 100
LIT = "█"
DARK = " "
_NUMBER = re.compile(r"-?[0-9]+")


@dataclass
class Point:
    position: tuple[int, int]
    velocity: tuple[int, int]

    def move(self) -> None:
        """Advance the point by one second."""
        self.position = (
            self.position[0] + self.velocity[0],
            self.position[1] + self.velocity[1],
        )


def parse_input(lines: Iterable[str]) -> list[Point]:
    points = []
    for line in lines:
        numbers = [int(n) for n in _NUMBER.findall(line)]
        if len(numbers) < 4:
            raise ValueError(f"cannot read a point from {line!r}")
        px, py, vx, vy = numbers[:4]
        points.append(Point((px, py), (vx, vy)))
    return points


def render(points: Sequence[Point]) -> str:
    """Picture of the points, or an empty string when they are spread too far."""
    if not points:
        return ""
    lit = {point.position for point in points}
    xs = [x for x, _ in lit]
    ys = [y for _, y in lit]
    min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
    if max_x - min_x > MAX_SPAN or max_y - min_y > MAX_SPAN:
        return ""
    return "".join(
        "".join(LIT if (x, y) in lit else DARK for x in range(min_x, max_x + 1)) + "\n"
        for y in range(min_y, max_y + 1)
    )


def message_frames(lines: Iterable[str], limit: int = 12_000) -> Iterator[tuple[int, str]]:
    """Seconds before ``limit`` at which the points are close enough to draw."""
    points = parse_input(lines)
    for second in range(1, limit):
        for point in points:
            point.move()
        frame = render(points)
        if frame:
            yield second, frame