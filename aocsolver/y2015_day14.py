"""Reindeer racing by distance and by points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence


@dataclass
class Reindeer:
    """A reindeer that alternates between flying and resting."""

    name: str
    speed: int
    flight_duration: int
    rest_duration: int
    time: int = 0
    distance: int = 0
    distances: list[int] = field(default_factory=list)

    def move(self, seconds: int) -> None:
        """Advance the reindeer by the given number of seconds."""
        cycle = self.rest_duration + self.flight_duration
        for _ in range(seconds):
            self.time += 1
            if (self.time - 1) % cycle < self.flight_duration:
                self.distance += self.speed
            self.distances.append(self.distance)


def parse_reindeer(line: str) -> Reindeer:
    words = line.split(" ")
    return Reindeer(
        name=words[0],
        speed=int(words[3]),
        flight_duration=int(words[6]),
        rest_duration=int(words[13]),
    )


def parse_input(lines: Iterable[str]) -> list[Reindeer]:
    return [parse_reindeer(line) for line in lines]


def race(reindeer: Iterable[Reindeer], duration: int) -> None:
    """Move every reindeer for the duration of the race."""
    for deer in reindeer:
        deer.move(duration)


def solve_part1(reindeer: Sequence[Reindeer]) -> int:
    """Greatest distance travelled by any reindeer."""
    return max([0, *(deer.distance for deer in reindeer)])


def solve_part2(reindeer: Sequence[Reindeer]) -> int:
    """Most points won, one point per second to every leader."""
    points = [0] * len(reindeer)
    for snapshot in zip(*(deer.distances for deer in reindeer)):
        lead = max(0, *snapshot)
        for i, distance in enumerate(snapshot):
            if distance == lead:
                points[i] += 1
    return max(points)