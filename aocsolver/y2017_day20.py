"""Particle swarm: nearest particle and collisions."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

ITERATIONS = 1000
_VECTOR = re.compile(r"([pva])=<([^>]*)>")

Vector = tuple[int, int, int]


@dataclass
class Particle:
    position: Vector
    velocity: Vector
    acceleration: Vector

    def tick(self) -> None:
        """Accelerate, then move."""
        self.velocity = _add(self.velocity, self.acceleration)
        self.position = _add(self.position, self.velocity)

    def distance_from_origin(self) -> int:
        return sum(abs(c) for c in self.position)


def _add(a: Vector, b: Vector) -> Vector:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _parse_vector(text: str) -> Vector:
    x, y, z = (int(part.strip()) for part in text.split(","))
    return (x, y, z)


def parse_input(lines: Iterable[str]) -> list[Particle]:
    particles = []
    for line in lines:
        vectors = {key: _parse_vector(value) for key, value in _VECTOR.findall(line)}
        try:
            particles.append(Particle(vectors["p"], vectors["v"], vectors["a"]))
        except KeyError as missing:
            raise ValueError(f"particle {line!r} lacks {missing}") from None
    return particles


def solve_part1(lines: Sequence[str]) -> int:
    """Index of the particle closest to the origin in the long run."""
    particles = parse_input(lines)
    for _ in range(ITERATIONS):
        for particle in particles:
            particle.tick()
    return min(
        range(len(particles)),
        key=lambda i: particles[i].distance_from_origin(),
        default=0,
    )


def solve_part2(lines: Sequence[str]) -> int:
    """Particles left after all collisions are resolved."""
    alive = parse_input(lines)
    for _ in range(ITERATIONS):
        for particle in alive:
            particle.tick()
        occupied = Counter(particle.position for particle in alive)
        alive = [p for p in alive if occupied[p.position] == 1]
    return len(alive)