"""Electromagnetic moat: strongest and longest bridges of components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass
class BridgeStats:
    """Best results over every bridge that can be built."""

    strength: int = 0
    length: int = 0
    strength_for_longest: int = 0


def parse_input(lines: Iterable[str]) -> list[tuple[int, int]]:
    components = []
    for line in lines:
        a, b = line.strip().split("/")
        components.append((int(a), int(b)))
    return components


def solve(lines: Iterable[str]) -> BridgeStats:
    """Strongest bridge, longest length and the strength recorded at that length."""
    components = parse_input(lines)
    used = [False] * len(components)
    stats = BridgeStats()

    def build(pins: int, strength: int, length: int) -> None:
        stats.strength = max(stats.strength, strength)
        if length > stats.length:
            stats.length = length
        if length == stats.length and strength > stats.strength_for_longest:
            stats.strength_for_longest = strength
        for i, (a, b) in enumerate(components):
            if not used[i] and pins in (a, b):
                used[i] = True
                build(b if a == pins else a, strength + a + b, length + 1)
                used[i] = False

    build(0, 0, 0)
    return stats