"""Ways to fill containers to exactly a target volume."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Iterator, Sequence


def _filling_sizes(containers: Sequence[int], target: int) -> Iterator[int]:
    for size in range(1, len(containers) + 1):
        for chosen in combinations(containers, size):
            if sum(chosen) == target:
                yield size


def solve_part1(containers: Sequence[int], target: int = 150) -> int:
    """Number of container combinations holding exactly the target."""
    return sum(1 for _ in _filling_sizes(containers, target))


def solve_part2(containers: Sequence[int], target: int = 150) -> int:
    """Number of combinations that use the fewest containers."""
    counts = Counter(_filling_sizes(containers, target))
    fewest = min([len(containers), *counts])
    return counts[fewest]