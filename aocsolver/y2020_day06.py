"""Custom customs: questions answered yes within groups."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def solve_part1(groups: Iterable[str]) -> int:
    """Sum over groups of questions anyone answered yes."""
    return sum(len(set(group.replace("\n", ""))) for group in groups)


def solve_part2(groups: Iterable[str]) -> int:
    """Sum over groups of questions everyone answered yes."""
    total = 0
    for group in groups:
        people = group.count("\n") + 1
        answers = Counter(group.replace("\n", ""))
        total += sum(1 for count in answers.values() if count == people)
    return total