"""Recursive circus: tower of balanced programs."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Mapping, Sequence

_NAME = re.compile(r"[a-z]+")
_WEIGHT = re.compile(r"[0-9]+")

Children = Mapping[str, Sequence[str]]
Weights = Mapping[str, int]


def parse(lines: Iterable[str]) -> tuple[dict[str, list[str]], dict[str, int]]:
    """Children and own weight of each program."""
    children: dict[str, list[str]] = {}
    weights: dict[str, int] = {}
    for line in lines:
        parent, *held = _NAME.findall(line)
        weight = _WEIGHT.search(line)
        children[parent] = held
        weights[parent] = int(weight.group()) if weight else 0
    return children, weights


def total_weight(disc: str, children: Children, weights: Weights) -> int:
    """Weight of a program and everything it carries."""
    return weights.get(disc, 0) + sum(
        total_weight(child, children, weights) for child in children.get(disc, ())
    )


def is_balanced(disc: str, children: Children, weights: Weights) -> bool:
    """True when every sub-tower held by the disc weighs the same."""
    return (
        len({total_weight(c, children, weights) for c in children.get(disc, ())}) == 1
    )


def find_unbalanced(
    disc: str, children: Children, weights: Weights
) -> tuple[str, int]:
    """The child whose tower differs from the rest, and the weight it should have."""
    towers = {c: total_weight(c, children, weights) for c in children.get(disc, ())}
    if not towers:
        raise ValueError(f"{disc!r} holds no programs")
    target = Counter(towers.values()).most_common(1)[0][0]
    for child, weight in towers.items():
        if weight != target:
            return child, target
    raise ValueError(f"the tower on {disc!r} is already balanced")


def solve_part1(lines: Iterable[str]) -> str:
    """Name of the bottom program, the only one named exactly once."""
    counts = Counter(_NAME.findall("\n".join(lines)))
    return next((name for name, count in counts.items() if count == 1), "")


def solve_part2(lines: Iterable[str], base: str) -> tuple[int, str]:
    """Weight the wrong program needs to balance the tower, and its name."""
    children, weights = parse(lines)
    current, target = base, 0
    while not is_balanced(current, children, weights):
        current, target = find_unbalanced(current, children, weights)
    difference = target - total_weight(current, children, weights)
    return difference + weights[current], current