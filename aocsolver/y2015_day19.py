"""Molecule replacements for a reindeer medicine machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Replacement:
    """Replace an occurrence of ``target`` by ``substitute``."""

    target: str
    substitute: str


def parse_replacements(lines: Iterable[str]) -> list[Replacement]:
    result = []
    for line in lines:
        target, substitute = line.split(" => ")[:2]
        result.append(Replacement(target, substitute))
    return result


def parse_reversed_replacements(lines: Iterable[str]) -> list[Replacement]:
    """Replacements that undo the listed rules."""
    return [Replacement(r.substitute, r.target) for r in parse_replacements(lines)]


def single_replacements(molecule: str, replacement: Replacement) -> list[str]:
    """Distinct molecules made by replacing one occurrence, in order found."""
    found: dict[str, None] = {}
    for i in range(len(molecule)):
        tail = molecule[i:]
        if replacement.target in tail:
            candidate = molecule[:i] + tail.replace(
                replacement.target, replacement.substitute, 1
            )
            found.setdefault(candidate)
    return list(found)


def distinct_molecules(
    molecules: Iterable[str], replacements: Sequence[Replacement]
) -> list[str]:
    """All distinct molecules reachable in a single replacement step."""
    found: dict[str, None] = {}
    for molecule in molecules:
        for replacement in replacements:
            for candidate in single_replacements(molecule, replacement):
                found.setdefault(candidate)
    return list(found)


def solve_part1(blocks: Sequence[str]) -> int:
    replacements = parse_replacements(blocks[0].split("\n"))
    return len(distinct_molecules([blocks[1].strip()], replacements))


def solve_part2(blocks: Sequence[str]) -> int:
    """Greedy count of steps to reduce the molecule back to ``e``.

    Raises ValueError when a full pass over the rules makes no progress.
    """
    current = blocks[1].strip()
    replacements = parse_reversed_replacements(blocks[0].split("\n"))
    steps = 0
    while current != "e":
        progressed = False
        for replacement in replacements:
            if replacement.target in current:
                steps += 1
                progressed = True
                current = current.replace(
                    replacement.target, replacement.substitute, 1
                )
        if not progressed:
            raise ValueError(f"cannot reduce {current!r} any further")
    return steps