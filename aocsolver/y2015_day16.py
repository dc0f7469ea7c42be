"""Identify which aunt Sue sent the gift."""

from __future__ import annotations

from typing import Callable, Iterable

_EXACT = {
    "children": 3,
    "cats": 7,
    "samoyeds": 2,
    "pomeranians": 3,
    "akitas": 0,
    "vizslas": 0,
    "goldfish": 5,
    "trees": 3,
    "cars": 2,
    "perfumes": 1,
}
_GREATER = ("cats", "trees")
_FEWER = ("pomeranians", "goldfish")


def parse_sue_number(line: str) -> int:
    return int(line.split(" ")[1][:-1])


def parse_quantity(text: str, item: str) -> int:
    """Quantity recorded for an item; unparsable values count as zero."""
    value = text.split(f"{item}: ")[1].split(",")[0]
    try:
        return int(value)
    except ValueError:
        return 0


def _contradicts(line: str, item: str) -> bool:
    return item in line and f"{item}: {_EXACT[item]}" not in line


def matches_part1(line: str) -> bool:
    return not any(_contradicts(line, item) for item in _EXACT)


def matches_part2(line: str) -> bool:
    for item, expected in _EXACT.items():
        if item in _GREATER:
            if item in line and parse_quantity(line, item) <= expected:
                return False
        elif item in _FEWER:
            if item in line and parse_quantity(line, item) >= expected:
                return False
        elif _contradicts(line, item):
            return False
    return True


def _first_match(lines: Iterable[str], matches: Callable[[str], bool]) -> int:
    for line in lines:
        if matches(line):
            return parse_sue_number(line)
    raise ValueError("no Sue matches the analysis")


def solve_part1(lines: Iterable[str]) -> int:
    return _first_match(lines, matches_part1)


def solve_part2(lines: Iterable[str]) -> int:
    return _first_match(lines, matches_part2)