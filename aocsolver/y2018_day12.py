"""Subterranean sustainability: pots of plants evolving over generations."""

from __future__ import annotations

from typing import Mapping, Sequence

PLANT = "#"
EMPTY = "."
SEPARATOR = " => "
WINDOW_LEFT = 2
WINDOW_RIGHT = 2
WINDOW_SIZE = WINDOW_LEFT + WINDOW_RIGHT + 1


def parse_input(lines: Sequence[str]) -> tuple[str, dict[str, str]]:
    """Initial pots and the rules mapping a five-pot window to the next pot."""
    initial = lines[0].split()[2]
    rules: dict[str, str] = {}
    for line in lines[2:]:
        if not line.strip():
            continue
        pattern, result = line.strip().split(SEPARATOR)
        rules[pattern] = result
    return initial, rules


def transform(pots: str, rules: Mapping[str, str]) -> tuple[str, int]:
    """Next generation trimmed of empty pots, and how far its start moved left.

    The returned shift is subtracted from the running left offset.
    """
    if PLANT not in pots:
        return "", 0
    first, last = pots.index(PLANT), pots.rindex(PLANT)
    left_padding = (WINDOW_SIZE - 1) - first
    right_padding = (WINDOW_SIZE - 1) - (len(pots) - last - 1)
    padded = EMPTY * max(0, left_padding) + pots + EMPTY * max(0, right_padding)
    transformed = "".join(
        rules.get(padded[i - WINDOW_LEFT : i + WINDOW_RIGHT + 1], EMPTY)
        for i in range(WINDOW_LEFT, len(padded) - WINDOW_RIGHT)
    )
    extra_empty = transformed.find(PLANT)
    return transformed.strip(EMPTY), left_padding - WINDOW_LEFT - extra_empty


def sum_pot_numbers(pots: str, left: int) -> int:
    """Sum of the numbers of pots holding a plant; ``left`` numbers the first pot."""
    return sum(i + left for i, pot in enumerate(pots) if pot == PLANT)


def grow(initial: str, rules: Mapping[str, str], generations: int) -> int:
    """Plant pot sum after the generations, extrapolating once the shape is stable."""
    pots, left_offset, pot_sum = initial, 0, 0
    for generation in range(1, generations + 1):
        new_pots, shift = transform(pots, rules)
        if new_pots == pots:
            new_sum = sum_pot_numbers(new_pots, left_offset - shift)
            growth = new_sum - pot_sum
            return new_sum + (generations - generation) * growth
        left_offset -= shift
        pots = new_pots
        pot_sum = sum_pot_numbers(pots, left_offset)
    return pot_sum


def solve_part1(lines: Sequence[str]) -> int:
    initial, rules = parse_input(lines)
    return grow(initial, rules, 20)


def solve_part2(lines: Sequence[str]) -> int:
    initial, rules = parse_input(lines)
    return grow(initial, rules, 50_000_000_000)