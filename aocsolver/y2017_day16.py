"""Permutation promenade: programs dancing in a line."""

from __future__ import annotations

from typing import Sequence

PROGRAMS = "abcdefghijklmnop"
DANCES = 1_000_000_000


def run_moves(programs: str, moves: Sequence[str]) -> str:
    """Apply spin, exchange and partner moves to the line of programs."""
    dancers = list(programs)
    for move in moves:
        kind, argument = move[0], move[1:]
        if kind == "s":
            cut = len(dancers) - int(argument)
            dancers = dancers[cut:] + dancers[:cut]
        elif kind == "x":
            a, b = (int(index) for index in argument.split("/"))
            dancers[a], dancers[b] = dancers[b], dancers[a]
        elif kind == "p":
            name_a, name_b = argument.split("/")
            a, b = dancers.index(name_a), dancers.index(name_b)
            dancers[a], dancers[b] = dancers[b], dancers[a]
    return "".join(dancers)


def _moves(lines: Sequence[str]) -> list[str]:
    return lines[0].strip().split(",")


def solve_part1(lines: Sequence[str], programs: str = PROGRAMS) -> str:
    return run_moves(programs, _moves(lines))


def solve_part2(
    lines: Sequence[str], programs: str = PROGRAMS, dances: int = DANCES
) -> str:
    """Order after many dances, found by detecting the cycle of orders."""
    moves = _moves(lines)
    seen = {programs}
    cycle = [programs]
    current = programs
    for _ in range(dances):
        current = run_moves(current, moves)
        if current in seen:
            break
        seen.add(current)
        cycle.append(current)
    return cycle[dances % len(seen)]