"""Sporifica virus: a carrier bursting across an infinite grid."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping, Sequence

Coords = tuple[int, int]


class NodeState(Enum):
    CLEAN = 1
    WEAKENED = 2
    INFECTED = 3
    FLAGGED = 4


Rule = Callable[[Coords], "tuple[NodeState, Coords]"]


def turn_left(velocity: Coords) -> Coords:
    """Rotate a direction a quarter turn counterclockwise (y points up)."""
    x, y = velocity
    return (-y, x)


def turn_right(velocity: Coords) -> Coords:
    """Rotate a direction a quarter turn clockwise (y points up)."""
    x, y = velocity
    return (y, -x)


def _reverse(velocity: Coords) -> Coords:
    return (-velocity[0], -velocity[1])


SIMPLE_RULES: dict[NodeState, Rule] = {
    NodeState.CLEAN: lambda v: (NodeState.INFECTED, turn_left(v)),
    NodeState.INFECTED: lambda v: (NodeState.CLEAN, turn_right(v)),
}

EVOLVED_RULES: dict[NodeState, Rule] = {
    NodeState.CLEAN: lambda v: (NodeState.WEAKENED, turn_left(v)),
    NodeState.WEAKENED: lambda v: (NodeState.INFECTED, v),
    NodeState.INFECTED: lambda v: (NodeState.FLAGGED, turn_right(v)),
    NodeState.FLAGGED: lambda v: (NodeState.CLEAN, _reverse(v)),
}


def parse_input(lines: Sequence[str]) -> tuple[dict[Coords, NodeState], Coords]:
    """Node states keyed by (x, -row), and the centre of the map."""
    states: dict[Coords, NodeState] = {}
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            states[(col, -row)] = (
                NodeState.INFECTED if char == "#" else NodeState.CLEAN
            )
    return states, (len(lines[0]) // 2, -(len(lines) // 2))


def run_bursts(
    states: Mapping[Coords, NodeState],
    origin: Coords,
    rules: Mapping[NodeState, Rule],
    bursts: int,
) -> int:
    """Number of bursts that leave a node infected; ``states`` is not changed."""
    nodes = dict(states)
    x, y = origin
    velocity: Coords = (0, 1)
    infections = 0
    for _ in range(bursts):
        state = nodes.get((x, y), NodeState.CLEAN)
        new_state, velocity = rules[state](velocity)
        nodes[(x, y)] = new_state
        if new_state is NodeState.INFECTED:
            infections += 1
        x += velocity[0]
        y += velocity[1]
    return infections


def solve_part1(lines: Sequence[str], bursts: int = 10_000) -> int:
    states, origin = parse_input(lines)
    return run_bursts(states, origin, SIMPLE_RULES, bursts)


def solve_part2(lines: Sequence[str], bursts: int = 10_000_000) -> int:
    states, origin = parse_input(lines)
    return run_bursts(states, origin, EVOLVED_RULES, bursts)