"""The Halting Problem: run a Turing machine blueprint."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Action:
    """What the machine does for one value under the cursor."""

    write: int
    move: int
    next_state: str


@dataclass
class Blueprint:
    start: str
    steps: int
    states: dict[str, dict[int, Action]]


def _state_name(line: str) -> str:
    return line.rstrip()[-2:-1]


def _parse_action(lines: Sequence[str]) -> Action:
    return Action(
        write=1 if "1" in lines[0] else 0,
        move=-1 if "left" in lines[1] else 1,
        next_state=_state_name(lines[2]),
    )


def parse_program(lines: Sequence[str]) -> Blueprint:
    """Read the starting state, step count and every state's actions."""
    start = _state_name(lines[0])
    steps = int(lines[1].split()[5])
    states: dict[str, dict[int, Action]] = {}
    for i in range(3, len(lines), 10):
        block = lines[i + 1 : i + 9]
        if len(block) < 8:
            raise ValueError(f"state definition at line {i + 1} is incomplete")
        states[_state_name(lines[i])] = {
            0: _parse_action(block[1:4]),
            1: _parse_action(block[5:8]),
        }
    return Blueprint(start=start, steps=steps, states=states)


def run_blueprint(blueprint: Blueprint) -> int:
    """Run the machine and return the number of ones left on the tape."""
    tape: defaultdict[int, int] = defaultdict(int)
    cursor, state = 0, blueprint.start
    for _ in range(blueprint.steps):
        action = blueprint.states[state][tape[cursor]]
        tape[cursor] = action.write
        cursor += action.move
        state = action.next_state
    return sum(1 for value in tape.values() if value == 1)


def solve_part1(lines: Sequence[str]) -> int:
    return run_blueprint(parse_program(lines))