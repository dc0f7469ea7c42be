"""Conditional register instructions."""

from __future__ import annotations

import operator
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Iterable

_COMPARATORS: dict[str, Callable[[int, int], bool]] = {
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
}


@dataclass(frozen=True)
class Instruction:
    """``destination operation value if operand comparator compare_value``."""

    destination: str
    operation: str
    value: int
    operand: str
    comparator: str
    compare_value: int

    @property
    def delta(self) -> int:
        return -self.value if self.operation == "dec" else self.value

    def condition_holds(self, registers: dict[str, int]) -> bool:
        compare = _COMPARATORS.get(self.comparator)
        return compare is not None and compare(
            registers[self.operand], self.compare_value
        )


def parse(lines: Iterable[str]) -> list[Instruction]:
    instructions = []
    for line in lines:
        parts = line.split()
        instructions.append(
            Instruction(
                destination=parts[0],
                operation=parts[1],
                value=int(parts[2]),
                operand=parts[4],
                comparator=parts[5],
                compare_value=int(parts[6]),
            )
        )
    return instructions


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Largest register value at the end, and the largest ever held."""
    registers: defaultdict[str, int] = defaultdict(int)
    highest_ever = 0
    for instruction in parse(lines):
        if instruction.condition_holds(registers):
            registers[instruction.destination] += instruction.delta
            highest_ever = max(highest_ever, registers[instruction.destination])
    return max([0, *registers.values()]), highest_ever