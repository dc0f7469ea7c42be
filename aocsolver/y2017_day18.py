"""Duet: a small assembly language played as sounds or as messages."""

from __future__ import annotations

import operator
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Mapping, Sequence


def _remainder(a: int, b: int) -> int:
    """Remainder taking the sign of the dividend."""
    rest = abs(a) % abs(b)
    return rest if a >= 0 else -rest


_ARITHMETIC: dict[str, Callable[[int, int], int]] = {
    "set": lambda _, y: y,
    "add": operator.add,
    "mul": operator.mul,
    "mod": _remainder,
}


def _operand(token: str, registers: Mapping[str, int]) -> int:
    """Register value if the token names a set register, else its number or 0."""
    if token in registers:
        return registers[token]
    try:
        return int(token)
    except ValueError:
        return 0


def _decode(line: str, registers: Mapping[str, int]) -> tuple[str, str, int]:
    op, target, *rest = line.split()
    return op, target, _operand(rest[0], registers) if rest else 0


def solve_part1(lines: Sequence[str]) -> int:
    """Frequency of the last sound played when a recover first fires."""
    registers: dict[str, int] = {}
    last_sound = 0
    pc = 0
    while 0 <= pc < len(lines):
        op, target, y = _decode(lines[pc], registers)
        offset = 1
        if op in _ARITHMETIC:
            registers[target] = _ARITHMETIC[op](registers.get(target, 0), y)
        elif op == "snd":
            last_sound = _operand(target, registers)
        elif op == "rcv":
            if _operand(target, registers) != 0:
                return last_sound
        elif op == "jgz":
            if _operand(target, registers) > 0:
                offset = y
        pc += offset
    return 0


@dataclass(eq=False)
class Program:
    """One copy of the program exchanging values through queues."""

    instructions: Sequence[str]
    pid: int
    inbox: deque[int] = field(default_factory=deque)
    outbox: deque[int] = field(default_factory=deque)
    registers: dict[str, int] = field(init=False)
    pc: int = field(default=0, init=False)
    sent: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.registers = {"p": self.pid}

    @property
    def terminated(self) -> bool:
        return not 0 <= self.pc < len(self.instructions)

    def run(self) -> int:
        """Run until blocked on an empty inbox or finished; return steps executed."""
        executed = 0
        while not self.terminated:
            op, target, y = _decode(self.instructions[self.pc], self.registers)
            offset = 1
            if op in _ARITHMETIC:
                self.registers[target] = _ARITHMETIC[op](
                    self.registers.get(target, 0), y
                )
            elif op == "snd":
                self.outbox.append(_operand(target, self.registers))
                self.sent += 1
            elif op == "rcv":
                if not self.inbox:
                    break
                self.registers[target] = self.inbox.popleft()
            elif op == "jgz":
                if _operand(target, self.registers) > 0:
                    offset = y
            self.pc += offset
            executed += 1
        return executed


def solve_part2(lines: Sequence[str]) -> int:
    """Values sent by program 1 before both programs finish or deadlock."""
    to_second: deque[int] = deque()
    to_first: deque[int] = deque()
    first = Program(lines, 0, inbox=to_first, outbox=to_second)
    second = Program(lines, 1, inbox=to_second, outbox=to_first)
    while first.run() + second.run():
        pass
    return second.sent