"""A tiny two-register computer."""

from __future__ import annotations

from typing import Mapping, Sequence


def _halve(value: int) -> int:
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def run_program(
    instructions: Sequence[str], registers: Mapping[str, int]
) -> dict[str, int]:
    """Execute until the program counter leaves the program; return the registers."""
    regs = dict(registers)
    pc = 0
    while 0 <= pc < len(instructions):
        op, *args = instructions[pc].split()
        offset = 1
        if op == "hlf":
            regs[args[0]] = _halve(regs.get(args[0], 0))
        elif op == "tpl":
            regs[args[0]] = regs.get(args[0], 0) * 3
        elif op == "inc":
            regs[args[0]] = regs.get(args[0], 0) + 1
        elif op == "jmp":
            offset = int(args[0])
        elif op == "jie":
            if regs.get(args[0][:-1], 0) % 2 == 0:
                offset = int(args[1])
        elif op == "jio":
            if regs.get(args[0][:-1], 0) == 1:
                offset = int(args[1])
        pc += offset
    return regs


def solve_part1(lines: Sequence[str]) -> int:
    return run_program(lines, {"a": 0, "b": 0})["b"]


def solve_part2(lines: Sequence[str]) -> int:
    return run_program(lines, {"a": 1, "b": 0})["b"]