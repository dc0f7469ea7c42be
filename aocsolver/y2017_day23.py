"""Coprocessor conflagration: counting multiplications and composites."""

from __future__ import annotations

from math import isqrt
from typing import Mapping, Sequence


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def _value(token: str, registers: Mapping[str, int]) -> int:
    """Register value if the token names a set register, else its number or 0."""
    if token in registers:
        return registers[token]
    try:
        return int(token)
    except ValueError:
        return 0


def solve_part1(lines: Sequence[str]) -> int:
    """Number of ``mul`` instructions executed before the program ends."""
    registers: dict[str, int] = {}
    multiplications = 0
    pc = 0
    while 0 <= pc < len(lines):
        op, target, *rest = lines[pc].split()
        y = _value(rest[0], registers) if rest else 0
        offset = 1
        if op == "set":
            registers[target] = y
        elif op == "sub":
            registers[target] = registers.get(target, 0) - y
        elif op == "mul":
            registers[target] = registers.get(target, 0) * y
            multiplications += 1
        elif op == "jnz":
            if _value(target, registers) != 0:
                offset = y
        pc += offset
    return multiplications


def _seed(lines: Sequence[str]) -> int:
    parts = lines[0].split() if lines else []
    if len(parts) != 3 or parts[:2] != ["set", "b"]:
        raise ValueError("the program must start by setting register b")
    return int(parts[2])


def solve_part2(lines: Sequence[str]) -> int:
    """Value left in register h when register a starts at 1.

    The program counts composite numbers from ``b * 100 + 100000`` up to
    17000 more, in steps of 17; ``b`` comes from the first instruction.
    """
    start = _seed(lines) * 100 + 100_000
    stop = start + 17_000
    return sum(1 for b in range(start, stop + 1, 17) if not is_prime(b))