"""Memory bank reallocation cycles."""

from __future__ import annotations

from typing import Sequence


def solve(lines: Sequence[str]) -> tuple[int, int]:
    """Cycles before a configuration repeats, and the length of that loop."""
    banks = [int(blocks) for blocks in lines[0].split()]
    seen: dict[tuple[int, ...], int] = {}
    cycles = 0
    while (key := tuple(banks)) not in seen:
        seen[key] = cycles
        blocks = max(banks)
        largest = banks.index(blocks)
        banks[largest] = 0
        for i in range(1, blocks + 1):
            banks[(largest + i) % len(banks)] += 1
        cycles += 1
    return cycles, cycles - seen[key]