"""Flawed frequency transmission."""

from __future__ import annotations

from typing import Sequence

_PATTERN = (0, 1, 0, -1)
PHASES = 100


def fft(signal: str) -> str:
    """One phase of the transmission: each output digit mixes every input digit."""
    digits = [int(char) for char in signal]
    output = []
    for i in range(len(digits)):
        total = sum(
            digit * _PATTERN[(j + 1) // (i + 1) % 4] for j, digit in enumerate(digits)
        )
        output.append(str(abs(total) % 10))
    return "".join(output)


def solve_part1(lines: Sequence[str]) -> str:
    """First eight digits after a hundred phases."""
    signal = lines[0].strip()
    for _ in range(PHASES):
        signal = fft(signal)
    return signal[:8]