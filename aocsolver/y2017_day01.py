"""Inverse captcha: sum digits that match a digit further along a circular list."""

from __future__ import annotations

from typing import Sequence


def parse_digits(line: str) -> list[int]:
    return [int(char) for char in line.strip()]


def inverse_captcha(digits: Sequence[int], offset: int) -> int:
    """Sum of digits equal to the digit ``offset`` places ahead, wrapping around."""
    size = len(digits)
    return sum(
        digit for i, digit in enumerate(digits) if digit == digits[(i + offset) % size]
    )


def solve_part1(lines: Sequence[str]) -> int:
    return inverse_captcha(parse_digits(lines[0]), 1)


def solve_part2(lines: Sequence[str]) -> int:
    digits = parse_digits(lines[0])
    return inverse_captcha(digits, len(digits) // 2)