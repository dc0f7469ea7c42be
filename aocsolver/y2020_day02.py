"""Password philosophy: check passwords against their policies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class PasswordEntry:
    letter: str
    low: int
    high: int
    password: str

    def valid_part1(self) -> bool:
        """The letter occurs between ``low`` and ``high`` times."""
        return self.low <= self.password.count(self.letter) <= self.high

    def valid_part2(self) -> bool:
        """Exactly one of the two 1-based positions holds the letter."""
        first = self.password[self.low - 1 : self.low]
        second = self.password[self.high - 1 : self.high]
        return self.letter in (first, second) and first != second


def parse_line(line: str) -> PasswordEntry:
    """Parse ``low-high letter: password``."""
    policy, letter, password = line.split()
    low, high = policy.split("-")
    return PasswordEntry(letter[:1], int(low), int(high), password)


def solve_part1(entries: Iterable[PasswordEntry]) -> int:
    return sum(1 for entry in entries if entry.valid_part1())


def solve_part2(entries: Iterable[PasswordEntry]) -> int:
    return sum(1 for entry in entries if entry.valid_part2())