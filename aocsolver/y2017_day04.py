"""Passphrase validation."""

from __future__ import annotations

from typing import Iterable


def is_valid(passphrase: str) -> bool:
    """True when no word appears twice."""
    words = passphrase.split()
    return len(words) == len(set(words))


def _sorted_letters(passphrase: str) -> str:
    return " ".join("".join(sorted(word)) for word in passphrase.split())


def solve_part1(lines: Iterable[str]) -> int:
    return sum(1 for line in lines if is_valid(line))


def solve_part2(lines: Iterable[str]) -> int:
    """Count passphrases in which no two words are anagrams."""
    return sum(1 for line in lines if is_valid(_sorted_letters(line)))