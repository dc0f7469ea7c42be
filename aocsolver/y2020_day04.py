"""Passport processing: required fields and their validation rules."""

from __future__ import annotations

import re
from typing import Iterable

REQUIRED_KEYS = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid")
EYE_COLOURS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})

_INTEGER = re.compile(r"[+-]?[0-9]+")
_HEX = re.compile(r"[0-9a-fA-F]+")


def _to_int(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def _year_between(value: str, low: int, high: int) -> bool:
    if len(value) != 4:
        return False
    number = _to_int(value)
    return number is not None and low <= number <= high


def validate_field(key: str, value: str) -> bool:
    """Whether a single passport field holds an acceptable value."""
    if key == "byr":
        return _year_between(value, 1920, 2002)
    if key == "iyr":
        return _year_between(value, 2010, 2020)
    if key == "eyr":
        return _year_between(value, 2020, 2030)
    if key == "hgt":
        number = _to_int(value[:-2])
        if number is None:
            return False
        unit = value[-2:]
        if unit == "in":
            return 59 <= number <= 76
        if unit == "cm":
            return 150 <= number <= 193
        return False
    if key == "hcl":
        digits = value[1:]
        return (
            value[:1] == "#"
            and _HEX.fullmatch(digits) is not None
            and int(digits, 16) < 2**64
        )
    if key == "ecl":
        return value in EYE_COLOURS
    if key == "pid":
        return len(value) == 9 and _to_int(value) is not None
    return True


def is_valid_part1(passport: str) -> bool:
    """Every required field is present."""
    return all(f"{key}:" in passport for key in REQUIRED_KEYS)


def is_valid_part2(passport: str) -> bool:
    """Every required field is present and every field holds a valid value."""
    if not is_valid_part1(passport):
        return False
    for pair in passport.split():
        parts = pair.split(":")
        if len(parts) < 2:
            raise ValueError(f"malformed passport field {pair!r}")
        if not validate_field(parts[0], parts[1]):
            return False
    return True


def solve_part1(passports: Iterable[str]) -> int:
    return sum(1 for passport in passports if is_valid_part1(passport))


def solve_part2(passports: Iterable[str]) -> int:
    return sum(1 for passport in passports if is_valid_part2(passport))