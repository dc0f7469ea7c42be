"""Fractal art: grow a pixel pattern by repeatedly applying enhancement rules."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

START = ".#./..#/###"
ON = "#"

Pixels = Sequence[Sequence[str]]


def parse_rules(lines: Iterable[str]) -> dict[str, str]:
    """Map each input pattern to the pattern it is enhanced into."""
    rules: dict[str, str] = {}
    for line in lines:
        if not line.strip():
            continue
        pattern, result = line.strip().split(" => ")
        rules[pattern] = result
    return rules


def _rows(pixels: Pixels) -> list[str]:
    return ["".join(row) for row in pixels]


def to_pattern(pixels: Pixels) -> str:
    """Rows joined by slashes."""
    return "/".join(_rows(pixels))


def from_pattern(pattern: str) -> list[str]:
    """Rows of a slash-separated pattern."""
    return pattern.split("/")


def _rotate(rows: Sequence[str]) -> list[str]:
    """Rotate a square a quarter turn clockwise."""
    return [
        "".join(row[col] for row in reversed(rows)) for col in range(len(rows[0]))
    ]


def _flip(rows: Sequence[str]) -> list[str]:
    return [row[::-1] for row in rows]


def variants(pixels: Pixels) -> list[list[str]]:
    """Every distinct rotation and reflection of a square, the original first."""
    found: list[list[str]] = []
    rows = _rows(pixels)
    for base in (rows, _flip(rows)):
        current = base
        for _ in range(4):
            if current not in found:
                found.append(current)
            current = _rotate(current)
    return found


def _enhance(block: Pixels, rules: Mapping[str, str]) -> list[str]:
    for variant in variants(block):
        result = rules.get(to_pattern(variant))
        if result is not None:
            return from_pattern(result)
    raise ValueError(f"no rule matches {to_pattern(block)!r}")


def transform(pixels: Pixels, rules: Mapping[str, str]) -> list[str]:
    """Split the image into 2x2 or 3x3 blocks and enhance each of them."""
    rows = _rows(pixels)
    height, width = len(rows), len(rows[0]) if rows else 0
    if height % 2 == 0 and width % 2 == 0:
        chunk = 2
    elif height % 3 == 0 and width % 3 == 0:
        chunk = 3
    else:
        raise ValueError(f"image size {width}x{height} is not divisible by 2 or 3")
    result: list[str] = []
    for top in range(0, height, chunk):
        blocks = [
            _enhance([row[left : left + chunk] for row in rows[top : top + chunk]], rules)
            for left in range(0, width, chunk)
        ]
        result.extend(
            "".join(block[line] for block in blocks) for line in range(len(blocks[0]))
        )
    return result


def count_on(pixels: Pixels) -> int:
    return sum(row.count(ON) for row in _rows(pixels))


def generate_art(lines: Iterable[str], iterations: int) -> int:
    """Pixels left on after enhancing the starting pattern the given times."""
    rules = parse_rules(lines)
    pixels = from_pattern(START)
    for _ in range(iterations):
        pixels = transform(pixels, rules)
    return count_on(pixels)