"""Packet scanners in a layered firewall."""

from __future__ import annotations

from itertools import count
from typing import Iterable, Mapping


def parse_input(lines: Iterable[str]) -> dict[int, int]:
    """Map each layer depth to its scanner range."""
    firewall: dict[int, int] = {}
    for line in lines:
        depth, depth_range = line.split(": ")
        firewall[int(depth)] = int(depth_range)
    return firewall


def scanner_position(depth_range: int, time: int) -> int:
    """Position of a scanner sweeping back and forth at the given time."""
    if depth_range < 2:
        raise ValueError(f"scanner range must be at least 2, got {depth_range}")
    period = 2 * (depth_range - 1)
    offset = time % period
    if offset > depth_range - 1:
        return period - offset
    return offset


def simulate_trip(
    firewall: Mapping[int, int], delay: int = 0, short_circuit: bool = False
) -> tuple[int, int]:
    """Severity of the trip and how many times the packet was caught."""
    severity = caught = 0
    for depth, depth_range in sorted(firewall.items()):
        if scanner_position(depth_range, depth + delay) == 0:
            severity += depth * depth_range
            caught += 1
            if short_circuit:
                break
    return severity, caught


def solve_part1(lines: Iterable[str]) -> int:
    return simulate_trip(parse_input(lines), 0, False)[0]


def solve_part2(lines: Iterable[str]) -> int:
    """Smallest delay that lets the packet through without being caught."""
    firewall = parse_input(lines)
    return next(
        delay for delay in count() if simulate_trip(firewall, delay, True)[1] == 0
    )