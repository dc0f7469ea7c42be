"""Digital plumber: groups of programs connected by pipes."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

Graph = Mapping[str, Sequence[str]]


def parse_graph(lines: Iterable[str]) -> dict[str, list[str]]:
    """Map each program to the programs it has pipes to."""
    graph: dict[str, list[str]] = {}
    for line in lines:
        node, neighbours = line.split(" <-> ")
        graph[node.strip()] = [name.strip() for name in neighbours.split(", ")]
    return graph


def reachable(graph: Graph, start: str) -> set[str]:
    """Every program reachable from ``start``, including ``start`` itself."""
    visited: set[str] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        stack.extend(graph.get(node, ()))
    return visited


def solve_part1(lines: Iterable[str]) -> int:
    """Size of the group containing program 0."""
    return len(reachable(parse_graph(lines), "0"))


def solve_part2(lines: Iterable[str]) -> int:
    """Number of separate groups, starting the count from program 0."""
    remaining = parse_graph(lines)
    start: str | None = "0"
    groups = 0
    while remaining and start is not None:
        group = reachable(remaining, start)
        groups += 1
        for node in group:
            remaining.pop(node, None)
        start = next(iter(remaining), None)
    return groups