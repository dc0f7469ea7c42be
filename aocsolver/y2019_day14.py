"""Space stoichiometry: ore needed to produce fuel."""

from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Mapping, MutableMapping, Sequence

ORE = "ORE"
FUEL = "FUEL"
TRILLION = 1_000_000_000_000


@dataclass(frozen=True)
class Chemical:
    quantity: int
    name: str


Reactions = Mapping[str, tuple[Sequence[Chemical], Chemical]]


def _parse_chemicals(text: str) -> list[Chemical]:
    chemicals = []
    for component in text.split(", "):
        quantity, name = component.split()
        chemicals.append(Chemical(int(quantity), name))
    return chemicals


def parse_input(lines: Iterable[str]) -> dict[str, tuple[list[Chemical], Chemical]]:
    """Map each product to the ingredients of its reaction and the amount made."""
    reactions: dict[str, tuple[list[Chemical], Chemical]] = {}
    for line in lines:
        if not line.strip():
            continue
        inputs, output = line.strip().split(" => ")
        product = _parse_chemicals(output)[0]
        reactions[product.name] = (_parse_chemicals(inputs), product)
    return reactions


def _produce(
    name: str, quantity: int, reactions: Reactions, stock: MutableMapping[str, int]
) -> int:
    if name == ORE:
        return quantity
    available = stock[name]
    if available >= quantity:
        stock[name] = available - quantity
        return 0
    quantity -= available
    stock[name] = 0
    try:
        ingredients, product = reactions[name]
    except KeyError:
        raise ValueError(f"no reaction produces {name}") from None
    batches = -(-quantity // product.quantity)
    ore = sum(
        _produce(item.name, item.quantity * batches, reactions, stock)
        for item in ingredients
    )
    stock[name] += batches * product.quantity - quantity
    return ore


def ore_for_fuel(quantity: int, reactions: Reactions) -> int:
    """Ore needed to produce the given amount of fuel, reusing leftovers."""
    return _produce(FUEL, quantity, reactions, defaultdict(int))


def solve_part1(lines: Iterable[str]) -> int:
    return ore_for_fuel(1, parse_input(lines))


def solve_part2(lines: Iterable[str]) -> int:
    """Most fuel that a trillion ore can produce."""
    reactions = parse_input(lines)
    first_too_costly = bisect_right(
        range(TRILLION), TRILLION, key=lambda n: ore_for_fuel(n, reactions)
    )
    return first_too_costly - 1