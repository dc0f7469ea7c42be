"""Highest-scoring cookie recipe from a set of ingredients."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from math import prod
from typing import Iterable, Sequence

MAX_INGREDIENTS = 4


@dataclass(frozen=True)
class Ingredient:
    name: str
    capacity: int
    durability: int
    flavor: int
    texture: int
    calories: int


def parse_ingredient(line: str) -> Ingredient:
    parts = line.split()
    return Ingredient(
        name=parts[0][:-1],
        capacity=int(parts[2][:-1]),
        durability=int(parts[4][:-1]),
        flavor=int(parts[6][:-1]),
        texture=int(parts[8][:-1]),
        calories=int(parts[10]),
    )


def score_recipe(ingredients: Sequence[Ingredient], amounts: Sequence[int]) -> int:
    """Product of the non-negative property totals."""
    totals = [0, 0, 0, 0]
    for amount, ingredient in zip(amounts, ingredients):
        totals[0] += amount * ingredient.capacity
        totals[1] += amount * ingredient.durability
        totals[2] += amount * ingredient.flavor
        totals[3] += amount * ingredient.texture
    return prod(max(0, total) for total in totals)


def count_calories(ingredients: Sequence[Ingredient], amounts: Sequence[int]) -> int:
    return sum(amount * ingredient.calories for amount, ingredient in zip(amounts, ingredients))


def best_recipe(
    ingredients: Sequence[Ingredient], total: int, calorie_target: int
) -> int:
    """Best score over amounts summing to total; a positive target fixes calories.

    At most four ingredients are supported; the fourth takes whatever remains.
    """
    count = len(ingredients)
    if count > MAX_INGREDIENTS:
        raise ValueError(f"at most {MAX_INGREDIENTS} ingredients are supported")
    best = 0
    for chosen in product(range(1, total + 1), repeat=min(count, 3)):
        ratios = list(chosen)
        if count == MAX_INGREDIENTS:
            ratios.append(total - sum(chosen))
        if sum(ratios) != total:
            continue
        score = score_recipe(ingredients, ratios)
        if score <= best:
            continue
        if calorie_target == 0 or (
            calorie_target > 0
            and count_calories(ingredients, ratios) == calorie_target
        ):
            best = score
    return best


def _parse(lines: Iterable[str]) -> list[Ingredient]:
    return [parse_ingredient(line) for line in lines]


def solve_part1(lines: Iterable[str]) -> int:
    return best_recipe(_parse(lines), 100, 0)


def solve_part2(lines: Iterable[str]) -> int:
    return best_recipe(_parse(lines), 100, 500)