"""Buy equipment to beat the boss in an RPG duel."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

PLAYER_HIT_POINTS = 100


@dataclass(frozen=True)
class Item:
    cost: int
    damage: int
    armor: int


@dataclass(frozen=True)
class Stats:
    hit_points: int
    damage: int
    armor: int


@dataclass(frozen=True)
class Shop:
    weapons: tuple[Item, ...]
    armor: tuple[Item, ...]
    rings: tuple[Item, ...]


def parse_boss(lines: Sequence[str]) -> Stats:
    hit_points, damage, armor = (int(line.split(": ")[1]) for line in lines[:3])
    return Stats(hit_points=hit_points, damage=damage, armor=armor)


def damage_dealt(damage: int, armor: int) -> int:
    """Damage an attack does against armor; always at least one."""
    return max(1, damage - armor)


def build_shop() -> Shop:
    return Shop(
        weapons=(
            Item(8, 4, 0),
            Item(10, 5, 0),
            Item(25, 6, 0),
            Item(40, 7, 0),
            Item(74, 8, 0),
        ),
        armor=(
            Item(13, 0, 1),
            Item(31, 0, 2),
            Item(53, 0, 3),
            Item(75, 0, 4),
            Item(102, 0, 5),
        ),
        rings=(
            Item(25, 1, 0),
            Item(50, 2, 0),
            Item(100, 3, 0),
            Item(20, 0, 1),
            Item(40, 0, 2),
            Item(80, 0, 3),
        ),
    )


def simulate_game(player: Stats, boss: Stats) -> bool:
    """Play the duel with the player striking first; True if the player wins."""
    player_hp, boss_hp = player.hit_points, boss.hit_points
    players_turn = True
    while player_hp > 0 and boss_hp > 0:
        if players_turn:
            boss_hp -= damage_dealt(player.damage, boss.armor)
        else:
            player_hp -= damage_dealt(boss.damage, player.armor)
        players_turn = not players_turn
    return player_hp > 0


def stat_blocks() -> list[tuple[Stats, int]]:
    """Every legal loadout as player stats paired with its gold cost."""
    shop = build_shop()
    ring_options: list[tuple[Item, ...]] = [()]
    ring_options.extend((ring,) for ring in shop.rings)
    ring_options.extend(combinations(shop.rings, 2))
    armor_options: list[tuple[Item, ...]] = [()]
    armor_options.extend((piece,) for piece in shop.armor)

    blocks = []
    for weapon in shop.weapons:
        for armor in armor_options:
            for rings in ring_options:
                items = (weapon, *armor, *rings)
                stats = Stats(
                    hit_points=PLAYER_HIT_POINTS,
                    damage=sum(item.damage for item in items),
                    armor=sum(item.armor for item in items),
                )
                blocks.append((stats, sum(item.cost for item in items)))
    return blocks


def solve_part1(lines: Sequence[str]) -> int:
    """Least gold that still wins the fight."""
    boss = parse_boss(lines)
    return min(
        [sys.maxsize, *(gold for stats, gold in stat_blocks() if simulate_game(stats, boss))]
    )


def solve_part2(lines: Sequence[str]) -> int:
    """Most gold that still loses the fight."""
    boss = parse_boss(lines)
    return max(
        [0, *(gold for stats, gold in stat_blocks() if not simulate_game(stats, boss))]
    )