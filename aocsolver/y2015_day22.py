"""Wizard duel: find the cheapest way to win with spells."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Callable, Sequence


@dataclass(frozen=True)
class GameState:
    boss_hp: int
    boss_damage: int
    player_hp: int = 50
    mana: int = 500
    mana_spent: int = 0
    shield_duration: int = 0
    poison_duration: int = 0
    recharge_duration: int = 0

    def is_over(self) -> bool:
        return self.boss_hp <= 0 or self.player_hp <= 0 or self.mana <= 0

    def player_wins(self) -> bool:
        return self.is_over() and self.boss_hp <= 0

    @property
    def armor(self) -> int:
        return 7 if self.shield_duration > 0 else 0


Spell = Callable[[GameState], GameState]


def _spend(state: GameState, cost: int, **changes: int) -> GameState:
    return replace(
        state, mana=state.mana - cost, mana_spent=state.mana_spent + cost, **changes
    )


def magic_missile(state: GameState) -> GameState:
    return _spend(state, 53, boss_hp=state.boss_hp - 4)


def drain(state: GameState) -> GameState:
    return _spend(state, 73, boss_hp=state.boss_hp - 2, player_hp=state.player_hp + 2)


def shield(state: GameState) -> GameState:
    return _spend(state, 113, shield_duration=6)


def poison(state: GameState) -> GameState:
    return _spend(state, 173, poison_duration=6)


def recharge(state: GameState) -> GameState:
    return _spend(state, 229, recharge_duration=5)


def resolve_effects(state: GameState) -> GameState:
    """Apply and tick down every active effect."""
    if state.shield_duration > 0:
        state = replace(state, shield_duration=state.shield_duration - 1)
    if state.poison_duration > 0:
        state = replace(
            state, boss_hp=state.boss_hp - 3, poison_duration=state.poison_duration - 1
        )
    if state.recharge_duration > 0:
        state = replace(
            state, mana=state.mana + 101, recharge_duration=state.recharge_duration - 1
        )
    return state


def boss_turn(state: GameState) -> GameState:
    damage = state.boss_damage - state.armor
    return replace(state, player_hp=state.player_hp - (damage if damage > 1 else 1))


def play_round(state: GameState, spell: Spell, hard: bool) -> GameState:
    """Play the player's turn with the given spell and then the boss's turn."""
    if hard:
        state = replace(state, player_hp=state.player_hp - 1)
    for action in (resolve_effects, spell, resolve_effects, boss_turn):
        if state.is_over():
            return state
        state = action(state)
    return state


def spell_options(state: GameState) -> list[Spell]:
    """Spells that can be cast at the start of the next player turn."""
    mana = state.mana + (101 if state.recharge_duration > 0 else 0)
    options: list[Spell] = []
    if mana >= 53:
        options.append(magic_missile)
    if mana >= 73:
        options.append(drain)
    if state.shield_duration <= 1 and mana >= 113:
        options.append(shield)
    if state.poison_duration <= 1 and mana >= 173:
        options.append(poison)
    if state.recharge_duration <= 1 and mana >= 229:
        options.append(recharge)
    return options


def find_best_game(initial: GameState, hard: bool) -> GameState:
    """Winning end state with the least mana spent, or initial if none wins."""
    stack = [initial]
    least, best = sys.maxsize, initial
    while stack:
        current = stack.pop()
        if current.is_over():
            if current.player_wins() and current.mana_spent < least:
                least, best = current.mana_spent, current
            continue
        for spell in spell_options(current):
            nxt = play_round(current, spell, hard)
            if nxt.mana_spent >= least:
                continue
            if nxt.is_over():
                if nxt.player_wins():
                    least, best = nxt.mana_spent, nxt
            else:
                stack.append(nxt)
    return best


def parse_initial_state(lines: Sequence[str]) -> GameState:
    boss_hp = int(lines[0].split(": ")[1])
    boss_damage = int(lines[1].split(": ")[1])
    return GameState(boss_hp=boss_hp, boss_damage=boss_damage)


def solve_part1(lines: Sequence[str]) -> int:
    return find_best_game(parse_initial_state(lines), False).mana_spent


def solve_part2(lines: Sequence[str]) -> int:
    return find_best_game(parse_initial_state(lines), True).mana_spent