"""Adjacency-triggered combat between the player who just moved and nearby rivals.

Each fight is a single exchange: attacker rolls ``d6 + attack_modifier``,
defender rolls ``d6 + defense_modifier``. A winning attack deals the roll
difference plus the global damage multiplier. Two scarce consumables can
change the outcome:

- flame cards (a shared pool) add a point of damage when a coin flip succeeds;
- the stone card (``BlockToken``) held by the defender cancels all damage of a
  winning attack when its own coin flip succeeds, and is then consumed.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List

from esper import World

from element8.components.block_token import BlockToken
from element8.components.character import CharacterProfile
from element8.components.path_position import PathPosition
from element8.events.bus import (
    EventBus,
    EVENT_BLOCK_TOKEN_USED,
    EVENT_COMBAT_RESOLVED,
    EVENT_FLAME_CARD_USED,
    EVENT_HEALTH_DAMAGE,
)
from element8.systems.board_ops import manhattan_distance
from element8.utils.dice import chance, roll_die
from element8.utils.game_state import (
    current_player,
    get_game_state,
    get_rng,
    get_rules,
    get_turn_order,
    is_eliminated,
    post_message,
)
from element8.utils.players import display_name


@dataclass(frozen=True, slots=True)
class CombatResult:
    attacker: int
    defender: int
    attack_roll: int
    defense_roll: int
    damage: int
    flame_used: bool = False
    blocked: bool = False
    defender_eliminated: bool = False

    @property
    def attack_succeeded(self) -> bool:
        return self.attack_roll > self.defense_roll


def in_combat_range(a: PathPosition, b: PathPosition) -> bool:
    """Grid-adjacent or on the same perimeter tile."""
    if a.path_index == b.path_index:
        return True
    return manhattan_distance(a.coordinate, b.coordinate) <= 1


class CombatSystem:
    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or get_rng(world)

    def check_for_combat(self, attacker: int | None = None) -> List[CombatResult]:
        """Fight every non-eliminated rival in range, in player-list order."""

        if attacker is None:
            attacker = current_player(self.world)
        attacker_pos = self.world.component_for_entity(attacker, PathPosition)
        results: List[CombatResult] = []
        for defender in list(get_turn_order(self.world).owners):
            if defender == attacker or is_eliminated(self.world, defender):
                continue
            if get_game_state(self.world).is_game_over:
                break
            defender_pos = self.world.component_for_entity(defender, PathPosition)
            if in_combat_range(attacker_pos, defender_pos):
                results.append(self.resolve_combat(attacker, defender))
        return results

    def resolve_combat(self, attacker: int, defender: int) -> CombatResult:
        rules = get_rules(self.world)
        state = get_game_state(self.world)
        attacker_profile = self.world.component_for_entity(attacker, CharacterProfile)
        defender_profile = self.world.component_for_entity(defender, CharacterProfile)
        attack_roll = roll_die(self._rng, rules.die_sides) + attacker_profile.attack_modifier
        defense_roll = roll_die(self._rng, rules.die_sides) + defender_profile.defense_modifier
        attacker_name = display_name(self.world, attacker)
        defender_name = display_name(self.world, defender)
        post_message(self.world, self.event_bus, f"Combat: {attacker_name} vs {defender_name}")

        if attack_roll <= defense_roll:
            post_message(self.world, self.event_bus, "Attack was defended.")
            result = CombatResult(attacker, defender, attack_roll, defense_roll, damage=0)
            self.event_bus.emit(EVENT_COMBAT_RESOLVED, result=result)
            return result

        damage = (attack_roll - defense_roll) + state.damage_multiplier
        flame_used = False
        if state.flame_cards > 0 and chance(self._rng, rules.flame_use_chance):
            damage += rules.flame_damage_bonus
            state.flame_cards -= 1
            flame_used = True
            self.event_bus.emit(EVENT_FLAME_CARD_USED, owner_entity=attacker, remaining=state.flame_cards)
        blocked = False
        if self.world.has_component(defender, BlockToken) and chance(self._rng, rules.block_chance):
            damage = 0
            blocked = True
            self.world.remove_component(defender, BlockToken)
            post_message(self.world, self.event_bus, "Stone Card blocked!")
            self.event_bus.emit(EVENT_BLOCK_TOKEN_USED, owner_entity=defender, attacker=attacker)

        post_message(self.world, self.event_bus, f"{defender_name} takes {damage} damage")
        self.event_bus.emit(
            EVENT_HEALTH_DAMAGE,
            source_owner=attacker,
            target_entity=defender,
            amount=damage,
            reason="combat",
        )
        result = CombatResult(
            attacker,
            defender,
            attack_roll,
            defense_roll,
            damage=damage,
            flame_used=flame_used,
            blocked=blocked,
            defender_eliminated=is_eliminated(self.world, defender),
        )
        self.event_bus.emit(EVENT_COMBAT_RESOLVED, result=result)
        return result
