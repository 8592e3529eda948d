from __future__ import annotations

import logging

from esper import World

from element8.components.eliminated import Eliminated
from element8.components.game_state import GamePhase
from element8.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_HEALTH_CHANGED,
    EVENT_PLAYER_ELIMINATED,
)
from element8.utils.game_state import (
    active_players,
    get_game_state,
    get_rules,
    get_turn_order,
    post_message,
    set_phase,
)
from element8.utils.players import display_name

logger = logging.getLogger(__name__)


class EliminationSystem:
    """Marks players eliminated when their health runs out and detects the winner.

    Every elimination raises the global damage multiplier, so later fights hit
    harder.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_HEALTH_CHANGED, self._on_health_changed)

    def _on_health_changed(self, sender, **payload) -> None:
        entity = payload.get("entity")
        current = payload.get("current")
        if entity is None or current is None or current > 0:
            return
        self.eliminate(entity, source_owner=payload.get("source_owner"))

    def eliminate(self, entity: int, *, source_owner: int | None = None) -> bool:
        """Eliminate ``entity`` once; returns False when it was already out."""

        if entity not in get_turn_order(self.world).owners:
            return False
        if self.world.has_component(entity, Eliminated):
            return False
        self.world.add_component(entity, Eliminated(source_owner=source_owner))
        state = get_game_state(self.world)
        state.eliminated_count += 1
        state.damage_multiplier += get_rules(self.world).damage_multiplier_step
        name = display_name(self.world, entity)
        logger.info("%s eliminated (multiplier now %d)", name, state.damage_multiplier)
        post_message(self.world, self.event_bus, f"{name} eliminated!")
        self.event_bus.emit(
            EVENT_PLAYER_ELIMINATED,
            entity=entity,
            source_owner=source_owner,
            eliminated_count=state.eliminated_count,
            damage_multiplier=state.damage_multiplier,
        )
        self.check_for_win()
        return True

    def check_for_win(self) -> int | None:
        """Finish the game when exactly one player is left standing."""

        remaining = active_players(self.world)
        if len(remaining) != 1:
            return None
        state = get_game_state(self.world)
        winner = remaining[0]
        if state.is_game_over and state.winner == winner:
            return winner
        state.winner = winner
        set_phase(self.world, self.event_bus, GamePhase.GAME_OVER)
        name = display_name(self.world, winner)
        logger.info("%s wins after %d eliminations", name, state.eliminated_count)
        post_message(self.world, self.event_bus, f"{name} wins!", replace=True)
        self.event_bus.emit(EVENT_GAME_OVER, winner=winner)
        return winner
