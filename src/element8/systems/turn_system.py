from __future__ import annotations

import logging
import random

from esper import World

from element8.components.character import CharacterProfile
from element8.components.game_state import GamePhase
from element8.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_HEALTH_HEAL,
    EVENT_RANDOM_EVENT,
    EVENT_TURN_ADVANCED,
)
from element8.utils.dice import chance
from element8.utils.game_state import (
    active_players,
    current_player,
    get_game_state,
    get_rng,
    get_rules,
    get_turn_order,
    is_eliminated,
    post_message,
    set_phase,
)
from element8.utils.players import display_name

logger = logging.getLogger(__name__)


def turn_prompt(world: World, owner: int) -> str:
    return f"{display_name(world, owner)}'s turn: Choose direction"


class TurnSystem:
    """End-of-turn bookkeeping and rotation to the next non-eliminated player.

    Flow:
      - regenerate the outgoing player when its element regenerates;
      - finish the game when nobody is left standing;
      - otherwise advance the turn order, skipping eliminated players;
      - occasionally fire a random map event through ``draw_card``.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        card_system=None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or get_rng(world)
        self._card_system = card_system

    def end_turn(self) -> int | None:
        """Returns the player whose turn it now is, or ``None`` when nobody is left."""

        state = get_game_state(self.world)
        outgoing = current_player(self.world)
        if state.is_game_over:
            return state.winner
        self._regenerate(outgoing)

        if not active_players(self.world):
            state.winner = None
            set_phase(self.world, self.event_bus, GamePhase.GAME_OVER)
            logger.info("All players eliminated; game over without a winner")
            post_message(self.world, self.event_bus, "All players eliminated.")
            self.event_bus.emit(EVENT_GAME_OVER, winner=None)
            return None

        new_owner = self._advance_turn()
        state.selected_direction = None
        state.last_roll = None
        set_phase(self.world, self.event_bus, GamePhase.AWAITING_DIRECTION)
        post_message(self.world, self.event_bus, turn_prompt(self.world, new_owner), replace=True)
        self.event_bus.emit(EVENT_TURN_ADVANCED, previous_owner=outgoing, new_owner=new_owner)

        if self._card_system is not None and chance(self._rng, get_rules(self.world).random_event_chance):
            self.event_bus.emit(EVENT_RANDOM_EVENT, owner_entity=new_owner)
            self._card_system.draw_card(reason="random_event")
        return new_owner

    def _regenerate(self, owner: int) -> None:
        if is_eliminated(self.world, owner):
            return
        profile = self.world.component_for_entity(owner, CharacterProfile)
        if profile.element is None or profile.element not in get_rules(self.world).regenerating_elements:
            return
        self.event_bus.emit(
            EVENT_HEALTH_HEAL,
            source_owner=owner,
            target_entity=owner,
            amount=profile.heal_modifier,
            reason="regeneration",
        )

    def _advance_turn(self) -> int:
        """Step the index forward at most once around the roster to the next active player."""
        order = get_turn_order(self.world)
        for _ in range(len(order.owners)):
            order.advance()
            candidate = order.current()
            if candidate is not None and not is_eliminated(self.world, candidate):
                return candidate
        # Unreachable while at least one player is active.
        return current_player(self.world)
