"""Game setup: roster creation, starting positions and initial resources."""
from __future__ import annotations

import logging
import random
from typing import List, Sequence, Set

from esper import World

from element8.components.block_token import BlockToken
from element8.components.character import CharacterProfile
from element8.components.emblems import Emblems
from element8.components.game_state import GamePhase
from element8.components.health import Health
from element8.components.message_log import MessageLog
from element8.constants import CORNER_COUNT
from element8.events.bus import EventBus, EVENT_GAME_STARTED
from element8.exceptions import GameConfigurationError
from element8.systems.board import BoardSystem
from element8.systems.board_ops import corner_index_to_path_index
from element8.systems.card_system import CardSystem
from element8.systems.movement_system import place_on_path
from element8.systems.turn_system import turn_prompt
from element8.utils.game_state import (
    get_game_state,
    get_message_log,
    get_rng,
    get_rules,
    get_turn_order,
    post_message,
    set_phase,
)

logger = logging.getLogger(__name__)


class SetupSystem:
    """Creates one player entity per selected profile and prepares a fresh game."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        board_system: BoardSystem,
        card_system: CardSystem,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._board_system = board_system
        self._card_system = card_system
        self._rng = rng or get_rng(world)
        self._games_started = 0

    def start_game(self, profiles: Sequence[CharacterProfile]) -> List[int]:
        """Build the roster in selection order and hand the first turn to a random player."""

        profiles = list(profiles)
        self._validate(profiles)
        self._reset()

        rules = get_rules(self.world)
        order = get_turn_order(self.world)
        taken: Set[int] = set()
        path_length = len(self._board_system.board.path)
        for profile in profiles:
            entity = self.world.create_entity(
                profile,
                Health(current=profile.base_health, max_hp=profile.base_health),
                Emblems(),
            )
            path_index = self._starting_index(profile, taken, path_length)
            taken.add(path_index)
            position = place_on_path(self.world, entity, path_index)
            self._board_system.clear_tile(position.row, position.col)
            order.owners.append(entity)

        order.index = self._rng.randrange(len(order.owners))
        if rules.grant_block_token:
            holder = self._rng.choice(order.owners)
            self.world.add_component(holder, BlockToken())
        self._card_system.build_deck()

        first = order.current()
        set_phase(self.world, self.event_bus, GamePhase.AWAITING_DIRECTION)
        post_message(self.world, self.event_bus, turn_prompt(self.world, first), replace=True)
        self._games_started += 1
        logger.info(
            "Game %d started with %s; %s moves first",
            self._games_started,
            ", ".join(p.key for p in profiles),
            profiles[order.index].key,
        )
        self.event_bus.emit(EVENT_GAME_STARTED, players=list(order.owners), current_owner=first)
        return list(order.owners)

    def _validate(self, profiles: Sequence[CharacterProfile]) -> None:
        rules = get_rules(self.world)
        if not rules.min_players <= len(profiles) <= rules.max_players:
            raise GameConfigurationError(
                f"A game needs {rules.min_players} to {rules.max_players} players, got {len(profiles)}"
            )
        seen: Set[str] = set()
        for profile in profiles:
            if profile.key in seen:
                raise GameConfigurationError(f"Character '{profile.key}' was selected more than once")
            seen.add(profile.key)

    def _starting_index(self, profile: CharacterProfile, taken: Set[int], path_length: int) -> int:
        size = self._board_system.board.size
        if profile.starting_corner_index is not None:
            # Requested corners may be shared.
            return corner_index_to_path_index(profile.starting_corner_index, size)
        for corner in range(CORNER_COUNT):
            index = corner_index_to_path_index(corner, size)
            if index not in taken:
                return index
        for index in range(path_length):
            if index not in taken:
                return index
        return 0

    def _reset(self) -> None:
        order = get_turn_order(self.world)
        for entity in order.owners:
            self.world.delete_entity(entity, immediate=True)
        order.owners = []
        order.index = 0

        rules = get_rules(self.world)
        state = get_game_state(self.world)
        state.phase = GamePhase.SETUP
        state.damage_multiplier = rules.starting_damage_multiplier
        state.eliminated_count = 0
        state.flame_cards = rules.flame_cards
        state.winner = None
        state.selected_direction = None
        state.last_roll = None

        log: MessageLog = get_message_log(self.world)
        log.lines = []
        if self._games_started:
            self._board_system.reset_board()
