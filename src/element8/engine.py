"""Command boundary of the Element8 turn engine.

``GameEngine`` wires the event bus, the world and every system for one game
session. A presentation layer reads ``snapshot()`` (or subscribes to events)
and issues the commands below; each command runs to completion before it
returns, so observers always see a consistent post-command state.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from element8.characters.defaults import create_default_registry
from element8.characters.registry import CharacterRegistry
from element8.components.block_token import BlockToken
from element8.components.board import Board
from element8.components.card_deck import GameCard
from element8.components.character import CharacterProfile
from element8.components.eliminated import Eliminated
from element8.components.emblems import Emblems
from element8.components.game_state import Direction, GamePhase
from element8.components.health import Health
from element8.components.path_position import PathPosition
from element8.events.bus import EventBus, EVENT_DIRECTION_SELECTED, EVENT_STATE_CHANGED
from element8.exceptions import GameNotStartedError, GameOverError, GameStateError
from element8.rules import RulesConfig
from element8.systems.board import BoardSystem
from element8.systems.board_ops import get_board
from element8.systems.card_system import CardSystem
from element8.systems.combat_system import CombatResult, CombatSystem
from element8.systems.elimination_system import EliminationSystem
from element8.systems.health_system import HealthSystem
from element8.systems.movement_system import MovementSystem
from element8.systems.setup_system import SetupSystem
from element8.systems.turn_system import TurnSystem
from element8.utils.dice import chance
from element8.utils.game_state import (
    current_player,
    get_card_deck,
    get_game_state,
    get_message_log,
    get_rng,
    get_rules,
    get_turn_order,
    set_phase,
)
from element8.world import create_world

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlayerView:
    entity: int
    key: str
    display_name: str
    color: Optional[str]
    row: int
    col: int
    path_index: int
    health: int
    max_health: int
    is_eliminated: bool
    has_block_token: bool
    emblems: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    phase: GamePhase
    players: tuple[PlayerView, ...]
    current_player_index: int
    message: str
    damage_multiplier: int
    eliminated_count: int
    flame_cards: int
    remaining_cards: int
    is_game_over: bool
    winner: Optional[int]
    board_size: int
    barriers: tuple[tuple[int, int], ...]


class GameEngine:
    def __init__(
        self,
        *,
        rules: RulesConfig | None = None,
        registry: CharacterRegistry | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        if rng is None:
            rng = random.Random(seed)
        self.event_bus = event_bus or EventBus()
        self.registry = registry if registry is not None else create_default_registry()
        self.world = create_world(self.event_bus, rules=rules, rng=rng)

        self.health_system = HealthSystem(self.world, self.event_bus)
        self.elimination_system = EliminationSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.card_system = CardSystem(self.world, self.event_bus)
        self.movement_system = MovementSystem(self.world, self.event_bus)
        self.combat_system = CombatSystem(self.world, self.event_bus)
        self.turn_system = TurnSystem(self.world, self.event_bus, card_system=self.card_system)
        self.setup_system = SetupSystem(
            self.world,
            self.event_bus,
            board_system=self.board_system,
            card_system=self.card_system,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_game(self, profiles: Sequence[CharacterProfile]) -> List[int]:
        players = self.setup_system.start_game(profiles)
        self._changed("start_game")
        return players

    def start_game_with_keys(self, keys: Iterable[str]) -> List[int]:
        return self.start_game(self.registry.profiles_for_keys(keys))

    def choose_direction_and_roll(self, forward: bool) -> int:
        """Run a full turn for the current player; returns the rolled number of spaces."""

        self._require_phase(GamePhase.AWAITING_DIRECTION)
        owner = current_player(self.world)
        state = get_game_state(self.world)
        direction = Direction.from_forward(forward)
        state.selected_direction = direction
        self.event_bus.emit(EVENT_DIRECTION_SELECTED, owner_entity=owner, direction=direction)
        set_phase(self.world, self.event_bus, GamePhase.RESOLVING)

        spaces = self.movement_system.roll_dice()
        self.movement_system.move_along_path(forward, spaces)
        self.combat_system.check_for_combat(owner)
        if not state.is_game_over and chance(get_rng(self.world), get_rules(self.world).post_move_card_chance):
            self.card_system.draw_card(reason="turn")
        self.turn_system.end_turn()
        self._changed("choose_direction_and_roll")
        return spaces

    def draw_card(self) -> GameCard | None:
        self._require_active()
        card = self.card_system.draw_card()
        self._changed("draw_card")
        return card

    def end_turn(self) -> int | None:
        self._require_active()
        owner = self.turn_system.end_turn()
        self._changed("end_turn")
        return owner

    # Lower-level operations, exposed for presentation layers that drive the
    # turn step by step.

    def roll_dice(self) -> int:
        self._require_active()
        return self.movement_system.roll_dice()

    def move_along_path(self, forward: bool, spaces: int) -> int:
        self._require_active()
        index = self.movement_system.move_along_path(forward, spaces)
        self._changed("move_along_path")
        return index

    def check_for_combat(self) -> List[CombatResult]:
        self._require_active()
        results = self.combat_system.check_for_combat()
        self._changed("check_for_combat")
        return results

    def resolve_combat(self, attacker: int, defender: int) -> CombatResult:
        self._require_active()
        result = self.combat_system.resolve_combat(attacker, defender)
        self._changed("resolve_combat")
        return result

    def check_for_win(self) -> int | None:
        return self.elimination_system.check_for_win()

    def subscribe(self, event_name: str, handler: Callable) -> None:
        self.event_bus.subscribe(event_name, handler)

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return get_game_state(self.world).phase

    @property
    def players(self) -> List[int]:
        return list(get_turn_order(self.world).owners)

    @property
    def current_player_index(self) -> int:
        return get_turn_order(self.world).index

    def current_player(self) -> int:
        return current_player(self.world)

    @property
    def message(self) -> str:
        return get_message_log(self.world).text

    @property
    def messages(self) -> List[str]:
        return list(get_message_log(self.world).history)

    @property
    def is_game_over(self) -> bool:
        return get_game_state(self.world).is_game_over

    @property
    def winner(self) -> int | None:
        return get_game_state(self.world).winner

    @property
    def damage_multiplier(self) -> int:
        return get_game_state(self.world).damage_multiplier

    @property
    def eliminated_count(self) -> int:
        return get_game_state(self.world).eliminated_count

    @property
    def flame_cards(self) -> int:
        return get_game_state(self.world).flame_cards

    @property
    def remaining_cards(self) -> int:
        return len(get_card_deck(self.world))

    @property
    def board(self) -> Board:
        return get_board(self.world)

    def player_view(self, entity: int) -> PlayerView:
        profile = self.world.component_for_entity(entity, CharacterProfile)
        position = self.world.component_for_entity(entity, PathPosition)
        health = self.world.component_for_entity(entity, Health)
        return PlayerView(
            entity=entity,
            key=profile.key,
            display_name=profile.display_name,
            color=profile.color,
            row=position.row,
            col=position.col,
            path_index=position.path_index,
            health=health.current,
            max_health=health.max_hp,
            is_eliminated=self.world.has_component(entity, Eliminated),
            has_block_token=self.world.has_component(entity, BlockToken),
            emblems=tuple(self.world.component_for_entity(entity, Emblems).names),
        )

    def snapshot(self) -> GameSnapshot:
        state = get_game_state(self.world)
        board = get_board(self.world)
        return GameSnapshot(
            phase=state.phase,
            players=tuple(self.player_view(ent) for ent in self.players),
            current_player_index=self.current_player_index,
            message=self.message,
            damage_multiplier=state.damage_multiplier,
            eliminated_count=state.eliminated_count,
            flame_cards=state.flame_cards,
            remaining_cards=self.remaining_cards,
            is_game_over=state.is_game_over,
            winner=state.winner,
            board_size=board.size,
            barriers=tuple(board.barriers()),
        )

    # ------------------------------------------------------------------

    def _require_active(self) -> None:
        state = get_game_state(self.world)
        if state.phase is GamePhase.SETUP or not get_turn_order(self.world).owners:
            raise GameNotStartedError("Start a game before issuing turn commands")
        if state.is_game_over:
            raise GameOverError("The game is over")

    def _require_phase(self, phase: GamePhase) -> None:
        self._require_active()
        current = get_game_state(self.world).phase
        if current is not phase:
            raise GameStateError(f"Expected phase {phase.name}, engine is in {current.name}")

    def _changed(self, command: str) -> None:
        logger.debug("%s finished in phase %s", command, self.phase.name)
        self.event_bus.emit(EVENT_STATE_CHANGED, command=command)
