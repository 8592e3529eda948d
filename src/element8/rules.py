"""Tunable rule parameters for a single game session."""
from __future__ import annotations

from dataclasses import dataclass, field

from element8 import constants
from element8.components.character import Element
from element8.exceptions import BoardConfigurationError, GameConfigurationError
from element8.systems.board_ops import interior_cell_count


@dataclass
class RulesConfig:
    board_size: int = constants.BOARD_SIZE
    barrier_count: int = constants.BARRIER_COUNT
    min_players: int = constants.MIN_PLAYERS
    max_players: int = constants.MAX_PLAYERS
    die_sides: int = constants.DIE_SIDES
    starting_damage_multiplier: int = constants.STARTING_DAMAGE_MULTIPLIER
    damage_multiplier_step: int = constants.DAMAGE_MULTIPLIER_STEP
    heal_card_amount: int = constants.HEAL_CARD_AMOUNT
    flame_cards: int = constants.FLAME_CARD_COUNT
    flame_damage_bonus: int = constants.FLAME_DAMAGE_BONUS
    flame_use_chance: float = constants.FLAME_USE_CHANCE
    grant_block_token: bool = constants.GRANT_BLOCK_TOKEN
    block_chance: float = constants.BLOCK_CHANCE
    post_move_card_chance: float = constants.POST_MOVE_CARD_CHANCE
    random_event_chance: float = constants.RANDOM_EVENT_CHANCE
    regenerating_elements: frozenset[Element] = field(
        default_factory=lambda: frozenset({Element.EARTH, Element.WOOD})
    )

    def validate(self) -> "RulesConfig":
        """Raise ``GameConfigurationError`` when the values cannot produce a playable game."""

        if self.board_size < 3:
            raise BoardConfigurationError(
                f"Board size {self.board_size} is too small; at least 3 is required"
            )
        if self.barrier_count < 0:
            raise BoardConfigurationError("Barrier count cannot be negative")
        available = interior_cell_count(self.board_size)
        if self.barrier_count > available:
            raise BoardConfigurationError(
                f"{self.barrier_count} barriers do not fit in the "
                f"{available} non-perimeter cells of a {self.board_size}x{self.board_size} board"
            )
        if self.min_players < 1 or self.max_players < self.min_players:
            raise GameConfigurationError(
                f"Invalid player bounds {self.min_players}..{self.max_players}"
            )
        if self.die_sides < 1:
            raise GameConfigurationError("A die needs at least one side")
        if self.flame_cards < 0:
            raise GameConfigurationError("Flame card count cannot be negative")
        for name in ("flame_use_chance", "block_chance", "post_move_card_chance", "random_event_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise GameConfigurationError(f"{name} must be within [0, 1], got {value}")
        return self
