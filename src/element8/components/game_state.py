"""Game state resource describing the turn engine's aggregate counters."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GamePhase(Enum):
    """Turn engine states."""
    SETUP = auto()
    AWAITING_DIRECTION = auto()
    RESOLVING = auto()
    GAME_OVER = auto()


class Direction(Enum):
    FORWARD = "forward"    # clockwise
    BACKWARD = "backward"  # counter-clockwise

    @classmethod
    def from_forward(cls, forward: bool) -> "Direction":
        return cls.FORWARD if forward else cls.BACKWARD

    @property
    def is_forward(self) -> bool:
        return self is Direction.FORWARD


@dataclass
class GameState:
    """Singleton component storing phase, escalation and consumable counters."""
    phase: GamePhase = GamePhase.SETUP
    damage_multiplier: int = 1
    eliminated_count: int = 0
    flame_cards: int = 0
    winner: Optional[int] = None
    selected_direction: Optional[Direction] = None
    last_roll: Optional[int] = None

    @property
    def is_game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER
