from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from element8.constants import CORNER_COUNT


class Element(Enum):
    """Element families a character profile can belong to."""
    FIRE = "fire"
    WATER = "water"
    EARTH = "earth"
    WIND = "wind"
    LIGHTNING = "lightning"
    ICE = "ice"
    METAL = "metal"
    WOOD = "wood"


@dataclass(frozen=True, slots=True)
class CharacterProfile:
    """Static description of a playable character.

    Profiles are shared by reference with every player created from them and
    are never mutated during a game. Presentation fields (``color``,
    ``sprite_name``, ``special_ability``) are optional; absence is valid.
    """

    key: str
    display_name: str
    description: str = ""
    base_health: int = 10
    movement_modifier: int = 0
    attack_modifier: int = 0
    defense_modifier: int = 0
    heal_modifier: int = 0
    starting_corner_index: Optional[int] = None
    special_ability: Optional[str] = None
    element: Optional[Element] = None
    color: Optional[str] = None
    sprite_name: Optional[str] = None

    def __post_init__(self) -> None:
        key = (self.key or "").strip().lower()
        if not key:
            raise ValueError("Character profile key cannot be empty")
        object.__setattr__(self, "key", key)
        if self.base_health <= 0:
            raise ValueError(f"Character '{key}' needs positive base health, got {self.base_health}")
        corner = self.starting_corner_index
        if corner is not None and not 0 <= corner < CORNER_COUNT:
            raise ValueError(f"Character '{key}' has invalid starting corner {corner}")
