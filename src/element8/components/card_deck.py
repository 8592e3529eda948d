from dataclasses import dataclass, field
from enum import Enum
from typing import List


class GameCard(Enum):
    SHIFT_MAP = "Shift Map"
    HEAL = "Heal +2"
    BUFF_ATTACK = "Attack +1"

    @property
    def label(self) -> str:
        return self.value


@dataclass(slots=True)
class CardDeck:
    """Remaining cards; the last element is the top of the deck."""
    cards: List[GameCard] = field(default_factory=list)

    def draw(self) -> GameCard | None:
        if not self.cards:
            return None
        return self.cards.pop()

    def __len__(self) -> int:
        return len(self.cards)
