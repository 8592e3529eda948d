from __future__ import annotations

import logging
import random
from typing import List

from esper import World

from element8.components.card_deck import CardDeck, GameCard
from element8.components.character import CharacterProfile
from element8.events.bus import (
    EventBus,
    EVENT_CARD_DRAWN,
    EVENT_DECK_EMPTY,
    EVENT_HEALTH_HEAL,
    EVENT_TILE_SWAP_REQUEST,
)
from element8.systems.board_ops import get_board
from element8.utils.game_state import current_player, get_card_deck, get_rng, get_rules, post_message

logger = logging.getLogger(__name__)


class CardSystem:
    """Builds the game card deck and applies drawn card effects to the current player."""

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or get_rng(world)

    def build_deck(self) -> CardDeck:
        """Two independently shuffled copies of every card type; never reshuffled afterwards."""

        first: List[GameCard] = list(GameCard)
        second: List[GameCard] = list(GameCard)
        self._rng.shuffle(first)
        self._rng.shuffle(second)
        deck = get_card_deck(self.world)
        deck.cards = first + second
        return deck

    def draw_card(self, *, reason: str = "draw") -> GameCard | None:
        """Pop the top card and apply it; ``None`` once the deck is exhausted."""

        owner = current_player(self.world)
        deck = get_card_deck(self.world)
        card = deck.draw()
        if card is None:
            logger.debug("Deck exhausted")
            post_message(self.world, self.event_bus, "No more cards.")
            self.event_bus.emit(EVENT_DECK_EMPTY, owner_entity=owner, reason=reason)
            return None
        if card is GameCard.HEAL:
            self._apply_heal(owner)
        elif card is GameCard.SHIFT_MAP:
            self._apply_shift_map()
        # BUFF_ATTACK has no lasting effect.
        post_message(self.world, self.event_bus, f"Drew: {card.label}")
        self.event_bus.emit(
            EVENT_CARD_DRAWN,
            owner_entity=owner,
            card=card,
            remaining=len(deck),
            reason=reason,
        )
        return card

    def _apply_heal(self, owner: int) -> None:
        profile = self.world.component_for_entity(owner, CharacterProfile)
        amount = get_rules(self.world).heal_card_amount + profile.heal_modifier
        self.event_bus.emit(
            EVENT_HEALTH_HEAL,
            source_owner=owner,
            target_entity=owner,
            amount=amount,
            reason="heal_card",
        )

    def _apply_shift_map(self) -> None:
        # Any two cells of the grid, perimeter included.
        size = get_board(self.world).size
        src = (self._rng.randrange(size), self._rng.randrange(size))
        dst = (self._rng.randrange(size), self._rng.randrange(size))
        self.event_bus.emit(EVENT_TILE_SWAP_REQUEST, src=src, dst=dst, reason="shift_map")
