from __future__ import annotations

import random
from typing import List

from esper import World

from element8.components.card_deck import CardDeck
from element8.components.eliminated import Eliminated
from element8.components.game_state import GamePhase, GameState
from element8.components.message_log import MessageLog
from element8.components.turn_order import TurnOrder
from element8.events.bus import EVENT_GAME_MESSAGE, EVENT_PHASE_CHANGED, EventBus
from element8.exceptions import GameNotStartedError
from element8.rules import RulesConfig


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    state = GameState()
    world.create_entity(state)
    return state


def get_turn_order(world: World) -> TurnOrder:
    for _, order in world.get_component(TurnOrder):
        return order
    order = TurnOrder()
    world.create_entity(order)
    return order


def get_card_deck(world: World) -> CardDeck:
    for _, deck in world.get_component(CardDeck):
        return deck
    deck = CardDeck()
    world.create_entity(deck)
    return deck


def get_message_log(world: World) -> MessageLog:
    for _, log in world.get_component(MessageLog):
        return log
    log = MessageLog()
    world.create_entity(log)
    return log


def get_rules(world: World) -> RulesConfig:
    rules = getattr(world, "rules", None)
    if rules is None:
        rules = RulesConfig()
        setattr(world, "rules", rules)
    return rules


def get_rng(world: World) -> random.Random:
    rng = getattr(world, "random", None)
    if rng is None:
        rng = random.Random()
        setattr(world, "random", rng)
    return rng


def current_player(world: World) -> int:
    """Return the entity whose turn it is; an empty roster is a programming error."""
    owner = get_turn_order(world).current()
    if owner is None:
        raise GameNotStartedError("No players in the roster; start a game first")
    return owner


def is_eliminated(world: World, entity: int) -> bool:
    return world.has_component(entity, Eliminated)


def active_players(world: World) -> List[int]:
    """Non-eliminated players in turn order."""
    return [ent for ent in get_turn_order(world).owners if not is_eliminated(world, ent)]


def set_phase(world: World, event_bus: EventBus, phase: GamePhase) -> None:
    """Update the engine phase and emit a change event when it differs."""

    state = get_game_state(world)
    previous = state.phase
    if previous is phase:
        return
    state.phase = phase
    event_bus.emit(EVENT_PHASE_CHANGED, previous_phase=previous, new_phase=phase)


def post_message(world: World, event_bus: EventBus, text: str, *, replace: bool = False) -> None:
    log = get_message_log(world)
    if replace:
        log.replace(text)
    else:
        log.append(text)
    event_bus.emit(EVENT_GAME_MESSAGE, text=text, replace=replace)
