import random

from esper import World
from .events.bus import EventBus
from element8.components.card_deck import CardDeck
from element8.components.game_state import GameState
from element8.components.message_log import MessageLog
from element8.components.turn_order import TurnOrder
from element8.rules import RulesConfig


def create_world(
    event_bus: EventBus,
    *,
    rules: RulesConfig | None = None,
    rng: random.Random | None = None,
) -> World:
    """Create a world holding the shared game resources (no players, no board yet).

    The random source and rules live on the world so every system draws from
    the same seeded stream.
    """
    rules = (rules or RulesConfig()).validate()
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "rules", rules)
    setattr(world, "event_bus", event_bus)

    world.create_entity(
        GameState(
            damage_multiplier=rules.starting_damage_multiplier,
            flame_cards=rules.flame_cards,
        ),
        TurnOrder(),
        CardDeck(),
        MessageLog(lines=["Setup: Select characters"], history=["Setup: Select characters"]),
    )
    return world
