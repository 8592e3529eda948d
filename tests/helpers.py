from __future__ import annotations

import random
from typing import Iterable, Sequence

from element8.components.character import CharacterProfile
from element8.engine import GameEngine
from element8.rules import RulesConfig


class ScriptedRandom(random.Random):
    """Random source that replays queued die faces, coin flips and cell picks.

    Falls back to a seeded stream once a queue runs dry, so setup code that
    shuffles or picks cells keeps working.
    """

    def __init__(
        self,
        ints: Iterable[int] = (),
        floats: Iterable[float] = (),
        cells: Iterable[int] = (),
        seed: int = 0,
    ) -> None:
        super().__init__(seed)
        self.ints = list(ints)
        self.floats = list(floats)
        self.cells = list(cells)

    def randint(self, a, b):
        if self.ints:
            value = self.ints.pop(0)
            assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
            return value
        return super().randint(a, b)

    def randrange(self, start, stop=None, step=1):
        if self.cells:
            return self.cells.pop(0)
        return super().randrange(start, stop, step)

    def random(self):
        if self.floats:
            return self.floats.pop(0)
        return super().random()

    # Keeps shuffle, choice and randrange on the bit stream instead of the scripted floats.
    def getrandbits(self, k):
        return super().getrandbits(k)


def make_profile(key: str, **overrides) -> CharacterProfile:
    fields = {
        "display_name": key.capitalize(),
        "description": f"{key} test profile",
        "base_health": 10,
    }
    fields.update(overrides)
    return CharacterProfile(key=key, **fields)


def quiet_rules(**overrides) -> RulesConfig:
    """Rules with every optional random effect switched off."""
    values = {
        "flame_use_chance": 0.0,
        "block_chance": 0.0,
        "grant_block_token": False,
        "post_move_card_chance": 0.0,
        "random_event_chance": 0.0,
    }
    values.update(overrides)
    return RulesConfig(**values)


def make_engine(
    profiles: Sequence[CharacterProfile] | None = None,
    *,
    rules: RulesConfig | None = None,
    seed: int = 7,
    start: bool = True,
) -> GameEngine:
    engine = GameEngine(rules=rules or quiet_rules(), seed=seed)
    if start:
        if profiles is None:
            profiles = [make_profile(name) for name in ("alpha", "beta", "gamma", "delta")]
        engine.start_game(profiles)
    return engine
