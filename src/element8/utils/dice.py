from __future__ import annotations

import random


def roll_die(rng: random.Random, sides: int = 6) -> int:
    """Uniform integer in ``[1, sides]``."""
    return rng.randint(1, sides)


def chance(rng: random.Random, probability: float) -> bool:
    if probability <= 0:
        return False
    if probability >= 1:
        return True
    return rng.random() < probability
