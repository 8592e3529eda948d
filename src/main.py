"""Headless runner for the Element8 turn engine.

Plays an automatic game with randomly chosen directions and prints the
status messages as they are produced.
"""
import argparse
import logging
import random

from element8 import constants
from element8.engine import GameEngine
from element8.events.bus import EVENT_GAME_MESSAGE
from element8.rules import RulesConfig

DEFAULT_KEYS = ("fire", "water", "stone", "wind")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play an automatic Element8 game.")
    parser.add_argument("characters", nargs="*", default=list(DEFAULT_KEYS), help="character keys (2 to 8)")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible game")
    parser.add_argument("--board-size", type=int, default=constants.BOARD_SIZE)
    parser.add_argument("--max-turns", type=int, default=500)
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rng = random.Random(args.seed)
    engine = GameEngine(rules=RulesConfig(board_size=args.board_size), rng=rng)
    engine.subscribe(EVENT_GAME_MESSAGE, lambda sender, **payload: print(payload["text"]))
    engine.start_game_with_keys(args.characters)

    turns = 0
    while not engine.is_game_over and turns < args.max_turns:
        engine.choose_direction_and_roll(forward=rng.random() < 0.5)
        turns += 1

    if engine.winner is not None:
        winner = engine.player_view(engine.winner)
        print(f"Winner: {winner.display_name} after {turns} turns ({winner.health} HP left)")
    elif engine.is_game_over:
        print(f"No winner after {turns} turns")
    else:
        print(f"Stopped after {turns} turns without a winner")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
