import pytest

from element8.components.game_state import GamePhase
from element8.engine import GameEngine, GameSnapshot
from element8.events.bus import EVENT_DIRECTION_SELECTED, EVENT_STATE_CHANGED
from element8.exceptions import GameNotStartedError, GameOverError, UnknownCharacterError
from element8.rules import RulesConfig
from element8.systems.movement_system import place_on_path

from tests.helpers import make_engine, make_profile, quiet_rules


def test_commands_before_start_are_rejected():
    engine = GameEngine(seed=1)
    with pytest.raises(GameNotStartedError):
        engine.choose_direction_and_roll(True)
    with pytest.raises(GameNotStartedError):
        engine.draw_card()
    with pytest.raises(GameNotStartedError):
        engine.end_turn()
    with pytest.raises(GameNotStartedError):
        engine.current_player()
    assert engine.message == "Setup: Select characters"


def test_start_game_with_keys_uses_registry():
    engine = GameEngine(seed=3)
    players = engine.start_game_with_keys(["fire", "water", "light"])
    assert [engine.player_view(p).key for p in players] == ["fire", "water", "light"]
    with pytest.raises(UnknownCharacterError):
        engine.start_game_with_keys(["fire", "nobody"])


def test_full_turn_moves_and_hands_over():
    engine = make_engine([make_profile("a"), make_profile("b")])
    mover = engine.current_player()
    place_on_path(engine.world, mover, 0)
    other = next(p for p in engine.players if p != mover)
    place_on_path(engine.world, other, 18)
    directions = []
    engine.subscribe(EVENT_DIRECTION_SELECTED, lambda sender, **payload: directions.append(payload["direction"]))

    spaces = engine.choose_direction_and_roll(forward=True)

    assert 1 <= spaces <= 6
    assert engine.player_view(mover).path_index == spaces
    assert engine.current_player() == other
    assert engine.phase is GamePhase.AWAITING_DIRECTION
    assert [d.value for d in directions] == ["forward"]


def test_backward_turn_wraps_around():
    engine = make_engine([make_profile("a"), make_profile("b")])
    mover = engine.current_player()
    place_on_path(engine.world, mover, 0)
    spaces = engine.choose_direction_and_roll(forward=False)
    assert engine.player_view(mover).path_index == len(engine.board.path) - spaces


def test_each_command_notifies_observers():
    engine = make_engine()
    commands = []
    engine.subscribe(EVENT_STATE_CHANGED, lambda sender, **payload: commands.append(payload["command"]))
    engine.draw_card()
    engine.end_turn()
    engine.choose_direction_and_roll(True)
    assert commands == ["draw_card", "end_turn", "choose_direction_and_roll"]


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_seeded_game_reaches_a_winner(seed):
    engine = GameEngine(rules=RulesConfig(), seed=seed)
    engine.start_game_with_keys(["fire", "water", "wind", "electricity"])
    for _ in range(2000):
        if engine.is_game_over:
            break
        engine.choose_direction_and_roll(forward=bool(engine.current_player_index % 2))
    assert engine.is_game_over
    assert engine.winner in engine.players
    survivors = [p for p in engine.players if not engine.player_view(p).is_eliminated]
    assert survivors == [engine.winner]
    assert engine.eliminated_count == 3
    assert engine.damage_multiplier == 4
    with pytest.raises(GameOverError):
        engine.choose_direction_and_roll(True)


def test_same_seed_replays_identically():
    def play(seed):
        engine = GameEngine(seed=seed)
        engine.start_game_with_keys(["plant", "magnetism", "electricity"])
        for _ in range(30):
            if engine.is_game_over:
                break
            engine.choose_direction_and_roll(True)
        return engine.snapshot(), engine.messages

    assert play(11) == play(11)


def test_snapshot_reflects_state():
    engine = make_engine(rules=quiet_rules(grant_block_token=True))
    snap = engine.snapshot()
    assert isinstance(snap, GameSnapshot)
    assert snap.phase is GamePhase.AWAITING_DIRECTION
    assert [p.entity for p in snap.players] == engine.players
    assert sum(p.has_block_token for p in snap.players) == 1
    assert snap.board_size == 10
    assert len(snap.barriers) <= 10
    assert snap.remaining_cards == 6
    assert snap.damage_multiplier == 1
    assert snap.flame_cards == 7
    assert not snap.is_game_over
    assert all(p.emblems == () for p in snap.players)
    first = snap.players[0]
    assert (first.row, first.col) == engine.board.path[first.path_index]
