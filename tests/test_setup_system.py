import pytest

from element8.components.block_token import BlockToken
from element8.components.board import TileState
from element8.components.card_deck import GameCard
from element8.components.game_state import GamePhase
from element8.components.health import Health
from element8.components.path_position import PathPosition
from element8.events.bus import EVENT_GAME_STARTED
from element8.exceptions import GameConfigurationError
from element8.systems.board_ops import corner_index_to_path_index
from element8.utils.game_state import get_card_deck

from tests.helpers import make_engine, make_profile, quiet_rules


def _path_index(engine, entity):
    return engine.world.component_for_entity(entity, PathPosition).path_index


@pytest.mark.parametrize("count", [0, 1, 9])
def test_player_count_outside_bounds_is_rejected(count):
    engine = make_engine(start=False)
    profiles = [make_profile(f"p{i}") for i in range(count)]
    with pytest.raises(GameConfigurationError):
        engine.start_game(profiles)
    assert engine.players == []
    assert engine.phase is GamePhase.SETUP


def test_eight_players_are_accepted():
    engine = make_engine([make_profile(f"p{i}") for i in range(8)])
    assert len(engine.players) == 8


def test_duplicate_keys_are_rejected():
    engine = make_engine(start=False)
    with pytest.raises(GameConfigurationError):
        engine.start_game([make_profile("fire"), make_profile("FIRE")])


def test_shared_requested_corner_is_allowed():
    engine = make_engine(
        [
            make_profile("a", starting_corner_index=0),
            make_profile("b", starting_corner_index=0),
        ]
    )
    assert [_path_index(engine, ent) for ent in engine.players] == [0, 0]


def test_unassigned_players_take_free_corners_then_path_slots():
    engine = make_engine([make_profile(f"p{i}") for i in range(6)])
    size = engine.board.size
    corners = [corner_index_to_path_index(n, size) for n in range(4)]
    indices = [_path_index(engine, ent) for ent in engine.players]
    assert indices[:4] == corners
    # Remaining players scan the path from 0, skipping taken slots.
    assert indices[4:] == [1, 2]


def test_free_corner_scan_skips_requested_corners():
    engine = make_engine(
        [
            make_profile("a", starting_corner_index=0),
            make_profile("b"),
            make_profile("c", starting_corner_index=2),
            make_profile("d"),
        ]
    )
    size = engine.board.size
    indices = [_path_index(engine, ent) for ent in engine.players]
    assert indices == [
        0,
        corner_index_to_path_index(1, size),
        corner_index_to_path_index(2, size),
        corner_index_to_path_index(3, size),
    ]


def test_players_start_with_base_health_in_selection_order():
    profiles = [make_profile("a", base_health=7), make_profile("b", base_health=13)]
    engine = make_engine(profiles)
    healths = [engine.world.component_for_entity(e, Health).current for e in engine.players]
    assert healths == [7, 13]
    assert [engine.player_view(e).key for e in engine.players] == ["a", "b"]


def test_start_game_sets_turn_message_and_phase():
    engine = make_engine()
    current = engine.player_view(engine.current_player())
    assert engine.phase is GamePhase.AWAITING_DIRECTION
    assert engine.message == f"{current.display_name}'s turn: Choose direction"
    assert 0 <= engine.current_player_index < 4


def test_deck_holds_each_card_twice():
    engine = make_engine()
    cards = list(get_card_deck(engine.world).cards)
    assert len(cards) == 2 * len(GameCard)
    for card in GameCard:
        assert cards.count(card) == 2


def test_block_token_granted_to_exactly_one_player():
    engine = make_engine(rules=quiet_rules(grant_block_token=True))
    holders = [ent for ent, _ in engine.world.get_component(BlockToken)]
    assert len(holders) == 1
    assert holders[0] in engine.players


def test_starting_tiles_are_cleared():
    engine = make_engine(start=False)
    board = engine.board
    board.set_tile(0, 0, TileState.BARRIER)
    engine.start_game([make_profile("a", starting_corner_index=0), make_profile("b")])
    assert board.tile(0, 0) is TileState.OPEN


def test_restarting_replaces_previous_roster():
    engine = make_engine()
    old_players = engine.players
    started = []
    engine.subscribe(EVENT_GAME_STARTED, lambda sender, **payload: started.append(payload))
    engine.start_game([make_profile("x"), make_profile("y")])
    assert len(engine.players) == 2
    assert not set(old_players) & set(engine.players)
    for entity in old_players:
        with pytest.raises(KeyError):
            engine.world.component_for_entity(entity, Health)
    assert started[0]["players"] == engine.players
    assert engine.eliminated_count == 0
    assert engine.damage_multiplier == 1
