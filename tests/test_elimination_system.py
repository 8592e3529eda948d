import pytest

from element8.components.eliminated import Eliminated
from element8.components.game_state import GamePhase
from element8.events.bus import (
    EVENT_GAME_OVER,
    EVENT_HEALTH_DAMAGE,
    EVENT_PLAYER_ELIMINATED,
)
from element8.systems.combat_system import CombatSystem

from tests.helpers import ScriptedRandom, make_engine, make_profile


def _damage(engine, entity, amount):
    engine.event_bus.emit(EVENT_HEALTH_DAMAGE, target_entity=entity, amount=amount, source_owner=None, reason="test")


def test_lethal_damage_eliminates_once():
    engine = make_engine()
    victim = engine.players[1]
    eliminated = []
    engine.subscribe(EVENT_PLAYER_ELIMINATED, lambda sender, **payload: eliminated.append(payload))

    _damage(engine, victim, 12)
    _damage(engine, victim, 3)

    assert engine.world.has_component(victim, Eliminated)
    assert engine.player_view(victim).health == -5
    assert len(eliminated) == 1
    assert engine.eliminated_count == 1
    assert engine.damage_multiplier == 2
    assert eliminated[0]["eliminated_count"] == 1
    assert eliminated[0]["damage_multiplier"] == 2


def test_health_exactly_zero_eliminates():
    engine = make_engine()
    victim = engine.players[0]
    _damage(engine, victim, 10)
    assert engine.player_view(victim).is_eliminated


def test_each_elimination_increments_counter_by_one():
    engine = make_engine([make_profile(k) for k in ("a", "b", "c", "d", "e")])
    for expected, victim in enumerate(engine.players[1:4], start=1):
        _damage(engine, victim, 50)
        assert engine.eliminated_count == expected
        assert engine.damage_multiplier == 1 + expected


@pytest.mark.parametrize("order", [(1, 2, 3), (3, 1, 2), (2, 3, 1)])
def test_last_player_standing_wins(order):
    engine = make_engine()
    game_over = []
    engine.subscribe(EVENT_GAME_OVER, lambda sender, **payload: game_over.append(payload))
    for idx in order:
        assert not engine.is_game_over
        _damage(engine, engine.players[idx], 99)

    survivor = engine.players[0]
    assert engine.is_game_over
    assert engine.phase is GamePhase.GAME_OVER
    assert engine.winner == survivor
    assert engine.message == "Alpha wins!"
    assert game_over == [{"winner": survivor}]


def test_check_for_win_without_a_single_survivor():
    engine = make_engine()
    assert engine.check_for_win() is None
    assert not engine.is_game_over


def test_combat_elimination_escalates_damage_multiplier():
    engine = make_engine([make_profile("a", attack_modifier=2), make_profile("b", base_health=3), make_profile("c")])
    a, b, c = engine.players
    combat = CombatSystem(engine.world, engine.event_bus, rng=ScriptedRandom(ints=[6, 1]))

    result = combat.resolve_combat(a, b)

    assert result.defender_eliminated
    assert engine.damage_multiplier == 2
    assert "B eliminated!" in engine.message
    assert not engine.is_game_over
