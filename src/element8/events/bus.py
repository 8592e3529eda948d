from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so handlers defined inline or on unreferenced systems keep receiving events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_STARTED = "game_started"        # payload: players=list[int], current_owner=int
EVENT_PHASE_CHANGED = "phase_changed"      # payload: previous_phase=GamePhase, new_phase=GamePhase
EVENT_GAME_OVER = "game_over"              # payload: winner=int|None
EVENT_STATE_CHANGED = "state_changed"      # payload: command=str


# ============================================================================
# MOVEMENT
# ============================================================================
EVENT_DIRECTION_SELECTED = "direction_selected"  # payload: owner_entity=int, direction=Direction
EVENT_DICE_ROLLED = "dice_rolled"                # payload: owner_entity=int, face=int, modifier=int, total=int
EVENT_PLAYER_MOVED = "player_moved"              # payload: owner_entity=int, previous_index=int, path_index=int, row, col, forward=bool, spaces=int


# ============================================================================
# BOARD
# ============================================================================
EVENT_BARRIERS_PLACED = "barriers_placed"      # payload: positions=list[(r,c)]
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"  # payload: src=(r,c), dst=(r,c), reason=str
EVENT_BOARD_CHANGED = "board_changed"          # payload: reason=str, positions=list[(r,c)]


# ============================================================================
# COMBAT
# ============================================================================
EVENT_COMBAT_RESOLVED = "combat_resolved"      # payload: result=CombatResult
EVENT_BLOCK_TOKEN_USED = "block_token_used"    # payload: owner_entity=int, attacker=int
EVENT_FLAME_CARD_USED = "flame_card_used"      # payload: owner_entity=int, remaining=int


# ============================================================================
# HEALTH & ELIMINATION
# ============================================================================
EVENT_HEALTH_DAMAGE = "health_damage"          # payload: source_owner=int|None, target_entity=int, amount=int, reason=str
EVENT_HEALTH_HEAL = "health_heal"              # payload: source_owner=int|None, target_entity=int, amount=int, reason=str
EVENT_HEALTH_CHANGED = "health_changed"        # payload: entity=int, current=int, max_hp=int, delta=int, reason=str, source_owner=int|None
EVENT_PLAYER_ELIMINATED = "player_eliminated"  # payload: entity=int, source_owner=int|None, eliminated_count=int, damage_multiplier=int


# ============================================================================
# CARDS
# ============================================================================
EVENT_CARD_DRAWN = "card_drawn"    # payload: owner_entity=int, card=GameCard, remaining=int, reason=str
EVENT_DECK_EMPTY = "deck_empty"    # payload: owner_entity=int, reason=str


# ============================================================================
# TURN SYSTEM
# ============================================================================
EVENT_TURN_ADVANCED = "turn_advanced"    # payload: previous_owner=int|None, new_owner=int
EVENT_RANDOM_EVENT = "random_event"      # payload: owner_entity=int


# ============================================================================
# MESSAGES
# ============================================================================
EVENT_GAME_MESSAGE = "game_message"  # payload: text=str, replace=bool
