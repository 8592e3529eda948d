import logging
import random
from typing import List, Optional, Tuple

from esper import World

from element8.components.board import Board, TileState
from element8.events.bus import (
    EventBus,
    EVENT_BARRIERS_PLACED,
    EVENT_BOARD_CHANGED,
    EVENT_TILE_SWAP_REQUEST,
)
from element8.systems.board_ops import is_perimeter
from element8.utils.game_state import get_rng, get_rules

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the single Board entity: barrier placement, tile clearing and map shifts."""

    def __init__(self, world: World, event_bus: EventBus, *, rng: Optional[random.Random] = None):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or get_rng(world)
        self.board_entity: Optional[int] = None
        self.event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)
        self.reset_board()

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def reset_board(self) -> Board:
        rules = get_rules(self.world).validate()
        size = rules.board_size
        board = Board.empty(size)
        if self.board_entity is None:
            self.board_entity = self.world.create_entity(board)
        else:
            self.world.add_component(self.board_entity, board)
        placed = self.place_barriers(rules.barrier_count)
        logger.debug("Board %dx%d ready with %d barriers", size, size, len(placed))
        return board

    def place_barriers(self, count: int) -> List[Tuple[int, int]]:
        """Mark ``count`` distinct random non-perimeter cells as barriers."""
        board = self.board
        placed: List[Tuple[int, int]] = []
        while len(placed) < count:
            row = self._rng.randrange(board.size)
            col = self._rng.randrange(board.size)
            if is_perimeter(row, col, board.size):
                continue
            if board.tile(row, col) is TileState.BARRIER:
                continue
            board.set_tile(row, col, TileState.BARRIER)
            placed.append((row, col))
        if placed:
            self.event_bus.emit(EVENT_BARRIERS_PLACED, positions=list(placed))
        return placed

    def clear_tile(self, row: int, col: int) -> bool:
        board = self.board
        if board.tile(row, col) is not TileState.BARRIER:
            return False
        board.set_tile(row, col, TileState.OPEN)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="clear", positions=[(row, col)])
        return True

    def swap_tiles(self, a: Tuple[int, int], b: Tuple[int, int]):
        board = self.board
        (ar, ac), (br, bc) = a, b
        board.tiles[ar][ac], board.tiles[br][bc] = board.tiles[br][bc], board.tiles[ar][ac]

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if not src or not dst:
            return
        self.swap_tiles(src, dst)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=kwargs.get('reason', 'swap'), positions=[src, dst])
