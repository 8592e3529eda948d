from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class TileState(Enum):
    OPEN = "open"
    BARRIER = "barrier"


@dataclass(slots=True)
class Board:
    """Square grid of tile states; players only ever travel along its perimeter."""
    size: int
    tiles: List[List[TileState]] = field(default_factory=list)
    path: List[Tuple[int, int]] = field(default_factory=list)

    @classmethod
    def empty(cls, size: int) -> "Board":
        from element8.systems.board_ops import perimeter_path

        tiles = [[TileState.OPEN for _ in range(size)] for _ in range(size)]
        return cls(size=size, tiles=tiles, path=perimeter_path(size))

    def tile(self, row: int, col: int) -> TileState:
        return self.tiles[row][col]

    def set_tile(self, row: int, col: int, state: TileState) -> None:
        self.tiles[row][col] = state

    def barriers(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c] is TileState.BARRIER
        ]
