from __future__ import annotations

from typing import List, Sequence, Tuple

from esper import World

from element8.components.board import Board, TileState

Position = Tuple[int, int]


def perimeter_path(board_size: int) -> List[Position]:
    """Boundary cells of an N x N grid, clockwise from the top-left corner.

    Top row left to right, right column downward, bottom row right to left,
    left column upward. Sizes below 2 degrade to ``[(0, 0)]`` or ``[]``.
    """
    if board_size <= 0:
        return []
    if board_size == 1:
        return [(0, 0)]
    last = board_size - 1
    path: List[Position] = [(0, col) for col in range(board_size)]
    path.extend((row, last) for row in range(1, board_size))
    path.extend((last, col) for col in range(last - 1, -1, -1))
    path.extend((row, 0) for row in range(last - 1, 0, -1))
    return path


def path_index_for(path: Sequence[Position], row: int, col: int) -> int | None:
    for index, coord in enumerate(path):
        if coord == (row, col):
            return index
    return None


def corner_index_to_path_index(corner: int, board_size: int) -> int:
    """Map corner 0..3 (top-left, top-right, bottom-right, bottom-left) to its path index."""
    length = path_length(board_size)
    if length == 0:
        return 0
    return (corner * (board_size - 1)) % length


def path_length(board_size: int) -> int:
    if board_size <= 0:
        return 0
    if board_size == 1:
        return 1
    return 4 * (board_size - 1)


def wrap_path_index(index: int, length: int) -> int:
    if length <= 0:
        return 0
    return ((index % length) + length) % length


def step_along_path(index: int, forward: bool, spaces: int, length: int) -> int:
    delta = spaces if forward else -spaces
    return wrap_path_index(index + delta, length)


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def is_perimeter(row: int, col: int, board_size: int) -> bool:
    last = board_size - 1
    return row == 0 or col == 0 or row == last or col == last


def interior_cell_count(board_size: int) -> int:
    inner = board_size - 2
    return inner * inner if inner > 0 else 0


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def get_tile(world: World, row: int, col: int) -> TileState:
    return get_board(world).tile(row, col)
