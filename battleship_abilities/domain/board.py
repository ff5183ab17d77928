from typing import Iterable, List

from .config import BOARD_SIZE, SHIP, WATER
from .types import Cell, Grid


def in_bounds(r: int, c: int, board_size: int = BOARD_SIZE) -> bool:
    return 0 <= r < board_size and 0 <= c < board_size


def create_board(board_size: int = BOARD_SIZE) -> Grid:
    return [[WATER for _ in range(board_size)] for _ in range(board_size)]


def init_board(board: Grid) -> None:
    """Reset every cell of ``board`` to water, in place."""
    for row in board:
        for c in range(len(row)):
            row[c] = WATER


def place_ship(board: Grid, cells: Iterable[Cell]) -> None:
    for r, c in cells:
        board[r][c] = SHIP


def cells_with_value(board: Grid, value: int) -> List[Cell]:
    return [
        (r, c)
        for r, row in enumerate(board)
        for c, v in enumerate(row)
        if v == value
    ]
