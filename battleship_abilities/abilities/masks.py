from typing import Callable, List

from battleship_abilities.domain.config import (
    CONE_HEIGHT,
    DIAMOND_RADIUS,
    MASK_CENTER,
    MASK_OFF,
    MASK_ON,
    MASK_SIZE,
)
from battleship_abilities.domain.types import Cell, Grid

CellPredicate = Callable[[int, int], bool]


def make_mask(mask_size: int = MASK_SIZE) -> Grid:
    return [[MASK_OFF for _ in range(mask_size)] for _ in range(mask_size)]


def fill_stencil(mask: Grid, predicate: CellPredicate) -> None:
    """Overwrite every mask cell with MASK_ON where ``predicate(i, j)`` holds, else MASK_OFF."""
    for i, row in enumerate(mask):
        for j in range(len(row)):
            row[j] = MASK_ON if predicate(i, j) else MASK_OFF


def _in_cone(i: int, j: int) -> bool:
    # Width grows by one cell per side on each row below the apex.
    return i < CONE_HEIGHT and abs(j - MASK_CENTER) <= i


def _in_cross(i: int, j: int) -> bool:
    return i == MASK_CENTER or j == MASK_CENTER


def _in_diamond(i: int, j: int) -> bool:
    return abs(i - MASK_CENTER) + abs(j - MASK_CENTER) <= DIAMOND_RADIUS


def build_cone(mask: Grid) -> None:
    fill_stencil(mask, _in_cone)


def build_cross(mask: Grid) -> None:
    fill_stencil(mask, _in_cross)


def build_diamond(mask: Grid) -> None:
    fill_stencil(mask, _in_diamond)


def mask_cells(mask: Grid) -> List[Cell]:
    return [
        (i, j)
        for i, row in enumerate(mask)
        for j, v in enumerate(row)
        if v == MASK_ON
    ]
