from battleship_abilities.domain.config import AFFECTED, MASK_CENTER, MASK_ON, WATER
from battleship_abilities.domain.types import Grid


def apply_ability(board: Grid, mask: Grid, origin_r: int, origin_c: int) -> int:
    """Stamp ``mask`` onto ``board`` with the mask center over (origin_r, origin_c).

    Only water cells are marked; ships and already affected cells keep their
    value, and targets that fall off the board are skipped. Returns how many
    cells changed.
    """
    rows = len(board)
    marked = 0
    for i, mask_row in enumerate(mask):
        for j, v in enumerate(mask_row):
            if v != MASK_ON:
                continue

            board_r = origin_r - MASK_CENTER + i
            board_c = origin_c - MASK_CENTER + j
            if board_r < 0 or board_r >= rows or board_c < 0 or board_c >= len(board[board_r]):
                continue

            if board[board_r][board_c] == WATER:
                board[board_r][board_c] = AFFECTED
                marked += 1
    return marked
