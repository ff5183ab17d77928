import sys
from typing import Optional, TextIO

from .config import BOARD_HEADER
from .types import Grid


def format_board(board: Grid) -> str:
    """Render the board as the header, a blank line, then one line per row.

    Every value is followed by a single space, so each row line ends in
    a trailing space before the newline.
    """
    lines = [BOARD_HEADER, ""]
    for row in board:
        lines.append("".join(f"{v} " for v in row))
    return "\n".join(lines) + "\n"


def print_board(board: Grid, stream: Optional[TextIO] = None) -> None:
    if stream is None:
        stream = sys.stdout
    stream.write(format_board(board))
