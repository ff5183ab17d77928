from typing import List, Tuple

from PyQt5 import QtCore, QtWidgets

from battleship_abilities.domain.config import AFFECTED, BOARD_HEADER, SHIP, WATER
from battleship_abilities.domain.types import Grid
from battleship_abilities.ui.theme import Theme

CELL_PX = 40


def cell_colors(value: int) -> Tuple[str, str, str]:
    """(background, text, border) for a board value."""
    if value == SHIP:
        return Theme.SHIP_BG, Theme.SHIP_TEXT, Theme.SHIP_BORDER
    if value == AFFECTED:
        return Theme.AFFECTED_BG, Theme.AFFECTED_TEXT, Theme.AFFECTED_BORDER
    return Theme.WATER_BG, Theme.WATER_TEXT, Theme.BORDER_EMPTY


class BoardView(QtWidgets.QWidget):
    """Read-only grid of labels mirroring a board's cell values."""

    def __init__(self, board: Grid, parent=None):
        super().__init__(parent)
        self.board_size = len(board)
        self.cell_labels: List[List[QtWidgets.QLabel]] = []
        self._build_ui()
        self.set_board(board)

    def _build_ui(self):
        main_layout = QtWidgets.QVBoxLayout(self)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(12)

        header = QtWidgets.QLabel(BOARD_HEADER)
        f = header.font()
        f.setBold(True)
        header.setFont(f)
        header.setStyleSheet(f"color: {Theme.TEXT_MAIN};")
        main_layout.addWidget(header)

        board_container = QtWidgets.QWidget()
        board_layout = QtWidgets.QGridLayout(board_container)
        board_layout.setSpacing(2)
        board_layout.setContentsMargins(8, 8, 8, 8)

        for c in range(self.board_size):
            lbl = QtWidgets.QLabel(str(c))
            lbl.setAlignment(QtCore.Qt.AlignCenter)
            lbl.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
            board_layout.addWidget(lbl, 0, c + 1)
        for r in range(self.board_size):
            lbl = QtWidgets.QLabel(str(r))
            lbl.setAlignment(QtCore.Qt.AlignCenter)
            lbl.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
            board_layout.addWidget(lbl, r + 1, 0)

        for r in range(self.board_size):
            row = []
            for c in range(self.board_size):
                cell = QtWidgets.QLabel("")
                cell.setFixedSize(CELL_PX, CELL_PX)
                cell.setAlignment(QtCore.Qt.AlignCenter)
                row.append(cell)
                board_layout.addWidget(cell, r + 1, c + 1)
            self.cell_labels.append(row)

        main_layout.addWidget(board_container, stretch=0, alignment=QtCore.Qt.AlignCenter)

    def set_board(self, board: Grid) -> None:
        if len(board) != self.board_size:
            raise ValueError(f"expected a {self.board_size}x{self.board_size} board, got {len(board)} rows")
        for r, row in enumerate(board):
            if len(row) != self.board_size:
                raise ValueError(f"row {r} has {len(row)} cells, expected {self.board_size}")
        for r in range(self.board_size):
            for c in range(self.board_size):
                value = board[r][c]
                bg, fg, border = cell_colors(value)
                lbl = self.cell_labels[r][c]
                lbl.setStyleSheet(
                    f"background-color: {bg};"
                    f"color: {fg};"
                    f"border: 1px solid {border};"
                )
                lbl.setText("" if value == WATER else str(value))

    def cell_text(self, r: int, c: int) -> str:
        return self.cell_labels[r][c].text()
