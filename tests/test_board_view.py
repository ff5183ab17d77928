import os
import unittest
from unittest import mock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5 import QtGui, QtWidgets  # noqa: E402

from battleship_abilities.app.viewer import MainWindow, apply_dark_palette  # noqa: E402
from battleship_abilities.scenarios import AbilityPlacement, Scenario, run_scenario  # noqa: E402
from battleship_abilities.ui.board_view import BoardView, cell_colors  # noqa: E402
from battleship_abilities.ui.theme import Theme  # noqa: E402
from battleship_abilities.utils import debug  # noqa: E402


class BoardViewTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

    def test_cell_colors_by_value(self):
        self.assertEqual(cell_colors(3)[0], Theme.SHIP_BG)
        self.assertEqual(cell_colors(5)[0], Theme.AFFECTED_BG)
        self.assertEqual(cell_colors(0)[0], Theme.WATER_BG)

    def test_view_mirrors_board(self):
        board = run_scenario()
        view = BoardView(board)
        self.assertEqual(view.cell_text(2, 3), "3")
        self.assertEqual(view.cell_text(1, 3), "5")
        self.assertEqual(view.cell_text(9, 9), "")

    def test_set_board_rejects_wrong_size(self):
        view = BoardView(run_scenario())
        with self.assertRaises(ValueError):
            view.set_board([[0]])

    def test_set_board_rejects_ragged_rows(self):
        view = BoardView(run_scenario())
        board = run_scenario()
        board[4] = board[4][:7]
        with self.assertRaises(ValueError) as ctx:
            view.set_board(board)
        self.assertIn("row 4", str(ctx.exception))


class MainWindowTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

    def test_default_window_shows_board_and_abilities(self):
        window = MainWindow()
        self.assertEqual(window.board_view.cell_text(2, 3), "3")
        self.assertEqual(window.board_view.cell_text(1, 3), "5")
        self.assertEqual(
            [lbl.text() for lbl in window.ability_labels],
            ["Cone at (1,3)", "Cross at (4,5)", "Diamond at (7,2)"],
        )
        self.assertIn("Manhattan", window.ability_labels[2].toolTip())

    def test_invalid_scenario_pops_error_and_raises(self):
        bad = Scenario("bad", "Bad", tuple(), (AbilityPlacement("meteor", (0, 0)),))
        with mock.patch.object(debug.QtWidgets, "QMessageBox") as box_cls:
            with self.assertRaises(ValueError):
                MainWindow(bad)
        box_cls.return_value.exec_.assert_called_once()

    def test_dark_palette(self):
        apply_dark_palette(self.app)
        self.assertEqual(self.app.palette().color(QtGui.QPalette.Window).name(), Theme.BG_DARK)


if __name__ == "__main__":
    unittest.main()
