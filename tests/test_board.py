import io
import unittest

from battleship_abilities.domain.board import create_board, in_bounds, init_board, place_ship
from battleship_abilities.domain.printer import format_board, print_board


class BoardTests(unittest.TestCase):
    def test_init_board_resets_in_place(self):
        board = [[9 for _ in range(10)] for _ in range(10)]
        rows = list(board)
        init_board(board)
        self.assertEqual(board, create_board())
        self.assertTrue(all(a is b for a, b in zip(rows, board)))

    def test_place_ship_sets_cells(self):
        board = create_board()
        place_ship(board, [(6, 7), (7, 7)])
        self.assertEqual(board[6][7], 3)
        self.assertEqual(board[7][7], 3)
        self.assertEqual(sum(v for row in board for v in row), 6)

    def test_in_bounds(self):
        self.assertTrue(in_bounds(0, 0))
        self.assertTrue(in_bounds(9, 9))
        self.assertFalse(in_bounds(10, 0))
        self.assertFalse(in_bounds(0, -1))


class PrinterTests(unittest.TestCase):
    def test_format_board_layout(self):
        board = create_board()
        board[0][1] = 3
        lines = format_board(board).split("\n")
        self.assertEqual(lines[0], "Board (0=water, 3=ship, 5=affected area):")
        self.assertEqual(lines[1], "")
        self.assertEqual(lines[2], "0 3 0 0 0 0 0 0 0 0 ")
        self.assertEqual(len(lines), 13)
        self.assertEqual(lines[-1], "")

    def test_print_board_writes_to_stream(self):
        board = create_board()
        out = io.StringIO()
        print_board(board, out)
        self.assertEqual(out.getvalue(), format_board(board))


if __name__ == "__main__":
    unittest.main()
