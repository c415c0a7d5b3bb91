import unittest

from src.sudoku_simple.board import Board, INITIAL_PUZZLE, PlacementError

SOLUTION = {
    (1, 7): 4,
    (2, 1): 9,
    (4, 3): 8,
    (5, 7): 5,
    (6, 1): 6,
    (7, 6): 6,
}


def _sparse(cells: dict) -> list[list[int]]:
    grid = [[0] * 9 for _ in range(9)]
    for (r, c), v in cells.items():
        grid[r][c] = v
    return grid


class BoardSetupTests(unittest.TestCase):
    def test_working_grid_starts_as_copy_of_puzzle(self):
        board = Board()
        self.assertEqual(board.grid, [list(r) for r in INITIAL_PUZZLE])
        board.grid[1][7] = 4
        self.assertEqual(INITIAL_PUZZLE[1][7], 0)
        self.assertEqual(board.initial[1][7], 0)

    def test_remaining_matches_blank_cells(self):
        board = Board()
        self.assertEqual(board.remaining, 6)
        self.assertEqual(sorted(board.blank_cells()), sorted(SOLUTION))

    def test_rejects_malformed_puzzle(self):
        with self.assertRaises(ValueError):
            Board(puzzle=[[0] * 9] * 8)
        with self.assertRaises(ValueError):
            Board(puzzle=_sparse({(0, 0): 10}))


class LockedCellTests(unittest.TestCase):
    def test_every_prefilled_cell_is_locked(self):
        board = Board()
        for r in range(9):
            for c in range(9):
                self.assertEqual(board.is_locked(r, c), INITIAL_PUZZLE[r][c] != 0, (r, c))

    def test_placement_on_locked_cell_leaves_board_unchanged(self):
        board = Board()
        before = [row[:] for row in board.grid]
        for num in range(1, 10):
            with self.assertRaises(PlacementError) as ctx:
                board.place_number(0, 0, num)
            self.assertEqual(ctx.exception.reason, "locked_cell")
        self.assertEqual(board.grid, before)
        self.assertEqual(board.remaining, 6)

    def test_out_of_range_cell(self):
        board = Board()
        with self.assertRaises(IndexError):
            board.is_locked(9, 0)
        with self.assertRaises(IndexError):
            board.is_safe_to_place(0, -1, 1)


class SafePlacementTests(unittest.TestCase):
    def test_only_missing_value_is_safe_in_each_blank(self):
        board = Board()
        for (r, c), expected in SOLUTION.items():
            safe = [n for n in range(1, 10) if board.is_safe_to_place(r, c, n)]
            self.assertEqual(safe, [expected], (r, c))

    def test_row_duplicate(self):
        board = Board(puzzle=_sparse({(4, 8): 7}))
        self.assertFalse(board.is_safe_to_place(4, 0, 7))
        self.assertTrue(board.is_safe_to_place(4, 0, 6))

    def test_column_duplicate(self):
        board = Board(puzzle=_sparse({(8, 2): 7}))
        self.assertFalse(board.is_safe_to_place(0, 2, 7))
        self.assertTrue(board.is_safe_to_place(0, 3, 7))

    def test_box_duplicate(self):
        board = Board(puzzle=_sparse({(3, 3): 2}))
        # (5, 5) shares the middle box only
        self.assertFalse(board.is_safe_to_place(5, 5, 2))
        self.assertTrue(board.is_safe_to_place(5, 6, 2))
        self.assertTrue(board.is_safe_to_place(6, 5, 2))

    def test_valid_placement_decrements_remaining(self):
        board = Board()
        self.assertTrue(board.is_safe_to_place(1, 7, 4))
        board.place_number(1, 7, 4)
        self.assertEqual(board.value(1, 7), 4)
        self.assertEqual(board.remaining, 5)

    def test_duplicate_in_row_is_rejected(self):
        board = Board()
        # row 2 (one-based) already holds a 5
        self.assertFalse(board.is_safe_to_place(1, 7, 5))
        with self.assertRaises(PlacementError) as ctx:
            board.place_number(1, 7, 5)
        self.assertEqual(ctx.exception.reason, "unsafe_placement")
        self.assertEqual(board.value(1, 7), 0)
        self.assertEqual(board.remaining, 6)

    def test_filled_cell_cannot_be_overwritten(self):
        board = Board(puzzle=_sparse({}))
        board.place_number(0, 0, 1)
        with self.assertRaises(PlacementError) as ctx:
            board.place_number(0, 0, 2)
        self.assertEqual(ctx.exception.reason, "cell_filled")
        self.assertEqual(board.value(0, 0), 1)

    def test_number_out_of_range(self):
        board = Board()
        with self.assertRaises(PlacementError) as ctx:
            board.place_number(1, 7, 0)
        self.assertEqual(ctx.exception.reason, "invalid_number")


class SolvedTests(unittest.TestCase):
    def test_solved_only_after_every_blank_is_filled(self):
        board = Board()
        cells = list(SOLUTION.items())
        for i, ((r, c), v) in enumerate(cells):
            self.assertFalse(board.is_solved())
            board.place_number(r, c, v)
            self.assertEqual(board.remaining, len(cells) - i - 1)
        self.assertTrue(board.is_solved())
        self.assertEqual(board.remaining, 0)
        self.assertEqual(board.blank_cells(), [])


class RenderTests(unittest.TestCase):
    def test_initial_render(self):
        lines = Board().render().splitlines()
        self.assertEqual(lines[0], "Sudoku Board:")
        self.assertEqual(len(lines), 1 + 9 + 2)
        self.assertEqual(lines[1], "534|678|912")
        self.assertEqual(lines[2], "672|195|3 8")
        self.assertEqual(lines[4], "-----------")
        self.assertEqual(lines[8], "-----------")
        self.assertEqual(lines[11], "345|286|179")

    def test_render_reflects_placements(self):
        board = Board()
        board.place_number(1, 7, 4)
        self.assertIn("672|195|348", str(board).splitlines())


if __name__ == "__main__":
    unittest.main()
