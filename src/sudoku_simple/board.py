"""
Board: centralized puzzle state and placement rules.

- Holds the fixed starting puzzle (locked cells) and the working grid the player fills in.
- Checks row/column/box uniqueness before applying a placement and tracks how many blanks remain.
- Exposes is_solved() as the authoritative completion check and render() for console display.

Used by GameRunner to validate and apply the player's moves.

"""
from __future__ import annotations
import logging
from typing import Sequence

SIZE = 9
BOX = 3

# 0 = blank
INITIAL_PUZZLE: tuple[tuple[int, ...], ...] = (
    (5, 3, 4, 6, 7, 8, 9, 1, 2),
    (6, 7, 2, 1, 9, 5, 3, 0, 8),
    (1, 0, 8, 3, 4, 2, 5, 6, 7),
    (8, 5, 9, 7, 6, 1, 4, 2, 3),
    (4, 2, 6, 0, 5, 3, 7, 9, 1),
    (7, 1, 3, 9, 2, 4, 8, 0, 6),
    (9, 0, 1, 5, 3, 7, 2, 8, 4),
    (2, 8, 7, 4, 1, 9, 0, 3, 5),
    (3, 4, 5, 2, 8, 6, 1, 7, 9),
)

ROW_SEPARATOR = "-" * 11
COL_SEPARATOR = "|"


class PlacementError(ValueError):
    """Raised when place_number() is called against its preconditions."""
    def __init__(self, reason: str, row: int, col: int, num: int):
        super().__init__(f"cannot place {num} at ({row}, {col}): {reason}")
        self.reason = reason
        self.row = row
        self.col = col
        self.num = num


def _check_grid(puzzle: Sequence[Sequence[int]]) -> None:
    if len(puzzle) != SIZE or any(len(r) != SIZE for r in puzzle):
        raise ValueError("puzzle must be a 9x9 grid")
    for r in puzzle:
        for v in r:
            if not (0 <= v <= SIZE):
                raise ValueError(f"puzzle values must be in 0..9, got {v!r}")


class Board:
    """Sudoku board around a fixed starting puzzle and a mutable working grid."""
    def __init__(self, puzzle: Sequence[Sequence[int]] | None = None):
        self.log = logging.getLogger("Board")
        initial = INITIAL_PUZZLE if puzzle is None else puzzle
        _check_grid(initial)
        self.initial: tuple[tuple[int, ...], ...] = tuple(tuple(r) for r in initial)
        self.grid: list[list[int]] = [list(r) for r in self.initial]
        self.remaining = sum(1 for r in self.initial for v in r if v == 0)

    # ---------------- Cell queries -----------------
    @staticmethod
    def _check_cell(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"cell ({row}, {col}) is off the board")

    def value(self, row: int, col: int) -> int:
        self._check_cell(row, col)
        return self.grid[row][col]

    def is_locked(self, row: int, col: int) -> bool:
        """True if the cell was filled in the starting puzzle."""
        self._check_cell(row, col)
        return self.initial[row][col] != 0

    def blank_cells(self) -> list[tuple[int, int]]:
        return [(r, c) for r in range(SIZE) for c in range(SIZE) if self.grid[r][c] == 0]

    # ---------------- Placement rules -----------------
    def is_safe_in_row(self, row: int, num: int) -> bool:
        return num not in self.grid[row]

    def is_safe_in_column(self, col: int, num: int) -> bool:
        return all(self.grid[r][col] != num for r in range(SIZE))

    def is_safe_in_box(self, box_row: int, box_col: int, num: int) -> bool:
        for r in range(box_row, box_row + BOX):
            for c in range(box_col, box_col + BOX):
                if self.grid[r][c] == num:
                    return False
        return True

    def is_safe_to_place(self, row: int, col: int, num: int) -> bool:
        """True if num is not already in the row, the column or the 3x3 box of (row, col)."""
        self._check_cell(row, col)
        return (
            self.is_safe_in_row(row, num)
            and self.is_safe_in_column(col, num)
            and self.is_safe_in_box(row - row % BOX, col - col % BOX, num)
        )

    def place_number(self, row: int, col: int, num: int) -> None:
        """Write num into an empty, unlocked cell. The board is untouched on PlacementError."""
        self._check_cell(row, col)
        if self.is_locked(row, col):
            raise PlacementError("locked_cell", row, col, num)
        if not (1 <= num <= SIZE):
            raise PlacementError("invalid_number", row, col, num)
        if self.grid[row][col] != 0:
            raise PlacementError("cell_filled", row, col, num)
        if not self.is_safe_to_place(row, col, num):
            raise PlacementError("unsafe_placement", row, col, num)
        self.grid[row][col] = num
        self.remaining -= 1
        self.log.debug("Placed %d at (%d, %d); %d blank(s) left", num, row, col, self.remaining)

    # ---------------- Status / display -----------------
    def is_solved(self) -> bool:
        return all(v != 0 for r in self.grid for v in r)

    def render(self) -> str:
        lines = ["Sudoku Board:"]
        for i, row in enumerate(self.grid):
            if i % BOX == 0 and i != 0:
                lines.append(ROW_SEPARATOR)
            parts = []
            for j, v in enumerate(row):
                if j % BOX == 0 and j != 0:
                    parts.append(COL_SEPARATOR)
                parts.append(" " if v == 0 else str(v))
            lines.append("".join(parts))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
