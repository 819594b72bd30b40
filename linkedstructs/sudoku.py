"""Solving 9x9 sudoku puzzles as exact cover problems with Dancing Links."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional, TextIO

from linkedstructs.dancing_links import DancingLinks

GRID_SIZE = 9
BOX_SIZE = 3
NO_COLUMNS = 4 * GRID_SIZE * GRID_SIZE
NO_ROWS = GRID_SIZE * GRID_SIZE * GRID_SIZE

Grid = list[list[int]]


class SudokuSolver:
    """The exact cover matrix of a sudoku grid, with the cell each row stands for."""

    def __init__(self, matrix: list[list[int]], row_map: list[tuple[int, int, int]]) -> None:
        self.matrix = matrix
        self.row_map = row_map

    @staticmethod
    def build_row(row_no: int, col_no: int, digit: int) -> list[int]:
        """Return the constraint row for placing ``digit`` at (``row_no``, ``col_no``).

        The columns are, in order: one per cell, one per (row, digit),
        one per (column, digit) and one per (box, digit).
        """
        if not (0 <= row_no < GRID_SIZE and 0 <= col_no < GRID_SIZE):
            raise ValueError(f"cell ({row_no}, {col_no}) is outside the grid")
        if not 1 <= digit <= GRID_SIZE:
            raise ValueError(f"digit {digit} is not between 1 and {GRID_SIZE}")
        block = GRID_SIZE * GRID_SIZE
        box_no = (row_no // BOX_SIZE) * BOX_SIZE + col_no // BOX_SIZE
        row = [0] * NO_COLUMNS
        row[GRID_SIZE * row_no + col_no] = 1
        row[block + GRID_SIZE * row_no + digit - 1] = 1
        row[2 * block + GRID_SIZE * col_no + digit - 1] = 1
        row[3 * block + GRID_SIZE * box_no + digit - 1] = 1
        return row

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> "SudokuSolver":
        """Build the exact cover matrix of ``grid``, where 0 marks an empty cell."""
        if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
            raise ValueError(f"grid must be {GRID_SIZE}x{GRID_SIZE}")
        matrix: list[list[int]] = []
        row_map: list[tuple[int, int, int]] = []
        for row_no, row in enumerate(grid):
            for col_no, cell in enumerate(row):
                if not 0 <= cell <= GRID_SIZE:
                    raise ValueError(
                        f"cell ({row_no}, {col_no}) holds {cell}, expected 0 to {GRID_SIZE}"
                    )
                digits = [cell] if cell else range(1, GRID_SIZE + 1)
                for digit in digits:
                    matrix.append(cls.build_row(row_no, col_no, digit))
                    row_map.append((row_no, col_no, digit))
        return cls(matrix, row_map)

    def solve(self) -> Optional[Grid]:
        """Return the first solution found as a grid of digits, or None if there is none."""
        results = DancingLinks.from_matrix(self.matrix).search()
        if not results:
            return None
        grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
        for row_idx in results[0]:
            row_no, col_no, digit = self.row_map[row_idx]
            grid[row_no][col_no] = digit
        return grid


def format_grid(grid: Sequence[Sequence[int]], title: str = "problem:") -> str:
    """Render ``grid`` as a boxed text table under ``title``; 0 shows as a blank."""
    width = GRID_SIZE * 4 + BOX_SIZE + 2
    lines = [title]
    for row_no, row in enumerate(grid):
        lines.append(("=" if row_no % BOX_SIZE == 0 else "-") * width)
        parts = ["|"]
        for col_no, cell in enumerate(row):
            if col_no % BOX_SIZE == 0:
                parts.append("|")
            parts.append(f" {cell if cell else ' '} |")
        parts.append("|")
        lines.append("".join(parts))
    lines.append("=" * width)
    return "\n".join(lines) + "\n"


def print_grid(
    grid: Sequence[Sequence[int]],
    title: str = "problem:",
    file: Optional[TextIO] = None,
) -> None:
    """Write :func:`format_grid` of ``grid`` to ``file`` (stdout by default)."""
    out = sys.stdout if file is None else file
    out.write(format_grid(grid, title))