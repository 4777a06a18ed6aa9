"""Sudoku board representation for the standard 9x9 puzzle."""

from __future__ import annotations
import numpy as np
from typing import Iterable, List, Optional, Sequence

from .errors import CoordinateOutOfRange, DigitOutOfRange

GRID_SIZE = 9
BOX_SIZE = 3
NUM_CELLS = GRID_SIZE * GRID_SIZE


def is_integral(value) -> bool:
    # bool is excluded: True is not a coordinate or a digit
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def validate_coordinates(x: int, y: int) -> None:
    """Raise CoordinateOutOfRange unless both x and y are integers in 0-8."""
    if not (is_integral(x) and is_integral(y) and 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
        raise CoordinateOutOfRange(x, y)


def validate_value(value: int) -> None:
    """Raise DigitOutOfRange unless value is an integer in 0-9."""
    if not is_integral(value) or value < 0 or value > GRID_SIZE:
        raise DigitOutOfRange(value)


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board.

    Cells are addressed as (x, y): x is the column offset, y the row offset,
    origin top-left. The digit 0 marks an empty cell. Values are stored in a
    (9, 9) array indexed [y, x], so the flattened board is in x + 9*y order.
    """

    def __init__(self, grid: Optional[Iterable] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial digits, either 81 values in x + 9*y order
                  or 9 rows of 9 values. If None, creates an empty board.
        """
        if grid is None:
            self.grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int32)
            return

        arr = np.asarray(grid)
        if arr.shape not in ((NUM_CELLS,), (GRID_SIZE, GRID_SIZE)):
            raise ValueError(f"Grid must hold 81 values or 9x9 values, got shape {arr.shape}")

        for value in arr.flat:
            validate_value(value)

        self.grid = arr.reshape(GRID_SIZE, GRID_SIZE).astype(np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, x: int, y: int) -> int:
        """Get value at position (x, y). 0 means empty."""
        validate_coordinates(x, y)
        return int(self.grid[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        """Set value at position (x, y). Use 0 to clear."""
        validate_coordinates(x, y)
        validate_value(value)
        self.grid[y, x] = value

    def clear(self, x: int, y: int) -> None:
        """Clear the cell at position (x, y)."""
        self.set(x, y, 0)

    def is_empty(self, x: int, y: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.get(x, y) == 0

    def get_row(self, y: int) -> np.ndarray:
        """Get all values in row y."""
        validate_coordinates(0, y)
        return self.grid[y, :]

    def get_col(self, x: int) -> np.ndarray:
        """Get all values in column x."""
        validate_coordinates(x, 0)
        return self.grid[:, x]

    def get_box(self, x: int, y: int) -> np.ndarray:
        """Get all values in the box containing (x, y)."""
        validate_coordinates(x, y)
        box_x = (x // BOX_SIZE) * BOX_SIZE
        box_y = (y // BOX_SIZE) * BOX_SIZE
        return self.grid[box_y:box_y + BOX_SIZE,
                         box_x:box_x + BOX_SIZE].flatten()

    def get_empty_cells(self) -> List[tuple]:
        """Get all empty cell positions as (x, y), in row-major order."""
        ys, xs = np.nonzero(self.grid == 0)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def count_of(self, digit: int) -> int:
        """Count how many cells hold digit (0 counts empty cells)."""
        validate_value(digit)
        return int(np.sum(self.grid == digit))

    def has_empty_cells(self) -> bool:
        """Check if any cell is still empty."""
        return bool(np.any(self.grid == 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return not self.has_empty_cells()

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.

        Rows are scanned first, then columns, then boxes. Each unit keeps a
        9-bit mask of the digits seen so far and the scan stops at the first
        repeated digit. Empty cells are skipped. Does not check completeness.
        """
        cells = self.grid.tolist()

        for y in range(GRID_SIZE):
            if not _unit_is_valid(cells[y][x] for x in range(GRID_SIZE)):
                return False

        for x in range(GRID_SIZE):
            if not _unit_is_valid(cells[y][x] for y in range(GRID_SIZE)):
                return False

        for box_y in range(0, GRID_SIZE, BOX_SIZE):
            for box_x in range(0, GRID_SIZE, BOX_SIZE):
                box = (cells[box_y + i][box_x + j]
                       for i in range(BOX_SIZE) for j in range(BOX_SIZE))
                if not _unit_is_valid(box):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_list(self) -> List[int]:
        """Return the 81 digits in x + 9*y order."""
        return self.grid.flatten().tolist()

    def to_string(self) -> str:
        """Convert board to an 81 character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.to_list())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: 81 characters, 0 or . for empty, 1-9 for values. Whitespace
               (such as line breaks between rows) is ignored.
        """
        s = ''.join(s.split())
        if len(s) != NUM_CELLS:
            raise ValueError(f"String length must be {NUM_CELLS}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(0)
            elif c in '0123456789':
                values.append(int(c))
            else:
                raise ValueError(f"Unexpected character {c!r} in puzzle string")

        return cls(values)

    @classmethod
    def from_list(cls, values: Sequence[int]) -> SudokuBoard:
        """Create a board from 81 digits in x + 9*y order."""
        return cls(list(values))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from 9 rows of 9 digits."""
        return cls(data)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for y in range(GRID_SIZE):
            if y % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for x in range(GRID_SIZE):
                val = self.grid[y, x]
                row_str += ' .' if val == 0 else f' {val}'

                if (x + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())


def _unit_is_valid(values: Iterable[int]) -> bool:
    """Check nine unit values for a repeated non-zero digit."""
    seen = 0
    for value in values:
        if value == 0:
            continue
        bit = 1 << (value - 1)
        if seen & bit:
            return False
        seen |= bit
    return True
