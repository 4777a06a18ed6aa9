"""Unit tests for the Sudoku board and validation utilities."""

import numpy as np
import pytest
from sudoku_notes.core.board import SudokuBoard
from sudoku_notes.core.errors import CoordinateOutOfRange, DigitOutOfRange, SudokuError
from sudoku_notes.core.validator import (
    is_valid_placement,
    is_valid_board,
    count_solutions,
    has_unique_solution,
    validate_solution,
)


TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# TEST_SOLUTION with a 1/3 rectangle at rows 3-4, columns 5 and 8 removed
TWO_SOLUTION_PUZZLE = (
    "534678912"
    "672195348"
    "198342567"
    "859760420"
    "426850790"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# The other completion of TWO_SOLUTION_PUZZLE
SWAPPED_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859763421"
    "426851793"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.count_empty() == 81
        assert board.count_filled() == 0
        for x in range(9):
            for y in range(9):
                assert board.get(x, y) == 0

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(3, 4, 3)
        assert board.get(3, 4) == 3
        assert not board.is_empty(3, 4)

        board.clear(3, 4)
        assert board.is_empty(3, 4)

    def test_x_is_column_and_y_is_row(self):
        """Test that cell (x, y) is stored at index x + 9*y."""
        board = SudokuBoard()
        board.set(3, 4, 7)
        assert board.to_list()[3 + 4 * 9] == 7
        assert board.get_row(4)[3] == 7
        assert board.get_col(3)[4] == 7

    def test_from_flat_list(self):
        """Test creating a board from 81 digits."""
        board = SudokuBoard.from_list([int(c) for c in TEST_PUZZLE])
        assert board.get(0, 0) == 5
        assert board.get(1, 0) == 3
        assert board.get(0, 1) == 6
        assert board.get(4, 0) == 7
        assert board.get(2, 0) == 0

    def test_from_2d_list(self):
        """Test creating a board from nested rows."""
        rows = [[int(c) for c in TEST_PUZZLE[i:i + 9]] for i in range(0, 81, 9)]
        board = SudokuBoard.from_2d_list(rows)
        assert board == SudokuBoard.from_string(TEST_PUZZLE)

    def test_wrong_shape_rejected(self):
        """Test that a grid without 81 cells is rejected."""
        with pytest.raises(ValueError):
            SudokuBoard([0] * 80)

    def test_get_rejects_invalid_coordinates(self):
        """Test that coordinates outside 0-8 raise."""
        board = SudokuBoard()
        with pytest.raises(CoordinateOutOfRange):
            board.get(11, 3)
        with pytest.raises(CoordinateOutOfRange):
            board.get(1, 9)
        with pytest.raises(CoordinateOutOfRange):
            board.get(-1, 0)

    def test_set_rejects_invalid_coordinates(self):
        """Test that set validates coordinates before writing."""
        board = SudokuBoard()
        with pytest.raises(CoordinateOutOfRange):
            board.set(10, 7, 0)
        with pytest.raises(CoordinateOutOfRange):
            board.set(5, 9, 1)

    def test_set_rejects_invalid_value(self):
        """Test that digits above 9 are never clamped."""
        board = SudokuBoard()
        with pytest.raises(DigitOutOfRange):
            board.set(7, 0, 10)
        with pytest.raises(DigitOutOfRange):
            board.set(7, 0, -1)
        assert board.get(7, 0) == 0

    def test_construction_rejects_invalid_value(self):
        """Test that a clue above 9 fails construction."""
        values = [0] * 81
        values[3 + 5 * 9] = 10
        with pytest.raises(DigitOutOfRange):
            SudokuBoard(values)

    def test_non_integer_input_rejected(self):
        """Test that fractional digits and coordinates are never truncated."""
        board = SudokuBoard()
        with pytest.raises(DigitOutOfRange):
            board.set(0, 0, 2.5)
        with pytest.raises(CoordinateOutOfRange):
            board.get(1.5, 0)
        with pytest.raises(CoordinateOutOfRange):
            board.set(0, 2.0, 1)
        assert board.get(0, 0) == 0

        values = [0.0] * 81
        values[0] = 2.5
        with pytest.raises(DigitOutOfRange):
            SudokuBoard(values)

    def test_numpy_integers_accepted(self):
        """Test numpy integer coordinates and digits."""
        board = SudokuBoard()
        board.set(np.int64(3), np.int32(4), np.int64(7))
        assert board.get(3, 4) == 7

    def test_precondition_errors_share_base(self):
        """Test the error hierarchy."""
        assert issubclass(CoordinateOutOfRange, SudokuError)
        assert issubclass(DigitOutOfRange, SudokuError)
        assert issubclass(DigitOutOfRange, ValueError)

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()  # Empty board is valid

        board.set(0, 0, 5)
        board.set(1, 0, 5)  # Duplicate in row
        assert not board.is_valid()

    def test_duplicate_in_column(self):
        """Test a repeated digit in one column."""
        board = SudokuBoard()
        board.set(4, 0, 2)
        board.set(4, 8, 2)
        assert not board.is_valid()

    def test_duplicate_in_box(self):
        """Test a repeated digit only visible through the box."""
        board = SudokuBoard()
        board.set(6, 6, 9)
        board.set(8, 8, 9)
        assert not board.is_valid()

    def test_same_digit_in_different_units(self):
        """Test that equal digits in unrelated cells are fine."""
        board = SudokuBoard()
        board.set(0, 0, 4)
        board.set(4, 4, 4)
        board.set(8, 8, 4)
        assert board.is_valid()

    def test_is_solved(self):
        """Test solved detection."""
        assert SudokuBoard.from_string(TEST_SOLUTION).is_solved()
        assert not SudokuBoard.from_string(TEST_PUZZLE).is_solved()
        assert SudokuBoard.from_string(TEST_PUZZLE).has_empty_cells()

    def test_count_of(self):
        """Test counting digits."""
        solution = SudokuBoard.from_string(TEST_SOLUTION)
        for digit in range(1, 10):
            assert solution.count_of(digit) == 9

        puzzle = SudokuBoard.from_string(TEST_PUZZLE)
        assert puzzle.count_of(0) == puzzle.count_empty() == 51
        assert puzzle.count_of(5) == 3

        with pytest.raises(DigitOutOfRange):
            puzzle.count_of(10)

    def test_get_empty_cells_is_row_major(self):
        """Test that empty cells are listed y first, then x."""
        board = SudokuBoard.from_string(TWO_SOLUTION_PUZZLE)
        assert board.get_empty_cells() == [(5, 3), (8, 3), (5, 4), (8, 4)]

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"  # 80 zeros and a 9 at the end
        board = SudokuBoard.from_string(puzzle_str)
        assert board.get(8, 8) == 9

    def test_from_string_dots_and_whitespace(self):
        """Test dots as empty cells and line breaks between rows."""
        text = "\n".join(TEST_PUZZLE[i:i + 9].replace("0", ".") for i in range(0, 81, 9))
        assert SudokuBoard.from_string(text) == SudokuBoard.from_string(TEST_PUZZLE)

    def test_from_string_rejects_bad_input(self):
        """Test parse errors."""
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")
        with pytest.raises(ValueError):
            SudokuBoard.from_string("x" + "0" * 80)

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert board.to_string() == TEST_PUZZLE

    def test_pretty_print(self):
        """Test the boxed text rendering."""
        text = str(SudokuBoard.from_string(TEST_PUZZLE))
        lines = text.splitlines()
        assert len(lines) == 13
        assert lines[0] == "+-------+-------+-------+"
        assert lines[1] == "| 5 3 . | . 7 . | . . . |"

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_equality_and_hash(self):
        """Test value semantics."""
        a = SudokuBoard.from_string(TEST_PUZZLE)
        b = SudokuBoard.from_string(TEST_PUZZLE)
        assert a == b
        assert hash(a) == hash(b)
        b.set(2, 0, 4)
        assert a != b


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 5, 0, 7)

        # Out of range digits are never valid
        assert not is_valid_placement(board, 5, 0, 0)

    def test_is_valid_board(self):
        """Test whole-board conflict check."""
        assert is_valid_board(SudokuBoard.from_string(TEST_PUZZLE))
        assert is_valid_board(SudokuBoard.from_string(TEST_SOLUTION))
        assert not is_valid_board(SudokuBoard.from_string("55" + TEST_PUZZLE[2:]))

    def test_count_solutions(self):
        """Test counting up to a limit."""
        assert count_solutions(SudokuBoard.from_string(TEST_PUZZLE)) == 1
        assert count_solutions(SudokuBoard.from_string(TWO_SOLUTION_PUZZLE), limit=5) == 2
        assert count_solutions(SudokuBoard.from_string(TWO_SOLUTION_PUZZLE), limit=1) == 1

    def test_has_unique_solution(self):
        """Test uniqueness check."""
        assert has_unique_solution(SudokuBoard.from_string(TEST_PUZZLE))
        assert not has_unique_solution(SudokuBoard.from_string(TWO_SOLUTION_PUZZLE))

    def test_validate_solution(self):
        """Test that a solution must be solved and keep the clues."""
        puzzle = SudokuBoard.from_string(TEST_PUZZLE)
        solution = SudokuBoard.from_string(TEST_SOLUTION)
        assert validate_solution(puzzle, solution)

        # Solved grid that disagrees with the clue at (8, 3)
        swapped = SudokuBoard.from_string(SWAPPED_SOLUTION)
        assert swapped.is_solved()
        assert not validate_solution(puzzle, swapped)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
