"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from itertools import islice
from typing import TYPE_CHECKING

from .board import GRID_SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid_placement(board: SudokuBoard, x: int, y: int, value: int) -> bool:
    """
    Check if placing a value at (x, y) is valid.

    Args:
        board: The Sudoku board.
        x: Column index.
        y: Row index.
        value: Value to check (1 to 9).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > GRID_SIZE:
        return False

    # Check row
    if value in board.get_row(y):
        return False

    # Check column
    if value in board.get_col(x):
        return False

    # Check box
    if value in board.get_box(x, y):
        return False

    return True


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    return board.is_valid()


def count_solutions(board: SudokuBoard, limit: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Stops the search as soon as limit solutions have been seen.

    Args:
        board: The puzzle board.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit).
    """
    from ..solvers.backtracking import solve_all

    return sum(1 for _ in islice(solve_all(board), limit))


def has_unique_solution(board: SudokuBoard) -> bool:
    """
    Check if a puzzle has exactly one solution.

    Args:
        board: The puzzle board.

    Returns:
        True if the puzzle has exactly one solution.
    """
    return count_solutions(board, limit=2) == 1


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    clues = puzzle.grid != 0
    if (puzzle.grid[clues] != solution.grid[clues]).any():
        return False

    # Check that solution is complete and valid
    return solution.is_solved()
