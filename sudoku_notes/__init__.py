"""Sudoku solver built on candidate notes, naked singles and backtracking."""

from .core.board import SudokuBoard
from .solvers.backtracking import solve_one, solve_all

__version__ = "1.0.0"

__all__ = ["SudokuBoard", "solve_one", "solve_all", "__version__"]
