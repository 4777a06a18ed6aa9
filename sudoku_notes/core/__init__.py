"""Core module for Sudoku board representation and validation."""

from .errors import SudokuError, CoordinateOutOfRange, DigitOutOfRange, SearchTimeout
from .board import SudokuBoard, GRID_SIZE, BOX_SIZE, NUM_CELLS
from .candidates import CandidateSet, CandidateGrid, ALL_CANDIDATES
from .validator import is_valid_placement, is_valid_board, has_unique_solution

__all__ = [
    "SudokuError",
    "CoordinateOutOfRange",
    "DigitOutOfRange",
    "SearchTimeout",
    "SudokuBoard",
    "GRID_SIZE",
    "BOX_SIZE",
    "NUM_CELLS",
    "CandidateSet",
    "CandidateGrid",
    "ALL_CANDIDATES",
    "is_valid_placement",
    "is_valid_board",
    "has_unique_solution",
]
