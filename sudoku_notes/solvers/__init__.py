"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .propagation import propagate, commit_forced_singles, advance, is_dead_end
from .backtracking import BacktrackingSearch, Change, SearchState, solve_one, solve_all
from .notes_solver import NotesSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "propagate",
    "commit_forced_singles",
    "advance",
    "is_dead_end",
    "BacktrackingSearch",
    "Change",
    "SearchState",
    "solve_one",
    "solve_all",
    "NotesSolver",
]
