"""Solver combining naked-single propagation with a resumable backtracking search."""

from __future__ import annotations
from itertools import islice
from typing import List, Optional
import time

from .base_solver import BaseSolver, SolverStats
from .backtracking import BacktrackingSearch
from ..core.board import SudokuBoard


class NotesSolver(BaseSolver):
    """
    Solver that tracks candidate notes for every cell.

    Features:
    - Naked singles committed until a fixpoint after every placement
    - Row-major branching, smallest candidate first
    - Enumeration of all solutions, optionally capped
    """

    name = "Notes+Backtracking"

    def __init__(self, max_solutions: Optional[int] = None):
        """
        Initialize the solver.

        Args:
            max_solutions: Default cap on the number of solutions collected
                           by solve_all. None collects every solution.
        """
        super().__init__()
        self.max_solutions = max_solutions

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Return the first solution found by the search."""
        search = BacktrackingSearch(board)
        solution = next(search, None)
        self._record(search, 0 if solution is None else 1)
        return solution

    def solve_all(
        self,
        board: SudokuBoard,
        limit: Optional[int] = None,
        timeout: Optional[float] = None
    ) -> tuple[List[SudokuBoard], SolverStats]:
        """
        Collect the solutions of a puzzle with timing and memory tracking.

        Args:
            board: The puzzle to solve.
            limit: Stop after this many solutions (default: max_solutions).
            timeout: Stop searching after this many seconds. The solutions
                     found so far are kept and stats.extra["error"] is
                     set to "Timeout".

        Returns:
            Tuple of (list of solutions, stats).
        """
        if limit is None:
            limit = self.max_solutions

        self.stats = SolverStats(algorithm=self.name)
        search = BacktrackingSearch(board)
        solutions: List[SudokuBoard] = []

        def collect() -> None:
            if timeout is not None:
                search.deadline = time.perf_counter() + timeout
            for solution in islice(search, limit):
                solutions.append(solution)

        self._tracked(collect)
        self._record(search, len(solutions))
        self.stats.solved = len(solutions) > 0
        return solutions, self.stats

    def _record(self, search: BacktrackingSearch, solutions: int) -> None:
        self.stats.iterations = search.steps
        self.stats.nodes_explored = search.branches
        self.stats.backtracks = search.backtracks
        self.stats.placements = search.placements
        self.stats.solutions = solutions
