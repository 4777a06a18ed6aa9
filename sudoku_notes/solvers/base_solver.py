"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
import time
import tracemalloc

from ..core.board import SudokuBoard
from ..core.errors import SearchTimeout, SudokuError


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0
    placements: int = 0
    solutions: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "placements": self.placements,
            "solutions": self.solutions,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> tuple[Optional[SudokuBoard], SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        Args:
            board: The puzzle to solve.

        Returns:
            Tuple of (solution or None, stats).
        """
        self.stats = SolverStats(algorithm=self.name)
        solution = self._tracked(lambda: self._solve(board.copy()))
        self.stats.solved = solution is not None and solution.is_solved()
        return solution, self.stats

    def _tracked(self, run: Callable[[], Any]) -> Any:
        """
        Call run() while recording time and peak memory into self.stats.

        Precondition errors propagate. A timeout is recorded as "Timeout" and
        any other failure by its message in stats.extra["error"]; None is
        returned for both.
        """
        tracemalloc.start()
        start_time = time.perf_counter()

        try:
            return run()
        except SudokuError:
            raise
        except SearchTimeout:
            self.stats.extra["error"] = "Timeout"
        except Exception as e:
            self.stats.extra["error"] = str(e)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak
        return None

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A copy of the puzzle to solve (can be modified).

        Returns:
            The solved board, or None if no solution found.
        """
        pass
