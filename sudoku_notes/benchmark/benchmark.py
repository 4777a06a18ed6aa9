"""Benchmarking framework for running the solver over a puzzle collection."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any
import json
import logging
import os

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..solvers import NotesSolver

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: int
    clues: int
    solved: bool
    solutions: int
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    placements: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "clues": self.clues,
            "solved": self.solved,
            "solutions": self.solutions,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "placements": self.placements,
            **self.extra
        }


class Benchmark:
    """
    Benchmark framework for the notes solver.

    Runs the solver on every puzzle of a collection, counting solutions up
    to a limit, and collects performance metrics.
    """

    def __init__(
        self,
        puzzles: List[SudokuBoard],
        timeout_seconds: float = 60.0,
        count_limit: int = 2
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Puzzles to solve.
            timeout_seconds: Maximum time per puzzle.
            count_limit: Stop counting solutions of a puzzle at this many.
        """
        self.puzzles = puzzles
        self.timeout_seconds = timeout_seconds
        self.count_limit = count_limit
        self.results: List[BenchmarkResult] = []

    @staticmethod
    def load_puzzles(path: str) -> List[SudokuBoard]:
        """
        Load puzzles from a text file, one 81 character puzzle per line.

        Blank lines and lines starting with # are skipped.
        """
        puzzles = []
        with open(path, "r") as f:
            for line_no, line in enumerate(f, 1):
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                try:
                    puzzles.append(SudokuBoard.from_string(line))
                except ValueError as e:
                    raise ValueError(f"{path}:{line_no}: {e}") from e
        return puzzles

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the solver on every puzzle.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        for puzzle_id, puzzle in enumerate(
            tqdm(self.puzzles, desc="Benchmarking", disable=not show_progress)
        ):
            self.results.append(self._run_single(puzzle, puzzle_id))

        return self.results

    def _run_single(self, puzzle: SudokuBoard, puzzle_id: int) -> BenchmarkResult:
        """Run the solver on a single puzzle."""
        solver = NotesSolver()

        # The search checks the deadline between nodes, so a timeout stops it
        try:
            _, stats = solver.solve_all(
                puzzle, self.count_limit, timeout=self.timeout_seconds
            )
        except Exception as e:
            logger.error("Puzzle %d failed: %s", puzzle_id, e)
            return self._failed_result(puzzle, puzzle_id, str(e))

        if stats.extra.get("error") == "Timeout":
            logger.warning(
                "Puzzle %d timed out after %.1fs with %d solution(s)",
                puzzle_id, self.timeout_seconds, stats.solutions
            )

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            clues=puzzle.count_filled(),
            solved=stats.solved,
            solutions=stats.solutions,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            placements=stats.placements,
            extra=stats.extra
        )

    def _failed_result(self, puzzle: SudokuBoard, puzzle_id: int, error: str) -> BenchmarkResult:
        return BenchmarkResult(
            puzzle_id=puzzle_id,
            clues=puzzle.count_filled(),
            solved=False,
            solutions=0,
            time_seconds=0.0,
            memory_bytes=0,
            iterations=0,
            backtracks=0,
            nodes_explored=0,
            placements=0,
            extra={"error": error}
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary: Dict[str, Any] = {
            "total_puzzles": len(self.results),
            "count_limit": self.count_limit,
        }
        if not self.results:
            return summary

        solved = [r for r in self.results if r.solved]
        unique = [r for r in self.results if r.solutions == 1]
        times = [r.time_seconds for r in self.results]
        memory = [r.memory_bytes for r in self.results]

        summary.update({
            "accuracy": len(solved) / len(self.results) * 100,
            "total_solved": len(solved),
            "total_unique": len(unique),
            "total_errors": sum(1 for r in self.results if "error" in r.extra),
            "avg_time_seconds": sum(times) / len(times),
            "max_time_seconds": max(times),
            "min_time_seconds": min(times),
            "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
            "avg_backtracks": sum(r.backtracks for r in self.results) / len(self.results),
            "avg_nodes_explored": sum(r.nodes_explored for r in self.results) / len(self.results),
        })
        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and summary to JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        # Save raw results as JSON
        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        # Save summary
        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        print(f"Results saved to {output_dir}")
