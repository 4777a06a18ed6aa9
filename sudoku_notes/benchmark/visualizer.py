"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Visualization generator for solver benchmark results.

    Creates charts relating search effort to the puzzles solved.
    """

    SOLVED_COLOR = "#2ecc71"
    FAILED_COLOR = "#e74c3c"

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        # Set style
        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_clues(),
            self.plot_effort_distribution(),
            self.plot_solution_counts(),
        ]

    def plot_time_by_clues(self) -> str:
        """Create scatter plot of solve time against the number of clues."""
        fig, ax = plt.subplots(figsize=(10, 6))

        colors = [self.SOLVED_COLOR if r.solved else self.FAILED_COLOR for r in self.results]
        ax.scatter(
            [r.clues for r in self.results],
            [r.time_seconds for r in self.results],
            c=colors, edgecolor='black', linewidth=0.5, alpha=0.8
        )

        ax.set_xlabel('Clues', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Solve Time by Number of Clues', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_by_clues.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_effort_distribution(self) -> str:
        """Create histograms of branches and backtracks per puzzle."""
        fig, axes = plt.subplots(1, 2, figsize=(12, 5))

        branches = np.array([r.nodes_explored for r in self.results])
        backtracks = np.array([r.backtracks for r in self.results])

        # log1p keeps puzzles solved without guessing on the axis
        sns.histplot(np.log1p(branches), ax=axes[0], bins=20, color="#3498db")
        axes[0].set_xlabel('log(1 + branches)', fontsize=12)
        axes[0].set_title('Branches per Puzzle', fontsize=14, fontweight='bold')

        sns.histplot(np.log1p(backtracks), ax=axes[1], bins=20, color="#9b59b6")
        axes[1].set_xlabel('log(1 + backtracks)', fontsize=12)
        axes[1].set_title('Backtracks per Puzzle', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "effort_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_solution_counts(self) -> str:
        """Create bar chart of how many puzzles had 0, 1, ... solutions."""
        fig, ax = plt.subplots(figsize=(8, 6))

        counts = sorted(set(r.solutions for r in self.results))
        totals = [sum(1 for r in self.results if r.solutions == c) for c in counts]
        labels = [str(c) for c in counts]

        bars = ax.bar(labels, totals, color="#f39c12", edgecolor='black', linewidth=0.5)

        # Add value labels on bars
        for bar, total in zip(bars, totals):
            height = bar.get_height()
            ax.annotate(f'{total}',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Solutions found (capped)', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Puzzles by Solution Count', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "solution_counts.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Puzzles | Solved | Unique | Avg Time | Avg Memory | Avg Branches | Avg Backtracks |",
            "|---------|--------|--------|----------|------------|--------------|----------------|"
        ]

        if self.results:
            solved = sum(1 for r in self.results if r.solved)
            unique = sum(1 for r in self.results if r.solutions == 1)
            avg_time = np.mean([r.time_seconds for r in self.results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in self.results])
            avg_branches = np.mean([r.nodes_explored for r in self.results])
            avg_backtracks = np.mean([r.backtracks for r in self.results])

            lines.append(
                f"| {len(self.results)} | {solved} | {unique} | {avg_time:.4f}s | "
                f"{avg_memory:.2f} MB | {int(avg_branches):,} | {int(avg_backtracks):,} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
