"""Command-line interface for the Sudoku solver."""

import argparse
import logging
import sys

from .solvers import NotesSolver
from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer
from .core.board import SudokuBoard
from .core.validator import count_solutions


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using candidate notes and backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle
  python -m sudoku_notes.cli solve --puzzle "530070000..."

  # List up to 10 solutions of a puzzle
  python -m sudoku_notes.cli solve --all --limit 10 --puzzle "..."

  # Benchmark a file of puzzles (one per line)
  python -m sudoku_notes.cli benchmark --input puzzles.txt --output results/
        """
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Log search steps to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--all", "-a", action="store_true",
        help="Print every solution instead of the first one"
    )
    solve_parser.add_argument(
        "--limit", "-l", type=_positive_int, default=None,
        help="Maximum number of solutions printed with --all (default: no limit)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check a puzzle for conflicts")
    validate_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run the solver over a puzzle file")
    bench_parser.add_argument(
        "--input", "-i", type=str, required=True,
        help="Text file with one puzzle per line"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--timeout", "-t", type=float, default=60.0,
        help="Time limit per puzzle in seconds (default: 60)"
    )
    bench_parser.add_argument(
        "--count-limit", "-c", type=_positive_int, default=2,
        help="Stop counting solutions of a puzzle at this many (default: 2)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
            level=logging.DEBUG
        )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _parse_puzzle(text: str) -> SudokuBoard:
    try:
        return SudokuBoard.from_string(text)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)


def cmd_solve(args):
    """Handle the solve command."""
    board = _parse_puzzle(args.puzzle)

    print("Input puzzle:")
    print(board)
    print()

    solver = NotesSolver()

    if args.all:
        solutions, stats = solver.solve_all(board, limit=args.limit)
    else:
        solution, stats = solver.solve(board)
        solutions = [solution] if solution is not None else []

    if stats.solved:
        print(f"✓ Found {len(solutions)} solution(s) in {stats.time_seconds:.4f}s")
    else:
        print("✗ No solution")

    if args.verbose:
        print(f"  Steps: {stats.iterations:,}")
        print(f"  Branches: {stats.nodes_explored:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Forced placements: {stats.placements:,}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")

    for i, solution in enumerate(solutions, 1):
        print()
        if len(solutions) > 1:
            print(f"--- Solution {i} ---")
        print(solution)


def cmd_validate(args):
    """Handle the validate command."""
    board = _parse_puzzle(args.puzzle)

    print(board)
    print()
    print(f"Valid: {'yes' if board.is_valid() else 'no'}")
    print(f"Solved: {'yes' if board.is_solved() else 'no'}")
    print(f"Empty cells: {board.count_empty()}")

    if board.is_valid():
        found = count_solutions(board, limit=2)
        if found == 0:
            print("Solutions: none")
        elif found == 1:
            print("Solutions: exactly one")
        else:
            print("Solutions: more than one")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    try:
        puzzles = Benchmark.load_puzzles(args.input)
    except (OSError, ValueError) as e:
        print(f"Error loading puzzles: {e}")
        sys.exit(1)

    print("=" * 60)
    print("SUDOKU SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")
    print(f"Timeout: {args.timeout}s per puzzle")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = Benchmark(
        puzzles,
        timeout_seconds=args.timeout,
        count_limit=args.count_limit
    )
    results = benchmark.run()

    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    if results:
        print(f"  Accuracy: {summary['accuracy']:.1f}% ({summary['total_solved']}/{summary['total_puzzles']})")
        print(f"  Unique: {summary['total_unique']}")
        print(f"  Avg Time: {summary['avg_time_seconds']:.4f}s")
        print(f"  Avg Memory: {summary['avg_memory_mb']:.2f} MB")
        print(f"  Avg Backtracks: {summary['avg_backtracks']:.1f}")

    benchmark.save_results(args.output)

    if not args.no_charts and results:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
