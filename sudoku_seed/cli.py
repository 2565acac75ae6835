"""Command-line interface: generate a seed board and solve it."""

import argparse
import logging
import sys
from typing import List, Optional

from .generator import SeedGenerator, FILL_PROBABILITY
from .solvers import BacktrackingSolver
from .survey import Survey
from .survey.visualizer import DensityChart

log = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sparse Sudoku Seed Generator & Backtracking Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate a random seed board and solve it
  python -m sudoku_seed

  # Same, reproducibly, with solver statistics
  python -m sudoku_seed --seed 42 --verbose

  # Density statistics over 1000 seed boards
  python -m sudoku_seed survey --boards 1000 --chart results/density.png
        """
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log debug output and solver statistics"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    survey_parser = subparsers.add_parser("survey", help="Collect statistics over many seed boards")
    survey_parser.add_argument(
        "--boards", "-n", type=int, default=1000,
        help="Number of seed boards to generate (default: 1000)"
    )
    survey_parser.add_argument(
        "--fill-probability", "-p", type=float, default=FILL_PROBABILITY,
        help=f"Per-cell fill-attempt probability (default: {FILL_PROBABILITY})"
    )
    survey_parser.add_argument(
        "--solve", action="store_true",
        help="Also solve every board (may be slow on unsolvable seeds)"
    )
    survey_parser.add_argument(
        "--chart", "-c", type=str, default=None,
        help="Write a density histogram to this image path"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    if args.command == "survey":
        cmd_survey(args)
    else:
        cmd_run(args)
    return 0


def cmd_run(args):
    """Generate one seed board, print it, then print its solution."""
    board = SeedGenerator(seed=args.seed).generate()

    print("Sudoku Board:")
    print(board)

    stats = BacktrackingSolver().run(board)
    log.info(
        "Solver finished in %.4fs (%d iterations, %d backtracks)",
        stats.time_seconds, stats.iterations, stats.backtracks
    )

    if stats.solved:
        print("Solution:")
        print(board)
    else:
        print("No solution found!")


def cmd_survey(args):
    """Handle the survey command."""
    survey = Survey(
        boards=args.boards,
        seed=args.seed,
        fill_probability=args.fill_probability,
        solve=args.solve
    )
    survey.run()
    summary = survey.get_summary()

    print("=" * 60)
    print("SEED BOARD SURVEY")
    print("=" * 60)
    print(f"Boards: {summary['boards']}")
    print(f"Fill probability: {summary['fill_probability']:.2f}")
    print(f"Mean fill ratio: {summary['mean_fill_ratio']:.4f}")
    print(f"Fill ratio range: {summary['min_fill_ratio']:.4f} - {summary['max_fill_ratio']:.4f}")
    print(f"Legal boards: {summary['legal']}/{summary['boards']}")
    if args.solve:
        print(f"Solved: {summary['solved']}/{summary['boards']}")
        print(f"Avg Time: {summary['avg_time_seconds']:.4f}s")
        print(f"Max Time: {summary['max_time_seconds']:.4f}s")

    if args.chart:
        path = DensityChart(survey.results, args.fill_probability).plot(args.chart)
        print(f"Chart saved to {path}")


if __name__ == "__main__":
    sys.exit(main())
