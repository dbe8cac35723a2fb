#! /usr/bin/env python
"""
Knight's tour with Warnsdorff's rule from the command line.

    knight-tour --size 8 --closed --start 0 0 0
    knight-tour --size 5 --layers 3 --style high --dimension 3 --random-start
"""

import logging
import sys
import time
from typing import List

from knight_tour.board import Cell
from knight_tour.config import (
    DEFAULT_LAYERS,
    DEFAULT_SIZE,
    RETRIES_AFTER_FAILED_START,
    RETRIES_RANDOM_START,
    BoardStyle,
    normalize_config,
)
from knight_tour.render import (
    format_board,
    format_failure,
    format_path,
    format_statistics,
)
from knight_tour.tour import KnightsTour

LOG_LEVEL = logging.ERROR
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"

logger = logging.getLogger(__name__)


def pick_start(tour: KnightsTour, requested: List[int]) -> Cell:
    """Out of bounds falls back to (0, 0, 0), a hole to the first open cell."""
    start = (requested[0], requested[1], requested[2])
    if not tour.board.in_bounds(*start):
        print(f"Invalid starting position {start}! Using (0, 0, 0)")
        start = (0, 0, 0)
    if tour.board.is_hole(*start):
        start = next(tour.board.open_cells())
        print(f"Starting position is a hole, using {start} instead")
    return start


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Find a knight's tour with Warnsdorff's rule and tie-breaking."
    )
    parser.add_argument(
        "--size", type=int, default=DEFAULT_SIZE, help="Squares per side"
    )
    parser.add_argument(
        "--layers",
        type=int,
        default=DEFAULT_LAYERS,
        help="Number of stacked boards (for 3D tours)",
    )
    parser.add_argument(
        "--style",
        choices=[style.value for style in BoardStyle],
        default=BoardStyle.REGULAR.value,
        help="regular board, board with random holes, or high dimensional moves",
    )
    parser.add_argument(
        "--dimension",
        type=int,
        default=None,
        help="2 or 3, only used with --style high (default 3)",
    )
    parser.add_argument(
        "--closed",
        action="store_true",
        help="Require the knight to end one jump away from the start",
    )
    start_group = parser.add_mutually_exclusive_group()
    start_group.add_argument(
        "--start",
        type=int,
        nargs=3,
        metavar=("LAYER", "ROW", "COL"),
        default=[0, 0, 0],
        help="Starting square",
    )
    start_group.add_argument(
        "--random-start",
        action="store_true",
        help="Skip the fixed start and search from random squares",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=None,
        help="Random start attempts (default depends on tour type)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Also print the compact path visualization",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="-v for progress, -vv for every move",
    )
    args = parser.parse_args(argv)

    level = {0: LOG_LEVEL, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    style = BoardStyle(args.style)
    dimension = args.dimension
    if dimension is None:
        dimension = 3 if style == BoardStyle.HIGH_DIMENSIONAL else 2
    config = normalize_config(
        size=args.size,
        layers=args.layers,
        style=style,
        dimension=dimension,
        closed=args.closed,
    )
    tour = KnightsTour(config, seed=args.seed)
    print(f"Knight's tour on {config.describe()}")

    start_time = time.perf_counter_ns()
    if args.random_start:
        attempts = args.attempts
        if attempts is None:
            attempts = RETRIES_RANDOM_START[config.closed]
        success = tour.solve_with_random_start(attempts)
    else:
        start = pick_start(tour, args.start)
        print(f"Starting at layer {start[0]}, row {start[1]}, column {start[2]}")
        success = tour.solve(*start)
        if not success:
            print(f"No solution from {start} ({tour.last_outcome.value}).")
            attempts = args.attempts
            if attempts is None:
                attempts = RETRIES_AFTER_FAILED_START[config.closed]
            print(f"Trying up to {attempts} random starting positions...")
            success = tour.solve_with_random_start(attempts)
    elapsed_ms = (time.perf_counter_ns() - start_time) / 1e6
    logger.info(f"{tour.attempts} random attempt(s), outcomes {dict(tour.outcome_counts)}")

    snapshot = tour.snapshot()
    if not (success and tour.has_valid_solution()):
        print(format_failure(snapshot, config))
        if tour.outcome_counts:
            summary = ", ".join(
                f"{outcome.value}: {count}"
                for outcome, count in tour.outcome_counts.most_common()
            )
            print(f"Attempt outcomes: {summary}")
        return 1

    closed = tour.is_tour_closed()
    print(f"Tour completed in {elapsed_ms:.1f}ms")
    print(format_board(snapshot, config, closed))
    if args.compact:
        print()
        print(format_path(snapshot, closed))
    print()
    print(format_statistics(snapshot, config, closed, elapsed_ms))
    return 0


if __name__ == "__main__":
    sys.exit(main())
