#!/usr/bin/env python3
"""
TSP Search CLI - Find tours with BFS, uniform-cost search and A*.

Usage:
    python scripts/solve.py
    python scripts/solve.py --matrix data/cities.json --start 2
    python scripts/solve.py --random 7 --seed 42 --solver ucs --solver astar
    python scripts/solve.py --random 6 --solver brute-force --verbose

Solvers:
    bfs          - Breadth-first search (some complete tour, not the cheapest)
    ucs          - Uniform-cost search (minimum-cost tour)
    astar        - A* with a one-hop lookahead heuristic (not guaranteed optimal)
    brute-force  - Exhaustive enumeration (reference optimum, up to 9 cities)

Without --matrix or --random the four-city sample problem is solved.
Set TSP_MAX_EXPANSIONS in the environment or .env to cap search effort.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Environment must be loaded before the config module reads it
load_dotenv(project_root / ".env")

from tsp_search.config import (  # noqa: E402
    DEFAULT_SOLVERS,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    SAMPLE_DISTANCE_MATRIX,
)
from tsp_search.data import as_distance_matrix, load_matrix, random_matrix  # noqa: E402
from tsp_search.solvers import available_solvers, get_solver  # noqa: E402
from tsp_search.tour import format_path  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Solve a TSP instance with several search strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--matrix",
        type=Path,
        help="Distance matrix file (.json, .msgpack or .npy)",
    )
    source.add_argument(
        "--random",
        type=int,
        metavar="N",
        help="Solve a random symmetric N-city problem",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --random",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=None,
        help="Start city (default: from the matrix file, else 0)",
    )
    parser.add_argument(
        "--solver",
        action="append",
        choices=available_solvers(),
        help=f"Solver to run, repeatable (default: {', '.join(DEFAULT_SOLVERS)})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    start = 0
    try:
        if args.matrix is not None:
            problem = load_matrix(args.matrix)
            matrix = problem.matrix
            if problem.start_city is not None:
                start = problem.start_city
        elif args.random is not None:
            matrix = random_matrix(args.random, seed=args.seed)
        else:
            matrix = as_distance_matrix(SAMPLE_DISTANCE_MATRIX)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.start is not None:
        start = args.start
    if matrix.size and not 0 <= start < matrix.size:
        print(f"Error: start city {start} out of range for {matrix.size} cities", file=sys.stderr)
        return 2

    print(f"Solving {matrix.size}-city problem from city {start}\n")

    all_found = True
    for name in args.solver or DEFAULT_SOLVERS:
        solver = get_solver(name)
        try:
            result = solver.run(matrix, start)
        except ValueError as e:
            print(f"{name.upper()}: {e}", file=sys.stderr)
            all_found = False
            continue
        except KeyboardInterrupt:
            print("\n\nSearch interrupted by user")
            return 130  # Standard exit code for Ctrl+C

        if result.found:
            print(f"{name.upper()} Path: {format_path(result.path)} with cost {result.cost}")
        else:
            print(f"{name.upper()}: no tour found")
            all_found = False

    return 0 if all_found else 1


if __name__ == "__main__":
    sys.exit(main())
