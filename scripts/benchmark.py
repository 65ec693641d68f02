#!/usr/bin/env python3
"""
Compare solvers on random problems of increasing size.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --sizes 4 5 6 7 --seeds 5 --output
    python scripts/benchmark.py --solver ucs --solver astar --asymmetric
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from tsp_search.benchmark import compare_solvers, format_table, summarize  # noqa: E402
from tsp_search.config import (  # noqa: E402
    DEFAULT_SOLVERS,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    RESULTS_DIR,
)
from tsp_search.data import random_matrix  # noqa: E402
from tsp_search.solvers import available_solvers  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Benchmark TSP search strategies")
    parser.add_argument("--sizes", type=int, nargs="+", default=[4, 5, 6], help="City counts to test")
    parser.add_argument("--seeds", type=int, default=3, help="Random problems per size")
    parser.add_argument("--solver", action="append", choices=available_solvers(), help="Solver to run, repeatable")
    parser.add_argument("--asymmetric", action="store_true", help="Use asymmetric cost matrices")
    parser.add_argument("--max-expansions", type=int, default=None, help="Expansion cap per search (0 = unlimited)")
    parser.add_argument("--output", action="store_true", help=f"Write JSON results to {RESULTS_DIR}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,  # Quiet mode
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    solver_names = args.solver or list(DEFAULT_SOLVERS)

    print("=" * 70)
    print("TSP Search - Solver Comparison")
    print("=" * 70)

    records = []
    for size in args.sizes:
        for seed in range(args.seeds):
            matrix = random_matrix(size, symmetric=not args.asymmetric, seed=seed)
            results = compare_solvers(matrix, 0, solver_names, max_expansions=args.max_expansions)
            rows = summarize(results)

            print(f"\n[n={size}, seed={seed}]")
            print(format_table(rows))
            for row in rows:
                records.append({"cities": size, "seed": seed, **row})

    if args.output:
        RESULTS_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        output_path = RESULTS_DIR / f"benchmark_{timestamp}.json"
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
        print(f"\nResults saved to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
