"""
Run several solvers on the same problem and compare their tours.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from tsp_search.config import DEFAULT_SOLVERS, DEFAULT_START_CITY
from tsp_search.data.matrix import MatrixLike, as_distance_matrix
from tsp_search.solvers import FrontierSolver, SolveResult, get_solver_class

logger = logging.getLogger(__name__)


def compare_solvers(
    matrix: MatrixLike,
    start_city: int = DEFAULT_START_CITY,
    solver_names: Iterable[str] = DEFAULT_SOLVERS,
    max_expansions: int | None = None,
) -> list[SolveResult]:
    """
    Run each named solver on one problem.

    Args:
        matrix: Distance matrix shared by every run
        start_city: Tour origin
        solver_names: Names accepted by get_solver()
        max_expansions: Expansion limit applied to the frontier solvers
            (None or <= 0 for no limit)

    Returns:
        One SolveResult per solver, in the order given
    """
    matrix = as_distance_matrix(matrix)
    results = []
    for name in solver_names:
        solver_class = get_solver_class(name)
        kwargs = {}
        if max_expansions is not None and issubclass(solver_class, FrontierSolver):
            kwargs["max_expansions"] = max_expansions
        results.append(solver_class(**kwargs).run(matrix, start_city))
    return results


def summarize(results: Sequence[SolveResult]) -> list[dict]:
    """
    Flatten results into table rows.

    Each row carries the cost ratio to the cheapest tour among the results
    (1.0 for the best; None when a solver found nothing).
    """
    costs = [r.cost for r in results if r.cost is not None]
    best = min(costs) if costs else None

    rows = []
    for result in results:
        if result.cost is None or best is None:
            ratio = None
        elif best == 0:
            ratio = 1.0 if result.cost == 0 else float("inf")
        else:
            ratio = result.cost / best
        rows.append({
            "solver": result.solver_name,
            "found": result.found,
            "cost": result.cost,
            "ratio_to_best": ratio,
            "nodes_expanded": result.stats.nodes_expanded,
            "nodes_generated": result.stats.nodes_generated,
            "max_frontier": result.stats.max_frontier_size,
            "elapsed_ms": round(result.elapsed_ms, 3),
        })
    return rows


def format_table(rows: Sequence[dict]) -> str:
    """Render summarize() rows as a fixed-width text table."""
    header = f"{'solver':<12} {'cost':>8} {'ratio':>7} {'expanded':>10} {'generated':>10} {'ms':>10}"
    lines = [header, "-" * len(header)]
    for row in rows:
        cost = "-" if row["cost"] is None else str(row["cost"])
        ratio = "-" if row["ratio_to_best"] is None else f"{row['ratio_to_best']:.3f}"
        lines.append(
            f"{row['solver']:<12} {cost:>8} {ratio:>7} "
            f"{row['nodes_expanded']:>10} {row['nodes_generated']:>10} {row['elapsed_ms']:>10.2f}"
        )
    return "\n".join(lines)
