"""
Solvers module.

Provides tour search strategies over a distance matrix:
- BFSSolver: Breadth-first search (any complete tour)
- UCSSolver: Uniform-cost search (minimum-cost tour)
- AStarSolver: A* with a one-hop lookahead heuristic (not guaranteed optimal)
- BruteForceSolver: Exhaustive enumeration, for verification on small inputs
"""

from __future__ import annotations

from tsp_search.config import DEFAULT_START_CITY
from tsp_search.data.matrix import MatrixLike
from tsp_search.solvers.astar import AStarSolver
from tsp_search.solvers.base import FrontierSolver, Solver
from tsp_search.solvers.bfs import BFSSolver
from tsp_search.solvers.brute_force import BruteForceSolver
from tsp_search.solvers.result import SearchStats, SolveResult
from tsp_search.solvers.ucs import UCSSolver

__all__ = [
    "Solver",
    "FrontierSolver",
    "BFSSolver",
    "UCSSolver",
    "AStarSolver",
    "BruteForceSolver",
    "SearchStats",
    "SolveResult",
    "available_solvers",
    "get_solver",
    "get_solver_class",
    "solve_bfs",
    "solve_ucs",
    "solve_astar",
]

_SOLVERS = {
    "bfs": BFSSolver,
    "ucs": UCSSolver,
    "astar": AStarSolver,
    "brute-force": BruteForceSolver,
}


def available_solvers() -> list[str]:
    """Names accepted by get_solver()."""
    return list(_SOLVERS)


def get_solver_class(name: str) -> type[Solver]:
    """
    Look up a solver class by name.

    Raises:
        ValueError: If solver name is unknown
    """
    if name not in _SOLVERS:
        available = ", ".join(_SOLVERS)
        raise ValueError(f"Unknown solver '{name}'. Available: {available}")
    return _SOLVERS[name]


def get_solver(name: str, **kwargs) -> Solver:
    """
    Get a solver by name.

    Args:
        name: Solver identifier (bfs, ucs, astar, brute-force)
        **kwargs: Passed to the solver constructor (e.g., max_expansions)

    Returns:
        Instantiated solver

    Raises:
        ValueError: If solver name is unknown
    """
    return get_solver_class(name)(**kwargs)


def solve_bfs(matrix: MatrixLike, start_city: int = DEFAULT_START_CITY) -> list[int] | None:
    """Closed tour found by breadth-first search, or None."""
    return BFSSolver().solve(matrix, start_city)


def solve_ucs(matrix: MatrixLike, start_city: int = DEFAULT_START_CITY) -> list[int] | None:
    """Minimum-cost closed tour found by uniform-cost search, or None."""
    return UCSSolver().solve(matrix, start_city)


def solve_astar(matrix: MatrixLike, start_city: int = DEFAULT_START_CITY) -> list[int] | None:
    """Closed tour found by A* with the nearest-unvisited heuristic, or None."""
    return AStarSolver().solve(matrix, start_city)
