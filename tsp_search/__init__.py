"""
TSP Search Suite.

An educational comparison of uninformed and informed search strategies
(BFS, uniform-cost search, A*) over partial tours of the Traveling
Salesman Problem.
"""

from tsp_search.data.matrix import DistanceMatrix, as_distance_matrix
from tsp_search.solvers import (
    SolveResult,
    Solver,
    get_solver,
    solve_astar,
    solve_bfs,
    solve_ucs,
)
from tsp_search.tour import format_path, is_valid_tour, path_cost

__version__ = "0.1.0"

__all__ = [
    "DistanceMatrix",
    "as_distance_matrix",
    "Solver",
    "SolveResult",
    "get_solver",
    "solve_bfs",
    "solve_ucs",
    "solve_astar",
    "path_cost",
    "is_valid_tour",
    "format_path",
]
