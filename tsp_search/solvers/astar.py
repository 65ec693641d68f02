"""
A* tour search with a one-hop lookahead heuristic.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Callable

from tsp_search.config import MAX_EXPANSIONS
from tsp_search.data.matrix import DistanceMatrix
from tsp_search.heuristics import nearest_unvisited
from tsp_search.search import PriorityQueue, SearchNode
from tsp_search.solvers.base import FrontierSolver

Heuristic = Callable[[DistanceMatrix, int, int, Collection[int]], int]


class AStarSolver(FrontierSolver):
    """
    Expands the partial tour with the lowest cost + heuristic first.

    The estimate is computed once per successor, with the successor's
    cities after the start marked visited. The start city therefore stays
    a candidate until the tour is closed, and a complete successor is
    charged its edge back to the start a second time on top of the closing
    edge already in its cost. This makes the default heuristic inadmissible
    for complete tours: the search is greedy-guided and may return a tour
    that costs more than the UCS one.
    """

    def __init__(
        self,
        heuristic: Heuristic = nearest_unvisited,
        max_expansions: int | None = MAX_EXPANSIONS,
    ) -> None:
        """
        Initialize the solver.

        Args:
            heuristic: Estimator called as heuristic(matrix, city, start, visited)
            max_expansions: Give up after expanding this many nodes
        """
        super().__init__(max_expansions=max_expansions)
        self._heuristic = heuristic

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return f"A* search (heuristic: {self._heuristic.__name__})"

    def _new_frontier(self) -> PriorityQueue[SearchNode]:
        return PriorityQueue(key=lambda node: node.priority)

    def _estimate(
        self, matrix: DistanceMatrix, parent: SearchNode, next_city: int, start_city: int
    ) -> int:
        visited = parent.path[1:] + (next_city,)
        return self._heuristic(matrix, next_city, start_city, visited)
