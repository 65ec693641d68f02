"""
Exhaustive reference solver used to verify the search strategies.
"""

from __future__ import annotations

import itertools
import logging

from tsp_search.config import BRUTE_FORCE_MAX_CITIES
from tsp_search.data.matrix import DistanceMatrix
from tsp_search.solvers.base import Solver
from tsp_search.solvers.result import SearchStats
from tsp_search.tour import path_cost

logger = logging.getLogger(__name__)


class BruteForceSolver(Solver):
    """
    Evaluates every ordering of the non-start cities.

    Among equally cheap tours the lexicographically first ordering wins.
    Refuses problems above max_cities since the work grows as (n - 1)!.
    """

    def __init__(self, max_cities: int = BRUTE_FORCE_MAX_CITIES) -> None:
        self._max_cities = max_cities

    @property
    def name(self) -> str:
        return "brute-force"

    @property
    def description(self) -> str:
        return "Exhaustive enumeration of all tours (reference optimum)"

    def _search(
        self, matrix: DistanceMatrix, start_city: int
    ) -> tuple[list[int] | None, SearchStats]:
        if matrix.size > self._max_cities:
            raise ValueError(
                f"Brute force is limited to {self._max_cities} cities, got {matrix.size}"
            )

        stats = SearchStats()
        others = [city for city in range(matrix.size) if city != start_city]
        best_path: list[int] | None = None
        best_cost: int | None = None

        for ordering in itertools.permutations(others):
            path = [start_city, *ordering, start_city]
            cost = path_cost(matrix, path)
            stats.nodes_generated += 1
            if best_cost is None or cost < best_cost:
                best_path, best_cost = path, cost

        logger.debug(f"{self.name}: evaluated {stats.nodes_generated} tours")
        return best_path, stats
