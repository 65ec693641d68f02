"""
Solver base classes for tour search.

Every solver takes a distance matrix and a start city and returns a closed
tour (start city first and last) or None. Frontier-based solvers share one
expansion loop and differ only in the frontier they drain and the
estimate they attach to each successor.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Union

from tsp_search.config import DEFAULT_START_CITY, MAX_EXPANSIONS
from tsp_search.data.matrix import DistanceMatrix, MatrixLike, as_distance_matrix
from tsp_search.search import FifoQueue, PriorityQueue, SearchNode
from tsp_search.solvers.result import SearchStats, SolveResult
from tsp_search.tour import format_path, path_cost

logger = logging.getLogger(__name__)

Frontier = Union[FifoQueue[SearchNode], PriorityQueue[SearchNode]]


class Solver(ABC):
    """
    Abstract base class for TSP solvers.

    Subclasses implement _search(); solve() and run() handle input
    validation, timing, and result packaging.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the solver (e.g., 'bfs', 'ucs')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the search strategy."""
        ...

    @abstractmethod
    def _search(
        self, matrix: DistanceMatrix, start_city: int
    ) -> tuple[list[int] | None, SearchStats]:
        """
        Find a closed tour.

        Called with a non-empty matrix and a start city already checked to
        be in range.
        """
        ...

    def solve(self, matrix: MatrixLike, start_city: int = DEFAULT_START_CITY) -> list[int] | None:
        """
        Find a closed tour from start_city.

        Args:
            matrix: Square matrix of non-negative integer costs
            start_city: City the tour starts and ends at

        Returns:
            n + 1 city indices starting and ending at start_city, or None if
            no tour was found

        Raises:
            IndexError: If start_city is outside the matrix
            ValueError: If matrix is malformed
        """
        return self.run(matrix, start_city).path

    def run(self, matrix: MatrixLike, start_city: int = DEFAULT_START_CITY) -> SolveResult:
        """Like solve(), but returns the cost, counters and timing as well."""
        matrix = as_distance_matrix(matrix)

        if matrix.size == 0:
            logger.warning(f"{self.name}: empty distance matrix, no tour to find")
            return SolveResult(solver_name=self.name, start_city=start_city, path=None, cost=None)
        if not 0 <= start_city < matrix.size:
            raise IndexError(f"Start city {start_city} out of range for {matrix.size} cities")

        logger.debug(f"{self.name}: searching {matrix.size} cities from city {start_city}")
        start_time = time.perf_counter()
        path, stats = self._search(matrix, start_city)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        cost = path_cost(matrix, path) if path is not None else None
        if path is not None:
            logger.info(
                f"{self.name}: found {format_path(path)} (cost {cost}) "
                f"after {stats.nodes_expanded} expansions"
            )
        else:
            logger.warning(f"{self.name}: no tour found from city {start_city}")

        return SolveResult(
            solver_name=self.name,
            start_city=start_city,
            path=path,
            cost=cost,
            stats=stats,
            elapsed_ms=elapsed_ms,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class FrontierSolver(Solver):
    """
    State-space search over partial tours.

    The root holds only the start city. Expanding a node creates one child
    per unvisited city, in ascending city order. The first dequeued node
    that has visited every city is closed back to the start and returned.
    When a child visits the last remaining city, the closing edge is added
    to its cost so the frontier orders complete tours by their full cost.
    """

    def __init__(self, max_expansions: int | None = MAX_EXPANSIONS) -> None:
        """
        Initialize the solver.

        Args:
            max_expansions: Give up after expanding this many nodes
                (None, 0 or a negative value for no limit, as with
                TSP_MAX_EXPANSIONS)
        """
        if max_expansions is not None and max_expansions <= 0:
            max_expansions = None
        self._max_expansions = max_expansions

    @property
    def max_expansions(self) -> int | None:
        """Expansion limit, or None when unlimited."""
        return self._max_expansions

    @abstractmethod
    def _new_frontier(self) -> Frontier:
        """Create the empty frontier for one search."""
        ...

    def _estimate(
        self, matrix: DistanceMatrix, parent: SearchNode, next_city: int, start_city: int
    ) -> int:
        """Remaining-cost estimate for the child of parent at next_city."""
        return 0

    def _search(
        self, matrix: DistanceMatrix, start_city: int
    ) -> tuple[list[int] | None, SearchStats]:
        city_count = matrix.size
        stats = SearchStats()

        frontier = self._new_frontier()
        frontier.enqueue(SearchNode.root(start_city))
        stats.nodes_generated = 1
        stats.max_frontier_size = 1

        while frontier:
            node = frontier.dequeue()

            if node.is_complete(city_count):
                return node.closed_path(), stats

            if self._max_expansions is not None and stats.nodes_expanded >= self._max_expansions:
                logger.warning(f"{self.name}: stopped after {stats.nodes_expanded} expansions")
                stats.hit_expansion_limit = True
                return None, stats

            stats.nodes_expanded += 1
            closes_tour = len(node.path) + 1 == city_count

            for city in range(city_count):
                if node.visits(city):
                    continue
                step_cost = matrix.cost(node.city, city)
                if closes_tour:
                    step_cost += matrix.cost(city, start_city)
                heuristic = self._estimate(matrix, node, city, start_city)
                frontier.enqueue(node.extend(city, step_cost, heuristic))
                stats.nodes_generated += 1

            stats.max_frontier_size = max(stats.max_frontier_size, frontier.size)

        return None, stats
