"""
Breadth-first tour search.
"""

from __future__ import annotations

from tsp_search.search import FifoQueue, SearchNode
from tsp_search.solvers.base import FrontierSolver


class BFSSolver(FrontierSolver):
    """
    Expands partial tours in first-in first-out order.

    Every tour with k cities is expanded before any tour with k + 1, so
    the first complete tour dequeued is the first one generated, regardless
    of cost. No optimality guarantee.
    """

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first search (first complete tour in level order)"

    def _new_frontier(self) -> FifoQueue[SearchNode]:
        return FifoQueue()
