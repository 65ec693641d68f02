"""
Uniform-cost tour search.
"""

from __future__ import annotations

from tsp_search.search import PriorityQueue, SearchNode
from tsp_search.solvers.base import FrontierSolver


class UCSSolver(FrontierSolver):
    """
    Expands the cheapest partial tour first.

    Edge costs are non-negative and a complete node's cost includes the
    closing edge, so the first complete tour dequeued has minimum cost.
    """

    @property
    def name(self) -> str:
        return "ucs"

    @property
    def description(self) -> str:
        return "Uniform-cost search (minimum-cost tour)"

    def _new_frontier(self) -> PriorityQueue[SearchNode]:
        return PriorityQueue(key=lambda node: node.cost)
