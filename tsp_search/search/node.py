"""
Search node representing a partial tour.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchNode:
    """
    A partial tour in the search tree.

    Attributes:
        city: Most recently visited city
        path: Cities in visitation order, ending with city (no repeats)
        cost: Sum of edge costs along path; once every city is visited the
            closing edge back to the start city is included
        heuristic: Estimate of remaining cost (0 when unused)
    """

    city: int
    path: tuple[int, ...]
    cost: int = 0
    heuristic: int = 0

    @classmethod
    def root(cls, start_city: int) -> SearchNode:
        """Node for a tour that has only visited the start city."""
        return cls(city=start_city, path=(start_city,))

    @property
    def priority(self) -> int:
        """Ordering key for best-first frontiers (cost + heuristic)."""
        return self.cost + self.heuristic

    def visits(self, city: int) -> bool:
        return city in self.path

    def is_complete(self, city_count: int) -> bool:
        """Whether every city has been visited (tour not yet closed)."""
        return len(self.path) == city_count

    def extend(self, next_city: int, step_cost: int, heuristic: int = 0) -> SearchNode:
        """Child node that travels from this city to next_city."""
        return SearchNode(
            city=next_city,
            path=self.path + (next_city,),
            cost=self.cost + step_cost,
            heuristic=heuristic,
        )

    def closed_path(self) -> list[int]:
        """Path with the start city appended to close the cycle."""
        return list(self.path) + [self.path[0]]
