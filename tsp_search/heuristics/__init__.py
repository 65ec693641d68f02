"""
Heuristics module.

Provides remaining-cost estimators for guiding tour search. All share the
signature (matrix, current_city, start_city, visited) -> int:
- nearest_unvisited: Cheapest edge to a city not yet visited
- zero_heuristic: Constant 0
"""

from tsp_search.heuristics.nearest import nearest_unvisited, zero_heuristic

__all__ = ["nearest_unvisited", "zero_heuristic"]
