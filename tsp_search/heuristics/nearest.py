"""
One-hop lookahead heuristic for A*.
"""

from __future__ import annotations

from collections.abc import Collection

from tsp_search.data.matrix import DistanceMatrix, MatrixLike, as_distance_matrix


def nearest_unvisited(
    matrix: MatrixLike,
    current_city: int,
    start_city: int,
    visited: Collection[int],
) -> int:
    """
    Cheapest edge from current_city to a city not yet visited.

    Only the next hop is considered; the rest of the tour, including the
    return to the start city, is ignored. start_city does not take part in
    the computation.

    Args:
        matrix: Distance matrix
        current_city: City the estimate is computed from
        start_city: Tour origin
        visited: Cities excluded as candidates. current_city is always
            excluded.

    Returns:
        Minimum edge cost to a candidate city

    Raises:
        IndexError: If current_city is outside the matrix
        ValueError: If every city is visited
    """
    matrix = as_distance_matrix(matrix)
    row = matrix.row(current_city)

    visited = set(visited)
    candidates = [
        int(row[city])
        for city in range(matrix.size)
        if city != current_city and city not in visited
    ]
    if not candidates:
        raise ValueError(
            f"No unvisited city left from {current_city}; "
            "the heuristic is undefined for a fully visited tour"
        )
    return min(candidates)


def zero_heuristic(
    matrix: DistanceMatrix,
    current_city: int,
    start_city: int,
    visited: Collection[int],
) -> int:
    """Constant 0 estimate (turns A* into uniform-cost search)."""
    return 0
