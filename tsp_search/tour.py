"""
Tour utilities: cost summation, validation, and display.
"""

from __future__ import annotations

from collections.abc import Sequence

from tsp_search.data.matrix import MatrixLike, as_distance_matrix


def path_cost(matrix: MatrixLike, path: Sequence[int]) -> int:
    """
    Sum of edge costs between consecutive cities of path.

    The path is not checked for completeness; a closed tour must repeat
    its first city at the end for the return edge to be counted.

    Raises:
        IndexError: If a city is outside the matrix
    """
    matrix = as_distance_matrix(matrix)
    return sum(matrix.cost(a, b) for a, b in zip(path[:-1], path[1:]))


def is_valid_tour(path: Sequence[int] | None, city_count: int, start_city: int) -> bool:
    """
    Whether path is a closed tour visiting every city exactly once.

    A valid tour has city_count + 1 entries, starts and ends at
    start_city, and its first city_count entries are a permutation of
    range(city_count).
    """
    if path is None or len(path) != city_count + 1:
        return False
    if path[0] != start_city or path[-1] != start_city:
        return False
    return sorted(path[:-1]) == list(range(city_count))


def format_path(path: Sequence[int] | None) -> str:
    """Render a path as '0 -> 2 -> 1 -> 0'."""
    if path is None:
        return "no path"
    return " -> ".join(str(city) for city in path)
