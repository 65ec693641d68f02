"""
Random distance matrices for experiments and benchmarks.
"""

from __future__ import annotations

import numpy as np

from tsp_search.config import RANDOM_MATRIX_MAX_COST, RANDOM_MATRIX_MIN_COST
from tsp_search.data.matrix import DistanceMatrix


def random_matrix(
    city_count: int,
    min_cost: int = RANDOM_MATRIX_MIN_COST,
    max_cost: int = RANDOM_MATRIX_MAX_COST,
    symmetric: bool = True,
    seed: int | None = None,
) -> DistanceMatrix:
    """
    Generate a distance matrix with uniform integer costs.

    Args:
        city_count: Number of cities
        min_cost: Smallest edge cost (inclusive)
        max_cost: Largest edge cost (inclusive)
        symmetric: Mirror the upper triangle so cost(a, b) == cost(b, a)
        seed: Random seed for reproducibility

    Returns:
        Matrix with a zero diagonal
    """
    if city_count < 0:
        raise ValueError(f"city_count must be non-negative, got {city_count}")
    if min_cost < 0 or max_cost < min_cost:
        raise ValueError(f"Invalid cost range [{min_cost}, {max_cost}]")

    rng = np.random.default_rng(seed)
    values = rng.integers(min_cost, max_cost, size=(city_count, city_count), endpoint=True)
    if symmetric:
        upper = np.triu(values, k=1)
        values = upper + upper.T
    np.fill_diagonal(values, 0)
    return DistanceMatrix(values)
