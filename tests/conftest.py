"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from tsp_search.config import SAMPLE_DISTANCE_MATRIX
from tsp_search.data import DistanceMatrix


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_matrix() -> DistanceMatrix:
    """Four-city demonstration problem (optimal tour cost 73 from city 0)."""
    return DistanceMatrix(SAMPLE_DISTANCE_MATRIX)


@pytest.fixture
def greedy_trap_matrix() -> DistanceMatrix:
    """
    Asymmetric three-city problem that misleads A*.

    Tour 0 -> 1 -> 2 -> 0 costs 12 but ends on an expensive return edge;
    A* prefers 0 -> 2 -> 1 -> 0 (cost 13).
    """
    return DistanceMatrix([
        [0, 1, 5],
        [3, 0, 1],
        [10, 5, 0],
    ])


@pytest.fixture
def line_matrix() -> DistanceMatrix:
    """Five cities on a line at positions 0..4 (cost = distance)."""
    return DistanceMatrix([[abs(a - b) for b in range(5)] for a in range(5)])
