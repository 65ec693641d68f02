"""
Data module.

Provides the distance matrix type and ways to obtain one.

Usage:
    from tsp_search.data import as_distance_matrix, load_matrix, random_matrix

    matrix = as_distance_matrix([[0, 3], [4, 0]])
    problem = load_matrix("data/sample.json")
    matrix = random_matrix(6, seed=42)
"""

from tsp_search.data.generator import random_matrix
from tsp_search.data.loader import MatrixFile, load_matrix, save_matrix
from tsp_search.data.matrix import DistanceMatrix, MatrixLike, as_distance_matrix

__all__ = [
    "DistanceMatrix",
    "MatrixLike",
    "as_distance_matrix",
    "MatrixFile",
    "load_matrix",
    "save_matrix",
    "random_matrix",
]
