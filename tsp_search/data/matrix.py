"""
Distance matrix type shared by every solver.

Usage:
    from tsp_search.data.matrix import as_distance_matrix

    matrix = as_distance_matrix([[0, 3], [4, 0]])
    matrix.size          # 2
    matrix.cost(0, 1)    # 3
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np


class DistanceMatrix:
    """
    Immutable square matrix of non-negative integer travel costs.

    Entry (a, b) is the cost of travelling from city a to city b. The
    matrix need not be symmetric; the diagonal is conventionally 0 but is
    never read by the solvers.

    Attributes:
        size: Number of cities (n)
        values: Read-only numpy array of shape (n, n)
    """

    def __init__(self, values: MatrixLike) -> None:
        if isinstance(values, DistanceMatrix):
            values = values.values
        array = np.array(values, copy=True)

        if array.size == 0:
            array = np.zeros((0, 0), dtype=np.int64)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Distance matrix must be square, got shape {array.shape}")
        if np.issubdtype(array.dtype, np.floating):
            # Whole-number floats (e.g. from JSON or .npy) are accepted
            if not np.all(np.isfinite(array)) or not np.all(np.mod(array, 1) == 0):
                raise ValueError("Distance matrix entries must be integers")
            # 2**63 is the first float that does not fit in int64
            if np.any(array >= 2.0**63):
                raise ValueError("Distance matrix entries exceed the int64 range")
        elif np.issubdtype(array.dtype, np.unsignedinteger):
            if np.any(array > np.iinfo(np.int64).max):
                raise ValueError("Distance matrix entries exceed the int64 range")
        elif not np.issubdtype(array.dtype, np.integer):
            raise ValueError(f"Distance matrix entries must be integers, got dtype {array.dtype}")
        if np.any(array < 0):
            raise ValueError("Distance matrix entries must be non-negative")

        self._values = array.astype(np.int64)
        self._values.setflags(write=False)

    @property
    def size(self) -> int:
        return self._values.shape[0]

    @property
    def values(self) -> np.ndarray:
        return self._values

    def _check_city(self, city: int) -> int:
        if not 0 <= city < self.size:
            raise IndexError(f"City {city} out of range for {self.size} cities")
        return city

    def cost(self, from_city: int, to_city: int) -> int:
        """Cost of the edge from_city -> to_city."""
        return int(self._values[self._check_city(from_city), self._check_city(to_city)])

    def row(self, city: int) -> np.ndarray:
        """Outgoing edge costs of a city."""
        return self._values[self._check_city(city)]

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._values, self._values.T))

    def to_list(self) -> list[list[int]]:
        return self._values.tolist()

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, city: int) -> np.ndarray:
        return self.row(city)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    def __repr__(self) -> str:
        return f"DistanceMatrix(size={self.size})"


MatrixLike = Union[DistanceMatrix, np.ndarray, Sequence[Sequence[int]]]


def as_distance_matrix(values: MatrixLike) -> DistanceMatrix:
    """Return values as a DistanceMatrix, validating it if needed."""
    if isinstance(values, DistanceMatrix):
        return values
    return DistanceMatrix(values)
