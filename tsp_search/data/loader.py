"""
Reading and writing distance matrix files.

Supported formats (chosen by file suffix):
- .json: a list of rows, or {"matrix": [...], "start": 0}
- .msgpack: the same shapes as JSON, msgpack-encoded
- .npy: a 2-D numpy array (no start city)

Usage:
    from tsp_search.data.loader import load_matrix

    problem = load_matrix("data/sample.json")
    problem.matrix.size
    problem.start_city
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import msgpack
import numpy as np

from tsp_search.config import MATRIX_FILE_SUFFIXES
from tsp_search.data.matrix import DistanceMatrix, MatrixLike, as_distance_matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatrixFile:
    """
    Contents of a distance matrix file.

    Attributes:
        matrix: Validated distance matrix
        start_city: Start city stored with the matrix, if any
    """

    matrix: DistanceMatrix
    start_city: int | None = None


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in MATRIX_FILE_SUFFIXES:
        supported = ", ".join(MATRIX_FILE_SUFFIXES)
        raise ValueError(f"Unsupported matrix file '{path.name}'. Supported: {supported}")
    return suffix


def _from_payload(payload: Any, path: Path) -> MatrixFile:
    """Build a MatrixFile from decoded JSON/msgpack content."""
    if isinstance(payload, dict):
        if "matrix" not in payload:
            raise ValueError(f"{path.name}: object is missing the 'matrix' key")
        start = payload.get("start")
        return MatrixFile(
            matrix=DistanceMatrix(payload["matrix"]),
            start_city=int(start) if start is not None else None,
        )
    if isinstance(payload, list):
        return MatrixFile(matrix=DistanceMatrix(payload))
    raise ValueError(f"{path.name}: expected a list of rows or an object, got {type(payload).__name__}")


def load_matrix(path: str | Path) -> MatrixFile:
    """
    Load a distance matrix file.

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the format is unsupported or the matrix is invalid
    """
    path = Path(path)
    suffix = _check_suffix(path)
    if not path.exists():
        raise FileNotFoundError(f"Matrix file not found: {path}")

    logger.info(f"Loading distance matrix from {path}...")
    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            problem = _from_payload(json.load(f), path)
    elif suffix == ".msgpack":
        with open(path, "rb") as f:
            problem = _from_payload(msgpack.unpack(f), path)
    else:
        problem = MatrixFile(matrix=DistanceMatrix(np.load(path)))

    logger.info(f"Loaded {problem.matrix.size}-city distance matrix")
    return problem


def save_matrix(path: str | Path, matrix: MatrixLike, start_city: int | None = None) -> Path:
    """
    Write a distance matrix file in the format given by the suffix.

    The start city is stored for JSON and msgpack files and ignored for
    .npy files.
    """
    path = Path(path)
    suffix = _check_suffix(path)
    matrix = as_distance_matrix(matrix)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload: dict[str, Any] = {"matrix": matrix.to_list()}
    if start_city is not None:
        payload["start"] = start_city

    if suffix == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f)
    elif suffix == ".msgpack":
        with open(path, "wb") as f:
            msgpack.pack(payload, f)
    else:
        if start_city is not None:
            logger.warning(f"{path.name}: .npy files do not store a start city")
        np.save(path, matrix.values)

    logger.info(f"Saved {matrix.size}-city distance matrix to {path}")
    return path
