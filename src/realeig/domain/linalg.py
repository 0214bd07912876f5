# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Dense matrix helpers backed by NumPy.

Precondition checks, symmetry test, products, inverse, determinant and
the plain-text rendering used by decomposition dumps.

External dependency: numpy (allowed in domain layer).
"""
from typing import List, Sequence, Union

import numpy as np

from realeig.domain.errors import MatrixSizeError

Matrix = List[List[float]]
MatrixLike = Union[Matrix, Sequence[Sequence[float]], np.ndarray]


def as_square_matrix(a: MatrixLike) -> np.ndarray:
    """Validate a square real matrix and return a float64 copy.

    Raises:
        MatrixSizeError: if the input is not a non-empty 2-D square matrix.
        ValueError: if the input contains NaN or infinite values.
    """
    try:
        arr = np.array(a, dtype=np.float64)
    except ValueError as exc:
        raise MatrixSizeError(f"Matrix rows have inconsistent lengths: {exc}") from exc
    if arr.ndim != 2:
        raise MatrixSizeError(f"Expected a 2-D matrix, got {arr.ndim} dimension(s)")
    rows, cols = arr.shape
    if rows != cols:
        raise MatrixSizeError(f"Expected a square matrix, got {rows}x{cols}")
    if rows == 0:
        raise MatrixSizeError("Matrix is empty")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Matrix contains NaN or infinite values")
    return arr


def is_symmetric(a: MatrixLike) -> bool:
    """Exact symmetry test: square and a[i][j] == a[j][i] for all cells."""
    arr = np.asarray(a, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        return False
    return bool(np.array_equal(arr, arr.T))


def mat_identity(n: int) -> np.ndarray:
    """Create an NxN identity matrix."""
    return np.eye(n, dtype=np.float64)


def mat_multiply(a: MatrixLike, b: MatrixLike) -> np.ndarray:
    """Multiply matrices a (NxM) and b (MxK) → NxK."""
    return np.asarray(a, dtype=np.float64) @ np.asarray(b, dtype=np.float64)


def mat_transpose(a: MatrixLike) -> np.ndarray:
    """Transpose matrix a."""
    return np.asarray(a, dtype=np.float64).T.copy()


def mat_inverse(a: MatrixLike) -> np.ndarray:
    """Inverse of an NxN matrix.

    Raises numpy.linalg.LinAlgError for singular input.
    """
    return np.linalg.inv(as_square_matrix(a))


def mat_determinant(a: MatrixLike) -> float:
    """Signed determinant of an NxN matrix via LU factorization."""
    arr = as_square_matrix(a)
    n = arr.shape[0]
    if n == 1:
        return float(arr[0, 0])
    if n == 2:
        return float(arr[0, 0] * arr[1, 1] - arr[0, 1] * arr[1, 0])
    return float(np.linalg.det(arr))


def format_matrix(a: MatrixLike, fmt: str = ".6g") -> str:
    """Render a matrix as a header line plus one line per row.

    Cells are formatted with ``fmt`` and right-aligned to a common width.
    """
    arr = np.asarray(a, dtype=np.float64)
    rows, cols = arr.shape
    cells = [[format(float(v), fmt) for v in row] for row in arr]
    width = max((len(c) for row in cells for c in row), default=0)
    lines = [f"ℝ({rows}⨯{cols})"]
    for row in cells:
        lines.append(" ".join(c.rjust(width) for c in row))
    return "\n".join(lines)
