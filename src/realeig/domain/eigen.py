# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Eigenvalue decomposition of real square matrices.

Two pipelines, chosen once per decomposition:

- symmetric: Householder tridiagonalization, then implicit-shift QL.
  Real eigenvalues sorted ascending, orthonormal eigenvectors.
- general: Householder reduction to Hessenberg form, then double-shift
  QR to real Schur form with eigenvector back-substitution. Eigenvalues
  in deflation order, conjugate pairs adjacent (positive imaginary first).

The result satisfies A·V = V·D, where D is the block-diagonal
eigenvalue matrix: each conjugate pair a ± ib becomes the 2x2 block
[[a, b], [-b, a]].

External dependency: numpy (allowed in domain layer).
"""
import logging
from dataclasses import dataclass
from functools import cached_property

import numpy as np

from realeig.domain.householder import reduce_to_hessenberg, tridiagonalize
from realeig.domain.linalg import MatrixLike, as_square_matrix, format_matrix, mat_identity
from realeig.domain.linalg import is_symmetric as check_symmetric
from realeig.domain.schur import reduce_to_schur
from realeig.domain.symmetric_ql import diagonalize_tridiagonal
from realeig.domain.tolerance import almost_zero

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EigenSolverConfig:
    """Iteration caps for the eigenvalue solvers.

    max_ql_iterations: QL sweeps allowed per eigenvalue (symmetric path)
    schur_iterations_per_order: QR sweeps allowed per matrix order, summed
        over the whole decomposition (general path)
    """
    max_ql_iterations: int = 1000
    schur_iterations_per_order: int = 30

    def __post_init__(self) -> None:
        if self.max_ql_iterations <= 0:
            raise ValueError(
                f"max_ql_iterations must be positive, got {self.max_ql_iterations}"
            )
        if self.schur_iterations_per_order <= 0:
            raise ValueError(
                "schur_iterations_per_order must be positive, "
                f"got {self.schur_iterations_per_order}"
            )


DEFAULT_CONFIG = EigenSolverConfig()


@dataclass(frozen=True, eq=False)
class EigenDecomposition:
    """Eigenvalues and eigenvectors of a real square matrix.

    vectors: read-only (n, n) array, eigenvectors as columns. For a
        conjugate pair at (k, k+1), columns k and k+1 hold the real and
        imaginary parts of the eigenvector of values[k].
    values: eigenvalues, one per column of vectors.
    is_symmetric: True if produced by the symmetric pipeline.

    The block-diagonal matrix ``d`` is computed on first access and
    cached. Concurrent first access to ``d`` from several threads on the
    same instance is undefined unless the caller synchronizes it.
    """
    vectors: np.ndarray
    values: tuple
    is_symmetric: bool

    @property
    def order(self) -> int:
        return len(self.values)

    @cached_property
    def d(self) -> np.ndarray:
        """Block-diagonal eigenvalue matrix D with A·V = V·D."""
        n = self.order
        result = np.zeros((n, n), dtype=np.float64)
        for i, value in enumerate(self.values):
            result[i, i] = value.real
            if value.imag > 0:
                result[i, i + 1] = value.imag
            elif value.imag < 0:
                result[i, i - 1] = value.imag
        result.setflags(write=False)
        return result

    def real_values(self) -> np.ndarray:
        """Real parts of the eigenvalues."""
        return np.array([v.real for v in self.values], dtype=np.float64)

    def imaginary_values(self) -> np.ndarray:
        """Imaginary parts of the eigenvalues."""
        return np.array([v.imag for v in self.values], dtype=np.float64)

    def complex_vectors(self) -> np.ndarray:
        """Eigenvectors as a complex (n, n) matrix, one column per value."""
        n = self.order
        result = self.vectors.astype(np.complex128)
        k = 0
        while k < n:
            if self.values[k].imag > 0 and k + 1 < n:
                column = self.vectors[:, k] + 1j * self.vectors[:, k + 1]
                result[:, k] = column
                result[:, k + 1] = np.conj(column)
                k += 2
            else:
                k += 1
        return result

    def determinant(self) -> float:
        """Absolute value of the determinant: |∏ λᵢ|.

        Returns 0.0 as soon as any eigenvalue is numerically zero.
        """
        det = complex(1.0, 0.0)
        for value in self.values:
            if almost_zero(value):
                return 0.0
            det *= value
        return abs(det)

    def rank(self) -> int:
        """Numerical rank: count of eigenvalues that are not numerically zero."""
        return sum(1 for value in self.values if not almost_zero(value))

    def __str__(self) -> str:
        return self.__format__("")

    def __format__(self, format_spec: str) -> str:
        fmt = format_spec or ".6g"
        return "\n".join([
            "Eigenvalues:",
            format_matrix(self.d, fmt),
            "Eigenvectors:",
            format_matrix(self.vectors, fmt),
        ])


def _decompose_symmetric(a: np.ndarray, config: EigenSolverConfig) -> tuple:
    n = a.shape[0]
    vectors = a.copy()
    d = np.zeros(n, dtype=np.float64)
    e = np.zeros(n, dtype=np.float64)
    tridiagonalize(vectors, d, e)
    diagonalize_tridiagonal(vectors, d, e, max_iterations=config.max_ql_iterations)
    return vectors, d, e


def _decompose_general(a: np.ndarray, config: EigenSolverConfig) -> tuple:
    n = a.shape[0]
    vectors = mat_identity(n)
    hess = a.copy()
    d = np.zeros(n, dtype=np.float64)
    e = np.zeros(n, dtype=np.float64)
    reduce_to_hessenberg(vectors, hess, d)
    reduce_to_schur(
        vectors, hess, d, e,
        iterations_per_order=config.schur_iterations_per_order,
    )
    return vectors, d, e


def eigen_decompose(
    matrix: MatrixLike,
    is_symmetric: bool | None = None,
    config: EigenSolverConfig | None = None,
) -> EigenDecomposition:
    """Compute the eigenvalue decomposition of a real square matrix.

    Args:
        matrix: Square real matrix (nested lists or ndarray). Not modified.
        is_symmetric: Selects the pipeline. None (default) picks the
            symmetric pipeline iff the matrix is exactly symmetric.
        config: Iteration caps. Defaults to DEFAULT_CONFIG.

    Returns:
        EigenDecomposition with eigenvectors as columns.

    Raises:
        MatrixSizeError: if the input is not a non-empty square matrix.
        ValueError: if the input contains NaN or infinite values.
        ConvergenceError: if an iteration cap is exceeded.
    """
    a = as_square_matrix(matrix)
    cfg = config if config is not None else DEFAULT_CONFIG
    exact = check_symmetric(a)
    symmetric = exact if is_symmetric is None else bool(is_symmetric)

    if symmetric:
        if not exact:
            logger.warning(
                "Symmetric pipeline requested for a non-symmetric %dx%d matrix; "
                "results describe its symmetric counterpart only approximately.",
                a.shape[0], a.shape[1],
            )
        vectors, d, e = _decompose_symmetric(a, cfg)
    else:
        vectors, d, e = _decompose_general(a, cfg)

    vectors.setflags(write=False)
    values = tuple(complex(float(re), float(im)) for re, im in zip(d, e))
    logger.debug(
        "Eigen decomposition done: order=%d, pipeline=%s",
        a.shape[0], "symmetric" if symmetric else "general",
    )
    return EigenDecomposition(vectors=vectors, values=values, is_symmetric=symmetric)


def symmetric_eigen_decompose(
    matrix: MatrixLike,
    config: EigenSolverConfig | None = None,
) -> EigenDecomposition:
    """Eigenvalue decomposition forcing the symmetric pipeline."""
    return eigen_decompose(matrix, is_symmetric=True, config=config)
