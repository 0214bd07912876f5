# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
realeig

Eigenvalue decomposition of real square matrices: Householder
tridiagonalization with implicit-shift QL for symmetric input, and
Hessenberg reduction with double-shift QR to real Schur form for general
input. Includes determinant and numerical rank from the eigenvalues,
polynomial root finding through companion matrices, and JSON/CSV
matrix I/O.
"""

from realeig.domain.eigen import (
    DEFAULT_CONFIG,
    EigenDecomposition,
    EigenSolverConfig,
    eigen_decompose,
    symmetric_eigen_decompose,
)
from realeig.domain.errors import (
    ConvergenceError,
    MatrixSizeError,
    PolynomialRootsError,
)
from realeig.domain.linalg import (
    format_matrix,
    is_symmetric,
)
from realeig.domain.polynomials import (
    polynomial_derivative,
    polynomial_eval,
    polynomial_roots,
)
from realeig.domain.tolerance import almost_zero

__all__ = [
    "DEFAULT_CONFIG",
    "EigenDecomposition",
    "EigenSolverConfig",
    "eigen_decompose",
    "symmetric_eigen_decompose",
    "ConvergenceError",
    "MatrixSizeError",
    "PolynomialRootsError",
    "format_matrix",
    "is_symmetric",
    "polynomial_derivative",
    "polynomial_eval",
    "polynomial_roots",
    "almost_zero",
]
