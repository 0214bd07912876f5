# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Exceptions raised by the eigenvalue solvers."""


class ConvergenceError(ArithmeticError):
    """An iterative reduction exceeded its iteration cap."""


class MatrixSizeError(ValueError):
    """Input is not a non-empty square matrix."""


class PolynomialRootsError(ValueError):
    """Roots requested for a polynomial that has no finite root set."""
