# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Roots of real polynomials.

Coefficients are ordered from the highest degree term down to the
constant term. Degrees 1 and 2 use closed forms; higher degrees take
the eigenvalues of the companion matrix through the general
(non-symmetric) eigenvalue pipeline.
"""
import math
from typing import Sequence

import numpy as np

from realeig.domain.eigen import eigen_decompose
from realeig.domain.errors import PolynomialRootsError


def polynomial_eval(value, coefficients: Sequence[float]):
    """Evaluate the polynomial at a real or complex value (Horner's rule)."""
    result = 0.0
    for c in coefficients:
        result = result * value + c
    return result


def polynomial_derivative(value, coefficients: Sequence[float]):
    """Evaluate the first derivative of the polynomial at a value."""
    degree = len(coefficients) - 1
    result = 0.0
    for i, c in enumerate(coefficients[:-1]):
        result = result * value + (degree - i) * c
    return result


def _strip_leading_zeros(coefficients: Sequence[float]) -> list[float]:
    c = [float(v) for v in coefficients]
    start = 0
    while start < len(c) and c[start] == 0.0:
        start += 1
    return c[start:]


def _solve_quadratic(a: float, b: float, c: float) -> tuple[complex, ...]:
    discr = b * b - 4.0 * a * c
    den = 0.5 / a
    if discr >= 0:
        root = math.sqrt(discr)
        # Pick the sign that avoids cancellation, then use Vieta.
        first = (-b - root) * den if b >= 0 else (-b + root) * den
        if first == 0.0:
            return (complex(0.0, 0.0), complex(-b / a, 0.0))
        second = c / (a * first)
        return (complex(first, 0.0), complex(second, 0.0))
    root = math.sqrt(-discr)
    return (complex(-b * den, root * den), complex(-b * den, -root * den))


def companion_matrix(coefficients: Sequence[float]) -> np.ndarray:
    """Companion matrix whose characteristic polynomial is the monic input."""
    c = _strip_leading_zeros(coefficients)
    n = len(c) - 1
    if n < 1:
        raise PolynomialRootsError("Companion matrix requires degree >= 1")
    result = np.zeros((n, n), dtype=np.float64)
    result[0, n - 1] = -c[n] / c[0]
    for i in range(1, n):
        result[i, i - 1] = 1.0
        result[i, n - 1] = -c[n - i] / c[0]
    return result


def polynomial_roots(coefficients: Sequence[float]) -> tuple[complex, ...]:
    """All complex roots of a real polynomial, with multiplicity.

    Args:
        coefficients: Highest degree first, e.g. [1, 0, -1] for x² - 1.
            Leading zeros are ignored.

    Returns:
        Tuple of complex roots. Empty for a nonzero constant, which has no
        roots; only the zero polynomial is rejected.

    Raises:
        PolynomialRootsError: for the zero polynomial.
    """
    c = _strip_leading_zeros(coefficients)
    if not c:
        raise PolynomialRootsError("The zero polynomial has infinitely many roots")
    degree = len(c) - 1
    if degree == 0:
        return ()
    if degree == 1:
        return (complex(-c[1] / c[0], 0.0),)
    if degree == 2:
        return _solve_quadratic(c[0], c[1], c[2])
    return eigen_decompose(companion_matrix(c), is_symmetric=False).values
