# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Implicit-shift QL iteration for symmetric tridiagonal matrices."""
import logging
import math

import numpy as np

from realeig.domain.errors import ConvergenceError
from realeig.domain.tolerance import MACHINE_EPSILON

logger = logging.getLogger(__name__)


def diagonalize_tridiagonal(
    vectors: np.ndarray,
    d: np.ndarray,
    e: np.ndarray,
    max_iterations: int = 1000,
) -> None:
    """Diagonalize the tridiagonal form left by tridiagonalize().

    On exit d holds the eigenvalues sorted ascending, e is zeroed and the
    columns of ``vectors`` are the matching orthonormal eigenvectors.

    Args:
        vectors: Orthogonal transform from the tridiagonal reduction (n x n).
        d: Diagonal of the tridiagonal form.
        e: Sub-diagonal, with e[i] between rows i-1 and i.
        max_iterations: Cap on QL sweeps for any single eigenvalue.

    Raises:
        ConvergenceError: if an eigenvalue needs max_iterations sweeps
            without its off-diagonal element becoming negligible.
    """
    n = d.shape[0]
    e[:n - 1] = e[1:]
    e[n - 1] = 0.0

    f = 0.0
    tst1 = 0.0
    total = 0
    for l in range(n):
        # Find small sub-diagonal element.
        tst1 = max(tst1, abs(d[l]) + abs(e[l]))
        m = l
        while m < n and abs(e[m]) > MACHINE_EPSILON * tst1:
            m += 1

        # m == l: d[l] is already an eigenvalue.
        iteration = 0
        while m > l:
            # Implicit shift from the leading 2x2 block.
            g = d[l]
            p = (d[l + 1] - g) / (2.0 * e[l])
            r = math.hypot(p, 1.0)
            if p < 0:
                r = -r
            d[l] = e[l] / (p + r)
            d[l + 1] = e[l] * (p + r)
            dl1 = d[l + 1]
            h = g - d[l]
            d[l + 2:] -= h
            f += h

            # Implicit QL transformation.
            p = d[m]
            c = c2 = c3 = 1.0
            el1 = e[l + 1]
            s = s2 = 0.0
            for i in range(m - 1, l - 1, -1):
                c3 = c2
                c2 = c
                s2 = s
                g = c * e[i]
                h = c * p
                r = math.hypot(p, e[i])
                e[i + 1] = s * r
                s = e[i] / r
                c = p / r
                p = c * d[i] - s * g
                d[i + 1] = h + s * (c * g + s * d[i])

                # Accumulate the plane rotation.
                col = vectors[:, i + 1].copy()
                vectors[:, i + 1] = s * vectors[:, i] + c * col
                vectors[:, i] = c * vectors[:, i] - s * col

            p = -s * s2 * c3 * el1 * e[l] / dl1
            e[l] = s * p
            d[l] = c * p

            iteration += 1
            if abs(e[l]) <= MACHINE_EPSILON * tst1:
                break
            if iteration >= max_iterations:
                raise ConvergenceError(
                    f"Symmetric QL iteration did not converge for index {l} "
                    f"after {iteration} iterations"
                )
        total += iteration
        d[l] += f
        e[l] = 0.0

    # Selection sort, keeping columns paired with their eigenvalues.
    for i in range(n - 1):
        k = i
        p = d[i]
        for j in range(i + 1, n):
            if d[j] < p:
                k = j
                p = d[j]
        if k != i:
            d[k] = d[i]
            d[i] = p
            vectors[:, [i, k]] = vectors[:, [k, i]]

    logger.debug("Symmetric QL converged: order=%d, sweeps=%d", n, total)
