# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Double-shift implicit QR reduction from Hessenberg to real Schur form.

After the Schur form is reached, eigenvectors of the quasi-triangular
matrix are found by back-substitution and mapped back through the
accumulated orthogonal transform.

Eigenvector encoding: a real eigenvalue owns one column. A conjugate
pair (d[k] ± i·|e[k]|) with e[k] > 0 owns columns k and k+1 holding the
real and imaginary parts of the eigenvector for d[k] + i·e[k].
"""
import logging
import math

import numpy as np

from realeig.domain.errors import ConvergenceError
from realeig.domain.tolerance import MACHINE_EPSILON

logger = logging.getLogger(__name__)

# Iterations without deflation after which an exceptional shift is applied.
_EXCEPTIONAL_SHIFT_ITERATIONS = (10, 30)


def complex_division(xr: float, xi: float, yr: float, yi: float) -> tuple[float, float]:
    """Compute (xr + i·xi) / (yr + i·yi), returned as (real, imag).

    Divides through by the larger divisor component to avoid overflow.
    """
    if abs(yi) < abs(yr):
        r = yi / yr
        den = yr + yi * r
        return (xr + xi * r) / den, (xi - xr * r) / den
    r = yr / yi
    den = yi + yr * r
    return (xi + xr * r) / den, (-xr + xi * r) / den


def reduce_to_schur(
    vectors: np.ndarray,
    hess: np.ndarray,
    d: np.ndarray,
    e: np.ndarray,
    iterations_per_order: int = 30,
) -> None:
    """Compute eigenvalues and eigenvectors from the Hessenberg form.

    Args:
        vectors: Transform accumulated by reduce_to_hessenberg(). On exit,
            eigenvectors of the original matrix (columns, real encoding).
        hess: Upper Hessenberg matrix. Destroyed.
        d: On exit, real parts of the eigenvalues.
        e: On exit, imaginary parts; conjugate pairs occupy adjacent
            indices with the positive member first.
        iterations_per_order: The QR iteration fails once the total number
            of sweeps exceeds iterations_per_order * n.

    Raises:
        ConvergenceError: if the sweep cap is exceeded.
    """
    size = hess.shape[0]
    eps = MACHINE_EPSILON
    max_total = iterations_per_order * size
    exshift = 0.0
    p = q = r = s = z = 0.0

    # Norm over the Hessenberg band.
    norm = 0.0
    for i in range(size):
        norm += float(np.abs(hess[i, max(i - 1, 0):]).sum())

    if norm == 0.0:
        # Zero matrix: nothing can deflate against a zero norm.
        d[:] = np.diag(hess)
        e[:] = 0.0
        logger.debug("Schur QR skipped for zero matrix: order=%d", size)
        return

    n = size - 1
    iteration = 0
    total = 0
    while n >= 0:
        # Look for a single small sub-diagonal element.
        l = n
        while l > 0:
            s = abs(hess[l - 1, l - 1]) + abs(hess[l, l])
            if s == 0.0:
                s = norm
            if abs(hess[l, l - 1]) < eps * s:
                break
            l -= 1

        if l == n:
            # One root found.
            hess[n, n] += exshift
            d[n] = hess[n, n]
            e[n] = 0.0
            n -= 1
            iteration = 0

        elif l == n - 1:
            # Two roots found.
            w = hess[n, n - 1] * hess[n - 1, n]
            p = (hess[n - 1, n - 1] - hess[n, n]) / 2.0
            q = p * p + w
            z = math.sqrt(abs(q))
            hess[n, n] += exshift
            hess[n - 1, n - 1] += exshift
            x = hess[n, n]

            if q >= 0:
                # Real pair.
                z = p + z if p >= 0 else p - z
                d[n - 1] = x + z
                d[n] = d[n - 1]
                if z != 0.0:
                    d[n] = x - w / z
                e[n - 1] = 0.0
                e[n] = 0.0
                x = hess[n, n - 1]
                s = abs(x) + abs(z)
                p = x / s
                q = z / s
                r = math.sqrt(p * p + q * q)
                p /= r
                q /= r

                # Row modification.
                row = hess[n - 1, n - 1:].copy()
                hess[n - 1, n - 1:] = q * row + p * hess[n, n - 1:]
                hess[n, n - 1:] = q * hess[n, n - 1:] - p * row

                # Column modification.
                col = hess[:n + 1, n - 1].copy()
                hess[:n + 1, n - 1] = q * col + p * hess[:n + 1, n]
                hess[:n + 1, n] = q * hess[:n + 1, n] - p * col

                # Accumulate transformations.
                col = vectors[:, n - 1].copy()
                vectors[:, n - 1] = q * col + p * vectors[:, n]
                vectors[:, n] = q * vectors[:, n] - p * col
            else:
                # Complex pair.
                d[n - 1] = x + p
                d[n] = x + p
                e[n - 1] = z
                e[n] = -z
            n -= 2
            iteration = 0

        else:
            # No convergence yet: form the shift.
            x = hess[n, n]
            y = 0.0
            w = 0.0
            if l < n:
                y = hess[n - 1, n - 1]
                w = hess[n, n - 1] * hess[n - 1, n]

            if iteration == _EXCEPTIONAL_SHIFT_ITERATIONS[0]:
                exshift += x
                for i in range(n + 1):
                    hess[i, i] -= x
                s = abs(hess[n, n - 1]) + abs(hess[n - 1, n - 2])
                x = y = 0.75 * s
                w = -0.4375 * s * s
            elif iteration == _EXCEPTIONAL_SHIFT_ITERATIONS[1]:
                s = (y - x) / 2.0
                s = s * s + w
                if s > 0:
                    s = math.sqrt(s)
                    if y < x:
                        s = -s
                    s = x - w / ((y - x) / 2.0 + s)
                    for i in range(n + 1):
                        hess[i, i] -= s
                    exshift += s
                    x = y = w = 0.964

            iteration += 1
            total += 1
            if total > max_total:
                raise ConvergenceError(
                    f"Schur QR iteration exceeded {max_total} iterations "
                    f"for order {size} with {n + 1} eigenvalue(s) pending"
                )

            # Look for two consecutive small sub-diagonal elements.
            m = n - 2
            while m >= l:
                z = hess[m, m]
                r = x - z
                s = y - z
                p = (r * s - w) / hess[m + 1, m] + hess[m, m + 1]
                q = hess[m + 1, m + 1] - z - r - s
                r = hess[m + 2, m + 1]
                s = abs(p) + abs(q) + abs(r)
                p /= s
                q /= s
                r /= s
                if m == l:
                    break
                if (abs(hess[m, m - 1]) * (abs(q) + abs(r))
                        < eps * (abs(p) * (abs(hess[m - 1, m - 1]) + abs(z)
                                           + abs(hess[m + 1, m + 1])))):
                    break
                m -= 1

            for i in range(m + 2, n + 1):
                hess[i, i - 2] = 0.0
                if i > m + 2:
                    hess[i, i - 3] = 0.0

            # Double QR step on rows l..n and columns m..n.
            for k in range(m, n):
                notlast = k != n - 1
                if k != m:
                    p = hess[k, k - 1]
                    q = hess[k + 1, k - 1]
                    r = hess[k + 2, k - 1] if notlast else 0.0
                    x = abs(p) + abs(q) + abs(r)
                    if x == 0.0:
                        continue
                    p /= x
                    q /= x
                    r /= x

                s = math.sqrt(p * p + q * q + r * r)
                if p < 0:
                    s = -s
                if s == 0.0:
                    continue

                if k != m:
                    hess[k, k - 1] = -s * x
                elif l != m:
                    hess[k, k - 1] = -hess[k, k - 1]
                p += s
                x = p / s
                y = q / s
                z = r / s
                q /= p
                r /= p

                # Row modification.
                pv = hess[k, k:] + q * hess[k + 1, k:]
                if notlast:
                    pv += r * hess[k + 2, k:]
                    hess[k + 2, k:] -= pv * z
                hess[k, k:] -= pv * x
                hess[k + 1, k:] -= pv * y

                # Column modification.
                upper = min(n, k + 3) + 1
                pv = x * hess[:upper, k] + y * hess[:upper, k + 1]
                if notlast:
                    pv += z * hess[:upper, k + 2]
                    hess[:upper, k + 2] -= pv * r
                hess[:upper, k] -= pv
                hess[:upper, k + 1] -= pv * q

                # Accumulate transformations.
                pv = x * vectors[:, k] + y * vectors[:, k + 1]
                if notlast:
                    pv += z * vectors[:, k + 2]
                    vectors[:, k + 2] -= pv * r
                vectors[:, k] -= pv
                vectors[:, k + 1] -= pv * q

    logger.debug("Schur QR converged: order=%d, sweeps=%d", size, total)

    _back_substitute(hess, d, e, norm)

    # Back transformation to eigenvectors of the original matrix.
    for j in range(size - 1, -1, -1):
        vectors[:, j] = vectors[:, :j + 1] @ hess[:j + 1, j]


def _back_substitute(hess: np.ndarray, d: np.ndarray, e: np.ndarray, norm: float) -> None:
    """Solve for the eigenvectors of the real Schur form, in place in hess."""
    size = hess.shape[0]
    eps = MACHINE_EPSILON
    r = s = z = 0.0

    for n in range(size - 1, -1, -1):
        p = d[n]
        q = e[n]

        if q == 0.0:
            # Real vector.
            l = n
            hess[n, n] = 1.0
            for i in range(n - 1, -1, -1):
                w = hess[i, i] - p
                r = float(hess[i, l:n + 1] @ hess[l:n + 1, n])
                if e[i] < 0.0:
                    z = w
                    s = r
                    continue
                l = i
                if e[i] == 0.0:
                    hess[i, n] = -r / w if w != 0.0 else -r / (eps * norm)
                else:
                    # Solve real equations.
                    x = hess[i, i + 1]
                    y = hess[i + 1, i]
                    q = (d[i] - p) * (d[i] - p) + e[i] * e[i]
                    t = (x * s - z * r) / q
                    hess[i, n] = t
                    if abs(x) > abs(z):
                        hess[i + 1, n] = (-r - w * t) / x
                    else:
                        hess[i + 1, n] = (-s - y * t) / z

                # Overflow control.
                t = abs(hess[i, n])
                if (eps * t) * t > 1:
                    hess[i:n + 1, n] /= t

        elif q < 0:
            # Complex vector; the last component is imaginary.
            l = n - 1
            if abs(hess[n, n - 1]) > abs(hess[n - 1, n]):
                hess[n - 1, n - 1] = q / hess[n, n - 1]
                hess[n - 1, n] = -(hess[n, n] - p) / hess[n, n - 1]
            else:
                hess[n - 1, n - 1], hess[n - 1, n] = complex_division(
                    0.0, -hess[n - 1, n], hess[n - 1, n - 1] - p, q)
            hess[n, n - 1] = 0.0
            hess[n, n] = 1.0

            for i in range(n - 2, -1, -1):
                ra = float(hess[i, l:n + 1] @ hess[l:n + 1, n - 1])
                sa = float(hess[i, l:n + 1] @ hess[l:n + 1, n])
                w = hess[i, i] - p

                if e[i] < 0.0:
                    z = w
                    r = ra
                    s = sa
                    continue
                l = i
                if e[i] == 0.0:
                    hess[i, n - 1], hess[i, n] = complex_division(-ra, -sa, w, q)
                else:
                    # Solve complex equations.
                    x = hess[i, i + 1]
                    y = hess[i + 1, i]
                    vr = (d[i] - p) * (d[i] - p) + e[i] * e[i] - q * q
                    vi = (d[i] - p) * 2.0 * q
                    if vr == 0.0 and vi == 0.0:
                        vr = eps * norm * (abs(w) + abs(q) + abs(x) + abs(y) + abs(z))
                    hess[i, n - 1], hess[i, n] = complex_division(
                        x * r - z * ra + q * sa, x * s - z * sa - q * ra, vr, vi)
                    if abs(x) > abs(z) + abs(q):
                        hess[i + 1, n - 1] = (-ra - w * hess[i, n - 1] + q * hess[i, n]) / x
                        hess[i + 1, n] = (-sa - w * hess[i, n] - q * hess[i, n - 1]) / x
                    else:
                        hess[i + 1, n - 1], hess[i + 1, n] = complex_division(
                            -r - y * hess[i, n - 1], -s - y * hess[i, n], z, q)

                # Overflow control.
                t = max(abs(hess[i, n - 1]), abs(hess[i, n]))
                if (eps * t) * t > 1:
                    hess[i:n + 1, n - 1] /= t
                    hess[i:n + 1, n] /= t
