# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Householder reductions feeding the eigenvalue iterations.

Two orthogonal similarity reductions, both single deterministic O(n³)
passes working in place on float64 buffers indexed [row, col]:

- tridiagonalize: symmetric matrix → tridiagonal (d, e), with the
  orthogonal transform accumulated into ``vectors``.
- reduce_to_hessenberg: general matrix → upper Hessenberg, with the
  transform accumulated into an identity-initialized ``vectors``.

Inner loops are expressed as NumPy slice operations.
"""
import math

import numpy as np


def tridiagonalize(vectors: np.ndarray, d: np.ndarray, e: np.ndarray) -> None:
    """Reduce a symmetric matrix to tridiagonal form in place.

    Columns are processed from the last to the second. Each column is
    scaled by the sum of absolute values of its leading part to avoid
    under/overflow before the Householder vector is built.

    Args:
        vectors: On entry, a copy of the symmetric matrix (n x n).
            On exit, the orthogonal matrix Q with Qᵀ·A·Q tridiagonal.
        d: Length-n buffer. On exit, the diagonal of the tridiagonal form.
        e: Length-n buffer. On exit, e[i] holds the sub-diagonal element
            between rows i-1 and i; e[0] is zero.
    """
    n = vectors.shape[0]
    d[:] = vectors[n - 1, :]

    for i in range(n - 1, 0, -1):
        scale = float(np.abs(d[:i]).sum())
        h = 0.0
        if scale == 0.0:
            # Column already reduced.
            e[i] = d[i - 1]
            d[:i] = vectors[i - 1, :i]
            vectors[i, :i] = 0.0
            vectors[:i, i] = 0.0
        else:
            d[:i] /= scale
            h = float(d[:i] @ d[:i])
            f = d[i - 1]
            g = math.sqrt(h)
            if f > 0:
                g = -g
            e[i] = scale * g
            h -= f * g
            d[i - 1] = f - g
            e[:i] = 0.0

            # Similarity transform of the trailing block.
            for j in range(i):
                f = d[j]
                vectors[j, i] = f
                col = vectors[j + 1:i, j]
                g = e[j] + vectors[j, j] * f + float(col @ d[j + 1:i])
                e[j + 1:i] += col * f
                e[j] = g

            e[:i] /= h
            f = float(e[:i] @ d[:i])
            hh = f / (h + h)
            e[:i] -= hh * d[:i]

            # Rank-2 update.
            for j in range(i):
                f = d[j]
                g = e[j]
                vectors[j:i, j] -= f * e[j:i] + g * d[j:i]
                d[j] = vectors[i - 1, j]
                vectors[i, j] = 0.0
        d[i] = h

    # Accumulate the reflections.
    for i in range(n - 1):
        vectors[n - 1, i] = vectors[i, i]
        vectors[i, i] = 1.0
        h = d[i + 1]
        if h != 0.0:
            u = vectors[:i + 1, i + 1]
            d[:i + 1] = u / h
            g = u @ vectors[:i + 1, :i + 1]
            vectors[:i + 1, :i + 1] -= np.outer(d[:i + 1], g)
        vectors[:i + 1, i + 1] = 0.0

    d[:] = vectors[n - 1, :]
    vectors[n - 1, :] = 0.0
    vectors[n - 1, n - 1] = 1.0
    e[0] = 0.0


def reduce_to_hessenberg(
    vectors: np.ndarray,
    hess: np.ndarray,
    ort: np.ndarray,
) -> None:
    """Reduce a general matrix to upper Hessenberg form in place.

    Args:
        vectors: Identity matrix on entry; accumulated orthogonal
            transform V on exit, with Vᵀ·A·V = H.
        hess: Copy of the matrix on entry; Hessenberg form H on exit.
            Entries below the first sub-diagonal are zeroed.
        ort: Length-n scratch buffer for the Householder vectors.
    """
    n = hess.shape[0]
    high = n - 1

    for m in range(1, high):
        scale = float(np.abs(hess[m:, m - 1]).sum())
        if scale == 0.0:
            continue

        ort[m:] = hess[m:, m - 1] / scale
        h = float(ort[m:] @ ort[m:])
        g = math.sqrt(h)
        if ort[m] > 0:
            g = -g
        h -= ort[m] * g
        ort[m] -= g

        u = ort[m:]
        # Row update: H = (I - u·uᵀ/h)·H
        f = (u @ hess[m:, m:]) / h
        hess[m:, m:] -= np.outer(u, f)
        # Column update: H = H·(I - u·uᵀ/h)
        f = (hess[:, m:] @ u) / h
        hess[:, m:] -= np.outer(f, u)

        ort[m] *= scale
        hess[m, m - 1] = scale * g

    # Accumulate the reflections, last to first.
    for m in range(high - 1, 0, -1):
        if hess[m, m - 1] == 0.0:
            continue
        ort[m + 1:] = hess[m + 1:, m - 1]
        u = ort[m:]
        # Double division avoids possible underflow.
        g = (u @ vectors[m:, m:]) / ort[m] / hess[m, m - 1]
        vectors[m:, m:] += np.outer(u, g)

    if n > 2:
        hess[np.tril_indices(n, -2)] = 0.0
