#!/usr/bin/env python3
"""Walkthrough: symmetric and general eigenvalue decompositions.

Decomposes a symmetric second-difference matrix and a rotation-like
general matrix, checks A·V = V·D for both, and finds the roots of a
cubic through its companion matrix.

Usage:
    python examples/evd_walkthrough.py
"""
import numpy as np

from realeig import eigen_decompose, polynomial_roots
from realeig.domain.linalg import mat_determinant, mat_multiply


def main():
    # --- Step 1: Symmetric input, orthonormal eigenvectors ---
    a = np.array([
        [2.0, -1.0, 0.0, 0.0],
        [-1.0, 2.0, -1.0, 0.0],
        [0.0, -1.0, 2.0, -1.0],
        [0.0, 0.0, -1.0, 2.0],
    ])
    evd = eigen_decompose(a)
    print(f"Symmetric pipeline: {evd.is_symmetric}")
    print(format(evd, ".4f"))
    residual = np.max(np.abs(mat_multiply(a, evd.vectors) - mat_multiply(evd.vectors, evd.d)))
    print(f"  max |A·V - V·D| = {residual:.2e}")
    print(f"  |det| = {evd.determinant():.6f} (LU: {abs(mat_determinant(a)):.6f}), rank = {evd.rank()}")

    # --- Step 2: General input with a conjugate pair ---
    b = np.array([
        [0.0, -2.0, 1.0],
        [2.0, 0.0, 0.5],
        [0.0, 0.0, 3.0],
    ])
    evd = eigen_decompose(b)
    print(f"\nSymmetric pipeline: {evd.is_symmetric}")
    for value in evd.values:
        print(f"  λ = {value.real:+.6f} {value.imag:+.6f}i")
    residual = np.max(np.abs(b @ evd.vectors - evd.vectors @ evd.d))
    print(f"  max |B·V - V·D| = {residual:.2e}")

    # --- Step 3: Polynomial roots via the companion matrix ---
    roots = polynomial_roots([1.0, -6.0, 11.0, -6.0])
    print("\nRoots of x³ - 6x² + 11x - 6:")
    for root in sorted(roots, key=lambda z: z.real):
        print(f"  {root.real:.6f}")


if __name__ == "__main__":
    main()
