#!/usr/bin/env python3
# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Time realeig decompositions against numpy.linalg on random matrices.

Symmetric input is L·Lᵀ for a random lower-triangular L; general input is
a dense random matrix. Both are seeded, so checksums are reproducible.
"""
from __future__ import annotations

import argparse
import time

import numpy as np

from realeig import eigen_decompose, symmetric_eigen_decompose


def _best_of(fn, repeats: int) -> float:
    best = float("inf")
    for _ in range(repeats):
        start = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - start)
    return best


def _random_inputs(order: int, seed: int) -> tuple[np.ndarray, np.ndarray]:
    rng = np.random.default_rng(seed)
    lower = np.tril(rng.uniform(0.0, 1.0, (order, order)))
    return lower @ lower.T, rng.uniform(0.0, 1.0, (order, order))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--order", type=int, default=64, help="Matrix order (default: 64)")
    parser.add_argument("--repeats", type=int, default=5, help="Timed runs per case, best kept")
    parser.add_argument("--seed", type=int, default=12, help="RNG seed")
    args = parser.parse_args()

    sym, general = _random_inputs(args.order, args.seed)

    cases = [
        ("realeig symmetric", lambda: symmetric_eigen_decompose(sym)),
        ("numpy eigh", lambda: np.linalg.eigh(sym)),
        ("realeig general", lambda: eigen_decompose(general, is_symmetric=False)),
        ("numpy eig", lambda: np.linalg.eig(general)),
    ]
    print(f"order={args.order} repeats={args.repeats} seed={args.seed}")
    for label, fn in cases:
        print(f"  {label:<20s} {_best_of(fn, args.repeats) * 1e3:10.3f} ms")

    evd = eigen_decompose(general, is_symmetric=False)
    print(f"Asymmetric checksum: {evd.vectors.sum():.12g}")
    evd = symmetric_eigen_decompose(sym)
    print(f"Symmetric checksum: {evd.vectors.sum():.12g}")
    ref = np.linalg.eigvalsh(sym)
    print(f"Max |λ - λ_numpy| (symmetric): {np.max(np.abs(evd.real_values() - ref)):.3e}")


if __name__ == "__main__":
    main()
