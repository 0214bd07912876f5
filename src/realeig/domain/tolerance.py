# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Floating point tolerances shared by the eigenvalue solvers."""
import math

# Unit roundoff of IEEE 754 double precision.
DOUBLE_PRECISION = 2.0 ** -53

# 10 * 2^-53 ≈ 1.11e-15
DEFAULT_DOUBLE_ACCURACY = 10.0 * DOUBLE_PRECISION

# Spacing between 1.0 and the next representable double.
MACHINE_EPSILON = 2.0 ** -52


def almost_zero(value: complex) -> bool:
    """True when |value|² falls below DEFAULT_DOUBLE_ACCURACY.

    Infinite or NaN values are never considered zero.
    """
    z = complex(value)
    norm = z.real * z.real + z.imag * z.imag
    if math.isinf(norm) or math.isnan(norm):
        return False
    return norm < DEFAULT_DOUBLE_ACCURACY
