# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/tolerance.py."""
import math

import pytest

from realeig.domain.tolerance import (
    DEFAULT_DOUBLE_ACCURACY,
    DOUBLE_PRECISION,
    MACHINE_EPSILON,
    almost_zero,
)


class TestConstants:
    def test_values(self):
        assert DOUBLE_PRECISION == 2.0 ** -53
        assert MACHINE_EPSILON == 2.0 * DOUBLE_PRECISION
        assert abs(DEFAULT_DOUBLE_ACCURACY - 1.1102230246251566e-15) < 1e-30

    def test_machine_epsilon_is_float_spacing(self):
        assert 1.0 + MACHINE_EPSILON != 1.0
        assert 1.0 + MACHINE_EPSILON / 2.0 == 1.0


class TestAlmostZero:
    def test_zero(self):
        assert almost_zero(0.0)
        assert almost_zero(complex(0.0, 0.0))

    def test_tiny_real_and_complex(self):
        assert almost_zero(1e-9)
        assert almost_zero(complex(1e-9, -1e-9))

    def test_threshold_is_on_squared_norm(self):
        # |z|^2 just above and below 10 * 2^-53
        edge = math.sqrt(DEFAULT_DOUBLE_ACCURACY)
        assert almost_zero(edge * 0.99)
        assert not almost_zero(edge * 1.01)

    @pytest.mark.parametrize("value", [1.0, -1e-6, complex(0.0, 1e-6)])
    def test_not_zero(self, value):
        assert not almost_zero(value)

    @pytest.mark.parametrize("value", [
        float("inf"), float("-inf"), float("nan"), complex(float("nan"), 0.0),
    ])
    def test_non_finite_never_zero(self, value):
        assert not almost_zero(value)
