"""
Tests for precision constants and is_close.
"""

import numpy as np

from pymatrix.core.precision import DEFAULT_ATOL, DEFAULT_RTOL, EPSILON_64, is_close


class TestConstants:

    def test_epsilon_matches_numpy(self):
        assert EPSILON_64 == np.finfo(np.float64).eps

    def test_tolerances_positive(self):
        assert DEFAULT_RTOL > 0
        assert DEFAULT_ATOL > 0


class TestIsClose:

    def test_equal_values(self):
        assert is_close(1.0, 1.0)

    def test_within_relative_tolerance(self):
        assert is_close(1.0 + 1e-13, 1.0)

    def test_outside_tolerance(self):
        assert not is_close(1.0 + 1e-9, 1.0)

    def test_near_zero_uses_atol(self):
        assert is_close(1e-15, 0.0)
        assert not is_close(1e-13, 0.0)

    def test_elementwise(self):
        result = is_close(np.array([1.0, 2.0]), np.array([1.0, 2.1]))
        np.testing.assert_array_equal(result, [True, False])

    def test_custom_tolerance(self):
        assert is_close(1.05, 1.0, rtol=0.1)
