"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def integer_matrix(rng):
    """Factory for r x c matrices of small random integers (exact arithmetic)."""
    def make(rows, cols):
        return Matrix.from_array(rng.integers(-5, 6, size=(rows, cols)))
    return make


@pytest.fixture
def m3():
    """3x3 reference matrix: det 22, cofactors [[24,5,-4],[-12,3,2],[-2,-5,4]]."""
    return Matrix.from_array([[1, 2, 3], [0, 4, 5], [1, 0, 6]])


@pytest.fixture
def m2():
    """2x2 reference matrix: det -2, inverse [[-2,1],[1.5,-0.5]]."""
    return Matrix.from_array([[1, 2], [3, 4]])
