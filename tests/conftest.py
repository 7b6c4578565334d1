"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pivotmath import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vector(rng):
    """Factory for random vectors of a given length."""
    def make(length):
        return Vector(rng.standard_normal(length))
    return make


@pytest.fixture
def random_matrix(rng):
    """Factory for random matrices of a given shape."""
    def make(rows, columns):
        return Matrix.from_rows(rng.standard_normal((rows, columns)))
    return make


@pytest.fixture
def square():
    """The 2x2 matrix [[1, 2], [3, 4]]."""
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def rect():
    """The 2x3 matrix [[1, 2, 3], [4, 5, 6]]."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
