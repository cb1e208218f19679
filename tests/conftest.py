"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vectors(rng):
    """Three random 5-dimensional vectors."""
    return tuple(Vector(rng.standard_normal(5)) for _ in range(3))


@pytest.fixture
def random_square(rng):
    """Random 4x4 matrix (almost surely non-singular)."""
    return Matrix.from_array(rng.standard_normal((4, 4)))


@pytest.fixture
def small_pair():
    """The 2x2 pair used throughout the multiplication scenarios."""
    A = Matrix([[1, 2], [3, 4]])
    B = Matrix([[5, 6], [7, 8]])
    return A, B
