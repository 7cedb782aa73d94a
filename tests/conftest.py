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
def square3():
    """3x3 integer matrix with determinant -3."""
    return Matrix([
        [3, 3, 3],
        [4, 2, 1],
        [5, 6, 7],
    ])


@pytest.fixture
def invertible3():
    """3x3 integer matrix with determinant 2 and a known inverse."""
    return Matrix([
        [3, 4, 2],
        [4, 5, 5],
        [1, 1, 1],
    ])


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant 4x4 matrix (safely invertible)."""
    return Matrix(rng.standard_normal((4, 4)) + 8.0 * np.eye(4))
