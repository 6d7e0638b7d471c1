"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymtx.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def rect_4x2():
    """4x2 matrix shared by the reduction and transpose tests."""
    data = np.array([2.0, 3.0,
                     1.0, 4.0,
                     4.0, 3.0,
                     3.0, 4.0])
    return Matrix(4, 2, data)


@pytest.fixture
def diag_3x3():
    """diag(1.0, 0.5, 0.1)."""
    data = np.array([1.0, 0.0, 0.0,
                     0.0, 0.5, 0.0,
                     0.0, 0.0, 0.1])
    return Matrix(3, 3, data)


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant 4x4 matrix (safely invertible)."""
    values = rng.standard_normal((4, 4)) + 8.0 * np.eye(4)
    return Matrix.from_rows(values)


@pytest.fixture
def singular_3x3():
    """Rank-2 matrix: row 2 = row 0 + row 1."""
    return Matrix.from_rows([[1.0, 2.0, 3.0],
                             [4.0, 5.0, 6.0],
                             [5.0, 7.0, 9.0]])
