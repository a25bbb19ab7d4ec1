"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spd_matrix(rng):
    """Well-conditioned 5x5 symmetric positive definite matrix (X'WX shape)."""
    X = rng.standard_normal((40, 5))
    w = rng.uniform(0.5, 1.5, size=40)
    return X.T @ (w[:, None] * X)


@pytest.fixture
def singular_matrix():
    """2x2 matrix with a zero row."""
    return np.array([[1.0, 2.0], [0.0, 0.0]])


@pytest.fixture
def collinear_normal_matrix(rng):
    """X'X for a design with a duplicated column (exactly singular)."""
    x1 = rng.standard_normal(30)
    x2 = rng.standard_normal(30)
    X = np.column_stack([x1, x2, x1])
    return X.T @ X
