"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def integer_matrices(rng):
    """Square integer-valued matrices of size 1..6 (exact for both determinants)."""
    return [
        Matrix.from_rows(rng.integers(-5, 6, size=(n, n)))
        for n in range(1, 7)
        for _ in range(3)
    ]


@pytest.fixture
def well_conditioned_system(rng):
    """Diagonally dominant 5x5 system with known solution."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true
