"""Shared pytest fixtures for unit tests."""

import numpy as np
import pytest

from kalman_algebra import Matrix


@pytest.fixture
def cv_system():
    """Constant-velocity system observing position only."""
    return {
        'x0': Matrix.vector([0.0, 0.0]),
        'P0': Matrix.from_rows([[1000.0, 0.0], [0.0, 1000.0]]),
        'F': Matrix.from_rows([[1.0, 1.0], [0.0, 1.0]]),
        'B': Matrix.identity(2),
        'u': Matrix.zero_vector(2),
        'Q': Matrix.zeros(2, 2),
        'H': Matrix.from_rows([[1.0, 0.0]]),
        'R': Matrix.from_rows([[1.0]]),
    }


@pytest.fixture
def well_conditioned(rng):
    """Factory for random, diagonally dominant square matrices."""
    def make(n):
        A = rng.standard_normal((n, n)) + n * np.eye(n)
        return Matrix.from_numpy(A)
    return make

