"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from zetaml.types import Matrix, identity_matrix, vec3


@pytest.fixture
def sample_vector():
    """Fixture providing a 3D vector."""
    return vec3(1.0, 2.0, 3.0)


@pytest.fixture
def sample_matrix():
    """Fixture providing a non-square 2x3 matrix."""
    return Matrix(np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))


@pytest.fixture
def identity4():
    """Fixture providing a 4x4 identity matrix."""
    return identity_matrix(4, 4)


@pytest.fixture
def non_transform_matrix():
    """Fixture providing a 3x3 matrix, which transforms must reject."""
    return Matrix(np.arange(9, dtype=np.float64).reshape(3, 3))

