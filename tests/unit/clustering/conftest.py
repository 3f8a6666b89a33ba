"""Fixtures for clustering unit tests."""

import numpy as np
import pytest


@pytest.fixture
def simple_2d_clusters():
    """Generate 3 well-separated 2D clusters (60 samples total)."""
    np.random.seed(42)
    cluster1 = np.random.randn(20, 2) + np.array([0, 0])
    cluster2 = np.random.randn(20, 2) + np.array([10, 10])
    cluster3 = np.random.randn(20, 2) + np.array([20, 0])
    return np.vstack([cluster1, cluster2, cluster3])


@pytest.fixture
def random_3d_points():
    """50 random 3D points wrapped as Points (ids 0..49)."""
    from nutricluster import Point

    rng = np.random.default_rng(7)
    data = rng.uniform(0, 100, size=(50, 3))
    return [Point(id=index, features=row) for index, row in enumerate(data)]


@pytest.fixture
def identical_points():
    """All identical points (edge case)."""
    return np.ones((20, 5))
