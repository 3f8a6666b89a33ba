"""Shared pytest fixtures for benchmarks."""

import numpy as np
import pytest

from nutricluster import Point


@pytest.fixture(scope="session")
def synthetic_points() -> list[Point]:
    """1000 random points with 6 nutrient-like features."""
    rng = np.random.default_rng(42)
    data = rng.gamma(shape=2.0, scale=10.0, size=(1000, 6))
    return [Point(id=index, features=row) for index, row in enumerate(data)]
