"""Input validation helpers shared by the normalizer and the partitioner."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from nutricluster.exceptions import InvalidArgumentError
from nutricluster.models import Point


def feature_matrix(points: Sequence[Point]) -> np.ndarray:
    """Stack point features into an (n_points, n_features) float64 array.

    Args:
        points: Points that must all share one dimensionality

    Returns:
        Feature matrix, shape (0, 0) for an empty collection

    Raises:
        InvalidArgumentError: If a point has no features or its length differs
            from the first point's
    """
    if len(points) == 0:
        return np.empty((0, 0), dtype=np.float64)

    dimensions = points[0].dimensions
    if dimensions == 0:
        raise InvalidArgumentError("Points must have at least one feature")

    for position, point in enumerate(points):
        if point.dimensions != dimensions:
            raise InvalidArgumentError(
                f"Point {point.id!r} at position {position} has "
                f"{point.dimensions} features, expected {dimensions}"
            )

    return np.array([point.features for point in points], dtype=np.float64)


def check_positive_int(value: object, name: str) -> int:
    """Return ``value`` as int if it is a positive integer, otherwise raise."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(
            f"{name} must be a positive integer, got {value!r}"
        )
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value}")
    return int(value)
