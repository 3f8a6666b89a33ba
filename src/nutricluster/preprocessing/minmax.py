"""Min-max feature normalization.

Each feature dimension is rescaled independently from its observed
``[min, max]`` range onto ``[0, 1]`` so that no nutrient dominates distance
calculations just because of its unit. A dimension where every value is the
same carries no information and is set to ``0.5``.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import numpy.typing as npt

from nutricluster.exceptions import ClusterNotFittedError, InvalidArgumentError
from nutricluster.models import Point
from nutricluster.models.point import PayloadT
from nutricluster.utils import feature_matrix

logger = logging.getLogger(__name__)

DEGENERATE_VALUE = 0.5


def _scale(
    features: np.ndarray, data_min: np.ndarray, data_max: np.ndarray
) -> np.ndarray:
    with np.errstate(over="ignore"):
        span = data_max - data_min
    overflow = np.isinf(span) & np.isfinite(data_min) & np.isfinite(data_max)
    if np.any(overflow):
        # Halving is exact and keeps the widest finite range representable
        half = np.where(overflow, 0.5, 1.0)
        features = features * half
        data_min = data_min * half
        data_max = data_max * half
        span = data_max - data_min
    degenerate = span == 0
    scaled = (features - data_min) / np.where(degenerate, 1.0, span)
    scaled[:, degenerate] = DEGENERATE_VALUE
    return scaled


def minmax_scale(features: npt.ArrayLike) -> np.ndarray:
    """Min-max scale the columns of a 2D array onto ``[0, 1]``.

    Args:
        features: Array of shape (n_samples, n_features)

    Returns:
        New array of the same shape; constant columns become 0.5
    """
    matrix = np.asarray(features, dtype=np.float64)
    if matrix.size == 0:
        return matrix.copy()
    return _scale(matrix, matrix.min(axis=0), matrix.max(axis=0))


def normalize(points: Sequence[Point[PayloadT]]) -> list[Point[PayloadT]]:
    """Return new points whose features are min-max scaled per dimension.

    Identifiers, names and payloads are preserved and the input is left
    untouched. An empty collection yields an empty list.

    Raises:
        InvalidArgumentError: If the points have inconsistent dimensionality
    """
    if len(points) == 0:
        return []

    scaled = minmax_scale(feature_matrix(points))
    return [point.with_features(row) for point, row in zip(points, scaled)]


class MinMaxNormalizer:
    """Min-max normalizer that remembers the fitted range.

    Lets new items be projected with the range learned from a reference
    collection. Values outside that range are not clipped.

    Example:
        >>> normalizer = MinMaxNormalizer()
        >>> scaled = normalizer.fit_transform(features)
        >>> new_scaled = normalizer.transform(new_features)
    """

    def __init__(self) -> None:
        self.data_min_: np.ndarray | None = None
        self.data_max_: np.ndarray | None = None

    def fit(self, features: npt.ArrayLike) -> "MinMaxNormalizer":
        """Learn per-dimension minimum and maximum.

        Args:
            features: Input features of shape (n_samples, n_features)

        Returns:
            Self
        """
        matrix = np.asarray(features, dtype=np.float64)
        if matrix.ndim != 2 or matrix.shape[0] == 0:
            raise InvalidArgumentError(
                f"Expected a non-empty 2D array, got shape {matrix.shape}"
            )
        self.data_min_ = matrix.min(axis=0)
        self.data_max_ = matrix.max(axis=0)

        n_degenerate = int(np.sum(self.data_min_ == self.data_max_))
        if n_degenerate:
            logger.debug(
                f"{n_degenerate} of {matrix.shape[1]} dimensions are constant, "
                f"mapping them to {DEGENERATE_VALUE}"
            )
        return self

    def transform(self, features: npt.ArrayLike) -> np.ndarray:
        """Scale features with the fitted range.

        Args:
            features: Input features of shape (n_samples, n_features)

        Returns:
            Scaled features of the same shape
        """
        if self.data_min_ is None or self.data_max_ is None:
            raise ClusterNotFittedError(
                "Normalizer must be fitted before transform. Call fit() first."
            )
        matrix = np.asarray(features, dtype=np.float64)
        if matrix.ndim != 2 or matrix.shape[1] != self.data_min_.shape[0]:
            raise InvalidArgumentError(
                f"Expected shape (n_samples, {self.data_min_.shape[0]}), "
                f"got {matrix.shape}"
            )
        return _scale(matrix, self.data_min_, self.data_max_)

    def fit_transform(self, features: npt.ArrayLike) -> np.ndarray:
        """Fit the normalizer and scale the same features."""
        return self.fit(features).transform(features)

    def __repr__(self) -> str:
        fitted = self.data_min_ is not None
        return f"MinMaxNormalizer(fitted={fitted})"
