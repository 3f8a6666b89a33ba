"""K-Means clusterer over feature matrices."""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from nutricluster.clustering.distance import assign_points
from nutricluster.clustering.engine import (
    LloydResult,
    RandomState,
    initial_centroids,
    lloyd,
    resolve_random_state,
)
from nutricluster.exceptions import ClusterNotFittedError, InvalidArgumentError
from nutricluster.models import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    ClusteringConfig,
)
from nutricluster.utils import check_positive_int

logger = logging.getLogger(__name__)


def _as_feature_matrix(features: npt.ArrayLike) -> np.ndarray:
    array = np.asarray(features, dtype=np.float64)
    if array.ndim != 2:
        raise InvalidArgumentError(
            f"Expected a 2D array of shape (n_samples, n_features), got {array.ndim}D"
        )
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise InvalidArgumentError(
            f"Cannot fit on an empty feature matrix of shape {array.shape}"
        )
    return array


class KMeansClusterer:
    """K-Means clustering estimator.

    Array counterpart of cluster(): same initialization, tie-break and
    convergence rules, exposed through an sklearn-like interface.

    Example:
        >>> clusterer = KMeansClusterer(n_clusters=4, random_state=42)
        >>> clusterer.fit(features)
        >>> labels = clusterer.predict(new_features)
    """

    def __init__(
        self,
        n_clusters: int = 8,
        max_iter: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
        random_state: RandomState = None,
    ) -> None:
        """Initialize K-Means clusterer.

        Args:
            n_clusters: Number of clusters, clamped to n_samples at fit time
                (default: 8)
            max_iter: Maximum iterations per run (default: 100)
            tolerance: Convergence threshold on centroid shift (default: 0.001)
            random_state: Seed or Generator for initialization (default: None)
        """
        self.n_clusters = check_positive_int(n_clusters, "n_clusters")
        self.max_iter = check_positive_int(max_iter, "max_iter")
        self.tolerance = tolerance
        self.random_state = random_state
        self._result: LloydResult | None = None

    @classmethod
    def from_config(
        cls, n_clusters: int, config: ClusteringConfig
    ) -> "KMeansClusterer":
        """Create a clusterer from a ClusteringConfig."""
        return cls(
            n_clusters=n_clusters,
            max_iter=config.max_iterations,
            tolerance=config.tolerance,
            random_state=config.random_state,
        )

    def fit(self, features: npt.ArrayLike) -> "KMeansClusterer":
        """Fit the clusterer on a feature matrix.

        Args:
            features: Input features of shape (n_samples, n_features)

        Returns:
            Self
        """
        matrix = _as_feature_matrix(features)
        n_clusters = min(self.n_clusters, matrix.shape[0])
        if n_clusters < self.n_clusters:
            logger.debug(
                f"Clamping n_clusters from {self.n_clusters} to {n_clusters}"
            )

        rng = resolve_random_state(self.random_state)
        self._result = lloyd(
            matrix,
            initial_centroids(matrix, n_clusters, rng),
            max_iterations=self.max_iter,
            tolerance=self.tolerance,
        )
        return self

    def predict(self, features: npt.ArrayLike) -> np.ndarray:
        """Predict cluster assignments for features.

        Args:
            features: Input features of shape (n_samples, n_features)

        Returns:
            Cluster assignments of shape (n_samples,)
        """
        if self._result is None:
            raise ClusterNotFittedError(
                "Clusterer must be fitted before predict. Call fit() first."
            )
        return assign_points(_as_feature_matrix(features), self._result.state.centroids)

    def fit_predict(self, features: npt.ArrayLike) -> np.ndarray:
        """Fit the clusterer and return the labels assigned during fit."""
        self.fit(features)
        return self.labels_

    def _fitted(self) -> LloydResult:
        if self._result is None:
            raise ClusterNotFittedError("Clusterer must be fitted first.")
        return self._result

    @property
    def cluster_centers_(self) -> np.ndarray:
        """Cluster centers of shape (n_clusters, n_features)."""
        return self._fitted().state.centroids

    @property
    def labels_(self) -> np.ndarray:
        """Labels assigned during fit() of shape (n_samples,)."""
        return self._fitted().state.labels

    @property
    def n_clusters_(self) -> int:
        """Number of clusters found (after clamping, once fitted)."""
        if self._result is None:
            return self.n_clusters
        return self._result.state.centroids.shape[0]

    @property
    def inertia_(self) -> float:
        """Sum of squared distances to closest centroid."""
        return self._fitted().inertia

    @property
    def n_iter_(self) -> int:
        """Number of iterations run."""
        return self._fitted().n_iter

    @property
    def converged_(self) -> bool:
        """Whether the last fit converged before the iteration cap."""
        return self._fitted().converged

    def __repr__(self) -> str:
        return f"KMeansClusterer(n_clusters={self.n_clusters})"
