"""Distance and centroid helpers for Lloyd's algorithm."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from nutricluster.exceptions import InvalidArgumentError


def euclidean_distance(a: npt.ArrayLike, b: npt.ArrayLike) -> float:
    """Plain Euclidean distance between two vectors of equal length."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.ndim != 1 or b.ndim != 1:
        raise InvalidArgumentError(
            f"Expected 1D vectors, got {a.ndim}D and {b.ndim}D"
        )
    if a.size != b.size:
        raise InvalidArgumentError(
            f"Vectors must be of same length, got {a.size} and {b.size}"
        )
    return float(np.sqrt(np.sum((a - b) ** 2)))


def centroid_distances(features: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Distances from every row of ``features`` to every centroid.

    Args:
        features: Array of shape (n_points, n_features)
        centroids: Array of shape (n_clusters, n_features)

    Returns:
        Array of shape (n_points, n_clusters)
    """
    if features.ndim != 2 or centroids.ndim != 2:
        raise InvalidArgumentError(
            f"Expected 2D feature and centroid arrays, got "
            f"{features.ndim}D and {centroids.ndim}D"
        )
    if features.shape[1] != centroids.shape[1]:
        raise InvalidArgumentError(
            f"Feature dimension {features.shape[1]} does not match "
            f"centroid dimension {centroids.shape[1]}"
        )
    diff = features[:, None, :] - centroids[None, :, :]
    return np.sqrt(np.sum(diff**2, axis=2))


def find_closest_centroid(features: npt.ArrayLike, centroids: npt.ArrayLike) -> int:
    """Index of the centroid nearest to a single feature vector.

    Ties go to the lowest index.
    """
    row = np.asarray(features, dtype=np.float64)
    if row.ndim != 1:
        raise InvalidArgumentError(f"Expected a 1D feature vector, got {row.ndim}D")
    centroids = np.asarray(centroids, dtype=np.float64)
    row = row.reshape(1, -1)
    return int(np.argmin(centroid_distances(row, centroids)[0]))


def assign_points(features: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Label each row with its nearest centroid, lowest index winning ties."""
    # argmin returns the first occurrence of the minimum
    return np.argmin(centroid_distances(features, centroids), axis=1)


def compute_centroid(vectors: np.ndarray, dimensions: int) -> np.ndarray:
    """Component-wise mean of ``vectors``, or the zero vector if there are none."""
    if len(vectors) == 0:
        return np.zeros(dimensions, dtype=np.float64)
    return np.asarray(vectors, dtype=np.float64).mean(axis=0)


def update_centroids(
    features: np.ndarray, labels: np.ndarray, n_clusters: int
) -> np.ndarray:
    """Recompute every centroid from the current assignment."""
    dimensions = features.shape[1]
    return np.vstack(
        [
            compute_centroid(features[labels == index], dimensions)
            for index in range(n_clusters)
        ]
    )


def centroids_converged(
    old_centroids: np.ndarray, new_centroids: np.ndarray, threshold: float = 0.001
) -> bool:
    """True when every centroid moved strictly less than ``threshold``."""
    if old_centroids.shape != new_centroids.shape:
        raise InvalidArgumentError(
            f"Centroid arrays differ in shape: {old_centroids.shape} "
            f"and {new_centroids.shape}"
        )
    shifts = np.sqrt(np.sum((old_centroids - new_centroids) ** 2, axis=1))
    return bool(np.all(shifts < threshold))


__all__ = [
    "assign_points",
    "centroid_distances",
    "centroids_converged",
    "compute_centroid",
    "euclidean_distance",
    "find_closest_centroid",
    "update_centroids",
]
