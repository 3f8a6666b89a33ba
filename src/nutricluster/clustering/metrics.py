"""Clustering quality metrics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from sklearn.metrics import silhouette_score as sk_silhouette_score

from nutricluster.models import Group


@dataclass(frozen=True)
class ClusterMetrics:
    """Overall clustering metrics.

    Attributes:
        silhouette_score: Silhouette score (-1 to 1, higher is better)
        n_clusters: Number of clusters, empty ones included
        n_samples: Total number of samples
        cluster_sizes: Size of each cluster, by cluster index
        inertia: Sum of squared distances to closest centroid (if known)
    """

    silhouette_score: float
    n_clusters: int
    n_samples: int
    cluster_sizes: list[int]
    inertia: float | None = None

    @property
    def min_cluster_size(self) -> int:
        """Minimum cluster size."""
        return min(self.cluster_sizes) if self.cluster_sizes else 0

    @property
    def max_cluster_size(self) -> int:
        """Maximum cluster size."""
        return max(self.cluster_sizes) if self.cluster_sizes else 0

    @property
    def avg_cluster_size(self) -> float:
        """Average cluster size."""
        if not self.cluster_sizes:
            return 0.0
        return sum(self.cluster_sizes) / len(self.cluster_sizes)

    @property
    def n_empty_clusters(self) -> int:
        return sum(1 for size in self.cluster_sizes if size == 0)

    def __repr__(self) -> str:
        return (
            f"ClusterMetrics(n_clusters={self.n_clusters}, "
            f"silhouette={self.silhouette_score:.3f}, "
            f"sizes={self.min_cluster_size}-{self.max_cluster_size})"
        )


def compute_cluster_metrics(
    features: np.ndarray,
    labels: np.ndarray,
    n_clusters: int | None = None,
    inertia: float | None = None,
) -> ClusterMetrics:
    """Compute clustering metrics from a feature matrix and labels.

    Args:
        features: Input features of shape (n_samples, n_features)
        labels: Cluster labels of shape (n_samples,)
        n_clusters: Total cluster count, so that empty clusters are reported
            (default: highest label + 1)
        inertia: Optional inertia value from the clustering run

    Returns:
        ClusterMetrics object with computed metrics
    """
    labels = np.asarray(labels)
    n_samples = len(labels)
    if n_clusters is None:
        n_clusters = int(labels.max()) + 1 if n_samples else 0

    cluster_sizes = [int(np.sum(labels == index)) for index in range(n_clusters)]

    # sklearn needs 2 <= n_labels <= n_samples - 1
    n_occupied = len(np.unique(labels))
    if 2 <= n_occupied <= n_samples - 1:
        silhouette = float(sk_silhouette_score(features, labels))
    else:
        silhouette = 0.0

    return ClusterMetrics(
        silhouette_score=silhouette,
        n_clusters=n_clusters,
        n_samples=n_samples,
        cluster_sizes=cluster_sizes,
        inertia=inertia,
    )


def compute_group_metrics(
    groups: Sequence[Group], inertia: float | None = None
) -> ClusterMetrics:
    """Compute clustering metrics from the groups returned by cluster()."""
    members = [(group.index, point) for group in groups for point in group.points]
    if not members:
        return ClusterMetrics(
            silhouette_score=0.0,
            n_clusters=len(groups),
            n_samples=0,
            cluster_sizes=[0] * len(groups),
            inertia=inertia,
        )

    features = np.array([point.features for _, point in members], dtype=np.float64)
    labels = np.array([index for index, _ in members], dtype=np.intp)
    return compute_cluster_metrics(
        features, labels, n_clusters=len(groups), inertia=inertia
    )
