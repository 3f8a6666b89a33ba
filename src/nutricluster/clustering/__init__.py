"""Clustering components for nutricluster."""

from nutricluster.clustering.base import Clusterer
from nutricluster.clustering.distance import (
    centroids_converged,
    compute_centroid,
    euclidean_distance,
    find_closest_centroid,
)
from nutricluster.clustering.engine import KMeansResult, cluster, run_kmeans
from nutricluster.clustering.kmeans import KMeansClusterer
from nutricluster.clustering.metrics import (
    ClusterMetrics,
    compute_cluster_metrics,
    compute_group_metrics,
)

__all__ = [
    # Protocol
    "Clusterer",
    # Engine
    "cluster",
    "run_kmeans",
    "KMeansResult",
    "KMeansClusterer",
    # Distance helpers
    "centroids_converged",
    "compute_centroid",
    "euclidean_distance",
    "find_closest_centroid",
    # Metrics
    "ClusterMetrics",
    "compute_cluster_metrics",
    "compute_group_metrics",
]
