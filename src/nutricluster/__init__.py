"""nutricluster - group food items by nutritional profile.

This package provides min-max feature normalization and a K-means
partitioner that groups labeled feature vectors into a caller-chosen number
of clusters. Naming or displaying the resulting groups is left to the caller.

Usage:
    >>> from nutricluster import Point, cluster, normalize
    >>>
    >>> foods = [
    ...     Point(id="apple", features=(52, 0.3, 14.0)),
    ...     Point(id="salmon", features=(208, 20.0, 0.0)),
    ...     Point(id="rice", features=(130, 2.7, 28.0)),
    ... ]
    >>> groups = cluster(normalize(foods), k=2, random_state=42)
    >>> for group in groups:
    ...     print(group.index, group.ids, group.centroid)
"""

# ============================================================================
# Main API
# ============================================================================

from nutricluster.clustering import (
    ClusterMetrics,
    KMeansClusterer,
    KMeansResult,
    cluster,
    compute_group_metrics,
    run_kmeans,
)
from nutricluster.dataset import points_from_frame, points_from_records
from nutricluster.exceptions import (
    ClusterNotFittedError,
    InvalidArgumentError,
    NutriclusterError,
)
from nutricluster.models import ClusteringConfig, Group, Point
from nutricluster.preprocessing import MinMaxNormalizer, normalize
from nutricluster.settings import NutriclusterSettings

# Submodules
from nutricluster import clustering, preprocessing

# ============================================================================
# Package metadata
# ============================================================================

__version__ = "0.1.0"

__all__ = [
    # Main API
    "cluster",
    "normalize",
    "run_kmeans",
    # Models
    "Point",
    "Group",
    "KMeansResult",
    "ClusteringConfig",
    "NutriclusterSettings",
    # Estimators
    "KMeansClusterer",
    "MinMaxNormalizer",
    # Metrics
    "ClusterMetrics",
    "compute_group_metrics",
    # Dataset helpers
    "points_from_frame",
    "points_from_records",
    # Exceptions
    "NutriclusterError",
    "InvalidArgumentError",
    "ClusterNotFittedError",
    # Modules
    "clustering",
    "preprocessing",
]
