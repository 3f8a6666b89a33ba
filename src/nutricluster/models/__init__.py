"""Data models for nutricluster."""

from nutricluster.models.config import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    ClusteringConfig,
)
from nutricluster.models.point import Group, Point

__all__ = [
    "ClusteringConfig",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_TOLERANCE",
    "Group",
    "Point",
]
