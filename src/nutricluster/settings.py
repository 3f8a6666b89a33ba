"""Environment-driven defaults for clustering runs."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nutricluster.models import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    ClusteringConfig,
)


class NutriclusterSettings(BaseSettings):
    """Clustering defaults read from ``NUTRICLUSTER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NUTRICLUSTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_iterations: int = Field(
        default=DEFAULT_MAX_ITERATIONS,
        gt=0,
        description="Iteration cap for K-means runs",
    )
    tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        gt=0.0,
        description="Centroid shift below which a run counts as converged",
    )
    random_state: Optional[int] = Field(
        default=None,
        description="Seed for centroid initialization (unset for fresh entropy)",
    )

    def to_clustering_config(self) -> ClusteringConfig:
        """Build a ClusteringConfig from these settings."""
        return ClusteringConfig(
            max_iterations=self.max_iterations,
            tolerance=self.tolerance,
            random_state=self.random_state,
        )
