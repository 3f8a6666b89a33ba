"""Configuration models for the clustering engine."""

from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_MAX_ITERATIONS = 100
DEFAULT_TOLERANCE = 0.001


class ClusteringConfig(BaseModel):
    """Configuration for a K-means run.

    Attributes:
        max_iterations: Iteration cap for the refinement loop
        tolerance: Centroid shift below which a run is considered converged
        random_state: Seed for centroid initialization (None for fresh entropy)
    """

    max_iterations: int = Field(
        default=DEFAULT_MAX_ITERATIONS, gt=0, description="K-means iteration cap"
    )
    tolerance: float = Field(
        default=DEFAULT_TOLERANCE, gt=0.0, description="Convergence threshold"
    )
    random_state: Optional[int] = Field(
        default=None, description="Random seed for initialization"
    )


__all__ = [
    "ClusteringConfig",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_TOLERANCE",
]
