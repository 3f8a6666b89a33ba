"""K-means partitioning of labeled points.

Implements Lloyd's algorithm: random initial centroids drawn from the input,
then alternating assignment and centroid update until the centroids stop
moving or the iteration cap is reached.

Example:
    >>> groups = cluster(points, k=3, random_state=42)
    >>> [group.ids for group in groups]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Sequence, Union

import numpy as np

from nutricluster.clustering.distance import (
    assign_points,
    centroids_converged,
    update_centroids,
)
from nutricluster.exceptions import InvalidArgumentError
from nutricluster.models import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, Group, Point
from nutricluster.models.point import PayloadT
from nutricluster.utils import check_positive_int, feature_matrix

logger = logging.getLogger(__name__)

RandomState = Union[None, int, np.random.Generator]


@dataclass(frozen=True)
class IterationState:
    """Working state of one refinement step.

    Attributes:
        centroids: Centroids after the update step, shape (k, n_features)
        labels: Assignment that produced those centroids, shape (n_points,)
    """

    centroids: np.ndarray
    labels: np.ndarray


@dataclass(frozen=True)
class LloydResult:
    """Outcome of the refinement loop on a feature matrix."""

    state: IterationState
    n_iter: int
    converged: bool
    inertia: float


@dataclass(frozen=True)
class KMeansResult(Generic[PayloadT]):
    """Groups produced by a clustering run plus run diagnostics.

    Attributes:
        groups: Exactly k groups partitioning the input
        labels: Group index of each input point, in input order
        n_iter: Number of iterations executed
        converged: Whether the run stopped on the tolerance rather than the cap
        inertia: Sum of squared distances from points to their group centroid
    """

    groups: list[Group[PayloadT]]
    labels: np.ndarray = field(repr=False)
    n_iter: int
    converged: bool
    inertia: float

    @property
    def n_clusters(self) -> int:
        return len(self.groups)

    @property
    def centroids(self) -> np.ndarray:
        """Centroids stacked into shape (k, n_features)."""
        return np.vstack([group.centroid for group in self.groups])


def resolve_random_state(random_state: RandomState) -> np.random.Generator:
    """Turn a seed, a Generator or None into a Generator."""
    if isinstance(random_state, np.random.Generator):
        return random_state
    if random_state is None or isinstance(random_state, (int, np.integer)):
        return np.random.default_rng(random_state)
    raise InvalidArgumentError(
        f"random_state must be None, an int or a numpy Generator, got {random_state!r}"
    )


def initial_centroids(
    features: np.ndarray, n_clusters: int, rng: np.random.Generator
) -> np.ndarray:
    """Pick ``n_clusters`` distinct rows uniformly at random as starting centroids."""
    indices = rng.choice(features.shape[0], size=n_clusters, replace=False)
    return features[indices].copy()


def lloyd(
    features: np.ndarray,
    centroids: np.ndarray,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> LloydResult:
    """Refine ``centroids`` over ``features`` until convergence or the cap.

    Args:
        features: Array of shape (n_points, n_features)
        centroids: Starting centroids of shape (k, n_features)
        max_iterations: Maximum number of assignment/update rounds
        tolerance: Convergence threshold on per-centroid Euclidean shift

    Returns:
        LloydResult with the final state. Given fixed starting centroids the
        result is deterministic.
    """
    n_clusters = centroids.shape[0]
    state = IterationState(
        centroids=np.asarray(centroids, dtype=np.float64).copy(),
        labels=np.zeros(features.shape[0], dtype=np.intp),
    )
    iteration = 0
    converged = False

    while not converged and iteration < max_iterations:
        labels = assign_points(features, state.centroids)
        new_centroids = update_centroids(features, labels, n_clusters)

        # No previous update to compare against on the first pass
        if iteration > 0:
            converged = centroids_converged(state.centroids, new_centroids, tolerance)

        state = IterationState(centroids=new_centroids, labels=labels)
        iteration += 1

    if not converged:
        logger.info(
            f"K-means stopped at iteration cap ({max_iterations}) without converging"
        )

    residuals = features - state.centroids[state.labels]
    inertia = float(np.sum(residuals**2))
    return LloydResult(
        state=state, n_iter=iteration, converged=converged, inertia=inertia
    )


def run_kmeans(
    points: Sequence[Point[PayloadT]],
    k: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    *,
    random_state: RandomState = None,
    tolerance: float = DEFAULT_TOLERANCE,
) -> KMeansResult[PayloadT]:
    """Partition ``points`` into ``k`` groups and report run diagnostics.

    Args:
        points: Points sharing one dimensionality; finite features only
        k: Target number of groups, clamped to ``len(points)``
        max_iterations: Iteration cap (default 100)
        random_state: Seed or Generator for initialization; None draws fresh
            entropy so repeated calls may return different partitions
        tolerance: Convergence threshold on centroid shift

    Returns:
        KMeansResult whose groups partition the input

    Raises:
        InvalidArgumentError: If k or max_iterations is not a positive integer,
            or the points have inconsistent dimensionality
    """
    k = check_positive_int(k, "k")
    max_iterations = check_positive_int(max_iterations, "max_iterations")
    features = feature_matrix(points)
    rng = resolve_random_state(random_state)

    n_points = len(points)
    if n_points == 0:
        logger.debug("K-means called with no points, returning no groups")
        return KMeansResult(
            groups=[],
            labels=np.empty(0, dtype=np.intp),
            n_iter=0,
            converged=True,
            inertia=0.0,
        )

    if k > n_points:
        logger.debug(f"Clamping k from {k} to {n_points} (number of points)")
        k = n_points

    logger.debug(
        f"Running K-means: k={k}, n_points={n_points}, "
        f"n_features={features.shape[1]}, max_iterations={max_iterations}"
    )

    result = lloyd(
        features,
        initial_centroids(features, k, rng),
        max_iterations=max_iterations,
        tolerance=tolerance,
    )

    labels = result.state.labels
    groups = [
        Group(
            index=index,
            centroid=result.state.centroids[index],
            points=tuple(point for point, label in zip(points, labels) if label == index),
        )
        for index in range(k)
    ]

    logger.info(
        f"K-means finished: k={k}, iterations={result.n_iter}, "
        f"converged={result.converged}, inertia={result.inertia:.4f}"
    )

    return KMeansResult(
        groups=groups,
        labels=labels,
        n_iter=result.n_iter,
        converged=result.converged,
        inertia=result.inertia,
    )


def cluster(
    points: Sequence[Point[PayloadT]],
    k: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    *,
    random_state: RandomState = None,
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[Group[PayloadT]]:
    """Partition ``points`` into ``min(k, len(points))`` groups.

    See run_kmeans() for arguments and errors.
    """
    return run_kmeans(
        points,
        k,
        max_iterations,
        random_state=random_state,
        tolerance=tolerance,
    ).groups


__all__ = [
    "IterationState",
    "KMeansResult",
    "LloydResult",
    "RandomState",
    "cluster",
    "initial_centroids",
    "lloyd",
    "resolve_random_state",
    "run_kmeans",
]
