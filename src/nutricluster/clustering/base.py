"""Estimator surface shared by array-based clusterers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np
import numpy.typing as npt


@runtime_checkable
class Clusterer(Protocol):
    """What callers may rely on from a fitted clusterer.

    fit() learns centroids from a feature matrix of shape
    (n_samples, n_features); predict() maps new rows to the index of their
    nearest centroid. Fitted attributes are only defined after fit().
    """

    def fit(self, features: npt.ArrayLike) -> "Clusterer": ...

    def predict(self, features: npt.ArrayLike) -> np.ndarray: ...

    def fit_predict(self, features: npt.ArrayLike) -> np.ndarray:
        """Fit, then return the labels assigned during the fit."""
        ...

    @property
    def cluster_centers_(self) -> np.ndarray:
        """Centroids, shape (n_clusters_, n_features)."""
        ...

    @property
    def labels_(self) -> np.ndarray:
        """Group index of every training row."""
        ...

    @property
    def n_clusters_(self) -> int:
        """Cluster count after clamping to the number of training rows."""
        ...

    @property
    def inertia_(self) -> float:
        """Sum of squared distances from training rows to their centroid."""
        ...

    @property
    def n_iter_(self) -> int: ...

    @property
    def converged_(self) -> bool:
        """False when the iteration cap ended the run."""
        ...
