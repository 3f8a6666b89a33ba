"""Custom exceptions for the nutricluster engine.

This module defines a small hierarchy of exceptions specific to nutricluster,
so callers can tell a misconfigured call site apart from other failures.
"""

from __future__ import annotations


class NutriclusterError(Exception):
    """Base exception for all nutricluster operations.

    This is the root exception that all other nutricluster exceptions inherit
    from.
    """


class InvalidArgumentError(NutriclusterError, ValueError):
    """Raised when a clustering or normalization call is misconfigured.

    This exception is raised when:
    - The requested cluster count ``k`` is not a positive integer
    - The iteration cap is not a positive integer
    - Points in one collection have different feature dimensionality
    - Dataset rows are missing feature columns or hold non-numeric values
    """


class ClusterNotFittedError(NutriclusterError):
    """Raised when fitted state is requested before fitting.

    This exception is raised when:
    - predict() is called on a KMeansClusterer before fit()
    - transform() is called on a MinMaxNormalizer before fit()
    - Fitted attributes (labels_, cluster_centers_, ...) are read too early
    """
