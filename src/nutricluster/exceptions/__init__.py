"""nutricluster exceptions module.

This module contains exception classes used throughout the nutricluster library.
"""

from nutricluster.exceptions.core import (
    ClusterNotFittedError,
    InvalidArgumentError,
    NutriclusterError,
)

__all__ = [
    "ClusterNotFittedError",
    "InvalidArgumentError",
    "NutriclusterError",
]
