"""Feature preprocessing for nutricluster."""

from nutricluster.preprocessing.minmax import (
    DEGENERATE_VALUE,
    MinMaxNormalizer,
    minmax_scale,
    normalize,
)

__all__ = [
    "DEGENERATE_VALUE",
    "MinMaxNormalizer",
    "minmax_scale",
    "normalize",
]
