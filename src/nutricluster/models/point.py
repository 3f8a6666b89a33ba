"""Point and group data structures."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Generic, Iterable, TypeVar

import numpy as np

from nutricluster.exceptions import InvalidArgumentError

PayloadT = TypeVar("PayloadT")


@dataclass(frozen=True)
class Point(Generic[PayloadT]):
    """A labeled feature vector.

    Attributes:
        id: Caller-assigned identifier, unique within one clustering run
        features: Ordered numeric feature vector
        name: Optional display name (never read by the engine)
        payload: Opaque caller data riding alongside the features
    """

    id: Any
    features: tuple[float, ...]
    name: str | None = None
    payload: PayloadT | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.features, (str, bytes)):
            raise InvalidArgumentError(
                f"Point {self.id!r} features must be numbers, got {self.features!r}"
            )
        object.__setattr__(
            self, "features", tuple(float(value) for value in self.features)
        )

    @property
    def dimensions(self) -> int:
        """Length of the feature vector."""
        return len(self.features)

    def with_features(self, features: Iterable[float]) -> "Point[PayloadT]":
        """Return a copy of this point carrying new features."""
        return replace(self, features=tuple(features))

    def as_array(self) -> np.ndarray:
        """Features as a float64 array."""
        return np.asarray(self.features, dtype=np.float64)

    def __repr__(self) -> str:
        label = f", name={self.name!r}" if self.name is not None else ""
        return f"Point(id={self.id!r}{label}, features={list(self.features)})"


@dataclass(frozen=True)
class Group(Generic[PayloadT]):
    """A cluster produced by the partitioner.

    Attributes:
        index: Position of the group in the result (0..k-1)
        centroid: Mean of the members' features, zero vector when empty
        points: Points assigned to the group, in input order
    """

    index: int
    centroid: np.ndarray
    points: tuple[Point[PayloadT], ...] = ()

    @property
    def size(self) -> int:
        """Number of member points."""
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def ids(self) -> list[Any]:
        """Identifiers of member points."""
        return [point.id for point in self.points]

    def __repr__(self) -> str:
        centroid = np.array2string(self.centroid, precision=3)
        return f"Group(index={self.index}, size={self.size}, centroid={centroid})"


__all__ = [
    "Group",
    "Point",
]
