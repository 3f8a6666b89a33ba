"""Build points from tabular nutrient data.

Example:
    >>> df = pd.DataFrame({
    ...     "food": ["apple", "salmon"],
    ...     "protein": [0.3, 20.0],
    ...     "carbs": [14.0, 0.0],
    ... })
    >>> points = points_from_frame(df, ["protein", "carbs"], name_column="food")
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Iterable, Mapping, Sequence

import pandas as pd

from nutricluster.exceptions import InvalidArgumentError
from nutricluster.models import Point

logger = logging.getLogger(__name__)


def _check_unique_ids(points: Sequence[Point]) -> None:
    seen: set[Any] = set()
    for point in points:
        if point.id in seen:
            raise InvalidArgumentError(f"Duplicate point id: {point.id!r}")
        seen.add(point.id)


def points_from_frame(
    df: pd.DataFrame,
    feature_columns: Sequence[str],
    id_column: str | None = None,
    name_column: str | None = None,
) -> list[Point[dict[str, Any]]]:
    """Create one point per DataFrame row.

    Args:
        df: Table with one food item per row
        feature_columns: Numeric columns to use as features, in order
        id_column: Column holding identifiers (default: the DataFrame index)
        name_column: Optional column holding display names

    Returns:
        Points in row order; each payload is the full row as a dict

    Raises:
        InvalidArgumentError: If columns are missing, non-numeric or contain
            missing values, or identifiers are not unique
    """
    if not feature_columns:
        raise InvalidArgumentError("At least one feature column is required")

    wanted = list(feature_columns)
    wanted += [column for column in (id_column, name_column) if column is not None]
    missing = [column for column in wanted if column not in df.columns]
    if missing:
        raise InvalidArgumentError(
            f"DataFrame missing columns: {missing}. Available: {list(df.columns)}"
        )

    non_numeric = [
        column
        for column in feature_columns
        if not pd.api.types.is_numeric_dtype(df[column])
        or pd.api.types.is_bool_dtype(df[column])
    ]
    if non_numeric:
        raise InvalidArgumentError(f"Feature columns must be numeric: {non_numeric}")

    features = df[list(feature_columns)]
    if features.isna().any().any():
        raise InvalidArgumentError("Feature columns contain missing values")

    ids = df[id_column].tolist() if id_column is not None else df.index.tolist()
    names = df[name_column].tolist() if name_column is not None else [None] * len(df)

    points = [
        Point(
            id=point_id,
            features=tuple(values),
            name=None if name is None else str(name),
            payload=row,
        )
        for point_id, name, values, row in zip(
            ids,
            names,
            features.itertuples(index=False, name=None),
            df.to_dict(orient="records"),
        )
    ]
    _check_unique_ids(points)

    logger.debug(f"Built {len(points)} points with {len(feature_columns)} features")
    return points


def points_from_records(
    records: Iterable[Mapping[str, Any]],
    feature_keys: Sequence[str],
    id_key: str = "id",
    name_key: str = "name",
) -> list[Point[Mapping[str, Any]]]:
    """Create one point per record (e.g. rows fetched from a remote table).

    A record without ``id_key`` is identified by its position; ``name_key`` is
    optional. Each payload is the source record.

    Raises:
        InvalidArgumentError: If a feature key is missing or not a finite
            number, or identifiers are not unique
    """
    if not feature_keys:
        raise InvalidArgumentError("At least one feature key is required")

    points = []
    for position, record in enumerate(records):
        values = []
        for key in feature_keys:
            if key not in record:
                raise InvalidArgumentError(
                    f"Record at position {position} is missing feature {key!r}"
                )
            value = record[key]
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidArgumentError(
                    f"Feature {key!r} of record at position {position} "
                    f"must be numeric, got {value!r}"
                )
            if math.isnan(value):
                raise InvalidArgumentError(
                    f"Feature {key!r} of record at position {position} is missing"
                )
            values.append(float(value))

        name = record.get(name_key)
        points.append(
            Point(
                id=record.get(id_key, position),
                features=tuple(values),
                name=None if name is None else str(name),
                payload=record,
            )
        )

    _check_unique_ids(points)
    return points


__all__ = [
    "points_from_frame",
    "points_from_records",
]
