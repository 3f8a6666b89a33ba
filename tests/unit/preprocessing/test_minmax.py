"""Unit tests for min-max normalization."""

import numpy as np
import pytest

from nutricluster import (
    ClusterNotFittedError,
    InvalidArgumentError,
    MinMaxNormalizer,
    Point,
    normalize,
)
from nutricluster.preprocessing import minmax_scale


class TestNormalize:
    """Tests for normalize()."""

    def test_empty_input(self):
        """Test that an empty collection normalizes to an empty list."""
        assert normalize([]) == []

    def test_known_values(self):
        """Test scaling of a small collection."""
        points = [
            Point(id="a", features=(0.0, 10.0)),
            Point(id="b", features=(5.0, 30.0)),
            Point(id="c", features=(10.0, 20.0)),
        ]

        result = normalize(points)

        assert [point.features for point in result] == [
            (0.0, 0.0),
            (0.5, 1.0),
            (1.0, 0.5),
        ]

    def test_range_and_extremes(self, food_points):
        """Test that every dimension spans exactly [0, 1]."""
        features = np.array([point.features for point in normalize(food_points)])

        assert np.all(features >= 0.0)
        assert np.all(features <= 1.0)
        np.testing.assert_array_equal(features.min(axis=0), np.zeros(4))
        np.testing.assert_array_equal(features.max(axis=0), np.ones(4))

    def test_degenerate_dimension(self):
        """Test that a constant dimension becomes exactly 0.5."""
        points = [
            Point(id=index, features=(7.0, float(index)))
            for index in range(5)
        ]

        result = normalize(points)

        assert all(point.features[0] == 0.5 for point in result)
        assert [point.features[1] for point in result] == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_single_point_is_all_degenerate(self):
        """Test that one point maps every dimension to 0.5."""
        result = normalize([Point(id=1, features=(3.0, -2.0, 100.0))])
        assert result[0].features == (0.5, 0.5, 0.5)

    def test_idempotent(self, food_points):
        """Test that normalizing normalized data changes nothing."""
        once = normalize(food_points)
        twice = normalize(once)

        for first, second in zip(once, twice):
            assert first.features == second.features

    def test_preserves_identity_fields(self, food_points):
        """Test that ids, names, payloads and order are preserved."""
        result = normalize(food_points)

        assert [point.id for point in result] == [point.id for point in food_points]
        assert [point.name for point in result] == [point.name for point in food_points]
        for original, scaled in zip(food_points, result):
            assert scaled.payload is original.payload

    def test_input_not_mutated(self, food_points):
        """Test that the input collection is left untouched."""
        before = [point.features for point in food_points]
        result = normalize(food_points)

        assert [point.features for point in food_points] == before
        assert all(new is not old for new, old in zip(result, food_points))

    def test_dimension_mismatch_raises(self):
        """Test that inconsistent dimensionality is rejected."""
        points = [Point(id=1, features=(1.0,)), Point(id=2, features=(1.0, 2.0))]
        with pytest.raises(InvalidArgumentError):
            normalize(points)

    def test_extreme_finite_range(self):
        """Test that a range wider than the largest float still maps to [0, 1]."""
        points = [
            Point(id="low", features=(-1e308, 1.0)),
            Point(id="mid", features=(0.0, 2.0)),
            Point(id="high", features=(1e308, 3.0)),
        ]

        result = normalize(points)

        assert [point.features for point in result] == [
            (0.0, 0.0),
            (0.5, 0.5),
            (1.0, 1.0),
        ]


class TestMinMaxScale:
    """Tests for minmax_scale()."""

    def test_array_scaling(self):
        """Test column-wise scaling of an array."""
        scaled = minmax_scale([[1.0, 5.0], [3.0, 5.0], [2.0, 5.0]])
        np.testing.assert_array_equal(scaled, [[0.0, 0.5], [1.0, 0.5], [0.5, 0.5]])

    def test_does_not_modify_input(self):
        """Test that the input array is copied."""
        data = np.array([[1.0], [3.0]])
        minmax_scale(data)
        np.testing.assert_array_equal(data, [[1.0], [3.0]])


class TestMinMaxNormalizer:
    """Tests for MinMaxNormalizer."""

    def test_fit_transform(self):
        """Test that fit_transform matches minmax_scale."""
        data = np.array([[0.0, 4.0], [10.0, 4.0], [5.0, 4.0]])
        np.testing.assert_array_equal(
            MinMaxNormalizer().fit_transform(data), minmax_scale(data)
        )

    def test_transform_uses_fitted_range(self):
        """Test that new data is scaled with the fitted range, unclipped."""
        normalizer = MinMaxNormalizer().fit([[0.0, 1.0], [10.0, 1.0]])

        scaled = normalizer.transform([[5.0, 1.0], [20.0, 3.0]])

        np.testing.assert_array_equal(scaled, [[0.5, 0.5], [2.0, 0.5]])
        np.testing.assert_array_equal(normalizer.data_min_, [0.0, 1.0])
        np.testing.assert_array_equal(normalizer.data_max_, [10.0, 1.0])

    def test_transform_before_fit_raises(self):
        """Test that transform before fit raises ClusterNotFittedError."""
        with pytest.raises(ClusterNotFittedError, match="must be fitted before transform"):
            MinMaxNormalizer().transform([[1.0]])

    def test_transform_extreme_range(self):
        """Test that the fitted extremes of a huge range map to 0 and 1."""
        normalizer = MinMaxNormalizer().fit([[-1e308], [1e308]])
        np.testing.assert_array_equal(
            normalizer.transform([[-1e308], [1e308]]), [[0.0], [1.0]]
        )

    def test_fit_empty_raises(self):
        """Test that fitting on no rows is rejected."""
        with pytest.raises(InvalidArgumentError):
            MinMaxNormalizer().fit(np.empty((0, 3)))

    def test_transform_wrong_width_raises(self):
        """Test that transforming another dimensionality is rejected."""
        normalizer = MinMaxNormalizer().fit([[0.0, 1.0], [1.0, 2.0]])
        with pytest.raises(InvalidArgumentError):
            normalizer.transform([[0.0, 1.0, 2.0]])

    def test_repr(self):
        """Test __repr__ format."""
        assert repr(MinMaxNormalizer()) == "MinMaxNormalizer(fitted=False)"
        assert "fitted=True" in repr(MinMaxNormalizer().fit([[1.0]]))
