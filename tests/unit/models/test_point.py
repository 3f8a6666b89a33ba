"""Tests for Point and Group."""

import dataclasses

import numpy as np
import pytest

from nutricluster import Group, InvalidArgumentError, Point


class TestPoint:
    """Tests for the Point dataclass."""

    def test_features_coerced_to_float_tuple(self):
        """Test that features are stored as a tuple of floats."""
        point = Point(id="x", features=[1, 2, 3])

        assert point.features == (1.0, 2.0, 3.0)
        assert all(isinstance(value, float) for value in point.features)
        assert point.dimensions == 3

    def test_numpy_features(self):
        """Test that numpy rows are accepted."""
        point = Point(id=0, features=np.array([0.5, 1.5]))
        assert point.features == (0.5, 1.5)

    @pytest.mark.parametrize("features", ["12", b"12"])
    def test_text_features_raise(self, features):
        """Test that strings are not split into per-character features."""
        with pytest.raises(InvalidArgumentError, match="features must be numbers"):
            Point(id=1, features=features)

    def test_frozen(self):
        """Test that points cannot be modified."""
        point = Point(id="x", features=(1.0,))
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.features = (2.0,)

    def test_equality_ignores_payload(self):
        """Test that payload does not take part in equality."""
        first = Point(id=1, features=(1, 2), name="a", payload={"icon": "x"})
        second = Point(id=1, features=(1.0, 2.0), name="a", payload={"icon": "y"})
        assert first == second

    def test_with_features_keeps_identity(self):
        """Test that with_features returns a new point with the same id."""
        payload = {"icon": "apple.png"}
        point = Point(id=7, features=(10.0, 20.0), name="apple", payload=payload)

        moved = point.with_features([0.1, 0.2])

        assert moved is not point
        assert moved.id == 7
        assert moved.name == "apple"
        assert moved.payload is payload
        assert moved.features == (0.1, 0.2)
        assert point.features == (10.0, 20.0)

    def test_as_array(self):
        """Test conversion to a float64 array."""
        array = Point(id=1, features=(1, 2)).as_array()
        assert array.dtype == np.float64
        np.testing.assert_array_equal(array, [1.0, 2.0])

    def test_repr(self):
        """Test __repr__ format."""
        assert repr(Point(id=1, features=(1.0,))) == "Point(id=1, features=[1.0])"
        assert "name='kale'" in repr(Point(id=2, features=(0.0,), name="kale"))


class TestGroup:
    """Tests for the Group dataclass."""

    def test_size_and_ids(self):
        """Test size, ids and is_empty."""
        points = (Point(id="a", features=(0.0,)), Point(id="b", features=(2.0,)))
        group = Group(index=0, centroid=np.array([1.0]), points=points)

        assert group.size == 2
        assert group.ids == ["a", "b"]
        assert not group.is_empty

    def test_empty_group(self):
        """Test a group without members."""
        group = Group(index=3, centroid=np.zeros(2))

        assert group.size == 0
        assert group.is_empty
        assert group.ids == []

    def test_repr(self):
        """Test __repr__ format."""
        repr_str = repr(Group(index=1, centroid=np.array([0.5, 0.25])))
        assert "Group(index=1, size=0" in repr_str
        assert "centroid=" in repr_str
