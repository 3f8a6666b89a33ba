"""Pytest fixtures for nutricluster tests."""

import pytest

from nutricluster import Point


@pytest.fixture
def two_blob_points() -> list[Point]:
    """Six 2D points forming two far-apart blobs of three."""
    coordinates = [(0, 0), (0, 1), (1, 0), (10, 10), (10, 11), (11, 10)]
    return [
        Point(id=f"p{index}", features=coordinates[index])
        for index in range(len(coordinates))
    ]


@pytest.fixture
def food_points() -> list[Point]:
    """Food items with (calories, protein, carbs, fat) per 100g."""
    foods = [
        ("apple", (52, 0.3, 14.0, 0.2)),
        ("banana", (89, 1.1, 23.0, 0.3)),
        ("orange", (47, 0.9, 12.0, 0.1)),
        ("chicken breast", (165, 31.0, 0.0, 3.6)),
        ("salmon", (208, 20.0, 0.0, 13.0)),
        ("tuna", (132, 28.0, 0.0, 1.0)),
        ("rice", (130, 2.7, 28.0, 0.3)),
        ("pasta", (131, 5.0, 25.0, 1.1)),
        ("bread", (265, 9.0, 49.0, 3.2)),
        ("almonds", (579, 21.0, 22.0, 50.0)),
    ]
    return [
        Point(id=index, features=features, name=name, payload={"icon": name[0]})
        for index, (name, features) in enumerate(foods)
    ]
