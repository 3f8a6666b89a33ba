"""Benchmark normalization and K-means partitioning."""

import pytest

from nutricluster import cluster, normalize


@pytest.mark.benchmark
@pytest.mark.parametrize("data_size", [100, 500, 1000])
def bench_normalize(benchmark, synthetic_points, data_size):
    """Benchmark min-max normalization."""
    points = synthetic_points[:data_size]

    result = benchmark(normalize, points)
    assert len(result) == data_size


@pytest.mark.benchmark
@pytest.mark.parametrize("k", [3, 8, 20])
@pytest.mark.parametrize("data_size", [100, 500, 1000])
def bench_cluster(benchmark, synthetic_points, k, data_size):
    """Benchmark K-means on normalized points."""
    points = normalize(synthetic_points[:data_size])

    def _cluster():
        return cluster(points, k, random_state=42)

    groups = benchmark(_cluster)
    assert len(groups) == k
