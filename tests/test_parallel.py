import numpy as np
import pytest

from metric_engine.core.parallel import chunk_bounds, parallel_argsort, parallel_sum, resolve_workers


def test_chunk_bounds_cover_range():
    bounds = chunk_bounds(10, 3)
    assert bounds[0][0] == 0
    assert bounds[-1][1] == 10
    assert all(a[1] == b[0] for a, b in zip(bounds, bounds[1:]))
    assert len(bounds) == 3


def test_chunk_bounds_never_exceed_items():
    assert len(chunk_bounds(2, 8)) == 2


def test_resolve_workers_respects_min_size():
    assert resolve_workers(4, 100, 1000) == 1
    assert resolve_workers(None, 10_000, 1) == 1
    assert resolve_workers(4, 10_000, 1) == 4
    assert resolve_workers(8, 3, 1) == 3


@pytest.mark.parametrize("n_jobs", [None, 2, 5])
def test_parallel_sum_matches_numpy(n_jobs):
    values = np.random.default_rng(3).normal(size=1001)
    total = parallel_sum(
        lambda a, b: float(values[a:b].sum()), values.shape[0], n_jobs=n_jobs, min_parallel_size=2
    )
    assert total == pytest.approx(values.sum(), abs=1e-9)


@pytest.mark.parametrize("n_jobs", [None, 2, 3, 7])
def test_parallel_argsort_descending(n_jobs):
    keys = np.round(np.random.default_rng(5).normal(size=997), 1)
    order = parallel_argsort(keys, descending=True, n_jobs=n_jobs, min_parallel_size=2)
    assert sorted(order.tolist()) == list(range(keys.shape[0]))
    np.testing.assert_array_equal(keys[order], np.sort(keys)[::-1])


def test_parallel_argsort_ascending_with_nan():
    keys = np.array([3.0, np.nan, 1.0, 2.0, np.nan, 0.5, 4.0, 1.0])
    order = parallel_argsort(keys, n_jobs=3, min_parallel_size=2)
    np.testing.assert_array_equal(keys[order][:6], [0.5, 1.0, 1.0, 2.0, 3.0, 4.0])
    assert np.isnan(keys[order][6:]).all()
