from __future__ import annotations

import threading

import pandas as pd

from hr_browser.core.dataset import Dataset
from hr_browser.core.derivation import DerivationEngine, compute
from hr_browser.core.dimensions import FilterDimension
from hr_browser.core.filter_state import FilterSnapshot, FilterStore


def _make_dataset():
    frame = pd.DataFrame(
        {
            "Age": [23, 30, 41, 29, 60, 33],
            "Attrition": ["Yes", "No", "No", "Yes", "No", "No"],
            "Department": ["Sales", "Research & Development", "Sales", "Research & Development", "Sales", "Sales"],
            "EducationField": ["Medical", "Life Sciences", "Marketing", "Medical", "Other", "Medical"],
            "JobRole": ["Sales Executive", "Research Scientist", "Manager", "Laboratory Technician", "Manager", "Manager"],
            "MaritalStatus": ["Single", "Married", "Married", "Single", "Divorced", "Married"],
            "MonthlyIncome": [3000, 5200, 12000, 4100, 8000, 6100],
            "YearsAtCompany": [1, 4, 15, 3, 30, 5],
            "JobSatisfaction": [3, 4, 2, 1, 4, 3],
        }
    )
    return Dataset(name="TestDataset", frame=frame)


def _filters(**kwargs) -> FilterSnapshot:
    store = FilterStore()
    for name, value in kwargs.items():
        store.toggle(FilterDimension(name), value)
    return store.snapshot()


def test_compute_with_empty_filters_is_identity():
    ds = _make_dataset()

    derived = compute(ds, FilterSnapshot())

    assert derived is ds.frame
    pd.testing.assert_frame_equal(derived, ds.frame)


def test_compute_single_dimension():
    ds = _make_dataset()

    derived = compute(ds, _filters(department="Sales"))

    assert list(derived.index) == [0, 2, 4, 5]
    assert set(derived["Department"]) == {"Sales"}


def test_compute_combines_dimensions_with_and():
    ds = _make_dataset()

    derived = compute(ds, _filters(department="Sales", marital_status="Married"))

    # Sales = {0, 2, 4, 5}, Married = {1, 2, 5}; an OR would give 6 rows
    assert list(derived.index) == [2, 5]


def test_compute_preserves_dataset_order():
    ds = _make_dataset()

    derived = compute(ds, _filters(job_role="Manager"))

    assert list(derived.index) == sorted(derived.index)
    assert list(derived["MonthlyIncome"]) == [12000, 8000, 6100]


def test_compute_ordinal_dimension():
    ds = _make_dataset()

    derived = compute(ds, _filters(job_satisfaction=4))

    assert list(derived.index) == [1, 4]


def test_compute_zero_matches_returns_empty_frame_with_columns():
    ds = _make_dataset()

    derived = compute(ds, _filters(department="Human Resources"))

    assert derived.empty
    assert list(derived.columns) == list(ds.frame.columns)


def test_engine_computes_once_per_distinct_snapshot():
    engine = DerivationEngine(_make_dataset())

    first = engine.derive(_filters(department="Sales"))
    second = engine.derive(_filters(department="Sales"))
    other = engine.derive(_filters(department="Research & Development"))

    assert first is second
    assert other is not first
    assert engine.stats.computations == 2
    assert engine.stats.cache_hits == 1


def test_publish_fans_out_one_frame_to_every_subscriber():
    engine = DerivationEngine(_make_dataset())
    received = []
    subscribers = [lambda derived, filters: received.append((derived, filters)) for _ in range(3)]

    snap = _filters(attrition="Yes")
    engine.publish(snap, subscribers)

    assert len(received) == 3
    assert all(derived is received[0][0] for derived, _ in received)
    assert all(filters == snap for _, filters in received)
    assert engine.stats.computations == 1
    assert engine.stats.publishes == 1


def test_failing_subscriber_does_not_block_others():
    engine = DerivationEngine(_make_dataset())
    calls = []

    def broken(derived, filters):
        raise RuntimeError("boom")

    engine.publish(FilterSnapshot(), [broken, lambda derived, filters: calls.append(len(derived))])

    assert calls == [6]


def test_concurrent_readers_share_one_computation():
    engine = DerivationEngine(_make_dataset())
    snap = _filters(department="Sales", marital_status="Married")
    n_threads = 8
    barrier = threading.Barrier(n_threads)
    results = [None] * n_threads

    def read(i):
        barrier.wait()
        results[i] = engine.derive(snap)

    threads = [threading.Thread(target=read, args=(i,)) for i in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert engine.stats.computations == 1
    assert engine.stats.cache_hits == n_threads - 1
    assert all(frame is results[0] for frame in results)
    assert list(results[0].index) == [2, 5]


def test_cache_is_bounded():
    engine = DerivationEngine(_make_dataset())
    engine.MAX_CACHE = 2

    engine.derive(_filters(department="Sales"))
    engine.derive(_filters(attrition="Yes"))
    engine.derive(_filters(attrition="No"))
    engine.derive(_filters(department="Sales"))

    assert engine.stats.computations == 4
