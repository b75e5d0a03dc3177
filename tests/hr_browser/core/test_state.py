from __future__ import annotations

import pandas as pd
import pytest

from hr_browser.core.click_router import ClickEvent, ClickRouter, Coordinate, Tagged
from hr_browser.core.dataset import Dataset
from hr_browser.core.derivation import DerivationEngine
from hr_browser.core.dimensions import Category, FilterDimension
from hr_browser.core.filter_state import FilterSnapshot
from hr_browser.core.state import DashboardState


def _make_dataset(n_sales=3, n_rnd=2):
    n = n_sales + n_rnd
    frame = pd.DataFrame(
        {
            "Age": [22, 28, 31, 47, 59][:n] if n <= 5 else list(range(20, 20 + n)),
            "Attrition": ["Yes", "No"] * (n // 2) + ["No"] * (n % 2),
            "Department": ["Sales"] * n_sales + ["Research & Development"] * n_rnd,
            "EducationField": ["Medical"] * n,
            "JobRole": ["Sales Executive"] * n_sales + ["Research Scientist"] * n_rnd,
            "MaritalStatus": ["Single", "Married", "Married", "Divorced", "Married"][:n],
            "MonthlyIncome": [3100, 4800, 5600, 9100, 12500][:n],
            "JobSatisfaction": [3, 4, 1, 2, 4][:n],
        }
    )
    return Dataset(name="TestDataset", frame=frame)


def _make_router():
    return ClickRouter.from_config(
        {
            "department_bar": {"dimension": "department", "field": "x"},
            "age_density": {"dimension": "age_group", "field": "customdata"},
            "marital_line": {"dimension": "marital_status", "field": "customdata"},
            "satisfaction_heatmap": {"dimension": "job_satisfaction", "field": "customdata"},
        }
    )


def _make_state(**kwargs):
    return DashboardState(DerivationEngine(_make_dataset()), _make_router(), **kwargs)


def _click(source, value):
    return ClickEvent(source=source, value=value)


def test_toggle_department_filters_then_restores_full_dataset():
    state = _make_state()
    full = state.engine.dataset.frame

    state.handle_click(_click("department_bar", Coordinate(x="Sales", y=2)))
    derived = state.derived

    assert len(derived) == 3
    assert (derived["Department"] == "Sales").all()

    state.handle_click(_click("department_bar", Coordinate(x="Sales", y=2)))

    assert state.active_filters.is_empty
    pd.testing.assert_frame_equal(state.derived, full)


def test_two_dimensions_intersect_and_unknown_source_changes_nothing():
    state = _make_state()

    state.handle_click(_click("age_density", Tagged("26-35")))
    state.handle_click(_click("marital_line", Tagged("Married")))
    before_filters = state.active_filters
    before_derived = state.derived

    changed = state.handle_click(_click("kpi_total_employees", Tagged("Sales")))

    frame = state.engine.dataset.frame
    expected = frame[(frame["AgeGroup"] == "26-35") & (frame["MaritalStatus"] == "Married")]
    assert changed is False
    assert state.active_filters == before_filters
    assert state.derived is before_derived
    assert list(state.derived.index) == list(expected.index) == [1, 2]


def test_switching_category_clears_filters_and_restores_full_dataset():
    state = _make_state(
        category=Category.INCOME,
        filters=FilterSnapshot.from_dict({"department": "Sales"}),
    )

    changed = state.select_category(Category.SATISFACTION)

    assert changed is True
    assert state.active_category is Category.SATISFACTION
    assert state.active_filters.is_empty
    assert state.derived is state.engine.dataset.frame


def test_combination_without_matches_yields_empty_frame():
    dataset = _make_dataset()
    frame = dataset.frame.copy()
    frame.loc[0, "Department"] = "Human Resources"
    state = DashboardState(DerivationEngine(Dataset(name="t", frame=frame)), _make_router())

    state.handle_click(_click("department_bar", Coordinate(x="Human Resources", y=1)))
    state.handle_click(_click("satisfaction_heatmap", Tagged(1)))
    state.handle_click(_click("age_density", Tagged("56-65")))

    derived = state.derived
    assert isinstance(derived, pd.DataFrame)
    assert derived.empty
    assert state.active_filters.to_dict() == {
        "department": "Human Resources",
        "age_group": "56-65",
        "job_satisfaction": 1,
    }


def test_publishes_once_per_accepted_change():
    state = _make_state()
    published = []
    state.subscribe(lambda derived, filters: published.append(filters))

    state.handle_click(_click("department_bar", Coordinate(x="Sales", y=1)))
    state.handle_click(_click("unknown", Tagged("x")))
    state.select_category(Category.ATTRITION)
    state.clear_filters()
    state.clear_filters()

    assert [f.to_dict() for f in published] == [{"department": "Sales"}, {}]


def test_category_switch_without_filters_does_not_publish():
    state = _make_state()
    published = []
    state.subscribe(lambda derived, filters: published.append(filters))

    changed = state.select_category(Category.DEPARTMENT)

    assert changed is False
    assert state.active_category is Category.DEPARTMENT
    assert published == []


def test_states_sharing_an_engine_only_notify_their_own_subscribers():
    engine = DerivationEngine(_make_dataset())
    router = _make_router()
    api_state = DashboardState(engine, router)
    session_state = DashboardState(engine, router)
    api_seen, session_seen = [], []
    api_state.subscribe(lambda derived, filters: api_seen.append(filters.to_dict()))
    session_state.subscribe(lambda derived, filters: session_seen.append((len(derived), filters.to_dict())))

    session_state.handle_click(_click("marital_line", Tagged("Married")))

    assert api_seen == []
    assert api_state.active_filters.is_empty
    assert session_seen == [(3, {"marital_status": "Married"})]


def test_unsubscribe_stops_notifications():
    state = _make_state()
    calls = []

    unsubscribe = state.subscribe(lambda derived, filters: calls.append(len(derived)))
    state.handle_click(_click("department_bar", Coordinate(x="Sales", y=1)))
    unsubscribe()
    state.clear_filters()

    assert calls == [3]


@pytest.mark.parametrize("value", [3.7, "2.5", "inf", float("nan")])
def test_click_with_non_integral_ordinal_value_is_dropped(value):
    state = _make_state()

    changed = state.handle_click(_click("satisfaction_heatmap", Tagged(value)))

    assert changed is False
    assert state.active_filters.is_empty


def test_integral_float_ordinal_value_is_accepted():
    state = _make_state()

    state.handle_click(_click("satisfaction_heatmap", Tagged(4.0)))

    assert state.active_filters.to_dict() == {"job_satisfaction": 4}


def test_to_dict_and_restore_roundtrip():
    state = _make_state(category=Category.DEMOGRAPHIC)
    state.handle_click(_click("satisfaction_heatmap", Tagged("4")))

    data = state.to_dict()
    restored = DashboardState.restore(state.engine, state.router, data)

    assert data == {"category": "demographic", "filters": {"job_satisfaction": 4}}
    assert restored.active_category is Category.DEMOGRAPHIC
    assert restored.active_filters.get(FilterDimension.JOB_SATISFACTION) == 4


@pytest.mark.parametrize(
    "data, category, filters",
    [
        (None, Category.INCOME, {}),
        ({"category": "finance", "filters": {"department": "Sales"}}, Category.INCOME, {"department": "Sales"}),
        ({"category": "satisfaction", "filters": {"salary": "high"}}, Category.SATISFACTION, {}),
        ({"category": "attrition", "filters": {"job_satisfaction": "n/a"}}, Category.ATTRITION, {}),
        ({"category": "attrition", "filters": {"job_satisfaction": "inf"}}, Category.ATTRITION, {}),
        ({"category": "attrition", "filters": {"job_satisfaction": 3.7}}, Category.ATTRITION, {}),
    ],
)
def test_restore_falls_back_on_invalid_data(data, category, filters):
    engine = DerivationEngine(_make_dataset())

    state = DashboardState.restore(engine, _make_router(), data, default_category=Category.INCOME)

    assert state.active_category is category
    assert state.active_filters.to_dict() == filters
