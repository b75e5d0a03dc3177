from __future__ import annotations

import pytest

from hr_browser.core.click_router import (
    AxisExtractor,
    ClickEvent,
    ClickRouter,
    Coordinate,
    TagExtractor,
    Tagged,
)
from hr_browser.core.dimensions import FilterDimension
from hr_browser.core.exceptions import ConfigError
from hr_browser.core.filter_state import FilterStore


def _make_router() -> ClickRouter:
    return ClickRouter.from_config(
        {
            "income_density_age_plot": {"dimension": "age_group", "field": "customdata"},
            "income_forest_plot": {"dimension": "job_role", "field": "y"},
            "income_distribution_violin_plot": {"dimension": "department", "field": "x"},
            "satisfaction_plot": {"dimension": "job_satisfaction"},
        }
    )


def test_from_config_defaults_to_customdata():
    router = _make_router()

    route = router.route_for("satisfaction_plot")

    assert route.dimension is FilterDimension.JOB_SATISFACTION
    assert isinstance(route.extractor, TagExtractor)
    assert router.sources == sorted(router.sources)


@pytest.mark.parametrize(
    "mapping",
    [
        {"plot": "department"},
        {"plot": {"dimension": "salary"}},
        {"plot": {"dimension": "department", "field": "z"}},
    ],
)
def test_from_config_rejects_invalid_entries(mapping):
    with pytest.raises(ConfigError):
        ClickRouter.from_config(mapping)


def test_axis_extractor_rejects_unknown_axis():
    with pytest.raises(ValueError):
        AxisExtractor("z")


def test_event_from_plotly_tag_payload():
    router = _make_router()
    click = {"points": [{"x": 4200, "y": 0.01, "customdata": ["26-35"]}]}

    event = router.event_from_plotly("income_density_age_plot", click)

    assert event == ClickEvent(source="income_density_age_plot", value=Tagged("26-35"))


def test_event_from_plotly_coordinate_payload():
    router = _make_router()
    click = {"points": [{"x": 5100.5, "y": "Manager"}]}

    event = router.event_from_plotly("income_forest_plot", click)

    assert event.value == Coordinate(x=5100.5, y="Manager")


@pytest.mark.parametrize(
    "source, click",
    [
        ("unknown_plot", {"points": [{"customdata": ["Sales"]}]}),
        ("income_density_age_plot", None),
        ("income_density_age_plot", {"points": []}),
        ("income_density_age_plot", {"points": [{"x": 1, "y": 2}]}),
        ("income_density_age_plot", {"points": ["26-35"]}),
        ("income_density_age_plot", {"points": "26-35"}),
    ],
)
def test_event_from_plotly_returns_none_without_usable_point(source, click):
    assert _make_router().event_from_plotly(source, click) is None


def test_route_toggles_the_configured_dimension():
    router = _make_router()
    store = FilterStore()

    routed = router.route(
        ClickEvent("income_distribution_violin_plot", Coordinate(x="Sales", y=4200)), store
    )

    assert routed is True
    assert store.snapshot().to_dict() == {"department": "Sales"}


def test_route_same_value_twice_unsets():
    router = _make_router()
    store = FilterStore()
    event = ClickEvent("income_forest_plot", Coordinate(x=6000, y="Manager"))

    router.route(event, store)
    router.route(event, store)

    assert store.snapshot().is_empty


def test_route_ignores_unknown_source():
    store = FilterStore()

    routed = _make_router().route(ClickEvent("kpi_card", Tagged("Sales")), store)

    assert routed is False
    assert store.snapshot().is_empty


def test_route_ignores_payload_of_the_wrong_shape():
    store = FilterStore()

    routed = _make_router().route(ClickEvent("income_forest_plot", Tagged("Manager")), store)

    assert routed is False
    assert store.snapshot().is_empty


def test_route_coerces_ordinal_values():
    store = FilterStore()

    _make_router().route(ClickEvent("satisfaction_plot", Tagged("3")), store)

    assert store.get(FilterDimension.JOB_SATISFACTION) == 3


def test_route_drops_values_that_do_not_fit_the_dimension():
    store = FilterStore()

    routed = _make_router().route(ClickEvent("satisfaction_plot", Tagged("very happy")), store)

    assert routed is False
    assert store.snapshot().is_empty
