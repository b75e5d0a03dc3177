from __future__ import annotations

import json
from pathlib import Path

import plotly.graph_objs as go
import pytest

from hr_browser.core.base_view import NO_DATA_MESSAGE, BaseView
from hr_browser.core.dimensions import Category
from hr_browser.core.sample_data import generate_sample_dataset
from hr_browser.core.view_registry import ViewRegistry
from hr_browser.ui.dash_app import build_view_registry
from hr_browser.ui.palettes import get_palette
from hr_browser.views import ALL_VIEWS, IncomeDensityByAgeView, IncomeForestView

CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "global.json"


@pytest.fixture(scope="module")
def derived():
    return generate_sample_dataset(n=300, seed=5).frame


@pytest.mark.parametrize("view_cls", ALL_VIEWS, ids=lambda cls: cls.id)
def test_view_renders_sample_data(view_cls, derived):
    view = view_cls(get_palette("blues"))

    fig = view.figure_for(derived)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) > 0


@pytest.mark.parametrize("view_cls", ALL_VIEWS, ids=lambda cls: cls.id)
def test_view_renders_message_on_empty_input(view_cls, derived):
    view = view_cls(get_palette("viridis"))

    fig = view.figure_for(derived.iloc[0:0])

    assert fig.layout.title.text == NO_DATA_MESSAGE
    assert len(fig.data) == 0


@pytest.mark.parametrize("view_cls", ALL_VIEWS, ids=lambda cls: cls.id)
def test_view_does_not_mutate_derived(view_cls, derived):
    before = derived.copy()

    view_cls(get_palette("Dark2")).figure_for(derived)

    assert derived.equals(before)


def test_view_renders_narrow_subset(derived):
    subset = derived[derived["Department"] == "Human Resources"].head(3)

    for view_cls in ALL_VIEWS:
        fig = view_cls(get_palette("blues")).figure_for(subset)
        assert isinstance(fig, go.Figure)


def test_density_curves_are_tagged_with_age_group(derived):
    fig = IncomeDensityByAgeView(get_palette("blues")).figure_for(derived)

    for trace in fig.data:
        assert set(trace.customdata) == {trace.name}


def test_forest_plot_puts_job_roles_on_y_axis(derived):
    fig = IncomeForestView(get_palette("blues")).figure_for(derived)

    roles = set(fig.data[0].y)
    assert roles <= set(derived["JobRole"])


def test_every_category_has_views():
    registry = build_view_registry()

    for category in Category:
        assert registry.for_category(category)


def test_registry_click_sources_match_routing_table():
    routing = json.loads(CONFIG_PATH.read_text())["click_sources"]

    assert sorted(build_view_registry().click_sources()) == sorted(routing)


def test_registry_rejects_invalid_views():
    registry = ViewRegistry()
    registry.register(IncomeForestView)

    class Uncategorised(BaseView):
        id = "uncategorised"

        def compute_data(self, derived):
            return derived

        def render_figure(self, data):
            return go.Figure()

    with pytest.raises(ValueError):
        registry.register(IncomeForestView)
    with pytest.raises(TypeError):
        registry.register(Uncategorised)
    with pytest.raises(TypeError):
        registry.register(object)
