from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, Type

import dash
import dash_bootstrap_components as dbc
import pandas as pd
import plotly.graph_objs as go
from dash import ALL, Input, Output

from hr_browser.core.base_view import BaseView
from hr_browser.core.dimensions import Category
from hr_browser.core.kpis import compute_kpis
from hr_browser.ui.ids import IDs
from hr_browser.ui.layout.build_active_filters import build_active_filters
from hr_browser.ui.layout.build_graph_grid import build_chart_card, build_graph_grid
from hr_browser.ui.layout.build_kpi_row import build_kpi_row
from hr_browser.ui.palettes import get_palette

if TYPE_CHECKING:
    from hr_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this chart.", details)


def render_view(view_cls: Type[BaseView], derived: pd.DataFrame, palette: Sequence[str]) -> go.Figure:
    """One consumer: a failing chart becomes an error figure instead of breaking the grid."""
    try:
        view = view_cls(palette)
        return view.figure_for(derived)
    except Exception:
        logger.exception(
            "Error rendering view",
            extra={"view_id": view_cls.id, "n_records": len(derived)},
        )
        return _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        )


def build_chart_cards(ctx: AppConfig, category: Category, derived: pd.DataFrame, palette_name: Optional[str]) -> List[dbc.Col]:
    palette = get_palette(palette_name)
    return [
        build_chart_card(view_cls, render_view(view_cls, derived, palette), ctx.router)
        for view_cls in ctx.registry.for_category(category)
    ]


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # DashboardState -> KPIs + filter chips + chart grid
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.GRAPH_GRID, "children"),
        Output(IDs.Control.KPI_ROW, "children"),
        Output(IDs.Control.ACTIVE_FILTERS, "children"),
        Output(IDs.Control.CATEGORY_TITLE, "children"),
        Output({"type": IDs.Pattern.CATEGORY_LINK, "index": ALL}, "active"),
        Input(IDs.Store.DASHBOARD_STATE, "data"),
        Input(IDs.Control.PALETTE_SELECT, "value"),
    )
    def render_dashboard(stored, palette_name):
        state = ctx.restore_state(stored)

        # Derived once per update; every consumer below reads this same frame
        derived = state.derived

        logger.info(
            "render_start",
            extra={
                "category": state.active_category.value,
                "filters": state.active_filters.to_dict(),
                "n_records": len(derived),
            },
        )

        cards = build_chart_cards(ctx, state.active_category, derived, palette_name)
        links_active = [
            output["id"]["index"] == state.active_category.value
            for output in dash.ctx.outputs_list[4]
        ]

        return (
            build_graph_grid(cards),
            build_kpi_row(compute_kpis(derived)),
            build_active_filters(state.active_filters, len(derived), ctx.dataset.n_records),
            state.active_category.label,
            links_active,
        )
