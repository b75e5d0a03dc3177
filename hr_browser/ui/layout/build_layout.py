from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from hr_browser.ui.ids import IDs
from hr_browser.ui.layout.build_navbar import build_navbar
from hr_browser.ui.layout.build_sidebar import build_sidebar

if TYPE_CHECKING:
    from hr_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    navbar = build_navbar(ctx.global_config, ctx.dataset)
    sidebar = build_sidebar(ctx.global_config.default_category, ctx.global_config.default_palette)

    # KPI row, filter chips and chart grid are filled by the render callback
    main_panel = html.Div(
        [
            html.H4(ctx.global_config.default_category.label, id=IDs.Control.CATEGORY_TITLE, className="mb-3"),
            html.Div(id=IDs.Control.KPI_ROW),
            html.Div(id=IDs.Control.ACTIVE_FILTERS),
            dcc.Loading(
                id="graph-grid-loading",
                type="default",
                children=html.Div(id=IDs.Control.GRAPH_GRID),
            ),
        ]
    )

    return dbc.Container(
        fluid=True,
        className="hrb-root",
        children=[
            navbar,

            # Per-session filter/category state; never persisted across sessions
            dcc.Store(
                id=IDs.Store.DASHBOARD_STATE,
                storage_type="memory",
                data=ctx.initial_state(),
            ),

            dbc.Row(
                [
                    dbc.Col(sidebar, md=3, className="mt-3"),
                    dbc.Col(main_panel, md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
