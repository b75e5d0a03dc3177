from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from hr_browser.core.dimensions import Category
from hr_browser.ui.ids import IDs, category_link_id
from hr_browser.ui.palettes import palette_options


def build_sidebar(default_category: Category, default_palette: str) -> dbc.Card:
    nav_links = [
        dbc.NavLink(
            category.label,
            id=category_link_id(category.value),
            active=category is default_category,
            n_clicks=0,
            href="#",
        )
        for category in Category
    ]

    return dbc.Card(
        [
            dbc.CardHeader("Analysis", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.P("Click a category to view related graphs:", className="text-muted small"),
                    dbc.Nav(nav_links, id=IDs.Control.CATEGORY_NAV, vertical=True, pills=True),
                    html.Hr(),
                    dbc.Button(
                        "Clear All Filters",
                        id=IDs.Control.CLEAR_FILTERS_BTN,
                        color="secondary",
                        size="sm",
                        className="w-100 mb-3",
                        n_clicks=0,
                    ),
                    html.Label("Color Palette (Graphs)", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.PALETTE_SELECT,
                        options=palette_options(),
                        value=default_palette,
                        clearable=False,
                    ),
                ]
            ),
        ],
        className="hrb-sidebar",
    )
