from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from hr_browser.core.filter_state import FilterSnapshot


def build_active_filters(filters: FilterSnapshot, n_shown: int, n_total: int) -> html.Div:
    if filters.is_empty:
        chips = [html.Span("No filters active - click a chart element to filter", className="text-muted")]
    else:
        chips = [
            dbc.Badge(f"{dim.label}: {value}", color="primary", pill=True, className="me-1")
            for dim, value in filters
        ]

    return html.Div(
        [
            html.Div(chips, className="hrb-chip-row"),
            html.Small(f"Showing {n_shown:,} of {n_total:,} employees", className="text-muted"),
        ],
        className="d-flex justify-content-between align-items-center mb-3",
    )
