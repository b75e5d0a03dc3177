from __future__ import annotations

from typing import List, Optional, Type

import dash_bootstrap_components as dbc
import plotly.graph_objs as go
from dash import dcc, html

from hr_browser.core.base_view import BaseView
from hr_browser.core.click_router import ClickRouter
from hr_browser.ui.ids import chart_id


def build_chart_card(
    view_cls: Type[BaseView],
    figure: go.Figure,
    router: Optional[ClickRouter] = None,
) -> dbc.Col:
    source = view_cls.click_source or view_cls.id
    route = router.route_for(source) if router is not None else None

    if route is not None:
        hint = f"Click to filter all charts by {route.dimension.label}."
    else:
        hint = "This chart reflects selected filters."

    return dbc.Col(
        dbc.Card(
            [
                dbc.CardHeader(html.Strong(view_cls.label), className="p-2"),
                dbc.CardBody(
                    [
                        dcc.Graph(
                            id=chart_id(source),
                            figure=figure,
                            style={"height": "420px"},
                            config={"responsive": True, "displaylogo": False},
                        ),
                        html.Small(hint, className="text-muted"),
                    ]
                ),
            ],
            className="hrb-chart-card mb-3",
        ),
        md=view_cls.width,
    )


def build_graph_grid(cards: List[dbc.Col]) -> dbc.Row:
    if not cards:
        return dbc.Row(dbc.Col(html.P("No charts registered for this category.", className="text-muted")))
    return dbc.Row(cards, className="g-3")
