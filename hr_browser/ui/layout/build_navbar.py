from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from hr_browser.config.model import GlobalConfig
from hr_browser.core.dataset import Dataset


def build_navbar(global_config: GlobalConfig, dataset: Dataset) -> dbc.Navbar:
    title = global_config.ui_title
    subtitle = global_config.subtitle

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted", id="navbar-subtitle"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Dataset", className="navbar-dataset-title"),
                        html.Div(
                            f"{dataset.name} · {dataset.n_records:,} employees",
                            className="navbar-dataset-subtitle text-muted",
                        ),
                    ],
                    className="ms-auto navbar-dataset-block",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm hrb-navbar",
    )
