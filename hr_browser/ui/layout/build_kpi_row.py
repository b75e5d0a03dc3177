from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from hr_browser.core.kpis import KpiSummary, format_kpis


def _value_box(value: str, subtitle: str, color: str) -> dbc.Col:
    return dbc.Col(
        dbc.Card(
            dbc.CardBody(
                [
                    html.H3(value, className="mb-0"),
                    html.Small(subtitle, className="text-muted"),
                ]
            ),
            color=color,
            outline=True,
            className="hrb-kpi",
        ),
        md=3,
    )


def build_kpi_row(summary: KpiSummary) -> dbc.Row:
    text = format_kpis(summary)
    return dbc.Row(
        [
            _value_box(text["total_employees"], "Total Employees", "primary"),
            _value_box(
                text["attrition_rate"],
                "Overall Attrition Rate",
                "danger" if summary.attrition_alert else "success",
            ),
            _value_box(text["avg_monthly_income"], "Average Monthly Income", "info"),
            _value_box(text["avg_years_at_company"], "Average Years at Company", "secondary"),
        ],
        className="g-3 mb-3",
    )
