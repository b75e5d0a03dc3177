from __future__ import annotations

import pandas as pd
import plotly.express as px
from plotly.graph_objs import Figure

from hr_browser.core.base_view import BaseView
from hr_browser.core.dimensions import Category


class AttritionContourView(BaseView):
    """
    Density contours of Age vs. Monthly Income, split by attrition status.
    Contours don't map to a single record, so this chart does not cross-filter.
    """

    id = "attrition_contour_density"
    label = "Attrition Density Contour: Age vs. Monthly Income"
    category = Category.ATTRITION

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return derived[["Age", "MonthlyIncome", "Attrition"]]

    def render_figure(self, data: pd.DataFrame) -> Figure:
        return px.density_contour(
            data,
            x="Age",
            y="MonthlyIncome",
            color="Attrition",
            color_discrete_sequence=self.palette[::-1][:2],
            title=self.label,
        )


class AttritionSatisfactionView(BaseView):
    """3D scatter of the three satisfaction scores, coloured by monthly income."""

    id = "attrition_satisfaction_3d"
    label = "3D Scatter: Satisfaction Levels with Monthly Income"
    category = Category.ATTRITION

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return derived[
            ["JobSatisfaction", "EnvironmentSatisfaction", "WorkLifeBalance", "MonthlyIncome", "Attrition"]
        ]

    def render_figure(self, data: pd.DataFrame) -> Figure:
        fig = px.scatter_3d(
            data,
            x="JobSatisfaction",
            y="EnvironmentSatisfaction",
            z="WorkLifeBalance",
            color="MonthlyIncome",
            symbol="Attrition",
            color_continuous_scale="Spectral",
            opacity=0.7,
            title=self.label,
        )
        fig.update_traces(marker=dict(size=3))
        return fig
