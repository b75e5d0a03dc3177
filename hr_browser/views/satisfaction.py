from __future__ import annotations

import pandas as pd
import plotly.express as px
from plotly.graph_objs import Figure

from hr_browser.core.base_view import BaseView
from hr_browser.core.dimensions import Category


class SatisfactionScatterView(BaseView):
    id = "satisfaction_3d_scatter"
    label = "3D Scatter: Job vs. Environment Satisfaction vs. Work-Life Balance"
    category = Category.SATISFACTION

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return derived[["JobSatisfaction", "EnvironmentSatisfaction", "WorkLifeBalance", "Department"]]

    def render_figure(self, data: pd.DataFrame) -> Figure:
        fig = px.scatter_3d(
            data,
            x="JobSatisfaction",
            y="EnvironmentSatisfaction",
            z="WorkLifeBalance",
            color="Department",
            color_discrete_sequence=self.palette[::-1],
            opacity=0.6,
            title=self.label,
        )
        fig.update_traces(marker=dict(size=3))
        return fig


class SatisfactionByDepartmentView(BaseView):
    """Average job satisfaction per department, side by side for leavers and stayers."""

    id = "satisfaction_department_attrition"
    label = "Average Job Satisfaction by Department and Attrition"
    category = Category.SATISFACTION

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return (
            derived.groupby(["Department", "Attrition"])["JobSatisfaction"]
            .mean()
            .rename("AvgJobSatisfaction")
            .reset_index()
        )

    def render_figure(self, data: pd.DataFrame) -> Figure:
        fig = px.bar(
            data,
            x="Department",
            y="AvgJobSatisfaction",
            color="Attrition",
            barmode="group",
            color_discrete_sequence=self.palette[::-1][:2],
            title=self.label,
        )
        fig.update_yaxes(range=[0, 4])
        return fig
