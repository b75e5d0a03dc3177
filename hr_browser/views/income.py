from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objs as go
from plotly.graph_objs import Figure

from hr_browser.core.base_view import BaseView
from hr_browser.core.dimensions import Category
from hr_browser.views._helpers import present_age_groups

DENSITY_BINS = 30
Z_95 = 1.96


class IncomeDensityByAgeView(BaseView):
    """
    Monthly income density curve per age bracket.

    Each curve carries its AgeGroup as customdata, so clicking a curve toggles
    the age_group filter.
    """

    id = "income_density_age_plot"
    label = "Income Density by Age Group"
    category = Category.INCOME
    click_source = "income_density_age_plot"

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        incomes = derived["MonthlyIncome"].dropna()
        if incomes.empty:
            return pd.DataFrame(columns=["AgeGroup", "MonthlyIncome", "density"])

        value_range = (float(incomes.min()), float(incomes.max()))
        frames = []
        for group in present_age_groups(derived):
            group_incomes = derived.loc[derived["AgeGroup"] == group, "MonthlyIncome"].dropna()
            if group_incomes.empty:
                continue
            density, edges = np.histogram(group_incomes, bins=DENSITY_BINS, range=value_range, density=True)
            frames.append(
                pd.DataFrame(
                    {
                        "AgeGroup": group,
                        "MonthlyIncome": (edges[:-1] + edges[1:]) / 2,
                        "density": density,
                    }
                )
            )

        if not frames:
            return pd.DataFrame(columns=["AgeGroup", "MonthlyIncome", "density"])
        return pd.concat(frames, ignore_index=True)

    def render_figure(self, data: pd.DataFrame) -> Figure:
        fig = go.Figure()
        for i, (group, curve) in enumerate(data.groupby("AgeGroup", sort=False)):
            colour = self.palette[i % len(self.palette)]
            fig.add_trace(
                go.Scatter(
                    x=curve["MonthlyIncome"],
                    y=curve["density"],
                    mode="lines",
                    fill="tozeroy",
                    name=group,
                    line=dict(color=colour),
                    customdata=[group] * len(curve),
                    hovertemplate="%{customdata}<br>Income: %{x:$,.0f}<extra></extra>",
                )
            )
        fig.update_layout(
            title=self.label,
            xaxis_title="Monthly Income",
            yaxis_title="Density",
            legend_title="Age Group",
        )
        return fig


class IncomeForestView(BaseView):
    """
    Mean monthly income per job role with a 95% confidence interval.
    Roles sit on the y axis, so the click's y coordinate toggles job_role.
    """

    id = "income_forest_plot"
    label = "Average Income by Job Role (95% CI)"
    category = Category.INCOME
    click_source = "income_forest_plot"

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        stats = (
            derived.groupby("JobRole")["MonthlyIncome"]
            .agg(["mean", "std", "count"])
            .reset_index()
        )
        # A CI needs more than one employee per role
        stats = stats[stats["count"] > 1].copy()
        stats["ci"] = Z_95 * stats["std"] / np.sqrt(stats["count"])
        return stats.sort_values("mean").reset_index(drop=True)

    def render_figure(self, data: pd.DataFrame) -> Figure:
        fig = px.scatter(
            data,
            x="mean",
            y="JobRole",
            error_x="ci",
            hover_data={"count": True},
            color_discrete_sequence=[self.palette[-1]],
            title=self.label,
        )
        fig.update_traces(marker=dict(size=10))
        fig.update_layout(xaxis_title="Average Monthly Income", yaxis_title="Job Role")
        return fig


class IncomeViolinByDepartmentView(BaseView):
    """Income distribution per department; the clicked violin's x is the Department."""

    id = "income_distribution_violin_plot"
    label = "Income Distribution by Department"
    category = Category.INCOME
    click_source = "income_distribution_violin_plot"

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return derived[["Department", "MonthlyIncome"]]

    def render_figure(self, data: pd.DataFrame) -> Figure:
        fig = px.violin(
            data,
            x="Department",
            y="MonthlyIncome",
            color="Department",
            box=True,
            color_discrete_sequence=self.palette[::-1],
            title=self.label,
        )
        fig.update_layout(showlegend=False)
        return fig


class IncomeDistanceDensityView(BaseView):
    id = "income_distance_2d"
    label = "2D Density: Monthly Income vs. Distance From Home"
    category = Category.INCOME

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return derived[["DistanceFromHome", "MonthlyIncome"]]

    def render_figure(self, data: pd.DataFrame) -> Figure:
        return px.density_heatmap(
            data,
            x="DistanceFromHome",
            y="MonthlyIncome",
            nbinsx=15,
            nbinsy=15,
            color_continuous_scale=self.palette,
            title=self.label,
        )
