from __future__ import annotations

import pandas as pd
import plotly.express as px
from plotly.graph_objs import Figure

from hr_browser.core.base_view import BaseView
from hr_browser.core.dimensions import Category


class IncomeByEducationView(BaseView):
    id = "department_stacked_income"
    label = "Total Monthly Income by Department and Education Field"
    category = Category.DEPARTMENT

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return (
            derived.groupby(["Department", "EducationField"])["MonthlyIncome"]
            .sum()
            .rename("TotalMonthlyIncome")
            .reset_index()
        )

    def render_figure(self, data: pd.DataFrame) -> Figure:
        return px.bar(
            data,
            x="Department",
            y="TotalMonthlyIncome",
            color="EducationField",
            barmode="stack",
            color_discrete_sequence=self.palette[::-1],
            title=self.label,
        )


class AttritionFunnelView(BaseView):
    """Headcount vs. leavers per job role, widest role first."""

    id = "department_funnel_attrition"
    label = "Attrition Funnel by Job Role"
    category = Category.DEPARTMENT

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        counts = (
            derived.assign(Attrited=derived["Attrition"] == "Yes")
            .groupby("JobRole")
            .agg(Employees=("Attrition", "size"), Attrited=("Attrited", "sum"))
            .sort_values("Employees", ascending=False)
            .reset_index()
        )
        return counts.melt(
            id_vars="JobRole",
            value_vars=["Employees", "Attrited"],
            var_name="Stage",
            value_name="Count",
        )

    def render_figure(self, data: pd.DataFrame) -> Figure:
        return px.funnel(
            data,
            x="Count",
            y="JobRole",
            color="Stage",
            color_discrete_sequence=self.palette[::-1][:2],
            title=self.label,
        )


class JobRoleTreemapView(BaseView):
    id = "department_jobrole_treemap"
    label = "Job Roles within Departments"
    category = Category.DEPARTMENT

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return derived.groupby(["Department", "JobRole"]).size().rename("Employees").reset_index()

    def render_figure(self, data: pd.DataFrame) -> Figure:
        return px.treemap(
            data,
            path=["Department", "JobRole"],
            values="Employees",
            color_discrete_sequence=self.palette[::-1],
            title=self.label,
        )


class TenureBoxplotView(BaseView):
    id = "department_facet_boxplot_tenure"
    label = "Years at Company by Department, faceted by Attrition"
    category = Category.DEPARTMENT

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return derived[["Department", "YearsAtCompany", "Attrition"]]

    def render_figure(self, data: pd.DataFrame) -> Figure:
        fig = px.box(
            data,
            x="Department",
            y="YearsAtCompany",
            color="Department",
            facet_col="Attrition",
            color_discrete_sequence=self.palette[::-1],
            title=self.label,
        )
        fig.update_layout(showlegend=False)
        return fig
