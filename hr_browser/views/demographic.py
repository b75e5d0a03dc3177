from __future__ import annotations

import pandas as pd
import plotly.express as px
from plotly.graph_objs import Figure

from hr_browser.core.base_view import BaseView
from hr_browser.core.dimensions import Category
from hr_browser.views._helpers import present_age_groups


class AgeByTenureView(BaseView):
    """
    Average age against years at company, one line per department.
    Lines carry Department as customdata; clicking one toggles the department filter.
    """

    id = "demographic_line_age_tenure_plot"
    label = "Average Age by Tenure per Department"
    category = Category.DEMOGRAPHIC
    click_source = "demographic_line_age_tenure_plot"

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return (
            derived.groupby(["Department", "YearsAtCompany"])["Age"]
            .mean()
            .rename("AvgAge")
            .reset_index()
        )

    def render_figure(self, data: pd.DataFrame) -> Figure:
        return px.line(
            data,
            x="YearsAtCompany",
            y="AvgAge",
            color="Department",
            custom_data=["Department"],
            markers=True,
            color_discrete_sequence=self.palette[::-1],
            title=self.label,
        )


class IncomeByAgeGroupView(BaseView):
    """Average income per age bracket, one line per marital status (customdata = MaritalStatus)."""

    id = "demographic_line_income_agegroup_plot"
    label = "Average Income by Age Group and Marital Status"
    category = Category.DEMOGRAPHIC
    click_source = "demographic_line_income_agegroup_plot"

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return (
            derived.groupby(["MaritalStatus", "AgeGroup"])["MonthlyIncome"]
            .mean()
            .rename("AvgMonthlyIncome")
            .reset_index()
        )

    def render_figure(self, data: pd.DataFrame) -> Figure:
        return px.line(
            data,
            x="AgeGroup",
            y="AvgMonthlyIncome",
            color="MaritalStatus",
            custom_data=["MaritalStatus"],
            markers=True,
            category_orders={"AgeGroup": present_age_groups(data)},
            color_discrete_sequence=self.palette[::-1],
            title=self.label,
        )


class TenureByAgeGroupView(BaseView):
    """Years at company per age bracket; the clicked violin's x is the AgeGroup."""

    id = "demographic_violin_tenure_agegroup_plot"
    label = "Tenure Distribution by Age Group"
    category = Category.DEMOGRAPHIC
    click_source = "demographic_violin_tenure_agegroup_plot"

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return derived[["AgeGroup", "YearsAtCompany"]].dropna()

    def render_figure(self, data: pd.DataFrame) -> Figure:
        fig = px.violin(
            data,
            x="AgeGroup",
            y="YearsAtCompany",
            color="AgeGroup",
            box=True,
            category_orders={"AgeGroup": present_age_groups(data)},
            color_discrete_sequence=self.palette,
            title=self.label,
        )
        fig.update_layout(showlegend=False)
        return fig


class EmployeeCountTimeseriesView(BaseView):
    """Headcount per year, one line per department (customdata = Department)."""

    id = "demographic_timeseries_employee_count_plot"
    label = "Employee Count over Years by Department"
    category = Category.DEMOGRAPHIC
    click_source = "demographic_timeseries_employee_count_plot"

    def compute_data(self, derived: pd.DataFrame) -> pd.DataFrame:
        return (
            derived.groupby(["Department", "Year"])
            .size()
            .rename("EmployeeCount")
            .reset_index()
        )

    def render_figure(self, data: pd.DataFrame) -> Figure:
        return px.line(
            data,
            x="Year",
            y="EmployeeCount",
            color="Department",
            custom_data=["Department"],
            markers=True,
            color_discrete_sequence=self.palette[::-1],
            title=self.label,
        )
