from __future__ import annotations

import math
from enum import Enum
from typing import Any


class FilterDimension(str, Enum):
    """
    The fixed set of independently toggleable filter axes.

    Each member knows the dataset column it constrains and whether its values are
    categorical strings or ordinal integers, so raw click payloads can be coerced
    before they reach the FilterStore.
    """

    ATTRITION = "attrition"
    DEPARTMENT = "department"
    AGE_GROUP = "age_group"
    MARITAL_STATUS = "marital_status"
    EDUCATION_FIELD = "education_field"
    JOB_SATISFACTION = "job_satisfaction"
    JOB_ROLE = "job_role"

    @property
    def column(self) -> str:
        return _COLUMNS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_ordinal(self) -> bool:
        return self is FilterDimension.JOB_SATISFACTION

    def coerce(self, value: Any) -> Any:
        """
        Normalise a raw value into this dimension's value domain.

        Plotly reports ordinal axis values as floats (``3.0``) or strings, so
        ordinal dimensions are cast to int; everything else becomes a string.

        Raises:
            ValueError: for ordinal values that are not whole finite numbers (``3.7``, ``"inf"``)
        """
        if value is None:
            return None
        if self.is_ordinal:
            number = float(value)
            if not math.isfinite(number) or not number.is_integer():
                raise ValueError(f"{self.label} expects a whole number, got {value!r}")
            return int(number)
        return str(value)

    @classmethod
    def parse(cls, raw: str) -> "FilterDimension":
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown filter dimension '{raw}'. "
                f"Expected one of: {[d.value for d in cls]}"
            )


_COLUMNS = {
    FilterDimension.ATTRITION: "Attrition",
    FilterDimension.DEPARTMENT: "Department",
    FilterDimension.AGE_GROUP: "AgeGroup",
    FilterDimension.MARITAL_STATUS: "MaritalStatus",
    FilterDimension.EDUCATION_FIELD: "EducationField",
    FilterDimension.JOB_SATISFACTION: "JobSatisfaction",
    FilterDimension.JOB_ROLE: "JobRole",
}

_LABELS = {
    FilterDimension.ATTRITION: "Attrition",
    FilterDimension.DEPARTMENT: "Department",
    FilterDimension.AGE_GROUP: "Age Group",
    FilterDimension.MARITAL_STATUS: "Marital Status",
    FilterDimension.EDUCATION_FIELD: "Education Field",
    FilterDimension.JOB_SATISFACTION: "Job Satisfaction",
    FilterDimension.JOB_ROLE: "Job Role",
}


class Category(str, Enum):
    """Analysis views the sidebar can switch between. Exactly one is active."""

    ATTRITION = "attrition"
    INCOME = "income"
    SATISFACTION = "satisfaction"
    DEMOGRAPHIC = "demographic"
    DEPARTMENT = "department"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Analysis"

    @classmethod
    def parse(cls, raw: str) -> "Category":
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown category '{raw}'. Expected one of: {[c.value for c in cls]}"
            )


DEFAULT_CATEGORY = Category.ATTRITION
