from __future__ import annotations

import pandas as pd
import pytest

from hr_browser.core.dataset import Dataset, load_dataset
from hr_browser.core.dimensions import FilterDimension
from hr_browser.core.exceptions import DatasetSchemaError
from hr_browser.core.sample_data import generate_sample_frame


def _make_frame(**overrides):
    data = {
        "Age": [18, 25, 26, 45, 65],
        "Attrition": ["Yes", "No", "No", "Yes", "No"],
        "Department": ["Sales", "Sales", "Human Resources", "Research & Development", "Sales"],
        "EducationField": ["Medical", "Other", "Marketing", "Medical", "Life Sciences"],
        "JobRole": ["Manager", "Manager", "Human Resources", "Research Scientist", "Sales Executive"],
        "MaritalStatus": ["Single", "Married", "Divorced", "Married", "Single"],
        "MonthlyIncome": [2999, 3000, 14999, 15000, 19999],
        "JobSatisfaction": [1, 2, 3, 4, 4],
    }
    data.update(overrides)
    return pd.DataFrame(data)


def test_age_and_income_groups_are_derived():
    ds = Dataset(name="t", frame=_make_frame())
    frame = ds.frame

    assert list(frame["AgeGroup"]) == ["18-25", "18-25", "26-35", "36-45", "56-65"]
    assert list(frame["IncomeGroup"]) == ["0-3k", "3-6k", "12-15k", "15k+", "15k+"]


def test_filter_columns_are_normalised():
    ds = Dataset(name="t", frame=_make_frame(JobSatisfaction=["1", "2", "3", "4", "4"]))

    assert ds.frame["JobSatisfaction"].dtype == "int64"
    assert all(isinstance(v, str) for v in ds.frame["Department"])


def test_index_is_positional_and_order_kept():
    frame = _make_frame()
    frame.index = [10, 3, 7, 1, 0]

    ds = Dataset(name="t", frame=frame)

    assert list(ds.frame.index) == [0, 1, 2, 3, 4]
    assert list(ds.frame["Age"]) == [18, 25, 26, 45, 65]


def test_source_frame_is_copied():
    frame = _make_frame()
    ds = Dataset(name="t", frame=frame)

    frame.loc[0, "Department"] = "Changed"

    assert ds.frame.loc[0, "Department"] == "Sales"


def test_missing_filter_column_raises():
    frame = _make_frame().drop(columns=["JobRole"])

    with pytest.raises(DatasetSchemaError):
        Dataset(name="t", frame=frame)


def test_missing_age_and_age_group_raises():
    frame = _make_frame().drop(columns=["Age"])

    with pytest.raises(DatasetSchemaError):
        Dataset(name="t", frame=frame)


def test_values_for_dimension():
    ds = Dataset(name="t", frame=_make_frame())

    assert ds.values_for(FilterDimension.DEPARTMENT) == [
        "Human Resources",
        "Research & Development",
        "Sales",
    ]


def test_load_dataset_from_csv(tmp_path):
    path = tmp_path / "hr.csv"
    generate_sample_frame(n=50, seed=1).to_csv(path, index=False)

    ds = load_dataset(path)

    assert ds.name == "hr"
    assert ds.n_records == 50
    assert ds.file_path == path


def test_load_dataset_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dataset(tmp_path / "nope.csv")
