from __future__ import annotations

import numpy as np
import pandas as pd

from .dataset import Dataset

DEPARTMENTS = ["Sales", "Research & Development", "Human Resources"]
EDUCATION_FIELDS = ["Life Sciences", "Medical", "Marketing", "Technical Degree", "Other"]
JOB_ROLES = [
    "Sales Executive",
    "Research Scientist",
    "Laboratory Technician",
    "Manufacturing Director",
    "Healthcare Representative",
    "Manager",
    "Sales Representative",
    "Research Director",
    "Human Resources",
]
MARITAL_STATUSES = ["Single", "Married", "Divorced"]


def generate_sample_frame(n: int = 1470, seed: int = 123) -> pd.DataFrame:
    """
    Synthetic IBM-HR-style employee table, used when no data file is configured.
    Distributions are uniform apart from attrition (16% "Yes").
    """
    rng = np.random.default_rng(seed)
    return pd.DataFrame(
        {
            "Age": rng.integers(18, 66, n),
            "Attrition": rng.choice(["Yes", "No"], n, p=[0.16, 0.84]),
            "Department": rng.choice(DEPARTMENTS, n),
            "EducationField": rng.choice(EDUCATION_FIELDS, n),
            "JobRole": rng.choice(JOB_ROLES, n),
            "MaritalStatus": rng.choice(MARITAL_STATUSES, n),
            "MonthlyIncome": np.round(rng.uniform(1000, 20000, n)).astype(int),
            "YearsAtCompany": rng.integers(0, 41, n),
            "JobSatisfaction": rng.integers(1, 5, n),
            "EnvironmentSatisfaction": rng.integers(1, 5, n),
            "WorkLifeBalance": rng.integers(1, 5, n),
            "DistanceFromHome": rng.integers(1, 31, n),
            "Year": rng.integers(2010, 2021, n),
        }
    )


def generate_sample_dataset(n: int = 1470, seed: int = 123) -> Dataset:
    return Dataset(name="Sample HR Data", frame=generate_sample_frame(n=n, seed=seed))
