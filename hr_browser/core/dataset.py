from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from .dimensions import FilterDimension
from .exceptions import DatasetSchemaError

logger = logging.getLogger(__name__)

AGE_BINS = [18, 26, 36, 46, 56, 66]
AGE_LABELS = ["18-25", "26-35", "36-45", "46-55", "56-65"]

INCOME_BINS = [0, 3000, 6000, 9000, 12000, 15000, np.inf]
INCOME_LABELS = ["0-3k", "3-6k", "6-9k", "9-12k", "12-15k", "15k+"]


class Dataset:
    """
    Immutable in-memory employee table, loaded once at startup.

    Includes:
    - Derivation of AgeGroup / IncomeGroup brackets when the source lacks them
    - Normalisation of filter columns to their dimension's value kind, so that
      ``frame[column] == value`` comparisons behave for every FilterDimension
    - A positional RangeIndex, so record order is the load order

    The frame is shared read-only by the Derivation Engine and every consumer;
    nothing may mutate it after construction.
    """

    def __init__(self, name: str, frame: pd.DataFrame, file_path: Optional[Path] = None) -> None:
        self.name = name
        self.file_path = file_path
        self._frame = _prepare_frame(frame)

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    @property
    def n_records(self) -> int:
        return len(self._frame)

    def values_for(self, dimension: FilterDimension) -> list:
        """Sorted distinct values present for a dimension."""
        return sorted(self._frame[dimension.column].dropna().unique().tolist())

    def __len__(self) -> int:
        return self.n_records

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, n_records={self.n_records})"


def _prepare_frame(frame: pd.DataFrame) -> pd.DataFrame:
    df = frame.copy()

    if FilterDimension.AGE_GROUP.column not in df.columns:
        if "Age" not in df.columns:
            raise DatasetSchemaError("Dataset needs either 'AgeGroup' or 'Age' to derive age brackets")
        df[FilterDimension.AGE_GROUP.column] = pd.cut(
            df["Age"], bins=AGE_BINS, labels=AGE_LABELS, right=False
        )

    if "IncomeGroup" not in df.columns and "MonthlyIncome" in df.columns:
        df["IncomeGroup"] = pd.cut(
            df["MonthlyIncome"], bins=INCOME_BINS, labels=INCOME_LABELS, right=False
        )

    missing = [dim.column for dim in FilterDimension if dim.column not in df.columns]
    if missing:
        raise DatasetSchemaError(f"Dataset is missing filter columns: {missing}")

    for dim in FilterDimension:
        col = df[dim.column]
        if dim.is_ordinal:
            numeric = pd.to_numeric(col, errors="coerce")
            # Nullable Int64 only when scores are actually missing
            df[dim.column] = numeric.astype("Int64" if numeric.isna().any() else "int64")
        else:
            # str() on a missing value would produce the literal "nan"
            df[dim.column] = col.astype(object).map(lambda v: str(v) if pd.notna(v) else None)

    if "IncomeGroup" in df.columns:
        df["IncomeGroup"] = df["IncomeGroup"].astype(object)

    return df.reset_index(drop=True)


def load_dataset(path: Path | str, name: Optional[str] = None) -> Dataset:
    """
    Load the employee table from CSV.

    Raises:
        FileNotFoundError: if the file does not exist
        DatasetSchemaError: if filter columns are missing
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Dataset file not found at {path}")

    frame = pd.read_csv(path)
    ds = Dataset(name=name or path.stem, frame=frame, file_path=path)

    logger.info(
        "Dataset loaded",
        extra={"dataset": ds.name, "file_path": str(path), "n_records": ds.n_records},
    )
    return ds
