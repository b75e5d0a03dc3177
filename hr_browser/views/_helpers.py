from __future__ import annotations

from typing import List

import pandas as pd

from hr_browser.core.dataset import AGE_LABELS


def present_age_groups(frame: pd.DataFrame) -> List[str]:
    """Age brackets present in the frame, in bracket order rather than alphabetical."""
    present = set(frame["AgeGroup"].dropna())
    return [label for label in AGE_LABELS if label in present]
