from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import pandas as pd

ATTRITION_ALERT_PCT = 15.0


@dataclass(frozen=True)
class KpiSummary:
    """
    Headline numbers shown above the chart grid.

    Averages are None on an empty derived dataset rather than NaN, so the
    widgets can print an explicit placeholder.
    """
    total_employees: int
    attrition_rate_pct: float
    avg_monthly_income: Optional[float]
    avg_years_at_company: Optional[float]

    @property
    def attrition_alert(self) -> bool:
        return self.attrition_rate_pct > ATTRITION_ALERT_PCT

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _mean(series: pd.Series) -> Optional[float]:
    value = series.mean(skipna=True)
    return None if pd.isna(value) else float(value)


def compute_kpis(derived: pd.DataFrame) -> KpiSummary:
    total = len(derived)
    if total == 0:
        return KpiSummary(0, 0.0, None, None)

    attrited = int((derived["Attrition"] == "Yes").sum())
    return KpiSummary(
        total_employees=total,
        attrition_rate_pct=attrited / total * 100,
        avg_monthly_income=_mean(derived["MonthlyIncome"]) if "MonthlyIncome" in derived else None,
        avg_years_at_company=_mean(derived["YearsAtCompany"]) if "YearsAtCompany" in derived else None,
    )


def format_kpis(summary: KpiSummary) -> Dict[str, str]:
    """Display strings for the four value boxes."""
    return {
        "total_employees": f"{summary.total_employees:,}",
        "attrition_rate": f"{round(summary.attrition_rate_pct, 2)}%",
        "avg_monthly_income": (
            "n/a" if summary.avg_monthly_income is None else f"${round(summary.avg_monthly_income):,}"
        ),
        "avg_years_at_company": (
            "n/a" if summary.avg_years_at_company is None else f"{round(summary.avg_years_at_company, 1)}"
        ),
    }
