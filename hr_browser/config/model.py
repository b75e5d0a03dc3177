from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from hr_browser.core.dimensions import DEFAULT_CATEGORY, Category


@dataclass(frozen=True)
class ClickSourceConfig:
    """
    One entry of the ``click_sources`` table.

    - source: the chart id Plotly reports clicks under
    - dimension: FilterDimension value the click toggles
    - field: where the clicked value sits in the point ("customdata", "x" or "y")
    """
    source: str
    dimension: str
    field: str = "customdata"

    def to_raw(self) -> Dict[str, str]:
        return {"dimension": self.dimension, "field": self.field}


@dataclass
class GlobalConfig:
    ui_title: str = "HR Analytics Dashboard"
    subtitle: str = "Cross-filtered workforce explorer"
    data_file: Optional[Path] = None
    sample_size: int = 1470
    sample_seed: int = 123
    default_category: Category = DEFAULT_CATEGORY
    default_palette: str = "blues"
    click_sources: Dict[str, ClickSourceConfig] = field(default_factory=dict)

    def routing_table(self) -> Dict[str, Dict[str, Any]]:
        """The click_sources section in the shape ClickRouter.from_config expects."""
        return {name: cfg.to_raw() for name, cfg in self.click_sources.items()}
