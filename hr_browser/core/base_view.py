from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

import pandas as pd
import plotly.graph_objs as go

from .dimensions import Category

NO_DATA_MESSAGE = "No data for selected filters"


class BaseView(ABC):
    """
    Abstract base class for all chart views (consumers of the derived dataset).

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally and as the Plotly click source
    - expose a 'label' - used for UI/human-readable applications
    - expose a 'category' - the analysis view the chart is mounted in
    - set 'click_source' if clicks on the chart should cross-filter
    - implement 'compute_data' - used to shape the derived dataset for plotting
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None
    category: Category = None
    click_source: Optional[str] = None
    width: int = 6

    def __init__(self, palette: Sequence[str]):
        self.palette = list(palette)

    @abstractmethod
    def compute_data(self, derived: pd.DataFrame) -> Any:
        """
        Shape the derived dataset for this chart (aggregation lives here, not in the engine)
        :param derived: the current DerivedDataset, never mutated
        :return: data: whatever render_figure expects
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :return: the Plotly figure
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def figure_for(self, derived: pd.DataFrame) -> go.Figure:
        """
        Full consumer pipeline: empty derived data -> standard message figure,
        otherwise compute + render.
        """
        if derived.empty:
            return self.empty_figure(NO_DATA_MESSAGE)

        data = self.compute_data(derived)
        if data is None or (isinstance(data, pd.DataFrame) and data.empty):
            return self.empty_figure(NO_DATA_MESSAGE)

        fig = self.render_figure(data)
        fig.update_layout(margin=dict(l=40, r=20, t=50, b=40))
        return fig

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
