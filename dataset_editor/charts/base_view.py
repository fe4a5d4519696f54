from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import pandas as pd
import plotly.graph_objs as go

from dataset_editor.config import EditorSettings
from dataset_editor.core.dataset import Dataset

from .aggregation import ChartConfig, ChartSeries, build_chart_page


class ChartView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every chart in the editor must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - 'compute_data' - aggregates one page of the dataset for a ChartConfig
    - implement 'render_figure' - used to render the page using Plotly

    The dataset is read-only input; views never write back to it.
    """

    id: str = None
    label: str = None

    def __init__(self, dataset: Optional[Dataset], settings: Optional[EditorSettings] = None):
        self.dataset = dataset
        self.settings = settings or EditorSettings()

    def compute_data(self, config: ChartConfig, page_start: int = 0, page_size: Optional[int] = None) -> ChartSeries:
        """
        Compute one page of aggregated data for the given config
        :param config: the axis/aggregation/sort selection
        :param page_start: zero-based offset of the first category
        :param page_size: number of categories on the page (settings default when None)
        :return: the ChartSeries for the page (fallback series when there is nothing to aggregate)
        """
        data = self.dataset.data if self.dataset is not None else ()
        return build_chart_page(data, config, page_start, self.resolve_page_size(page_size))

    def resolve_page_size(self, page_size: Optional[int]) -> int:
        """Explicit page size if given (0 included), else the settings default."""
        return self.settings.default_page_size if page_size is None else page_size

    @abstractmethod
    def render_figure(self, series: ChartSeries, config: ChartConfig) -> go.Figure:
        """
        Render the figure given the computed page
        :param series: the data provided by {@link compute_data()}
        :param config: the chart configuration used to compute it
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    @staticmethod
    def series_frame(series: ChartSeries) -> pd.DataFrame:
        """Series as a two-column DataFrame (category, value) for plotly express."""
        return pd.DataFrame({"category": series.categories, "value": series.values})

    @staticmethod
    def chart_title(series: ChartSeries, config: ChartConfig) -> str:
        if config.title:
            return config.title
        if series.is_fallback:
            return "Sample data - choose X and Y axes"
        return f"{config.aggregation.value} of {config.y_axis} by {config.x_axis}"

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
