"""
Chart layer: aggregation/pagination of the dataset of record into
chart-ready series, and Plotly views that render them.
"""

from .aggregation import (
    Aggregation,
    ChartConfig,
    ChartSeries,
    SortOrder,
    aggregate,
    build_chart_page,
    paginate,
    sort_series,
)
from .base_view import ChartView
from .scatter import ScatterSeries, build_scatter_page
from .view_registry import ViewRegistry, create_default_registry

__all__ = [
    "Aggregation",
    "ChartConfig",
    "ChartSeries",
    "SortOrder",
    "aggregate",
    "build_chart_page",
    "paginate",
    "sort_series",
    "ChartView",
    "ScatterSeries",
    "build_scatter_page",
    "ViewRegistry",
    "create_default_registry",
]
