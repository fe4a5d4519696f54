from __future__ import annotations

from typing import Optional

import plotly.express as px
import plotly.graph_objects as go

from dataset_editor.charts.aggregation import ChartConfig
from dataset_editor.charts.base_view import ChartView
from dataset_editor.charts.scatter import ScatterSeries, build_scatter_page


class ScatterChartView(ChartView):
    """
    One point per record, x and y read as numbers.

    Unlike the category charts this view does not aggregate: pages are slices
    of the records and total_count is the record count.
    """

    id = "scatter"
    label = "Scatter Plot"

    def compute_data(
        self, config: ChartConfig, page_start: int = 0, page_size: Optional[int] = None
    ) -> ScatterSeries:
        return build_scatter_page(self.dataset, config, page_start, self.resolve_page_size(page_size))

    def render_figure(self, series: ScatterSeries, config: ChartConfig) -> go.Figure:
        if len(series) == 0:
            return self.empty_figure("No rows on this page - go back a page")

        fig = px.scatter(series.to_frame(), x="x", y="y")

        if config.title:
            title = config.title
        elif series.is_fallback:
            title = "Sample data - choose X and Y axes"
        else:
            title = f"{series.y_axis} vs {series.x_axis}"

        fig.update_layout(
            title=title,
            height=500,
            margin=dict(l=40, r=40, t=60, b=40),
            xaxis_title=series.x_axis or "X",
            yaxis_title=series.y_axis or "Y",
        )
        return fig
