from __future__ import annotations

import plotly.express as px
import plotly.graph_objects as go

from dataset_editor.charts.aggregation import ChartConfig, ChartSeries
from dataset_editor.charts.base_view import ChartView


class TreemapChartView(ChartView):
    """
    Nested rectangles sized by aggregated value.
    """

    id = "treemap"
    label = "Treemap"

    def render_figure(self, series: ChartSeries, config: ChartConfig) -> go.Figure:
        if len(series) == 0:
            return self.empty_figure("No categories on this page - go back a page")

        fig = px.treemap(
            self.series_frame(series),
            path=["category"],
            values="value",
        )
        fig.update_traces(textinfo="label+value")

        fig.update_layout(
            title=self.chart_title(series, config),
            height=500,
            margin=dict(l=20, r=20, t=60, b=20),
        )
        return fig
