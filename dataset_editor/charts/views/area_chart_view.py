from __future__ import annotations

import plotly.express as px
import plotly.graph_objects as go

from dataset_editor.charts.aggregation import ChartConfig, ChartSeries
from dataset_editor.charts.base_view import ChartView


class AreaChartView(ChartView):
    """
    Line chart with the area under the aggregated values filled.
    """

    id = "area"
    label = "Area Chart"

    def render_figure(self, series: ChartSeries, config: ChartConfig) -> go.Figure:
        if len(series) == 0:
            return self.empty_figure("No categories on this page - go back a page")

        fig = px.area(
            self.series_frame(series),
            x="category",
            y="value",
            markers=True,
        )

        fig.update_layout(
            title=self.chart_title(series, config),
            height=500,
            margin=dict(l=40, r=40, t=60, b=40),
            xaxis_title=config.x_axis or "Category",
            yaxis_title=config.y_axis or "Value",
        )
        return fig
