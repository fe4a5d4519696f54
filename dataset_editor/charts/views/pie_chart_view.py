from __future__ import annotations

import plotly.express as px
import plotly.graph_objects as go

from dataset_editor.charts.aggregation import ChartConfig, ChartSeries
from dataset_editor.charts.base_view import ChartView


class PieChartView(ChartView):
    """
    Share of each category on the current page.
    """

    id = "pie"
    label = "Pie Chart"
    hole = 0.0

    def render_figure(self, series: ChartSeries, config: ChartConfig) -> go.Figure:
        if len(series) == 0:
            return self.empty_figure("No categories on this page - go back a page")

        fig = px.pie(
            self.series_frame(series),
            names="category",
            values="value",
            hole=self.hole,
        )

        fig.update_layout(
            title=self.chart_title(series, config),
            height=500,
            legend_title=config.x_axis or "Category",
        )
        return fig


class DonutChartView(PieChartView):
    id = "donut"
    label = "Donut Chart"
    hole = 0.5
