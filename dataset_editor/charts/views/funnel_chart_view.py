from __future__ import annotations

import plotly.graph_objects as go

from dataset_editor.charts.aggregation import ChartConfig, ChartSeries
from dataset_editor.charts.base_view import ChartView


class FunnelChartView(ChartView):
    """
    Funnel stages, widest first.

    Stages are always drawn in descending value order regardless of the
    configured sort, so the funnel narrows top to bottom.
    """

    id = "funnel"
    label = "Funnel"

    def render_figure(self, series: ChartSeries, config: ChartConfig) -> go.Figure:
        if len(series) == 0:
            return self.empty_figure("No categories on this page - go back a page")

        stages = sorted(zip(series.categories, series.values), key=lambda s: s[1], reverse=True)

        fig = go.Figure(
            go.Funnel(
                y=[name for name, _ in stages],
                x=[value for _, value in stages],
                textinfo="value+percent initial",
            )
        )

        fig.update_layout(
            title=self.chart_title(series, config),
            height=500,
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
