from .bar_chart_view import BarChartView
from .line_chart_view import LineChartView
from .area_chart_view import AreaChartView
from .histogram_chart_view import HistogramChartView
from .pie_chart_view import PieChartView, DonutChartView
from .funnel_chart_view import FunnelChartView
from .treemap_chart_view import TreemapChartView
from .scatter_chart_view import ScatterChartView

__all__ = [
    "BarChartView",
    "LineChartView",
    "AreaChartView",
    "HistogramChartView",
    "PieChartView",
    "DonutChartView",
    "FunnelChartView",
    "TreemapChartView",
    "ScatterChartView",
]
