from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence

import pandas as pd

from dataset_editor.core.coercion import to_number_or_zero, to_text

UNKNOWN_CATEGORY = "Unknown"

# Shown instead of an empty chart when there is nothing to aggregate
FALLBACK_CATEGORIES = ("Category A", "Category B", "Category C", "Category D", "Category E")
FALLBACK_VALUES = (150, 230, 224, 218, 135)


class Aggregation(str, Enum):
    """How grouped y-values are reduced to one number per category."""
    SUM = "sum"
    AVG = "avg"
    COUNT = "count"
    MIN = "min"
    MAX = "max"


class SortOrder(str, Enum):
    NONE = "none"
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class ChartConfig:
    """
    User-selected chart parameters.

    - x_axis: column whose string form defines the categories
    - y_axis: column whose numeric reading is aggregated
    - aggregation: reduction applied per category
    - sort_order: ordering of categories by aggregated value
    - title: chart title used by the views
    """
    x_axis: Optional[str] = None
    y_axis: Optional[str] = None
    aggregation: Aggregation = Aggregation.SUM
    sort_order: SortOrder = SortOrder.NONE
    title: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "aggregation", Aggregation(self.aggregation))
        object.__setattr__(self, "sort_order", SortOrder(self.sort_order))


@dataclass(frozen=True)
class ChartSeries:
    """
    Aggregated (category, value) pairs.

    `total_count` is the number of categories before any page slicing, so callers
    can compute page counts. `is_fallback` marks the fixed placeholder series.
    """
    categories: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)
    total_count: int = 0
    is_fallback: bool = False

    def __len__(self) -> int:
        return len(self.categories)


def round_half_up(value: float, ndigits: int = 2) -> float:
    """Round to `ndigits` decimals with halves rounded towards +infinity."""
    if not math.isfinite(value):
        return value
    scale = 10 ** ndigits
    rounded = math.floor(value * scale + 0.5) / scale
    return int(rounded) if rounded == int(rounded) else rounded


_PANDAS_REDUCERS = {
    Aggregation.SUM: "sum",
    Aggregation.AVG: "mean",
    Aggregation.COUNT: "size",
    Aggregation.MIN: "min",
    Aggregation.MAX: "max",
}


def aggregate(
    data: Sequence[Mapping[str, Any]],
    x_axis: Optional[str],
    y_axis: Optional[str],
    aggregation: Aggregation | str = Aggregation.SUM,
) -> ChartSeries:
    """
    Group records by x category and reduce each group's y values.

    Notes:
    - categories keep first-seen order
    - a null or missing x value falls into the "Unknown" category
    - non-numeric y values count as 0 rather than being skipped
    - values are rounded to 2 decimals
    - unset axes or no data give an empty series
    """
    if not x_axis or not y_axis or not data:
        return ChartSeries()

    aggregation = Aggregation(aggregation)

    df = pd.DataFrame(
        {
            "category": [
                UNKNOWN_CATEGORY if row.get(x_axis) is None else to_text(row.get(x_axis))
                for row in data
            ],
            "value": pd.Series([to_number_or_zero(row.get(y_axis)) for row in data], dtype="float64"),
        }
    )
    reduced = df.groupby("category", sort=False)["value"].agg(_PANDAS_REDUCERS[aggregation])

    categories = [str(c) for c in reduced.index]
    values = [round_half_up(float(v)) for v in reduced.to_numpy()]

    return ChartSeries(categories=categories, values=values, total_count=len(categories))


def sort_series(series: ChartSeries, order: SortOrder | str) -> ChartSeries:
    """Order categories by value; SortOrder.NONE keeps first-seen order. Ties keep their order."""
    order = SortOrder(order)
    if order == SortOrder.NONE or not series.categories:
        return series

    positions = (
        pd.Series(series.values, dtype="float64")
        .sort_values(ascending=order == SortOrder.ASC, kind="stable")
        .index
    )
    return replace(
        series,
        categories=[series.categories[i] for i in positions],
        values=[series.values[i] for i in positions],
    )


def paginate(series: ChartSeries, page_start: int, page_size: int) -> ChartSeries:
    """Slice [page_start, page_start + page_size), keeping the pre-slice total_count."""
    page_start = max(page_start, 0)
    end = page_start + max(page_size, 0)
    return replace(
        series,
        categories=series.categories[page_start:end],
        values=series.values[page_start:end],
    )


def fallback_series() -> ChartSeries:
    return ChartSeries(
        categories=list(FALLBACK_CATEGORIES),
        values=list(FALLBACK_VALUES),
        total_count=len(FALLBACK_CATEGORIES),
        is_fallback=True,
    )


def build_chart_page(
    data: Optional[Sequence[Mapping[str, Any]]],
    config: ChartConfig,
    page_start: int = 0,
    page_size: int = 10,
) -> ChartSeries:
    """
    Full pipeline: aggregate -> sort -> paginate.

    When nothing can be aggregated (axis unset or no records) the fixed
    five-category fallback series is returned unpaginated, so a chart is never blank.
    """
    series = aggregate(data or [], config.x_axis, config.y_axis, config.aggregation)
    if series.total_count == 0:
        return fallback_series()

    return paginate(sort_series(series, config.sort_order), page_start, page_size)
