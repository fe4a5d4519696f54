from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pandas as pd

from dataset_editor.core.coercion import to_number_or_zero
from dataset_editor.core.dataset import ColumnType, Dataset

from .aggregation import ChartConfig

Point = Tuple[float, float]

# Shown when there are no rows to plot
FALLBACK_POINTS: Tuple[Point, ...] = (
    (10.0, 8.04), (8.07, 6.95), (13.0, 7.58), (9.05, 8.81), (11.0, 8.33),
    (14.0, 7.66), (13.4, 6.81), (10.0, 6.33), (14.0, 8.96), (12.5, 6.82),
)


@dataclass(frozen=True)
class ScatterSeries:
    """
    One (x, y) point per record on the current page.

    `total_count` is the number of records before page slicing; x_axis/y_axis
    are the columns actually plotted (resolved from the dataset when the config
    leaves them unset).
    """
    points: List[Point] = field(default_factory=list)
    total_count: int = 0
    x_axis: Optional[str] = None
    y_axis: Optional[str] = None
    is_fallback: bool = False

    def __len__(self) -> int:
        return len(self.points)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.points, columns=["x", "y"], dtype="float64")


def fallback_points() -> ScatterSeries:
    return ScatterSeries(points=list(FALLBACK_POINTS), total_count=len(FALLBACK_POINTS), is_fallback=True)


def resolve_axes(dataset: Dataset, config: ChartConfig) -> Tuple[Optional[str], Optional[str]]:
    """Configured axes, defaulting to the first and second number columns."""
    numeric = [c.name for c in dataset.columns if c.type == ColumnType.NUMBER]
    x_axis = config.x_axis or (numeric[0] if len(numeric) > 0 else None)
    y_axis = config.y_axis or (numeric[1] if len(numeric) > 1 else None)
    return x_axis, y_axis


def build_scatter_page(
    dataset: Optional[Dataset],
    config: ChartConfig,
    page_start: int = 0,
    page_size: int = 10,
) -> ScatterSeries:
    """
    Row-level scatter data: every record becomes (Number(x) || 0, Number(y) || 0).

    Records are paginated directly (no grouping). Without rows, or when no
    x/y column can be resolved, the fixed sample points are returned unpaginated.
    """
    if dataset is None or not dataset.data:
        return fallback_points()

    x_axis, y_axis = resolve_axes(dataset, config)
    if not x_axis or not y_axis:
        return fallback_points()

    page_start = max(page_start, 0)
    rows = dataset.data[page_start:page_start + max(page_size, 0)]
    points = [
        (float(to_number_or_zero(row.get(x_axis))), float(to_number_or_zero(row.get(y_axis))))
        for row in rows
    ]
    return ScatterSeries(points=points, total_count=dataset.rows, x_axis=x_axis, y_axis=y_axis)
