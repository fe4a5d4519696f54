from __future__ import annotations

import math
from typing import Any, List, Sequence

import pandas as pd

from dataset_editor.core.coercion import canonical_key
from dataset_editor.core.dataset import Column, ColumnStats, ColumnType, Dataset

SAMPLE_SIZE = 5


def _python_scalar(value: Any) -> Any:
    # numpy scalars -> plain int/float so stats compare and serialise like record values
    return value.item() if hasattr(value, "item") else value


def _non_null(values: Sequence[Any]) -> pd.Series:
    series = pd.Series(list(values), dtype=object)
    return series[~series.isna()]


def compute_stats(values: Sequence[Any], column_type: ColumnType) -> ColumnStats:
    """
    Summarise a column's values.

    Numeric columns report min, max, mean (2 decimals) and distinct count over
    the numeric values. Other columns report only the distinct count. Every
    column reports its null count.
    """
    non_null = _non_null(values)
    null_count = len(values) - len(non_null)

    if ColumnType(column_type) == ColumnType.NUMBER:
        numbers = pd.Series(
            [v for v in non_null if isinstance(v, (int, float)) and not isinstance(v, bool)]
        )
        if numbers.empty:
            return ColumnStats(unique=0, null_count=null_count)

        mean = float(numbers.mean())
        return ColumnStats(
            min=_python_scalar(numbers.min()),
            max=_python_scalar(numbers.max()),
            mean=math.floor(mean * 100 + 0.5) / 100 if math.isfinite(mean) else mean,
            unique=int(numbers.nunique()),
            null_count=null_count,
        )

    # canonical keys keep 1, "1" and True distinct and cope with unhashable cells
    return ColumnStats(
        unique=int(non_null.map(canonical_key).nunique()),
        null_count=null_count,
    )


def sample_values(values: Sequence[Any], count: int = SAMPLE_SIZE) -> List[Any]:
    """First `count` distinct non-null values, in order of appearance."""
    non_null = _non_null(values)
    first_seen = ~non_null.map(canonical_key).duplicated()
    return non_null[first_seen].head(count).tolist()


def refresh_column(dataset: Dataset, column: Column) -> Column:
    """Return a copy of `column` with stats and samples recomputed from `dataset`."""
    values = dataset.column_values(column.name)
    return Column(
        name=column.name,
        type=column.type,
        sample_values=tuple(sample_values(values)),
        stats=compute_stats(values, column.type),
    )
