"""
Transformation operations: pure functions (Dataset, params) -> OperationResult.

Editing surfaces can either call the functions directly or issue
(operation, params) pairs through `apply_operation`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Optional

from dataset_editor.core.dataset import Dataset
from dataset_editor.core.exceptions import UnknownOperationError

from .cleaning_ops import fill_nulls, find_and_replace, remove_null_rows, trim_whitespace
from .column_ops import (
    change_column_type,
    refresh_column_stats,
    remove_column,
    rename_column,
    reorder_columns,
)
from .result import OperationResult
from .row_ops import filter_rows, remove_duplicates, remove_row, remove_rows


class OperationType(str, Enum):
    """Available transformation operation names."""
    REMOVE_COLUMN = "remove_column"
    RENAME_COLUMN = "rename_column"
    CHANGE_COLUMN_TYPE = "change_column_type"
    REORDER_COLUMNS = "reorder_columns"
    REMOVE_ROW = "remove_row"
    REMOVE_ROWS = "remove_rows"
    REMOVE_DUPLICATES = "remove_duplicates"
    FILTER_ROWS = "filter_rows"
    FIND_AND_REPLACE = "find_and_replace"
    TRIM_WHITESPACE = "trim_whitespace"
    FILL_NULLS = "fill_nulls"
    REMOVE_NULL_ROWS = "remove_null_rows"
    REFRESH_COLUMN_STATS = "refresh_column_stats"


OPERATIONS: Dict[OperationType, Callable[..., Optional[OperationResult]]] = {
    OperationType.REMOVE_COLUMN: remove_column,
    OperationType.RENAME_COLUMN: rename_column,
    OperationType.CHANGE_COLUMN_TYPE: change_column_type,
    OperationType.REORDER_COLUMNS: reorder_columns,
    OperationType.REMOVE_ROW: remove_row,
    OperationType.REMOVE_ROWS: remove_rows,
    OperationType.REMOVE_DUPLICATES: remove_duplicates,
    OperationType.FILTER_ROWS: filter_rows,
    OperationType.FIND_AND_REPLACE: find_and_replace,
    OperationType.TRIM_WHITESPACE: trim_whitespace,
    OperationType.FILL_NULLS: fill_nulls,
    OperationType.REMOVE_NULL_ROWS: remove_null_rows,
    OperationType.REFRESH_COLUMN_STATS: refresh_column_stats,
}


def apply_operation(
    dataset: Optional[Dataset],
    operation: OperationType | str,
    **params: Any,
) -> Optional[OperationResult]:
    """
    Run the named operation against `dataset`.

    Raises:
        UnknownOperationError: if `operation` is not a registered name
    """
    try:
        op_type = OperationType(operation)
    except ValueError:
        raise UnknownOperationError(f"Unknown operation: {operation}")

    return OPERATIONS[op_type](dataset, **params)


__all__ = [
    "OperationResult",
    "OperationType",
    "OPERATIONS",
    "apply_operation",
    "remove_column",
    "rename_column",
    "change_column_type",
    "reorder_columns",
    "refresh_column_stats",
    "remove_row",
    "remove_rows",
    "remove_duplicates",
    "filter_rows",
    "find_and_replace",
    "trim_whitespace",
    "fill_nulls",
    "remove_null_rows",
]
