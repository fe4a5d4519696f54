"""
Structural column edits.

Every function takes the current Dataset (or None) and returns an
OperationResult, or None when there is nothing to do.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

from dataset_editor.core.coercion import to_boolean, to_number, to_text
from dataset_editor.core.column_stats import refresh_column
from dataset_editor.core.dataset import Column, ColumnType, Dataset, Record
from dataset_editor.operations.result import OperationResult


def remove_column(dataset: Optional[Dataset], name: str) -> Optional[OperationResult]:
    """Drop a column and its key from every record. No-op for unknown columns."""
    if dataset is None or not dataset.has_column(name):
        return None

    columns = [c for c in dataset.columns if c.name != name]
    data = [{k: v for k, v in row.items() if k != name} for row in dataset.data]

    return OperationResult(
        dataset.evolve(columns=columns, data=data),
        f'Removed column "{name}"',
    )


def rename_column(dataset: Optional[Dataset], old_name: str, new_name: str) -> Optional[OperationResult]:
    """
    Rename a column and re-key every record, keeping key order.

    Renaming onto an existing column name is not guarded; the renamed values
    overwrite the other column's values in each record.
    """
    if dataset is None or old_name == new_name:
        return None

    columns = [replace(c, name=new_name) if c.name == old_name else c for c in dataset.columns]

    data: List[Record] = []
    for row in dataset.data:
        new_row: Record = {}
        for key, value in row.items():
            new_row[new_name if key == old_name else key] = value
        data.append(new_row)

    return OperationResult(
        dataset.evolve(columns=columns, data=data),
        f'Renamed column "{old_name}" to "{new_name}"',
    )


def convert_value(value: Any, column_type: ColumnType) -> Any:
    """
    Coerce one cell to `column_type`. None passes through untouched.

    - number: numeric reading, None when the text is not a number
    - string / date: text form
    - boolean: True only for "true", True or 1
    """
    if value is None:
        return None

    column_type = ColumnType(column_type)
    if column_type == ColumnType.NUMBER:
        return to_number(value)
    if column_type == ColumnType.BOOLEAN:
        return to_boolean(value)
    return to_text(value)


def change_column_type(
    dataset: Optional[Dataset],
    name: str,
    new_type: ColumnType | str,
) -> Optional[OperationResult]:
    """Change a column's declared type and convert its values (lossy by policy)."""
    if dataset is None:
        return None

    new_type = ColumnType(new_type)
    columns = [replace(c, type=new_type) if c.name == name else c for c in dataset.columns]

    data: List[Record] = []
    for row in dataset.data:
        if name in row:
            row = {**row, name: convert_value(row[name], new_type)}
        data.append(row)

    return OperationResult(
        dataset.evolve(columns=columns, data=data),
        f'Changed column "{name}" type to {new_type.value}',
    )


def reorder_columns(dataset: Optional[Dataset], new_order: Sequence[str]) -> Optional[OperationResult]:
    """
    Rebuild the column list in `new_order`.

    Unknown names are skipped and repeated names count once. Columns left out
    of `new_order` drop off the column list; records are not touched.
    """
    if dataset is None:
        return None

    by_name: Dict[str, Column] = {c.name: c for c in dataset.columns}
    ordered: List[Column] = []
    for col_name in new_order:
        col = by_name.pop(col_name, None)
        if col is not None:
            ordered.append(col)

    return OperationResult(dataset.evolve(columns=ordered), "Reordered columns")


def refresh_column_stats(dataset: Optional[Dataset]) -> Optional[OperationResult]:
    """Recompute the informational stats and sample values of every column."""
    if dataset is None:
        return None

    columns = [refresh_column(dataset, c) for c in dataset.columns]
    return OperationResult(dataset.evolve(columns=columns), "Recomputed column statistics")
