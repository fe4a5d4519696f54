"""
Cell-level cleaning operations.

All operations are parameterised and pure: they return a new Dataset plus a
description that reports how many cells or rows were touched.
"""

from __future__ import annotations

import re
from typing import Any, List, Optional, Sequence

from dataset_editor.core.dataset import ColumnType, Dataset, Record
from dataset_editor.operations.result import OperationResult


def find_and_replace(
    dataset: Optional[Dataset],
    column: str,
    find: str,
    replace: str,
    match_case: bool = False,
) -> Optional[OperationResult]:
    """
    Replace every literal occurrence of `find` in the string cells of `column`.

    Matching ignores case unless `match_case` is set. Non-string cells are left
    alone. The description counts affected records, not occurrences.
    """
    if dataset is None:
        return None

    pattern = re.compile(re.escape(find), 0 if match_case else re.IGNORECASE)
    needle = find if match_case else find.lower()

    count = 0
    data: List[Record] = []
    for row in dataset.data:
        value = row.get(column)
        if isinstance(value, str):
            haystack = value if match_case else value.lower()
            if needle in haystack:
                count += 1
                row = {**row, column: pattern.sub(lambda _m: replace, value)}
        data.append(row)

    return OperationResult(
        dataset.evolve(data=data),
        f'Replaced {count} occurrences in "{column}"',
    )


def trim_whitespace(
    dataset: Optional[Dataset],
    column_names: Optional[Sequence[str]] = None,
) -> Optional[OperationResult]:
    """Strip leading/trailing whitespace (default: every string-typed column)."""
    if dataset is None:
        return None

    if column_names is None:
        cols = [c.name for c in dataset.columns if c.type == ColumnType.STRING]
    else:
        cols = list(column_names)

    data: List[Record] = []
    for row in dataset.data:
        new_row = dict(row)
        for col in cols:
            value = new_row.get(col)
            if isinstance(value, str):
                new_row[col] = value.strip()
        data.append(new_row)

    return OperationResult(
        dataset.evolve(data=data),
        f"Trimmed whitespace in {len(cols)} columns",
    )


def fill_nulls(dataset: Optional[Dataset], column: str, value: Any) -> Optional[OperationResult]:
    """Replace null or absent cells of `column` with `value`."""
    if dataset is None:
        return None

    count = 0
    data: List[Record] = []
    for row in dataset.data:
        if row.get(column) is None:
            count += 1
            row = {**row, column: value}
        data.append(row)

    return OperationResult(
        dataset.evolve(data=data),
        f'Filled {count} null values in "{column}"',
    )


def remove_null_rows(dataset: Optional[Dataset], column: str) -> Optional[OperationResult]:
    """Drop every record whose `column` is null, absent or the empty string."""
    if dataset is None:
        return None

    data = [row for row in dataset.data if row.get(column) not in (None, "")]
    removed = dataset.rows - len(data)

    return OperationResult(
        dataset.evolve(data=data),
        f'Removed {removed} rows with null values in "{column}"',
    )
