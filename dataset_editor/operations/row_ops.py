"""
Row removal and filtering.

Row indices are zero-based positions in the Dataset's current `data`; they are
not stable record identities, so callers must compute them against the same
Dataset they pass in.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from dataset_editor.core.coercion import MISSING, canonical_key
from dataset_editor.core.dataset import Dataset, Record
from dataset_editor.operations.result import OperationResult

RowPredicate = Callable[[Record], bool]


def remove_row(dataset: Optional[Dataset], index: int) -> Optional[OperationResult]:
    """Delete the record at `index`. An out-of-range index removes nothing."""
    if dataset is None:
        return None

    data = [row for i, row in enumerate(dataset.data) if i != index]
    return OperationResult(dataset.evolve(data=data), f"Removed row {index + 1}")


def remove_rows(dataset: Optional[Dataset], indices: Iterable[int]) -> Optional[OperationResult]:
    """Delete every record whose position is in `indices`."""
    if dataset is None:
        return None

    indices = list(indices)
    index_set = set(indices)
    data = [row for i, row in enumerate(dataset.data) if i not in index_set]

    return OperationResult(dataset.evolve(data=data), f"Removed {len(indices)} rows")


def _row_key(row: Record, columns: Sequence[str]) -> Tuple[str, ...]:
    return tuple(canonical_key(row.get(col, MISSING)) for col in columns)


def remove_duplicates(
    dataset: Optional[Dataset],
    column_names: Optional[Sequence[str]] = None,
) -> Optional[OperationResult]:
    """
    Keep the first record for each distinct key and drop later repeats.

    The key is built from `column_names` (default: every column), with values
    compared through their canonical encoding. Record order is preserved.
    """
    if dataset is None:
        return None

    cols = list(column_names) if column_names is not None else dataset.column_names

    seen: set[Tuple[str, ...]] = set()
    data: List[Record] = []
    for row in dataset.data:
        key = _row_key(row, cols)
        if key in seen:
            continue
        seen.add(key)
        data.append(row)

    removed = dataset.rows - len(data)
    return OperationResult(dataset.evolve(data=data), f"Removed {removed} duplicate rows")


def filter_rows(
    dataset: Optional[Dataset],
    predicate: RowPredicate,
    description: str,
) -> Optional[OperationResult]:
    """Keep only the records for which `predicate` returns True."""
    if dataset is None:
        return None

    data = [row for row in dataset.data if predicate(row)]
    return OperationResult(dataset.evolve(data=data), description)
