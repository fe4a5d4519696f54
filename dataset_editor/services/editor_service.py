from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence

from dataset_editor.config import EditorSettings
from dataset_editor.core.dataset import ColumnType, Dataset
from dataset_editor.core.history import HistoryLog
from dataset_editor.operations import (
    OperationResult,
    OperationType,
    apply_operation,
    change_column_type,
    fill_nulls,
    filter_rows,
    find_and_replace,
    remove_column,
    remove_duplicates,
    remove_null_rows,
    remove_row,
    remove_rows,
    rename_column,
    reorder_columns,
    trim_whitespace,
)
from dataset_editor.operations.row_ops import RowPredicate

logger = logging.getLogger(__name__)

RESET_DESCRIPTION = "Reset to original"


class DatasetEditor:
    """
    Owns the dataset of record for one editing surface and its undo/redo log.

    Every edit goes through `commit`, which snapshots a deep copy into the
    history. `undo`/`redo` move along the timeline without changing its shape.
    Instances share no state, so each chart tab can hold its own editor.
    """

    def __init__(self, settings: Optional[EditorSettings] = None):
        self.settings = settings or EditorSettings()
        self._history = HistoryLog(capacity=self.settings.history_capacity)
        self._dataset: Optional[Dataset] = None
        self._original: Optional[Dataset] = None

    # ------------------------------------------------------------------
    # Read-only state for rendering surfaces
    # ------------------------------------------------------------------
    @property
    def dataset(self) -> Optional[Dataset]:
        return self._dataset

    @property
    def original(self) -> Optional[Dataset]:
        """Snapshot captured at load time; never part of the undo chain."""
        return self._original

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def history_length(self) -> int:
        return len(self._history)

    @property
    def current_history_index(self) -> int:
        return self._history.index

    @property
    def history_descriptions(self) -> List[str]:
        return self._history.descriptions

    # ------------------------------------------------------------------
    # History transitions
    # ------------------------------------------------------------------
    def load(self, dataset: Optional[Dataset]) -> None:
        """
        Make `dataset` the dataset of record and restart history from it.
        Passing None clears the dataset, the original snapshot and the history.
        """
        if dataset is None:
            self._dataset = None
            self._original = None
            self._history.reset(None)
            logger.info("Editor cleared")
            return

        self._dataset = dataset
        self._original = dataset.copy()
        self._history.reset(dataset)
        logger.info(
            "Loaded dataset %r (%d rows, %d columns)",
            dataset.name,
            dataset.rows,
            len(dataset.columns),
            extra={"dataset": dataset.name, "rows": dataset.rows},
        )

    def commit(self, new_dataset: Dataset, description: str) -> None:
        """Record `new_dataset` as the next history entry and make it current."""
        self._history.push(new_dataset, description)
        self._dataset = new_dataset
        logger.debug(
            "Committed %r (entry %d of %d)",
            description,
            self._history.index + 1,
            len(self._history),
            extra={
                "dataset": new_dataset.name,
                "description": description,
                "history_index": self._history.index,
            },
        )

    def undo(self) -> None:
        restored = self._history.step_back()
        if restored is None:
            return
        self._dataset = restored
        logger.debug("Undo -> entry %d", self._history.index)

    def redo(self) -> None:
        restored = self._history.step_forward()
        if restored is None:
            return
        self._dataset = restored
        logger.debug("Redo -> entry %d", self._history.index)

    def reset_to_original(self) -> None:
        """Commit a copy of the load-time snapshot, so the reset itself can be undone."""
        if self._original is None:
            return
        self.commit(self._original.copy(), RESET_DESCRIPTION)

    # ------------------------------------------------------------------
    # Generic (operation, params) entry points
    # ------------------------------------------------------------------
    def preview(self, operation: OperationType | str, **params: Any) -> Optional[OperationResult]:
        """Compute an operation against the current dataset without recording it."""
        return apply_operation(self._dataset, operation, **params)

    def apply(self, operation: OperationType | str, **params: Any) -> Optional[OperationResult]:
        """Compute and commit an operation. Returns None when it was a no-op."""
        return self._commit_result(self.preview(operation, **params))

    def _commit_result(self, result: Optional[OperationResult]) -> Optional[OperationResult]:
        if result is None:
            return None
        self.commit(result.dataset, result.description)
        return result

    # ------------------------------------------------------------------
    # Column operations
    # ------------------------------------------------------------------
    def remove_column(self, name: str) -> Optional[OperationResult]:
        return self._commit_result(remove_column(self._dataset, name))

    def rename_column(self, old_name: str, new_name: str) -> Optional[OperationResult]:
        return self._commit_result(rename_column(self._dataset, old_name, new_name))

    def change_column_type(self, name: str, new_type: ColumnType | str) -> Optional[OperationResult]:
        return self._commit_result(change_column_type(self._dataset, name, new_type))

    def reorder_columns(self, new_order: Sequence[str]) -> Optional[OperationResult]:
        return self._commit_result(reorder_columns(self._dataset, new_order))

    # ------------------------------------------------------------------
    # Row operations
    # ------------------------------------------------------------------
    def remove_row(self, index: int) -> Optional[OperationResult]:
        return self._commit_result(remove_row(self._dataset, index))

    def remove_rows(self, indices: Iterable[int]) -> Optional[OperationResult]:
        return self._commit_result(remove_rows(self._dataset, indices))

    def remove_duplicates(self, column_names: Optional[Sequence[str]] = None) -> Optional[OperationResult]:
        return self._commit_result(remove_duplicates(self._dataset, column_names))

    def filter_rows(self, predicate: RowPredicate, description: str) -> Optional[OperationResult]:
        return self._commit_result(filter_rows(self._dataset, predicate, description))

    # ------------------------------------------------------------------
    # Cleaning
    # ------------------------------------------------------------------
    def find_and_replace(
        self,
        column: str,
        find: str,
        replace: str,
        match_case: bool = False,
    ) -> Optional[OperationResult]:
        return self._commit_result(find_and_replace(self._dataset, column, find, replace, match_case))

    def trim_whitespace(self, column_names: Optional[Sequence[str]] = None) -> Optional[OperationResult]:
        return self._commit_result(trim_whitespace(self._dataset, column_names))

    def fill_nulls(self, column: str, value: Any) -> Optional[OperationResult]:
        return self._commit_result(fill_nulls(self._dataset, column, value))

    def remove_null_rows(self, column: str) -> Optional[OperationResult]:
        return self._commit_result(remove_null_rows(self._dataset, column))
