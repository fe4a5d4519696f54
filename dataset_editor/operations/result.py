from __future__ import annotations

from dataclasses import dataclass

from dataset_editor.core.dataset import Dataset


@dataclass(frozen=True)
class OperationResult:
    """
    Output of a transformation: the new Dataset plus the label used for its
    history entry. Nothing is recorded until the result is committed.
    """
    dataset: Dataset
    description: str
