from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from dataset_editor.core.dataset import Dataset

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50
INITIAL_DESCRIPTION = "Initial import"


def now_iso() -> str:
    """
    Return a current UTC timestamp in ISO-8601 format.
    """
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class HistoryEntry:
    """
    One snapshot on the undo/redo timeline.

    - dataset: deep, independent copy of the Dataset at this point
    - description: human-readable label of the edit that produced it
    - timestamp: ISO8601 (UTC) time the entry was recorded
    """
    dataset: Dataset
    description: str
    timestamp: str = field(default_factory=now_iso)


class HistoryLog:
    """
    Bounded, strictly linear undo/redo timeline.

    Design Notes:
    - `index` always points at the entry matching the visible Dataset
    - appending while `index` is not at the end discards the redo branch first
    - when the log grows past `capacity` the oldest entry is dropped and `index`
      shifts down so its relative position is kept
    - entries store deep copies; callers always get deep copies back
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: List[HistoryEntry] = []
        self._index = -1

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._entries)

    @property
    def index(self) -> int:
        """Current position, or -1 when the log is empty."""
        return self._index

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    @property
    def descriptions(self) -> List[str]:
        return [e.description for e in self._entries]

    @property
    def current(self) -> Optional[HistoryEntry]:
        if self._index < 0:
            return None
        return self._entries[self._index]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def reset(self, dataset: Optional[Dataset], description: str = INITIAL_DESCRIPTION) -> None:
        """Replace the whole timeline with a single entry (or nothing for None)."""
        if dataset is None:
            self._entries = []
            self._index = -1
            return

        self._entries = [HistoryEntry(dataset=dataset.copy(), description=description)]
        self._index = 0

    def push(self, dataset: Dataset, description: str) -> HistoryEntry:
        """
        Record a new entry after the current one.

        Truncates any redo branch, appends, evicts the oldest entry past
        capacity and moves the index to the new last entry.
        """
        del self._entries[self._index + 1:]

        entry = HistoryEntry(dataset=dataset.copy(), description=description)
        self._entries.append(entry)

        if len(self._entries) > self.capacity:
            evicted = self._entries.pop(0)
            logger.debug("History full (%d); evicted %r", self.capacity, evicted.description)

        self._index = len(self._entries) - 1
        return entry

    def step_back(self) -> Optional[Dataset]:
        """Move one entry back; returns a copy of its dataset, or None at the start."""
        if not self.can_undo:
            return None
        self._index -= 1
        return self._entries[self._index].dataset.copy()

    def step_forward(self) -> Optional[Dataset]:
        """Move one entry forward; returns a copy of its dataset, or None at the end."""
        if not self.can_redo:
            return None
        self._index += 1
        return self._entries[self._index].dataset.copy()
