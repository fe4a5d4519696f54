"""
Core domain layer: dataset model, value coercion, column statistics,
import validation and the undo/redo history log
"""

from .dataset import Column, ColumnStats, ColumnType, Dataset, Record
from .history import HistoryEntry, HistoryLog

__all__ = [
    "Column",
    "ColumnStats",
    "ColumnType",
    "Dataset",
    "Record",
    "HistoryEntry",
    "HistoryLog",
]
