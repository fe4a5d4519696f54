from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

# A record maps column name -> value. A key may be absent (undefined) or hold None (null).
Record = Dict[str, Any]


class ColumnType(str, Enum):
    """Declared type of a column."""
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ColumnStats:
    """
    Informational statistics captured for a column.

    Numeric columns fill min/max/mean; every column fills unique and null_count.
    Never used to drive behaviour.
    """
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    unique: Optional[int] = None
    null_count: Optional[int] = None


@dataclass(frozen=True)
class Column:
    """
    Metadata for a single column.

    - name: unique within a Dataset
    - type: declared ColumnType
    - sample_values: a handful of distinct non-null values, for previews
    - stats: derived ColumnStats, if computed
    """
    name: str
    type: ColumnType = ColumnType.STRING
    sample_values: Tuple[Any, ...] = ()
    stats: Optional[ColumnStats] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", ColumnType(self.type))
        object.__setattr__(self, "sample_values", tuple(self.sample_values))


@dataclass(frozen=True)
class Dataset:
    """
    Immutable in-memory table under edit.

    Includes:
    - name of the imported dataset
    - ordered, uniquely named columns
    - ordered records (plain dicts keyed by column name)

    `rows` is always derived from `data`. Transformations never touch an
    existing Dataset; they build a new one with `evolve`.
    """

    name: str
    columns: Tuple[Column, ...] = field(default_factory=tuple)
    data: Tuple[Record, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "data", tuple(self.data))

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------
    @classmethod
    def from_records(
        cls,
        name: str,
        columns: Iterable[Column | Tuple[str, str] | str],
        records: Iterable[Mapping[str, Any]],
    ) -> Dataset:
        """
        Build a Dataset from already-typed records.

        Columns may be Column instances, (name, type) pairs or bare names
        (typed as string). Records are copied into fresh dicts.
        """
        built: List[Column] = []
        for col in columns:
            if isinstance(col, Column):
                built.append(col)
            elif isinstance(col, str):
                built.append(Column(name=col))
            else:
                col_name, col_type = col
                built.append(Column(name=col_name, type=ColumnType(col_type)))

        return cls(name=name, columns=tuple(built), data=tuple(dict(r) for r in records))

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------
    @property
    def rows(self) -> int:
        """Number of records; always equal to len(data)."""
        return len(self.data)

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def has_column(self, name: str) -> bool:
        return any(c.name == name for c in self.columns)

    def get_column(self, name: str) -> Optional[Column]:
        return next((c for c in self.columns if c.name == name), None)

    def column_values(self, name: str) -> List[Any]:
        """Values of one column in record order (absent keys read as None)."""
        return [row.get(name) for row in self.data]

    # -------------------------------------------------------------------------
    # Copying
    # -------------------------------------------------------------------------
    def evolve(
        self,
        *,
        columns: Optional[Sequence[Column]] = None,
        data: Optional[Sequence[Record]] = None,
    ) -> Dataset:
        """Return a new Dataset with the given columns and/or data swapped in."""
        changes: Dict[str, Any] = {}
        if columns is not None:
            changes["columns"] = tuple(columns)
        if data is not None:
            changes["data"] = tuple(data)
        return replace(self, **changes)

    def copy(self) -> Dataset:
        """Deep, fully independent copy (records included)."""
        return copy.deepcopy(self)
