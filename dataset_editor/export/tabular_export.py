from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from dataset_editor.core.dataset import ColumnType, Dataset

logger = logging.getLogger(__name__)

_PANDAS_DTYPES = {
    ColumnType.NUMBER: "Float64",
    ColumnType.BOOLEAN: "boolean",
    ColumnType.STRING: "string",
    ColumnType.DATE: "string",
}


def _csv_cell(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def to_records(dataset: Dataset) -> List[Dict[str, Any]]:
    """
    Records in column order, one dict per row.
    Absent keys are written out as None so every record has every column.
    """
    names = dataset.column_names
    return [{name: row.get(name) for name in names} for row in dataset.data]


def to_dataframe(dataset: Dataset, *, typed: bool = False) -> pd.DataFrame:
    """
    Return the dataset as a DataFrame with columns in declared order.

    Args:
        typed: If True, cast each column to the nullable pandas dtype matching its
               ColumnType. Values that cannot be cast are left as object.
    """
    # object dtype keeps cell values exactly as stored (no int -> float promotion)
    df = pd.DataFrame(to_records(dataset), columns=dataset.column_names, dtype=object)

    if not typed:
        return df

    for col in dataset.columns:
        try:
            df[col.name] = df[col.name].astype(_PANDAS_DTYPES[col.type])
        except (TypeError, ValueError):
            logger.warning("Could not cast column %r to %s; keeping object dtype", col.name, col.type.value)

    return df


def to_csv(dataset: Dataset, path: Optional[str | Path] = None) -> str:
    """
    Serialise the dataset to CSV (header row + one line per record).

    Booleans are written as true/false, nulls as empty cells. When `path` is
    given the text is also written there.
    """
    # booleans are rendered before the frame is built; object dtype then writes
    # every other cell exactly as stored (3 stays "3")
    records = [
        {name: _csv_cell(value) for name, value in row.items()}
        for row in to_records(dataset)
    ]
    df = pd.DataFrame(records, columns=dataset.column_names, dtype=object)
    text = df.to_csv(index=False)

    if path is not None:
        Path(path).write_text(text, encoding="utf-8")
        logger.info("Exported %d rows of %r to %s", dataset.rows, dataset.name, path)

    return text
