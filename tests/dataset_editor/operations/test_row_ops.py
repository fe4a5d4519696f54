from __future__ import annotations

from dataset_editor.core.dataset import Dataset
from dataset_editor.operations.row_ops import filter_rows, remove_duplicates, remove_row, remove_rows


def _make_dataset() -> Dataset:
    return Dataset.from_records(
        "rows",
        [("a", "number"), ("b", "string")],
        [
            {"a": 1, "b": "x"},
            {"a": 1, "b": "y"},
            {"a": 1, "b": "x"},
            {"a": 2, "b": "x"},
        ],
    )


def test_row_ops_no_op_without_dataset():
    assert remove_row(None, 0) is None
    assert remove_rows(None, [0]) is None
    assert remove_duplicates(None) is None
    assert filter_rows(None, lambda r: True, "all") is None


def test_remove_row_by_position():
    result = remove_row(_make_dataset(), 1)

    assert result.description == "Removed row 2"
    assert result.dataset.rows == 3
    assert result.dataset.column_values("b") == ["x", "x", "x"]


def test_remove_rows_by_positions():
    ds = _make_dataset()
    result = remove_rows(ds, [0, 3])

    assert result.description == "Removed 2 rows"
    assert result.dataset.data == ({"a": 1, "b": "y"}, {"a": 1, "b": "x"})
    assert ds.rows == 4


def test_remove_row_out_of_range_removes_nothing():
    result = remove_row(_make_dataset(), 10)
    assert result.dataset.rows == 4


def test_remove_duplicates_on_subset_keeps_first():
    ds = Dataset.from_records(
        "dups",
        ["a", "b"],
        [{"a": 1, "b": "x"}, {"a": 1, "b": "y"}, {"a": 1, "b": "x"}],
    )
    result = remove_duplicates(ds, ["a"])

    assert result.dataset.data == ({"a": 1, "b": "x"},)
    assert result.description == "Removed 2 duplicate rows"


def test_remove_duplicates_defaults_to_all_columns():
    result = remove_duplicates(_make_dataset())

    assert result.dataset.rows == 3
    assert result.dataset.data[0] == {"a": 1, "b": "x"}
    assert result.dataset.data[-1] == {"a": 2, "b": "x"}


def test_remove_duplicates_treats_missing_and_null_differently():
    ds = Dataset.from_records("n", ["a"], [{"a": None}, {}, {"a": None}, {}])
    result = remove_duplicates(ds)

    assert result.dataset.data == ({"a": None}, {})


def test_remove_duplicates_matches_equal_numbers():
    ds = Dataset.from_records("n", ["a"], [{"a": 1}, {"a": 1.0}])
    assert remove_duplicates(ds).dataset.rows == 1


def test_filter_rows_uses_caller_description():
    result = filter_rows(_make_dataset(), lambda r: r["a"] == 2, "Kept a == 2")

    assert result.description == "Kept a == 2"
    assert result.dataset.data == ({"a": 2, "b": "x"},)
