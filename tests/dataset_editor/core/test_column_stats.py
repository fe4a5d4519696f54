from __future__ import annotations

from dataset_editor.core.column_stats import compute_stats, refresh_column, sample_values
from dataset_editor.core.dataset import Column, ColumnStats, ColumnType, Dataset


def test_numeric_stats():
    stats = compute_stats([1, 2, 4, None, 4], ColumnType.NUMBER)

    assert stats == ColumnStats(min=1, max=4, mean=2.75, unique=3, null_count=1)


def test_numeric_stats_without_numbers():
    stats = compute_stats([None, None], ColumnType.NUMBER)

    assert stats.unique == 0
    assert stats.null_count == 2
    assert stats.mean is None


def test_string_stats_report_distinct_and_nulls_only():
    stats = compute_stats(["a", "b", "a", None], ColumnType.STRING)

    assert stats.unique == 2
    assert stats.null_count == 1
    assert stats.min is None


def test_sample_values_are_distinct_in_order():
    assert sample_values(["b", None, "a", "b", "c", "d", "e", "f"]) == ["b", "a", "c", "d", "e"]
    assert sample_values([None, None]) == []


def test_refresh_column_recomputes_from_data():
    ds = Dataset.from_records("x", [("n", "number")], [{"n": 5}, {"n": 7}])
    col = refresh_column(ds, Column(name="n", type=ColumnType.NUMBER))

    assert col.sample_values == (5, 7)
    assert col.stats.mean == 6


def test_distinct_count_separates_types_and_accepts_unhashable_cells():
    stats = compute_stats([1, "1", True, [1], [1], None], ColumnType.STRING)

    assert stats.unique == 4
    assert stats.null_count == 1


def test_numeric_stats_are_plain_python_numbers():
    stats = compute_stats([3, 1, 2.5, float("nan")], ColumnType.NUMBER)

    assert stats.min == 1 and type(stats.min) is float
    assert stats.max == 3
    assert stats.mean == 2.17
    assert stats.null_count == 1


def test_numeric_stats_with_infinite_mean():
    stats = compute_stats([1, float("inf")], ColumnType.NUMBER)

    assert stats.max == float("inf")
    assert stats.mean == float("inf")


def test_sample_values_keep_stored_objects():
    assert sample_values([1, 1.0, "1", True, None]) == [1, "1", True]
