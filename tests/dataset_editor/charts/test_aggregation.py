from __future__ import annotations

import pytest

from dataset_editor.charts.aggregation import (
    FALLBACK_CATEGORIES,
    FALLBACK_VALUES,
    Aggregation,
    ChartConfig,
    ChartSeries,
    SortOrder,
    aggregate,
    build_chart_page,
    paginate,
    round_half_up,
    sort_series,
)


def _rows():
    return [
        {"cat": "A", "v": 10},
        {"cat": "A", "v": 20},
        {"cat": "B", "v": 5},
    ]


def test_aggregate_avg():
    series = aggregate(_rows(), "cat", "v", "avg")

    assert series.categories == ["A", "B"]
    assert series.values == [15, 5]
    assert series.total_count == 2


@pytest.mark.parametrize(
    "aggregation, expected",
    [
        (Aggregation.SUM, [30, 5]),
        (Aggregation.COUNT, [2, 1]),
        (Aggregation.MIN, [10, 5]),
        (Aggregation.MAX, [20, 5]),
    ],
)
def test_aggregate_kinds(aggregation, expected):
    assert aggregate(_rows(), "cat", "v", aggregation).values == expected


def test_aggregate_rounds_to_two_decimals():
    rows = [{"c": "x", "v": 1}, {"c": "x", "v": 1}, {"c": "x", "v": 2}]
    assert aggregate(rows, "c", "v", "avg").values == [1.33]


def test_round_half_up():
    assert round_half_up(0.125) == 0.13
    assert round_half_up(-0.125) == -0.12
    assert round_half_up(15.0) == 15


def test_missing_x_value_groups_as_unknown():
    rows = [{"c": None, "v": 1}, {"v": 2}, {"c": "y", "v": 3}]
    series = aggregate(rows, "c", "v", "sum")

    assert series.categories == ["Unknown", "y"]
    assert series.values == [3, 3]


def test_x_values_group_by_string_form():
    rows = [{"c": 1, "v": 1}, {"c": 1.0, "v": 1}, {"c": True, "v": 1}]
    series = aggregate(rows, "c", "v", "count")

    assert series.categories == ["1", "true"]
    assert series.values == [2, 1]


def test_non_numeric_y_counts_as_zero():
    rows = [{"c": "x", "v": "abc"}, {"c": "x", "v": "4"}, {"c": "x", "v": None}]
    series = aggregate(rows, "c", "v", "avg")

    assert series.values == [1.33]


def test_aggregate_unset_axes_or_empty_data():
    assert aggregate(_rows(), None, "v").total_count == 0
    assert aggregate(_rows(), "cat", "").total_count == 0
    assert aggregate([], "cat", "v").total_count == 0


def test_sort_series():
    series = ChartSeries(categories=["a", "b", "c", "d"], values=[2, 3, 1, 2], total_count=4)

    asc = sort_series(series, "asc")
    assert asc.categories == ["c", "a", "d", "b"]
    assert asc.values == [1, 2, 2, 3]

    desc = sort_series(series, SortOrder.DESC)
    assert desc.categories == ["b", "a", "d", "c"]

    assert sort_series(series, "none") is series


def test_paginate_keeps_total():
    series = ChartSeries(
        categories=[f"c{i}" for i in range(25)],
        values=list(range(25)),
        total_count=25,
    )
    page = paginate(series, 20, 10)

    assert len(page) == 5
    assert page.categories == ["c20", "c21", "c22", "c23", "c24"]
    assert page.total_count == 25


def test_build_chart_page_pagination_over_25_categories():
    rows = [{"c": f"cat{i:02d}", "v": i} for i in range(25)]
    config = ChartConfig(x_axis="c", y_axis="v", aggregation="sum")

    page = build_chart_page(rows, config, page_start=20, page_size=10)

    assert len(page.categories) == 5
    assert page.total_count == 25
    assert not page.is_fallback


def test_build_chart_page_sorts_before_paginating():
    rows = [{"c": f"cat{i}", "v": i} for i in range(12)]
    config = ChartConfig(x_axis="c", y_axis="v", sort_order="desc")

    first = build_chart_page(rows, config, page_start=0, page_size=3)

    assert first.categories == ["cat11", "cat10", "cat9"]
    assert first.values == [11, 10, 9]


@pytest.mark.parametrize(
    "data, config",
    [
        ([], ChartConfig(x_axis="cat", y_axis="v")),
        (None, ChartConfig(x_axis="cat", y_axis="v")),
        (_rows(), ChartConfig(x_axis=None, y_axis="v")),
        (_rows(), ChartConfig(x_axis="cat", y_axis=None)),
    ],
)
def test_fallback_series(data, config):
    page = build_chart_page(data, config, page_start=20, page_size=2)

    assert page.is_fallback
    assert page.categories == list(FALLBACK_CATEGORIES)
    assert page.values == list(FALLBACK_VALUES)
    assert page.total_count == 5


def test_chart_config_normalises_enums():
    config = ChartConfig(x_axis="a", y_axis="b", aggregation="max", sort_order="asc")

    assert config.aggregation is Aggregation.MAX
    assert config.sort_order is SortOrder.ASC

    with pytest.raises(ValueError):
        ChartConfig(aggregation="median")


def test_aggregate_values_are_plain_numbers():
    rows = [
        {"cat": "A", "v": 1.5},
        {"cat": "B", "v": "2"},
        {"cat": "A", "v": 2.5},
    ]
    series = aggregate(rows, "cat", "v", "sum")

    assert series.values == [4, 2]
    assert all(type(v) is int for v in series.values)
    assert aggregate(rows, "cat", "v", "count").values == [2, 1]


def test_aggregate_keeps_first_seen_order_across_interleaved_rows():
    rows = [{"cat": c, "v": 1} for c in ["z", "a", "z", "m", "a"]]

    assert aggregate(rows, "cat", "v").categories == ["z", "a", "m"]
