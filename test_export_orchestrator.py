"""
Tests for export orchestration and column resolver selection.
"""

import pytest

from src.export_config import (
    ConventionResolver,
    DisplayConfigResolver,
    DisplayOptions,
    NoDataError,
    get_column_resolver,
    prepare_export,
    prepare_query_export,
    resolve_total,
)


def test_no_rows_is_reported():
    with pytest.raises(NoDataError):
        prepare_export("order_summary", [])


def test_total_from_reserved_key():
    rows = [{"Name_Display": "a", "total_count": 120}, {"Name_Display": "b", "total_count": 120}]
    payload = prepare_export("paged_report", rows)

    assert payload.total == 120
    assert payload.config.column_names == ["Name_Display"]


def test_total_defaults_to_row_count():
    rows = [{"name": "a"}, {"name": "b"}, {"name": "c"}]
    assert prepare_export("names", rows).total == 3


def test_non_finite_total_falls_back_to_row_count():
    rows = [{"name": "a", "total_count": "Infinity"}, {"name": "b", "total_count": "Infinity"}]
    assert prepare_export("names", rows).total == 2

    assert prepare_export("names", [{"name": "a", "total_count": float("nan")}]).total == 1


def test_resolve_total():
    assert resolve_total([]) == 0
    assert resolve_total([{"total_count": "57"}]) == 57
    assert resolve_total([{"total_count": 0}], default=3) == 3
    assert resolve_total([{"total_count": "-Infinity"}]) == 0
    assert resolve_total([{"name": "a"}], default=1) == 1


def test_overrides_replace_title_and_truncate_sheet():
    rows = [{"name": "a"}]
    payload = prepare_export("names", rows, {
        "title_name": "Customer Names",
        "sheet_name": "A sheet name that is far longer than allowed",
    })
    assert payload.config.title_name == "Customer Names"
    assert len(payload.config.sheet_name) == 31


def test_resolver_selection(demo_rows):
    assert isinstance(get_column_resolver(), ConventionResolver)
    assert isinstance(get_column_resolver(DisplayOptions()), DisplayConfigResolver)

    convention = get_column_resolver().resolve([], demo_rows)
    assert [c.original_name for c in convention] == ["Market_Cap_Curr_Display"]

    configured = get_column_resolver(DisplayOptions()).resolve([], demo_rows)
    assert len(configured) == len(demo_rows[0])


def test_prepare_query_export_uses_metadata_columns(demo_rows):
    columns = prepare_query_export(
        demo_rows,
        ["email", "age"],
        DisplayOptions(column_order=("age",)),
    )
    assert [c.original_name for c in columns] == ["age", "email"]
