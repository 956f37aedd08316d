"""
Tests for the caller-driven display-config path.
"""

from src.export_config import (
    DisplayOptions,
    FormatStyle,
    filter_and_order,
    format_display_name,
    resolve_columns,
)


def test_include_then_order():
    options = DisplayOptions(include_columns=("b", "d"), column_order=("d", "b"))
    assert filter_and_order(["a", "b", "c", "d"], options) == ["d", "b"]


def test_exclude():
    options = DisplayOptions(exclude_columns=("b",))
    assert filter_and_order(["a", "b", "c"], options) == ["a", "c"]


def test_order_ignores_filtered_and_unknown_names():
    options = DisplayOptions(exclude_columns=("c",), column_order=("c", "x", "d"))
    assert filter_and_order(["a", "b", "c", "d"], options) == ["d", "a", "b"]


def test_no_options_keeps_original_order():
    assert filter_and_order(["c", "a", "b"]) == ["c", "a", "b"]
    assert filter_and_order(["c", "a", "b"], DisplayOptions()) == ["c", "a", "b"]


def test_from_dict_accepts_camel_case():
    options = DisplayOptions.from_dict({
        "includeColumns": ["a"],
        "excludeColumns": ["b"],
        "columnOrder": ["a"],
    })
    assert options == DisplayOptions(("a",), ("b",), ("a",))
    assert DisplayOptions.from_dict(None) == DisplayOptions()


def test_display_names():
    assert format_display_name("Market_Cap_Curr_Display") == "Market Cap"
    assert format_display_name("user_email_Display") == "User Email"
    assert format_display_name("revenue_curr") == "Revenue"
    assert format_display_name("total_revenue") == "Total Revenue"


def test_resolve_columns_styles(demo_rows):
    columns = resolve_columns(list(demo_rows[0].keys()), demo_rows)
    by_name = {c.original_name: c for c in columns}

    assert by_name["Market_Cap_Curr_Display"].display_name == "Market Cap"
    assert by_name["Market_Cap_Curr_Display"].style == FormatStyle.CURRENCY
    assert by_name["revenue_curr"].style == FormatStyle.CURRENCY
    assert by_name["growth_rate_pct"].style == FormatStyle.PERCENTAGE
    assert by_name["created_at"].style == FormatStyle.DATE
    assert by_name["age"].style == FormatStyle.COUNT_GROUPED
    assert by_name["age"].is_value_column is True
    assert by_name["user_id"].style == FormatStyle.TEXT
    assert by_name["email"].style == FormatStyle.TEXT
    assert by_name["email"].is_value_column is False


def test_resolve_columns_applies_options(demo_rows):
    options = DisplayOptions(
        exclude_columns=("user_id", "internal_code"),
        column_order=("full_name", "email"),
    )
    columns = resolve_columns(list(demo_rows[0].keys()), demo_rows, options)
    names = [c.original_name for c in columns]

    assert names[:2] == ["full_name", "email"]
    assert "user_id" not in names
    assert "internal_code" not in names
    assert len(names) == 7


def test_resolve_columns_is_idempotent(demo_rows):
    options = DisplayOptions(include_columns=("email", "age", "full_name"), column_order=("age",))
    first = resolve_columns(list(demo_rows[0].keys()), demo_rows, options)
    second = resolve_columns(list(demo_rows[0].keys()), demo_rows, options)
    assert first == second


def test_resolve_columns_without_rows():
    assert resolve_columns([], []) == []
    columns = resolve_columns(["order_date", "name"], [])
    assert [c.style for c in columns] == [FormatStyle.DATE, FormatStyle.TEXT]
