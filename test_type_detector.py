"""
Tests for the heuristic type detector.

Keyword groups are checked in a fixed order; these tests pin that order.
"""

from datetime import date, datetime
from decimal import Decimal

from src.export_config import (
    FormatStyle,
    detect_column_type,
    detect_format_style,
    is_date_value,
    is_number,
    is_numeric_value,
    to_whole_number,
)


def test_keyword_groups():
    assert detect_format_style("unit_price") == FormatStyle.CURRENCY
    assert detect_format_style("LTP") == FormatStyle.CURRENCY
    assert detect_format_style("trade_volume") == FormatStyle.COUNT_GROUPED
    assert detect_format_style("order_qty") == FormatStyle.COUNT_GROUPED
    assert detect_format_style("yoy_growth") == FormatStyle.PERCENTAGE
    assert detect_format_style("debt_to_equity") == FormatStyle.DECIMAL


def test_no_match_returns_none():
    assert detect_format_style("customer_name") is None
    assert detect_format_style("email") is None


def test_currency_group_wins_over_percentage():
    """price_change_pct matches both groups; currency is checked first."""
    assert detect_format_style("price_change_pct") == FormatStyle.CURRENCY
    assert detect_column_type("price_change_pct", 0.1) == FormatStyle.CURRENCY
    assert detect_format_style("price_percent") == FormatStyle.CURRENCY


def test_growth_keyword_gives_percentage():
    assert detect_format_style("growth_rate_pct") == FormatStyle.PERCENTAGE


def test_extended_keywords_only_in_value_aware_variant():
    assert detect_format_style("total_revenue") is None
    assert detect_column_type("total_revenue", 100) == FormatStyle.CURRENCY
    assert detect_column_type("shipping_cost", None) == FormatStyle.CURRENCY

    assert detect_format_style("interest_rate") is None
    assert detect_column_type("interest_rate", 0.05) == FormatStyle.PERCENTAGE


def test_value_shape_detection():
    assert detect_column_type("age", 30) == FormatStyle.COUNT_GROUPED
    assert detect_column_type("score", 12.5) == FormatStyle.COUNT_GROUPED
    assert detect_column_type("joined_on", date(2024, 1, 15)) == FormatStyle.DATE
    assert detect_column_type("joined_on", "2024-01-15") == FormatStyle.DATE
    assert detect_column_type("email", "john@example.com") == FormatStyle.TEXT


def test_numeric_strings_stay_text():
    assert detect_column_type("postal_code", "01234") == FormatStyle.TEXT
    assert detect_column_type("phone", "0987654321") == FormatStyle.TEXT
    assert detect_column_type("score", "12.5") == FormatStyle.TEXT


def test_id_in_name_disqualifies_numeric_formatting():
    assert detect_column_type("user_id", 1) == FormatStyle.TEXT
    assert detect_column_type("valid_id_total", 5) == FormatStyle.TEXT


def test_date_named_columns_without_value():
    assert detect_column_type("order_date", None) == FormatStyle.DATE
    assert detect_column_type("created_at", datetime(2024, 1, 15)) == FormatStyle.DATE
    assert detect_column_type("updated_at", None) == FormatStyle.DATE
    assert detect_column_type("updated_at_utc", None) == FormatStyle.DATE


def test_is_numeric_value():
    for value in (5, 3.14, Decimal("2.50"), "42", " 7.5 ", "-1e3"):
        assert is_numeric_value(value), value
    for value in (None, True, False, [1], {"a": 1}, "abc", "", float("nan"), "NaN"):
        assert not is_numeric_value(value), value


def test_is_date_value():
    assert is_date_value(date(2024, 1, 1))
    assert is_date_value(datetime(2024, 1, 1, 10, 30))
    assert is_date_value("2024-04-01")
    assert is_date_value("2024-04-01T10:15:00")
    assert not is_date_value("2024-13-45")
    assert not is_date_value("April 1st")
    assert not is_date_value(20240401)


def test_is_number():
    for value in (5, 3.14, Decimal("2.50")):
        assert is_number(value), value
    for value in (None, True, "42", "01234", float("nan"), [1]):
        assert not is_number(value), value


def test_to_whole_number():
    assert to_whole_number(120) == 120
    assert to_whole_number("42") == 42
    assert to_whole_number(7.9) == 7
    assert to_whole_number("1e400") == 10 ** 400
    for value in ("Infinity", "-Infinity", float("inf"), "NaN", None, "abc", True):
        assert to_whole_number(value) is None, value
