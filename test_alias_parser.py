"""
Tests for the `_Display` alias parser.
"""

from src.export_config import FormatStyle, has_display_marker, parse_column_alias


def test_currency_suffix():
    """Curr keyword: currency, value column, keyword dropped from header."""
    col = parse_column_alias("Market_Cap_Curr_Display")
    assert col.original_name == "Market_Cap_Curr_Display"
    assert col.display_name == "Market Cap"
    assert col.style == FormatStyle.CURRENCY
    assert col.is_value_column is True


def test_count_suffix():
    col = parse_column_alias("Total_Volume_Num_Display")
    assert col.display_name == "Total Volume"
    assert col.style == FormatStyle.COUNT_GROUPED
    assert col.is_value_column is False


def test_percentage_suffix():
    col = parse_column_alias("Daily_Return_Pct_Display")
    assert col.display_name == "Daily Return"
    assert "Pct" not in col.display_name
    assert col.style == FormatStyle.PERCENTAGE
    assert col.is_value_column is True


def test_decimal_suffix():
    col = parse_column_alias("Pb_Ratio_Dec_Display")
    assert col.display_name == "Pb Ratio"
    assert col.style == FormatStyle.DECIMAL
    assert col.is_value_column is False


def test_suffix_keyword_is_case_insensitive():
    col = parse_column_alias("closing_PRICE_CURR_Display")
    assert col.display_name == "Closing Price"
    assert col.style == FormatStyle.CURRENCY


def test_headers_have_no_underscores_or_digits():
    for name in (
        "Market_Cap_Curr_Display",
        "Shares_Outstanding_Num_Display",
        "Profit_Growth_Pct_Display",
        "Debt_Equity_Dec_Display",
    ):
        header = parse_column_alias(name).display_name
        assert "_" not in header
        assert not any(ch.isdigit() for ch in header)


def test_unknown_token_falls_through_to_name_heuristic():
    """No keyword: every token is kept and the name heuristic decides."""
    col = parse_column_alias("Sales_Growth_Display")
    assert col.display_name == "Sales Growth"
    assert col.style == FormatStyle.PERCENTAGE
    assert col.is_value_column is True

    col = parse_column_alias("Closing_Price_Display")
    assert col.display_name == "Closing Price"
    assert col.style == FormatStyle.CURRENCY
    assert col.is_value_column is False


def test_unknown_token_without_heuristic_match_is_default():
    col = parse_column_alias("Company_Name_Display")
    assert col.display_name == "Company Name"
    assert col.style == FormatStyle.DEFAULT
    assert col.is_value_column is False


def test_header_words_are_normalized_not_reordered():
    col = parse_column_alias("cOMPANY_nAME_Display")
    assert col.display_name == "Company Name"


def test_marker_is_case_sensitive():
    assert has_display_marker("Company_Name_Display")
    assert not has_display_marker("company_name_display")
    assert not has_display_marker("Company_Name")
