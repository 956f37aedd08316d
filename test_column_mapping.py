"""
Tests for the column mapping builder and export config derivation.
"""

from src.export_config import (
    ConventionColumns,
    FallbackColumns,
    FormatStyle,
    build_column_mapping,
    build_config,
    format_header_name,
    format_title,
)


def test_convention_mode_keeps_only_marker_columns():
    sample = {
        "id": 1,
        "Company_Name_Display": "Acme",
        "raw_price": 10.5,
        "Market_Cap_Curr_Display": 1500000,
        "total_count": 42,
    }
    mapping = build_column_mapping(sample)

    assert isinstance(mapping, ConventionColumns)
    assert [c.original_name for c in mapping.columns] == [
        "Company_Name_Display",
        "Market_Cap_Curr_Display",
    ]
    assert mapping.highlight_styles == frozenset({
        ("Market_Cap_Curr_Display", FormatStyle.CURRENCY),
    })


def test_fallback_mode_uses_every_non_reserved_key_in_order():
    sample = {
        "customer_name": "Ravi",
        "unit_price": "12.50",
        "total_count": 3,
        "quantity": 3,
    }
    mapping = build_column_mapping(sample)

    assert isinstance(mapping, FallbackColumns)
    assert [c.original_name for c in mapping.columns] == ["customer_name", "unit_price", "quantity"]
    assert [c.display_name for c in mapping.columns] == ["Customer Name", "Unit Price", "Quantity"]
    assert [c.style for c in mapping.columns] == [
        FormatStyle.DEFAULT,
        FormatStyle.CURRENCY,
        FormatStyle.COUNT_GROUPED,
    ]
    assert [c.is_value_column for c in mapping.columns] == [False, True, True]
    assert ("customer_name", FormatStyle.DEFAULT) not in mapping.highlight_styles


def test_fallback_tolerates_nulls_and_containers():
    sample = {"notes": None, "tags": ["a", "b"], "meta": {"k": 1}, "flag": True}
    mapping = build_column_mapping(sample)

    assert isinstance(mapping, FallbackColumns)
    assert len(mapping.columns) == 4
    assert not any(c.is_value_column for c in mapping.columns)


def test_empty_inputs_give_empty_columns():
    assert build_column_mapping(None).columns == ()
    assert build_column_mapping({}).columns == ()
    assert build_column_mapping({"total_count": 10}).columns == ()
    assert build_config(None, "order_summary").columns == ()


def test_build_config_title_and_sheet_name():
    config = build_config({"category": "Electronics"}, "sale_agg")
    assert config.title_name == "Sale Agg"
    assert config.sheet_name == "Sale Agg"
    assert config.column_names == ["category"]


def test_sheet_name_is_truncated_to_31_chars():
    identifier = "quarterly_sales_report_by_region_and_product_line"
    assert len(identifier) >= 40

    config = build_config({"a": 1}, identifier)
    assert len(config.sheet_name) == 31
    assert config.sheet_name == config.title_name[:31]
    assert len(config.title_name) > 31


def test_title_only_changes_first_letters():
    assert format_title("top_IPO_list") == "Top IPO List"
    assert format_header_name("top_IPO_list") == "Top Ipo List"


def test_column_order_follows_sample_row_keys():
    sample = {
        "Zeta_Display": 1,
        "Alpha_Curr_Display": 2,
        "Mid_Pct_Display": 3,
    }
    config = build_config(sample, "ordering")
    assert config.column_names == ["Zeta_Display", "Alpha_Curr_Display", "Mid_Pct_Display"]
