"""
Display-Config Filter/Orderer
=============================

Caller-driven column control for ad-hoc query exports.

The caller supplies include / exclude / order lists; styles come only from
the value-aware type detector, never from the `_Display` suffix grammar.
"""

import re
from typing import Any, Mapping, Sequence

from .models import ColumnDescriptor, DisplayOptions, NUMERIC_STYLES
from .type_detector import detect_column_type
from .alias_parser import title_case_words


# =============================================================================
# CONSTANTS
# =============================================================================

# Decorations dropped from header text (matched case-insensitively, in order)
HEADER_SUFFIX_PATTERNS = (
    re.compile(r"_Curr_Display$", re.IGNORECASE),
    re.compile(r"_Display$", re.IGNORECASE),
    re.compile(r"_curr$", re.IGNORECASE),
)


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def filter_and_order(
    all_columns: Sequence[str],
    options: DisplayOptions | None = None
) -> list[str]:
    """
    Apply include, exclude and custom order to a column list.

    1. Non-empty include list keeps only its names (original order).
    2. Exclude list removes names.
    3. Non-empty order list moves surviving names to the front in list order;
       the rest follow in original relative order. Unknown names are ignored.
    """
    options = options or DisplayOptions()
    columns = list(all_columns)

    if options.include_columns:
        include = set(options.include_columns)
        columns = [col for col in columns if col in include]

    if options.exclude_columns:
        exclude = set(options.exclude_columns)
        columns = [col for col in columns if col not in exclude]

    if options.column_order:
        ordered = []
        remaining = list(columns)
        for col in options.column_order:
            if col in remaining:
                ordered.append(col)
                remaining.remove(col)
        columns = ordered + remaining

    return columns


def resolve_columns(
    all_columns: Sequence[str],
    rows: Sequence[Mapping[str, Any]],
    options: DisplayOptions | None = None
) -> list[ColumnDescriptor]:
    """
    Resolve the ordered export columns for the display-config path.

    Args:
        all_columns: Column names from query metadata or first-row keys.
        rows: Result rows; only the first one is inspected.
        options: Caller-declared include / exclude / order lists.

    Returns:
        Ordered list of ColumnDescriptor. Empty input gives an empty list.
    """
    sample_row = rows[0] if rows else {}

    descriptors = []
    for col in filter_and_order(all_columns, options):
        style = detect_column_type(col, sample_row.get(col))
        descriptors.append(ColumnDescriptor(
            original_name=col,
            display_name=format_display_name(col),
            style=style,
            is_value_column=style in NUMERIC_STYLES,
        ))
    return descriptors


def format_display_name(column_name: str) -> str:
    """
    Readable header for a raw column name.

    "Market_Cap_Curr_Display" -> "Market Cap", "total_revenue" -> "Total Revenue"
    """
    name = column_name
    for pattern in HEADER_SUFFIX_PATTERNS:
        name = pattern.sub("", name)
    return title_case_words(name.split("_"))
