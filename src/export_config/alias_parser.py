"""
Alias Parser
============

Turns a marker-suffixed SQL column alias into a ColumnDescriptor.

Alias grammar:  <Header_Words>[_<keyword>]_Display

    Market_Cap_Curr_Display  -> "Market Cap"    CURRENCY       value column
    Total_Shares_Num_Display -> "Total Shares"  COUNT_GROUPED
    Return_1y_Pct_Display    -> "Return 1y"     PERCENTAGE     value column
    Pe_Ratio_Dec_Display     -> "Pe Ratio"      DECIMAL
    Company_Name_Display     -> "Company Name"  (name heuristic)
"""

from .models import ColumnDescriptor, FormatStyle
from .type_detector import detect_format_style


# =============================================================================
# CONSTANTS
# =============================================================================

# Case-sensitive marker that opts a column into the export
DISPLAY_MARKER = "_Display"

# last token -> (style, is_value_column)
SUFFIX_KEYWORDS: dict[str, tuple[FormatStyle, bool]] = {
    "curr": (FormatStyle.CURRENCY, True),
    "num": (FormatStyle.COUNT_GROUPED, False),
    "pct": (FormatStyle.PERCENTAGE, True),
    "dec": (FormatStyle.DECIMAL, False),
}


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def has_display_marker(column_name: str) -> bool:
    """True if the column opts into the export via the marker suffix."""
    return column_name.endswith(DISPLAY_MARKER)


def parse_column_alias(column_name: str) -> ColumnDescriptor:
    """
    Parse one marker-suffixed column alias.

    Unknown last tokens never raise: the whole name goes through the
    name heuristic, which may leave the style at DEFAULT.

    Args:
        column_name: Raw column key, expected to end with DISPLAY_MARKER.

    Returns:
        ColumnDescriptor keyed by the unmodified column name.
    """
    stripped = strip_display_marker(column_name)
    parts = stripped.split("_")
    last_part = parts[-1].lower()

    if last_part in SUFFIX_KEYWORDS:
        style, is_value = SUFFIX_KEYWORDS[last_part]
        header_parts = parts[:-1]
    else:
        header_parts = parts
        style, is_value = FormatStyle.DEFAULT, False
        detected = detect_format_style(column_name)
        if detected:
            style = detected
            is_value = detected == FormatStyle.PERCENTAGE

    return ColumnDescriptor(
        original_name=column_name,
        display_name=title_case_words(header_parts),
        style=style,
        is_value_column=is_value,
    )


def strip_display_marker(column_name: str) -> str:
    if has_display_marker(column_name):
        return column_name[: -len(DISPLAY_MARKER)]
    return column_name


def title_case_words(words: list[str]) -> str:
    """Capitalize each word (first upper, rest lower) and join with spaces."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)
