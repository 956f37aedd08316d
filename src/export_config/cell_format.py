"""
Cell Formatter
==============

Maps a FormatStyle and a cell value to a spreadsheet number format and a
horizontal alignment. Pure description; nothing is written here.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from .models import FormatStyle


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_CURRENCY_SYMBOL = "₹"

PERCENTAGE_FORMAT = "0.00%"
INTEGER_FORMAT = "#,##0"
DECIMAL_FORMAT = "#,##0.00"
DATE_FORMAT = "dd-mmm-yyyy"

ALIGN_LEFT = "left"
ALIGN_RIGHT = "right"

# Type tags accepted in addition to FormatStyle values
TYPE_TAG_ALIASES = {
    "number": FormatStyle.COUNT_GROUPED,
}


@dataclass(frozen=True)
class CellFormat:
    """Presentation of one cell: number format (None = General) and alignment."""
    number_format: str | None
    horizontal: str


TEXT_CELL = CellFormat(number_format=None, horizontal=ALIGN_LEFT)


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def currency_format(symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    return f"{symbol}#,##,##0.00"


def format_cell(
    style: FormatStyle | str | None,
    value: Any,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> CellFormat:
    """
    Describe the presentation of one cell.

    None or empty values are plain text whatever the declared style.

    Args:
        style: Column style (enum member or its string value).
        value: The cell value.
        currency_symbol: Symbol prefixed to currency formats.

    Returns:
        CellFormat for the cell.
    """
    if value is None or value == "":
        return TEXT_CELL

    style = _coerce_style(style)

    if style == FormatStyle.CURRENCY:
        return CellFormat(currency_format(currency_symbol), ALIGN_RIGHT)
    if style == FormatStyle.PERCENTAGE:
        return CellFormat(PERCENTAGE_FORMAT, ALIGN_RIGHT)
    if style == FormatStyle.COUNT_GROUPED:
        number_format = INTEGER_FORMAT if is_integral(value) else DECIMAL_FORMAT
        return CellFormat(number_format, ALIGN_RIGHT)
    if style == FormatStyle.DECIMAL:
        return CellFormat(DECIMAL_FORMAT, ALIGN_RIGHT)
    if style == FormatStyle.DATE:
        return CellFormat(DATE_FORMAT, ALIGN_LEFT)

    return TEXT_CELL


def is_integral(value: Any) -> bool:
    """True if the value coerces to a whole number."""
    if isinstance(value, bool):
        return False
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return False
    return number.is_finite() and number == number.to_integral_value()


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _coerce_style(style: FormatStyle | str | None) -> FormatStyle:
    if isinstance(style, FormatStyle):
        return style
    if style in TYPE_TAG_ALIASES:
        return TYPE_TAG_ALIASES[style]
    try:
        return FormatStyle(style)
    except ValueError:
        return FormatStyle.DEFAULT
