"""
Heuristic Type Detector
=======================

Guesses a FormatStyle for a column when no explicit suffix convention is
present.

Two variants:
- `detect_format_style(name)` looks at the column name only.
- `detect_column_type(name, sample_value)` extends the keyword table and also
  inspects the runtime shape of a sample value. It always returns a style,
  falling back to TEXT.

Keyword groups are checked in a fixed order and the first match wins, so a
name containing both `price` and `percent` resolves to CURRENCY.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from .models import FormatStyle


# =============================================================================
# KEYWORD RULES
# =============================================================================

# Order matters: groups are tried top to bottom.
KEYWORD_RULES: tuple[tuple[FormatStyle, tuple[str, ...]], ...] = (
    (FormatStyle.CURRENCY, ("price", "amount", "ltp", "close", "mcap", "market_cap")),
    (FormatStyle.COUNT_GROUPED, ("volume", "quantity", "count", "qty")),
    (FormatStyle.PERCENTAGE, ("percent", "pct", "return", "change", "growth")),
    (FormatStyle.DECIMAL, ("ratio", "pe", "pb", "debt")),
)

# Extra keywords only the value-aware variant knows about
EXTENDED_KEYWORDS: dict[FormatStyle, tuple[str, ...]] = {
    FormatStyle.CURRENCY: ("revenue", "cost"),
    FormatStyle.PERCENTAGE: ("rate",),
}

EXTENDED_KEYWORD_RULES: tuple[tuple[FormatStyle, tuple[str, ...]], ...] = tuple(
    (style, keywords + EXTENDED_KEYWORDS.get(style, ()))
    for style, keywords in KEYWORD_RULES
)

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}([T ][\d:.]+(Z|[+-]\d{2}:?\d{2})?)?$")


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def detect_format_style(column_name: str) -> FormatStyle | None:
    """
    Name-only detection.

    Returns:
        The style of the first matching keyword group, or None.
    """
    return _match_keywords(column_name, KEYWORD_RULES)


def detect_column_type(column_name: str, sample_value: Any = None) -> FormatStyle:
    """
    Value-aware detection used by the display-config path.

    Keyword groups (with the extended keywords) win first. Otherwise a
    date-like value gives DATE and a number gives COUNT_GROUPED unless the
    name contains "id". Numeric-looking strings ("01234") stay TEXT. Names
    containing "date" or "_at" fall back to DATE.
    """
    style = _match_keywords(column_name, EXTENDED_KEYWORD_RULES)
    if style is not None:
        return style

    lower_name = column_name.lower()

    if is_date_value(sample_value):
        return FormatStyle.DATE

    # "id" disqualifies numeric formatting even for names like valid_id_count
    if is_number(sample_value) and "id" not in lower_name:
        return FormatStyle.COUNT_GROUPED

    if "date" in lower_name or "_at" in lower_name:
        return FormatStyle.DATE

    return FormatStyle.TEXT


def is_numeric_value(value: Any) -> bool:
    """
    Generic numeric-coercion test.

    Numbers and numeric strings count; None, booleans, sequences and
    mappings do not.
    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return value == value  # NaN
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return False
        try:
            return not Decimal(text).is_nan()
        except InvalidOperation:
            return False
    return False


def is_number(value: Any) -> bool:
    """True for int, float and Decimal values (not bool, not NaN). Strings never count."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    return value == value


def to_whole_number(value: Any) -> int | None:
    """Integer part of a finite numeric value or numeric string, else None."""
    if not is_numeric_value(value):
        return None
    number = Decimal(str(value).strip())
    if not number.is_finite():
        return None
    return int(number)


def is_date_value(value: Any) -> bool:
    """True for date/datetime objects and ISO-8601 date strings."""
    if isinstance(value, (date, datetime)):
        return True
    if isinstance(value, str) and _ISO_DATE_RE.match(value.strip()):
        try:
            datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return False
        return True
    return False


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _match_keywords(
    column_name: str,
    rules: tuple[tuple[FormatStyle, tuple[str, ...]], ...]
) -> FormatStyle | None:
    lower_name = column_name.lower()
    for style, keywords in rules:
        if any(keyword in lower_name for keyword in keywords):
            return style
    return None
