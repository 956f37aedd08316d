"""
Column Mapping Builder
======================

Derives the ordered export columns from a sample row.

Two mutually exclusive strategies:
- Convention mode: only `_Display` columns, parsed by the alias parser.
- Fallback mode: every column, used only when convention mode finds nothing.

The result is a tagged variant (ConventionColumns | FallbackColumns) so the
caller can tell which strategy produced the columns; the two are never mixed.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from .alias_parser import has_display_marker, parse_column_alias, title_case_words
from .models import ColumnDescriptor, ExportConfig, FormatStyle
from .type_detector import detect_format_style, is_numeric_value


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Aggregate key carried on every row for pagination bookkeeping
RESERVED_TOTAL_KEY = "total_count"

# Hard limit imposed by the xlsx format
MAX_SHEET_NAME_LENGTH = 31


# =============================================================================
# RESULT VARIANTS
# =============================================================================

@dataclass(frozen=True)
class ConventionColumns:
    """Columns resolved from `_Display` aliases."""
    columns: tuple[ColumnDescriptor, ...]
    highlight_styles: frozenset[tuple[str, FormatStyle]]


@dataclass(frozen=True)
class FallbackColumns:
    """Columns resolved from every key of the sample row."""
    columns: tuple[ColumnDescriptor, ...]
    highlight_styles: frozenset[tuple[str, FormatStyle]]


ColumnMapping = Union[ConventionColumns, FallbackColumns]


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def build_column_mapping(sample_row: Mapping[str, Any] | None) -> ColumnMapping:
    """
    Resolve export columns from a sample row.

    Args:
        sample_row: First row of the result set (column name -> value).

    Returns:
        ConventionColumns if at least one `_Display` key exists, otherwise
        FallbackColumns. An empty or missing row yields empty FallbackColumns.
    """
    if not sample_row:
        return FallbackColumns(columns=(), highlight_styles=frozenset())

    keys = [key for key in sample_row.keys() if key != RESERVED_TOTAL_KEY]

    convention = _build_convention_columns(keys)
    if convention.columns:
        return convention

    return _build_fallback_columns(keys, sample_row)


def build_config(
    sample_row: Mapping[str, Any] | None,
    source_identifier: str
) -> ExportConfig:
    """
    Build the full export configuration for one result set.

    Args:
        sample_row: First row of the result set.
        source_identifier: Name of the originating query (e.g. SQL file key).

    Returns:
        ExportConfig with title, sheet name, ordered columns and the set of
        non-default styles.
    """
    mapping = build_column_mapping(sample_row)

    logger.debug(
        "Column mapping for %s: mode=%s columns=%d",
        source_identifier, type(mapping).__name__, len(mapping.columns)
    )

    return ExportConfig(
        title_name=format_title(source_identifier),
        sheet_name=format_sheet_name(source_identifier),
        columns=mapping.columns,
        highlight_styles=mapping.highlight_styles,
    )


def format_header_name(column_name: str) -> str:
    """Naive snake_case -> Title Case conversion of a whole column name."""
    return title_case_words(column_name.split("_"))


def format_title(source_identifier: str) -> str:
    """Title from a query identifier; only the first letter of each word changes."""
    return " ".join(
        word[:1].upper() + word[1:]
        for word in source_identifier.split("_")
    )


def format_sheet_name(source_identifier: str) -> str:
    return truncate_sheet_name(format_title(source_identifier))


def truncate_sheet_name(name: str) -> str:
    return name[:MAX_SHEET_NAME_LENGTH]


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _build_convention_columns(keys: list[str]) -> ConventionColumns:
    columns = []
    highlights = set()

    for key in keys:
        if not has_display_marker(key):
            continue
        descriptor = parse_column_alias(key)
        columns.append(descriptor)
        if descriptor.style != FormatStyle.DEFAULT:
            highlights.add((key, descriptor.style))

    return ConventionColumns(columns=tuple(columns), highlight_styles=frozenset(highlights))


def _build_fallback_columns(
    keys: list[str],
    sample_row: Mapping[str, Any]
) -> FallbackColumns:
    columns = []
    highlights = set()

    for key in keys:
        style = detect_format_style(key) or FormatStyle.DEFAULT
        columns.append(ColumnDescriptor(
            original_name=key,
            display_name=format_header_name(key),
            style=style,
            is_value_column=is_numeric_value(sample_row[key]),
        ))
        if style != FormatStyle.DEFAULT:
            highlights.add((key, style))

    return FallbackColumns(columns=tuple(columns), highlight_styles=frozenset(highlights))
