"""
Export Configuration Module
===========================

Rule-based engine that turns raw query columns into spreadsheet export
configuration: headers, format styles, column order and inclusion.

Deterministic and pure: no I/O, no shared state, recomputed per request.
"""

from .models import (
    FormatStyle,
    NUMERIC_STYLES,
    ColumnDescriptor,
    ExportConfig,
    DisplayOptions,
    ExportPayload,
)

from .alias_parser import (
    DISPLAY_MARKER,
    has_display_marker,
    parse_column_alias,
)

from .type_detector import (
    detect_format_style,
    detect_column_type,
    is_numeric_value,
    is_number,
    to_whole_number,
    is_date_value,
)

from .column_mapping import (
    ConventionColumns,
    FallbackColumns,
    RESERVED_TOTAL_KEY,
    MAX_SHEET_NAME_LENGTH,
    build_column_mapping,
    build_config,
    format_header_name,
    format_title,
    format_sheet_name,
    truncate_sheet_name,
)

from .display_config import (
    filter_and_order,
    resolve_columns,
    format_display_name,
)

from .cell_format import (
    CellFormat,
    format_cell,
)

from .resolver import (
    ColumnResolver,
    ConventionResolver,
    DisplayConfigResolver,
    get_column_resolver,
)

from .orchestrator import (
    prepare_export,
    prepare_query_export,
    resolve_total,
    NoDataError,
)

__all__ = [
    # Data structures
    "FormatStyle",
    "NUMERIC_STYLES",
    "ColumnDescriptor",
    "ExportConfig",
    "DisplayOptions",
    "ExportPayload",
    "ConventionColumns",
    "FallbackColumns",
    "CellFormat",

    # Convention path
    "DISPLAY_MARKER",
    "RESERVED_TOTAL_KEY",
    "MAX_SHEET_NAME_LENGTH",
    "has_display_marker",
    "parse_column_alias",
    "build_column_mapping",
    "build_config",
    "format_header_name",
    "format_title",
    "format_sheet_name",
    "truncate_sheet_name",

    # Display-config path
    "filter_and_order",
    "resolve_columns",
    "format_display_name",

    # Detection / formatting
    "detect_format_style",
    "detect_column_type",
    "is_numeric_value",
    "is_number",
    "to_whole_number",
    "is_date_value",
    "format_cell",

    # Resolver
    "ColumnResolver",
    "ConventionResolver",
    "DisplayConfigResolver",
    "get_column_resolver",

    # Orchestration
    "prepare_export",
    "prepare_query_export",
    "resolve_total",

    # Exceptions
    "NoDataError",
]
