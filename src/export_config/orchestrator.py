"""
Export Orchestrator
===================

Composes the engine into the (data, config) pair consumed by the workbook
renderer.
"""

import logging
from typing import Any, Mapping, Sequence

from .column_mapping import RESERVED_TOTAL_KEY, build_config, truncate_sheet_name
from .models import ColumnDescriptor, DisplayOptions, ExportConfig, ExportPayload
from .resolver import DisplayConfigResolver
from .type_detector import to_whole_number


logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class NoDataError(Exception):
    """Raised when an export is requested for an empty result set."""
    pass


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def prepare_export(
    source_identifier: str,
    rows: Sequence[Mapping[str, Any]],
    overrides: Mapping[str, Any] | None = None
) -> ExportPayload:
    """
    Build the convention-path export payload for a result set.

    Args:
        source_identifier: Name of the originating query.
        rows: Result rows.
        overrides: Optional `title_name` / `sheet_name` replacements.

    Returns:
        ExportPayload with rows, total and resolved config.

    Raises:
        NoDataError: If there are no rows; headers cannot be derived.
    """
    if not rows:
        raise NoDataError(f"No data available for export: {source_identifier}")

    config = build_config(rows[0], source_identifier)
    config = _apply_overrides(config, overrides)

    total = resolve_total(rows, default=len(rows))

    logger.info(
        "Auto-generated export config for %s: %d columns",
        source_identifier, len(config.columns)
    )

    return ExportPayload(rows=list(rows), total=total, config=config)


def resolve_total(rows: Sequence[Mapping[str, Any]], default: int = 0) -> int:
    """
    Total row count carried in the first row's `total_count` column.

    Missing, zero, non-numeric and non-finite values give `default`.
    """
    if not rows:
        return default
    total = to_whole_number(rows[0].get(RESERVED_TOTAL_KEY))
    return total if total else default


def prepare_query_export(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[str] | None = None,
    display_options: DisplayOptions | None = None
) -> list[ColumnDescriptor]:
    """Resolve columns for an ad-hoc query export via the display-config path."""
    resolver = DisplayConfigResolver(display_options)
    resolved = resolver.resolve(list(columns or []), rows)

    logger.info(
        "Column mapping: %s",
        ", ".join(f"{c.original_name} -> {c.display_name} [{c.style.value}]" for c in resolved)
    )
    return resolved


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _apply_overrides(config: ExportConfig, overrides: Mapping[str, Any] | None) -> ExportConfig:
    if not overrides:
        return config

    title_name = overrides.get("title_name") or config.title_name
    sheet_name = overrides.get("sheet_name") or config.sheet_name

    return ExportConfig(
        title_name=title_name,
        sheet_name=truncate_sheet_name(sheet_name),
        columns=config.columns,
        highlight_styles=config.highlight_styles,
    )
