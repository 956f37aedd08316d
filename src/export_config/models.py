"""
Export Configuration Models
===========================

Data structures shared by the export-configuration engine.

Everything here is built fresh per export request and never persisted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


# =============================================================================
# FORMAT STYLES
# =============================================================================

class FormatStyle(str, Enum):
    """Rendering style of one export column. Exactly one applies per column."""
    DEFAULT = "default"
    CURRENCY = "currency"
    COUNT_GROUPED = "count_grouped"
    PERCENTAGE = "percentage"
    DECIMAL = "decimal"
    DATE = "date"
    TEXT = "text"


# Styles whose cells hold numbers and are right-aligned
NUMERIC_STYLES = frozenset({
    FormatStyle.CURRENCY,
    FormatStyle.COUNT_GROUPED,
    FormatStyle.PERCENTAGE,
    FormatStyle.DECIMAL,
})


# =============================================================================
# COLUMN / CONFIG STRUCTURES
# =============================================================================

@dataclass(frozen=True)
class ColumnDescriptor:
    """
    One resolved export column.

    `original_name` is the raw key from the query result, `display_name` is
    always derived from it.
    """
    original_name: str
    display_name: str
    style: FormatStyle = FormatStyle.DEFAULT
    is_value_column: bool = False


@dataclass(frozen=True)
class ExportConfig:
    """Resolved configuration for a single spreadsheet export."""
    title_name: str
    sheet_name: str
    columns: tuple[ColumnDescriptor, ...] = ()
    highlight_styles: frozenset[tuple[str, FormatStyle]] = frozenset()

    @property
    def column_names(self) -> list[str]:
        return [col.original_name for col in self.columns]


@dataclass(frozen=True)
class DisplayOptions:
    """
    Caller-declared column control for the display-config path.

    Empty or missing lists mean "no constraint".
    """
    include_columns: tuple[str, ...] = ()
    exclude_columns: tuple[str, ...] = ()
    column_order: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict | None) -> "DisplayOptions":
        """Build options from a loose mapping (e.g. a JSON request body)."""
        data = data or {}
        return cls(
            include_columns=tuple(data.get("include_columns") or data.get("includeColumns") or ()),
            exclude_columns=tuple(data.get("exclude_columns") or data.get("excludeColumns") or ()),
            column_order=tuple(data.get("column_order") or data.get("columnOrder") or ()),
        )


@dataclass
class ExportPayload:
    """Tabular data plus resolved config, handed to the workbook renderer."""
    rows: list[dict[str, Any]]
    total: int
    config: ExportConfig
