"""
Excel Writer
============

Renders resolved export columns and rows into an .xlsx workbook (openpyxl).

Layout:
- optional merged title row
- bold header row on a solid fill, frozen
- data rows with per-cell number format / alignment, alternating fill
- column widths fitted to content
"""

import json
import logging
import time
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from io import BytesIO
from typing import Any, Mapping, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from src.export_config import (
    ColumnDescriptor,
    ExportPayload,
    FormatStyle,
    NUMERIC_STYLES,
    format_cell,
    is_date_value,
    is_numeric_value,
)
from src.export_config.cell_format import DEFAULT_CURRENCY_SYMBOL


logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class ExcelExportError(Exception):
    """Raised when a workbook cannot be rendered or serialized."""
    pass


# =============================================================================
# CONSTANTS
# =============================================================================

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

DEFAULT_SHEET_NAME = "Export Data"
DEFAULT_CREATOR = "SQL Export API"
DEFAULT_HEADER_COLOR = "2E75B6"
STRIPE_COLOR = "F8F9FA"
NO_DATA_MESSAGE = "No data available for export"

MIN_COLUMN_WIDTH = 12
MAX_COLUMN_WIDTH = 50

THIN = Side(style="thin")
CELL_BORDER = Border(top=THIN, left=THIN, bottom=THIN, right=THIN)


@dataclass
class RenderedWorkbook:
    """Serialized workbook plus the metadata sent alongside it."""
    buffer: bytes
    filename: str
    sheet_name: str
    row_count: int
    column_count: int


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def render_workbook(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[ColumnDescriptor],
    title: str | None = None,
    sheet_name: str = DEFAULT_SHEET_NAME,
    creator: str = DEFAULT_CREATOR,
    header_color: str = DEFAULT_HEADER_COLOR,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> bytes:
    """
    Render rows into a single-sheet workbook and serialize it.

    Args:
        rows: Result rows (column name -> value).
        columns: Ordered export columns.
        title: Optional title written above the header row.
        sheet_name: Worksheet name (max 31 chars, truncated by the caller).
        creator: Workbook creator property.
        header_color: RGB hex fill of the header row.
        currency_symbol: Symbol used in currency number formats.

    Returns:
        The .xlsx file as bytes.

    Raises:
        ExcelExportError: If rendering or serialization fails.
    """
    try:
        wb = Workbook()
        wb.properties.creator = creator
        ws = wb.active
        ws.title = sheet_name or DEFAULT_SHEET_NAME

        if not rows or not columns:
            _write_empty_sheet(ws)
        else:
            header_row = 1
            if title:
                _write_title_row(ws, title, len(columns))
                header_row = 2
            _write_header_row(ws, columns, header_row, header_color)
            _write_data_rows(ws, rows, columns, header_row + 1, currency_symbol)
            _fit_columns(ws, rows, columns)

        buffer = BytesIO()
        wb.save(buffer)
    except Exception as e:
        logger.error("Excel creation error: %s", e)
        raise ExcelExportError(f"Excel export failed: {e}") from e

    data = buffer.getvalue()
    logger.info(
        "Excel workbook created: %d rows, %d columns, %d bytes",
        len(rows), len(columns), len(data)
    )
    return data


def render_export(payload: ExportPayload, **kwargs: Any) -> bytes:
    """Render a convention-path payload, titled after its source query."""
    return render_workbook(
        payload.rows,
        payload.config.columns,
        title=payload.config.title_name,
        sheet_name=payload.config.sheet_name,
        **kwargs,
    )


def generate_excel_file(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[ColumnDescriptor],
    filename: str | None = None,
    sheet_name: str = DEFAULT_SHEET_NAME,
    **kwargs: Any
) -> RenderedWorkbook:
    """Render a workbook and attach download metadata."""
    buffer = render_workbook(rows, columns, sheet_name=sheet_name, **kwargs)
    return RenderedWorkbook(
        buffer=buffer,
        filename=normalize_filename(filename),
        sheet_name=sheet_name,
        row_count=len(rows),
        column_count=len(columns),
    )


def normalize_filename(filename: str | None) -> str:
    """Ensure an .xlsx extension; a timestamped name when none given."""
    if not filename:
        return f"export_{int(time.time() * 1000)}.xlsx"
    if not filename.lower().endswith(".xlsx"):
        return f"{filename}.xlsx"
    return filename


def to_cell_value(value: Any, style: FormatStyle = FormatStyle.DEFAULT) -> Any:
    """
    Convert a raw row value into something openpyxl can store.

    None -> "", containers -> JSON text, numeric strings in numeric columns ->
    numbers, ISO strings in date columns -> datetime. Timezones are dropped.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return value
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, default=str, ensure_ascii=False)
    if isinstance(value, str):
        if style in NUMERIC_STYLES and is_numeric_value(value):
            return _coerce_number(value)
        if style == FormatStyle.DATE and is_date_value(value):
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            return parsed.replace(tzinfo=None)
        return value
    if isinstance(value, (bool, int, float, Decimal)):
        return value
    return str(value)


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _coerce_number(text: str) -> int | float | str:
    number = Decimal(text.strip())
    if not number.is_finite():
        return text
    if number == number.to_integral_value():
        return int(number)
    return float(number)


def _write_empty_sheet(ws) -> None:
    ws.append([NO_DATA_MESSAGE])
    cell = ws.cell(row=1, column=1)
    cell.font = Font(bold=True, color="FFFF0000")
    cell.alignment = Alignment(horizontal="center")
    ws.merge_cells("A1:D1")


def _write_title_row(ws, title: str, column_count: int) -> None:
    cell = ws.cell(row=1, column=1, value=title)
    cell.font = Font(bold=True, size=14)
    cell.alignment = Alignment(horizontal="center", vertical="center")
    if column_count > 1:
        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=column_count)


def _write_header_row(ws, columns: Sequence[ColumnDescriptor], row: int, header_color: str) -> None:
    fill = PatternFill(start_color=header_color, end_color=header_color, fill_type="solid")
    for col_idx, column in enumerate(columns, start=1):
        cell = ws.cell(row=row, column=col_idx, value=column.display_name)
        cell.font = Font(bold=True, color="FFFFFFFF", size=12)
        cell.fill = fill
        cell.border = CELL_BORDER
        cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)

    ws.freeze_panes = ws.cell(row=row + 1, column=1)


def _write_data_rows(
    ws,
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[ColumnDescriptor],
    start_row: int,
    currency_symbol: str
) -> None:
    stripe = PatternFill(start_color=STRIPE_COLOR, end_color=STRIPE_COLOR, fill_type="solid")

    for row_offset, row in enumerate(rows):
        row_idx = start_row + row_offset
        for col_idx, column in enumerate(columns, start=1):
            raw = row.get(column.original_name)
            value = to_cell_value(raw, column.style)
            cell = ws.cell(row=row_idx, column=col_idx, value=value)

            fmt = format_cell(column.style, raw, currency_symbol=currency_symbol)
            if fmt.number_format and not isinstance(value, str):
                cell.number_format = fmt.number_format
            horizontal = fmt.horizontal
            if column.is_value_column and raw is not None:
                horizontal = "right"
            cell.alignment = Alignment(horizontal=horizontal, vertical="center")

            if row_offset % 2 == 0:
                cell.fill = stripe
            cell.border = CELL_BORDER


def _fit_columns(
    ws,
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[ColumnDescriptor]
) -> None:
    for col_idx, column in enumerate(columns, start=1):
        max_length = len(column.display_name)
        for row in rows:
            value = row.get(column.original_name)
            if value is not None:
                max_length = max(max_length, len(str(value)))
        width = min(max(max_length + 2, MIN_COLUMN_WIDTH), MAX_COLUMN_WIDTH)
        ws.column_dimensions[get_column_letter(col_idx)].width = width
