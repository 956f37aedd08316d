"""
Export Module
=============

Spreadsheet rendering layer. Turns resolved export columns and rows into
.xlsx bytes.

This is a deterministic rendering layer: every styling decision comes from
the export-configuration engine.
"""

from .excel_writer import (
    render_workbook,
    render_export,
    generate_excel_file,
    normalize_filename,
    to_cell_value,
    RenderedWorkbook,
    ExcelExportError,
    XLSX_MEDIA_TYPE,
)

__all__ = [
    "render_workbook",
    "render_export",
    "generate_excel_file",
    "normalize_filename",
    "to_cell_value",
    "RenderedWorkbook",
    "ExcelExportError",
    "XLSX_MEDIA_TYPE",
]
