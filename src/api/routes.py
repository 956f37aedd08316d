"""
API Routes
==========

Endpoint definitions for the SQL Export API:
  - POST/GET /api/query  - ad-hoc SQL, JSON or .xlsx (display-config path)
  - POST /api/scripts    - named SQL script, JSON or .xlsx (alias convention path)
  - POST /api/sql/<name> - one route per script, registered at start-up
  - GET /api/demo-export - sample workbook for each display-config mode

This module wires the query layer, the export-configuration engine and the
workbook renderer without adding business logic.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable

from fastapi import APIRouter, Body, Depends, FastAPI, Query
from fastapi.responses import JSONResponse, Response

from .schemas import (
    QueryRequest,
    ScriptRequest,
    QueryResponse,
    ScriptDataResponse,
    HealthResponse,
    VersionResponse,
    ErrorResponse,
)

from src.export_config import (
    DisplayOptions,
    prepare_export,
    prepare_query_export,
    resolve_total,
    truncate_sheet_name,
)
from src.export import (
    generate_excel_file,
    render_export,
    RenderedWorkbook,
    XLSX_MEDIA_TYPE,
)
from src.query import SqlRunner, execute_sql_file, list_sql_files

from src.app import config as app_config
from src.app import exceptions as app_exceptions


logger = logging.getLogger(__name__)


# =============================================================================
# ROUTER
# =============================================================================

router = APIRouter()

# Documented error envelopes; bodies come from src.app.exceptions
ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_runner() -> SqlRunner:
    """Request-scoped SQL runner bound to the configured database."""
    return SqlRunner(app_config.get_db_path())


# =============================================================================
# DEMO DATA
# =============================================================================

DEMO_ROWS: list[dict[str, Any]] = [
    {
        "user_id": 1,
        "full_name": "John Doe",
        "email": "john@example.com",
        "age": 30,
        "Market_Cap_Curr_Display": 1500000,
        "revenue_curr": 250000,
        "growth_rate_pct": 0.15,
        "created_at": datetime(2024, 1, 15),
        "internal_code": "XYZ123",
    },
    {
        "user_id": 2,
        "full_name": "Jane Smith",
        "email": "jane@example.com",
        "age": 25,
        "Market_Cap_Curr_Display": 2300000,
        "revenue_curr": 380000,
        "growth_rate_pct": 0.22,
        "created_at": datetime(2024, 2, 20),
        "internal_code": "ABC456",
    },
]

# type -> (display options, filename)
DEMO_EXPORTS: dict[str, tuple[DisplayOptions, str]] = {
    "basic": (DisplayOptions(), "all_columns.xlsx"),
    "filtered": (
        DisplayOptions(include_columns=(
            "full_name", "Market_Cap_Curr_Display", "revenue_curr", "growth_rate_pct",
        )),
        "filtered_columns.xlsx",
    ),
    "ordered": (
        DisplayOptions(column_order=("full_name", "email", "Market_Cap_Curr_Display", "age")),
        "custom_order.xlsx",
    ),
    "excluded": (
        DisplayOptions(exclude_columns=("user_id", "internal_code")),
        "public_data.xlsx",
    ),
}


# =============================================================================
# AD-HOC QUERY ENDPOINTS
# =============================================================================

@router.post("/api/query", response_model=QueryResponse, responses=ERROR_RESPONSES)
def run_query(request: QueryRequest, runner: SqlRunner = Depends(get_runner)):
    """
    Execute an ad-hoc SQL query.

    Returns JSON rows, or an .xlsx download when `download` is true. The
    download honours `display_config` (include / exclude / order).
    """
    if not request.sql:
        return _missing_sql_response()

    try:
        result = runner.execute(request.sql, request.params)

        if request.download:
            columns = prepare_query_export(
                result.rows, result.columns, request.display_config.to_options()
            )
            excel_file = generate_excel_file(
                result.rows,
                columns,
                filename=request.filename,
                sheet_name=truncate_sheet_name(request.sheet_name),
                **app_config.get_render_options(),
            )
            return _xlsx_response(excel_file)

        logger.info("JSON response: %d rows", result.count)
        return QueryResponse(**result.to_dict())

    except Exception as e:
        raise app_exceptions.get_http_exception(e)


@router.get("/api/query", response_model=QueryResponse)
def run_query_get(
    sql: str | None = None,
    download: bool = False,
    filename: str = "export",
    runner: SqlRunner = Depends(get_runner)
):
    """Simple GET variant of /api/query without parameters or display config."""
    if not sql:
        return _missing_sql_response()

    try:
        result = runner.execute(sql)

        if download:
            columns = prepare_query_export(result.rows, result.columns)
            excel_file = generate_excel_file(
                result.rows, columns, filename=filename, **app_config.get_render_options()
            )
            return _xlsx_response(excel_file)

        return QueryResponse(**result.to_dict())

    except Exception as e:
        raise app_exceptions.get_http_exception(e)


# =============================================================================
# NAMED SCRIPT ENDPOINTS
# =============================================================================

@router.post("/api/scripts", response_model=ScriptDataResponse, responses=ERROR_RESPONSES)
def run_script(request: ScriptRequest, runner: SqlRunner = Depends(get_runner)):
    """
    Execute a named SQL script.

    With `Params.download == true` the rows are exported to .xlsx using the
    `_Display` alias convention; otherwise a paginated JSON envelope is
    returned.
    """
    if not request.key_file_name:
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "message": "KeyFileName is required in the request body.",
            },
        )
    return _handle_script(request.key_file_name, request.params, runner)


def _handle_script(key_file_name: str, params: dict[str, Any], runner: SqlRunner):
    start_time = time.time()
    logger.info("Request received for KeyFileName=%s", key_file_name)

    try:
        rows = execute_sql_file(key_file_name, params, runner, app_config.get_sql_dir())

        if params.get("download") is True:
            payload = prepare_export(key_file_name, rows)
            buffer = render_export(payload, **app_config.get_render_options())
            return Response(
                content=buffer,
                media_type=XLSX_MEDIA_TYPE,
                headers={
                    "Content-Disposition": f'attachment; filename="{key_file_name}.xlsx"',
                    "X-Row-Count": str(len(payload.rows)),
                    "X-Total-Count": str(payload.total),
                    "X-Column-Count": str(len(payload.config.columns)),
                },
            )

        response = ScriptDataResponse(
            page=params.get("page") or 0,
            size=params.get("size") or len(rows),
            total=resolve_total(rows),
            data=rows,
        )

        duration_ms = (time.time() - start_time) * 1000
        logger.info("Processed %s in %.0fms", key_file_name, duration_ms)
        return response

    except Exception as e:
        logger.error("Script error for %s: %s", key_file_name, e)
        raise app_exceptions.get_http_exception(e)


def register_sql_file_routes(app: FastAPI, sql_dir: str) -> list[str]:
    """
    Add one POST /api/sql/<name> route per script found in `sql_dir`.

    Runs once at start-up; scripts added later need a restart.

    Returns:
        Key file names that received a route.
    """
    names = list_sql_files(sql_dir)
    for name in names:
        app.add_api_route(
            f"/api/sql/{name}",
            _make_script_endpoint(name),
            methods=["POST"],
            name=f"sql_{name}",
            response_model=ScriptDataResponse,
            responses=ERROR_RESPONSES,
            tags=["Scripts"],
        )
    logger.info("Registered %d SQL script routes from %s", len(names), sql_dir)
    return names


def _make_script_endpoint(key_file_name: str) -> Callable:
    def endpoint(
        params: dict[str, Any] | None = Body(default=None),
        runner: SqlRunner = Depends(get_runner)
    ):
        return _handle_script(key_file_name, params or {}, runner)

    endpoint.__doc__ = f"Execute {key_file_name}.sql"
    return endpoint


# =============================================================================
# DEMO / OPERATIONAL ENDPOINTS
# =============================================================================

@router.get("/api/demo-export")
def demo_export(export_type: str = Query(default="basic", alias="type")):
    """Sample workbook showing each display-config mode."""
    options, filename = DEMO_EXPORTS.get(export_type, DEMO_EXPORTS["basic"])

    try:
        columns = prepare_query_export(DEMO_ROWS, list(DEMO_ROWS[0].keys()), options)
        excel_file = generate_excel_file(
            DEMO_ROWS,
            columns,
            filename=filename,
            sheet_name="Demo Data",
            **app_config.get_render_options(),
        )
        return _xlsx_response(excel_file)
    except Exception as e:
        raise app_exceptions.get_http_exception(e)


@router.get("/health", response_model=HealthResponse)
def health_check(runner: SqlRunner = Depends(get_runner)) -> HealthResponse:
    """Health check endpoint with database connectivity."""
    db_status = runner.test_connection()
    return HealthResponse(
        status="OK",
        database="Connected" if db_status["connected"] else "Disconnected",
        timestamp=db_status["timestamp"],
    )


@router.get("/version", response_model=VersionResponse)
def get_version() -> VersionResponse:
    """Get API version."""
    return VersionResponse(version=app_config.VERSION, name=app_config.APP_NAME)


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _xlsx_response(excel_file: RenderedWorkbook) -> Response:
    logger.info("Excel sent: %s (%d bytes)", excel_file.filename, len(excel_file.buffer))
    return Response(
        content=excel_file.buffer,
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{excel_file.filename}"',
            "X-Row-Count": str(excel_file.row_count),
            "X-Column-Count": str(excel_file.column_count),
        },
    )


def _missing_sql_response() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "SQL query is required",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )

