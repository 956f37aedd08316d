"""
Application Exceptions
======================

Translates query, export and rendering failures into HTTP errors.

Every error body carries the same envelope:
    {"success": false, "status": "error", "message": ..., "detail": ..., "timestamp": ...}
"""

import logging
from datetime import datetime, timezone

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTION MAPPING
# =============================================================================

# Exception class name -> (status_code, user_message)
EXCEPTION_MAP = {
    # Query layer
    "SqlFileNotFoundError": (404, "Requested SQL script does not exist."),
    "QueryExecutionError": (400, "SQL query failed to execute."),

    # Export configuration
    "NoDataError": (404, "No data available for export."),

    # Rendering
    "ExcelExportError": (500, "Failed to export Excel."),
}

FALLBACK_ERROR = (500, "Internal system error.")


def get_http_exception(exc: Exception) -> HTTPException:
    """
    Wrap a caught exception for re-raising from an endpoint.

    Args:
        exc: The caught exception.

    Returns:
        HTTPException whose detail is the error envelope.
    """
    status_code, body = error_body(exc)
    return HTTPException(status_code=status_code, detail=body)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for exceptions no endpoint caught."""
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    status_code, body = error_body(exc)
    return JSONResponse(status_code=status_code, content=body)


def error_body(exc: Exception) -> tuple[int, dict]:
    """Status code and error envelope for an exception."""
    status_code, user_message = EXCEPTION_MAP.get(type(exc).__name__, FALLBACK_ERROR)
    return status_code, {
        "success": False,
        "status": "error",
        "message": user_message,
        "detail": str(exc),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
