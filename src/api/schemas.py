"""
API Request/Response Schemas
============================

Pydantic models for API request and response validation.
"""

from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from src.export_config import DisplayOptions


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class DisplayConfig(BaseModel):
    """Caller-declared column control for ad-hoc query downloads."""

    model_config = ConfigDict(populate_by_name=True)

    include_columns: Optional[list[str]] = Field(
        default=None,
        alias="includeColumns",
        description="Columns to show (null = all)"
    )
    exclude_columns: list[str] = Field(
        default_factory=list,
        alias="excludeColumns",
        description="Columns to hide"
    )
    column_order: Optional[list[str]] = Field(
        default=None,
        alias="columnOrder",
        description="Columns moved to the front, in this order"
    )

    def to_options(self) -> DisplayOptions:
        return DisplayOptions.from_dict(self.model_dump())


class QueryRequest(BaseModel):
    """Request body for POST /api/query endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    sql: Optional[str] = Field(
        default=None,
        description="SQL query string (required)"
    )
    params: Union[list[Any], dict[str, Any]] = Field(
        default_factory=list,
        description="Positional (list) or named (dict) query parameters"
    )
    download: bool = Field(
        default=False,
        description="Return an .xlsx file instead of JSON"
    )
    filename: str = Field(default="export")
    sheet_name: str = Field(default="Export Data", alias="sheetName")
    display_config: DisplayConfig = Field(
        default_factory=DisplayConfig,
        alias="displayConfig"
    )


class ScriptRequest(BaseModel):
    """Request body for POST /api/scripts endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    key_file_name: Optional[str] = Field(
        default=None,
        alias="KeyFileName",
        description="SQL script name without the .sql extension"
    )
    params: dict[str, Any] = Field(
        default_factory=dict,
        alias="Params",
        description="Named script parameters; download=true returns an .xlsx file"
    )


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class QueryResponse(BaseModel):
    """JSON response for /api/query."""

    success: bool = True
    data: list[dict[str, Any]] = Field(default_factory=list)
    columns: list[str] = Field(default_factory=list)
    count: int = 0
    execution_time: str
    sql: str
    params: Union[list[Any], dict[str, Any], None] = None


class ScriptDataResponse(BaseModel):
    """JSON response for /api/scripts and per-script routes."""

    success: bool = True
    message: str = "Data fetched successfully"
    page: int = 0
    size: int = 0
    total: int = 0
    data: list[dict[str, Any]] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    status: str = "OK"
    database: Literal["Connected", "Disconnected"] = "Connected"
    timestamp: Optional[str] = None
    service: str = "SQL Export API"


class VersionResponse(BaseModel):
    """Response for GET /version endpoint."""

    version: str
    name: str = "SQL Export API"


class ErrorResponse(BaseModel):
    """Error envelope produced by src.app.exceptions."""

    success: bool = False
    status: str = "error"
    message: str
    detail: Optional[str] = None
    timestamp: Optional[str] = None
