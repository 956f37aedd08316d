"""
API Module
==========

API routes and schemas.
"""

from .schemas import (
    DisplayConfig,
    QueryRequest,
    ScriptRequest,
    QueryResponse,
    ScriptDataResponse,
    HealthResponse,
    VersionResponse,
    ErrorResponse,
)

__all__ = [
    "DisplayConfig",
    "QueryRequest",
    "ScriptRequest",
    "QueryResponse",
    "ScriptDataResponse",
    "HealthResponse",
    "VersionResponse",
    "ErrorResponse",
]
