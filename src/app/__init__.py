"""
App Module
==========

FastAPI application initialization.
"""

from .config import (
    VERSION,
    APP_NAME,
    DB_PATH,
    SQL_DIR,
    get_db_path,
    get_sql_dir,
    get_render_options,
)
from .exceptions import get_http_exception, global_exception_handler, error_body
from .logging_config import configure_logging

__all__ = [
    "VERSION",
    "APP_NAME",
    "DB_PATH",
    "SQL_DIR",
    "get_db_path",
    "get_sql_dir",
    "get_render_options",
    "get_http_exception",
    "global_exception_handler",
    "error_body",
    "configure_logging",
]
