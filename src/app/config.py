"""
Application Configuration
=========================

Central configuration for the API.
Every value can be overridden via environment variables (or a .env file).
"""

import os
from pathlib import Path


# =============================================================================
# VERSION
# =============================================================================

VERSION = "1.0.0"
APP_NAME = "SQL Export API"


# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent

# SQLite database queried by the API
DB_PATH = os.environ.get(
    "SQLX_DB_PATH",
    str(PROJECT_ROOT / "data" / "export_demo.db")
)

# Directory holding named .sql scripts (KeyFileName -> <name>.sql)
SQL_DIR = os.environ.get(
    "SQLX_SQL_DIR",
    str(PROJECT_ROOT / "sql_files")
)


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("SQLX_LOG_LEVEL", "INFO")


# =============================================================================
# SPREADSHEET STYLE
# =============================================================================

CURRENCY_SYMBOL = os.environ.get("SQLX_CURRENCY_SYMBOL", "₹")
HEADER_COLOR = os.environ.get("SQLX_HEADER_COLOR", "2E75B6")
WORKBOOK_CREATOR = os.environ.get("SQLX_WORKBOOK_CREATOR", "SQL Export API")


def get_db_path() -> str:
    """
    Get the database path, creating its parent directory if needed.

    Returns:
        Absolute path to the SQLite database file.
    """
    db_path = Path(DB_PATH)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return str(db_path.resolve())


def get_sql_dir() -> str:
    """Absolute path of the SQL scripts directory."""
    return str(Path(SQL_DIR).resolve())


def get_render_options() -> dict:
    """Keyword arguments passed to the workbook renderer."""
    return {
        "creator": WORKBOOK_CREATOR,
        "header_color": HEADER_COLOR,
        "currency_symbol": CURRENCY_SYMBOL,
    }
