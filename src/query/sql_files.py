"""
SQL Script Loader
=================

Loads named `.sql` files from the scripts directory and runs them.
A script is addressed by its key file name (file name without `.sql`).
"""

import logging
import re
from pathlib import Path
from typing import Any

from .sql_runner import SqlRunner


logger = logging.getLogger(__name__)

SQL_SUFFIX = ".sql"

# `:name` but not `::type` casts
PLACEHOLDER_RE = re.compile(r"(?<![:\w]):([A-Za-z_]\w*)")


# =============================================================================
# EXCEPTIONS
# =============================================================================

class SqlFileNotFoundError(Exception):
    """Raised when no script exists for a key file name."""
    pass


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def get_sql_path(key_file_name: str, sql_dir: str | Path) -> Path:
    """
    Resolve the script path for a key file name.

    Raises:
        SqlFileNotFoundError: If the name is not a plain file name or the
            file does not exist.
    """
    if not key_file_name or Path(key_file_name).name != key_file_name:
        raise SqlFileNotFoundError(f"SQL file not found: {key_file_name}{SQL_SUFFIX}")

    path = Path(sql_dir) / f"{key_file_name}{SQL_SUFFIX}"
    if not path.is_file():
        raise SqlFileNotFoundError(f"SQL file not found: {path.name}")
    return path


def load_sql_file(key_file_name: str, sql_dir: str | Path) -> str:
    """Read the SQL text of a named script."""
    path = get_sql_path(key_file_name, sql_dir)
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def named_placeholders(sql: str) -> list[str]:
    """Distinct `:name` placeholders in order of first appearance."""
    return list(dict.fromkeys(PLACEHOLDER_RE.findall(sql)))


def list_sql_files(sql_dir: str | Path) -> list[str]:
    """Key file names of all scripts in the directory, sorted."""
    path = Path(sql_dir)
    if not path.is_dir():
        return []
    return sorted(p.stem for p in path.glob(f"*{SQL_SUFFIX}") if p.is_file())


def execute_sql_file(
    key_file_name: str,
    params: dict[str, Any] | None,
    runner: SqlRunner,
    sql_dir: str | Path
) -> list[dict[str, Any]]:
    """
    Run a named script with named parameters.

    Only parameters referenced as `:name` in the script are bound, so
    request-level flags (download, page, ...) can share the params dict.
    Referenced names missing from `params` are bound as NULL.
    """
    sql = load_sql_file(key_file_name, sql_dir)
    params = params or {}
    bound = {name: params.get(name) for name in named_placeholders(sql)}

    logger.info("Executing SQL from file: %s%s with params: %s", key_file_name, SQL_SUFFIX, bound)
    result = runner.execute(sql, bound)
    logger.info("Fetched %d rows from %s%s", result.count, key_file_name, SQL_SUFFIX)
    return result.rows
