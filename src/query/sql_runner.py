"""
SQL Runner
==========

Executes parameterized SQL against the SQLite database and returns rows with
column metadata. One connection per call, always closed.
"""

import logging
import sqlite3
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence


logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class QueryExecutionError(Exception):
    """Raised when a query fails to execute."""

    def __init__(self, message: str, sql: str = "", params: Any = None):
        self.sql = sql
        self.params = params
        super().__init__(message)


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass
class QueryResult:
    """Rows plus column names of one executed statement."""
    rows: list[dict[str, Any]]
    columns: list[str]
    sql: str
    params: Any = None
    execution_time: str = field(default_factory=lambda: _now_iso())

    @property
    def count(self) -> int:
        return len(self.rows)

    def to_dict(self) -> dict:
        return {
            "success": True,
            "data": self.rows,
            "columns": self.columns,
            "count": self.count,
            "execution_time": self.execution_time,
            "sql": self.sql,
            "params": self.params,
        }


# =============================================================================
# RUNNER
# =============================================================================

class SqlRunner:
    """
    Parameterized query runner.

    Params are a sequence for positional `?` placeholders or a mapping for
    named `:name` placeholders.
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def execute(self, sql: str, params: Sequence[Any] | dict | None = None) -> QueryResult:
        """
        Execute one statement.

        Raises:
            QueryExecutionError: If SQLite rejects the statement.
        """
        params = params if params is not None else []
        logger.info("Executing SQL: %s", sql.strip()[:200])
        logger.debug("Parameters: %s", params)

        conn = self._connect()
        try:
            cur = conn.execute(sql, params)
            columns = [desc[0] for desc in cur.description or []]
            rows = [dict(row) for row in cur.fetchall()]
            conn.commit()
        except sqlite3.Error as e:
            logger.error("SQL execution error: %s", e)
            raise QueryExecutionError(str(e), sql=sql, params=params) from e
        finally:
            conn.close()

        logger.info("Fetched %d rows", len(rows))
        return QueryResult(rows=rows, columns=columns, sql=sql, params=params)

    def test_connection(self) -> dict:
        """Run a trivial query and report connectivity."""
        try:
            self.execute("SELECT 1 AS connection_test")
        except QueryExecutionError as e:
            return {"connected": False, "error": str(e), "timestamp": _now_iso()}
        return {"connected": True, "timestamp": _now_iso()}


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
