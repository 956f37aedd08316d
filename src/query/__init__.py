"""
Query Module
============

SQL execution layer: ad-hoc parameterized queries and named SQL scripts.
"""

from .sql_runner import (
    SqlRunner,
    QueryResult,
    QueryExecutionError,
)

from .sql_files import (
    get_sql_path,
    load_sql_file,
    list_sql_files,
    named_placeholders,
    execute_sql_file,
    SqlFileNotFoundError,
)

__all__ = [
    "SqlRunner",
    "QueryResult",
    "get_sql_path",
    "load_sql_file",
    "list_sql_files",
    "named_placeholders",
    "execute_sql_file",
    "QueryExecutionError",
    "SqlFileNotFoundError",
]
