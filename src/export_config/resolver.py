"""
Column Resolver
===============

One capability, two independent strategies:
- ConventionResolver: `_Display` alias grammar with all-columns fallback.
- DisplayConfigResolver: caller-declared include / exclude / order lists.

`get_column_resolver` picks the strategy from the inputs the caller supplies.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from .column_mapping import build_column_mapping
from .display_config import resolve_columns
from .models import ColumnDescriptor, DisplayOptions


class ColumnResolver(ABC):
    """Resolves ordered export columns from a result set."""

    @abstractmethod
    def resolve(
        self,
        all_columns: Sequence[str],
        rows: Sequence[Mapping[str, Any]]
    ) -> list[ColumnDescriptor]:
        ...


class ConventionResolver(ColumnResolver):
    """Derives columns from the first row's keys; `all_columns` is ignored."""

    def resolve(self, all_columns, rows):
        sample_row = rows[0] if rows else None
        return list(build_column_mapping(sample_row).columns)


class DisplayConfigResolver(ColumnResolver):
    """Applies caller display options over the given column list."""

    def __init__(self, options: DisplayOptions | None = None):
        self.options = options or DisplayOptions()

    def resolve(self, all_columns, rows):
        if not all_columns and rows:
            all_columns = list(rows[0].keys())
        return resolve_columns(all_columns, rows, self.options)


def get_column_resolver(display_options: DisplayOptions | None = None) -> ColumnResolver:
    """Display-config strategy when options are supplied, convention otherwise."""
    if display_options is not None:
        return DisplayConfigResolver(display_options)
    return ConventionResolver()
