"""
Binding resolver.

Checks that every schema entry maps one-to-one onto the names the emitter
will declare, and fails fast on collisions instead of emitting
redeclarations.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..utils import is_ts_identifier
from .errors import BindingCollisionError, InvalidBindingNameError
from .extractor.nodes import SchemaEntries, TableDescriptor

# Suffixes of the per-table declarations in the table bindings document
TABLE_TYPE_SUFFIXES = ("", "CreateOptions", "ReadOptions", "InfiniteReadOptions")

# Names imported by the table bindings document
IMPORTED_NAMES = ("BrightTable", "BrightBaseCRUD")

# Global utility types the table bindings document refers to
GLOBAL_TYPE_NAMES = ("Parameters", "Omit")


def declared_names(table: TableDescriptor) -> list[str]:
    """Names the table bindings document declares for one table."""
    return [f"{table.binding_name}{suffix}" for suffix in TABLE_TYPE_SUFFIXES]


class BindingResolver:
    """Validates descriptors after normalization."""

    def resolve(self, entries: SchemaEntries) -> SchemaEntries:
        """
        Validate extracted entries.

        Args:
            entries: The extractor output

        Returns:
            The same entries, once validated

        Raises:
            InvalidBindingNameError: If a key does not normalize to a TypeScript identifier
            BindingCollisionError: If two entries produce the same key or generated name
        """
        self._check_duplicates(table.table_name for table in entries.tables)
        self._check_table_names(entries.tables)
        self._check_duplicates(rpc.function_name for rpc in entries.rpc_functions)
        return entries

    def _check_table_names(self, tables: Iterable[TableDescriptor]) -> None:
        owners: dict[str, list[str]] = {name: ["<import>"] for name in IMPORTED_NAMES}
        owners.update({name: ["<global>"] for name in GLOBAL_TYPE_NAMES})

        for table in tables:
            if not is_ts_identifier(table.binding_name):
                raise InvalidBindingNameError(table.table_name, table.binding_name)
            for name in declared_names(table):
                owners.setdefault(name, []).append(table.table_name)

        for name, sources in owners.items():
            if len(sources) > 1:
                raise BindingCollisionError(name, sources)

    def _check_duplicates(self, keys: Iterable[str]) -> None:
        seen: set[str] = set()
        for key in keys:
            if key in seen:
                raise BindingCollisionError(key, [key, key])
            seen.add(key)
