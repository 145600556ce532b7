"""
Schema extractor.

Phase 1 of the pipeline: recover table and remote procedure descriptors from
the schema text. Malformed or empty text yields empty sequences, never an
error.
"""

from __future__ import annotations

import logging

from ...utils import snake_to_pascal_case
from .nodes import RpcDescriptor, SchemaEntries, SchemaEntry, TableDescriptor
from .scanner import SchemaScanner

logger = logging.getLogger(__name__)

# Marker fields classifying an entry
TABLE_MARKER = "Row"
RPC_ARGS_MARKER = "Args"
RPC_RETURNS_MARKER = "Returns"


def _is_table(entry: SchemaEntry) -> bool:
    return TABLE_MARKER in entry.fields


def _is_rpc_function(entry: SchemaEntry) -> bool:
    return RPC_ARGS_MARKER in entry.fields and RPC_RETURNS_MARKER in entry.fields


def extract_tables(schema_text: str) -> list[TableDescriptor]:
    """
    Extract table descriptors in source order.

    Duplicate keys are kept; the binding resolver reports them.

    Args:
        schema_text: The schema-definition text

    Returns:
        One descriptor per entry carrying a `Row` field
    """
    entries = SchemaScanner(schema_text).find_entries(_is_table)
    tables = [TableDescriptor(table_name=entry.name, binding_name=snake_to_pascal_case(entry.name)) for entry in entries]
    logger.debug("Extracted %d table(s): %s", len(tables), ", ".join(t.table_name for t in tables))
    return tables


def extract_rpc_functions(schema_text: str) -> list[RpcDescriptor]:
    """
    Extract remote procedure descriptors in source order.

    Args:
        schema_text: The schema-definition text

    Returns:
        One descriptor per entry carrying both `Args` and `Returns` fields
    """
    entries = SchemaScanner(schema_text).find_entries(_is_rpc_function)
    rpc_functions = [
        RpcDescriptor(
            function_name=entry.name,
            args_literal=entry.fields[RPC_ARGS_MARKER],
            return_literal=entry.fields[RPC_RETURNS_MARKER],
        )
        for entry in entries
    ]
    logger.debug("Extracted %d RPC function(s): %s", len(rpc_functions), ", ".join(r.function_name for r in rpc_functions))
    return rpc_functions


def extract_entries(schema_text: str) -> SchemaEntries:
    """Extract both tables and remote procedures from schema text."""
    return SchemaEntries(
        tables=tuple(extract_tables(schema_text)),
        rpc_functions=tuple(extract_rpc_functions(schema_text)),
    )
