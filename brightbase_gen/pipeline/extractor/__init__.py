"""
Schema extractor module.

Contains the descriptor definitions and the scanner that recovers them
from schema text.
"""

from __future__ import annotations

from .extractor import extract_entries, extract_rpc_functions, extract_tables
from .nodes import RpcDescriptor, SchemaEntries, SchemaEntry, TableDescriptor
from .scanner import SchemaScanner

__all__ = [
    "SchemaEntry",
    "TableDescriptor",
    "RpcDescriptor",
    "SchemaEntries",
    "SchemaScanner",
    "extract_tables",
    "extract_rpc_functions",
    "extract_entries",
]
