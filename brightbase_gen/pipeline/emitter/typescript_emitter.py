"""
TypeScript binding emitter.

Renders the BrightBase table bindings, RPC bindings and support types
documents from descriptors.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from ...utils import is_ts_identifier
from ..extractor.nodes import RpcDescriptor, TableDescriptor
from .base import BindingEmitter, GeneratedDocument

# Types from the database types module that RPC literals may reference
DATABASE_TYPE_NAMES = ("Database", "Json")

_INDENT = "  "


def ts_string(value: str) -> str:
    """Quote a value as a single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def ts_key(name: str) -> str:
    """Format a name as an object literal or type member key."""
    return name if is_ts_identifier(name) else ts_string(name)


def ts_member(name: str) -> str:
    """Format a property access, e.g. `.users` or `['api-keys']`."""
    return f".{name}" if is_ts_identifier(name) else f"[{ts_string(name)}]"


def ts_union(values: Sequence[str]) -> str:
    """Format string literals as a union type, `never` when empty."""
    if not values:
        return "never"
    return " | ".join(ts_string(value) for value in values)


def reindent(literal: str) -> str:
    """
    Re-indent a multi-line type literal by bracket depth.

    Only leading whitespace changes; the literal is otherwise kept as
    captured.

    Args:
        literal: Type syntax captured from the schema text

    Returns:
        The literal with blank lines removed and lines indented relative to
        its first line
    """
    lines = [line.strip() for line in literal.splitlines() if line.strip()]
    result = []
    depth = 0
    for line in lines:
        leading_closers = len(line) - len(line.lstrip("}])"))
        result.append(_INDENT * max(depth - leading_closers, 0) + line)
        depth = max(depth + sum(line.count(c) for c in "{[(") - sum(line.count(c) for c in "}])"), 0)
    return "\n".join(result)


def referenced_types(literals: Sequence[str], names: Sequence[str] = DATABASE_TYPE_NAMES) -> list[str]:
    """Return the names (in the given order) referenced by any literal."""
    return [name for name in names if any(re.search(rf"\b{name}\b", literal) for literal in literals)]


class TypeScriptEmitter(BindingEmitter):
    """Emits BrightBase TypeScript bindings."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    def template_filters(self) -> dict[str, Callable]:
        return {
            "ts_string": ts_string,
            "ts_key": ts_key,
            "ts_member": ts_member,
            "ts_union": ts_union,
            "reindent": reindent,
        }

    def emit_table_bindings(self, tables: Sequence[TableDescriptor]) -> GeneratedDocument:
        content = self.tables_template.render(
            tables=list(tables),
            client_package=self.config.client_package,
            support_types_import=self.config.support_types_import,
            omit_on_create=self.config.omit_on_create,
            optional_on_create=self.config.optional_on_create,
            pagination_fields=self.config.pagination_fields,
        )
        return GeneratedDocument(path=self.config.output.tables_file, content=content)

    def emit_rpc_bindings(self, rpc_functions: Sequence[RpcDescriptor]) -> GeneratedDocument | None:
        if not rpc_functions:
            return None

        literals = [literal for rpc in rpc_functions for literal in (rpc.args_literal, rpc.return_literal)]
        content = self.rpc_template.render(
            rpc_functions=list(rpc_functions),
            client_package=self.config.client_package,
            database_types_import=self.config.database_types_import,
            type_imports=referenced_types(literals),
        )
        return GeneratedDocument(path=self.config.output.rpc_file, content=content)

    def emit_support_types(self) -> GeneratedDocument:
        content = self.support_types_template.render(
            database_types_import=self.config.support_database_types_import,
            include_function_helpers=self.config.generate_rpc,
        )
        return GeneratedDocument(path=self.config.output.support_types_file, content=content)
