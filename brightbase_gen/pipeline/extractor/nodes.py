"""
Descriptor definitions for entries recovered from schema text.

Descriptors are built fresh on every run and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SchemaEntry:
    """A key followed by an object literal, as found by the scanner."""

    name: str

    # Offsets of the first character after `{` and of the matching `}`
    body_start: int = 0
    body_end: int = 0

    # Top-level fields of the object literal, in source order (first wins)
    fields: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TableDescriptor:
    """A table (or view) entry, identified by its `Row` field."""

    table_name: str  # Raw schema key, e.g. "user_profiles"
    binding_name: str  # Normalized name, e.g. "UserProfiles"


@dataclass(frozen=True)
class RpcDescriptor:
    """A remote procedure entry, identified by its `Args` and `Returns` fields."""

    function_name: str

    # Opaque fragments of the source type syntax, carried through as-is
    args_literal: str
    return_literal: str


@dataclass(frozen=True)
class SchemaEntries:
    """Everything the extractor recovers from one schema text."""

    tables: tuple[TableDescriptor, ...] = ()
    rpc_functions: tuple[RpcDescriptor, ...] = ()

    def is_empty(self) -> bool:
        """Check if nothing was recovered."""
        return not self.tables and not self.rpc_functions
