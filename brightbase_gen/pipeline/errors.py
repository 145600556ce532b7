"""
Exceptions raised by the binding generator pipeline.
"""

from __future__ import annotations

from pathlib import Path


class BrightBaseGenError(Exception):
    """Base class for all generator errors."""

    pass


class SchemaUnreadableError(BrightBaseGenError):
    """Raised when the schema text cannot be read.

    This aborts the run before any extraction happens.
    """

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read schema file {path}: {cause}")


class InvalidBindingNameError(BrightBaseGenError):
    """Raised when a schema key does not normalize to a usable TypeScript name."""

    def __init__(self, source_name: str, binding_name: str):
        self.source_name = source_name
        self.binding_name = binding_name
        super().__init__(f"Schema key {source_name!r} normalizes to invalid binding name {binding_name!r}")


class BindingCollisionError(BrightBaseGenError):
    """Raised when two schema entries would produce the same generated name.

    Attributes:
        name: The generated name declared more than once
        sources: The schema keys that produce it
    """

    def __init__(self, name: str, sources: list[str]):
        self.name = name
        self.sources = sources
        joined = ", ".join(repr(source) for source in sources)
        super().__init__(f"Generated name {name!r} is produced by more than one schema entry: {joined}")


class SyncError(BrightBaseGenError):
    """Base class for per-artifact output failures.

    These are collected in a SyncReport rather than raised, so a failure on
    one output never prevents attempting the others.
    """

    action = "sync"

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to {self.action} {path}: {cause}")


class WriteFailedError(SyncError):
    """An output document could not be written."""

    action = "write"


class DeleteFailedError(SyncError):
    """A stale output document could not be deleted."""

    action = "delete"
