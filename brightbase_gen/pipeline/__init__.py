"""
Pipeline - schema text to BrightBase bindings.

This module provides a linear, multi-phase architecture:

1. Phase 1 (Extractor): Scan schema text into table and RPC descriptors
2. Phase 2 (Resolver): Validate binding names, fail fast on collisions
3. Phase 3 (Emitter): Render TypeScript documents from Jinja2 templates
4. Phase 4 (Writer): Atomically write documents, delete stale artifacts
"""

from __future__ import annotations

from .config import GeneratorConfig, OutputConfig, Target
from .emitter import GeneratedDocument, GenerationResult, TypeScriptEmitter
from .errors import (
    BindingCollisionError,
    BrightBaseGenError,
    DeleteFailedError,
    InvalidBindingNameError,
    SchemaUnreadableError,
    SyncError,
    WriteFailedError,
)
from .extractor import RpcDescriptor, SchemaEntries, TableDescriptor, extract_entries, extract_rpc_functions, extract_tables
from .generator import PipelineGenerator, read_schema, run
from .resolver import BindingResolver
from .writer import AtomicWriter, FileSynchronizer, SyncReport, SyncResult, SyncStatus

__all__ = [
    "PipelineGenerator",
    "run",
    "read_schema",
    "GeneratorConfig",
    "OutputConfig",
    "Target",
    "TableDescriptor",
    "RpcDescriptor",
    "SchemaEntries",
    "extract_tables",
    "extract_rpc_functions",
    "extract_entries",
    "BindingResolver",
    "TypeScriptEmitter",
    "GeneratedDocument",
    "GenerationResult",
    "AtomicWriter",
    "FileSynchronizer",
    "SyncReport",
    "SyncResult",
    "SyncStatus",
    "BrightBaseGenError",
    "SchemaUnreadableError",
    "InvalidBindingNameError",
    "BindingCollisionError",
    "SyncError",
    "WriteFailedError",
    "DeleteFailedError",
]
