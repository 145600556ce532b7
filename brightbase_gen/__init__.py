"""BrightBase Binding Generator

A Python package for generating typed BrightBase client bindings from a
Supabase-style database type-definition file. Extracts tables and remote
procedures, emits TypeScript CRUD and RPC accessors, and keeps the
generated files in sync with the schema.
"""

__version__ = "0.1.0"

from .pipeline import (
    AtomicWriter,
    BindingCollisionError,
    BrightBaseGenError,
    FileSynchronizer,
    GeneratorConfig,
    OutputConfig,
    PipelineGenerator,
    SchemaUnreadableError,
    Target,
    run,
)

__all__ = [
    "PipelineGenerator",
    "run",
    "GeneratorConfig",
    "OutputConfig",
    "Target",
    "FileSynchronizer",
    "AtomicWriter",
    "BrightBaseGenError",
    "SchemaUnreadableError",
    "BindingCollisionError",
]
