"""
Pipeline generator.

Runs the phases in order:

1. Read the schema text (fatal on failure)
2. Extract table and RPC descriptors
3. Resolve bindings, failing fast on collisions
4. Emit documents and the stale-artifact decision
5. Synchronize the project directory
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import GeneratorConfig
from .emitter import GenerationResult, TypeScriptEmitter
from .errors import SchemaUnreadableError
from .extractor import SchemaEntries, extract_entries
from .resolver import BindingResolver
from .writer import FileSynchronizer, SyncReport

logger = logging.getLogger(__name__)


def read_schema(path: Path) -> str:
    """
    Read the schema-definition text.

    Raises:
        SchemaUnreadableError: If the file is missing, unreadable or not UTF-8
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaUnreadableError(Path(path), e) from e


class PipelineGenerator:
    """Generates BrightBase bindings from schema text."""

    def __init__(self, schema_text: str, config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            schema_text: The schema-definition text
            config: Generator configuration
        """
        self.schema_text = schema_text
        self.config = config or GeneratorConfig()
        self.resolver = BindingResolver()
        self.emitter = TypeScriptEmitter(self.config)

    def extract(self) -> SchemaEntries:
        """Extract and validate descriptors."""
        entries = extract_entries(self.schema_text)
        logger.info("Found %d table(s) and %d RPC function(s)", len(entries.tables), len(entries.rpc_functions))
        return self.resolver.resolve(entries)

    def generate(self) -> GenerationResult:
        """
        Generate every document for the schema text.

        Returns:
            Documents to write and stale paths to delete

        Raises:
            BindingCollisionError: If two entries produce the same generated name
            InvalidBindingNameError: If an entry has no usable binding name
        """
        return self.emitter.emit(self.extract())


def run(project_dir: Path, config: GeneratorConfig | None = None, schema_path: Path | None = None) -> SyncReport:
    """
    Generate bindings for a project and synchronize its files.

    Args:
        project_dir: Directory the configured paths are relative to
        config: Generator configuration
        schema_path: Schema file, defaults to config.schema_file under project_dir

    Returns:
        Per-path outcomes; write and delete failures are reported here

    Raises:
        SchemaUnreadableError: If the schema cannot be read; nothing is written
        BindingCollisionError: If two entries produce the same generated name
        InvalidBindingNameError: If an entry has no usable binding name
    """
    config = config or GeneratorConfig()
    project_dir = Path(project_dir)
    if schema_path is None:
        schema_path = project_dir / config.schema_file

    schema_text = read_schema(schema_path)
    result = PipelineGenerator(schema_text, config).generate()

    synchronizer = FileSynchronizer(project_dir, atomic_write=config.output.atomic_write)
    return synchronizer.sync(result)
