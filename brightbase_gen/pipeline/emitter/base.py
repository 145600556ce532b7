"""
Base class for binding emitters.

Defines the interface that all target-language emitters must implement,
and the documents they produce.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

import jinja2

from ..config import GeneratorConfig
from ..extractor.nodes import RpcDescriptor, SchemaEntries, TableDescriptor


@dataclass(frozen=True)
class GeneratedDocument:
    """A generated text artifact.

    Attributes:
        path: Target path, relative to the project directory
        content: Full file content
    """

    path: str
    content: str


@dataclass(frozen=True)
class GenerationResult:
    """What a run should leave on disk.

    Attributes:
        documents: Documents to write, in emission order
        stale_paths: Previously generated artifacts to delete if present
    """

    documents: tuple[GeneratedDocument, ...] = ()
    stale_paths: tuple[str, ...] = ()

    def document(self, path: str) -> GeneratedDocument | None:
        """Look up a document by its target path."""
        for document in self.documents:
            if document.path == path:
                return document
        return None


class BindingEmitter(ABC):
    """Abstract base class for binding emitters.

    Emission is a pure function of the descriptors and the configuration.
    """

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig | None = None):
        """
        Initialize the emitter.

        Args:
            config: Generator configuration
        """
        self.config = config or GeneratorConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self.jinja_env.filters.update(self.template_filters())

        self.tables_template = self.jinja_env.get_template(f"tables.{self.FILE_EXTENSION}.jinja2")
        self.rpc_template = self.jinja_env.get_template(f"rpc.{self.FILE_EXTENSION}.jinja2")
        self.support_types_template = self.jinja_env.get_template(f"support_types.{self.FILE_EXTENSION}.jinja2")

    def template_filters(self) -> dict[str, Callable]:
        """Extra Jinja2 filters for the target language."""
        return {}

    @abstractmethod
    def emit_table_bindings(self, tables: Sequence[TableDescriptor]) -> GeneratedDocument:
        """
        Emit the table bindings document.

        Args:
            tables: Table descriptors, in source order

        Returns:
            The document, even when there are no tables
        """

    @abstractmethod
    def emit_rpc_bindings(self, rpc_functions: Sequence[RpcDescriptor]) -> GeneratedDocument | None:
        """
        Emit the remote procedure bindings document.

        Args:
            rpc_functions: RPC descriptors, in source order

        Returns:
            The document, or None when there are no functions (the prior
            artifact should then be deleted)
        """

    @abstractmethod
    def emit_support_types(self) -> GeneratedDocument:
        """Emit the support types document the bindings import from."""

    def emit(self, entries: SchemaEntries) -> GenerationResult:
        """
        Emit every document enabled by the configuration.

        Args:
            entries: Validated descriptors

        Returns:
            Documents to write and stale paths to delete
        """
        documents = [self.emit_table_bindings(entries.tables)]
        stale_paths = []

        if self.config.generate_rpc:
            rpc_document = self.emit_rpc_bindings(entries.rpc_functions)
            if rpc_document is None:
                stale_paths.append(self.config.output.rpc_file)
            else:
                documents.append(rpc_document)

        if self.config.generate_support_types:
            documents.append(self.emit_support_types())

        return GenerationResult(documents=tuple(documents), stale_paths=tuple(stale_paths))
