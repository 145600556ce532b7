"""
Configuration for the binding generator pipeline.

All source and output paths are explicit and relative to the project
directory handed to the pipeline; nothing is derived from the process
working directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Target(str, Enum):
    """Project layout presets.

    Controls the client package, the file layout and whether RPC bindings
    are generated.
    """

    NATIVE = "native"  # types/ and api/ at the project root, bsdweb client
    WEB = "web"  # src/types and src/api, brightside-developer client


@dataclass
class OutputConfig:
    """Configuration for output files.

    Attributes:
        tables_file: Table bindings document, relative to the project directory
        rpc_file: RPC bindings document, deleted when the schema has no functions
        support_types_file: Support types document (BrightTable, RealtimeEvents, ...)
        atomic_write: Whether to write through a temporary file and rename
    """

    tables_file: str = "api/Tables.ts"
    rpc_file: str = "api/Rpc.ts"
    support_types_file: str = "types/bright.types.ts"
    atomic_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for binding generation."""

    # Schema-definition file, relative to the project directory
    schema_file: str = "types/database.types.ts"

    # Package providing BrightBaseCRUD and BrightBaseFunctions
    client_package: str = "bsdweb"

    # Module specifiers used by the generated imports
    support_types_import: str = "../types/bright.types"
    database_types_import: str = "../types/database.types"
    support_database_types_import: str = "./database.types"

    # Columns managed by the database and omitted from create payloads
    omit_on_create: list[str] = field(default_factory=lambda: ["id", "created_at"])

    # Columns that may be left out of create payloads
    optional_on_create: list[str] = field(default_factory=list)

    # Read options dropped from the infinite (paginated) read variant
    pagination_fields: list[str] = field(default_factory=lambda: ["limit", "offset"])

    # Whether to generate (or delete) the RPC bindings document
    generate_rpc: bool = True

    # Whether to generate the support types document
    generate_support_types: bool = True

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def for_target(target: Target | str) -> GeneratorConfig:
        """Create the preset config for a project layout."""
        target = Target(target)
        if target == Target.WEB:
            return GeneratorConfig(
                schema_file="src/types/database.types.ts",
                client_package="brightside-developer",
                generate_rpc=False,
                output=OutputConfig(
                    tables_file="src/api/Tables.ts",
                    rpc_file="src/api/Rpc.ts",
                    support_types_file="src/types/bright.types.ts",
                ),
            )
        return GeneratorConfig()

    @staticmethod
    def from_dict(d: dict, target: Target | str = Target.NATIVE) -> GeneratorConfig:
        """Create a config from a dictionary, on top of a target preset."""
        config = GeneratorConfig.for_target(target)
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                for output_key, output_value in v.items():
                    if hasattr(config.output, output_key):
                        setattr(config.output, output_key, output_value)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "schema_file": self.schema_file,
            "client_package": self.client_package,
            "support_types_import": self.support_types_import,
            "database_types_import": self.database_types_import,
            "support_database_types_import": self.support_database_types_import,
            "omit_on_create": list(self.omit_on_create),
            "optional_on_create": list(self.optional_on_create),
            "pagination_fields": list(self.pagination_fields),
            "generate_rpc": self.generate_rpc,
            "generate_support_types": self.generate_support_types,
            "output": {
                "tables_file": self.output.tables_file,
                "rpc_file": self.output.rpc_file,
                "support_types_file": self.output.support_types_file,
                "atomic_write": self.output.atomic_write,
            },
        }
