"""
File synchronization for generated documents.

Writes every document and removes stale artifacts under a project
directory. Each path is handled independently: a failure is recorded and
the remaining paths are still attempted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..emitter.base import GenerationResult
from ..errors import DeleteFailedError, SyncError, WriteFailedError
from .atomic_writer import AtomicWriter, write_plain

logger = logging.getLogger(__name__)


class SyncStatus(str, Enum):
    """Outcome for one output path."""

    WRITTEN = "written"
    DELETED = "deleted"
    SKIPPED = "skipped"  # Stale artifact was already absent
    FAILED = "failed"


@dataclass
class SyncResult:
    """Outcome of writing or deleting one output path."""

    path: Path
    status: SyncStatus
    error: SyncError | None = None


@dataclass
class SyncReport:
    """Per-path outcomes of a synchronization run."""

    results: list[SyncResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failures(self) -> list[SyncResult]:
        return [result for result in self.results if result.status == SyncStatus.FAILED]


class FileSynchronizer:
    """Persists a GenerationResult under a project directory."""

    def __init__(self, output_dir: Path, atomic_write: bool = True, writer: AtomicWriter | None = None):
        """
        Initialize the synchronizer.

        Args:
            output_dir: Project directory the document paths are relative to
            atomic_write: Whether to write through a temporary file and rename
            writer: Writer used for atomic writes
        """
        self.output_dir = Path(output_dir)
        self.atomic_write = atomic_write
        self.writer = writer or AtomicWriter()

    def sync(self, result: GenerationResult) -> SyncReport:
        """
        Write documents and delete stale artifacts.

        Never raises for I/O failures; they are reported in the SyncReport.

        Args:
            result: Documents to write and stale paths to delete

        Returns:
            One SyncResult per document and stale path
        """
        report = SyncReport()

        for document in result.documents:
            report.results.append(self._write(self.output_dir / document.path, document.content))

        for stale_path in result.stale_paths:
            report.results.append(self._delete(self.output_dir / stale_path))

        return report

    def _write(self, path: Path, content: str) -> SyncResult:
        try:
            if self.atomic_write:
                self.writer.write(path, content)
            else:
                write_plain(path, content)
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            return SyncResult(path, SyncStatus.FAILED, WriteFailedError(path, e))

        logger.info("Wrote %s", path)
        return SyncResult(path, SyncStatus.WRITTEN)

    def _delete(self, path: Path) -> SyncResult:
        if not path.exists():
            logger.debug("No stale artifact at %s", path)
            return SyncResult(path, SyncStatus.SKIPPED)

        try:
            path.unlink()
        except FileNotFoundError:
            # Removed by someone else in the meantime
            return SyncResult(path, SyncStatus.SKIPPED)
        except OSError as e:
            logger.error("Failed to delete %s: %s", path, e)
            return SyncResult(path, SyncStatus.FAILED, DeleteFailedError(path, e))

        logger.info("Deleted stale %s", path)
        return SyncResult(path, SyncStatus.DELETED)
