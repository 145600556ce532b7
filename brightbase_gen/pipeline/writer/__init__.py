"""
Writer module.

Persists generated documents atomically and removes stale artifacts.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, write_plain
from .synchronizer import FileSynchronizer, SyncReport, SyncResult, SyncStatus

__all__ = [
    "AtomicWriter",
    "write_plain",
    "FileSynchronizer",
    "SyncReport",
    "SyncResult",
    "SyncStatus",
]
