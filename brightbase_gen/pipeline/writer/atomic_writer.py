"""
Atomic file writer for generated bindings.

Ensures that an interrupted or failed write never leaves a half-written
artifact in place of the previous one.
"""

from __future__ import annotations

import tempfile
from pathlib import Path


class AtomicWriter:
    """Handles atomic file writes.

    Uses a two-phase approach:
    1. Write to a temporary file in the same directory
    2. Atomically replace the target file

    On failure the temporary file is removed and the target file is left
    untouched.
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OSError: If file operations fail
        """
        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            # newline="" keeps "\n" line endings on every platform
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            # On POSIX systems, rename() is atomic if source and dest are on same filesystem
            temp_path.replace(path)

        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise


def write_plain(path: Path, content: str) -> None:
    """Write content directly, without the temporary file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="")
