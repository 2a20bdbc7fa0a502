"""Local filesystem adapter.

Implements FileSystemPort on top of pathlib. Read-only.
"""

from __future__ import annotations

from pathlib import Path


class LocalFileSystem:
    """Adapter that answers FileSystemPort queries against the real disk."""

    def exists(self, path: Path) -> bool:
        """Check if a file or directory exists at path."""
        return path.exists()

    def list_subdirectories(self, path: Path) -> list[Path]:
        """List directories directly under path.

        Returns:
            Subdirectory paths, or an empty list if path is not a readable
            directory.
        """
        try:
            entries = list(path.iterdir())
        except OSError:
            return []
        return [entry for entry in entries if entry.is_dir()]

    def read_bytes(self, path: Path) -> bytes:
        """Read a file's contents.

        Raises:
            OSError: If the file cannot be read.
        """
        return path.read_bytes()
