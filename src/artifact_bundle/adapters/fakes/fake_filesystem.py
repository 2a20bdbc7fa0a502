"""Fake filesystem for testing.

Provides an in-memory test double for FileSystemPort so bundle search
order can be tested without touching the disk.
"""

from __future__ import annotations

from pathlib import Path, PurePath


class FakeFileSystem:
    """In-memory implementation of FileSystemPort for testing.

    Directories and files are registered explicitly; registering a path
    also registers all of its parents as directories. Directory listings
    come back in insertion order unless reordered with
    set_listing_order(), which lets tests simulate unstable enumeration.

    Example:
        >>> fs = FakeFileSystem()
        >>> fs.add_file(Path("/repo/bundle/info.json"), b"{}")
        >>> fs.exists(Path("/repo/bundle"))
        True
        >>> fs.list_subdirectories(Path("/repo"))
        [PosixPath('/repo/bundle')]
    """

    def __init__(self) -> None:
        """Initialize an empty filesystem."""
        self._directories: dict[PurePath, None] = {}
        self._files: dict[PurePath, bytes] = {}
        self._listing_order: dict[PurePath, list[str]] = {}
        self._unreadable: set[PurePath] = set()
        self._reads: list[Path] = []

    @property
    def reads(self) -> list[Path]:
        """Paths passed to read_bytes(), in call order."""
        return list(self._reads)

    def add_directory(self, path: Path) -> None:
        """Register a directory and all of its parents."""
        for parent in reversed(path.parents):
            self._directories.setdefault(parent, None)
        self._directories.setdefault(path, None)

    def add_file(self, path: Path, content: bytes = b"") -> None:
        """Register a file with content, creating its parent directories."""
        self.add_directory(path.parent)
        self._files[path] = content

    def mark_unreadable(self, path: Path) -> None:
        """Make read_bytes() raise PermissionError for an existing file."""
        self._unreadable.add(path)

    def set_listing_order(self, path: Path, names: list[str]) -> None:
        """Fix the order in which subdirectory names under path are listed."""
        self._listing_order[path] = list(names)

    def exists(self, path: Path) -> bool:
        """Check if a registered file or directory exists at path."""
        return path in self._directories or path in self._files

    def list_subdirectories(self, path: Path) -> list[Path]:
        """List registered directories directly under path."""
        if path not in self._directories:
            return []
        children = [d for d in self._directories if d.parent == path and d != path]
        order = self._listing_order.get(path)
        if order is not None:
            rank = {name: index for index, name in enumerate(order)}
            children.sort(key=lambda d: rank.get(d.name, len(rank)))
        return [Path(child) for child in children]

    def read_bytes(self, path: Path) -> bytes:
        """Return registered file content.

        Raises:
            FileNotFoundError: If no file is registered at path.
            IsADirectoryError: If path is a registered directory.
            PermissionError: If path was marked unreadable.
        """
        self._reads.append(path)
        if path in self._unreadable:
            raise PermissionError(f"Permission denied: {path}")
        if path in self._files:
            return self._files[path]
        if path in self._directories:
            raise IsADirectoryError(f"Is a directory: {path}")
        raise FileNotFoundError(f"No such file: {path}")
