"""Port interfaces for the artifact bundle resolver.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from artifact_bundle.domain.bundle import HostTriple


@runtime_checkable
class HostTripleDetectorPort(Protocol):
    """Port interface for host triple detection.

    Implementations determine the triple (architecture, vendor, OS) of the
    machine performing the resolution.

    Contract:
        - detect() returns a fresh HostTriple on every call; results are not cached
        - detect() raises DetectionError when the triple cannot be determined
    """

    def detect(self) -> HostTriple:
        """Detect the host triple.

        Returns:
            HostTriple for the current machine.

        Raises:
            DetectionError: If the triple cannot be determined.
        """
        ...


@runtime_checkable
class FileSystemPort(Protocol):
    """Port interface for read-only filesystem access.

    Implementations answer the questions the bundle locator and resolver
    ask of the filesystem. Nothing is ever created or modified.

    Contract:
        - exists(path) returns True if a file or directory exists at path
        - list_subdirectories(path) returns the directories directly under
          path, or an empty list if path is missing or not a directory
        - read_bytes(path) returns file contents or raises OSError
    """

    def exists(self, path: Path) -> bool:
        """Check if a file or directory exists at path.

        Args:
            path: Path to check.

        Returns:
            True if something exists at path, False otherwise.
        """
        ...

    def list_subdirectories(self, path: Path) -> list[Path]:
        """List the immediate subdirectories of path.

        Args:
            path: Directory to list.

        Returns:
            Paths of the subdirectories. Order is unspecified.
        """
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Read a file's contents.

        Args:
            path: File to read.

        Returns:
            The file contents.

        Raises:
            OSError: If the file cannot be read.
        """
        ...
