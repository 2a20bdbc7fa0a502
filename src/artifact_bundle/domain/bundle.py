"""Bundle-related domain value objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from artifact_bundle.domain.exceptions import ArtifactBundleError


@dataclass(frozen=True)
class HostTriple:
    """Identifier for the host's architecture, vendor and OS.

    Treated as an opaque token, e.g. 'arm64-apple-macosx'. Compared by
    exact string equality only.

    Attributes:
        value: The triple string.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate triple is not blank."""
        if not self.value or not self.value.strip():
            raise ArtifactBundleError("host triple cannot be empty")

    def __str__(self) -> str:
        """Return the triple string."""
        return self.value


@dataclass(frozen=True)
class BundleRoot:
    """Absolute directory that holds a bundle's info.json.

    Attributes:
        path: Absolute path to the bundle directory.
    """

    path: Path

    MANIFEST_FILENAME = "info.json"

    def __post_init__(self) -> None:
        """Validate path is absolute."""
        if not self.path.is_absolute():
            raise ArtifactBundleError(
                f"bundle root must be an absolute path, got: {str(self.path)!r}"
            )

    @property
    def manifest_path(self) -> Path:
        """Path of the bundle's info.json."""
        return self.path / self.MANIFEST_FILENAME

    def join(self, relative: str) -> Path:
        """Compose a variant path with this root.

        Variant paths are relative to the root even when written with a
        leading slash.

        Args:
            relative: Path relative to the bundle root.

        Returns:
            Absolute path under this root.
        """
        return self.path / relative.lstrip("/")
