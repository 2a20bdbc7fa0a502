"""Domain exceptions.

Exception hierarchy:
- ArtifactBundleError: Base exception for every resolution failure.
  - ManifestParseError: info.json is malformed or missing a required field.
  - ManifestReadError: info.json could not be read from disk.
  - DetectionError: The host triple query failed.
    - HostTripleUnavailableError: DetectionError as seen by resolver callers.
  - BundleNotFoundError: No candidate bundle root exists.
  - ArtifactNotDeclaredError: The manifest does not declare the artifact.
  - NoVariantForTripleError: No variant supports the host triple.
  - BinaryMissingError: The resolved binary path does not exist.
  - SettingsError: Resolver settings are invalid.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ArtifactBundleError(Exception):
    """Raised when a binary cannot be resolved from an artifact bundle.

    This is the base exception for all resolution failures. Callers that
    only need to report "the binary could not be found" can catch this
    single type; callers that need to react differently per cause catch
    the subclasses.
    """

    pass


class ManifestParseError(ArtifactBundleError):
    """Raised when manifest data is not valid JSON or lacks a required field."""

    pass


class ManifestReadError(ArtifactBundleError):
    """Raised when the manifest file cannot be read.

    Attributes:
        message: Human-readable error description.
        path: Path of the manifest that could not be read.
        original_error: The underlying OS error.
    """

    def __init__(
        self,
        message: str,
        path: Path,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize ManifestReadError.

        Args:
            message: Human-readable error description.
            path: Path of the manifest that could not be read.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(message)
        self.message = message
        self.path = path
        self.original_error = original_error


class DetectionError(ArtifactBundleError):
    """Raised when the host triple cannot be detected.

    Covers a toolchain command that cannot be started, exits non-zero,
    prints something other than JSON, or omits the triple field.

    Attributes:
        message: Human-readable error description.
        command: The command line that was run (optional).
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize DetectionError.

        Args:
            message: Human-readable error description.
            command: The command line that was run.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(message)
        self.message = message
        self.command = tuple(command) if command is not None else None
        self.original_error = original_error


class HostTripleUnavailableError(DetectionError):
    """Raised by the resolver when host triple detection fails.

    The originating DetectionError is available as ``__cause__``.
    """

    pass


class BundleNotFoundError(ArtifactBundleError):
    """Raised when none of the candidate bundle roots exist.

    Attributes:
        bundle_name: Name of the bundle that was searched for.
        candidates: Every path that was probed, in probe order.
    """

    def __init__(self, bundle_name: str, candidates: Sequence[Path]) -> None:
        self.bundle_name = bundle_name
        self.candidates = tuple(candidates)
        probed = ", ".join(str(path) for path in self.candidates) or "none"
        super().__init__(
            f"Unable to find an artifact bundle directory for {bundle_name!r}. "
            f"Searched: {probed}"
        )


class ArtifactNotDeclaredError(ArtifactBundleError):
    """Raised when the manifest has no entry for the requested artifact.

    Attributes:
        artifact_name: The artifact that was requested.
        available: Artifact names the manifest does declare, sorted.
    """

    def __init__(self, artifact_name: str, available: Sequence[str] = ()) -> None:
        self.artifact_name = artifact_name
        self.available = tuple(sorted(available))
        super().__init__(
            f"Artifact {artifact_name!r} is not declared in the bundle manifest. "
            f"Declared artifacts: {', '.join(self.available) or 'none'}"
        )


class NoVariantForTripleError(ArtifactBundleError):
    """Raised when no variant of an artifact supports the host triple.

    Attributes:
        triple: The host triple that was matched against.
        artifact_name: The artifact whose variants were searched (optional).
    """

    def __init__(self, triple: str, artifact_name: str | None = None) -> None:
        self.triple = triple
        self.artifact_name = artifact_name
        subject = f"artifact {artifact_name!r}" if artifact_name else "artifact"
        super().__init__(
            f"According to the bundle manifest, {subject} has no binary "
            f"for the host triple {triple!r}"
        )


class BinaryMissingError(ArtifactBundleError):
    """Raised when the resolved binary does not exist on disk.

    Only raised when existence verification is enabled.

    Attributes:
        path: The resolved path that does not exist.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Resolved binary does not exist: {path}")


class SettingsError(ArtifactBundleError):
    """Raised when resolver settings are invalid."""

    pass
