"""Binary path resolver use case for selecting a bundle's executable."""

from __future__ import annotations

import logging
from pathlib import Path

from artifact_bundle.adapters.ports import FileSystemPort, HostTripleDetectorPort
from artifact_bundle.domain.exceptions import (
    ArtifactNotDeclaredError,
    BinaryMissingError,
    DetectionError,
    HostTripleUnavailableError,
    ManifestReadError,
    NoVariantForTripleError,
)
from artifact_bundle.usecases.bundle_locator import BundleLocator
from artifact_bundle.usecases.manifest_parser import ManifestParser

logger = logging.getLogger(__name__)


class BinaryPathResolver:
    """Use case for resolving the path of a bundled executable.

    Coordinates bundle location, manifest parsing and host triple
    detection (via HostTripleDetectorPort) to find which variant of an
    artifact runs on this machine:

    1. Locate the bundle root
    2. Read and parse <root>/info.json
    3. Look up the artifact by name
    4. Detect the host triple
    5. Pick the first declared variant listing that triple
    6. Return <root>/<variant path>

    Nothing is cached: every call repeats the whole pipeline, including
    the triple detection.
    """

    def __init__(
        self,
        bundle_locator: BundleLocator,
        file_system: FileSystemPort,
        triple_detector: HostTripleDetectorPort,
        manifest_parser: ManifestParser | None = None,
        verify_binary_exists: bool = False,
    ) -> None:
        """Initialize the binary path resolver use case.

        Args:
            bundle_locator: Use case that finds the bundle root.
            file_system: Port used to read the manifest.
            triple_detector: Port for detecting the host triple.
            manifest_parser: Parser for info.json (defaults to ManifestParser()).
            verify_binary_exists: If True, fail when the resolved path does
                not exist instead of returning it unchecked.
        """
        self._bundle_locator = bundle_locator
        self._file_system = file_system
        self._triple_detector = triple_detector
        self._manifest_parser = manifest_parser or ManifestParser()
        self._verify_binary_exists = verify_binary_exists

    def __call__(self, bundle_name: str, repository_name: str) -> Path:
        """Resolve the absolute path of the binary for this host.

        Args:
            bundle_name: Artifact/bundle name, e.g. 'lefthook'.
            repository_name: Repository name used in build-directory layouts.

        Returns:
            Absolute path of the selected variant's executable.

        Raises:
            BundleNotFoundError: If no bundle root exists.
            ManifestReadError: If info.json cannot be read.
            ManifestParseError: If info.json is malformed.
            ArtifactNotDeclaredError: If the manifest lacks bundle_name.
            HostTripleUnavailableError: If the host triple cannot be detected.
            NoVariantForTripleError: If no variant supports the host triple.
            BinaryMissingError: If verification is enabled and the path is missing.
        """
        # Step 1: Locate the bundle
        root = self._bundle_locator.locate(bundle_name, repository_name)

        # Step 2: Read and parse the manifest
        manifest_path = root.manifest_path
        try:
            data = self._file_system.read_bytes(manifest_path)
        except OSError as e:
            raise ManifestReadError(
                f"Unable to read {manifest_path}: {e}",
                path=manifest_path,
                original_error=e,
            ) from e
        manifest = self._manifest_parser.parse(data)

        # Step 3: Look up the artifact
        artifact = manifest.get_artifact(bundle_name)
        if artifact is None:
            raise ArtifactNotDeclaredError(bundle_name, list(manifest.artifacts))

        # Step 4: Detect the host triple
        try:
            triple = self._triple_detector.detect()
        except HostTripleUnavailableError:
            raise
        except DetectionError as e:
            raise HostTripleUnavailableError(
                f"Unable to determine the host triple: {e.message}",
                command=e.command,
                original_error=e.original_error,
            ) from e

        # Step 5: Select the first matching variant
        variant = artifact.variant_for(triple)
        if variant is None:
            raise NoVariantForTripleError(triple.value, bundle_name)

        # Step 6: Compose the path
        binary_path = root.join(variant.path)
        logger.debug(
            "Resolved %s %s for %s to %s",
            bundle_name,
            artifact.version,
            triple,
            binary_path,
        )

        if self._verify_binary_exists and not self._file_system.exists(binary_path):
            raise BinaryMissingError(binary_path)

        return binary_path
