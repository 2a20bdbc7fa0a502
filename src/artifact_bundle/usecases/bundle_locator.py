"""Bundle locator use case for finding an artifact bundle's root directory."""

from __future__ import annotations

import logging
from pathlib import Path

from artifact_bundle.adapters.ports import FileSystemPort
from artifact_bundle.domain.bundle import BundleRoot
from artifact_bundle.domain.exceptions import BundleNotFoundError

logger = logging.getLogger(__name__)

BUILD_ARTIFACTS_DIR = Path(".build") / "artifacts"
INSTALLED_ARTIFACTS_DIR = "artifacts"
HOSTED_REPOSITORY_MARKER = "github.com_"


class BundleLocator:
    """Use case for locating the root directory of an unpacked bundle.

    The same tool can be launched from a working tree, from an installed
    location, or by an installer that lays bundles out by source
    repository host. Candidates are probed in priority order and the first
    one that exists wins:

    1. <working dir>/.build/artifacts/<repository, lowercased>/<bundle>
    2. <executable dir>/.build/artifacts/<repository, lowercased>/<bundle>
    3. <artifacts dir>/<first 'github.com_*' subdirectory>/<bundle>, where
       the artifacts dir is <working dir>/artifacts if it exists, otherwise
       <executable dir>/artifacts. Matching subdirectories are sorted by
       name and the smallest one is used.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        working_directory: Path,
        executable_directory: Path,
    ) -> None:
        """Initialize the bundle locator.

        Args:
            file_system: Port for existence checks and directory listing.
            working_directory: Absolute directory the tool was invoked from.
            executable_directory: Absolute directory of the running executable.
        """
        self._file_system = file_system
        self._working_directory = working_directory
        self._executable_directory = executable_directory

    def locate(self, bundle_name: str, repository_name: str) -> BundleRoot:
        """Find the bundle's root directory.

        Args:
            bundle_name: Name of the bundle, e.g. 'lefthook'.
            repository_name: Name of the repository the bundle was fetched
                for; matched case-insensitively in build layouts.

        Returns:
            BundleRoot for the first candidate that exists.

        Raises:
            BundleNotFoundError: If no candidate exists.
        """
        probed: list[Path] = []

        relative = BUILD_ARTIFACTS_DIR / repository_name.lower() / bundle_name
        for base in (self._working_directory, self._executable_directory):
            candidate = base / relative
            probed.append(candidate)
            logger.debug("Probing bundle candidate %s", candidate)
            if self._file_system.exists(candidate):
                return BundleRoot(candidate)

        fallback = self._find_installed_bundle(bundle_name, probed)
        if fallback is not None:
            return BundleRoot(fallback)

        raise BundleNotFoundError(bundle_name, probed)

    def _find_installed_bundle(
        self, bundle_name: str, probed: list[Path]
    ) -> Path | None:
        """Find the bundle under an installer's artifacts directory.

        Appends every path it inspects to probed.
        """
        artifacts_dir: Path | None = None
        for base in (self._working_directory, self._executable_directory):
            candidate = base / INSTALLED_ARTIFACTS_DIR
            probed.append(candidate)
            if self._file_system.exists(candidate):
                artifacts_dir = candidate
                break

        if artifacts_dir is None:
            return None

        matches = sorted(
            (
                directory
                for directory in self._file_system.list_subdirectories(artifacts_dir)
                if HOSTED_REPOSITORY_MARKER in directory.name
            ),
            key=lambda directory: directory.name,
        )
        if not matches:
            logger.debug(
                "No %r directories under %s", HOSTED_REPOSITORY_MARKER, artifacts_dir
            )
            return None
        if len(matches) > 1:
            logger.warning(
                "Multiple bundle directories under %s, using %s: %s",
                artifacts_dir,
                matches[0].name,
                ", ".join(match.name for match in matches),
            )

        candidate = matches[0] / bundle_name
        probed.append(candidate)
        logger.debug("Probing bundle candidate %s", candidate)
        if self._file_system.exists(candidate):
            return candidate
        return None
