"""Factory functions for creating binary path resolvers.

Wires the real filesystem and toolchain adapters into the resolution use
cases, and exposes resolve_binary_path() as the one-call entry point for
launchers.
"""

from __future__ import annotations

from pathlib import Path

from artifact_bundle.adapters.local_filesystem import LocalFileSystem
from artifact_bundle.adapters.ports import FileSystemPort, HostTripleDetectorPort
from artifact_bundle.adapters.toolchain_triple_detector import ToolchainTripleDetector
from artifact_bundle.domain.exceptions import SettingsError
from artifact_bundle.domain.settings import ResolverSettings
from artifact_bundle.usecases.binary_path_resolver import BinaryPathResolver
from artifact_bundle.usecases.bundle_locator import BundleLocator
from artifact_bundle.usecases.settings_parser import SettingsParser


def load_settings(settings_file: Path | None = None) -> ResolverSettings:
    """Build settings from the environment and an optional YAML file.

    Args:
        settings_file: Path of a YAML settings file to apply over the
            environment defaults, or None.

    Returns:
        ResolverSettings for the current process.

    Raises:
        SettingsError: If the environment or the settings file is invalid.
    """
    settings = ResolverSettings.from_environment()
    if settings_file is None:
        return settings

    try:
        content = settings_file.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Unable to read settings file {settings_file}: {e}") from e
    return SettingsParser().parse(content, base=settings)


def create_binary_path_resolver(
    settings: ResolverSettings | None = None,
    file_system: FileSystemPort | None = None,
    triple_detector: HostTripleDetectorPort | None = None,
) -> BinaryPathResolver:
    """Create a BinaryPathResolver wired with real adapters.

    Args:
        settings: Resolver settings (defaults to ResolverSettings.from_environment()).
        file_system: Filesystem port (defaults to LocalFileSystem()).
        triple_detector: Triple detector port (defaults to a
            ToolchainTripleDetector running settings.toolchain_command).

    Returns:
        A ready-to-call BinaryPathResolver.

    Example:
        >>> resolver = create_binary_path_resolver()
        >>> resolver("lefthook", "my-repo")  # doctest: +SKIP
        PosixPath('/work/my-repo/.build/artifacts/my-repo/lefthook/bin/lefthook')
    """
    if settings is None:
        settings = ResolverSettings.from_environment()
    if file_system is None:
        file_system = LocalFileSystem()
    if triple_detector is None:
        triple_detector = ToolchainTripleDetector(settings.toolchain_command)

    locator = BundleLocator(
        file_system=file_system,
        working_directory=settings.working_directory,
        executable_directory=settings.executable_directory,
    )
    return BinaryPathResolver(
        bundle_locator=locator,
        file_system=file_system,
        triple_detector=triple_detector,
        verify_binary_exists=settings.verify_binary_exists,
    )


def resolve_binary_path(
    bundle_name: str,
    repository_name: str,
    settings: ResolverSettings | None = None,
) -> Path:
    """Resolve the absolute path of a bundled binary for this host.

    Args:
        bundle_name: Artifact/bundle name, e.g. 'lefthook'.
        repository_name: Repository name, typically the name of the
            current working directory.
        settings: Resolver settings (defaults to ResolverSettings.from_environment()).

    Returns:
        Absolute path to the executable variant for this host.

    Raises:
        ArtifactBundleError: Any resolution failure; see BinaryPathResolver.
    """
    resolver = create_binary_path_resolver(settings)
    return resolver(bundle_name, repository_name)
