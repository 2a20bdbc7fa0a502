"""artifact-bundle-py: Resolve platform-specific binaries from artifact bundles."""

__version__ = "0.1.0"

from artifact_bundle.domain.exceptions import (
    ArtifactBundleError,
    ArtifactNotDeclaredError,
    BinaryMissingError,
    BundleNotFoundError,
    DetectionError,
    HostTripleUnavailableError,
    ManifestParseError,
    ManifestReadError,
    NoVariantForTripleError,
    SettingsError,
)
from artifact_bundle.domain.manifest import (
    ArtifactDescriptor,
    BundleManifest,
    VariantDescriptor,
)
from artifact_bundle.domain.settings import ResolverSettings
from artifact_bundle.factories import (
    create_binary_path_resolver,
    load_settings,
    resolve_binary_path,
)
from artifact_bundle.usecases.manifest_parser import ManifestParser

__all__ = [
    "ArtifactBundleError",
    "ArtifactDescriptor",
    "ArtifactNotDeclaredError",
    "BinaryMissingError",
    "BundleManifest",
    "BundleNotFoundError",
    "DetectionError",
    "HostTripleUnavailableError",
    "ManifestParseError",
    "ManifestParser",
    "ManifestReadError",
    "NoVariantForTripleError",
    "ResolverSettings",
    "SettingsError",
    "VariantDescriptor",
    "create_binary_path_resolver",
    "load_settings",
    "resolve_binary_path",
]
