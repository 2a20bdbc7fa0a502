"""Domain layer: Entities with zero external dependencies."""

from artifact_bundle.domain.bundle import BundleRoot, HostTriple
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

__all__ = [
    "ArtifactBundleError",
    "ArtifactDescriptor",
    "ArtifactNotDeclaredError",
    "BinaryMissingError",
    "BundleManifest",
    "BundleNotFoundError",
    "BundleRoot",
    "DetectionError",
    "HostTriple",
    "HostTripleUnavailableError",
    "ManifestParseError",
    "ManifestReadError",
    "NoVariantForTripleError",
    "ResolverSettings",
    "SettingsError",
    "VariantDescriptor",
]
