"""Bundle manifest value objects.

These mirror the structure of an artifact bundle's ``info.json``: a schema
version plus a mapping of artifact names to artifacts, each carrying an
ordered list of platform variants.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from artifact_bundle.domain.bundle import HostTriple


@dataclass(frozen=True)
class VariantDescriptor:
    """One platform-specific build of an artifact.

    Attributes:
        path: Location of the executable, relative to the bundle root. May
            be empty, which resolves to the bundle root itself.
        supported_triples: Triples this build runs on. Membership is
            exact string equality; declared order is preserved only so the
            manifest serializes back unchanged.
    """

    path: str
    supported_triples: tuple[str, ...]

    def supports(self, triple: HostTriple) -> bool:
        """Return True if this variant lists the triple exactly."""
        return triple.value in self.supported_triples


@dataclass(frozen=True)
class ArtifactDescriptor:
    """An artifact declared by the manifest.

    Attributes:
        type: Artifact kind, e.g. 'executable'.
        version: Artifact version string, carried through unchanged.
        variants: Platform variants in declared order.
    """

    type: str
    version: str
    variants: tuple[VariantDescriptor, ...]

    def variant_for(self, triple: HostTriple) -> VariantDescriptor | None:
        """Return the first declared variant that supports the triple.

        Args:
            triple: Host triple to match.

        Returns:
            The first matching VariantDescriptor, or None if no variant
            lists the triple.
        """
        for variant in self.variants:
            if variant.supports(triple):
                return variant
        return None


@dataclass(frozen=True)
class BundleManifest:
    """Parsed contents of a bundle's info.json.

    Attributes:
        schema_version: Manifest schema version. Not validated.
        artifacts: Artifact descriptors keyed by artifact name. Held in a
            read-only mapping and left out of the hash.
    """

    schema_version: str
    artifacts: Mapping[str, ArtifactDescriptor] = field(hash=False)

    def __post_init__(self) -> None:
        """Freeze the artifacts mapping."""
        object.__setattr__(self, "artifacts", MappingProxyType(dict(self.artifacts)))

    def get_artifact(self, name: str) -> ArtifactDescriptor | None:
        """Return the artifact declared under name, or None."""
        return self.artifacts.get(name)
