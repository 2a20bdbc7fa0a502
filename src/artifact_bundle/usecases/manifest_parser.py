"""Manifest parser use case for artifact bundles."""

from __future__ import annotations

import json
from typing import Any

from artifact_bundle.domain.exceptions import ManifestParseError
from artifact_bundle.domain.manifest import (
    ArtifactDescriptor,
    BundleManifest,
    VariantDescriptor,
)


class ManifestParser:
    """Parses and serializes a bundle's info.json.

    Wire format::

        {
          "schemaVersion": "1.0",
          "artifacts": {
            "<name>": {
              "type": "executable",
              "version": "1.6.18",
              "variants": [
                {"path": "<relative path>", "supportedTriples": ["<triple>", ...]}
              ]
            }
          }
        }

    Unknown keys are ignored. schemaVersion is carried through unchecked.
    """

    def parse(self, data: bytes | str) -> BundleManifest:
        """Parse info.json contents into a BundleManifest.

        Args:
            data: Raw manifest bytes (UTF-8) or already-decoded text.

        Returns:
            BundleManifest domain object.

        Raises:
            ManifestParseError: If data is not a JSON object or a required
                field is missing or has the wrong type.
        """
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ManifestParseError(f"Manifest is not valid UTF-8: {e}") from e

        try:
            document = json.loads(data)
        except (ValueError, RecursionError) as e:
            raise ManifestParseError(f"Invalid JSON: {e}") from e

        root = _require_type(document, dict, "manifest")
        schema_version = _require_field(root, "schemaVersion", str, "manifest")
        raw_artifacts = _require_field(root, "artifacts", dict, "manifest")

        artifacts = {
            name: self._parse_artifact(name, raw)
            for name, raw in raw_artifacts.items()
        }
        return BundleManifest(schema_version=schema_version, artifacts=artifacts)

    def _parse_artifact(self, name: str, raw: Any) -> ArtifactDescriptor:
        where = f"artifacts[{name!r}]"
        artifact = _require_type(raw, dict, where)
        raw_variants = _require_field(artifact, "variants", list, where)
        return ArtifactDescriptor(
            type=_require_field(artifact, "type", str, where),
            version=_require_field(artifact, "version", str, where),
            variants=tuple(
                self._parse_variant(raw_variant, f"{where}.variants[{index}]")
                for index, raw_variant in enumerate(raw_variants)
            ),
        )

    def _parse_variant(self, raw: Any, where: str) -> VariantDescriptor:
        variant = _require_type(raw, dict, where)
        triples = _require_field(variant, "supportedTriples", list, where)
        for triple in triples:
            if not isinstance(triple, str):
                raise ManifestParseError(
                    f"{where}.supportedTriples entries must be strings, got: {triple!r}"
                )
        return VariantDescriptor(
            path=_require_field(variant, "path", str, where),
            supported_triples=tuple(triples),
        )

    def serialize(self, manifest: BundleManifest) -> str:
        """Serialize a BundleManifest to info.json text.

        Args:
            manifest: Manifest to serialize.

        Returns:
            JSON text that parse() turns back into an equal manifest.
        """
        document = {
            "schemaVersion": manifest.schema_version,
            "artifacts": {
                name: {
                    "type": artifact.type,
                    "version": artifact.version,
                    "variants": [
                        {
                            "path": variant.path,
                            "supportedTriples": list(variant.supported_triples),
                        }
                        for variant in artifact.variants
                    ],
                }
                for name, artifact in manifest.artifacts.items()
            },
        }
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def _require_type(value: Any, expected: type, where: str) -> Any:
    if not isinstance(value, expected):
        raise ManifestParseError(
            f"{where} must be a JSON {_JSON_NAMES[expected]}, "
            f"got: {type(value).__name__}"
        )
    return value


def _require_field(obj: dict[str, Any], key: str, expected: type, where: str) -> Any:
    if key not in obj:
        raise ManifestParseError(f"Missing required field {key!r} in {where}")
    return _require_type(obj[key], expected, f"{where}.{key}")


_JSON_NAMES: dict[type, str] = {dict: "object", list: "array", str: "string"}
