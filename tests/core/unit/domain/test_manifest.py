"""Unit tests for manifest and bundle value objects."""

from pathlib import Path

import pytest

from artifact_bundle.domain.bundle import BundleRoot, HostTriple
from artifact_bundle.domain.exceptions import ArtifactBundleError
from artifact_bundle.domain.manifest import (
    ArtifactDescriptor,
    BundleManifest,
    VariantDescriptor,
)

LINUX = VariantDescriptor("bin/linux/tool", ("x86_64-unknown-linux-gnu",))
MAC = VariantDescriptor("bin/mac/tool", ("x86_64-apple-macosx", "arm64-apple-macosx"))


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.HostTriple")
class TestHostTriple:
    """Test HostTriple value object."""

    def test_str_is_value(self):
        assert str(HostTriple("arm64-apple-macosx")) == "arm64-apple-macosx"

    def test_equality_and_hash(self):
        assert HostTriple("a-b-c") == HostTriple("a-b-c")
        assert hash(HostTriple("a-b-c")) == hash(HostTriple("a-b-c"))

    @pytest.mark.parametrize("value", ["", "   "])
    def test_reject_blank(self, value):
        with pytest.raises(ArtifactBundleError, match="cannot be empty"):
            HostTriple(value)

    def test_frozen(self):
        triple = HostTriple("a-b-c")
        with pytest.raises(AttributeError):
            triple.value = "x"  # type: ignore


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.BundleRoot")
class TestBundleRoot:
    """Test BundleRoot value object."""

    def test_manifest_path(self):
        root = BundleRoot(Path("/b/tool"))
        assert root.manifest_path == Path("/b/tool/info.json")

    def test_join_relative_path(self):
        root = BundleRoot(Path("/b/tool"))
        assert root.join("bin/mac/tool") == Path("/b/tool/bin/mac/tool")

    def test_join_keeps_leading_slash_path_under_root(self):
        root = BundleRoot(Path("/b/tool"))
        assert root.join("/bin/tool") == Path("/b/tool/bin/tool")

    def test_reject_relative_root(self):
        with pytest.raises(ArtifactBundleError, match="absolute"):
            BundleRoot(Path("relative/tool"))


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Policy.VariantSelection")
class TestVariantSelection:
    """Variant matching is exact and honours declared order."""

    def test_supports_listed_triple(self):
        assert MAC.supports(HostTriple("arm64-apple-macosx"))

    def test_no_prefix_matching(self):
        assert not MAC.supports(HostTriple("arm64-apple-macosx14.0"))
        assert not MAC.supports(HostTriple("arm64-apple"))

    def test_no_os_only_fallback(self):
        assert not LINUX.supports(HostTriple("aarch64-unknown-linux-gnu"))

    def test_first_matching_variant_wins(self):
        also_mac = VariantDescriptor("bin/universal/tool", ("arm64-apple-macosx",))
        artifact = ArtifactDescriptor("executable", "1.0", (LINUX, MAC, also_mac))
        assert artifact.variant_for(HostTriple("arm64-apple-macosx")) is MAC

    def test_no_match_returns_none(self):
        artifact = ArtifactDescriptor("executable", "1.0", (LINUX, MAC))
        assert artifact.variant_for(HostTriple("arm64-unknown-linux-gnu")) is None

    def test_empty_variants_returns_none(self):
        artifact = ArtifactDescriptor("executable", "1.0", ())
        assert artifact.variant_for(HostTriple("arm64-apple-macosx")) is None

    def test_empty_variant_path_is_allowed(self):
        variant = VariantDescriptor("", ("arm64-apple-macosx",))
        assert variant.supports(HostTriple("arm64-apple-macosx"))
        assert BundleRoot(Path("/b/tool")).join(variant.path) == Path("/b/tool")


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.BundleManifest")
class TestBundleManifest:
    """Test BundleManifest lookups."""

    def test_get_artifact(self):
        artifact = ArtifactDescriptor("executable", "1.0", (LINUX,))
        manifest = BundleManifest("1.0", {"tool": artifact})
        assert manifest.get_artifact("tool") is artifact

    def test_get_missing_artifact_returns_none(self):
        manifest = BundleManifest("1.0", {})
        assert manifest.get_artifact("tool") is None

    def test_lookup_is_case_sensitive(self):
        artifact = ArtifactDescriptor("executable", "1.0", (LINUX,))
        manifest = BundleManifest("1.0", {"tool": artifact})
        assert manifest.get_artifact("Tool") is None

    def test_artifacts_are_read_only(self):
        artifacts = {"tool": ArtifactDescriptor("executable", "1.0", (LINUX,))}
        manifest = BundleManifest("1.0", artifacts)
        artifacts["other"] = artifacts["tool"]

        assert "other" not in manifest.artifacts
        with pytest.raises(TypeError):
            manifest.artifacts["other"] = artifacts["tool"]  # type: ignore[index]

    def test_equal_manifests_hash_equal(self):
        artifact = ArtifactDescriptor("executable", "1.0", (LINUX, MAC))
        first = BundleManifest("1.0", {"tool": artifact})
        second = BundleManifest("1.0", {"tool": artifact})

        assert first == second
        assert hash(first) == hash(second)
        assert first != BundleManifest("1.0", {})
