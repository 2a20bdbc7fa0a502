"""Pytest configuration and shared fixtures for core unit tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from artifact_bundle.adapters.fakes import FakeFileSystem, FakeHostTripleDetector

ManifestFactory = Callable[..., dict[str, Any]]


def _manifest_document(
    variants: list[dict[str, Any]] | None = None,
    artifact_name: str = "tool",
) -> dict[str, Any]:
    """Build an info.json document with one executable artifact."""
    if variants is None:
        variants = [
            {"path": "bin/linux/tool", "supportedTriples": ["x86_64-unknown-linux-gnu"]},
            {
                "path": "bin/mac/tool",
                "supportedTriples": ["x86_64-apple-macosx", "arm64-apple-macosx"],
            },
        ]
    return {
        "schemaVersion": "1.0",
        "artifacts": {
            artifact_name: {
                "type": "executable",
                "version": "1.6.18",
                "variants": variants,
            }
        },
    }


@pytest.fixture
def make_manifest() -> ManifestFactory:
    """Factory for info.json documents (dicts).

    Defaults to a 'tool' artifact with a Linux x86_64 variant followed by
    a macOS variant supporting both x86_64 and arm64.
    """
    return _manifest_document


@pytest.fixture
def make_manifest_bytes() -> Callable[..., bytes]:
    """Factory for UTF-8 encoded info.json contents."""

    def factory(**kwargs: Any) -> bytes:
        return json.dumps(_manifest_document(**kwargs)).encode("utf-8")

    return factory


@pytest.fixture
def working_dir() -> Path:
    """Absolute working directory used with the fake filesystem."""
    return Path("/work/MyRepo")


@pytest.fixture
def executable_dir() -> Path:
    """Absolute executable directory used with the fake filesystem."""
    return Path("/opt/tools/bin")


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Empty in-memory filesystem."""
    return FakeFileSystem()


@pytest.fixture
def mac_arm_detector() -> FakeHostTripleDetector:
    """Triple detector reporting an Apple Silicon Mac."""
    return FakeHostTripleDetector("arm64-apple-macosx")
