"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from artifact_bundle.adapters.fakes.fake_filesystem import FakeFileSystem
from artifact_bundle.adapters.fakes.fake_host_triple_detector import (
    FakeHostTripleDetector,
)

__all__ = [
    "FakeFileSystem",
    "FakeHostTripleDetector",
]
