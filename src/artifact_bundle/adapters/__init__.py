"""Interface adapters: Filesystem access and toolchain subprocess execution."""

from artifact_bundle.adapters.local_filesystem import LocalFileSystem
from artifact_bundle.adapters.ports import FileSystemPort, HostTripleDetectorPort
from artifact_bundle.adapters.toolchain_triple_detector import ToolchainTripleDetector

__all__ = [
    "FileSystemPort",
    "HostTripleDetectorPort",
    "LocalFileSystem",
    "ToolchainTripleDetector",
]
