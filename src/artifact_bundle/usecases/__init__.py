"""Use cases: Application logic layer."""

from artifact_bundle.usecases.binary_path_resolver import BinaryPathResolver
from artifact_bundle.usecases.bundle_locator import BundleLocator
from artifact_bundle.usecases.manifest_parser import ManifestParser
from artifact_bundle.usecases.settings_parser import SettingsParser

__all__ = [
    "BinaryPathResolver",
    "BundleLocator",
    "ManifestParser",
    "SettingsParser",
]
