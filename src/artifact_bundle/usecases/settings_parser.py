"""Settings parser use case for the resolver's YAML settings file."""

from typing import TYPE_CHECKING, Any

import yaml

from artifact_bundle.domain.exceptions import SettingsError
from artifact_bundle.domain.settings import parse_bool

if TYPE_CHECKING:
    from artifact_bundle.domain.settings import ResolverSettings


class SettingsParser:
    """Parses a YAML settings file on top of base settings.

    Recognised keys (all optional)::

        toolchain:
          command: [xcrun, swift]   # or a single string: "swift"
        resolution:
          verify_binary_exists: true
    """

    def parse(self, yaml_str: str, base: "ResolverSettings") -> "ResolverSettings":
        """Parse YAML settings and apply them over base.

        Args:
            yaml_str: YAML document.
            base: Settings to start from, usually ResolverSettings.from_environment().

        Returns:
            ResolverSettings with the file's values applied.

        Raises:
            SettingsError: If YAML is invalid or a value has the wrong type.
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML: {e}") from e

        if config is None:
            return base
        if not isinstance(config, dict):
            raise SettingsError("Settings must be a dictionary")

        overrides: dict[str, Any] = {}

        toolchain = _section(config, "toolchain")
        if "command" in toolchain:
            overrides["toolchain_command"] = _parse_command(toolchain["command"])

        resolution = _section(config, "resolution")
        if "verify_binary_exists" in resolution:
            verify = resolution["verify_binary_exists"]
            if isinstance(verify, str):
                verify = parse_bool(verify, "resolution.verify_binary_exists")
            elif not isinstance(verify, bool):
                raise SettingsError(
                    f"resolution.verify_binary_exists must be a boolean, got: {verify!r}"
                )
            overrides["verify_binary_exists"] = verify

        return base.with_overrides(**overrides)


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise SettingsError(f"{name} must be a dictionary")
    return section


def _parse_command(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        parts = tuple(value.split())
    elif isinstance(value, list) and all(isinstance(part, str) for part in value):
        parts = tuple(value)
    else:
        raise SettingsError(
            f"toolchain.command must be a string or list of strings, got: {value!r}"
        )
    if not parts:
        raise SettingsError("toolchain.command cannot be empty")
    return parts
