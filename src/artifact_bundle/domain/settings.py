"""Resolver settings domain entity."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from artifact_bundle.domain.exceptions import SettingsError

TOOLCHAIN_ENV_VAR = "ARTIFACT_BUNDLE_TOOLCHAIN"
VERIFY_BINARY_ENV_VAR = "ARTIFACT_BUNDLE_VERIFY_BINARY"

DEFAULT_TOOLCHAIN_COMMAND: tuple[str, ...] = ("swift",)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class ResolverSettings:
    """Inputs that parameterize a binary resolution.

    Everything the resolver would otherwise read from ambient process state
    is carried here, so resolutions can be reproduced in tests.

    Attributes:
        working_directory: Directory the tool was invoked from. Must be absolute.
        executable_directory: Directory containing the running executable.
                              Must be absolute.
        toolchain_command: Command prefix used to query the host triple;
                           '-print-target-info' is appended. Must be non-empty.
        verify_binary_exists: Whether to check that the resolved binary exists.
    """

    working_directory: Path
    executable_directory: Path
    toolchain_command: tuple[str, ...] = DEFAULT_TOOLCHAIN_COMMAND
    verify_binary_exists: bool = False

    def __post_init__(self) -> None:
        """Validate settings."""
        self._validate_directories()
        self._validate_toolchain_command()

    def _validate_directories(self) -> None:
        """Validate both search directories are absolute."""
        for name in ("working_directory", "executable_directory"):
            value = getattr(self, name)
            if not isinstance(value, Path) or not value.is_absolute():
                raise SettingsError(f"{name} must be an absolute path, got: {value!r}")

    def _validate_toolchain_command(self) -> None:
        """Validate toolchain command is a non-empty sequence of non-blank strings."""
        if not self.toolchain_command:
            raise SettingsError("toolchain_command cannot be empty")
        for part in self.toolchain_command:
            if not isinstance(part, str) or not part.strip():
                raise SettingsError(
                    f"toolchain_command entries must be non-empty strings, "
                    f"got: {self.toolchain_command!r}"
                )

    def with_overrides(self, **changes: object) -> ResolverSettings:
        """Return a copy with the given fields replaced (validated again)."""
        return replace(self, **changes)  # type: ignore[arg-type]

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        argv0: str | None = None,
        cwd: Path | None = None,
    ) -> ResolverSettings:
        """Build settings from the current process.

        Args:
            environ: Environment mapping (defaults to os.environ).
            argv0: Path of the running executable (defaults to sys.argv[0]).
            cwd: Working directory (defaults to os.getcwd()).

        Returns:
            ResolverSettings for the current invocation.

        Raises:
            SettingsError: If an environment override is malformed.
        """
        if environ is None:
            environ = os.environ
        if argv0 is None:
            argv0 = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
        working_directory = (cwd or Path(os.getcwd())).absolute()
        executable_directory = Path(argv0).resolve().parent

        toolchain_command = DEFAULT_TOOLCHAIN_COMMAND
        raw_toolchain = environ.get(TOOLCHAIN_ENV_VAR)
        if raw_toolchain is not None:
            toolchain_command = tuple(raw_toolchain.split())
            if not toolchain_command:
                raise SettingsError(f"{TOOLCHAIN_ENV_VAR} cannot be blank")

        verify = parse_bool(
            environ.get(VERIFY_BINARY_ENV_VAR, ""), VERIFY_BINARY_ENV_VAR
        )

        return cls(
            working_directory=working_directory,
            executable_directory=executable_directory,
            toolchain_command=toolchain_command,
            verify_binary_exists=verify,
        )


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean flag written as text.

    Args:
        value: Text such as 'true', '0' or 'yes'.
        name: Setting name used in the error message.

    Raises:
        SettingsError: If value is not a recognised boolean spelling.
    """
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise SettingsError(f"{name} must be a boolean, got: {value!r}")
