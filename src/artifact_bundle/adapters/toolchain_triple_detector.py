"""Toolchain triple detector adapter.

Implements HostTripleDetectorPort by asking the installed toolchain for its
target information and extracting ``target.unversionedTriple`` from the JSON
it prints, e.g.::

    $ swift -print-target-info
    {"target": {"unversionedTriple": "arm64-apple-macosx", ...}, ...}
"""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Sequence
from typing import Any

from artifact_bundle.domain.bundle import HostTriple
from artifact_bundle.domain.exceptions import DetectionError
from artifact_bundle.domain.settings import DEFAULT_TOOLCHAIN_COMMAND

logger = logging.getLogger(__name__)

PRINT_TARGET_INFO_FLAG = "-print-target-info"


class ToolchainTripleDetector:
    """Adapter that detects the host triple by running the toolchain.

    Spawns exactly one child process per detect() call and blocks until it
    exits. There is no timeout and no retry; callers that need bounded
    latency must wrap the call themselves.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_TOOLCHAIN_COMMAND) -> None:
        """Initialize the detector.

        Args:
            command: Toolchain command prefix, e.g. ("swift",) or
                ("xcrun", "swift"). The target-info flag is appended.
        """
        self._command = tuple(command)

    @property
    def argv(self) -> tuple[str, ...]:
        """Full command line that detect() runs."""
        return (*self._command, PRINT_TARGET_INFO_FLAG)

    def detect(self) -> HostTriple:
        """Run the toolchain and return the host triple it reports.

        Returns:
            HostTriple taken from target.unversionedTriple.

        Raises:
            DetectionError: If the command cannot be started, exits
                non-zero, prints invalid JSON, or omits the triple.
        """
        argv = self.argv
        logger.debug("Querying host triple with: %s", " ".join(argv))

        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            raise DetectionError(
                f"Unable to run {argv[0]!r}: {e}", command=argv, original_error=e
            ) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise DetectionError(
                f"{' '.join(argv)} exited with status {completed.returncode}"
                + (f": {stderr}" if stderr else ""),
                command=argv,
            )

        triple = extract_unversioned_triple(completed.stdout, argv)
        logger.debug("Detected host triple: %s", triple)
        return HostTriple(triple)


def extract_unversioned_triple(
    output: bytes | str, command: Sequence[str] | None = None
) -> str:
    """Pull target.unversionedTriple out of target-info JSON.

    Args:
        output: Raw stdout of the target-info command.
        command: Command line, recorded on any raised error.

    Returns:
        The unversioned triple string.

    Raises:
        DetectionError: If output is not JSON or lacks a non-empty string
            at target.unversionedTriple.
    """
    try:
        info: Any = json.loads(output)
    except (ValueError, UnicodeDecodeError, RecursionError) as e:
        raise DetectionError(
            f"Unable to parse target info as JSON: {e}",
            command=command,
            original_error=e,
        ) from e

    try:
        triple = info["target"]["unversionedTriple"]
    except (KeyError, TypeError) as e:
        raise DetectionError(
            "Target info is missing target.unversionedTriple",
            command=command,
            original_error=e,
        ) from e

    if not isinstance(triple, str) or not triple.strip():
        raise DetectionError(
            f"target.unversionedTriple must be a non-empty string, got: {triple!r}",
            command=command,
        )

    return triple
