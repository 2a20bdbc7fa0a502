"""Example launcher that runs a vendored lefthook binary.

Resolves the lefthook executable for the current host from its artifact
bundle, using the working directory's name as the repository name, then
runs it with this script's arguments.

Usage:
    python launcher.py install
"""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

from artifact_bundle import ArtifactBundleError, resolve_binary_path

BUNDLE_NAME = "lefthook"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Resolve lefthook and run it with the given arguments."""
    args = sys.argv[1:] if argv is None else argv
    repository_name = Path.cwd().name

    try:
        binary_path = resolve_binary_path(BUNDLE_NAME, repository_name)
    except ArtifactBundleError as e:
        print(f"Error: Unable to find {BUNDLE_NAME} binary. {e}", file=sys.stderr)
        return 1

    logger.debug("Running %s", binary_path)
    try:
        return subprocess.call([str(binary_path), *args])
    except OSError as e:
        print(f"Error running process: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
