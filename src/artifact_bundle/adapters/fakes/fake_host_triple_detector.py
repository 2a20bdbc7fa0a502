"""Fake host triple detector for testing.

This module provides a fake implementation of HostTripleDetectorPort
that allows tests to control triple detection without spawning the
toolchain.
"""

from __future__ import annotations

from artifact_bundle.domain.bundle import HostTriple


class FakeHostTripleDetector:
    """Fake implementation of HostTripleDetectorPort for testing.

    Returns a preconfigured triple, or raises a preconfigured exception,
    and counts detect() calls so tests can assert detection was (or was
    not) attempted.

    Example:
        >>> fake = FakeHostTripleDetector("arm64-apple-macosx")
        >>> fake.detect()
        HostTriple(value='arm64-apple-macosx')
        >>> fake.call_count
        1
    """

    def __init__(self, triple: HostTriple | str) -> None:
        """Initialize with the triple to return.

        Args:
            triple: HostTriple, or triple string, returned from detect().
        """
        self._triple = triple if isinstance(triple, HostTriple) else HostTriple(triple)
        self._exception: BaseException | None = None
        self._call_count = 0

    @property
    def call_count(self) -> int:
        """Number of times detect() has been called."""
        return self._call_count

    def set_triple(self, triple: HostTriple | str) -> None:
        """Configure the triple returned by subsequent detect() calls."""
        self._triple = triple if isinstance(triple, HostTriple) else HostTriple(triple)

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from detect().

        Args:
            exception: Exception to raise on detect(), or None to clear.
        """
        self._exception = exception

    def detect(self) -> HostTriple:
        """Return the configured triple or raise the configured exception."""
        self._call_count += 1
        if self._exception is not None:
            raise self._exception
        return self._triple
