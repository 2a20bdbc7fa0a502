"""
Root conftest.py for the artifact-bundle-py test suite.

Enforces TRA (Test Responsibility Anchor) and tier markers at collection:
- every test declares the one responsibility it protects with
  @pytest.mark.tra("...") under a known namespace
- every test declares a tier, which also sets its timeout when
  pytest-timeout is installed

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.BundleLocator")
    def test_something():
        ...

Configuration:
    TRA_ENFORCE=warn|1|0   warn (default), fail collection, or skip checks
    TIER_ENFORCE=warn|1|0  same, for tier markers
    TIER_TIMEOUT_MULTIPLIER  scales tier timeouts on slow machines
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant.",
        "Domain.Policy.",
        "UseCase.",
        "Port.",
        "Adapter.",
        "Contract.",
    ]
)

# Tier timeout limits in seconds (0 = no limit)
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and tier enforcement."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=slow, 4=manual).",
    )
    config.addinivalue_line("markers", "unit: Unit tests (no subprocess, no real toolchain)")
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args:
            tier = marker.args[0]
            if isinstance(tier, int) and 0 <= tier <= 4:
                return tier
    return None


def _tra_errors(items: list[Item]) -> list[str]:
    """Return one message per test with a missing or malformed TRA marker."""
    if os.environ.get("TRA_ENFORCE", "warn") == "0":
        return []

    errors = []
    for item in items:
        markers = list(item.iter_markers(name="tra"))
        if not markers:
            errors.append(f"{item.nodeid}: Missing @pytest.mark.tra('...')")
            continue
        if len(markers) > 1:
            errors.append(f"{item.nodeid}: Multiple @tra markers found")
            continue

        anchor = markers[0].args[0] if markers[0].args else None
        if not isinstance(anchor, str) or not anchor.strip():
            errors.append(f"{item.nodeid}: @tra anchor must be a non-empty string")
        elif not any(anchor.startswith(prefix) for prefix in VALID_TRA_PREFIXES):
            errors.append(f"{item.nodeid}: Invalid TRA anchor {anchor!r}")
    return errors


def _tier_errors(items: list[Item]) -> list[str]:
    """Return one message per test with a missing or invalid tier marker."""
    if os.environ.get("TIER_ENFORCE", "warn") == "0":
        return []

    errors = []
    for item in items:
        markers = list(item.iter_markers(name="tier"))
        if not markers:
            errors.append(f"{item.nodeid}: Missing @pytest.mark.tier()")
        elif len(markers) > 1 or _get_tier(item) is None:
            errors.append(f"{item.nodeid}: Invalid tier marker")
    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Add a timeout marker per tier when pytest-timeout is available."""
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))
    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue
        timeout = TIER_TIMEOUTS.get(tier, 0)
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Enforce TRA and tier markers at collection time."""
    errors = _tra_errors(items) + _tier_errors(items)

    if errors:
        strict = (
            os.environ.get("TRA_ENFORCE", "warn") == "1"
            and os.environ.get("TIER_ENFORCE", "warn") == "1"
        )
        if strict:
            pytest.fail(
                "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )
        print("\nTRA/Tier Enforcement Warnings:")
        for error in errors:
            print(f"  {error}")

    _apply_tier_timeouts(items)


def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    tra_enforce = os.environ.get("TRA_ENFORCE", "warn")
    tier_enforce = os.environ.get("TIER_ENFORCE", "warn")
    return f"TRA enforcement: {tra_enforce} | Tier enforcement: {tier_enforce}"
