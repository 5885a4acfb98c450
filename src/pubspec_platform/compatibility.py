"""Compatibility classification of a package against target platforms and SDKs.

Platform names are compared case-insensitively because catalogs disagree on
their casing ("macOS", "macos"). SDK names form a small vocabulary with stable
casing and are compared exactly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import CompatibilityConfig, CompatibilityStatus, CompatibilityVerdict

if TYPE_CHECKING:
    from collections.abc import Iterable


def _determine_status(
    missing_platforms: list[str],
    missing_sdks: list[str],
    config: CompatibilityConfig,
) -> CompatibilityStatus:
    """Pick the verdict from the missing lists.

    An empty target list counts as entirely missing for the ``none`` test,
    so the other dimension decides. With both target lists empty the result
    is always ``full``.
    """
    if not missing_platforms and not missing_sdks:
        return CompatibilityStatus.FULL
    if len(missing_platforms) == len(config.target_platforms) and len(missing_sdks) == len(config.target_sdks):
        return CompatibilityStatus.NONE
    return CompatibilityStatus.PARTIAL


def check_compatibility(
    platforms: Iterable[str],
    sdks: Iterable[str],
    config: CompatibilityConfig,
) -> CompatibilityVerdict:
    """Classify a package's declared capabilities against the targets.

    Args:
        platforms: Platforms the package declares.
        sdks: SDKs the package declares.
        config: Target platforms and SDKs.

    Returns:
        The verdict with missing platforms and SDKs in target order.

    Example:
        >>> verdict = check_compatibility(["android"], ["Flutter"], CompatibilityConfig(("Android", "Web"), ("Flutter",)))
        >>> verdict.status.value, verdict.missing_platforms, verdict.missing_sdks
        ('partial', ['Web'], [])
    """
    normalized_platforms = {p.lower() for p in platforms}
    declared_sdks = set(sdks)

    missing_platforms = [p for p in config.target_platforms if p.lower() not in normalized_platforms]
    missing_sdks = [s for s in config.target_sdks if s not in declared_sdks]

    return CompatibilityVerdict(
        status=_determine_status(missing_platforms, missing_sdks, config),
        missing_platforms=missing_platforms,
        missing_sdks=missing_sdks,
    )


def fallback_verdict(config: CompatibilityConfig) -> CompatibilityVerdict:
    """Return the verdict used when a package's capabilities are unknown.

    Everything is reported missing and the status is ``none`` regardless of
    how many targets are configured.
    """
    return CompatibilityVerdict(
        status=CompatibilityStatus.NONE,
        missing_platforms=list(config.target_platforms),
        missing_sdks=list(config.target_sdks),
    )


__all__ = [
    "check_compatibility",
    "fallback_verdict",
]
