"""Domain models for platform compatibility analysis (dataclasses).

Purpose
-------
Define core data structures for the compatibility analysis domain layer.
These are pure dataclasses used for internal business logic.

For external data serialization, use the Pydantic schemas in schemas.py.

Contents
--------
* :class:`CompatibilityStatus` - Tri-state verdict for a dependency
* :class:`CompatibilityConfig` - Target platforms and SDKs for one run
* :class:`PackageCapabilities` - Platforms and SDKs a package declares
* :class:`CompatibilityVerdict` - Status plus missing platforms and SDKs
* :class:`PackagePlatformInfo` - Complete per-dependency record
* :class:`ManifestDependencies` - Dependency names split into buckets
* :class:`DependencyAnalysis` - Complete analysis result

Data Flow Pattern
-----------------
pubspec.yaml → Pydantic (validate) → Dataclass (domain) → Pydantic (serialize) → Output

System Role
-----------
Provides the canonical data structures that flow through the analysis pipeline.
These dataclasses are dependency-free and used for pure business logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_TARGET_PLATFORMS: tuple[str, ...] = ("Android", "iOS", "Linux", "macOS", "Web")
DEFAULT_TARGET_SDKS: tuple[str, ...] = ("Flutter",)


class CompatibilityStatus(str, Enum):
    """Compatibility verdict for a dependency.

    Attributes:
        FULL: Every target platform and every target SDK is supported.
        PARTIAL: At least one target matched, but something is missing.
        NONE: No target platform and no target SDK matched.
    """

    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class CompatibilityConfig:
    """Target platforms and SDKs a run checks dependencies against.

    Platform identifiers are matched case-insensitively and displayed as
    given; SDK identifiers are matched exactly.

    Attributes:
        target_platforms: Ordered platform identifiers (e.g., "Android").
        target_sdks: Ordered SDK identifiers (e.g., "Flutter").
    """

    target_platforms: tuple[str, ...] = DEFAULT_TARGET_PLATFORMS
    target_sdks: tuple[str, ...] = DEFAULT_TARGET_SDKS


def _empty_str_list() -> list[str]:
    """Return an empty string list for dataclass defaults."""
    return []


@dataclass(frozen=True, slots=True)
class PackageCapabilities:
    """Platforms and SDKs a package declares support for.

    Both lists may be empty; a package that declares nothing is a valid state.
    """

    platforms: list[str] = field(default_factory=_empty_str_list)
    sdks: list[str] = field(default_factory=_empty_str_list)


@dataclass(frozen=True, slots=True)
class CompatibilityVerdict:
    """Result of classifying one package against a compatibility config.

    Attributes:
        status: The tri-state verdict.
        missing_platforms: Target platforms the package does not support,
            in target order.
        missing_sdks: Target SDKs the package does not support, in target order.
    """

    status: CompatibilityStatus
    missing_platforms: list[str] = field(default_factory=_empty_str_list)
    missing_sdks: list[str] = field(default_factory=_empty_str_list)


@dataclass(frozen=True, slots=True)
class PackagePlatformInfo:
    """Complete analysis record for one dependency.

    Attributes:
        name: The dependency name as declared in the manifest.
        platforms: Platforms declared by the package.
        sdks: SDKs declared by the package.
        status: Compatibility verdict.
        missing_platforms: Target platforms not supported.
        missing_sdks: Target SDKs not supported.
    """

    name: str
    platforms: list[str]
    sdks: list[str]
    status: CompatibilityStatus
    missing_platforms: list[str]
    missing_sdks: list[str]

    @classmethod
    def from_parts(
        cls,
        name: str,
        capabilities: PackageCapabilities,
        verdict: CompatibilityVerdict,
    ) -> PackagePlatformInfo:
        """Combine capabilities and verdict into a single record."""
        return cls(
            name=name,
            platforms=list(capabilities.platforms),
            sdks=list(capabilities.sdks),
            status=verdict.status,
            missing_platforms=list(verdict.missing_platforms),
            missing_sdks=list(verdict.missing_sdks),
        )

    @property
    def capabilities(self) -> PackageCapabilities:
        """Return the declared platforms and SDKs."""
        return PackageCapabilities(platforms=list(self.platforms), sdks=list(self.sdks))

    @property
    def verdict(self) -> CompatibilityVerdict:
        """Return the compatibility verdict."""
        return CompatibilityVerdict(
            status=self.status,
            missing_platforms=list(self.missing_platforms),
            missing_sdks=list(self.missing_sdks),
        )


@dataclass(frozen=True, slots=True)
class ManifestDependencies:
    """Dependency names read from a manifest, split by bucket.

    Attributes:
        dependencies: Runtime dependency names in manifest order.
        dev_dependencies: Development dependency names in manifest order.
    """

    dependencies: list[str] = field(default_factory=_empty_str_list)
    dev_dependencies: list[str] = field(default_factory=_empty_str_list)

    @property
    def all_names(self) -> list[str]:
        """Runtime names followed by development names."""
        return [*self.dependencies, *self.dev_dependencies]


def _empty_info_list() -> list[PackagePlatformInfo]:
    """Return an empty PackagePlatformInfo list for dataclass defaults."""
    return []


@dataclass(slots=True)
class DependencyAnalysis:
    """Complete result of analyzing a pubspec.yaml file.

    Attributes:
        dependencies: Records for runtime dependencies, in manifest order.
        dev_dependencies: Records for development dependencies, in manifest order.
        config: The compatibility config the run used.
    """

    dependencies: list[PackagePlatformInfo] = field(default_factory=_empty_info_list)
    dev_dependencies: list[PackagePlatformInfo] = field(default_factory=_empty_info_list)
    config: CompatibilityConfig = field(default_factory=CompatibilityConfig)

    @property
    def all_packages(self) -> list[PackagePlatformInfo]:
        """Runtime records followed by development records."""
        return [*self.dependencies, *self.dev_dependencies]


@dataclass(frozen=True, slots=True)
class AnalysisSummary:
    """Counts of dependencies per compatibility status.

    Attributes:
        total: Number of analyzed dependencies across both buckets.
        full: Number of fully compatible dependencies.
        partial: Number of partially compatible dependencies.
        none: Number of incompatible dependencies.
    """

    total: int = 0
    full: int = 0
    partial: int = 0
    none: int = 0


__all__ = [
    "AnalysisSummary",
    "CompatibilityConfig",
    "CompatibilityStatus",
    "CompatibilityVerdict",
    "DEFAULT_TARGET_PLATFORMS",
    "DEFAULT_TARGET_SDKS",
    "DependencyAnalysis",
    "ManifestDependencies",
    "PackageCapabilities",
    "PackagePlatformInfo",
]
