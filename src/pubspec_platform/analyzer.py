"""Core analyzer that classifies every dependency of a pubspec.yaml.

Purpose
-------
Orchestrate the compatibility analysis pipeline: read the pubspec.yaml,
extract dependency names, fetch every package page concurrently, classify
each package, and group the results back into runtime and dev buckets.

Contents
--------
* :func:`analyze_pubspec` - Main API function for analyzing a pubspec.yaml
* :func:`partition_results` - Split fanned-out results back into buckets
* :class:`Analyzer` - Configured analyzer with sync and async entry points

System Role
-----------
The central component that coordinates all other modules to produce
the final analysis results. This is the main entry point for the library.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

from .capability_fetcher import DEFAULT_TIMEOUT, PUB_DEV_PACKAGES_URL, CapabilityFetcher
from .manifest_reader import extract_dependencies, load_pubspec
from .models import CompatibilityConfig, DependencyAnalysis, ManifestDependencies, PackagePlatformInfo

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def partition_results(
    manifest: ManifestDependencies,
    results: Sequence[PackagePlatformInfo],
    config: CompatibilityConfig,
) -> DependencyAnalysis:
    """Group results fanned out over ``manifest.all_names`` back into buckets.

    ``results`` must be index-aligned with ``manifest.all_names``: the first
    ``len(manifest.dependencies)`` entries belong to runtime dependencies and
    the rest to dev dependencies. Order within each bucket is kept, and a
    name declared in both buckets gets a record in each.

    Raises:
        ValueError: If the number of results does not match the manifest.
    """
    expected = len(manifest.dependencies) + len(manifest.dev_dependencies)
    if len(results) != expected:
        raise ValueError(f"expected {expected} results, got {len(results)}")

    split = len(manifest.dependencies)
    return DependencyAnalysis(
        dependencies=list(results[:split]),
        dev_dependencies=list(results[split:]),
        config=config,
    )


@dataclass
class Analyzer:
    """Analyzer for pubspec.yaml platform compatibility.

    Attributes:
        config: Target platforms and SDKs.
        timeout: Request timeout in seconds.
        catalog_url: Base URL of the package catalog.
        transport: Optional httpx transport, mainly for tests.
        fetcher: The capability fetcher instance.
    """

    config: CompatibilityConfig = field(default_factory=CompatibilityConfig)
    timeout: float = DEFAULT_TIMEOUT
    catalog_url: str = PUB_DEV_PACKAGES_URL
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)
    fetcher: CapabilityFetcher = field(init=False)

    def __post_init__(self) -> None:
        """Initialize and validate the analyzer configuration."""
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        self.fetcher = CapabilityFetcher(
            timeout=self.timeout,
            catalog_url=self.catalog_url,
            transport=self.transport,
        )

    async def analyze_dependencies_async(self, manifest: ManifestDependencies) -> DependencyAnalysis:
        """Fetch and classify every dependency concurrently.

        One fetch per name is started at once over a shared client; none of
        them can fail, so the gather always completes.
        """
        names = manifest.all_names
        logger.debug("Fetching platform information for %d packages", len(names))

        async with self.fetcher.create_client() as client:
            results = await asyncio.gather(*(self.fetcher.fetch_async(name, self.config, client) for name in names))

        return partition_results(manifest, results, self.config)

    async def analyze_async(self, pubspec_path: Path | str) -> DependencyAnalysis:
        """Analyze a pubspec.yaml file asynchronously.

        Raises:
            ManifestError: If the pubspec.yaml is missing or malformed.
        """
        path = Path(pubspec_path)
        logger.info("Analyzing %s", path)

        data = load_pubspec(path)
        manifest = extract_dependencies(data)
        logger.info(
            "Found %d dependencies and %d dev dependencies",
            len(manifest.dependencies),
            len(manifest.dev_dependencies),
        )

        return await self.analyze_dependencies_async(manifest)

    def analyze(self, pubspec_path: Path | str) -> DependencyAnalysis:
        """Synchronous wrapper for analyze_async.

        Args:
            pubspec_path: Path to the pubspec.yaml file.

        Returns:
            Complete analysis result.
        """
        return asyncio.run(self.analyze_async(pubspec_path))


def create_analyzer(
    *,
    config: CompatibilityConfig | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    catalog_url: str = PUB_DEV_PACKAGES_URL,
) -> Analyzer:
    """Create an Analyzer instance with the given configuration.

    Args:
        config: Target platforms and SDKs; defaults when None.
        timeout: Request timeout in seconds.
        catalog_url: Base URL of the package catalog.

    Returns:
        Configured analyzer instance.
    """
    return Analyzer(
        config=config if config is not None else CompatibilityConfig(),
        timeout=timeout,
        catalog_url=catalog_url,
    )


def analyze_pubspec(
    pubspec_path: Path | str,
    *,
    config: CompatibilityConfig | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    catalog_url: str = PUB_DEV_PACKAGES_URL,
) -> DependencyAnalysis:
    """Analyze a pubspec.yaml file and return the full result.

    This is the main API function for the library.

    Example:
        >>> analysis = analyze_pubspec("pubspec.yaml")  # doctest: +SKIP
        >>> for info in analysis.dependencies:  # doctest: +SKIP
        ...     if info.status is CompatibilityStatus.PARTIAL:  # doctest: +SKIP
        ...         print(f"{info.name}: missing {', '.join(info.missing_platforms)}")  # doctest: +SKIP
    """
    analyzer = create_analyzer(config=config, timeout=timeout, catalog_url=catalog_url)
    return analyzer.analyze(pubspec_path)


__all__ = [
    "Analyzer",
    "analyze_pubspec",
    "create_analyzer",
    "partition_results",
]
