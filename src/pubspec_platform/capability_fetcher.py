"""Fetcher that turns a package name into a classified platform record.

Purpose
-------
Download a package's pub.dev detail page, extract its declared platforms and
SDKs, and classify them against the active compatibility config.

Contents
--------
* :class:`CapabilityFetcher` - Async fetcher bound to an HTTP client config
* :class:`FetchResult` - Capabilities or the transport error that prevented them
* :func:`build_package_url` - Detail page address for a package
* :func:`fallback_platform_info` - Record used when a fetch fails

System Role
-----------
The only failure-isolation point of the pipeline: a transport error for one
package is logged and replaced by a deterministic ``none`` record, so one
unreachable dependency never aborts the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import quote

import httpx

from . import __init__conf__
from .capability_extractor import extract_capabilities
from .compatibility import check_compatibility, fallback_verdict
from .models import CompatibilityConfig, PackageCapabilities, PackagePlatformInfo

logger = logging.getLogger(__name__)

PUB_DEV_PACKAGES_URL = "https://pub.dev/packages"
DEFAULT_TIMEOUT = 30.0


def build_package_url(package: str, catalog_url: str = PUB_DEV_PACKAGES_URL) -> str:
    """Return the detail page URL for ``package`` under ``catalog_url``.

    Example:
        >>> build_package_url("http")
        'https://pub.dev/packages/http'
    """
    return f"{catalog_url.rstrip('/')}/{quote(package, safe='')}"


def fallback_platform_info(package: str, config: CompatibilityConfig) -> PackagePlatformInfo:
    """Return the record for a package whose page could not be fetched."""
    return PackagePlatformInfo.from_parts(package, PackageCapabilities(), fallback_verdict(config))


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of fetching one package page.

    Attributes:
        capabilities: Extracted capabilities, or None if the fetch failed.
        error: Description of the transport error, kept for logging only.
    """

    capabilities: PackageCapabilities | None = None
    error: str | None = None

    @property
    def is_failure(self) -> bool:
        return self.capabilities is None


@dataclass
class CapabilityFetcher:
    """Fetches and classifies package capabilities from the catalog.

    Attributes:
        timeout: Request timeout in seconds.
        catalog_url: Base URL that package names are appended to.
        transport: Optional httpx transport, used to isolate tests from the
            network.
    """

    timeout: float = DEFAULT_TIMEOUT
    catalog_url: str = PUB_DEV_PACKAGES_URL
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    def _get_headers(self) -> dict[str, str]:
        return {
            "User-Agent": f"{__init__conf__.name}/{__init__conf__.version}",
            "Accept": "text/html",
        }

    def create_client(self) -> httpx.AsyncClient:
        """Create an HTTP client configured for catalog requests."""
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers=self._get_headers(),
            follow_redirects=True,
            transport=self.transport,
        )

    async def fetch_capabilities_async(self, client: httpx.AsyncClient, package: str) -> FetchResult:
        """Download and scan one package page without classifying it."""
        url = build_package_url(package, self.catalog_url)
        logger.debug("Fetching %s", url)
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            return FetchResult(error=f"{type(exc).__name__}: {exc}")
        return FetchResult(capabilities=extract_capabilities(response.text))

    async def fetch_async(
        self,
        package: str,
        config: CompatibilityConfig,
        client: httpx.AsyncClient | None = None,
    ) -> PackagePlatformInfo:
        """Fetch and classify one package; never raises on transport errors.

        Args:
            package: The dependency name.
            config: Target platforms and SDKs.
            client: Shared HTTP client. A private client is opened and closed
                when omitted.

        Returns:
            The classified record, or the fallback record if the page could
            not be retrieved.
        """
        if client is None:
            async with self.create_client() as own_client:
                return await self.fetch_async(package, config, own_client)

        result = await self.fetch_capabilities_async(client, package)
        if result.capabilities is None:
            logger.warning("Failed to fetch info for %s: %s", package, result.error)
            return fallback_platform_info(package, config)

        verdict = check_compatibility(result.capabilities.platforms, result.capabilities.sdks, config)
        return PackagePlatformInfo.from_parts(package, result.capabilities, verdict)


__all__ = [
    "CapabilityFetcher",
    "DEFAULT_TIMEOUT",
    "FetchResult",
    "PUB_DEV_PACKAGES_URL",
    "build_package_url",
    "fallback_platform_info",
]
