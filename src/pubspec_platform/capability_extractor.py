"""Extraction of declared platforms and SDKs from package detail pages.

Purpose
-------
Scan the HTML of a pub.dev package page for its tag badges and return the
platforms and SDKs listed there.

Contents
--------
* :func:`extract_platforms` - Values of the ``Platform`` badge group
* :func:`extract_sdks` - Values of the ``SDK`` badge group
* :func:`extract_capabilities` - Both lists as :class:`PackageCapabilities`

System Role
-----------
This is a best-effort structural scan of third-party markup. A page without
the expected badges is a package that declares nothing, never an error.
Callers only depend on :func:`extract_capabilities`, so the matching strategy
can change without touching classification or orchestration.

Expected structure::

    <div class="detail-tags">
      <div class="-pub-tag-badge">
        <span class="tag-badge-main">Platform</span>
        <a class="tag-badge-sub">Android</a>
        <a class="tag-badge-sub">iOS</a>
      </div>
    </div>
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from .models import PackageCapabilities

logger = logging.getLogger(__name__)

BADGE_GROUP_SELECTOR = ".detail-tags .-pub-tag-badge"
BADGE_LABEL_SELECTOR = ".tag-badge-main"
BADGE_VALUE_SELECTOR = ".tag-badge-sub"

PLATFORM_LABEL = "Platform"
SDK_LABEL = "SDK"


def _parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _badge_values(soup: BeautifulSoup, label: str) -> list[str]:
    """Collect the trimmed sub-tag texts of every badge group with ``label``."""
    values: list[str] = []
    for badge in soup.select(BADGE_GROUP_SELECTOR):
        main = "".join(tag.get_text() for tag in badge.select(BADGE_LABEL_SELECTOR)).strip()
        if main != label:
            continue
        for sub in badge.select(BADGE_VALUE_SELECTOR):
            text = sub.get_text().strip()
            if text:
                values.append(text)
    return values


def extract_platforms(html: str) -> list[str]:
    """Extract supported platforms from a package page.

    Args:
        html: The HTML content of the package page.

    Returns:
        Platform names in document order; empty if none are declared.
    """
    return _badge_values(_parse(html), PLATFORM_LABEL)


def extract_sdks(html: str) -> list[str]:
    """Extract supported SDKs from a package page.

    Args:
        html: The HTML content of the package page.

    Returns:
        SDK names in document order; empty if none are declared.
    """
    return _badge_values(_parse(html), SDK_LABEL)


def extract_capabilities(html: str) -> PackageCapabilities:
    """Extract platforms and SDKs from a package page in one parse."""
    soup = _parse(html)
    capabilities = PackageCapabilities(
        platforms=_badge_values(soup, PLATFORM_LABEL),
        sdks=_badge_values(soup, SDK_LABEL),
    )
    logger.debug(
        "Extracted %d platforms and %d SDKs",
        len(capabilities.platforms),
        len(capabilities.sdks),
    )
    return capabilities


__all__ = [
    "extract_capabilities",
    "extract_platforms",
    "extract_sdks",
]
