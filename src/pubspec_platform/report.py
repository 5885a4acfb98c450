"""Report helpers over a finished :class:`DependencyAnalysis`.

Purpose
-------
Summarize, order, render, and serialize analysis results. Nothing here
changes a verdict; it only presents what the analyzer produced.

Contents
--------
* :func:`summarize` - Count packages per compatibility status
* :func:`sort_by_compatibility` - Order records full → partial → none
* :func:`render_text_report` - Plain-text report for the terminal
* :func:`analysis_to_dict` - JSON-ready dictionary via Pydantic
* :func:`write_report_json` - Write the JSON report to a file
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .models import AnalysisSummary, CompatibilityStatus, DependencyAnalysis, PackagePlatformInfo
from .schemas import (
    AnalysisSummarySchema,
    CompatibilityConfigSchema,
    DependencyAnalysisSchema,
    PackagePlatformInfoSchema,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_STATUS_ORDER: dict[CompatibilityStatus, int] = {
    CompatibilityStatus.FULL: 0,
    CompatibilityStatus.PARTIAL: 1,
    CompatibilityStatus.NONE: 2,
}

_STATUS_LABELS: dict[CompatibilityStatus, str] = {
    CompatibilityStatus.FULL: "FULL",
    CompatibilityStatus.PARTIAL: "PARTIAL",
    CompatibilityStatus.NONE: "NONE",
}


def summarize(analysis: DependencyAnalysis) -> AnalysisSummary:
    """Count runtime and dev records per status."""
    counts: dict[CompatibilityStatus, int] = dict.fromkeys(CompatibilityStatus, 0)
    packages = analysis.all_packages
    for info in packages:
        counts[info.status] += 1
    return AnalysisSummary(
        total=len(packages),
        full=counts[CompatibilityStatus.FULL],
        partial=counts[CompatibilityStatus.PARTIAL],
        none=counts[CompatibilityStatus.NONE],
    )


def sort_by_compatibility(infos: Iterable[PackagePlatformInfo]) -> list[PackagePlatformInfo]:
    """Return records ordered full, then partial, then none.

    The sort is stable, so manifest order is kept within each status.
    """
    return sorted(infos, key=lambda info: _STATUS_ORDER[info.status])


def _join(values: Iterable[str]) -> str:
    return ", ".join(values) or "-"


def _render_package(info: PackagePlatformInfo) -> list[str]:
    lines = [
        f"  [{_STATUS_LABELS[info.status]}] {info.name}",
        f"      platforms: {_join(info.platforms)}",
        f"      sdks:      {_join(info.sdks)}",
    ]
    if info.missing_platforms:
        lines.append(f"      missing platforms: {_join(info.missing_platforms)}")
    if info.missing_sdks:
        lines.append(f"      missing sdks:      {_join(info.missing_sdks)}")
    return lines


def _render_section(title: str, infos: list[PackagePlatformInfo]) -> list[str]:
    lines = [f"{title} ({len(infos)})"]
    if not infos:
        lines.append("  (none)")
        return lines
    for info in sort_by_compatibility(infos):
        lines.extend(_render_package(info))
    return lines


def render_text_report(analysis: DependencyAnalysis) -> str:
    """Render the analysis as plain text.

    The target config is echoed first, then the status summary, then one
    section per dependency bucket sorted by compatibility.
    """
    summary = summarize(analysis)
    lines = [
        "Pubspec Platform Analysis",
        "",
        f"Target platforms: {_join(analysis.config.target_platforms)}",
        f"Target SDKs:      {_join(analysis.config.target_sdks)}",
        "",
        (
            f"{summary.total} packages: {summary.full} fully compatible, "
            f"{summary.partial} partially compatible, {summary.none} incompatible"
        ),
        "",
    ]
    lines.extend(_render_section("Dependencies", analysis.dependencies))
    lines.append("")
    lines.extend(_render_section("Dev dependencies", analysis.dev_dependencies))
    return "\n".join(lines) + "\n"


def _info_to_schema(info: PackagePlatformInfo) -> PackagePlatformInfoSchema:
    return PackagePlatformInfoSchema(
        name=info.name,
        platforms=info.platforms,
        sdks=info.sdks,
        status=info.status,
        missing_platforms=info.missing_platforms,
        missing_sdks=info.missing_sdks,
    )


def analysis_to_dict(analysis: DependencyAnalysis) -> dict[str, Any]:
    """Convert an analysis to a dictionary for JSON serialization.

    Records keep manifest order; the summary and the config used are
    included alongside them.
    """
    summary = summarize(analysis)
    schema = DependencyAnalysisSchema(
        config=CompatibilityConfigSchema(
            target_platforms=list(analysis.config.target_platforms),
            target_sdks=list(analysis.config.target_sdks),
        ),
        summary=AnalysisSummarySchema(
            total=summary.total,
            full=summary.full,
            partial=summary.partial,
            none=summary.none,
        ),
        dependencies=[_info_to_schema(info) for info in analysis.dependencies],
        dev_dependencies=[_info_to_schema(info) for info in analysis.dev_dependencies],
    )
    return schema.model_dump(mode="json")


def write_report_json(analysis: DependencyAnalysis, output_path: Path | str) -> None:
    """Write the analysis to a JSON file.

    Raises:
        ValueError: If output_path is a directory.
    """
    path = Path(output_path).resolve()

    if path.is_dir():
        raise ValueError(f"Output path must be a file, not a directory: {path}")

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        json.dump(analysis_to_dict(analysis), f, indent=2)

    logger.info("Wrote report for %d packages to %s", len(analysis.all_packages), path)


__all__ = [
    "analysis_to_dict",
    "render_text_report",
    "sort_by_compatibility",
    "summarize",
    "write_report_json",
]
