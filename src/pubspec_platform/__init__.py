"""Public package surface for pubspec platform compatibility analysis.

This package reads the dependencies of a Flutter/Dart pubspec.yaml, looks up
the platforms and SDKs each package declares on pub.dev, and classifies every
dependency as fully, partially, or not compatible with the configured targets.

Main API
--------
* :func:`analyze_pubspec` - Analyze a pubspec.yaml and return the full result
* :func:`check_compatibility` - Classify one package's platforms and SDKs
* :class:`Analyzer` - Configured analyzer with sync and async entry points
* :class:`DependencyAnalysis` - Data class for analysis results
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .analyzer import Analyzer, analyze_pubspec, create_analyzer
from .capability_extractor import extract_capabilities, extract_platforms, extract_sdks
from .capability_fetcher import CapabilityFetcher
from .compatibility import check_compatibility
from .config import get_compatibility_config, get_config
from .manifest_reader import ManifestError, extract_dependencies, load_pubspec
from .models import (
    AnalysisSummary,
    CompatibilityConfig,
    CompatibilityStatus,
    CompatibilityVerdict,
    DependencyAnalysis,
    ManifestDependencies,
    PackageCapabilities,
    PackagePlatformInfo,
)
from .report import render_text_report, summarize, write_report_json

__all__ = [
    "AnalysisSummary",
    "Analyzer",
    "CapabilityFetcher",
    "CompatibilityConfig",
    "CompatibilityStatus",
    "CompatibilityVerdict",
    "DependencyAnalysis",
    "ManifestDependencies",
    "ManifestError",
    "PackageCapabilities",
    "PackagePlatformInfo",
    "analyze_pubspec",
    "check_compatibility",
    "create_analyzer",
    "extract_capabilities",
    "extract_dependencies",
    "extract_platforms",
    "extract_sdks",
    "get_compatibility_config",
    "get_config",
    "load_pubspec",
    "print_info",
    "render_text_report",
    "summarize",
    "write_report_json",
]
