"""Pydantic schemas for external data boundaries.

Purpose
-------
Define Pydantic models for data that crosses system boundaries:
- Input: Validating the structure of a parsed pubspec.yaml
- Output: JSON serialization of analysis results

These models handle validation, coercion, and serialization at the edges
while internal business logic uses lightweight dataclasses.

Data Flow Pattern
-----------------
External Input → Pydantic (validate) → Dataclass (domain) → Pydantic (serialize) → External Output
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .models import CompatibilityStatus


class PubspecSchema(BaseModel):
    """Schema for the parts of pubspec.yaml the analysis reads.

    Only the keys of the dependency mappings matter; their version or
    source specifiers are kept as-is and never interpreted.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    dependencies: dict[str, Any] | None = None
    dev_dependencies: dict[str, Any] | None = None


class PackagePlatformInfoSchema(BaseModel):
    """Pydantic schema for serializing one dependency record to JSON."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    name: str = Field(description="The dependency name")
    platforms: list[str] = Field(description="Platforms declared by the package")
    sdks: list[str] = Field(description="SDKs declared by the package")
    status: CompatibilityStatus = Field(description="Compatibility verdict")
    missing_platforms: list[str] = Field(description="Target platforms not supported")
    missing_sdks: list[str] = Field(description="Target SDKs not supported")


class CompatibilityConfigSchema(BaseModel):
    """Pydantic schema for the compatibility config echoed in a report."""

    model_config = ConfigDict(frozen=True)

    target_platforms: list[str] = Field(default_factory=list)
    target_sdks: list[str] = Field(default_factory=list)


class AnalysisSummarySchema(BaseModel):
    """Pydantic schema for status counts."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    full: int = 0
    partial: int = 0
    none: int = 0


def _empty_info_list() -> list[PackagePlatformInfoSchema]:
    """Return empty list for default factory."""
    return []


class DependencyAnalysisSchema(BaseModel):
    """Pydantic schema for complete analysis result serialization."""

    model_config = ConfigDict(frozen=True)

    config: CompatibilityConfigSchema = Field(default_factory=CompatibilityConfigSchema)
    summary: AnalysisSummarySchema = Field(default_factory=AnalysisSummarySchema)
    dependencies: list[PackagePlatformInfoSchema] = Field(default_factory=_empty_info_list)
    dev_dependencies: list[PackagePlatformInfoSchema] = Field(default_factory=_empty_info_list)


__all__ = [
    "AnalysisSummarySchema",
    "CompatibilityConfigSchema",
    "DependencyAnalysisSchema",
    "PackagePlatformInfoSchema",
    "PubspecSchema",
]
