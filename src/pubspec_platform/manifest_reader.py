"""Reader for dependencies declared in pubspec.yaml files.

Purpose
-------
Parse a pubspec.yaml document and collect the names declared under its
``dependencies`` and ``dev_dependencies`` sections.

Contents
--------
* :func:`load_pubspec` - Read and parse a pubspec.yaml file
* :func:`parse_pubspec` - Parse pubspec.yaml text
* :func:`extract_dependencies` - Split declared names into runtime/dev buckets
* :class:`ManifestError` - Raised when the manifest cannot be used

System Role
-----------
The first stage of the analysis pipeline. Any failure here is fatal for the
run; nothing downstream is attempted.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import ManifestDependencies
from .schemas import PubspecSchema

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "pubspec.yaml"

# Entries that point at the Flutter SDK itself rather than a published package
SDK_PLACEHOLDER_NAMES: frozenset[str] = frozenset({"flutter", "flutter_test"})


class ManifestError(RuntimeError):
    """Raised when a pubspec.yaml is missing, unreadable, or malformed."""


def parse_pubspec(text: str) -> dict[str, Any]:
    """Parse pubspec.yaml content into a mapping.

    Args:
        text: Raw YAML text.

    Returns:
        Parsed document. An empty document yields an empty mapping.

    Raises:
        ManifestError: If the text is not valid YAML or its root is not a mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Invalid YAML in pubspec: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ManifestError(f"pubspec root must be a mapping, got {type(data).__name__}")
    return data


def load_pubspec(path: Path | str) -> dict[str, Any]:
    """Load and parse a pubspec.yaml file.

    Args:
        path: Path to the pubspec.yaml file.

    Returns:
        Parsed YAML content.

    Raises:
        ManifestError: If the file does not exist, cannot be read, or is not
            a valid pubspec document.
    """
    path = Path(path)
    if not path.is_file():
        raise ManifestError(f"{MANIFEST_FILENAME} not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Cannot read {path}: {exc}") from exc
    return parse_pubspec(text)


def _collect_names(section: dict[str, Any] | None) -> list[str]:
    """Return the keys of a dependency section, minus SDK placeholders."""
    if not section:
        return []
    return [name for name in section if name and name not in SDK_PLACEHOLDER_NAMES]


def extract_dependencies(data: dict[str, Any]) -> ManifestDependencies:
    """Extract dependency names from a parsed pubspec.yaml.

    Args:
        data: Parsed pubspec.yaml content.

    Returns:
        Runtime and development dependency names, in declaration order.

    Raises:
        ManifestError: If a dependency section is present but not a mapping.
    """
    try:
        pubspec = PubspecSchema.model_validate(data)
    except ValidationError as exc:
        raise ManifestError(f"Malformed dependency section in pubspec: {exc}") from exc

    result = ManifestDependencies(
        dependencies=_collect_names(pubspec.dependencies),
        dev_dependencies=_collect_names(pubspec.dev_dependencies),
    )
    logger.debug(
        "Extracted %d dependencies and %d dev dependencies from pubspec",
        len(result.dependencies),
        len(result.dev_dependencies),
    )
    return result


__all__ = [
    "MANIFEST_FILENAME",
    "ManifestError",
    "SDK_PLACEHOLDER_NAMES",
    "extract_dependencies",
    "load_pubspec",
    "parse_pubspec",
]
