"""Configuration management using lib_layered_config.

Purpose
-------
Provides a centralized configuration loader that merges defaults, application
configs, host configs, user configs, .env files, and environment variables
following a deterministic precedence order.

Contents
--------
* :func:`get_config` – loads configuration with lib_layered_config
* :func:`get_default_config_path` – returns path to bundled default config
* :func:`get_compatibility_config` – returns the target platforms and SDKs
* :func:`get_analyzer_settings` – returns analyzer-specific settings

Configuration identifiers (vendor, app, slug) are imported from
:mod:`pubspec_platform.__init__conf__` as LAYEREDCONF_* constants.

System Role
-----------
Acts as the configuration adapter layer, bridging lib_layered_config with the
application's runtime needs while keeping domain logic decoupled from
configuration mechanics.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from lib_layered_config import Config, read_config

from . import __init__conf__
from .models import DEFAULT_TARGET_PLATFORMS, DEFAULT_TARGET_SDKS, CompatibilityConfig

# Environment variable prefix for native (short) env vars
_ENV_PREFIX = "PUBSPEC_PLATFORM_"

DEFAULT_TIMEOUT = 30.0
DEFAULT_CATALOG_URL = "https://pub.dev/packages"
DEFAULT_LOG_LEVEL = "WARNING"


def get_default_config_path() -> Path:
    """Return the path to the bundled default configuration file.

    Returns:
        Absolute path to defaultconfig.toml.

    Example:
        >>> path = get_default_config_path()
        >>> path.name
        'defaultconfig.toml'
        >>> path.exists()
        True
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=1)
def get_config(*, start_dir: str | None = None) -> Config:
    """Load layered configuration with application defaults.

    Loads configuration from multiple sources in precedence order:
    defaults → app → host → user → dotenv → env

    Args:
        start_dir: Optional directory that seeds .env discovery. Defaults to
            current working directory when None.

    Returns:
        Immutable configuration object with provenance tracking.

    Note:
        This function is cached (maxsize=1); call ``get_config.cache_clear()``
        to force a reload.
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _section(name: str) -> dict[str, Any]:
    section = get_config().get(name, default={})
    return dict(section) if section else {}


def _split_env_list(value: str) -> tuple[str, ...]:
    """Split a comma separated env value, dropping blanks."""
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _as_name_tuple(value: Any, default: tuple[str, ...]) -> tuple[str, ...]:
    if isinstance(value, str):
        return _split_env_list(value)
    if isinstance(value, Iterable):
        return tuple(str(item) for item in value)
    return default


def get_compatibility_config() -> CompatibilityConfig:
    """Get the target platforms and SDKs with environment variable overrides.

    Settings are resolved in the following precedence order (highest wins):
    1. Native environment variables (PUBSPEC_PLATFORM_TARGET_PLATFORMS,
       PUBSPEC_PLATFORM_TARGET_SDKS), comma separated
    2. lib_layered_config sources ([compatibility] section)
    3. Built-in defaults

    An explicitly empty list is honored and means "no targets" for that
    dimension.
    """
    section = _section("compatibility")

    platforms = _as_name_tuple(section.get("target_platforms", DEFAULT_TARGET_PLATFORMS), DEFAULT_TARGET_PLATFORMS)
    sdks = _as_name_tuple(section.get("target_sdks", DEFAULT_TARGET_SDKS), DEFAULT_TARGET_SDKS)

    env_platforms = os.environ.get(f"{_ENV_PREFIX}TARGET_PLATFORMS")
    if env_platforms is not None:
        platforms = _split_env_list(env_platforms)

    env_sdks = os.environ.get(f"{_ENV_PREFIX}TARGET_SDKS")
    if env_sdks is not None:
        sdks = _split_env_list(env_sdks)

    return CompatibilityConfig(target_platforms=platforms, target_sdks=sdks)


@dataclass(frozen=True, slots=True)
class AnalyzerSettings:
    """Immutable settings for the compatibility analyzer.

    Attributes:
        timeout: Maximum seconds to wait for a package page.
        catalog_url: Base URL of the package catalog; the package name is
            appended as the last path segment.
    """

    timeout: float
    catalog_url: str


def get_analyzer_settings() -> AnalyzerSettings:
    """Get analyzer settings from configuration with environment variable overrides.

    ``PUBSPEC_PLATFORM_TIMEOUT`` overrides the configured timeout; an
    unparseable value is ignored.

    Example:
        >>> settings = get_analyzer_settings()  # doctest: +SKIP
        >>> settings.timeout  # doctest: +SKIP
        30.0
    """
    section = _section("analyzer")

    timeout = section.get("timeout", DEFAULT_TIMEOUT)
    catalog_url = section.get("catalog_url", DEFAULT_CATALOG_URL) or DEFAULT_CATALOG_URL

    if env_timeout := os.environ.get(f"{_ENV_PREFIX}TIMEOUT"):
        try:
            timeout = float(env_timeout)
        except ValueError:
            pass  # Keep config value if env var is invalid

    return AnalyzerSettings(timeout=float(timeout), catalog_url=str(catalog_url))


def get_log_level() -> str:
    """Return the configured root log level name."""
    return str(_section("logging").get("level", DEFAULT_LOG_LEVEL)).upper()


__all__ = [
    "AnalyzerSettings",
    "get_analyzer_settings",
    "get_compatibility_config",
    "get_config",
    "get_default_config_path",
    "get_log_level",
]
