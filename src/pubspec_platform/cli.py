"""Command-line interface: pubspec-platform.

Subcommands:
    pubspec-platform analyze [PUBSPEC]     # Classify every dependency
    pubspec-platform config                # Show merged configuration
    pubspec-platform info                  # Show package metadata
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from . import __init__conf__
from .analyzer import create_analyzer
from .config import get_analyzer_settings, get_compatibility_config, get_log_level
from .config_show import display_config
from .manifest_reader import MANIFEST_FILENAME, ManifestError
from .models import CompatibilityConfig
from .report import analysis_to_dict, render_text_report, write_report_json

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_log_level(), logging.WARNING)
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _resolve_pubspec_path(pubspec: str) -> Path:
    """Accept either a pubspec.yaml path or the project directory holding it."""
    path = Path(pubspec)
    if path.is_dir():
        return path / MANIFEST_FILENAME
    return path


def _resolve_config(platforms: tuple[str, ...], sdks: tuple[str, ...]) -> CompatibilityConfig:
    configured = get_compatibility_config()
    return CompatibilityConfig(
        target_platforms=platforms or configured.target_platforms,
        target_sdks=sdks or configured.target_sdks,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__init__conf__.version, prog_name=__init__conf__.shell_command)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Check pubspec.yaml dependencies against target platforms and SDKs."""
    _configure_logging(verbose)


@main.command()
@click.argument("pubspec", default=MANIFEST_FILENAME, type=click.Path(dir_okay=True, file_okay=True))
@click.option("--platform", "platforms", multiple=True, help="Target platform (repeatable). Overrides config.")
@click.option("--sdk", "sdks", multiple=True, help="Target SDK (repeatable). Overrides config.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["human", "json"], case_sensitive=False),
    default="human",
    show_default=True,
    help="Output format.",
)
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Also write the JSON report here.")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds. Overrides config.")
def analyze(
    pubspec: str,
    platforms: tuple[str, ...],
    sdks: tuple[str, ...],
    output_format: str,
    output: str | None,
    timeout: float | None,
) -> None:
    """Analyze PUBSPEC (a pubspec.yaml or its directory) for compatibility."""
    settings = get_analyzer_settings()
    config = _resolve_config(platforms, sdks)

    try:
        analyzer = create_analyzer(
            config=config,
            timeout=timeout if timeout is not None else settings.timeout,
            catalog_url=settings.catalog_url,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--timeout") from exc

    try:
        analysis = analyzer.analyze(_resolve_pubspec_path(pubspec))
    except ManifestError as exc:
        click.echo(f"Error analyzing dependencies: {exc}", err=True)
        raise SystemExit(1) from exc

    if output:
        write_report_json(analysis, output)

    if output_format.lower() == "json":
        click.echo(json.dumps(analysis_to_dict(analysis), indent=2))
    else:
        click.echo(render_text_report(analysis), nl=False)


@main.command("config")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["human", "json"], case_sensitive=False),
    default="human",
    show_default=True,
)
@click.option("--section", default=None, help="Show only this section.")
def config_command(output_format: str, section: str | None) -> None:
    """Show the merged configuration from all sources."""
    display_config(format=output_format, section=section)


@main.command()
def info() -> None:
    """Show package metadata."""
    __init__conf__.print_info()


__all__ = ["main"]
