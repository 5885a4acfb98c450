"""Static package metadata and layered-configuration identifiers.

The ``LAYEREDCONF_*`` constants feed :func:`pubspec_platform.config.get_config`
and decide where platform-specific config files are looked up.
"""

from __future__ import annotations

import click

name = "pubspec_platform"
title = "Analyze pubspec.yaml dependencies for platform and SDK compatibility"
version = "0.1.0"
author = "pubspec-platform contributors"
shell_command = "pubspec-platform"

LAYEREDCONF_VENDOR = "pubspec-platform"
LAYEREDCONF_APP = "pubspec-platform"
LAYEREDCONF_SLUG = "pubspec-platform"


def print_info() -> None:
    """Print the package metadata block used by the ``info`` command."""
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    click.echo(f"Info for {name}:\n")
    for label, value in fields:
        click.echo(f"    {label.ljust(pad)} = {value}")


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "print_info",
]
