"""Configuration display for the ``config`` CLI command.

Formats the merged layered configuration as TOML-like text or JSON so users
can see which targets and analyzer settings will actually apply.
"""

from __future__ import annotations

import json
from typing import Any, cast

import click

from .config import get_config


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value)
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def _display_section_human(section_name: str, section_data: Any) -> None:
    click.echo(f"\n[{section_name}]")
    if isinstance(section_data, dict):
        for key, value in cast(dict[str, Any], section_data).items():
            click.echo(f"  {key} = {_format_value(value)}")
    else:
        click.echo(f"  {section_data}")


def _require_section(config: Any, section: str) -> Any:
    section_data = config.get(section, default={})
    if not section_data:
        click.echo(f"Section '{section}' not found or empty", err=True)
        raise SystemExit(1)
    return section_data


def display_config(*, format: str = "human", section: str | None = None) -> None:
    """Display the current merged configuration from all sources.

    Args:
        format: "human" for TOML-like display or "json" for JSON.
        section: Optional section name to display only that section.

    Side Effects:
        Writes to stdout via click.echo(). Raises SystemExit(1) if the
        requested section doesn't exist.

    Example:
        >>> display_config(section="compatibility")  # doctest: +SKIP
        <BLANKLINE>
        [compatibility]
          target_platforms = ["Android", "iOS", "Linux", "macOS", "Web"]
          target_sdks = ["Flutter"]
    """
    config = get_config()

    if format.lower() == "json":
        if section:
            section_data = _require_section(config, section)
            click.echo(json.dumps({section: section_data}, indent=2))
        else:
            click.echo(config.to_json(indent=2))
        return

    if section:
        _display_section_human(section, _require_section(config, section))
        return

    data: dict[str, Any] = config.as_dict()
    for section_name in data:
        _display_section_human(section_name, data[section_name])


__all__ = [
    "display_config",
]
