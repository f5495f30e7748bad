"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for tokenized option
maps, changed option fields, and command diagnostics.
"""

from __future__ import annotations

from dataclasses import fields
from enum import Enum
from typing import Any, NoReturn

import typer

from .errors import OptionsError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, OptionsError):
        typer.secho(
            f"{command_name} failed [{exc.kind}]: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def format_option_value(value: Any) -> str:
    """Render one option field value for terminal output."""

    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, tuple):
        return "[" + ", ".join(format_option_value(item) for item in value) + "]"
    return str(value)


def echo_option_map(opts_map: dict[str, str]) -> None:
    """Print tokenized `key = value` rows in input order."""

    for key, value in opts_map.items():
        typer.echo(f"{key} = {value}")


def echo_changed_fields(base: Any, updated: Any) -> None:
    """Print `field: value` rows for fields whose value differs from `base`."""

    changed = 0
    for item in fields(updated):
        value = getattr(updated, item.name)
        if value != getattr(base, item.name):
            typer.echo(f"{item.name}: {format_option_value(value)}")
            changed += 1
    if changed == 0:
        typer.echo("No changes from base options.")
