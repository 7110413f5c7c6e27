"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command results
and failure diagnostics.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import NamingStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, NamingStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_result(value: str | bool) -> None:
    """Print one command result, rendering booleans as `true`/`false`."""

    if isinstance(value, bool):
        typer.echo("true" if value else "false")
        return
    typer.echo(value)
