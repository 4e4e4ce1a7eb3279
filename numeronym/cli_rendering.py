"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
generated numeronyms, and per-word explanations.
"""

from __future__ import annotations

import html
from typing import NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import Conversion, WordBreakdown


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
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


def render_result(result: str, as_html: bool = False) -> str:
    """Return display text for one numeronym, escaped when rendered as markup."""

    if as_html:
        return f"<p>{html.escape(result)}</p>"
    return result


def echo_conversion(conversion: Conversion, as_html: bool = False) -> None:
    """Print one conversion result line."""

    typer.echo(render_result(conversion.result, as_html=as_html))


def echo_breakdown(rows: list[WordBreakdown]) -> None:
    """Print one explanation row per word in input order."""

    for row in rows:
        if row.abbreviated:
            typer.echo(f"{row.word} -> {row.abbreviation} (elided={row.elided_count})")
        else:
            typer.echo(f"{row.word} -> {row.abbreviation} (kept)")
