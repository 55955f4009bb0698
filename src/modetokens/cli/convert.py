"""CLI command for one-off hex to OKLCH conversion."""

from __future__ import annotations

import typer

from modetokens.core.oklch import hex_to_oklch, is_hex_color


def convert_command(
    colors: list[str] = typer.Argument(..., help="Hex colors, e.g. '#020817' or 'fff'"),
) -> None:
    """Print the oklch() value of each hex color."""
    failed = False
    for color in colors:
        candidate = color if color.startswith("#") else f"#{color}"
        if not is_hex_color(candidate):
            typer.echo(f"Invalid hex color: {color}", err=True)
            failed = True
            continue
        typer.echo(f"{candidate} -> {hex_to_oklch(candidate)}")
    if failed:
        raise typer.Exit(code=1)
