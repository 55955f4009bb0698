"""
modetokens CLI.

Commands:
- export: resolve the Mode collection and write globals.css
- convert: convert hex colors to oklch()
- version: show the installed version
"""

from __future__ import annotations

import typer

from modetokens._version import get_version
from modetokens.cli.common import configure_logging
from modetokens.cli.convert import convert_command
from modetokens.cli.export import export_command


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"modetokens {get_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="Export Figma light/dark color variables as a shadcn/Tailwind v4 OKLCH stylesheet.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """modetokens CLI main callback for global options."""
    pass


@app.command(name="version")
def version_command() -> None:
    """Show the installed version."""
    typer.echo(f"modetokens {get_version()}")


app.command(name="export")(export_command)
app.command(name="convert")(convert_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main", "configure_logging"]
