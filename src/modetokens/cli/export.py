"""
CLI command for exporting a stylesheet.

Reads variables either from a JSON snapshot of Figma's
``variables/local`` response or live from the Figma REST API, then writes
the shadcn globals.css.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from modetokens.cli.common import configure_logging
from modetokens.core.config import CONFIG_FILE, ExportConfig, get_config_path, load_config
from modetokens.core.errors import ModeTokensError
from modetokens.core.events import EventCollector, EventKind, logging_sink
from modetokens.core.figma_api import FigmaRestStore, FigmaVariablesClient
from modetokens.core.host import HostStore, SnapshotStore
from modetokens.core.messages import run_export

console = Console(stderr=True)


def _build_store(config: ExportConfig, snapshot: Path | None, file_key: str | None) -> HostStore:
    if snapshot is not None:
        return SnapshotStore.from_file(snapshot)

    key = file_key or config.figma.file_key
    if not key:
        raise typer.BadParameter(
            "Provide --snapshot, --file-key or [figma] file_key in " + CONFIG_FILE
        )
    token = config.figma.token()
    if not token:
        raise typer.BadParameter(
            f"Set the {config.figma.token_env} environment variable to a Figma access token"
        )
    client = FigmaVariablesClient(
        key,
        token,
        api_base=config.figma.api_base,
        timeout=config.figma.timeout,
    )
    return FigmaRestStore(client)


def _print_skipped(collector: EventCollector) -> None:
    skipped = collector.of_kind(EventKind.VARIABLE_SKIPPED)
    if not skipped:
        return

    table = Table(title="Skipped Variables")
    table.add_column("Variable", style="cyan")
    table.add_column("Light")
    table.add_column("Dark")
    for event in skipped:
        table.add_row(
            event.variable_name or "-",
            "ok" if event.details.get("light") else "[red]missing[/red]",
            "ok" if event.details.get("dark") else "[red]missing[/red]",
        )
    console.print(table)
    console.print("[dim]Run with --verbose to see each resolution step.[/dim]")


def export_command(
    snapshot: Path | None = typer.Option(
        None,
        "--snapshot",
        "-s",
        help="JSON file with a Figma variables/local response",
        exists=True,
        dir_okay=False,
    ),
    file_key: str | None = typer.Option(
        None, "--file-key", "-k", help="Figma file key to fetch variables from"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output CSS file, or '-' for stdout"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help=f"Configuration file, ./{CONFIG_FILE} if omitted"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every resolution step"),
) -> None:
    """
    Export base/ color variables of the Mode collection as globals.css.
    """
    configure_logging(verbose)

    try:
        config = load_config(config_path or get_config_path(Path.cwd()))
        store = _build_store(config, snapshot, file_key)
    except ModeTokensError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    collector = EventCollector(forward=logging_sink)
    message = asyncio.run(run_export(store, config=config, sink=collector))

    if message["type"] == "error":
        typer.echo(f"Export failed: {message['message']}", err=True)
        raise typer.Exit(code=1)

    css: str = message["css"]
    destination = output or config.output
    if destination == "-":
        typer.echo(css)
    else:
        out_path = Path(destination)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(css + "\n", encoding="utf-8")
        console.print(
            f"Exported [green]{message['variableCount']}[/green] variables "
            f"from [cyan]{message['collectionName']}[/cyan] to {out_path}"
        )

    for event in collector.of_kind(EventKind.AMBIGUOUS_COLLECTION):
        console.print(f"[yellow]{event.message}[/yellow]")
    _print_skipped(collector)
