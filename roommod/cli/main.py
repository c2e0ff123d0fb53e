"""Main CLI entry point for roommod."""

import logging

import typer
from rich.console import Console

from roommod.cli.commands.check import check_command
from roommod.cli.commands.clear import clear_command
from roommod.cli.commands.list_mutes import list_command
from roommod.cli.commands.unmute import unmute_command

app = typer.Typer(
    name="roommod",
    help="Inspect and edit a room's persisted mute list",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@app.command("list")
def list_mutes(
    file: str = typer.Option(..., "-f", "--file", help="Persisted mute list"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List muted players."""
    list_command(file, json_flag)


@app.command("unmute")
def unmute(
    file: str = typer.Option(..., "-f", "--file", help="Persisted mute list"),
    index: int = typer.Option(..., "-n", "--number", help="MUTE_NUMBER from list"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Unmute a player by mute number."""
    unmute_command(file, index, json_flag)


@app.command("clear")
def clear(
    file: str = typer.Option(..., "-f", "--file", help="Persisted mute list"),
    yes: bool = typer.Option(False, "-y", "--yes", help="Skip confirmation"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Remove all mutes."""
    clear_command(file, yes, json_flag)


@app.command("check")
def check(
    file: str = typer.Option(..., "-f", "--file", help="Persisted mute list"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Validate a persisted mute list."""
    check_command(file, json_flag)


def main() -> None:
    """Entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(130)
