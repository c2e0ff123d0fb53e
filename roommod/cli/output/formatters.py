"""Rich terminal output formatters."""

from typing import Sequence

from rich.console import Console
from rich.table import Table

from roommod.mute.models import MutedEntry


def format_success(console: Console, message: str) -> None:
    """Print a green status line."""
    console.print(f"[green]{message}[/green]")


def format_error(console: Console, message: str, hint: str | None = None) -> None:
    """Print a red error line, followed by a yellow hint when given."""
    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {hint}")


def format_warning(console: Console, message: str) -> None:
    """Print a yellow warning line."""
    console.print(f"[yellow]Warning:[/yellow] {message}")


def format_mute_table(console: Console, entries: Sequence[MutedEntry]) -> None:
    """Print muted entries with the numbers ``!unmute`` accepts."""
    table = Table(title="Muted players")
    table.add_column("MUTE_NUMBER", justify="right")
    table.add_column("Name")
    table.add_column("Last id", justify="right")
    table.add_column("Conn", style="dim")
    for index, entry in enumerate(entries):
        table.add_row(str(index), entry.name, str(entry.snapshot.id), entry.identity_token)
    console.print(table)
