"""List the players in a persisted mute list."""

from pathlib import Path

import typer
from rich.console import Console

from roommod.cli.output import format_error, format_mute_table, format_warning, json_output
from roommod.cli.utils import BlobFileError, load_store
from roommod.mute import CorruptPersistedState

console = Console()


def list_command(file: str, json_flag: bool) -> None:
    """Show muted players with the number used by unmute."""
    try:
        store = load_store(Path(file))
    except BlobFileError as e:
        format_error(console, str(e))
        raise typer.Exit(code=5)
    except CorruptPersistedState as e:
        format_error(console, str(e), hint="Run 'roommod check' for details")
        raise typer.Exit(code=2)

    entries = store.list_ordered()
    if json_flag:
        json_output(
            console,
            [
                {"index": i, "conn": e.identity_token, "player": e.snapshot}
                for i, e in enumerate(entries)
            ],
        )
        return

    if not entries:
        format_warning(console, "No muted players.")
        return

    format_mute_table(console, entries)
