"""Clear a persisted mute list."""

from pathlib import Path

import typer
from rich.console import Console

from roommod.cli.output import format_error, format_success, format_warning, json_output
from roommod.cli.utils import BlobFileError, load_store, save_store
from roommod.mute import CorruptPersistedState, MuteStore

console = Console()


def clear_command(file: str, yes: bool, json_flag: bool) -> None:
    """Remove every mute. A corrupt file is overwritten with an empty list."""
    path = Path(file)
    try:
        count = len(load_store(path))
    except BlobFileError as e:
        format_error(console, str(e))
        raise typer.Exit(code=5)
    except CorruptPersistedState:
        count = 0

    if not yes and not json_flag:
        format_warning(console, f"This will remove {count} mute(s)")
        if not typer.confirm("Continue?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(code=0)

    try:
        save_store(path, MuteStore())
    except Exception as e:
        format_error(console, f"Failed to clear mutes: {e}")
        raise typer.Exit(code=1)

    if json_flag:
        json_output(console, {"status": "cleared", "removed": count})
    else:
        format_success(console, "All mutes cleared!")
