"""Remove one entry from a persisted mute list."""

from pathlib import Path

import typer
from rich.console import Console

from roommod.cli.output import format_error, format_success, json_output
from roommod.cli.utils import BlobFileError, load_store, save_store
from roommod.mute import CorruptPersistedState

console = Console()


def unmute_command(file: str, index: int, json_flag: bool) -> None:
    """Unmute the player listed at ``index``."""
    path = Path(file)
    try:
        store = load_store(path)
        entry = store.remove_by_index(index)
        if entry is None:
            raise IndexError(f"No mute with number {index} (list has {len(store)})")
        save_store(path, store)
    except BlobFileError as e:
        format_error(console, str(e))
        raise typer.Exit(code=5)
    except CorruptPersistedState as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)
    except IndexError as e:
        format_error(console, str(e), hint="Run 'roommod list' to see the numbers")
        raise typer.Exit(code=5)
    except Exception as e:
        format_error(console, f"Failed to unmute: {e}")
        raise typer.Exit(code=1)

    if json_flag:
        json_output(
            console,
            {"status": "unmuted", "index": index, "conn": entry.identity_token, "name": entry.name},
        )
    else:
        format_success(console, f"Player {entry.name} unmuted.")
