"""Validate a persisted mute list."""

from pathlib import Path

import typer
from rich.console import Console

from roommod.cli.output import format_error, format_success, json_output
from roommod.cli.utils import BlobFileError, load_store
from roommod.mute import CorruptPersistedState

console = Console()


def check_command(file: str, json_flag: bool) -> None:
    try:
        store = load_store(Path(file))
    except BlobFileError as e:
        format_error(console, str(e))
        raise typer.Exit(code=5)
    except CorruptPersistedState as e:
        if json_flag:
            json_output(console, {"status": "corrupt", "error": str(e)})
        else:
            format_error(console, f"Corrupt mute list: {e}")
        raise typer.Exit(code=2)

    if json_flag:
        json_output(console, {"status": "ok", "entries": len(store)})
    else:
        format_success(console, f"Mute list OK ({len(store)} entries)")
