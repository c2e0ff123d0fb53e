"""Reading and writing a persisted mute list file."""

from pathlib import Path

from roommod.mute.store import MuteStore


class BlobFileError(Exception):
    """Mute list file is missing or unreadable."""

    pass


def load_store(path: Path) -> MuteStore:
    """Load the mute list stored at ``path``.

    An empty file is treated as an empty mute list.

    Raises:
        BlobFileError: If the file does not exist.
        CorruptPersistedState: If the file content cannot be decoded.
    """
    if not path.exists():
        raise BlobFileError(f"File not found: {path}")
    blob = path.read_text(encoding="utf-8").strip() or "{}"
    return MuteStore().deserialize(blob)


def save_store(path: Path, store: MuteStore) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(store.serialize(), encoding="utf-8")
