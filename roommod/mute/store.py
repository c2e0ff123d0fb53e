"""In-memory mute list with write-through persistence."""
import json
import logging
from typing import Any, Callable, Iterator, Optional

from pydantic import ValidationError

from roommod.mute.errors import CorruptPersistedState
from roommod.mute.models import MutedEntry, PlayerSnapshot

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[str], None]


def decode_mute_blob(blob: str) -> dict[str, MutedEntry]:
    """Decode a persisted mute list.

    Args:
        blob: JSON object mapping identity tokens to player snapshots.

    Returns:
        Entries keyed by identity token, in the order they appear in the blob.

    Raises:
        CorruptPersistedState: If the blob is not a JSON object of valid snapshots.
    """
    try:
        data = json.loads(blob)
    except RecursionError as e:
        raise CorruptPersistedState("Mute list is nested too deeply to decode", blob) from e
    except (TypeError, ValueError) as e:
        raise CorruptPersistedState(f"Mute list is not valid JSON: {e}", blob) from e
    if not isinstance(data, dict):
        raise CorruptPersistedState(
            f"Mute list must be a JSON object, got {type(data).__name__}", blob
        )
    entries: dict[str, MutedEntry] = {}
    for token, raw in data.items():
        if not token:
            raise CorruptPersistedState("Mute list contains an empty identity token", blob)
        try:
            snapshot = PlayerSnapshot.model_validate(raw)
        except ValidationError as e:
            raise CorruptPersistedState(f"Invalid snapshot for {token!r}: {e}", blob) from e
        except RecursionError as e:
            raise CorruptPersistedState(f"Snapshot for {token!r} is nested too deeply", blob) from e
        entries[token] = MutedEntry(identity_token=token, snapshot=snapshot)
    return entries


class MuteStore:
    """Ordered mapping of identity token to muted entry.

    Iteration order is insertion order and defines the index shown by
    ``!mutelist``. Re-adding a token refreshes its snapshot in place, so
    existing indices stay put. Every mutation hands the serialized list to
    ``on_change``; failures there are logged and never reach the caller.
    """

    def __init__(self, on_change: Optional[ChangeCallback] = None) -> None:
        self._entries: dict[str, MutedEntry] = {}
        self._on_change = on_change

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MutedEntry]:
        return iter(list(self._entries.values()))

    def __contains__(self, identity_token: object) -> bool:
        return identity_token in self._entries

    def has(self, identity_token: str) -> bool:
        return identity_token in self._entries

    def get(self, identity_token: str) -> Optional[MutedEntry]:
        return self._entries.get(identity_token)

    def add(self, identity_token: str, snapshot: PlayerSnapshot) -> None:
        self._entries[identity_token] = MutedEntry(identity_token=identity_token, snapshot=snapshot)
        self._write_through()

    def remove_by_identity(self, identity_token: str) -> Optional[MutedEntry]:
        entry = self._entries.pop(identity_token, None)
        if entry is not None:
            self._write_through()
        return entry

    def remove_by_index(self, index: Any) -> Optional[MutedEntry]:
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if index < 0 or index >= len(self._entries):
            return None
        for i, token in enumerate(self._entries):
            if i == index:
                return self.remove_by_identity(token)
        return None

    def clear(self) -> None:
        self._entries.clear()
        self._write_through()

    def reset(self) -> None:
        """Drop all entries without persisting."""
        self._entries = {}

    def list_ordered(self) -> list[MutedEntry]:
        return list(self._entries.values())

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {token: entry.snapshot.to_dict() for token, entry in self._entries.items()}

    def serialize(self) -> str:
        return json.dumps(self.to_dict())

    def deserialize(self, blob: Optional[str]) -> "MuteStore":
        """Replace the contents with a persisted list. None means nothing to restore."""
        if blob is None:
            return self
        self._entries = decode_mute_blob(blob)
        return self

    def _write_through(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change(self.serialize())
        except Exception:
            logger.exception("Failed to persist mute list (%d entries)", len(self._entries))
