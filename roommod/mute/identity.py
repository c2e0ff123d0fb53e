"""Identifier parsing and identity lookups."""

import re
from typing import Any, Optional

from roommod.mute.models import PlayerSnapshot
from roommod.room.protocols import PlayerDirectory
from roommod.room.types import Player

_DIGITS = re.compile(r"^[0-9]+$")


def _parse_digits(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not _DIGITS.match(value):
        return None
    return int(value)


def parse_identifier(value: Any) -> Optional[int]:
    """Parse a player id given as ``12``, ``"12"`` or ``"#12"``. Returns None if invalid."""
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("#"):
            return _parse_digits(stripped[1:])
    return _parse_digits(value)


def parse_index(value: Any) -> Optional[int]:
    """Parse a mute list index. ``#``-prefixed values are not indices."""
    return _parse_digits(value)


def is_identity_reference(value: Any) -> bool:
    """True if the argument refers to a player id (``#12``) rather than an index."""
    return isinstance(value, str) and value.strip().startswith("#")


def resolve_current_player(directory: PlayerDirectory, identity_token: str) -> Optional[Player]:
    """Find the in-room player whose connection token matches, if any."""
    for player in directory.list_players():
        if player.conn == identity_token:
            return player
    return None


def snapshot_player(player: Player) -> PlayerSnapshot:
    """Capture the attributes stored in the mute list for ``player``."""
    return PlayerSnapshot(
        id=player.id,
        name=player.name,
        team=int(player.team),
        admin=player.admin,
        conn=player.conn,
        auth=player.auth,
    )
