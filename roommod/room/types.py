"""Type definitions and enums for room collaborators."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

HOST_PLAYER_ID = 0


class Team(IntEnum):
    SPECTATORS = 0
    RED = 1
    BLUE = 2


class Color(IntEnum):
    """Announcement colors used by the plugins."""

    RED = 0xFF0000
    GREEN = 0x00FF00


@dataclass
class Player:
    """A player currently in the room, as reported by the player directory."""

    id: int
    name: str
    team: Team = Team.SPECTATORS
    admin: bool = False
    conn: str = ""
    auth: Optional[str] = None
