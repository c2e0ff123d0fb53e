"""Chat interception for muted players."""
from enum import Enum

from roommod.mute.store import MuteStore
from roommod.room.protocols import PlayerDirectory
from roommod.room.types import Player, Team


class ChatDecision(Enum):
    ALLOW = "allow"
    SUPPRESS = "suppress"


def is_team_captain(directory: PlayerDirectory, player: Player) -> bool:
    """True if the player is listed first in the red or the blue team."""
    players = directory.list_players()
    for team in (Team.RED, Team.BLUE):
        captain = next((p for p in players if p.team == team), None)
        if captain is not None and captain.id == player.id:
            return True
    return False


class ChatPolicy:
    def __init__(self, store: MuteStore, directory: PlayerDirectory, allow_talking_when_captain: bool = False) -> None:
        self._store = store
        self._directory = directory
        self._allow_captain = allow_talking_when_captain

    def evaluate(self, player: Player) -> ChatDecision:
        if not self._store.has(player.conn):
            return ChatDecision.ALLOW
        # Captaincy is positional and changes as the rosters do.
        if self._allow_captain and is_team_captain(self._directory, player):
            return ChatDecision.ALLOW
        return ChatDecision.SUPPRESS
