"""Room collaborator types and interfaces."""
from roommod.room.long_message import ChunkedAnnouncer
from roommod.room.protocols import AdminControl, Announcer, LongMessageSender, PersistenceHost, PlayerDirectory, RoleService
from roommod.room.types import HOST_PLAYER_ID, Color, Player, Team
__all__ = ["ChunkedAnnouncer", "AdminControl", "Announcer", "LongMessageSender", "PersistenceHost",
           "PlayerDirectory", "RoleService", "HOST_PLAYER_ID", "Color", "Player", "Team"]
