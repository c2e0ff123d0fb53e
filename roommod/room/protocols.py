"""Interfaces the plugins need from the room host."""

from typing import Optional, Protocol, Sequence

from roommod.room.types import Player


class PlayerDirectory(Protocol):
    def get_player(self, player_id: int) -> Optional[Player]: ...
    def list_players(self) -> list[Player]: ...


class RoleService(Protocol):
    def ensure_player_roles(self, player_id: int, roles: Sequence[str]) -> bool:
        """Return True if the player holds at least one of ``roles``."""
        ...

    def has_player_role(self, player_id: int, role: str) -> bool: ...


class Announcer(Protocol):
    def send_announcement(self, message: str, target_id: Optional[int], color: int) -> None:
        """Send ``message`` to ``target_id``, or to everyone when it is None."""
        ...


class LongMessageSender(Protocol):
    def send_long_announcement(self, message: str, target_id: Optional[int], color: int) -> None: ...


class PersistenceHost(Protocol):
    def persist_plugin_data(self, plugin_name: str, data: str) -> None: ...


class AdminControl(Protocol):
    def set_player_admin(self, player_id: int, admin: bool) -> None: ...
