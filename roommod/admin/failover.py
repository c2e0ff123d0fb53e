"""Keeps at least one admin in the room.

The first player to join becomes admin, and when the last admin leaves
admin is passed to the first remaining player.
"""
import logging
from typing import Optional

from roommod.room.protocols import AdminControl, PlayerDirectory
from roommod.room.types import HOST_PLAYER_ID, Player

logger = logging.getLogger(__name__)

PLUGIN_NAME = "hr/always-one-admin"


class AdminFailover:
    def __init__(self, directory: PlayerDirectory, admin_control: AdminControl, host_id: int = HOST_PLAYER_ID) -> None:
        self._directory = directory
        self._admin_control = admin_control
        self._host_id = host_id

    def update_admins(self) -> Optional[Player]:
        """Promote the first listed player if nobody but the host is admin.

        Returns the promoted player, or None when nothing changed.
        """
        players = [p for p in self._directory.list_players() if p.id != self._host_id]
        if not players:
            return None
        if any(p.admin for p in players):
            return None
        promoted = players[0]
        self._admin_control.set_player_admin(promoted.id, True)
        logger.info("No admins left; promoted %s (%s)", promoted.name, promoted.id)
        return promoted

    def on_player_join(self, player: Player) -> None:
        self.update_admins()

    def on_player_leave(self, player: Player) -> None:
        self.update_admins()
