"""Mute plugin: wires the mute list into the room's hooks.

Lets players holding one of the allowed roles mute others. Mutes are keyed
by connection identity and survive room restarts through the host's
persistence hooks. Commands:

- ``!mute #PLAYER_ID``
- ``!unmute MUTE_NUMBER`` or ``!unmute #PLAYER_ID``
- ``!mutelist``
- ``!clearmutes``
"""
import logging
from typing import Optional, Sequence

from roommod.mute.auth import AuthorizationGate
from roommod.mute.commands import CommandRegistry, MuteCommands
from roommod.mute.config import MuteConfig
from roommod.mute.errors import CollaboratorUnavailable, CorruptPersistedState
from roommod.mute.policy import ChatDecision, ChatPolicy
from roommod.mute.store import MuteStore
from roommod.room.long_message import ChunkedAnnouncer
from roommod.room.protocols import Announcer, LongMessageSender, PersistenceHost, PlayerDirectory, RoleService
from roommod.room.types import Color, Player

logger = logging.getLogger(__name__)

PLUGIN_NAME = "hr/mute"


class MutePlugin:
    """Owns the mute list and translates room events into mute operations."""

    def __init__(
        self,
        config: MuteConfig,
        directory: Optional[PlayerDirectory],
        announcer: Optional[Announcer],
        roles: Optional[RoleService] = None,
        long_sender: Optional[LongMessageSender] = None,
        persistence: Optional[PersistenceHost] = None,
    ) -> None:
        if directory is None:
            raise CollaboratorUnavailable("player directory")
        if announcer is None:
            raise CollaboratorUnavailable("announcer")
        self._config = config
        self._directory = directory
        self._announcer = announcer
        self._persistence = persistence
        self._store = MuteStore(on_change=self._persist if persistence is not None else None)
        self._gate = AuthorizationGate(config, roles)
        self._policy = ChatPolicy(self._store, directory, config.allow_talking_when_captain)
        self._commands = MuteCommands(
            self._store,
            directory,
            self._gate,
            announcer,
            long_sender or ChunkedAnnouncer(announcer),
        ).registry()

    @property
    def config(self) -> MuteConfig:
        return self._config

    @property
    def store(self) -> MuteStore:
        return self._store

    @property
    def gate(self) -> AuthorizationGate:
        return self._gate

    @property
    def commands(self) -> CommandRegistry:
        return self._commands

    def _persist(self, blob: str) -> None:
        self._persistence.persist_plugin_data(PLUGIN_NAME, blob)

    def is_muted(self, player: Player) -> bool:
        return self._store.has(player.conn)

    def on_player_chat(self, player: Player) -> bool:
        """Host chat hook. Returning False drops the message."""
        if self._policy.evaluate(player) is ChatDecision.ALLOW:
            return True
        self._announcer.send_announcement(self._config.mute_message, player.id, int(Color.RED))
        return False

    def on_command(self, actor: Player, name: str, args: Sequence[str]) -> bool:
        return self._commands.dispatch(actor, name, args)

    def on_persist(self) -> str:
        return self._store.serialize()

    def on_restore(self, data: Optional[str]) -> None:
        """Restore a persisted mute list.

        A list that cannot be decoded is discarded and the room starts with
        no mutes.
        """
        if data is None:
            return
        try:
            self._store.deserialize(data)
        except CorruptPersistedState as e:
            logger.error("Discarding corrupt mute list: %s", e)
            self._store.reset()
            return
        logger.info("Restored %d mute(s)", len(self._store))

    def help_entries(self) -> list[tuple[str, str, tuple[str, ...]]]:
        """(command, help text, roles allowed to run it) for the help plugin."""
        return [(spec.name, spec.help_text, self._config.allowed_roles) for spec in self._commands]
