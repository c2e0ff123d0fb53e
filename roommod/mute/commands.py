"""Mute chat commands and the table the command dispatcher calls into."""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Sequence

from roommod.mute.auth import AuthorizationGate
from roommod.mute.errors import AuthorizationDenied, UserInputError
from roommod.mute.identity import (
    is_identity_reference,
    parse_identifier,
    parse_index,
    resolve_current_player,
    snapshot_player,
)
from roommod.mute.models import MutedEntry
from roommod.mute.store import MuteStore
from roommod.room.protocols import Announcer, LongMessageSender, PlayerDirectory
from roommod.room.types import Color, Player

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Player, Sequence[str]], None]

UNMUTE_HINT = (
    "Make sure the argument is either a number listed "
    "in !mutelist or player ID prefixed with #."
)


@dataclass(frozen=True)
class CommandSpec:
    name: str
    arity: int
    handler: CommandHandler
    help_text: str = ""


class CommandRegistry:
    """Command name to handler table, validated when built."""

    def __init__(self, specs: Iterable[CommandSpec]) -> None:
        self._specs: dict[str, CommandSpec] = {}
        for spec in specs:
            if not spec.name or not spec.name.strip():
                raise ValueError("Command name cannot be empty")
            if spec.arity < 0:
                raise ValueError(f"Command {spec.name!r} has negative arity")
            if spec.name in self._specs:
                raise ValueError(f"Command {spec.name!r} registered twice")
            self._specs[spec.name] = spec

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def get(self, name: str) -> Optional[CommandSpec]:
        return self._specs.get(name)

    def dispatch(self, actor: Player, name: str, args: Sequence[str]) -> bool:
        """Run ``name`` for ``actor``. Returns False if the command is not registered."""
        spec = self._specs.get(name)
        if spec is None:
            return False
        if len(args) != spec.arity:
            logger.debug("Command %s expects %d argument(s), got %d", name, spec.arity, len(args))
        spec.handler(actor, args)
        return True


def _first(args: Sequence[str]) -> str:
    return args[0] if args else ""


class MuteCommands:
    """Handlers for !mute, !unmute, !clearmutes and !mutelist.

    Every handler is wrapped so that it never raises: denied actors get no
    reply at all, bad arguments get a red announcement and anything else
    is logged.
    """

    def __init__(
        self,
        store: MuteStore,
        directory: PlayerDirectory,
        gate: AuthorizationGate,
        announcer: Announcer,
        long_sender: LongMessageSender,
    ) -> None:
        self._store = store
        self._directory = directory
        self._gate = gate
        self._announcer = announcer
        self._long_sender = long_sender

    def registry(self) -> CommandRegistry:
        return CommandRegistry([
            CommandSpec("mute", 1, self._guarded("mute", self.mute),
                        " #PLAYER_ID (mutes player with the given id)"),
            CommandSpec("unmute", 1, self._guarded("unmute", self.unmute),
                        " MUTE_NUMBER or #PLAYER_ID (Unmutes player. "
                        "See !mutelist for the numbers or use #PLAYER_ID)"),
            CommandSpec("clearmutes", 0, self._guarded("clearmutes", self.clear_mutes),
                        " (removes all mutes)"),
            CommandSpec("mutelist", 0, self._guarded("mutelist", self.mute_list),
                        " (lists players that have been muted)"),
        ])

    def _guarded(self, name: str, action: CommandHandler) -> CommandHandler:
        def run(actor: Player, args: Sequence[str]) -> None:
            try:
                self._gate.require_command(actor)
                action(actor, args)
            except AuthorizationDenied:
                logger.debug("Player %s is not allowed to run !%s", actor.id, name)
            except UserInputError as e:
                self._announce(str(e), actor.id, Color.RED)
            except Exception:
                logger.exception("Command !%s failed for player %s", name, actor.id)
        return run

    def _announce(self, message: str, target_id: Optional[int], color: Color) -> None:
        self._announcer.send_announcement(message, target_id, int(color))

    def _lookup_player(self, player_id: Optional[int]) -> Optional[Player]:
        if player_id is None:
            return None
        try:
            return self._directory.get_player(player_id)
        except Exception:
            logger.warning("Player directory failed looking up %s", player_id, exc_info=True)
            return None

    def mute(self, actor: Player, args: Sequence[str]) -> None:
        raw_id = _first(args)
        player = self._lookup_player(parse_identifier(raw_id))
        if player is None:
            raise UserInputError(f"No player with id {raw_id}.")
        if self._gate.is_protected(player.id):
            raise UserInputError("This player has immunity for mutes.")
        if not player.conn:
            raise UserInputError(f"Player {player.name} has no connection identity.")
        self._store.add(player.conn, snapshot_player(player))
        logger.info("Player %s (%s) muted by %s", player.name, player.id, actor.id)
        self._announce(f"Player {player.name} muted.", actor.id, Color.GREEN)
        self._announce("You have been muted.", player.id, Color.RED)

    def _remove(self, argument: str) -> Optional[MutedEntry]:
        if is_identity_reference(argument):
            player = self._lookup_player(parse_identifier(argument))
            if player is None:
                return None
            return self._store.remove_by_identity(player.conn)
        return self._store.remove_by_index(parse_index(argument))

    def unmute(self, actor: Player, args: Sequence[str]) -> None:
        argument = _first(args)
        entry = self._remove(argument)
        if entry is None:
            raise UserInputError(f"Could not unmute {argument}! {UNMUTE_HINT}")
        logger.info("Player %s unmuted by %s", entry.name, actor.id)
        self._announce(f"Player {entry.name} unmuted.", actor.id, Color.GREEN)
        in_room = resolve_current_player(self._directory, entry.identity_token)
        if in_room is not None:
            self._announce("You have been unmuted.", in_room.id, Color.GREEN)

    def clear_mutes(self, actor: Player, args: Sequence[str]) -> None:
        count = len(self._store)
        self._store.clear()
        logger.info("%d mute(s) cleared by %s", count, actor.id)
        self._announce("All mutes cleared!", None, Color.GREEN)

    def mute_list(self, actor: Player, args: Sequence[str]) -> None:
        entries = self._store.list_ordered()
        if not entries:
            self._announce("No muted players.", actor.id, Color.RED)
            return
        self._announce("MUTE_NUMBER - PLAYER", actor.id, Color.GREEN)
        lines = [f"{i} - {entry.name}" for i, entry in enumerate(entries)]
        self._long_sender.send_long_announcement("\n".join(lines), actor.id, int(Color.GREEN))
