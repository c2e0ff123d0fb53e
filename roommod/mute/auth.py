"""Role checks for running mute commands and for mute immunity."""
import logging
from typing import Optional

from roommod.mute.config import MuteConfig
from roommod.mute.errors import AuthorizationDenied
from roommod.room.protocols import RoleService
from roommod.room.types import Player

logger = logging.getLogger(__name__)


class AuthorizationGate:
    """Answers role questions against the configured role lists.

    Command access fails closed: no role service, no allowed roles or a
    failing role service all deny. Immunity defaults open: without
    protected roles nobody is protected. A role check that fails is
    skipped and the remaining protected roles are still checked.
    """

    def __init__(self, config: MuteConfig, roles: Optional[RoleService]) -> None:
        self._config = config
        self._roles = roles
        if roles is None:
            logger.warning("No role service available; mute commands are disabled")

    def can_run_command(self, actor: Player) -> bool:
        if self._roles is None or not self._config.allowed_roles:
            return False
        try:
            return bool(self._roles.ensure_player_roles(actor.id, list(self._config.allowed_roles)))
        except Exception:
            logger.warning("Role service failed for player %s; denying command", actor.id, exc_info=True)
            return False

    def require_command(self, actor: Player) -> None:
        if not self.can_run_command(actor):
            raise AuthorizationDenied(f"Player {actor.id} may not run mute commands")

    def is_protected(self, target_id: int) -> bool:
        if self._roles is None:
            return False
        for role in self._config.protected_roles:
            try:
                if self._roles.has_player_role(target_id, role):
                    return True
            except Exception:
                logger.warning("Role service failed checking %r for player %s", role, target_id, exc_info=True)
        return False
