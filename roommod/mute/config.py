"""Mute plugin configuration."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

DEFAULT_MUTE_MESSAGE = "You cannot send messages because you are muted."

_RECOGNISED_BOOL_VALUES = frozenset(
    ("1", "true", "yes", "0", "false", "no")
)

# Host plugin configs use camelCase keys.
_KEY_ALIASES = {
    "muteMessage": "mute_message",
    "protectedRoles": "protected_roles",
    "allowedRoles": "allowed_roles",
    "allowTalkingWhenCaptain": "allow_talking_when_captain",
}


class ConfigError(Exception):
    """Configuration file error."""

    pass


@dataclass(frozen=True)
class MuteConfig:
    """Recognised options of the mute plugin.

    ``protected_roles`` grant immunity from being muted. ``allowed_roles``
    may run the mute commands. With ``allow_talking_when_captain`` a muted
    player may still chat while listed first in the red or blue team.
    """

    mute_message: str = DEFAULT_MUTE_MESSAGE
    protected_roles: tuple[str, ...] = ("host", "admin")
    allowed_roles: tuple[str, ...] = ("admin",)
    allow_talking_when_captain: bool = False

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "MuteConfig":
        values = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        defaults = MuteConfig()
        mute_message = values.get("mute_message", defaults.mute_message)
        return MuteConfig(
            mute_message=str(mute_message) if mute_message is not None else defaults.mute_message,
            protected_roles=_parse_roles(
                values.get("protected_roles", defaults.protected_roles), "protected_roles"
            ),
            allowed_roles=_parse_roles(
                values.get("allowed_roles", defaults.allowed_roles), "allowed_roles"
            ),
            allow_talking_when_captain=_parse_bool(
                values.get("allow_talking_when_captain"), defaults.allow_talking_when_captain
            ),
        )


def _parse_roles(value: Any, field_name: str) -> tuple[str, ...]:
    """Normalise a role list, dropping duplicates but keeping order.

    Anything that is not a list or tuple yields no roles.
    """
    if not isinstance(value, (list, tuple)):
        logger.warning("%s must be a list of role names, got %r; using no roles", field_name, value)
        return ()
    roles: list[str] = []
    for role in value:
        role = str(role)
        if role not in roles:
            roles.append(role)
    return tuple(roles)


def _parse_bool(value: Any, default: bool) -> bool:
    """Parse a boolean option with explicit default.

    Accepts real booleans and the strings ``true/1/yes`` and ``false/0/no``
    (case-insensitive). Logs a warning and returns *default* for anything
    else (e.g. typos like ``ture``).
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    normalised = str(value).strip().lower()
    if normalised not in _RECOGNISED_BOOL_VALUES:
        logger.warning(
            "Unrecognised boolean value %r, using default %s. "
            "Expected one of: true/1/yes or false/0/no.",
            value,
            default,
        )
        return default
    return normalised in ("1", "true", "yes")


def load_config(path: Path) -> MuteConfig:
    """Load configuration from a YAML file. Raises ConfigError if unreadable."""
    if not path.exists():
        raise ConfigError(f"Config not found at {path}")
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e
    if data is None:
        return MuteConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config: expected a mapping in {path}")
    return MuteConfig.from_dict(data)
