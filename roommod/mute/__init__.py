"""Persistent, identity-based mute list for game rooms."""
from roommod.mute.auth import AuthorizationGate
from roommod.mute.commands import CommandRegistry, CommandSpec, MuteCommands
from roommod.mute.config import ConfigError, MuteConfig, load_config
from roommod.mute.errors import AuthorizationDenied, CollaboratorUnavailable, CorruptPersistedState, MuteError, UserInputError
from roommod.mute.identity import parse_identifier, parse_index, resolve_current_player, snapshot_player
from roommod.mute.models import MutedEntry, PlayerSnapshot
from roommod.mute.plugin import PLUGIN_NAME, MutePlugin
from roommod.mute.policy import ChatDecision, ChatPolicy, is_team_captain
from roommod.mute.store import MuteStore, decode_mute_blob
__all__ = ["AuthorizationGate", "CommandRegistry", "CommandSpec", "MuteCommands",
           "ConfigError", "MuteConfig", "load_config",
           "AuthorizationDenied", "CollaboratorUnavailable", "CorruptPersistedState", "MuteError", "UserInputError",
           "parse_identifier", "parse_index", "resolve_current_player", "snapshot_player",
           "MutedEntry", "PlayerSnapshot", "PLUGIN_NAME", "MutePlugin",
           "ChatDecision", "ChatPolicy", "is_team_captain", "MuteStore", "decode_mute_blob"]
