"""CLI commands."""

from . import check, clear, list_mutes, unmute

__all__ = ["check", "clear", "list_mutes", "unmute"]
