"""Command line tools for persisted mute lists."""
