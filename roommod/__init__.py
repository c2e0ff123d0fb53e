"""Mute list and admin failover plugins for headless game rooms."""

__version__ = "1.0.1"
