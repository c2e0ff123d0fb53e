"""Shared fixtures: an in-memory room implementing every collaborator."""
from typing import Callable, Optional, Sequence

import pytest

from roommod.mute import MuteConfig, MutePlugin
from roommod.room import Player, Team


class FakeRoom:
    """Player directory, role service, announcer, persistence and admin control."""

    def __init__(self) -> None:
        self.players: list[Player] = []
        self.roles: dict[int, set[str]] = {}
        self.announcements: list[tuple[str, Optional[int], int]] = []
        self.long_announcements: list[tuple[str, Optional[int], int]] = []
        self.persisted: list[tuple[str, str]] = []
        self.admin_changes: list[tuple[int, bool]] = []

    def add(self, player: Player, *roles: str) -> Player:
        self.players.append(player)
        if roles:
            self.roles[player.id] = set(roles)
        return player

    def remove(self, player_id: int) -> None:
        self.players = [p for p in self.players if p.id != player_id]

    def get_player(self, player_id: int) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def list_players(self) -> list[Player]:
        return list(self.players)

    def ensure_player_roles(self, player_id: int, roles: Sequence[str]) -> bool:
        return bool(self.roles.get(player_id, set()) & set(roles))

    def has_player_role(self, player_id: int, role: str) -> bool:
        return role in self.roles.get(player_id, set())

    def send_announcement(self, message: str, target_id: Optional[int], color: int) -> None:
        self.announcements.append((message, target_id, color))

    def send_long_announcement(self, message: str, target_id: Optional[int], color: int) -> None:
        self.long_announcements.append((message, target_id, color))

    def persist_plugin_data(self, plugin_name: str, data: str) -> None:
        self.persisted.append((plugin_name, data))

    def set_player_admin(self, player_id: int, admin: bool) -> None:
        self.admin_changes.append((player_id, admin))
        player = self.get_player(player_id)
        if player is not None:
            player.admin = admin

    def messages_to(self, target_id: Optional[int]) -> list[str]:
        return [m for m, t, _ in self.announcements if t == target_id]


@pytest.fixture
def room() -> FakeRoom:
    return FakeRoom()


@pytest.fixture
def make_player() -> Callable[..., Player]:
    def factory(player_id: int, name: str = "", team: Team = Team.SPECTATORS, **kwargs) -> Player:
        return Player(
            id=player_id,
            name=name or f"player{player_id}",
            team=team,
            conn=kwargs.pop("conn", f"conn-{player_id}"),
            **kwargs,
        )
    return factory


@pytest.fixture
def config() -> MuteConfig:
    return MuteConfig()


@pytest.fixture
def admin(room: FakeRoom, make_player) -> Player:
    return room.add(make_player(1, "Boss"), "admin")


@pytest.fixture
def plugin(room: FakeRoom, config: MuteConfig) -> MutePlugin:
    return MutePlugin(
        config,
        directory=room,
        announcer=room,
        roles=room,
        long_sender=room,
        persistence=room,
    )
