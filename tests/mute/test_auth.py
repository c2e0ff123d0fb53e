"""Tests for the authorization gate."""

import pytest

from roommod.mute import AuthorizationDenied, AuthorizationGate, MuteConfig


class BrokenRoles:
    def ensure_player_roles(self, player_id, roles):
        raise RuntimeError("roles plugin crashed")

    def has_player_role(self, player_id, role):
        raise RuntimeError("roles plugin crashed")


class FlakyHostRole:
    """Role service that fails only when asked about the host role."""

    def __init__(self, roles):
        self._roles = roles

    def ensure_player_roles(self, player_id, roles):
        return any(role in self._roles for role in roles)

    def has_player_role(self, player_id, role):
        if role == "host":
            raise RuntimeError("host lookup failed")
        return role in self._roles


class TestCanRunCommand:
    def test_allowed_role(self, room, make_player):
        actor = room.add(make_player(1), "admin")
        assert AuthorizationGate(MuteConfig(allowed_roles=("admin",)), room).can_run_command(actor)

    def test_player_role_denied(self, room, make_player):
        actor = room.add(make_player(1), "player")
        assert not AuthorizationGate(MuteConfig(allowed_roles=("admin",)), room).can_run_command(actor)

    def test_any_of_several_roles(self, room, make_player):
        actor = room.add(make_player(1), "mod")
        gate = AuthorizationGate(MuteConfig(allowed_roles=("admin", "mod")), room)
        assert gate.can_run_command(actor)

    def test_no_role_service_fails_closed(self, make_player):
        assert not AuthorizationGate(MuteConfig(), None).can_run_command(make_player(1))

    def test_broken_role_service_fails_closed(self, make_player):
        assert not AuthorizationGate(MuteConfig(), BrokenRoles()).can_run_command(make_player(1))

    def test_empty_allowed_roles_denies(self, room, make_player):
        actor = room.add(make_player(1), "admin")
        assert not AuthorizationGate(MuteConfig(allowed_roles=()), room).can_run_command(actor)

    def test_require_command_raises(self, room, make_player):
        actor = room.add(make_player(1), "player")
        with pytest.raises(AuthorizationDenied):
            AuthorizationGate(MuteConfig(), room).require_command(actor)


class TestIsProtected:
    def test_protected_role(self, room, make_player):
        target = room.add(make_player(2), "host")
        assert AuthorizationGate(MuteConfig(), room).is_protected(target.id)

    def test_unprotected_player(self, room, make_player):
        target = room.add(make_player(2), "player")
        assert not AuthorizationGate(MuteConfig(), room).is_protected(target.id)

    def test_no_protected_roles_protects_nobody(self, room, make_player):
        target = room.add(make_player(2), "admin")
        assert not AuthorizationGate(MuteConfig(protected_roles=()), room).is_protected(target.id)

    def test_no_role_service_protects_nobody(self):
        assert not AuthorizationGate(MuteConfig(), None).is_protected(2)

    def test_broken_role_service_protects_nobody(self):
        assert not AuthorizationGate(MuteConfig(), BrokenRoles()).is_protected(2)

    def test_failing_role_check_does_not_skip_later_roles(self):
        gate = AuthorizationGate(MuteConfig(protected_roles=("host", "admin")), FlakyHostRole({"admin"}))
        assert gate.is_protected(2)

    def test_failing_role_check_alone_protects_nobody(self):
        gate = AuthorizationGate(MuteConfig(protected_roles=("host", "admin")), FlakyHostRole({"player"}))
        assert not gate.is_protected(2)
