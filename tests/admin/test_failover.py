"""Tests for the always-one-admin rule."""

from roommod.admin import AdminFailover
from roommod.room import Player


class TestUpdateAdmins:
    def test_empty_room(self, room):
        assert AdminFailover(room, room).update_admins() is None
        assert room.admin_changes == []

    def test_only_host_left(self, room):
        room.add(Player(id=0, name="host"))
        assert AdminFailover(room, room).update_admins() is None
        assert room.admin_changes == []

    def test_first_joiner_becomes_admin(self, room, make_player):
        room.add(Player(id=0, name="host", admin=True))
        first = room.add(make_player(1))
        AdminFailover(room, room).on_player_join(first)
        assert room.admin_changes == [(1, True)]
        assert first.admin is True

    def test_existing_admin_kept(self, room, make_player):
        room.add(make_player(1))
        room.add(make_player(2, admin=True))
        AdminFailover(room, room).update_admins()
        assert room.admin_changes == []

    def test_admin_passed_on_when_last_admin_leaves(self, room, make_player):
        leaving = room.add(make_player(1, admin=True))
        room.add(make_player(2))
        room.add(make_player(3))
        failover = AdminFailover(room, room)
        room.remove(leaving.id)
        failover.on_player_leave(leaving)
        assert room.admin_changes == [(2, True)]

    def test_idempotent(self, room, make_player):
        room.add(make_player(1))
        failover = AdminFailover(room, room)
        failover.update_admins()
        failover.update_admins()
        assert room.admin_changes == [(1, True)]
