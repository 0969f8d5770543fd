"""Tests for room interactivity gating."""

import pytest

from tenebra.core.rng import GameRNG
from tenebra.dungeon.generator import MapGenerator
from tenebra.dungeon.persistence import RoomRecord
from tenebra.dungeon.rooms import RoomType
from tenebra.errors import RoomNotClickableError


class TestSessionStart:
    def test_floor_0_rooms_clickable(self, make_map):
        dungeon_map = make_map(42)
        nav = dungeon_map.navigator()
        floor_0 = dungeon_map.graph.rooms_on_floor(0)
        assert nav.clickable_rooms() == floor_0
        assert nav.clickable_ids() == frozenset(r.id for r in floor_0)
        assert nav.current_room is None

    def test_higher_rooms_not_clickable(self, make_map):
        dungeon_map = make_map(42)
        nav = dungeon_map.navigator()
        for room in dungeon_map.remaining_rooms:
            if room.y > 0:
                assert not nav.is_clickable(room)


class TestClick:
    def test_click_enables_upper_neighbours_only(self, make_map):
        dungeon_map = make_map(42)
        nav = dungeon_map.navigator()
        start = dungeon_map.start_rooms[0]

        enabled = nav.click(start)

        expected = {
            r for r in dungeon_map.graph.connected_rooms(start)
            if r.y > start.y and dungeon_map.graph.contains(r)
        }
        assert set(enabled) == expected
        assert all(r.y == 1 for r in enabled)
        assert nav.is_current(start)
        assert not nav.is_clickable(start)

    def test_other_floor_0_rooms_disabled_after_click(self, make_map):
        dungeon_map = make_map(42)
        nav = dungeon_map.navigator()
        first, *others = dungeon_map.start_rooms
        nav.click(first)
        for room in others:
            assert not nav.is_clickable(room)
            with pytest.raises(RoomNotClickableError):
                nav.click(room)

    def test_unreachable_room_rejected(self, make_map):
        dungeon_map = make_map(42)
        nav = dungeon_map.navigator()
        with pytest.raises(RoomNotClickableError):
            nav.click(dungeon_map.boss_room)

    def test_climb_to_boss(self, make_map):
        for seed in range(20):
            dungeon_map = make_map(seed)
            nav = dungeon_map.navigator()
            room = dungeon_map.start_rooms[0]
            clicks = 0
            while True:
                enabled = nav.click(room)
                clicks += 1
                if not enabled:
                    break
                room = enabled[0]
            assert nav.current_room is dungeon_map.boss_room, f"seed={seed}"
            assert clicks == 17

    def test_resumed_mesh_enables_every_higher_room(self):
        records = [
            RoomRecord.from_name("Room_1_0", RoomType.MONSTER),
            RoomRecord.from_name("Room_2_3", RoomType.EVENT),
            RoomRecord.from_name("Room_5_9", RoomType.MERCHANT),
        ]
        dungeon_map = MapGenerator().generate(GameRNG(0), resume=records)
        nav = dungeon_map.navigator()
        start = dungeon_map.room_at(1, 0)
        enabled = nav.click(start)
        assert [r.name for r in enabled] == ["Room_2_3", "Room_5_9"]
