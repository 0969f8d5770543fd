"""Tests for the room name encoding and persisted snapshots."""

import json

import pytest

from tenebra.dungeon.persistence import ConnectionRecord, MapSnapshot, RoomRecord
from tenebra.dungeon.rooms import Room, RoomType, decode_room_name, room_name
from tenebra.errors import InvalidRoomNameFormat


class TestRoomNames:
    def test_round_trip_over_default_grid(self):
        for x in range(7):
            for y in range(17):
                assert decode_room_name(room_name(x, y)) == (x, y)

    def test_encoding_format(self):
        assert room_name(3, 16) == "Room_3_16"

    @pytest.mark.parametrize(
        "name", ["BadName", "Room_1", "Room_1_2_3", "Room_x_2", "Room_2_", "Room 1 2"],
    )
    def test_malformed_names_raise(self, name):
        with pytest.raises(InvalidRoomNameFormat) as excinfo:
            decode_room_name(name)
        assert excinfo.value.name == name

    def test_prefix_is_not_checked(self):
        """Only the part count and the two integers matter."""
        assert decode_room_name("Hall_4_5") == (4, 5)


class TestRoomRecord:
    def test_from_room_keeps_everything(self):
        room = Room.at(2, 9, width=7, room_type=RoomType.EVENT)
        record = RoomRecord.from_room(room)
        assert record.name == "Room_2_9"
        assert record.room_type == RoomType.EVENT
        assert (record.x, record.y, record.id) == (2, 9, 2 + 9 * 7)
        assert record.coordinates() == (2, 9)

    def test_legacy_record_decodes_name(self):
        record = RoomRecord.from_name("Room_5_12")
        assert record.room_type == RoomType.NONE
        assert record.coordinates() == (5, 12)

    def test_legacy_record_bad_name(self):
        with pytest.raises(InvalidRoomNameFormat):
            RoomRecord.from_name("BadName").coordinates()

    def test_type_accepts_legacy_strings(self):
        record = RoomRecord.model_validate({"name": "Room_0_0", "room_type": "EliteMonster"})
        assert record.room_type == RoomType.ELITE_MONSTER


class TestMapSnapshot:
    def test_from_map(self, make_map):
        dungeon_map = make_map(42)
        snapshot = MapSnapshot.from_map(dungeon_map)
        assert (snapshot.width, snapshot.height) == (7, 16)
        assert [r.name for r in snapshot.rooms] == [
            r.name for r in dungeon_map.remaining_rooms
        ]
        assert len(snapshot.connections) == len(dungeon_map.remaining_connections)
        first = dungeon_map.remaining_connections[0]
        assert snapshot.connections[0] == ConnectionRecord(
            room_a=first.room_a.id, room_b=first.room_b.id,
        )

    def test_json_round_trip(self, make_map):
        snapshot = MapSnapshot.from_map(make_map(7))
        restored = MapSnapshot.from_json(snapshot.to_json())
        assert restored == snapshot

    def test_json_uses_plain_type_names(self, make_map):
        data = json.loads(MapSnapshot.from_map(make_map(7)).to_json())
        assert data["rooms"][0]["room_type"] == "Monster"
        assert data["rooms"][-1]["room_type"] == "Boss"

    def test_legacy_json_payload(self):
        text = json.dumps({
            "width": 7,
            "height": 16,
            "rooms": [
                {"name": "Room_1_0", "room_type": "Monster"},
                {"name": "BadName"},
            ],
        })
        snapshot = MapSnapshot.from_json(text)
        assert snapshot.rooms[0].coordinates() == (1, 0)
        assert snapshot.rooms[1].room_type == RoomType.NONE
        assert snapshot.connections == []

    def test_resume_records_are_a_copy(self, make_map):
        snapshot = MapSnapshot.from_map(make_map(7))
        records = snapshot.resume_records()
        assert records == snapshot.rooms
        records.pop()
        assert len(snapshot.rooms) == len(records) + 1

    def test_config_keeps_grid_size(self, make_map):
        snapshot = MapSnapshot.from_map(
            make_map(7, width=9, height=12, min_paths=1, max_paths=2)
        )
        config = snapshot.config()
        assert (config.width, config.height) == (9, 12)
        assert (config.min_paths, config.max_paths) == (3, 4)

    def test_config_clamps_paths_to_narrow_grid(self):
        snapshot = MapSnapshot(width=2, height=5)
        config = snapshot.config()
        assert (config.min_paths, config.max_paths) == (2, 2)
        assert MapSnapshot(width=1, height=2).config().max_paths == 1
