"""Persisted map payloads.

A saved map is the list of rooms that survived pruning plus the surviving
connections.  Room records carry explicit coordinates, but legacy payloads
that only hold ``Room_<x>_<y>`` names and types are still accepted: their
coordinates are decoded from the name when the map is resumed.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import BaseModel

from tenebra.dungeon.config import MapConfig
from tenebra.dungeon.rooms import (
    Connection,
    Room,
    RoomType,
    decode_room_name,
)

if TYPE_CHECKING:
    from tenebra.dungeon.generator import DungeonMap


class RoomRecord(BaseModel):
    """One persisted room."""

    name: str
    """``Room_<x>_<y>``; the resume key for legacy payloads."""

    room_type: RoomType = RoomType.NONE

    x: int | None = None
    y: int | None = None
    id: int | None = None
    """Informational; recomputed from the coordinates on resume."""

    @classmethod
    def from_room(cls, room: Room) -> RoomRecord:
        return cls(
            name=room.name,
            room_type=room.room_type,
            x=room.x,
            y=room.y,
            id=room.id,
        )

    @classmethod
    def from_name(cls, name: str, room_type: RoomType = RoomType.NONE) -> RoomRecord:
        """Build a legacy name-only record."""
        return cls(name=name, room_type=room_type)

    def coordinates(self) -> tuple[int, int]:
        """Return ``(x, y)``, decoding the name when no coordinates are stored.

        Raises ``InvalidRoomNameFormat`` for an undecodable legacy name.
        """
        if self.x is not None and self.y is not None:
            return self.x, self.y
        return decode_room_name(self.name)


class ConnectionRecord(BaseModel):
    """One persisted connection, referencing rooms by id."""

    room_a: int
    room_b: int
    label: str | None = None

    @classmethod
    def from_connection(cls, connection: Connection) -> ConnectionRecord:
        return cls(
            room_a=connection.room_a.id,
            room_b=connection.room_b.id,
            label=connection.label,
        )


class MapSnapshot(BaseModel):
    """Everything the save system needs to restore a map."""

    width: int
    height: int
    rooms: list[RoomRecord] = []
    connections: list[ConnectionRecord] = []

    @classmethod
    def from_map(cls, dungeon_map: DungeonMap) -> MapSnapshot:
        return cls(
            width=dungeon_map.config.width,
            height=dungeon_map.config.height,
            rooms=[RoomRecord.from_room(r) for r in dungeon_map.remaining_rooms],
            connections=[
                ConnectionRecord.from_connection(c)
                for c in dungeon_map.remaining_connections
            ],
        )

    def resume_records(self) -> list[RoomRecord]:
        """Room records in saved order, ready for ``MapGenerator.generate``."""
        return list(self.rooms)

    def config(self) -> MapConfig:
        """A config with the saved grid size.

        Path counts only matter for fresh maps; they are clamped so that
        narrow saved grids still validate.
        """
        max_paths = min(MapConfig.model_fields["max_paths"].default, self.width)
        min_paths = min(MapConfig.model_fields["min_paths"].default, max_paths)
        return MapConfig(
            width=self.width,
            height=self.height,
            min_paths=min_paths,
            max_paths=max_paths,
        )

    def to_json(self) -> str:
        return json.dumps(self.model_dump(mode="json"), indent=2)

    @classmethod
    def from_json(cls, text: str) -> MapSnapshot:
        return cls.model_validate(json.loads(text))
