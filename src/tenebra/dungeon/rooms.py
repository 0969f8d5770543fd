"""Rooms, connections and the ``Room_<x>_<y>`` name encoding.

A room's name doubles as its persistence key: a saved map stores only
names and types, and resuming decodes the grid position back out of the
name.  The encoding therefore has to round-trip exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tenebra.errors import InvalidRoomNameFormat


class RoomType(str, Enum):
    """What the player meets on entering a room."""

    NONE = "None"
    MONSTER = "Monster"
    EVENT = "Event"
    ELITE_MONSTER = "EliteMonster"
    REST_SITE = "RestSite"
    MERCHANT = "Merchant"
    TREASURE = "Treasure"
    BOSS = "Boss"


def room_name(x: int, y: int) -> str:
    """Encode grid coordinates as a room name."""
    return f"Room_{x}_{y}"


def decode_room_name(name: str) -> tuple[int, int]:
    """Decode a ``Room_<x>_<y>`` name back into ``(x, y)``.

    Raises ``InvalidRoomNameFormat`` unless the name splits on ``_`` into
    exactly three parts whose last two are integers.
    """
    parts = name.split("_")
    if len(parts) != 3:
        raise InvalidRoomNameFormat(name)
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        raise InvalidRoomNameFormat(name) from None


def room_id(x: int, y: int, width: int) -> int:
    return x + y * width


@dataclass(eq=False)
class Room:
    """A single node of the map.

    Rooms compare by identity: two rooms built at the same coordinates are
    still different rooms, which is what lets the graph detect duplicates.
    """

    id: int
    x: int
    y: int
    name: str
    room_type: RoomType = RoomType.NONE

    @classmethod
    def at(
        cls,
        x: int,
        y: int,
        width: int,
        room_type: RoomType = RoomType.NONE,
    ) -> Room:
        """Build the room for grid cell ``(x, y)`` of a *width*-wide grid."""
        return cls(
            id=room_id(x, y, width),
            x=x,
            y=y,
            name=room_name(x, y),
            room_type=room_type,
        )

    @property
    def is_assigned(self) -> bool:
        return self.room_type is not RoomType.NONE

    def __repr__(self) -> str:
        return f"Room({self.name}, {self.room_type.value})"


@dataclass(frozen=True, eq=False)
class Connection:
    """An undirected edge between two distinct rooms.

    ``room_a`` is the room the edge was created *from*; for generated paths
    that is always the lower floor.  The connection only references its
    rooms and never keeps them alive in the grid.
    """

    room_a: Room
    room_b: Room
    label: str | None = field(default=None)

    def touches(self, room: Room) -> bool:
        return self.room_a is room or self.room_b is room

    def other(self, room: Room) -> Room:
        """Return the endpoint that is not *room*."""
        if self.room_a is room:
            return self.room_b
        if self.room_b is room:
            return self.room_a
        raise ValueError(f"{room!r} is not an endpoint of {self!r}")

    def __repr__(self) -> str:
        return f"Connection({self.room_a.name} -> {self.room_b.name})"
