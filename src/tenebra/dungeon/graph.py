"""Room and connection storage for a floor-layered map.

The grid is ``width`` cells wide and ``height + 1`` floors tall: floors
``0 .. height-1`` hold the walkable rooms and floor ``height`` is the boss
floor.  Rooms are indexed both by grid cell and by id; connections are kept
in insertion order together with a per-room index so that neighbourhood
queries do not scan every edge.
"""

from __future__ import annotations

from typing import Iterator

from tenebra.dungeon.rooms import Connection, Room
from tenebra.errors import DuplicateRoomError, SelfConnectionError


class RoomGraph:
    """Grid of optional rooms plus the undirected connections between them.

    Removing a room only clears its grid cell and id slot.  Connection
    records that reference it stay in place, so callers decide whether a
    connection is still live with :meth:`contains`.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._grid: list[list[Room | None]] = [
            [None] * width for _ in range(height + 1)
        ]
        self._rooms: dict[int, Room] = {}
        self._connections: list[Connection] = []
        self._by_room: dict[Room, list[Connection]] = {}

    # -- rooms ---------------------------------------------------------------

    @property
    def penultimate_floor(self) -> int:
        return self.height - 1

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y <= self.height

    def add_room(self, room: Room) -> None:
        """Insert *room* at its grid cell.

        Raises ``DuplicateRoomError`` if a room already holds that id.
        """
        if room.id in self._rooms:
            raise DuplicateRoomError(room.id, room.x, room.y)
        if not self.in_bounds(room.x, room.y):
            raise ValueError(
                f"{room!r} lies outside the {self.width}x{self.height + 1} grid"
            )
        self._rooms[room.id] = room
        self._grid[room.y][room.x] = room

    def remove_room(self, room: Room) -> None:
        if self._rooms.get(room.id) is room:
            del self._rooms[room.id]
        if self._grid[room.y][room.x] is room:
            self._grid[room.y][room.x] = None

    def contains(self, room: Room) -> bool:
        """True if *room* itself (not just its id) is still on the grid."""
        return self._rooms.get(room.id) is room

    def get(self, room_id: int) -> Room | None:
        return self._rooms.get(room_id)

    def room_at(self, x: int, y: int) -> Room | None:
        return self._grid[y][x]

    def rooms_on_floor(self, floor: int) -> list[Room]:
        """Occupied cells of *floor*, left to right."""
        return [room for room in self._grid[floor] if room is not None]

    def rooms(self) -> Iterator[Room]:
        """Every room on the grid, floor by floor, left to right."""
        for row in self._grid:
            for room in row:
                if room is not None:
                    yield room

    def __len__(self) -> int:
        return len(self._rooms)

    # -- connections ---------------------------------------------------------

    @property
    def connections(self) -> list[Connection]:
        """All connections ever added, in insertion order."""
        return list(self._connections)

    def add_connection(
        self, room_a: Room, room_b: Room, label: str | None = None,
    ) -> Connection:
        """Create an undirected edge from *room_a* to *room_b*."""
        if room_a is room_b:
            raise SelfConnectionError(f"Cannot connect {room_a!r} to itself")
        connection = Connection(room_a, room_b, label)
        self._connections.append(connection)
        self._by_room.setdefault(room_a, []).append(connection)
        self._by_room.setdefault(room_b, []).append(connection)
        return connection

    def connections_of(self, room: Room) -> Iterator[Connection]:
        """Lazily yield the connections touching *room*, oldest first."""
        yield from self._by_room.get(room, ())

    def connected_rooms(self, room: Room) -> set[Room]:
        """Rooms exactly one connection away from *room*."""
        return {c.other(room) for c in self.connections_of(room)}

    def has_connections(self, room: Room) -> bool:
        return bool(self._by_room.get(room))
