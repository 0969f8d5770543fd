"""Player progression over a generated map.

The presentation layer keeps its own ``room id -> button`` mapping and asks
the navigator which ids are clickable; it never has to scan its widgets to
find the one that belongs to a room.
"""

from __future__ import annotations

from tenebra.dungeon.graph import RoomGraph
from tenebra.dungeon.rooms import Room
from tenebra.errors import RoomNotClickableError


class MapNavigator:
    """Tracks the current room and which rooms may be entered next.

    At the start of a session every floor-0 room is clickable.  After a
    click the clickable set is exactly the clicked room's neighbours on
    higher floors, and the clicked room becomes the current room.
    """

    def __init__(self, graph: RoomGraph) -> None:
        self.graph = graph
        self.current_room: Room | None = None
        self._clickable: set[int] = {room.id for room in graph.rooms_on_floor(0)}

    def is_clickable(self, room: Room) -> bool:
        return room.id in self._clickable and self.graph.get(room.id) is room

    def is_current(self, room: Room) -> bool:
        return room is self.current_room

    def clickable_ids(self) -> frozenset[int]:
        return frozenset(self._clickable)

    def clickable_rooms(self) -> list[Room]:
        """Clickable rooms in grid scan order."""
        return [room for room in self.graph.rooms() if room.id in self._clickable]

    def click(self, room: Room) -> list[Room]:
        """Enter *room* and return the rooms that become clickable."""
        if not self.is_clickable(room):
            raise RoomNotClickableError(f"{room!r} cannot be entered now")

        self.current_room = room
        self._clickable = {
            neighbour.id
            for neighbour in self.graph.connected_rooms(room)
            if neighbour.y > room.y and self.graph.contains(neighbour)
        }
        return self.clickable_rooms()
