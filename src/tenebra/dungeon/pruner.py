"""Removal of rooms that no path uses.

The pruner makes one pass over the grid, floor by floor, and judges each
room only by its own connections:

- Penultimate floor: the room must connect to a room on the floor below
  and to a room on the boss floor.
- Any other floor: the room must have at least one connection.

This is not a reachability search.  A room whose only neighbour was pruned
earlier in the pass still counts as connected and survives, and connections
to pruned rooms are left in place rather than rechecked.
"""

from __future__ import annotations

import logging

from tenebra.dungeon.graph import RoomGraph
from tenebra.dungeon.rooms import Room

logger = logging.getLogger(__name__)


class ConnectivityPruner:
    """Single forward scan that drops unconnected rooms from the grid."""

    def __init__(self, graph: RoomGraph) -> None:
        self.graph = graph

    def prune(self) -> list[Room]:
        """Remove failing rooms and return the survivors in scan order."""
        penultimate = self.graph.penultimate_floor
        remaining: list[Room] = []
        removed = 0

        for room in list(self.graph.rooms()):
            if room.y == penultimate:
                keep = self._reaches_both_neighbours(room)
            else:
                keep = self.graph.has_connections(room)

            if keep:
                remaining.append(room)
            else:
                self.graph.remove_room(room)
                removed += 1

        logger.info("Rooms remaining: %d (pruned %d)", len(remaining), removed)
        for room in remaining:
            logger.debug(
                "Remaining room at (%d, %d): %s",
                room.x, room.y, room.room_type.value,
            )
        return remaining

    def _reaches_both_neighbours(self, room: Room) -> bool:
        below = room.y - 1
        boss_floor = self.graph.height
        has_lower = False
        has_boss = False
        for connection in self.graph.connections_of(room):
            floor = connection.other(room).y
            if floor == below:
                has_lower = True
            elif floor == boss_floor:
                has_boss = True
        return has_lower and has_boss
