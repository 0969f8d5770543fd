"""Boss room allocation, the last step of every generation pass."""

from __future__ import annotations

import logging

from tenebra.dungeon.graph import RoomGraph
from tenebra.dungeon.rooms import Room, RoomType

logger = logging.getLogger(__name__)


def allocate_boss_room(graph: RoomGraph, remaining_rooms: list[Room]) -> Room:
    """Place a fresh boss room and link the penultimate floor to it.

    Whatever room currently holds the boss cell (the walks' shared end
    point, or a resumed boss) is evicted and its slot in *remaining_rooms*
    is taken over by the new boss.  Every room still on floor ``height - 1``
    is then connected to the boss.
    """
    boss_x = graph.width // 2
    boss_floor = graph.height

    boss = Room.at(boss_x, boss_floor, graph.width, room_type=RoomType.BOSS)

    previous = graph.room_at(boss_x, boss_floor)
    if previous is not None:
        graph.remove_room(previous)
    graph.add_room(boss)

    for i, room in enumerate(remaining_rooms):
        if room is previous:
            remaining_rooms[i] = boss
            break
    else:
        remaining_rooms.append(boss)

    feeders = graph.rooms_on_floor(graph.penultimate_floor)
    for room in feeders:
        graph.add_connection(room, boss)

    logger.debug("Boss room %s linked to %d rooms", boss.name, len(feeders))
    return boss
