"""Room type assignment.

Fixed floors:
- Floor 0: always monster
- Treasure floor (default ``height // 2``): always treasure
- Rest floor (default ``height - 1``): always rest site

Every other room draws an integer in ``0..99`` and takes the first bucket
whose threshold exceeds the draw:

    draw < 45                      monster
    draw < 67                      event
    draw < 77 and floor >= 5       elite monster
    draw < 89 and floor >= 5       rest site
    draw < 94                      merchant
    otherwise                      treasure

Below the elite floor the two gated buckets are skipped but their range is
not redistributed, so draws 67-88 fall through to the merchant bucket and a
draw of 70 on floor 2 is a merchant.
"""

from __future__ import annotations

import logging

from tenebra.core.rng import GameRNG
from tenebra.dungeon.config import MapConfig
from tenebra.dungeon.graph import RoomGraph
from tenebra.dungeon.rooms import RoomType

logger = logging.getLogger(__name__)

# (exclusive upper bound, room type, gated by elite_min_floor)
_BUCKETS: list[tuple[int, RoomType, bool]] = [
    (45, RoomType.MONSTER, False),
    (67, RoomType.EVENT, False),
    (77, RoomType.ELITE_MONSTER, True),
    (89, RoomType.REST_SITE, True),
    (94, RoomType.MERCHANT, False),
]

DRAW_RANGE = 100


def roll_room_type(draw: int, floor: int, elite_min_floor: int = 5) -> RoomType:
    """Map a ``0..99`` draw on *floor* to a room type."""
    for threshold, room_type, gated in _BUCKETS:
        if draw < threshold and (not gated or floor >= elite_min_floor):
            return room_type
    return RoomType.TREASURE


class RoomTypeAssigner:
    """Stamps fixed floors and fills the remaining rooms by weighted draw."""

    def __init__(self, config: MapConfig, rng: GameRNG) -> None:
        self.config = config
        self.rng = rng

    def fixed_floor_types(self) -> dict[int, RoomType]:
        """Floor -> mandated room type.  Later entries win on collisions."""
        return {
            0: RoomType.MONSTER,
            self.config.resolved_treasure_floor: RoomType.TREASURE,
            self.config.resolved_rest_floor: RoomType.REST_SITE,
        }

    def random_room_type(self, floor: int) -> RoomType:
        draw = self.rng.random_below(DRAW_RANGE)
        return roll_room_type(draw, floor, self.config.elite_min_floor)

    def assign(self, graph: RoomGraph) -> None:
        """Give every room below the boss floor a type.

        Fixed floors are stamped first and override any existing type.
        The remaining unassigned rooms are drawn floor by floor, left to
        right, so the number and order of draws depends only on the grid.
        """
        for floor, room_type in self.fixed_floor_types().items():
            for room in graph.rooms_on_floor(floor):
                room.room_type = room_type

        for floor in range(self.config.height):
            for room in graph.rooms_on_floor(floor):
                if not room.is_assigned:
                    room.room_type = self.random_room_type(floor)
                logger.debug(
                    "Room assigned: %s at (%d, %d) -> %s",
                    room.name, room.x, room.y, room.room_type.value,
                )
