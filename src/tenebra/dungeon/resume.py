"""Rebuilding a map from a persisted room list.

Resumed rooms are put back at their saved coordinates, keep their saved
type (or roll a fresh one if none was saved), and are then connected to
every other resumed room.  The path layout of the saved map is not restored.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Iterable

from tenebra.dungeon.config import MapConfig
from tenebra.dungeon.graph import RoomGraph
from tenebra.dungeon.persistence import RoomRecord
from tenebra.dungeon.room_types import RoomTypeAssigner
from tenebra.dungeon.rooms import Room
from tenebra.errors import DuplicateRoomError, InvalidRoomNameFormat

logger = logging.getLogger(__name__)


class GraphResumer:
    """Reinserts persisted rooms into an empty graph.

    Parameters
    ----------
    graph:
        Empty graph sized for *config*.
    config:
        Grid dimensions of the map being resumed.
    assigner:
        Supplies weighted draws for rooms saved without a type.
    """

    def __init__(
        self,
        graph: RoomGraph,
        config: MapConfig,
        assigner: RoomTypeAssigner,
    ) -> None:
        self.graph = graph
        self.config = config
        self.assigner = assigner
        self.skipped: list[str] = []

    def resume(self, records: Iterable[RoomRecord]) -> list[Room]:
        """Reinsert *records* and mesh-connect them; return the resumed rooms."""
        rooms: list[Room] = []
        for record in records:
            room = self._restore(record)
            if room is not None:
                rooms.append(room)

        for room_a, room_b in combinations(rooms, 2):
            self.graph.add_connection(room_a, room_b)

        logger.info(
            "Resumed %d rooms (%d skipped)", len(rooms), len(self.skipped),
        )
        return rooms

    def _restore(self, record: RoomRecord) -> Room | None:
        try:
            x, y = record.coordinates()
        except InvalidRoomNameFormat as exc:
            logger.error("Skipping persisted room: %s", exc)
            self.skipped.append(record.name)
            return None

        if not self.graph.in_bounds(x, y):
            logger.warning(
                "Skipping persisted room %s: (%d, %d) is outside the grid",
                record.name, x, y,
            )
            self.skipped.append(record.name)
            return None

        room = Room.at(x, y, self.config.width, room_type=record.room_type)
        try:
            self.graph.add_room(room)
        except DuplicateRoomError as exc:
            logger.warning("Skipping persisted room %s: %s", record.name, exc)
            self.skipped.append(record.name)
            return None

        if not room.is_assigned:
            room.room_type = self.assigner.random_room_type(y)
        return room
