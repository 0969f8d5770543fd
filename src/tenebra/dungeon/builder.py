"""Fresh map construction: populate the grid and walk random paths.

Each start room on floor 0 walks upward one floor at a time, stepping to
one of the (up to) three rooms diagonally-left, straight-up or
diagonally-right of it.  The step off the penultimate floor always lands on
the boss cell.  Walks from different start rooms may merge, which gives the
map its branching shape; every edge climbs exactly one floor, so the graph
cannot contain a cycle.
"""

from __future__ import annotations

import logging

from tenebra.core.rng import GameRNG
from tenebra.dungeon.config import MapConfig
from tenebra.dungeon.graph import RoomGraph
from tenebra.dungeon.rooms import Room
from tenebra.errors import NoCandidateRoomError

logger = logging.getLogger(__name__)

# Horizontal offsets a walk may take when climbing one floor.
_STEP_OFFSETS = (-1, 0, 1)


class GraphBuilder:
    """Generates the floor-layered path graph from scratch.

    Parameters
    ----------
    graph:
        Empty graph to fill.  Must match *config*'s dimensions.
    config:
        Grid dimensions and path counts.
    rng:
        The generation pass's random stream.
    """

    def __init__(self, graph: RoomGraph, config: MapConfig, rng: GameRNG) -> None:
        self.graph = graph
        self.config = config
        self.rng = rng

    def build(self) -> list[Room]:
        """Populate the grid, wire every path and return the start rooms."""
        self.populate()
        start_rooms = self.choose_start_rooms()
        for room in start_rooms:
            self.connect_to_next_floor(room, 0)
        logger.debug(
            "Built %d paths from %s",
            len(start_rooms), [room.name for room in start_rooms],
        )
        return start_rooms

    def populate(self) -> None:
        """Create a room in every walkable cell plus the boss cell."""
        width = self.config.width
        for y in range(self.config.height):
            for x in range(width):
                self.graph.add_room(Room.at(x, y, width))
        self.graph.add_room(
            Room.at(self.config.boss_x, self.config.boss_floor, width),
        )

    def choose_start_rooms(self) -> list[Room]:
        """Pick between ``min_paths`` and ``max_paths`` distinct floor-0 rooms."""
        path_count = self.rng.random_int(self.config.min_paths, self.config.max_paths)
        chosen: list[Room] = []
        while len(chosen) < path_count:
            room = self.graph.room_at(self.rng.random_below(self.config.width), 0)
            if room is not None and room not in chosen:
                chosen.append(room)
        return chosen

    def connect_to_next_floor(self, room: Room, floor: int) -> None:
        """Extend a path from *room* on *floor* up to the boss cell."""
        boss_floor = self.config.boss_floor
        current = room
        while floor < boss_floor:
            next_floor = floor + 1
            if next_floor == boss_floor:
                boss_room = self.graph.room_at(self.config.boss_x, boss_floor)
                if boss_room is None:
                    raise NoCandidateRoomError(
                        f"No boss room at ({self.config.boss_x}, {boss_floor})"
                    )
                self.graph.add_connection(current, boss_room)
                return

            candidates = self._candidates(current, next_floor)
            if not candidates:
                raise NoCandidateRoomError(
                    f"No room on floor {next_floor} next to {current!r}; "
                    f"grid width {self.config.width} is too small"
                )
            next_room = self.rng.random_choice(candidates)
            self.graph.add_connection(current, next_room)
            current = next_room
            floor = next_floor

    def _candidates(self, room: Room, floor: int) -> list[Room]:
        candidates: list[Room] = []
        for dx in _STEP_OFFSETS:
            nx = room.x + dx
            if 0 <= nx < self.config.width:
                candidate = self.graph.room_at(nx, floor)
                if candidate is not None:
                    candidates.append(candidate)
        return candidates
