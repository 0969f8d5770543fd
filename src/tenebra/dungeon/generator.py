"""Map generator: the entry point that ties the generation passes together.

Fresh map:
1. Build the grid and walk 3-4 random paths from floor 0 to the boss cell.
2. Stamp fixed floors and roll every other room's type.
3. Prune rooms that no path uses.
4. Allocate the boss room.

Resumed map:
1. Reinsert the persisted rooms and connect each pair of them.
2. Prune, then allocate the boss room, exactly as for a fresh map.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from tenebra.core.rng import GameRNG
from tenebra.dungeon.boss import allocate_boss_room
from tenebra.dungeon.builder import GraphBuilder
from tenebra.dungeon.config import MapConfig
from tenebra.dungeon.graph import RoomGraph
from tenebra.dungeon.navigation import MapNavigator
from tenebra.dungeon.persistence import RoomRecord
from tenebra.dungeon.pruner import ConnectivityPruner
from tenebra.dungeon.resume import GraphResumer
from tenebra.dungeon.room_types import RoomTypeAssigner
from tenebra.dungeon.rooms import Connection, Room

logger = logging.getLogger(__name__)


@dataclass
class DungeonMap:
    """The result of one generation pass.

    Attributes
    ----------
    config:
        The configuration the map was generated with.
    graph:
        Final grid and every connection ever created (including ones that
        lead to pruned rooms).
    remaining_rooms:
        Rooms that survived pruning, in grid scan order, boss included.
        This is the persistence payload.
    remaining_connections:
        Connections whose two rooms are both still on the grid, in creation
        order.
    boss_room:
        The single boss room.
    start_rooms:
        Floor-0 rooms the random walks started from (empty when resumed).
    resumed:
        True if the map was rebuilt from a persisted room list.
    skipped:
        Names of persisted rooms that could not be restored.
    """

    config: MapConfig
    graph: RoomGraph
    remaining_rooms: list[Room]
    remaining_connections: list[Connection]
    boss_room: Room
    start_rooms: list[Room] = field(default_factory=list)
    resumed: bool = False
    skipped: list[str] = field(default_factory=list)

    def grid_mapping(self) -> dict[tuple[int, int], Room]:
        """Sparse ``(x, y) -> Room`` view of the final grid."""
        return {(room.x, room.y): room for room in self.graph.rooms()}

    def room_at(self, x: int, y: int) -> Room | None:
        return self.graph.room_at(x, y)

    def navigator(self) -> MapNavigator:
        """Fresh navigation state with every floor-0 room clickable."""
        return MapNavigator(self.graph)


class MapGenerator:
    """Generates a floor-layered map with a single boss room on top."""

    def __init__(self, config: MapConfig | None = None) -> None:
        self.config = config or MapConfig()

    def generate(
        self,
        rng: GameRNG,
        resume: Iterable[RoomRecord] | None = None,
    ) -> DungeonMap:
        """Run a full generation pass.

        Parameters
        ----------
        rng:
            Random stream for the pass.  The same seed and configuration
            always produce the same map.
        resume:
            Persisted room records from a previous pass.  When empty or
            None a fresh map is generated.
        """
        records = list(resume) if resume is not None else []
        graph = RoomGraph(self.config.width, self.config.height)
        assigner = RoomTypeAssigner(self.config, rng)

        start_rooms: list[Room] = []
        skipped: list[str] = []
        if records:
            resumer = GraphResumer(graph, self.config, assigner)
            resumer.resume(records)
            skipped = resumer.skipped
        else:
            start_rooms = GraphBuilder(graph, self.config, rng).build()
            assigner.assign(graph)

        remaining_rooms = ConnectivityPruner(graph).prune()
        boss = allocate_boss_room(graph, remaining_rooms)

        remaining_connections = [
            c for c in graph.connections
            if graph.contains(c.room_a) and graph.contains(c.room_b)
        ]

        logger.info(
            "Generated %s map: %d rooms, %d connections",
            "resumed" if records else "fresh",
            len(remaining_rooms), len(remaining_connections),
        )
        return DungeonMap(
            config=self.config,
            graph=graph,
            remaining_rooms=remaining_rooms,
            remaining_connections=remaining_connections,
            boss_room=boss,
            start_rooms=start_rooms,
            resumed=bool(records),
            skipped=skipped,
        )
