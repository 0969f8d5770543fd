"""Dungeon module -- map graph, generation, resume and navigation."""

from tenebra.dungeon.config import MapConfig
from tenebra.dungeon.generator import DungeonMap, MapGenerator
from tenebra.dungeon.graph import RoomGraph
from tenebra.dungeon.navigation import MapNavigator
from tenebra.dungeon.persistence import ConnectionRecord, MapSnapshot, RoomRecord
from tenebra.dungeon.rooms import (
    Connection,
    Room,
    RoomType,
    decode_room_name,
    room_name,
)

__all__ = [
    # config
    "MapConfig",
    # rooms
    "Room",
    "RoomType",
    "Connection",
    "room_name",
    "decode_room_name",
    # graph
    "RoomGraph",
    # generation
    "MapGenerator",
    "DungeonMap",
    # navigation
    "MapNavigator",
    # persistence
    "RoomRecord",
    "ConnectionRecord",
    "MapSnapshot",
]
