"""Shared fixtures for dungeon tests."""

from __future__ import annotations

from typing import Callable

import pytest

from tenebra.core.rng import GameRNG
from tenebra.dungeon.config import MapConfig
from tenebra.dungeon.generator import DungeonMap, MapGenerator
from tenebra.dungeon.graph import RoomGraph
from tenebra.dungeon.rooms import Room


class ScriptedRNG:
    """Stand-in RNG that replays a fixed list of ``random_below`` draws."""

    def __init__(self, draws: list[int]) -> None:
        self._draws = list(draws)

    @property
    def exhausted(self) -> bool:
        return not self._draws

    def random_below(self, n: int) -> int:
        draw = self._draws.pop(0)
        assert 0 <= draw < n
        return draw


@pytest.fixture
def make_map() -> Callable[..., DungeonMap]:
    """Factory: ``make_map(seed, **config_overrides)`` -> fresh DungeonMap."""

    def _make(seed: int = 42, **config_kwargs) -> DungeonMap:
        return MapGenerator(MapConfig(**config_kwargs)).generate(GameRNG(seed))

    return _make


@pytest.fixture
def add_rooms() -> Callable[..., list[Room]]:
    """Factory: ``add_rooms(graph, (x, y), ...)`` inserts and returns rooms."""

    def _add(graph: RoomGraph, *coords: tuple[int, int]) -> list[Room]:
        rooms = [Room.at(x, y, graph.width) for x, y in coords]
        for room in rooms:
            graph.add_room(room)
        return rooms

    return _add


@pytest.fixture
def scripted_rng() -> Callable[[list[int]], ScriptedRNG]:
    return ScriptedRNG
