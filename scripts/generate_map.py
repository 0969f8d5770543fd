"""Generate a dungeon map and print it.

Usage:
    uv run python scripts/generate_map.py [--seed 42] [--json] [--resume snapshot.json]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tenebra.core.rng import GameRNG
from tenebra.dungeon import DungeonMap, MapConfig, MapGenerator, MapSnapshot, RoomType

_SYMBOLS = {
    RoomType.NONE: "?",
    RoomType.MONSTER: "M",
    RoomType.EVENT: "E",
    RoomType.ELITE_MONSTER: "X",
    RoomType.REST_SITE: "R",
    RoomType.MERCHANT: "$",
    RoomType.TREASURE: "T",
    RoomType.BOSS: "B",
}


def render(dungeon_map: DungeonMap) -> str:
    """Text grid with the boss floor on top."""
    config = dungeon_map.config
    lines = []
    for y in range(config.boss_floor, -1, -1):
        cells = []
        for x in range(config.width):
            room = dungeon_map.room_at(x, y)
            cells.append(_SYMBOLS[room.room_type] if room is not None else ".")
        lines.append(f"{y:>3} " + " ".join(cells))
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a dungeon map")
    parser.add_argument("--seed", type=int, default=42, help="Master seed")
    parser.add_argument("--width", type=int, default=7)
    parser.add_argument("--height", type=int, default=16)
    parser.add_argument("--min-paths", type=int, default=3)
    parser.add_argument("--max-paths", type=int, default=4)
    parser.add_argument("--resume", type=str, default=None, help="Snapshot JSON to resume from")
    parser.add_argument("--json", action="store_true", help="Print the snapshot JSON instead of the grid")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    records = None
    if args.resume:
        # The saved grid size wins over --width/--height.
        snapshot = MapSnapshot.from_json(Path(args.resume).read_text())
        config = snapshot.config()
        records = snapshot.resume_records()
    else:
        config = MapConfig(
            width=args.width,
            height=args.height,
            min_paths=args.min_paths,
            max_paths=args.max_paths,
        )

    rng = GameRNG(args.seed).fork("map")
    dungeon_map = MapGenerator(config).generate(rng, resume=records)

    if args.json:
        print(MapSnapshot.from_map(dungeon_map).to_json())
        return

    print(render(dungeon_map))
    print()
    print(
        f"{len(dungeon_map.remaining_rooms)} rooms, "
        f"{len(dungeon_map.remaining_connections)} connections"
    )


if __name__ == "__main__":
    main()
