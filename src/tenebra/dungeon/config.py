"""Validated configuration for map generation.

Fixed floors are expressed relative to ``height`` instead of as absolute
floor numbers, so a taller or shorter map keeps its treasure room halfway
up and its rest site right below the boss.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator, model_validator


class MapConfig(BaseModel):
    """Grid dimensions and path counts for one map.

    The defaults produce the classic 7-wide, 16-floor map with 3-4 paths,
    a treasure floor at 8 and a rest floor at 15.
    """

    width: int = 7
    """Number of columns."""

    height: int = 16
    """Number of walkable floors; the boss sits on floor ``height``."""

    min_paths: int = 3
    """Fewest distinct start rooms on floor 0 (inclusive)."""

    max_paths: int = 4
    """Most distinct start rooms on floor 0 (inclusive)."""

    treasure_floor: int | None = None
    """Floor stamped with treasure rooms.  None means ``height // 2``."""

    rest_floor: int | None = None
    """Floor stamped with rest sites.  None means ``height - 1``."""

    elite_min_floor: int = 5
    """Lowest floor on which elites and rest sites may be rolled."""

    @field_validator("width", "min_paths", "max_paths")
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("height")
    @classmethod
    def _validate_height(cls, v: int) -> int:
        if v < 2:
            raise ValueError("height must be at least 2")
        return v

    @model_validator(mode="after")
    def _validate_layout(self) -> "MapConfig":
        if self.min_paths > self.max_paths:
            raise ValueError(
                f"min_paths ({self.min_paths}) exceeds max_paths ({self.max_paths})"
            )
        # Start rooms are distinct cells of floor 0.
        if self.max_paths > self.width:
            raise ValueError(
                f"max_paths ({self.max_paths}) exceeds width ({self.width})"
            )
        for name in ("treasure_floor", "rest_floor"):
            floor = getattr(self, name)
            if floor is not None and not 0 <= floor < self.height:
                raise ValueError(f"{name} {floor} is outside floors 0..{self.height - 1}")
        return self

    # -- derived floors ------------------------------------------------------

    @property
    def boss_floor(self) -> int:
        return self.height

    @property
    def penultimate_floor(self) -> int:
        return self.height - 1

    @property
    def boss_x(self) -> int:
        return self.width // 2

    @property
    def resolved_treasure_floor(self) -> int:
        if self.treasure_floor is not None:
            return self.treasure_floor
        return self.height // 2

    @property
    def resolved_rest_floor(self) -> int:
        if self.rest_floor is not None:
            return self.rest_floor
        return self.penultimate_floor
