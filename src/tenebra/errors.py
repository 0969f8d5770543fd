"""Exception hierarchy for the map generator.

``DuplicateRoomError`` and ``InvalidRoomNameFormat`` are recoverable: the
generator aborts the single offending insertion and carries on.
``NoCandidateRoomError`` means the configuration cannot produce a map and
always propagates to the caller.
"""

from __future__ import annotations


class TenebraError(Exception):
    """Base exception for the tenebra package."""


class DuplicateRoomError(TenebraError):
    """Raised when a room is inserted over an id that is already occupied."""

    def __init__(self, room_id: int, x: int, y: int) -> None:
        super().__init__(f"Room id {room_id} at ({x}, {y}) is already occupied")
        self.room_id = room_id
        self.x = x
        self.y = y


class InvalidRoomNameFormat(TenebraError):
    """Raised when a persisted room name does not decode to ``Room_<x>_<y>``."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid room name format: {name!r}")
        self.name = name


class NoCandidateRoomError(TenebraError):
    """Raised when a random walk finds no room on the next floor."""


class SelfConnectionError(TenebraError, ValueError):
    """Raised when a connection would join a room to itself."""


class RoomNotClickableError(TenebraError):
    """Raised when the player selects a room that is not currently reachable."""
