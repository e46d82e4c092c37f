from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .state import Player


class GameError(ValueError):
    """Base class for moves that are illegal in the current game state."""


class GameOver(GameError):
    def __init__(self, message: str = "The game is already over.") -> None:
        super().__init__(message)


class InvalidPosition(GameError):
    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"Position ({row}, {col}) is outside the {size}x{size} board.")
        self.row = row
        self.col = col
        self.size = size


class PositionTaken(GameError):
    def __init__(self, row: int, col: int, occupant: Optional["Player"] = None) -> None:
        owner = f" by {occupant.name}" if occupant is not None else ""
        super().__init__(f"Position ({row}, {col}) is already taken{owner}.")
        self.row = row
        self.col = col
        self.occupant = occupant


class SnapshotError(ValueError):
    pass
