"""Core game logic for N x N tic-tac-toe."""

from .engine import GameEngine
from .errors import GameError, GameOver, InvalidPosition, PositionTaken, SnapshotError
from .rules import cell_key, has_winning_line, in_bounds, parse_cell_key
from .state import DEFAULT_BOARD_SIZE, GameSnapshot, GameStatus, Player, Position

__all__ = [
    "GameEngine",
    "GameSnapshot",
    "GameStatus",
    "Player",
    "Position",
    "DEFAULT_BOARD_SIZE",
    "GameError",
    "GameOver",
    "InvalidPosition",
    "PositionTaken",
    "SnapshotError",
    "cell_key",
    "has_winning_line",
    "in_bounds",
    "parse_cell_key",
]
