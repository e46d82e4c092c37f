"""N x N tic-tac-toe engine."""

from . import core, session
from .config import SessionConfig, load_config
from .core import (
    DEFAULT_BOARD_SIZE,
    GameEngine,
    GameError,
    GameOver,
    GameSnapshot,
    GameStatus,
    InvalidPosition,
    Player,
    PositionTaken,
    SnapshotError,
)
from .session import GameSession, SnapshotStore

__all__ = [
    "core",
    "session",
    "DEFAULT_BOARD_SIZE",
    "GameEngine",
    "GameError",
    "GameOver",
    "GameSnapshot",
    "GameStatus",
    "InvalidPosition",
    "Player",
    "PositionTaken",
    "SnapshotError",
    "GameSession",
    "SnapshotStore",
    "SessionConfig",
    "load_config",
]
