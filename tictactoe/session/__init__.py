from .persistence import SnapshotStore
from .store import GameSession

__all__ = ["GameSession", "SnapshotStore"]
