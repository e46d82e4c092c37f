from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import SnapshotError

DEFAULT_BOARD_SIZE = 3


class Player(IntEnum):
    X = 1
    O = 2

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    @classmethod
    def from_mark(cls, value: Any) -> Optional["Player"]:
        """Parse a mark; returns None for anything that is not X or O."""
        if isinstance(value, Player):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameSnapshot:
    board: Mapping[str, Any] = field(default_factory=dict)  # "row,col" -> Player
    current_player: Player = Player.X
    winner: Optional[Player] = None
    is_draw: bool = False
    size: int = DEFAULT_BOARD_SIZE

    def to_dict(self) -> Dict[str, Any]:
        board: Dict[str, Any] = {}
        for key, value in self.board.items():
            mark = Player.from_mark(value)
            board[key] = mark.name if mark is not None else value
        return {
            "board": board,
            "current_player": self.current_player.name,
            "winner": self.winner.name if self.winner is not None else None,
            "is_draw": self.is_draw,
            "size": self.size,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameSnapshot":
        if not isinstance(data, Mapping):
            raise SnapshotError("snapshot document must be a mapping")

        board = data.get("board", {})
        if not isinstance(board, Mapping):
            raise SnapshotError("snapshot board must be a mapping")
        # Entries are kept as-is; restore() drops the ones it cannot use.
        parsed_board = {}
        for key, value in board.items():
            mark = Player.from_mark(value)
            parsed_board[key] = mark if mark is not None else value

        current_player = Player.from_mark(data.get("current_player", Player.X))
        if current_player is None:
            raise SnapshotError(f"invalid current_player: {data.get('current_player')!r}")

        raw_winner = data.get("winner")
        winner = None
        if raw_winner is not None:
            winner = Player.from_mark(raw_winner)
            if winner is None:
                raise SnapshotError(f"invalid winner: {raw_winner!r}")

        is_draw = data.get("is_draw", False)
        if not isinstance(is_draw, bool):
            raise SnapshotError(f"invalid is_draw: {is_draw!r}")

        size = data.get("size", DEFAULT_BOARD_SIZE)
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise SnapshotError(f"invalid size: {size!r}")

        return cls(
            board=parsed_board,
            current_player=current_player,
            winner=winner,
            is_draw=is_draw,
            size=size,
        )


# Convenient tuple alias used across modules
Position = Tuple[int, int]
