from __future__ import annotations

import logging
from typing import Optional

from tictactoe.core import DEFAULT_BOARD_SIZE, GameEngine, GameSnapshot

logger = logging.getLogger(__name__)


class GameSession:
    """Holds the single live engine and swaps it out on reset or load."""

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        self._game = GameEngine(size=size)

    @property
    def game(self) -> GameEngine:
        return self._game

    def replace(self, game: GameEngine) -> None:
        self._game = game

    def reset(self, size: Optional[int] = None) -> GameEngine:
        board_size = self._game.size if size is None else size
        self.replace(GameEngine(size=board_size))
        logger.info("Started a new %dx%d game.", board_size, board_size)
        return self._game

    def load(self, snapshot: Optional[GameSnapshot]) -> GameEngine:
        if snapshot is not None:
            self.replace(GameEngine(size=snapshot.size, initial_snapshot=snapshot))
            logger.info(
                "Restored a %dx%d game (%s, %s to move).",
                snapshot.size,
                snapshot.size,
                self._game.status.value,
                self._game.current_player.name,
            )
        return self._game

    def snapshot(self) -> GameSnapshot:
        return self._game.get_snapshot()

    def play(self, row: int, col: int) -> None:
        self._game.play(row, col)

    def forfeit(self) -> None:
        self._game.forfeit()
