from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .errors import GameOver, InvalidPosition, PositionTaken
from .rules import EMPTY, cell_key, has_winning_line, in_bounds, new_board, parse_cell_key
from .state import DEFAULT_BOARD_SIZE, GameSnapshot, GameStatus, Player, Position

logger = logging.getLogger(__name__)


class GameEngine:
    """State machine for an N x N game of tic-tac-toe.

    The board, the player to move and the terminal flags are only changed by
    :meth:`play`, :meth:`forfeit` and :meth:`restore`. Illegal moves raise a
    :class:`~tictactoe.core.errors.GameError` subclass and leave the state
    untouched.
    """

    def __init__(
        self,
        size: int = DEFAULT_BOARD_SIZE,
        initial_snapshot: Optional[GameSnapshot] = None,
    ) -> None:
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        self._size = size
        self._board = new_board(size)
        self._filled = 0
        self._current_player = Player.X
        self._winner: Optional[Player] = None
        self._is_draw = False

        if initial_snapshot is not None:
            self.restore(initial_snapshot)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self._size

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def is_draw(self) -> bool:
        return self._is_draw

    @property
    def filled_cells(self) -> int:
        return self._filled

    @property
    def is_terminal(self) -> bool:
        return self._winner is not None or self._is_draw

    @property
    def status(self) -> GameStatus:
        if self._winner is not None:
            return GameStatus.WON
        if self._is_draw:
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def get_cell(self, row: int, col: int) -> Optional[Player]:
        """Occupant of a cell; out-of-range coordinates read as empty."""
        if not in_bounds(row, col, self._size):
            return None
        value = int(self._board[row, col])
        return Player(value) if value != EMPTY else None

    def board_array(self) -> np.ndarray:
        return self._board.copy()

    def empty_cells(self) -> List[Position]:
        return [(int(r), int(c)) for r, c in np.argwhere(self._board == EMPTY)]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def play(self, row: int, col: int) -> None:
        self._validate_move(row, col)

        mover = self._current_player
        self._board[row, col] = int(mover)
        self._filled += 1

        if has_winning_line(self._board, mover):
            self._winner = mover
        elif self._filled == self._size * self._size:
            self._is_draw = True
        else:
            self._current_player = mover.opponent

    def forfeit(self) -> None:
        if self.is_terminal:
            raise GameOver()
        self._winner = self._current_player.opponent

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def get_snapshot(self) -> GameSnapshot:
        board = {}
        for row in range(self._size):
            for col in range(self._size):
                value = int(self._board[row, col])
                if value != EMPTY:
                    board[cell_key(row, col)] = Player(value)
        return GameSnapshot(
            board=board,
            current_player=self._current_player,
            winner=self._winner,
            is_draw=self._is_draw,
            size=self._size,
        )

    def restore(self, snapshot: GameSnapshot) -> None:
        """Rebuild the board from ``snapshot``.

        Entries whose key is not an in-range ``"row,col"`` pair or whose value
        is not a mark are skipped. The player to move and the terminal flags
        are taken from the snapshot as-is.
        """
        self._board.fill(EMPTY)
        self._filled = 0

        skipped = 0
        for key, value in snapshot.board.items():
            position = parse_cell_key(key)
            mark = Player.from_mark(value)
            if position is None or mark is None or not in_bounds(*position, self._size):
                skipped += 1
                continue
            row, col = position
            if self._board[row, col] == EMPTY:
                self._filled += 1
            self._board[row, col] = int(mark)

        if skipped:
            logger.warning("Skipped %d malformed board entries while restoring a snapshot.", skipped)

        self._current_player = snapshot.current_player
        self._winner = snapshot.winner
        self._is_draw = snapshot.is_draw

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _validate_move(self, row: int, col: int) -> None:
        if self.is_terminal:
            raise GameOver()
        if not in_bounds(row, col, self._size):
            raise InvalidPosition(row, col, self._size)
        occupant = self.get_cell(row, col)
        if occupant is not None:
            raise PositionTaken(row, col, occupant)

    def render(self) -> str:
        symbols = {EMPTY: ".", int(Player.X): "X", int(Player.O): "O"}
        return "\n".join(
            "".join(symbols[int(cell)] for cell in self._board[r]) for r in range(self._size)
        )

    def __repr__(self) -> str:
        return (
            f"GameEngine(size={self._size}, current={self._current_player.name}, "
            f"status={self.status.value})\n{self.render()}"
        )
