from __future__ import annotations

import re
from typing import Optional

import numpy as np

from .state import Player, Position

EMPTY = 0

_CELL_KEY = re.compile(r"(-?\d+),(-?\d+)")


def new_board(size: int) -> np.ndarray:
    return np.zeros((size, size), dtype=np.int8)


def in_bounds(row: int, col: int, size: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def has_winning_line(board: np.ndarray, player: Player) -> bool:
    """True when any row, column or either full diagonal holds only ``player``."""
    marks = board == int(player)
    if marks.all(axis=1).any():
        return True
    if marks.all(axis=0).any():
        return True
    if np.diagonal(marks).all():
        return True
    return bool(np.diagonal(np.fliplr(marks)).all())


def cell_key(row: int, col: int) -> str:
    return f"{row},{col}"


def parse_cell_key(key: object) -> Optional[Position]:
    if not isinstance(key, str):
        return None
    match = _CELL_KEY.fullmatch(key)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))
