from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml

from tictactoe.core import DEFAULT_BOARD_SIZE


@dataclass
class SessionConfig:
    board_size: int = DEFAULT_BOARD_SIZE
    board_sizes: Tuple[int, ...] = (3, 4, 5)
    state_file: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.board_sizes = tuple(int(size) for size in self.board_sizes)
        if self.board_size not in self.board_sizes:
            raise ValueError(
                f"board_size {self.board_size} is not one of the allowed sizes {self.board_sizes}."
            )
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log_level: {self.log_level!r}")


def load_config(path: Optional[Union[str, Path]] = None, **overrides) -> SessionConfig:
    """Read a YAML config file; values in ``overrides`` that are not None win."""
    cfg = {}
    if path is not None:
        cfg_path = Path(path)
        if cfg_path.exists():
            cfg = yaml.safe_load(cfg_path.read_text()) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {path} must contain a mapping.")

    known = {f.name for f in fields(SessionConfig)}
    unknown = set(cfg) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    for key, value in overrides.items():
        if value is not None:
            cfg[key] = value
    return SessionConfig(**cfg)
