from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from tictactoe.core import GameSnapshot, SnapshotError

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Keeps one snapshot in a JSON file between process lifetimes."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def save(self, snapshot: GameSnapshot) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(snapshot.to_dict(), indent=2))
        logger.debug("Saved snapshot to %s", self.path)

    def load(self) -> Optional[GameSnapshot]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SnapshotError(f"{self.path} is not valid JSON") from exc
        return GameSnapshot.from_dict(data)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            logger.debug("Removed snapshot file %s", self.path)
