#!/usr/bin/env python3
"""Play N x N tic-tac-toe for two players in the console, resuming from a saved snapshot."""

import argparse
import logging
import sys
from typing import Optional

from tictactoe import (
    GameError,
    GameOver,
    GameSession,
    SessionConfig,
    SnapshotError,
    SnapshotStore,
    load_config,
)
from tictactoe.core import GameEngine, GameStatus

logger = logging.getLogger("play_console")

HELP = "Commands: 'row col' to play, f = forfeit, r = new game, size N = new N x N game, q = quit"


def format_board(game: GameEngine) -> str:
    header = "   " + " ".join(str(c) for c in range(game.size))
    rows = [header]
    for r in range(game.size):
        cells = []
        for c in range(game.size):
            player = game.get_cell(r, c)
            cells.append(player.name if player is not None else ".")
        rows.append(f"{r:>2} " + " ".join(cells))
    return "\n".join(rows)


def format_status(game: GameEngine) -> str:
    if game.status == GameStatus.WON:
        return f"{game.winner.name} wins!"
    if game.status == GameStatus.DRAW:
        return "It's a draw."
    return f"{game.current_player.name} to move."


def open_session(config: SessionConfig, store: Optional[SnapshotStore]) -> GameSession:
    session = GameSession(size=config.board_size)
    if store is None:
        return session
    try:
        snapshot = store.load()
    except SnapshotError as exc:
        logger.warning("Ignoring unreadable saved game %s: %s", store.path, exc)
        return session
    session.load(snapshot)
    return session


def handle_input(session: GameSession, raw: str, config: SessionConfig) -> Optional[str]:
    """Apply one line of user input. Returns feedback to show, if any."""
    parts = raw.strip().lower().split()
    if not parts:
        return HELP
    command = parts[0]

    try:
        if command in {"f", "forfeit"}:
            session.forfeit()
            return None
        if command in {"r", "reset"}:
            session.reset()
            return None
        if command == "size":
            if len(parts) != 2 or not parts[1].isdigit():
                return f"Usage: size N (one of {list(config.board_sizes)})"
            size = int(parts[1])
            if size not in config.board_sizes:
                return f"Board size must be one of {list(config.board_sizes)}."
            session.reset(size)
            return None
        if len(parts) == 2:
            try:
                row, col = int(parts[0]), int(parts[1])
            except ValueError:
                return HELP
            session.play(row, col)
            return None
    except GameOver:
        return "The game is over. Press r to start a new one."
    except GameError as exc:
        # Taps on taken or off-board cells are ignored.
        logger.debug("Ignored move: %s", exc)
        return None
    return HELP


def play_interactive(config: SessionConfig) -> None:
    store = SnapshotStore(config.state_file) if config.state_file else None
    session = open_session(config, store)
    print(HELP)

    while True:
        print()
        print(format_board(session.game))
        print(format_status(session.game))
        raw = input("> ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Bye.")
            return
        feedback = handle_input(session, raw, config)
        if feedback:
            print(feedback)
        if store is not None:
            store.save(session.snapshot())


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Play N x N tic-tac-toe in the console.")
    parser.add_argument("--config", type=str, default="configs/console.yaml")
    parser.add_argument("--size", type=int)
    parser.add_argument("--state-file", type=str, help="JSON file used to save and resume the game")
    parser.add_argument("--log-level", type=str)
    args = parser.parse_args(argv)

    try:
        config = load_config(
            args.config,
            board_size=args.size,
            state_file=args.state_file,
            log_level=args.log_level,
        )
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        play_interactive(config)
    except (KeyboardInterrupt, EOFError):
        print()
        sys.exit(0)


if __name__ == "__main__":
    main()
