from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Optional

from ...engine.game import Game


logger = logging.getLogger(__name__)


class InMemorySessionStore:
    """Thread-safe in-memory store of games keyed by ``game_id``.

    Games live only as long as the process; nothing is persisted.
    """

    def __init__(self, first_turn: Optional[str] = None) -> None:
        self._lock = threading.RLock()
        self._games: Dict[str, Game] = {}
        self._first_turn = first_turn

    def create(self, game: Optional[Game] = None) -> str:
        """Store ``game`` (default: a new game) and return its id."""
        gid = str(uuid.uuid4())
        if game is None:
            game = Game.new(self._first_turn) if self._first_turn else Game.new()
        with self._lock:
            self._games[gid] = game
        logger.info("game created", extra={"game_id": gid, "turn": game.turn})
        return gid

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            return self._games.get(game_id)

    def set(self, game_id: str, game: Game) -> None:
        with self._lock:
            if game_id not in self._games:
                raise KeyError(game_id)
            self._games[game_id] = game

    def delete(self, game_id: str) -> bool:
        with self._lock:
            removed = self._games.pop(game_id, None) is not None
        if removed:
            logger.info("game deleted", extra={"game_id": game_id})
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
