"""In-memory game registry keyed by game code.

One instance is created per Flask app and kept in
``app.extensions['game_store']``; handlers reach it through ``get_store()``.
Games are created lazily and live for the lifetime of the process.
"""
from contextlib import contextmanager
from typing import Dict, Iterator
import threading

from flask import current_app

from quizboard.models import Game


class GameStore:
    def __init__(self):
        self._games: Dict[str, Game] = {}
        self._locks: Dict[str, threading.Lock] = {}
        # Guards the two dicts above, not the games themselves
        self._registry_lock = threading.Lock()

    def __contains__(self, code) -> bool:
        with self._registry_lock:
            return code in self._games

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._games)

    def get_or_create(self, code: str) -> Game:
        with self._registry_lock:
            game = self._games.get(code)
            if game is None:
                game = Game(code=code)
                self._games[code] = game
                self._locks[code] = threading.Lock()
            return game

    def _lock_for(self, code: str) -> threading.Lock:
        self.get_or_create(code)
        with self._registry_lock:
            return self._locks[code]

    @contextmanager
    def locked(self, code: str) -> Iterator[Game]:
        """Yield the game for ``code`` while holding its exclusive lock."""
        lock = self._lock_for(code)
        with lock:
            yield self.get_or_create(code)


def get_store() -> GameStore:
    return current_app.extensions['game_store']
