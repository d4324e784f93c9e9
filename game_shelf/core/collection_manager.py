"""
Collection state management with persistence.
"""
import logging
import time
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel

from ..config.settings import Config
from ..models.game import GameRecord
from .data_manager import CollectionImportError, parse_collection, serialize_collection
from .storage import JsonFileStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "games"


class CollectionManager:
    """Owns the game collection and keeps the store in step with it.

    Every mutating call rewrites the full collection under one store key.
    Readers get copies from ``games``; changes go through add, edit,
    delete and replace.
    """

    def __init__(self, store: JsonFileStore, storage_key: str = DEFAULT_STORAGE_KEY):
        self.store = store
        self.storage_key = storage_key
        self._games: List[GameRecord] = []
        self._last_id = 0

    @classmethod
    def from_config(cls, config: Config) -> "CollectionManager":
        """Build a manager over the configured storage directory."""
        return cls(JsonFileStore(config.get_storage_dir()), config.storage.storage_key)

    @property
    def games(self) -> List[GameRecord]:
        """Snapshot of the collection in insertion order."""
        return list(self._games)

    def __len__(self) -> int:
        return len(self._games)

    def has_snapshot(self) -> bool:
        """Check if the store already holds a collection."""
        try:
            return self.store.has_item(self.storage_key)
        except OSError as e:
            logger.error("Error checking store for %s: %s", self.storage_key, e)
            return False

    def load(self) -> List[GameRecord]:
        """Load the collection from the store, or start empty."""
        self._games = []

        try:
            stored = self.store.get_item(self.storage_key)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error loading games: %s", e)
            return self.games

        if stored is None:
            logger.info("No stored collection under %r, starting empty", self.storage_key)
            return self.games

        try:
            self._games = parse_collection(stored)
        except CollectionImportError as e:
            logger.error("Error loading games: %s", e)
            return self.games

        logger.info("Loaded %d games", len(self._games))
        return self.games

    def persist(self) -> bool:
        """Write the whole collection to the store.

        Failures are logged and leave the in-memory collection as it is.
        """
        try:
            self.store.set_item(self.storage_key, serialize_collection(self._games, indent=None))
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error saving games: %s", e)
            return False
        return True

    def _next_id(self) -> str:
        # Millisecond timestamp, bumped so ids from one manager never repeat
        now_ms = int(time.time() * 1000)
        self._last_id = max(now_ms, self._last_id + 1)
        return str(self._last_id)

    def add(self, fields: Union[Mapping[str, Any], BaseModel]) -> GameRecord:
        """Create a game with a fresh id, append it and persist."""
        if isinstance(fields, BaseModel):
            fields = fields.model_dump()
        data = dict(fields)
        data.pop('id', None)

        game = GameRecord.from_loose({**data, "id": self._next_id()})
        self._games.append(game)
        self.persist()
        return game

    def edit(self, updated: GameRecord) -> bool:
        """Replace the game with the same id in place.

        Returns False, without writing, when no game has that id.
        """
        for index, game in enumerate(self._games):
            if game.id == updated.id:
                self._games[index] = updated
                self.persist()
                return True
        return False

    def delete(self, game_id: str) -> bool:
        """Remove the game with game_id; returns False if absent."""
        for index, game in enumerate(self._games):
            if game.id == game_id:
                del self._games[index]
                self.persist()
                return True
        return False

    def replace(self, records: Iterable[Union[GameRecord, Mapping[str, Any]]]) -> None:
        """Discard the collection and substitute records verbatim.

        Mappings are taken as they are; missing fields get their defaults.
        """
        self._games = [
            r if isinstance(r, GameRecord) else GameRecord.from_loose(r)
            for r in records
        ]
        self.persist()

    def get(self, game_id: str) -> Optional[GameRecord]:
        """Look up a game by id."""
        for game in self._games:
            if game.id == game_id:
                return game
        return None
