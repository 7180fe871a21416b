"""Implementation of (Game)Repository using a plain dictionary. Games are kept by identity, nothing is copied."""

from src.core.logging import get_logger
from src.tennis.game import Scorable

logger = get_logger("db.memory")


class InMemoryGameRepository:
    def __init__(self) -> None:
        self._games: dict[str, Scorable] = {}

    def get(self, game_id: str) -> Scorable | None:
        return self._games.get(game_id)

    def save(self, game_id: str, game: Scorable) -> None:
        logger.debug("Saving game %s", game_id)
        self._games[game_id] = game

    def delete(self, game_id: str) -> bool:
        removed = self._games.pop(game_id, None)
        if removed is not None:
            logger.debug("Deleted game %s", game_id)
        return removed is not None

    def list_ids(self) -> list[str]:
        return list(self._games)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._games.clear()
