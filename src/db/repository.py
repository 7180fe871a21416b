"""Protocol repository: keyed storage of games. Implemented in memory and with SQLAlchemy."""

from typing import Protocol

from src.tennis.game import Scorable


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get(self, game_id: str) -> Scorable | None:
        """Get game by ID, if record exists."""
        ...

    def save(self, game_id: str, game: Scorable) -> None:
        """Store a game under the given ID (replacing whatever was stored there)."""
        ...

    def delete(self, game_id: str) -> bool:
        """Remove a game's record. False if there was nothing to remove."""
        ...

    def list_ids(self) -> list[str]:
        """IDs of all stored games."""
        ...
