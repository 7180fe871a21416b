"""Implementation of (Game)Repository using SQLAlchemy"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.logging import get_logger
from src.core.models import GameModel
from src.db.schema import DBGame
from src.tennis.game import Scorable, TennisGame

logger = get_logger("db.sql")


class SQLGameRepository:
    """
    Data stored using SQL / methods implemented using SQLAlchemy.
    NOTE: get() rebuilds a fresh TennisGame from the stored record, so changes to it only persist after save().
    """

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get(self, game_id: str) -> TennisGame | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return TennisGame.from_model(self._to_model(game_db))
        return None

    def save(self, game_id: str, game: Scorable) -> None:
        """Insert a new record or overwrite the existing one."""
        model = self._game_to_model(game)
        game_db = self._fetch_game(game_id)
        if game_db is None:
            game_db = DBGame(id=game_id)
            self.db.add(game_db)
        game_db.player_a = model.player_a
        game_db.player_b = model.player_b
        game_db.points_a = model.points_a
        game_db.points_b = model.points_b
        game_db.status = model.status
        self.db.commit()
        logger.debug("Saved game %s (%s)", game_id, model.status)

    def delete(self, game_id: str) -> bool:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return False
        self.db.delete(game_db)
        self.db.commit()
        logger.debug("Deleted game %s", game_id)
        return True

    def list_ids(self) -> list[str]:
        return list(self.db.scalars(select(DBGame.id).order_by(DBGame.created_at)))

    def get_model(self, game_id: str) -> GameModel | None:
        """Stored data only, without building a game."""
        game_db = self._fetch_game(game_id)
        return self._to_model(game_db) if game_db else None

    def _fetch_game(self, game_id: str) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _game_to_model(self, game: Scorable) -> GameModel:
        if isinstance(game, TennisGame):
            return game.to_model()
        raise TypeError(f"Cannot store {type(game).__name__} in the database")

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            player_a=game_db.player_a,
            player_b=game_db.player_b,
            points_a=game_db.points_a,
            points_b=game_db.points_b,
            status=game_db.status,
        )
