"""
Wiring of the layers. build_container() is called once at start-up by whoever runs the application,
and the caller owns what it returns (nothing here is module level state). Call close() when done.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from src.core.config import Settings
from src.core.logging import configure_logging, get_logger
from src.db.database import make_session_factory
from src.db.memory_repository import InMemoryGameRepository
from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository
from src.events.publisher import EventPublisher
from src.services.tennis_service import TennisService
from src.tennis.game import Scorable, TennisGame

logger = get_logger("container")


@dataclass
class Container:
    """
    game: the default game as it was at start-up.
    NOTE: with a database, later changes made through the service are not reflected in it (re-fetch via the service).
    """

    settings: Settings
    repository: GameRepository
    events: EventPublisher
    service: TennisService
    game: Scorable
    session: Optional[Session] = None

    def close(self) -> None:
        """Release the database session and its connections (no-op for the in-memory repository)."""
        if self.session is None:
            return
        engine = self.session.get_bind()
        self.session.close()
        engine.dispose()
        self.session = None


def build_repository(settings: Settings) -> tuple[GameRepository, Optional[Session]]:
    """The repository, plus the session backing it when settings point to a database."""
    if settings.database_url is None:
        return InMemoryGameRepository(), None
    session_factory = make_session_factory(settings.database_url)
    session = session_factory()
    return SQLGameRepository(session), session


def build_container(settings: Optional[Settings] = None) -> Container:
    """
    Repository + events + service, and the default game under settings.default_game_id.
    ----
    A default game that is already stored (e.g. from an earlier run against the same database) is picked up as is.
    Only when there is none, a new game between settings.player_a and settings.player_b gets stored.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    repository, session = build_repository(settings)
    events = EventPublisher()
    service = TennisService(repository, events)

    game = repository.get(settings.default_game_id)
    if game is None:
        game = TennisGame.new_game(settings.player_a, settings.player_b)
        repository.save(settings.default_game_id, game)
        logger.debug("Stored new default game %s", settings.default_game_id)
    else:
        logger.info(
            "Resuming game %s at %s", settings.default_game_id, game.format_score()
        )
    logger.debug("Container ready (%s)", type(repository).__name__)
    return Container(settings, repository, events, service, game, session)
