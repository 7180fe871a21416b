"""Orchestration of communication from callers (console, API) to business logic, persistence and event layers."""

from uuid import uuid4

from src.api.models import (
    CreateGameRequest,
    GameIdRequest,
    GameResponse,
    PointRequest,
)
from src.core.exceptions import RepositoryError
from src.core.logging import get_logger
from src.core.shared_types import GameEventType
from src.db.repository import GameRepository
from src.events.publisher import EventPublisher, GameEvent, event_type_for
from src.tennis.game import Scorable, TennisGame

logger = get_logger("service")


class TennisService:
    """Orchestration of layers for tennis games."""

    def __init__(self, repository: GameRepository, events: EventPublisher) -> None:
        self.repo = repository
        self.events = events

    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game at love-love and store it."""
        game_id = request.game_id or uuid4().hex
        if self.repo.get(game_id) is not None:
            raise RepositoryError(f"Game with {game_id=} already exists.")

        game = TennisGame.new_game(request.player_a, request.player_b)
        self.repo.save(game_id, game)
        logger.info(
            "Created game %s: %s vs %s", game_id, request.player_a, request.player_b
        )
        return self._create_game_response(game_id, game)

    def award_point(self, request: PointRequest) -> GameResponse:
        """
        Give a point to one side, persist, then announce what happened.
        ----
        GameAlreadyWonError from the domain layer is passed on to the caller untouched (nothing is stored or published).
        """
        game = self._fetch_game(request.game_id)
        game.award_point(request.side)
        self.repo.save(request.game_id, game)

        state = game.current_state()
        event = GameEvent(
            type=event_type_for(state),
            game_id=request.game_id,
            score=game.format_score(),
            points=game.raw_points(),
        )
        if event.type == GameEventType.GAME_WON:
            logger.info("Game %s: %s", request.game_id, event.score)
        else:
            logger.debug("Game %s: point %s, %s", request.game_id, request.side, event.score)
        self.events.publish(event)

        return self._create_game_response(request.game_id, game)

    def reset_game(self, request: GameIdRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        game.reset()
        self.repo.save(request.game_id, game)
        logger.info("Game %s reset", request.game_id)
        return self._create_game_response(request.game_id, game)

    def get_game_state(self, request: GameIdRequest) -> GameResponse:
        """Retrieve current game state."""
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def list_games(self) -> list[str]:
        return self.repo.list_ids()

    def delete_game(self, request: GameIdRequest) -> None:
        if not self.repo.delete(request.game_id):
            raise RepositoryError(f"Game with game_id={request.game_id!r} not found.")
        logger.info("Game %s deleted", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: str, game: Scorable) -> GameResponse:
        """Convert the game's current state into a GameResponse."""
        return GameResponse(
            game_id=game_id,
            players=game.players,
            points=game.raw_points(),
            status=game.current_state().kind,
            score=game.format_score(),
            winner=game.winner,
        )

    def _fetch_game(self, game_id: str) -> Scorable:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get(game_id)
        if game is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game
