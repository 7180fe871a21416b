"""Custom exceptions, shared by all layers. Catch GameError to handle anything raised on purpose by this package."""


class GameError(Exception):
    """Base class for all errors raised on purpose."""


class GameStateError(GameError):
    """The game data does not describe a valid tennis game, or the request does not fit its current state."""


class GameAlreadyWonError(GameStateError):
    """A point was awarded after the game had already been decided. The score is left untouched."""

    def __init__(self, winner: str) -> None:
        self.winner = winner
        super().__init__(f"Game has already been won by {winner}")


class RepositoryError(GameError):
    """Something went wrong fetching/storing a game."""


class InvalidRequestError(GameError):
    """Request data that cannot be interpreted."""
