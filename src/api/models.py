"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameStatus, Side

PlayerName = str

# Console / UI users tend to think of the players as 1 and 2
SIDE_ALIASES: dict[str, Side] = {"1": Side.A, "2": Side.B}


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    player_a: str = "P1"
    player_b: str = "P2"
    game_id: Optional[str] = None

    @field_validator(*["player_a", "player_b"])
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise InvalidRequestError("Player name cannot be empty.")
        return name

    @field_validator("game_id")
    @classmethod
    def validate_game_id(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        game_id = value.strip()
        if not game_id:
            raise InvalidRequestError("Game ID cannot be empty. Leave it out to get one generated.")
        return game_id

    @model_validator(mode="after")
    def validate_distinct_players(self) -> "CreateGameRequest":
        if self.player_a == self.player_b:
            raise InvalidRequestError(
                f"Players need different names, both are called {self.player_a!r}."
            )
        return self


class GameIdRequest(BaseModel):
    game_id: str


class PointRequest(BaseModel):
    game_id: str
    side: Side

    @field_validator("side", mode="before")
    @classmethod
    def validate_side(cls, value: object) -> Side:
        text = str(value).strip().upper()
        if text in SIDE_ALIASES:
            return SIDE_ALIASES[text]
        if text not in Side.__members__:
            raise InvalidRequestError(
                f"Cannot interpret side: {value!r}. Use A/B (or 1/2)."
            )
        return Side(text)


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: str
    players: dict[Side, PlayerName]
    points: tuple[int, int]
    status: GameStatus
    score: str
    winner: Optional[PlayerName] = None
