"""Runtime settings, read from environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Self

DEFAULT_PLAYER_A = "P1"
DEFAULT_PLAYER_B = "P2"
DEFAULT_GAME_ID = "game-1"


def _log_level(value: Optional[str]) -> str:
    """Normalize a log level name, defaulting to INFO when unset/empty."""
    level = (value or "INFO").strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _optional(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """
    database_url: SQLAlchemy URL. When None, games are only kept in memory.
    default_game_id: key under which the container stores the game it builds at start-up.
    """

    database_url: Optional[str] = None
    log_level: str = "INFO"
    player_a: str = DEFAULT_PLAYER_A
    player_b: str = DEFAULT_PLAYER_B
    default_game_id: str = DEFAULT_GAME_ID

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> Self:
        env = os.environ if environ is None else environ
        return cls(
            database_url=_optional(env.get("TENNIS_DATABASE_URL")),
            log_level=_log_level(env.get("TENNIS_LOG_LEVEL")),
            player_a=_optional(env.get("TENNIS_PLAYER_A")) or DEFAULT_PLAYER_A,
            player_b=_optional(env.get("TENNIS_PLAYER_B")) or DEFAULT_PLAYER_B,
            default_game_id=_optional(env.get("TENNIS_DEFAULT_GAME_ID"))
            or DEFAULT_GAME_ID,
        )
