"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and domain/db layers (lower) use the model(s) defined here to send to/receive from the Service.
"""

from dataclasses import dataclass

PlayerName = str


@dataclass
class GameModel:
    """Transport-safe representation of a tennis game used between API, Service, DB, and Game layers."""

    player_a: PlayerName
    player_b: PlayerName
    points_a: int
    points_b: int
    status: str
