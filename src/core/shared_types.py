"""
Type definitions used across layers
"""

from enum import StrEnum


class Side(StrEnum):
    A = "A"
    B = "B"


class GameStatus(StrEnum):
    IN_PROGRESS = "in progress"
    DEUCE = "deuce"
    ADVANTAGE = "advantage"
    WON = "won"


class GameEventType(StrEnum):
    POINT = "point"
    ADVANTAGE = "advantage"
    DEUCE = "deuce"
    GAME_WON = "game_won"
