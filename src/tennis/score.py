"""
Derivation of the state of a single tennis game from the two point counters.

classify() is the only place where the scoring rules live. Everything else (the Game, the service, the console)
asks it for a GameState and renders that.
"""

from dataclasses import dataclass
from enum import StrEnum

from src.core.shared_types import GameStatus, Side

# A side needs at least this many points, and a lead of WIN_MARGIN, to win the game
POINTS_TO_WIN = 4
WIN_MARGIN = 2
# From this many points on (for both sides), the score is called as deuce/advantage
DEUCE_THRESHOLD = 3

# Separates the two labels, e.g. "30–15"
SCORE_SEPARATOR = "–"


class ScoreLabel(StrEnum):
    LOVE = "love"
    FIFTEEN = "15"
    THIRTY = "30"
    FORTY = "40"


# Indexed by min(points, 3)
SCORE_LABELS: tuple[ScoreLabel, ...] = tuple(ScoreLabel)


def score_label(points: int) -> ScoreLabel:
    return SCORE_LABELS[min(points, len(SCORE_LABELS) - 1)]


# --- GameState variants ---
@dataclass(frozen=True)
class InProgress:
    label_a: ScoreLabel
    label_b: ScoreLabel
    kind = GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class Deuce:
    kind = GameStatus.DEUCE


@dataclass(frozen=True)
class Advantage:
    leader: Side
    kind = GameStatus.ADVANTAGE


@dataclass(frozen=True)
class Won:
    winner: Side
    kind = GameStatus.WON


GameState = InProgress | Deuce | Advantage | Won


def classify(points_a: int, points_b: int) -> GameState:
    """
    Map a pair of point counts onto exactly one GameState.
    ----
    Order matters:
    1. a side with >= 4 points and a lead of >= 2 has won (checked before anything else)
    2. both sides on >= 3 points: deuce when level, otherwise advantage to the side one point ahead
    3. anything else is a regular score, labels capped at 40
    """
    if points_a < 0 or points_b < 0:
        raise ValueError(f"Point counts cannot be negative: ({points_a}, {points_b})")

    if (
        max(points_a, points_b) >= POINTS_TO_WIN
        and abs(points_a - points_b) >= WIN_MARGIN
    ):
        return Won(winner=Side.A if points_a > points_b else Side.B)

    if points_a >= DEUCE_THRESHOLD and points_b >= DEUCE_THRESHOLD:
        if points_a == points_b:
            return Deuce()
        # NOTE: a gap of 2 or more cannot get here, as it would have been a win
        return Advantage(leader=Side.A if points_a > points_b else Side.B)

    return InProgress(label_a=score_label(points_a), label_b=score_label(points_b))


def format_labels(label_a: ScoreLabel, label_b: ScoreLabel) -> str:
    return f"{label_a}{SCORE_SEPARATOR}{label_b}"


def render_state(state: GameState, names: dict[Side, str]) -> str:
    """Human readable version of a GameState. Player names are only needed for advantage / won."""
    match state:
        case InProgress(label_a=label_a, label_b=label_b):
            return format_labels(label_a, label_b)
        case Deuce():
            return "Deuce"
        case Advantage(leader=leader):
            return f"Advantage {names[leader]}"
        case Won(winner=winner):
            return f"{names[winner]} wins"
    raise TypeError(f"Not a game state: {state!r}")
