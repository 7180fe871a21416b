"""
The TennisGame class is the entrypoint into the domain layer for the service layer.
It holds the point counters of one game and asks src/tennis/score.py what they mean.
"""

import threading
from dataclasses import dataclass, field
from typing import Optional, Protocol, Self

from src.core.exceptions import GameAlreadyWonError, GameStateError
from src.core.models import GameModel
from src.core.shared_types import GameStatus, Side
from src.tennis.score import (
    POINTS_TO_WIN,
    WIN_MARGIN,
    GameState,
    Won,
    classify,
    format_labels,
    render_state,
    score_label,
)


class Scorable(Protocol):
    """What the collaborators (service, console, repositories) need from a game."""

    @property
    def players(self) -> dict[Side, str]:
        """Display names per side."""
        ...

    @property
    def winner(self) -> Optional[str]:
        """Display name of the winner, once there is one."""
        ...

    def award_point(self, side: Side | str) -> None:
        """Give one point to the indicated side."""
        ...

    def current_state(self) -> GameState:
        """Canonical state, derived from the point counters."""
        ...

    def format_score(self) -> str:
        """Human readable score."""
        ...

    def reset(self) -> None:
        """Back to love-love, same players."""
        ...

    def raw_points(self) -> tuple[int, int]:
        """Points of side A and side B."""
        ...


@dataclass
class TennisGame:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    player_a: str = "Player 1"
    player_b: str = "Player 2"
    points_a: int = field(default=0, init=False)
    points_b: int = field(default=0, init=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def __setattr__(self, name: str, value: object) -> None:
        # Names are fixed for the life of the game
        if name in ("player_a", "player_b") and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed once the game exists")
        super().__setattr__(name, value)

    @classmethod
    def new_game(cls, player_a: str, player_b: str) -> Self:
        if player_a == player_b:
            raise GameStateError(f"Both players are called {player_a!r}")
        return cls(player_a, player_b)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a TennisGame from the information the Service layer actually has"""

        points = (model.points_a, model.points_b)
        if min(points) < 0:
            raise GameStateError(f"Point counts cannot be negative: {points}")

        # award_point refuses to go past a win, so the leader can be at most one point beyond the winning line
        leader, trailer = max(points), min(points)
        if leader > max(POINTS_TO_WIN, trailer + WIN_MARGIN):
            raise GameStateError(f"Points {points} cannot be reached in one game")

        game = cls(model.player_a, model.player_b)
        game.points_a, game.points_b = points
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            player_a=self.player_a,
            player_b=self.player_b,
            points_a=self.points_a,
            points_b=self.points_b,
            status=self.current_state().kind.value,
        )

    @property
    def players(self) -> dict[Side, str]:
        return {Side.A: self.player_a, Side.B: self.player_b}

    @property
    def winner(self) -> Optional[str]:
        state = self.current_state()
        if isinstance(state, Won):
            return self.players[state.winner]
        return None

    @property
    def is_over(self) -> bool:
        return self.current_state().kind == GameStatus.WON

    def award_point(self, side: Side | str) -> None:
        """
        Give one point to a side.
        ----
        The won-check and the increment happen under the same lock, so two callers racing for the last point
        cannot both get through.
        """
        side = self._to_side(side)
        with self._lock:
            winner = self.winner
            if winner is not None:
                raise GameAlreadyWonError(winner)
            if side == Side.A:
                self.points_a += 1
            else:
                self.points_b += 1

    def current_state(self) -> GameState:
        return classify(self.points_a, self.points_b)

    def format_score(self) -> str:
        return render_state(self.current_state(), self.players)

    def format_points(self) -> str:
        """The label pair (e.g. "40–40"), without deuce/advantage/winner info."""
        return format_labels(score_label(self.points_a), score_label(self.points_b))

    def reset(self) -> None:
        with self._lock:
            self.points_a = 0
            self.points_b = 0

    def raw_points(self) -> tuple[int, int]:
        return self.points_a, self.points_b

    # --- Internal helpers ---
    @staticmethod
    def _to_side(side: Side | str) -> Side:
        try:
            return Side(str(side).upper())
        except ValueError:
            raise GameStateError(
                f"Unknown side: {side!r}. Pick one from {','.join(Side)}"
            ) from None
