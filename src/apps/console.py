"""
Console front end: score a game point by point.

    tennis-console --player-a Ann --player-b Bob

Runs on the application built by build_container(), so TENNIS_DATABASE_URL / TENNIS_DEFAULT_GAME_ID apply:
a default game already stored in the database is resumed (its players are kept).
"""

import argparse
from dataclasses import replace
from typing import Callable, Optional, Sequence

from src.api.models import GameIdRequest, GameResponse, PointRequest
from src.core.config import Settings
from src.core.exceptions import GameAlreadyWonError, GameStateError
from src.core.logging import get_logger
from src.core.shared_types import GameStatus, Side
from src.infra.container import build_container
from src.services.tennis_service import TennisService

logger = get_logger("console")

BORDER = "-" * 32
TITLE = "Tennis Game Score"
QUIT_COMMANDS = ("q", "quit")
RESET_COMMANDS = ("r", "reset")
SIDE_INPUTS: dict[str, Side] = {"1": Side.A, "a": Side.A, "2": Side.B, "b": Side.B}


class TennisConsole:
    """Reads commands, forwards them to the service and prints what it reports. No scoring rules in here."""

    def __init__(
        self,
        service: TennisService,
        game_id: str,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.service = service
        self.game_id = game_id
        self.read = read or input
        self.write = write or print

    def start(self) -> None:
        response = self.service.get_game_state(GameIdRequest(game_id=self.game_id))
        self.show_welcome(response)
        # The score of the final point has already been shown by handle()
        while response.status != GameStatus.WON:
            try:
                answer = self.read("Enter 1 or 2 to score a point, r to reset, q to quit: ")
            except EOFError:
                answer = "q"
            if not self.handle(answer):
                self.write("Thanks for playing!")
                return
            response = self.service.get_game_state(GameIdRequest(game_id=self.game_id))

    def handle(self, answer: str) -> bool:
        """Process one line of input. Returns False when the user wants to stop."""
        command = answer.strip().lower()
        if command in QUIT_COMMANDS:
            return False
        if command in RESET_COMMANDS:
            self.show_score(self.service.reset_game(GameIdRequest(game_id=self.game_id)))
            return True

        side = SIDE_INPUTS.get(command)
        if side is None:
            logger.debug("Rejected input %r", answer)
            self.write("Invalid input. Please enter 1 or 2.")
            return True

        try:
            response = self.service.award_point(
                PointRequest(game_id=self.game_id, side=side)
            )
        except GameAlreadyWonError as exc:
            self.write(f"Error: {exc}")
            return True
        self.show_score(response, side)
        return True

    def show_welcome(self, response: GameResponse) -> None:
        self.write(TITLE)
        self.write(BORDER)
        self.write(f"Current score: {response.score}")
        self.write(f"Enter 1 for {response.players[Side.A]}")
        self.write(f"Enter 2 for {response.players[Side.B]}")
        self.write(BORDER)

    def show_score(
        self, response: GameResponse, last_scorer: Optional[Side] = None
    ) -> None:
        points = dict(zip(Side, response.points))
        self.write(BORDER)
        for side in Side:
            marker = "*" if side == last_scorer else " "
            self.write(f"{marker} {response.players[side]} --- {points[side]}")
        self.write(BORDER)

        if response.status == GameStatus.WON:
            self.write("Game over!")
            self.write(f"Final score: {response.score}")
            return
        self.write(f"Current score: {response.score}")
        if response.status == GameStatus.DEUCE:
            self.write("Deuce! Two points in a row needed.")
        elif response.status == GameStatus.ADVANTAGE:
            self.write("Advantage! Next point could win.")


def parse_args(argv: Optional[Sequence[str]], settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score a tennis game from the console.")
    parser.add_argument("--player-a", default=settings.player_a)
    parser.add_argument("--player-b", default=settings.player_b)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = Settings.from_env()
    args = parse_args(argv, settings)
    settings = replace(settings, player_a=args.player_a, player_b=args.player_b)
    try:
        container = build_container(settings)
    except GameStateError as exc:
        print(f"Error: {exc}")
        return 2
    try:
        TennisConsole(container.service, settings.default_game_id).start()
    finally:
        container.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
