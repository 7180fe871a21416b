"""
Publish/subscribe of game events.

Handlers are called synchronously, in the order they subscribed, on the thread that publishes.
Nothing is queued or retried: an exception raised by a handler propagates to the publisher.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable

from src.core.shared_types import GameEventType
from src.tennis.score import Advantage, Deuce, GameState, Won


@dataclass(frozen=True)
class GameEvent:
    type: GameEventType
    game_id: str
    score: str
    points: tuple[int, int]


EventHandler = Callable[[GameEvent], None]


def event_type_for(state: GameState) -> GameEventType:
    """Which event to announce after a point, given the state the game ended up in."""
    match state:
        case Won():
            return GameEventType.GAME_WON
        case Deuce():
            return GameEventType.DEUCE
        case Advantage():
            return GameEventType.ADVANTAGE
    return GameEventType.POINT


class EventPublisher:
    def __init__(self) -> None:
        self._handlers: defaultdict[GameEventType, list[EventHandler]] = defaultdict(
            list
        )

    def subscribe(self, event_type: GameEventType, handler: EventHandler) -> None:
        self._handlers[GameEventType(event_type)].append(handler)

    def unsubscribe(self, event_type: GameEventType, handler: EventHandler) -> bool:
        """Remove the first registration of handler. False if it was not subscribed."""
        handlers = self._handlers[GameEventType(event_type)]
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def publish(self, event: GameEvent) -> None:
        # copy: a handler may (un)subscribe while being notified
        for handler in list(self._handlers[event.type]):
            handler(event)
