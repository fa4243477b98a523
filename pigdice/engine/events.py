"""
Pig Dice - Engine Event Definitions

Event types and payloads emitted by the game engine after every state
transition. Listeners use them for display only; game logic never depends
on them.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    TURN_STARTED = auto()
    DICE_ROLLED = auto()
    PLAYER_BUST = auto()
    TURN_HELD = auto()
    SCORE_UPDATED = auto()
    GAME_WON = auto()


@dataclass
class EventPayload:
    """Wrapper for engine event data."""

    event: GameEvent
    player_index: int | None = None
    player_name: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


EventListener = Callable[[EventPayload], None]


def ignore_event(payload: EventPayload) -> None:
    """Listener that discards every event."""


class EventRecorder:
    """Listener that keeps every payload it receives, in order."""

    def __init__(self) -> None:
        self.payloads: list[EventPayload] = []

    def __call__(self, payload: EventPayload) -> None:
        self.payloads.append(payload)

    @property
    def events(self) -> list[GameEvent]:
        return [p.event for p in self.payloads]

    def of_type(self, event: GameEvent) -> list[EventPayload]:
        return [p for p in self.payloads if p.event is event]
