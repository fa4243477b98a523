"""
Pig Dice - Console Display

Renders the rules text and engine events as the plain-text game protocol.
"""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from pigdice.engine.events import EventPayload, GameEvent


RULES = """
Pig is a simple dice game.

Each turn, a player repeatedly rolls a die until either a 1 is rolled or the
player decides to "hold":

- If the player rolls a 1, they score nothing and it becomes the next player's
  turn.
- If the player rolls any other number, it is added to their turn total and the
  player's turn continues.
- If a player chooses to "hold", their turn total is added to their score, and
  it becomes the next player's turn.

The first player to score 100 or more points wins."""

TURN_SEPARATOR = "=" * 57


class ConsoleDisplay:
    """Event listener that prints game progress to a text stream."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self._handlers: dict[GameEvent, Callable[[EventPayload], None]] = {
            GameEvent.TURN_STARTED: self._turn_started,
            GameEvent.DICE_ROLLED: self._dice_rolled,
            GameEvent.PLAYER_BUST: self._player_bust,
            GameEvent.SCORE_UPDATED: self._score_updated,
            GameEvent.GAME_WON: self._game_won,
        }

    def _print(self, *args: object) -> None:
        print(*args, file=self.out)

    def render_rules(self) -> None:
        self._print(RULES)

    def render_player_name(self, number: int, name: str) -> None:
        self._print(f"Player {number} name is {name}.\n")

    def __call__(self, payload: EventPayload) -> None:
        handler = self._handlers.get(payload.event)
        if handler is not None:
            handler(payload)

    def _turn_started(self, payload: EventPayload) -> None:
        self._print(TURN_SEPARATOR)
        self._print(f"{payload.player_name}'s turn")

    def _dice_rolled(self, payload: EventPayload) -> None:
        data = payload.data
        self._print(
            f"{payload.player_name} rolled a {data['roll']}, "
            f"turn total of {data['turn_total']}, "
            f"potential score of {data['potential_score']}"
        )

    def _player_bust(self, payload: EventPayload) -> None:
        self._print(f"{payload.player_name} rolled a 1 and busted")

    def _score_updated(self, payload: EventPayload) -> None:
        self._print(f"{payload.player_name}'s current score is {payload.data['score']}\n")

    def _game_won(self, payload: EventPayload) -> None:
        self._print(f"{payload.player_name} wins with a score of {payload.data['score']}.")
