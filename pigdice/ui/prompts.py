"""
Pig Dice - Player Input Prompts

Line-based prompts for player names and hold/roll decisions. Input comes
from an injected line reader so tests can feed canned answers. Read
failures (``OSError``/``EOFError``) and invalid answers are reported and
the prompt is repeated until a valid answer arrives.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, TextIO

from pigdice.engine.base import Player
from pigdice.engine.game import HoldDecider
from pigdice.engine.validators import parse_hold_response, validate_player_name

logger = logging.getLogger(__name__)

LineReader = Callable[[], str]

READ_ERRORS = (OSError, EOFError)


class ConsoleInput:
    """Reads one line at a time from a text stream (stdin by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise EOFError("end of input")
        return line


class ScriptedInput:
    """Replays canned lines; an Exception instance in the script is raised.

    Running past the end raises IndexError rather than a read error so a
    short script fails loudly instead of reprompting forever.
    """

    def __init__(self, lines: Iterable[str | BaseException]) -> None:
        self._lines = list(lines)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._position

    def __call__(self) -> str:
        if self._position >= len(self._lines):
            raise IndexError("Scripted input ran out of lines.")
        line = self._lines[self._position]
        self._position += 1
        if isinstance(line, BaseException):
            raise line
        return line


def get_player_name(number: int, read_line: LineReader, out: TextIO) -> str:
    """Prompt until a non-empty name is entered.

    Args:
        number: One-based player number shown in the prompt
        read_line: Line reader to take the answer from
        out: Stream prompts and messages are written to

    Returns:
        The trimmed player name
    """
    while True:
        out.write(f"Enter name for player {number}: ")
        out.flush()

        try:
            raw = read_line()
        except READ_ERRORS as err:
            logger.warning("Could not read name for player %d: %s", number, err)
            print(f"Could not read player name. Error: {err}", file=out)
            continue

        try:
            return validate_player_name(raw)
        except ValueError as err:
            print(err, file=out)


def ask_hold(read_line: LineReader, out: TextIO) -> bool:
    """Ask whether to hold or roll again; True means hold."""
    while True:
        print("\nWould you like to [h]old or [r]oll?", file=out, flush=True)

        try:
            raw = read_line()
        except READ_ERRORS as err:
            logger.warning("Could not read hold response: %s", err)
            print(f"Could not read response. Error: {err}", file=out)
            print("Please enter h for hold or r for roll", file=out)
            continue

        try:
            return parse_hold_response(raw)
        except ValueError as err:
            print(f"{err}\n", file=out)


def make_hold_decider(read_line: LineReader, out: TextIO) -> HoldDecider:
    """Adapt ask_hold to the engine's (player, turn_total) -> bool contract."""

    def decide(player: Player, turn_total: int) -> bool:
        return ask_hold(read_line, out)

    return decide
