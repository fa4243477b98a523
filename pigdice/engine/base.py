"""
Pig Dice - Game Engine Base Classes

This module defines the foundational data structures, enums and constants
used throughout the game engine. Records are frozen dataclasses; the engine
replaces them rather than mutating them in place.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, auto


WIN_THRESHOLD = 100
BUST_VALUE = 1
DIE_SIDES = 6
DEFAULT_NUM_PLAYERS = 2


class TurnOutcome(Enum):
    """Terminal states of a turn."""
    HELD = auto()
    BUSTED = auto()


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a single die roll.

    Attributes:
        value: Face shown on the die
    """
    value: int

    def __post_init__(self) -> None:
        """Validate the face is within valid range."""
        if not (1 <= self.value <= DIE_SIDES):
            raise ValueError(
                f"Invalid die value {self.value}. "
                f"Must be between 1 and {DIE_SIDES}."
            )


@dataclass(frozen=True)
class Player:
    """
    A named player and their banked score.

    Attributes:
        name: Display name, never empty
        score: Banked points, never negative
    """
    name: str
    score: int = 0

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Player name cannot be empty.")
        if self.score < 0:
            raise ValueError(f"Score cannot be negative, got {self.score}.")

    @property
    def has_won(self) -> bool:
        """True once the banked score reaches the win threshold."""
        return self.score >= WIN_THRESHOLD

    def add_points(self, points: int) -> "Player":
        """Return a copy of this player with points banked."""
        if points < 0:
            raise ValueError(f"Cannot bank negative points, got {points}.")
        return replace(self, score=self.score + points)

    def reset(self) -> "Player":
        """Return a copy of this player with a zero score."""
        return replace(self, score=0)


@dataclass(frozen=True)
class TurnResult:
    """
    Outcome of a single completed turn.

    Attributes:
        player_index: Index of the acting player
        outcome: HELD or BUSTED
        turn_total: Points banked by this turn (0 on bust)
        rolls: Every die value rolled during the turn, in order
    """
    player_index: int
    outcome: TurnOutcome
    turn_total: int
    rolls: tuple[int, ...] = field(default_factory=tuple)

    @property
    def is_bust(self) -> bool:
        return self.outcome is TurnOutcome.BUSTED


@dataclass(frozen=True)
class GameResult:
    """
    Final state of a finished game.

    Attributes:
        winner_index: Index of the player who crossed the win threshold
        players: Player records as they stood when the game ended
        turns: Every completed turn, in play order
    """
    winner_index: int
    players: tuple[Player, ...]
    turns: tuple[TurnResult, ...] = field(default_factory=tuple)

    @property
    def winner(self) -> Player:
        return self.players[self.winner_index]
