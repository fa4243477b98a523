"""
Pig Dice Game Engine.

Pure Python game logic with zero console dependencies.
Handles dice rolling, bust detection, turn sequencing and win detection.
"""

from pigdice.engine.base import (
    BUST_VALUE,
    DIE_SIDES,
    WIN_THRESHOLD,
    DiceRoll,
    GameResult,
    Player,
    TurnOutcome,
    TurnResult,
)
from pigdice.engine.dice import DiceSource, RandomDice, ScriptedDice
from pigdice.engine.events import EventPayload, GameEvent
from pigdice.engine.game import PigGame
from pigdice.engine.pig import PigEngine

__all__ = [
    # Constants
    "BUST_VALUE",
    "DIE_SIDES",
    "WIN_THRESHOLD",
    # Data Classes
    "DiceRoll",
    "Player",
    "TurnResult",
    "GameResult",
    "EventPayload",
    # Enums
    "TurnOutcome",
    "GameEvent",
    # Dice
    "DiceSource",
    "RandomDice",
    "ScriptedDice",
    # Engines
    "PigEngine",
    "PigGame",
]
