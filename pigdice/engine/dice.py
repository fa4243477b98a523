"""
Pig Dice - Randomness Sources

The engine never touches a global random generator. It is handed a dice
source exposing ``roll(sides)``; production code uses RandomDice, tests and
replays use ScriptedDice.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Iterable, Protocol

from pigdice.engine.validators import validate_sides

logger = logging.getLogger(__name__)


class DiceSource(Protocol):
    """Anything that can roll a die with a given number of sides."""

    def roll(self, sides: int) -> int:
        """Return a uniformly distributed integer in [1, sides]."""
        ...


class RandomDice:
    """Dice backed by a private ``random.Random`` seeded once at creation."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self._rng = random.Random(seed)
        logger.debug("Dice seeded with %d", seed)

    def roll(self, sides: int) -> int:
        validate_sides(sides)
        return self._rng.randint(1, sides)


class ScriptedDice:
    """Dice that replay a fixed sequence of values.

    Raises:
        IndexError: From ``roll`` once the script is exhausted.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def roll(self, sides: int) -> int:
        validate_sides(sides)
        if self._position >= len(self._values):
            raise IndexError("Scripted dice ran out of values.")
        value = self._values[self._position]
        if not 1 <= value <= sides:
            raise ValueError(f"Scripted value {value} is not a valid D{sides} face.")
        self._position += 1
        return value
