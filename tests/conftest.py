"""
Pig Dice - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import io
from typing import Callable, Iterable

import pytest

from pigdice.engine.base import Player
from pigdice.engine.events import EventRecorder
from pigdice.engine.game import HoldDecider


# =============================================================================
# HOLD DECIDERS
# =============================================================================

@pytest.fixture
def hold_script() -> Callable[[Iterable[bool]], HoldDecider]:
    """Factory: decider replaying a fixed list of hold (True) / roll (False) choices.

    The returned decider exposes the unconsumed choices as ``remaining``.
    """

    def make(decisions: Iterable[bool]) -> HoldDecider:
        remaining = list(decisions)

        def decide(player: Player, turn_total: int) -> bool:
            return remaining.pop(0)

        decide.remaining = remaining
        return decide

    return make


@pytest.fixture
def hold_at() -> Callable[[int], HoldDecider]:
    """Factory: decider that holds once the turn total reaches a target."""

    def make(target: int) -> HoldDecider:
        return lambda player, turn_total: turn_total >= target

    return make


@pytest.fixture
def always_hold() -> HoldDecider:
    return lambda player, turn_total: True


@pytest.fixture
def never_hold() -> HoldDecider:
    return lambda player, turn_total: False


# =============================================================================
# COLLABORATORS
# =============================================================================

@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()
