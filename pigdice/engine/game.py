"""
Pig Dice - Game Engine

Turn sequencing, score accumulation, bust/hold resolution and win
detection. Collaborators are injected: a dice source for rolls, a hold
decider for the player's choices and an optional event listener for
display.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from pigdice.engine.base import (
    GameResult,
    Player,
    TurnOutcome,
    TurnResult,
)
from pigdice.engine.dice import DiceSource
from pigdice.engine.events import EventListener, EventPayload, GameEvent, ignore_event
from pigdice.engine.pig import PigEngine
from pigdice.engine.validators import validate_players

logger = logging.getLogger(__name__)

# (player, turn_total) -> True to hold, False to roll again
HoldDecider = Callable[[Player, int], bool]


class PigGame:
    """Runs a game of Pig between any number of players.

    Players act in round-robin order. After each completed turn the acting
    player's score is updated and checked against the win threshold; the
    game stops right there, so later players in the same round never act.
    """

    def __init__(
        self,
        dice: DiceSource,
        decide_hold: HoldDecider,
        on_event: EventListener | None = None,
    ) -> None:
        self._dice = dice
        self._decide_hold = decide_hold
        self._on_event = on_event or ignore_event

    def _emit(
        self,
        event: GameEvent,
        index: int | None = None,
        player: Player | None = None,
        **data,
    ) -> None:
        self._on_event(
            EventPayload(
                event=event,
                player_index=index,
                player_name=player.name if player is not None else None,
                data=data,
            )
        )

    def play_turn(self, player: Player, index: int = 0) -> TurnResult:
        """Play one turn for a player until they hold or bust.

        The player is only asked whether to hold after a non-bust roll, so a
        turn always starts with at least one roll.

        Args:
            player: The acting player, with their score before this turn
            index: The player's position in turn order

        Returns:
            TurnResult with the banked turn total (0 on bust)
        """
        turn_total = 0
        rolls: list[int] = []

        self._emit(GameEvent.TURN_STARTED, index, player, score=player.score)
        logger.debug("Turn started for %s at score %d", player.name, player.score)

        while True:
            turn_total, roll, is_bust = PigEngine.process_roll(
                turn_total, PigEngine.roll_dice(self._dice)
            )
            value = roll.value
            rolls.append(value)

            if is_bust:
                self._emit(GameEvent.PLAYER_BUST, index, player, roll=value)
                logger.debug("%s busted after %d roll(s)", player.name, len(rolls))
                return TurnResult(index, TurnOutcome.BUSTED, 0, tuple(rolls))

            self._emit(
                GameEvent.DICE_ROLLED,
                index,
                player,
                roll=value,
                turn_total=turn_total,
                potential_score=player.score + turn_total,
            )

            if self._decide_hold(player, turn_total):
                self._emit(GameEvent.TURN_HELD, index, player, turn_total=turn_total)
                logger.debug("%s held with %d", player.name, turn_total)
                return TurnResult(index, TurnOutcome.HELD, turn_total, tuple(rolls))

    def run_game(self, players: Sequence[Player]) -> GameResult:
        """Play turns in round-robin order until someone wins.

        Args:
            players: Players in turn order; scores are reset to 0

        Returns:
            GameResult naming the winner and the final player records

        Raises:
            ValueError: If no players are given
        """
        roster = [player.reset() for player in validate_players(players)]
        turns: list[TurnResult] = []

        self._emit(GameEvent.GAME_STARTED, players=[p.name for p in roster])
        logger.info("Game started with %d player(s)", len(roster))

        index = 0
        while True:
            result = self.play_turn(roster[index], index)
            turns.append(result)

            player = roster[index].add_points(result.turn_total)
            roster[index] = player
            self._emit(GameEvent.SCORE_UPDATED, index, player, score=player.score)

            if player.has_won:
                self._emit(GameEvent.GAME_WON, index, player, score=player.score)
                logger.info(
                    "%s won with %d after %d turn(s)", player.name, player.score, len(turns)
                )
                return GameResult(index, tuple(roster), tuple(turns))

            index = (index + 1) % len(roster)
