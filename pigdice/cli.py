"""Pig Dice - Console Entrypoint."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from pigdice.config import Settings, get_settings
from pigdice.engine.base import DEFAULT_NUM_PLAYERS, Player
from pigdice.engine.dice import DiceSource, RandomDice
from pigdice.engine.game import PigGame
from pigdice.ui.display import ConsoleDisplay
from pigdice.ui.prompts import ConsoleInput, LineReader, get_player_name, make_hold_decider

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr so they never mix with the game text."""
    logging.basicConfig(
        level=settings.effective_log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def play(
    read_line: LineReader,
    out: TextIO,
    dice: DiceSource,
    *,
    num_players: int = DEFAULT_NUM_PLAYERS,
    show_rules: bool = True,
) -> int:
    """Run one interactive game; returns the winner's index."""
    display = ConsoleDisplay(out)
    if show_rules:
        display.render_rules()

    players = []
    for number in range(1, num_players + 1):
        name = get_player_name(number, read_line, out)
        display.render_player_name(number, name)
        players.append(Player(name))

    game = PigGame(dice, make_hold_decider(read_line, out), on_event=display)
    return game.run_game(players).winner_index


def main() -> int:
    """Play one console game; exit code 0 when a winner is declared, 130 on Ctrl-C."""
    settings = get_settings()
    configure_logging(settings)

    dice = RandomDice(settings.seed)
    logger.info("Starting game with seed %d", dice.seed)

    try:
        play(ConsoleInput(), sys.stdout, dice, show_rules=settings.show_rules)
    except KeyboardInterrupt:
        logger.info("Game interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
