"""
Pig Dice - Input Validation Utilities

Provides validation functions for game engine and prompt inputs. All
validators either return validated data or raise descriptive ValueError
exceptions.
"""

from typing import Sequence

from pigdice.engine.base import Player


HOLD_RESPONSE = "h"
ROLL_RESPONSE = "r"


def validate_player_name(name: str) -> str:
    """
    Validate and normalize a player name.

    Args:
        name: Raw name as typed by the player

    Returns:
        The name with leading and trailing whitespace removed

    Raises:
        ValueError: If the name is empty or whitespace only
    """
    name = name.strip()
    if not name:
        raise ValueError("Name cannot be empty")
    return name


def parse_hold_response(response: str) -> bool:
    """
    Parse a hold/roll answer.

    Args:
        response: Raw answer as typed by the player

    Returns:
        True for hold, False for roll

    Raises:
        ValueError: If the trimmed answer is not exactly "h" or "r"
    """
    response = response.strip()
    if response == HOLD_RESPONSE:
        return True
    if response == ROLL_RESPONSE:
        return False
    raise ValueError("Invalid response. Please enter h for hold or r for roll.")


def validate_sides(sides: int) -> int:
    """
    Validate the number of sides on a die.

    Raises:
        ValueError: If sides is not a positive integer
    """
    if not isinstance(sides, int):
        raise ValueError(f"Die sides must be an integer, got {type(sides).__name__}.")

    if sides <= 0:
        raise ValueError(f"Die must have at least one side, got {sides}.")

    return sides


def validate_score(score: int) -> int:
    """
    Validate a score or turn total.

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_players(players: Sequence[Player], min_count: int = 1) -> tuple[Player, ...]:
    """
    Validate the players taking part in a game.

    Args:
        players: Player records in turn order
        min_count: Minimum number of players required

    Returns:
        Validated players as a tuple

    Raises:
        ValueError: If there are too few players
    """
    players_tuple = tuple(players)
    if len(players_tuple) < min_count:
        raise ValueError(
            f"At least {min_count} player(s) required, got {len(players_tuple)}."
        )
    return players_tuple
