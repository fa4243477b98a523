"""
Pig Dice - Pig Roll Rules

Single-die push-your-luck rules. Roll a D6: 2-6 adds face value to the
turn total, rolling 1 = bust (lose all turn points).

All methods are stateless class methods operating on immutable data.
"""

from pigdice.engine.base import BUST_VALUE, DIE_SIDES, DiceRoll
from pigdice.engine.dice import DiceSource
from pigdice.engine.validators import validate_score


class PigEngine:
    """
    Stateless rules for a single Pig roll.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    @classmethod
    def roll_dice(cls, dice: DiceSource) -> DiceRoll:
        """Roll a single D6.

        Args:
            dice: Randomness source to roll with

        Returns:
            DiceRoll with a value of 1-6
        """
        return DiceRoll(value=dice.roll(DIE_SIDES))

    @classmethod
    def is_bust(cls, roll: DiceRoll | int) -> bool:
        """Check if a roll is a bust (rolled a 1).

        Args:
            roll: A DiceRoll or a bare face value

        Returns:
            True if the die shows 1
        """
        value = roll.value if isinstance(roll, DiceRoll) else roll
        return value == BUST_VALUE

    @classmethod
    def process_roll(
        cls,
        turn_total: int,
        roll: DiceRoll,
    ) -> tuple[int, DiceRoll, bool]:
        """Apply a roll to the running turn total.

        Args:
            turn_total: Current accumulated turn total
            roll: The roll to apply

        Returns:
            Tuple of (new_turn_total, dice_roll, is_bust)
        """
        validate_score(turn_total)

        if cls.is_bust(roll):
            return (0, roll, True)

        return (turn_total + roll.value, roll, False)
