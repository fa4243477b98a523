"""Tests for pigdice/engine/dice.py - RandomDice and ScriptedDice."""

import pytest

from pigdice.engine.dice import RandomDice, ScriptedDice


class TestRandomDice:

    def test_value_range(self):
        dice = RandomDice(seed=42)
        assert all(1 <= dice.roll(6) <= 6 for _ in range(300))

    def test_covers_every_face(self):
        dice = RandomDice(seed=42)
        assert {dice.roll(6) for _ in range(300)} == {1, 2, 3, 4, 5, 6}

    def test_same_seed_same_sequence(self):
        first = RandomDice(seed=99)
        second = RandomDice(seed=99)
        assert [first.roll(6) for _ in range(20)] == [second.roll(6) for _ in range(20)]

    def test_unseeded_records_seed(self):
        assert isinstance(RandomDice().seed, int)

    @pytest.mark.parametrize("sides", [0, -3])
    def test_non_positive_sides_raise(self, sides):
        with pytest.raises(ValueError, match="at least one side"):
            RandomDice(seed=1).roll(sides)

    def test_one_sided_die(self):
        assert RandomDice(seed=1).roll(1) == 1


class TestScriptedDice:

    def test_replays_in_order(self):
        dice = ScriptedDice([5, 3, 1])
        assert [dice.roll(6) for _ in range(3)] == [5, 3, 1]

    def test_remaining(self):
        dice = ScriptedDice([2, 2])
        dice.roll(6)
        assert dice.remaining == 1

    def test_exhausted_raises(self):
        dice = ScriptedDice([])
        with pytest.raises(IndexError, match="ran out"):
            dice.roll(6)

    def test_out_of_range_value_raises(self):
        dice = ScriptedDice([7])
        with pytest.raises(ValueError, match="not a valid D6 face"):
            dice.roll(6)
