"""Tests for dice rolling mechanics."""

from __future__ import annotations

import pytest

from hollowgear.core.exceptions import DiceRollError
from hollowgear.engine.dice import DiceExpression, DiceRoller, get_default_roller, roll
from hollowgear.models.enums import DieType


class TestDiceRoller:
    """Tests for the DiceRoller class."""

    def test_simple_roll(self, dice_roller: DiceRoller) -> None:
        """Test a single die roll."""
        result = dice_roller.roll("1d6")

        assert isinstance(result, DiceExpression)
        assert 1 <= result.total <= 6
        assert len(result.dice) == 1
        assert result.modifier == 0

    def test_roll_with_modifier(self, dice_roller: DiceRoller) -> None:
        """Test roll with positive modifier."""
        result = dice_roller.roll("1d4+2")

        assert result.modifier == 2
        assert 3 <= result.total <= 6

    def test_multiple_dice(self, dice_roller: DiceRoller) -> None:
        """Test rolling multiple dice."""
        result = dice_roller.roll("3d6")

        assert 3 <= result.total <= 18
        assert len(result.dice) == 3
        assert sum(result.dice) == result.total

    def test_seeded_rolls_repeat(self) -> None:
        """Test that the same seed gives the same sequence."""
        roller = DiceRoller(seed=7)
        first = [roller.roll("1d20").total for _ in range(3)]
        roller = DiceRoller(seed=7)
        second = [roller.roll("1d20").total for _ in range(3)]

        assert first == second

    @pytest.mark.parametrize("die", list(DieType))
    def test_roll_die(self, dice_roller: DiceRoller, die: DieType) -> None:
        """Test single die rolls stay within the die."""
        assert 1 <= dice_roller.roll_die(die) <= die.sides

    def test_roll_die_with_int(self, dice_roller: DiceRoller) -> None:
        """Test single die rolls by face count."""
        assert 1 <= dice_roller.roll_die(4) <= 4


class TestDiceErrors:
    """Tests for dice error handling."""

    @pytest.mark.parametrize("expression", ["", "   "])
    def test_empty_expression(self, dice_roller: DiceRoller, expression: str) -> None:
        """Test empty expressions raise DiceRollError."""
        with pytest.raises(DiceRollError):
            dice_roller.roll(expression)

    def test_invalid_expression(self, dice_roller: DiceRoller) -> None:
        """Test unparseable expressions raise DiceRollError with context."""
        with pytest.raises(DiceRollError) as exc_info:
            dice_roller.roll("not dice")

        assert exc_info.value.details["expression"] == "not dice"


class TestModuleRoll:
    """Tests for the module-level roll helper."""

    def test_default_roller_is_shared(self) -> None:
        """Test the default roller is created once."""
        assert get_default_roller() is get_default_roller()

    def test_roll(self) -> None:
        """Test rolling through the shared roller."""
        assert 1 <= roll("1d4").total <= 4
