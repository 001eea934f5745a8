"""Dice rolling for psionic feedback and backlash.

Rolls go through the d20 library. Functions that roll accept an optional
:class:`DiceRoller` so callers and tests can supply a seeded or stubbed
roller.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

import d20

from hollowgear.core.exceptions import DiceRollError
from hollowgear.core.logging import get_logger
from hollowgear.models.enums import DieType


logger = get_logger(__name__)


@dataclass(frozen=True)
class DiceExpression:
    """Result of rolling a dice expression.

    Attributes:
        expression: The expression as given.
        total: The rolled total.
        dice: Individual kept die results.
        modifier: Static part of the total.
    """

    expression: str
    total: int
    dice: list[int]
    modifier: int


class DiceRoller:
    """Thin wrapper over :func:`d20.roll`.

    Example:
        >>> roller = DiceRoller(seed=7)
        >>> 1 <= roller.roll("1d6").total <= 6
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional seed for reproducible rolls. d20 draws from the
                ``random`` module, so the seed is applied there.
        """
        self._seed = seed
        if seed is not None:
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    def roll(self, expression: str) -> DiceExpression:
        """Roll a dice expression.

        Args:
            expression: Dice expression such as ``"1d6"`` or ``"2d8+3"``.

        Returns:
            DiceExpression with the total and individual dice.

        Raises:
            DiceRollError: If the expression is empty or cannot be parsed.
        """
        if not expression or not expression.strip():
            raise DiceRollError("Empty dice expression", expression=expression)

        try:
            result = d20.roll(expression)
        except d20.RollError as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=expression,
            ) from exc

        dice_values = self._extract_dice_values(result.expr)
        rolled = DiceExpression(
            expression=expression,
            total=result.total,
            dice=dice_values,
            modifier=result.total - sum(dice_values),
        )
        logger.debug("Dice rolled", expression=expression, total=result.total)
        return rolled

    def roll_die(self, die: DieType | int) -> int:
        """Roll a single die and return its face."""
        sides = die.sides if isinstance(die, DieType) else die
        return self.roll(f"1d{sides}").total

    def _extract_dice_values(self, expr: Any) -> list[int]:
        values: list[int] = []

        def traverse(node: Any) -> None:
            if isinstance(node, d20.Dice):
                for die in node.values:
                    if die.kept:
                        values.append(die.number)
            elif hasattr(node, "children"):
                for child in node.children:
                    traverse(child)

        traverse(expr)
        return values


_default_roller: DiceRoller | None = None


def get_default_roller() -> DiceRoller:
    """Return the shared module-level roller, creating it on first use."""
    global _default_roller  # noqa: PLW0603
    if _default_roller is None:
        _default_roller = DiceRoller()
    return _default_roller


def roll(expression: str) -> DiceExpression:
    """Roll with the shared roller.

    Example:
        >>> roll("1d4").total in range(1, 5)
        True
    """
    return get_default_roller().roll(expression)


__all__ = [
    "DiceExpression",
    "DiceRoller",
    "get_default_roller",
    "roll",
]
