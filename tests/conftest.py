"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Hollow Gear engine test suite.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from hollowgear.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "HOLLOWGEAR_DEBUG": "true",
        "HOLLOWGEAR_LOG_LEVEL": "DEBUG",
        "HOLLOWGEAR_RULES_ABILITY_MODIFIER_PLACEHOLDER": "1",
        "HOLLOWGEAR_RULES_FEEDBACK_EXPIRY_MINUTES": "5",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_ability_stats() -> dict[str, int]:
    """Provide sample ability scores.

    Returns:
        Dictionary of ability scores.
    """
    return {
        "strength": 8,
        "dexterity": 14,
        "constitution": 13,
        "intelligence": 16,
        "wisdom": 12,
        "charisma": 10,
    }


@pytest.fixture
def sample_ability_scores(sample_ability_stats: dict[str, int]) -> Any:
    """Create an AbilityScores instance from the sample stats."""
    from hollowgear.models.abilities import AbilityScores

    return AbilityScores(**sample_ability_stats)


@pytest.fixture
def sample_classes() -> list[Any]:
    """A three-level arcanist and a four-level templar.

    Returns:
        List of CharacterClass entries.
    """
    from hollowgear.engine.multiclass import create_character_class

    return [
        create_character_class("arcanist", 3, archetype_id="aethermancer"),
        create_character_class("templar", 4, archetype_id="relic_knight"),
    ]


@pytest.fixture
def mindweaver_class() -> Any:
    """A five-level mindweaver on the Path of the Echo."""
    from hollowgear.engine.multiclass import create_character_class

    return create_character_class("mindweaver", 5, archetype_id="path_of_echo")


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed timestamp for time-dependent operations."""
    return datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def dice_roller() -> Any:
    """Create a DiceRoller with a fixed seed for reproducible tests.

    Returns:
        DiceRoller instance with fixed seed.
    """
    from hollowgear.engine.dice import DiceRoller

    return DiceRoller(seed=42)


class FixedRoller:
    """Stand-in roller that returns queued totals in order."""

    def __init__(self, *totals: int) -> None:
        self._totals = list(totals)
        self.expressions: list[str] = []

    def roll(self, expression: str) -> Any:
        from hollowgear.engine.dice import DiceExpression

        self.expressions.append(expression)
        total = self._totals.pop(0)
        return DiceExpression(expression=expression, total=total, dice=[total], modifier=0)


@pytest.fixture
def fixed_roller() -> type[FixedRoller]:
    """Factory for rollers that return predetermined totals."""
    return FixedRoller
