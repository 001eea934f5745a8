"""Ability score model.

Example:
    >>> scores = AbilityScores(strength=8, intelligence=16)
    >>> scores.get_modifier(Ability.INT)
    3
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field

from hollowgear.core.constants import DEFAULT_ABILITY_SCORE
from hollowgear.models.enums import Ability


def calculate_modifier(score: int) -> int:
    """Calculate the ability modifier for a score.

    The modifier is ``(score - 10) // 2``.

    Example:
        >>> calculate_modifier(10)
        0
        >>> calculate_modifier(7)
        -2
    """
    return (score - 10) // 2


AbilityScore = Annotated[int, Field(ge=1, le=30, description="Ability score (1-30)")]


class AbilityScores(BaseModel):
    """The six ability scores of a character.

    Scores are bounded to 1-30 here. The lower level-up cap of 20 is a
    rules check applied by the advancement validator, not a model bound.

    Attributes:
        strength: Physical power.
        dexterity: Agility and reflexes.
        constitution: Stamina and resilience.
        intelligence: Reasoning and recall; the arcane and psionic key ability.
        wisdom: Awareness and intuition.
        charisma: Force of personality; the templar key ability.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: AbilityScore = DEFAULT_ABILITY_SCORE
    dexterity: AbilityScore = DEFAULT_ABILITY_SCORE
    constitution: AbilityScore = DEFAULT_ABILITY_SCORE
    intelligence: AbilityScore = DEFAULT_ABILITY_SCORE
    wisdom: AbilityScore = DEFAULT_ABILITY_SCORE
    charisma: AbilityScore = DEFAULT_ABILITY_SCORE

    @computed_field(description="Ability modifiers keyed by ability name")
    @property
    def modifiers(self) -> dict[str, int]:
        """Modifier for every ability."""
        return {ability.value: self.get_modifier(ability) for ability in Ability}

    def get_score(self, ability: Ability | str) -> int:
        """Get the score for an ability."""
        return getattr(self, Ability(ability).value)

    def get_modifier(self, ability: Ability | str) -> int:
        """Get the modifier for an ability."""
        return calculate_modifier(self.get_score(ability))

    def with_scores(self, updates: dict[Ability, int]) -> AbilityScores:
        """Return a copy with the given scores replaced.

        Unlike ``model_copy`` the result is re-validated, so out-of-range
        scores still raise a pydantic ``ValidationError``.
        """
        merged = self.model_dump(exclude={"modifiers"})
        for ability, score in updates.items():
            merged[Ability(ability).value] = score
        return AbilityScores.model_validate(merged)


__all__ = [
    "AbilityScore",
    "AbilityScores",
    "calculate_modifier",
]
