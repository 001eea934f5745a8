"""Tests for ability scores and enumerations."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hollowgear.models.abilities import AbilityScores, calculate_modifier
from hollowgear.models.enums import Ability, DieType, HollowGearClass


class TestCalculateModifier:
    """Tests for the ability modifier formula."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [(1, -5), (7, -2), (8, -1), (9, -1), (10, 0), (11, 0), (12, 1), (20, 5), (30, 10)],
    )
    def test_modifier_table(self, score: int, expected: int) -> None:
        """Test modifiers round down for odd scores."""
        assert calculate_modifier(score) == expected


class TestAbilityScores:
    """Tests for the AbilityScores model."""

    def test_defaults_are_ten(self) -> None:
        """Test every score defaults to 10."""
        scores = AbilityScores()
        assert all(scores.get_score(ability) == 10 for ability in Ability)

    def test_get_score_accepts_strings(self, sample_ability_scores: AbilityScores) -> None:
        """Test scores can be looked up by enum or plain string."""
        assert sample_ability_scores.get_score(Ability.INT) == 16
        assert sample_ability_scores.get_score("intelligence") == 16

    def test_get_modifier(self, sample_ability_scores: AbilityScores) -> None:
        """Test modifier lookup."""
        assert sample_ability_scores.get_modifier(Ability.INT) == 3
        assert sample_ability_scores.get_modifier(Ability.STR) == -1

    def test_modifiers_computed_field(self, sample_ability_scores: AbilityScores) -> None:
        """Test the serialized modifiers mapping."""
        dumped = sample_ability_scores.model_dump()
        assert dumped["modifiers"]["intelligence"] == 3
        assert dumped["modifiers"]["dexterity"] == 2

    @pytest.mark.parametrize("score", [0, 31])
    def test_bounds(self, score: int) -> None:
        """Test scores outside 1-30 are rejected."""
        with pytest.raises(ValidationError):
            AbilityScores(strength=score)

    def test_frozen(self, sample_ability_scores: AbilityScores) -> None:
        """Test ability scores are immutable."""
        with pytest.raises(ValidationError):
            sample_ability_scores.strength = 18  # type: ignore[misc]

    def test_with_scores_returns_new_instance(self, sample_ability_scores: AbilityScores) -> None:
        """Test with_scores leaves the original untouched."""
        updated = sample_ability_scores.with_scores({Ability.STR: 10})

        assert updated.strength == 10
        assert sample_ability_scores.strength == 8
        assert updated.intelligence == sample_ability_scores.intelligence

    def test_with_scores_revalidates(self, sample_ability_scores: AbilityScores) -> None:
        """Test with_scores rejects out-of-range values."""
        with pytest.raises(ValidationError):
            sample_ability_scores.with_scores({Ability.INT: 31})


class TestEnums:
    """Tests for enum helpers."""

    def test_ability_names(self) -> None:
        """Test ability display helpers."""
        assert Ability.INT.full_name == "Intelligence"
        assert Ability.INT.abbreviation == "INT"

    @pytest.mark.parametrize(
        ("die", "sides"),
        [(DieType.D6, 6), (DieType.D8, 8), (DieType.D10, 10), (DieType.D12, 12)],
    )
    def test_die_sides(self, die: DieType, sides: int) -> None:
        """Test die face counts."""
        assert die.sides == sides

    def test_class_values_compare_to_strings(self) -> None:
        """Test class enum members equal their serialized names."""
        assert HollowGearClass.MINDWEAVER == "mindweaver"
        assert HollowGearClass("templar") is HollowGearClass.TEMPLAR
        assert HollowGearClass.TEMPLAR.display_name == "Templar"
