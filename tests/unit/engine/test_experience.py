"""Tests for experience points and level thresholds."""

from __future__ import annotations

import pytest

from hollowgear.core.constants import XP_THRESHOLDS
from hollowgear.engine.experience import (
    add_experience,
    apply_level_up_choices,
    calculate_level_advancement,
    calculate_level_from_xp,
    can_level_up,
    create_default_level_up_choices,
    create_experience_data,
    get_experience_milestones,
    get_experience_progress_summary,
    get_levels_available,
    get_xp_between_levels,
    get_xp_for_level,
    get_xp_for_next_level,
    get_xp_to_next_level,
    set_experience,
    validate_experience_points,
    validate_level,
    validate_level_up_choices,
    validate_xp_level_consistency,
)
from hollowgear.models.enums import Ability
from hollowgear.models.progression import (
    AbilityScoreImprovement,
    ExperienceData,
    LevelUpChoices,
)


class TestThresholds:
    """Tests for the XP threshold table."""

    @pytest.mark.parametrize(
        ("xp", "level"),
        [(0, 1), (299, 1), (300, 2), (899, 2), (6_500, 5), (354_999, 19), (355_000, 20), (10**7, 20)],
    )
    def test_level_from_xp(self, xp: int, level: int) -> None:
        """Test the level is the highest threshold reached."""
        assert calculate_level_from_xp(xp) == level

    def test_every_threshold_maps_to_its_level(self) -> None:
        """Test each threshold lands exactly on its level."""
        for index, xp in enumerate(XP_THRESHOLDS):
            assert calculate_level_from_xp(xp) == index + 1

    def test_one_below_every_threshold_is_previous_level(self) -> None:
        """Test one XP short of each level stays on the level before it."""
        for level in range(2, 21):
            assert calculate_level_from_xp(get_xp_for_level(level) - 1) == level - 1

    @pytest.mark.parametrize(("level", "xp"), [(0, 0), (1, 0), (5, 6_500), (20, 355_000), (25, 355_000)])
    def test_xp_for_level_clamps(self, level: int, xp: int) -> None:
        """Test thresholds with out-of-range levels clamped."""
        assert get_xp_for_level(level) == xp

    def test_next_level_and_remaining(self) -> None:
        """Test next-level thresholds and XP remaining."""
        assert get_xp_for_next_level(1) == 300
        assert get_xp_for_next_level(20) == 355_000
        assert get_xp_to_next_level(250, 1) == 50
        assert get_xp_to_next_level(400_000, 20) == 0

    def test_xp_between_levels(self) -> None:
        """Test XP differences between levels."""
        assert get_xp_between_levels(1, 3) == 900
        assert get_xp_between_levels(4, 4) == 0
        assert get_xp_between_levels(5, 2) == 0

    def test_milestones(self) -> None:
        """Test one milestone per level."""
        milestones = get_experience_milestones()

        assert len(milestones) == 20
        assert milestones[0].level == 1
        assert milestones[-1].xp == 355_000


class TestValidation:
    """Tests for XP and level validators."""

    def test_valid_xp(self) -> None:
        """Test a normal XP amount."""
        result = validate_experience_points(1_000)

        assert result.success
        assert result.data == 1_000

    def test_negative_and_fractional_xp(self) -> None:
        """Test every problem is reported at once."""
        result = validate_experience_points(-1.5)

        assert not result.success
        assert set(result.error_codes) == {"INVALID_XP_NEGATIVE", "INVALID_XP_NOT_INTEGER"}

    def test_very_high_xp(self) -> None:
        """Test XP above twice the level 20 threshold is flagged."""
        result = validate_experience_points(710_001)

        assert result.has_error("WARNING_XP_VERY_HIGH")
        assert result.errors[0].context == {"max_recommended": 710_000}

    @pytest.mark.parametrize(
        ("level", "code"),
        [(0, "INVALID_LEVEL_TOO_LOW"), (21, "INVALID_LEVEL_TOO_HIGH"), (2.5, "INVALID_LEVEL_NOT_INTEGER")],
    )
    def test_invalid_levels(self, level: float, code: str) -> None:
        """Test level range and integrality checks."""
        assert validate_level(level).has_error(code)

    def test_consistency(self) -> None:
        """Test XP and level agreement."""
        assert validate_xp_level_consistency(900, 3).success

        result = validate_xp_level_consistency(900, 2)
        assert result.has_error("INCONSISTENT_XP_LEVEL")
        assert result.errors[0].context["calculated_level"] == 3


class TestAdvancement:
    """Tests for XP gains and level advancement."""

    def test_multi_level_gain(self) -> None:
        """Test one large gain can cross several thresholds."""
        advancement = calculate_level_advancement(0, 1, 2_700)

        assert advancement.is_valid
        assert advancement.to_level == 4
        assert advancement.levels_gained == 3

    def test_negative_gain_and_inconsistent_level(self) -> None:
        """Test invalid advancements keep every reason."""
        advancement = calculate_level_advancement(1_000, 2, -100)

        assert not advancement.is_valid
        assert {issue.code for issue in advancement.errors} == {
            "INVALID_XP_GAIN_NEGATIVE",
            "INCONSISTENT_CURRENT_LEVEL",
        }

    def test_add_experience(self) -> None:
        """Test adding XP recomputes the level."""
        result = add_experience(create_experience_data(100), 200)

        assert result.success
        assert result.data.current_xp == 300
        assert result.data.current_level == 2
        assert result.data.next_level_xp == 900

    def test_add_negative_experience(self) -> None:
        """Test negative gains are rejected."""
        result = add_experience(create_experience_data(100), -5)

        assert result.has_error("INVALID_XP_NEGATIVE")

    def test_set_experience(self) -> None:
        """Test setting XP directly."""
        assert set_experience(6_500).data.current_level == 5
        assert not set_experience(-1).success

    def test_pending_levels(self) -> None:
        """Test stored levels behind the XP total."""
        behind = ExperienceData(
            current_xp=1_000,
            current_level=2,
            next_level_xp=900,
            current_level_xp=300,
        )

        assert can_level_up(behind)
        assert get_levels_available(behind) == 1
        assert not can_level_up(create_experience_data(1_000))
        assert not can_level_up(create_experience_data(400_000))


class TestLevelUpChoices:
    """Tests for level-up choice validation."""

    def test_defaults_are_valid(self) -> None:
        """Test the default choices pass validation."""
        choices = create_default_level_up_choices(4)

        assert choices.hit_points_gained == 0
        assert validate_level_up_choices(choices).success

    def test_every_problem_reported(self) -> None:
        """Test bad HP, bad level and oversized ASIs together."""
        choices = LevelUpChoices(
            level=21,
            hit_points_gained=-1.5,
            ability_score_improvements=[
                AbilityScoreImprovement(ability=Ability.STR, improvement=2),
                AbilityScoreImprovement(ability=Ability.DEX, improvement=-1),
                AbilityScoreImprovement(ability=Ability.CON, improvement=2),
            ],
        )

        result = validate_level_up_choices(choices)

        assert set(result.error_codes) == {
            "INVALID_LEVEL_TOO_HIGH",
            "INVALID_HP_GAIN_NEGATIVE",
            "INVALID_HP_GAIN_NOT_INTEGER",
            "INVALID_ASI_NEGATIVE",
            "INVALID_ASI_TOO_MANY",
        }

    def test_apply_requires_xp(self) -> None:
        """Test applying choices for a level the XP does not reach."""
        result = apply_level_up_choices(create_experience_data(300), create_default_level_up_choices(3))

        assert result.has_error("INSUFFICIENT_XP_FOR_LEVEL")
        assert result.errors[0].context["required_xp"] == 900

    def test_apply_with_enough_xp(self) -> None:
        """Test applying choices once the XP is there."""
        result = apply_level_up_choices(create_experience_data(900), create_default_level_up_choices(3))

        assert result.success
        assert result.data.current_level == 3


class TestProgressSummary:
    """Tests for the progress summary."""

    def test_mid_band(self) -> None:
        """Test progress halfway through a level band."""
        summary = get_experience_progress_summary(create_experience_data(600))

        assert summary.level == 2
        assert summary.xp_to_next == 300
        assert summary.progress_percent == 50.0
        assert summary.can_level_up is False
        assert summary.levels_available == 0

    def test_max_level(self) -> None:
        """Test progress at level 20 is complete."""
        summary = get_experience_progress_summary(create_experience_data(355_000))

        assert summary.level == 20
        assert summary.xp_to_next == 0
        assert summary.progress_percent == 100.0
