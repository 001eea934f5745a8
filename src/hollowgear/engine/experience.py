"""Experience points and the level they imply.

Level is a pure function of XP through the threshold table in
:data:`hollowgear.core.constants.XP_THRESHOLDS`. Validators here return
:class:`ValidationResult` values and accumulate every problem they find.

Example:
    >>> data = create_experience_data(100)
    >>> result = add_experience(data, 200)
    >>> result.data.current_level
    2
"""

from __future__ import annotations

from hollowgear.core.config import get_rules
from hollowgear.core.constants import (
    MAX_CHARACTER_LEVEL,
    MAX_LEVEL_XP,
    MIN_CHARACTER_LEVEL,
    XP_THRESHOLDS,
)
from hollowgear.core.logging import get_logger
from hollowgear.core.validation import (
    ValidationIssue,
    ValidationResult,
    validation_error,
    validation_failure,
    validation_success,
)
from hollowgear.models.enums import HitPointMethod
from hollowgear.models.progression import (
    ExperienceData,
    ExperienceMilestone,
    ExperienceProgressSummary,
    LevelAdvancement,
    LevelUpChoices,
)


logger = get_logger(__name__)


def _is_whole(value: int | float) -> bool:
    return float(value).is_integer()


# =============================================================================
# Thresholds
# =============================================================================


def calculate_level_from_xp(xp: int | float) -> int:
    """Highest level whose threshold is at or below ``xp``, within 1-20."""
    for level in range(MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL - 1, -1):
        if xp >= XP_THRESHOLDS[level - 1]:
            return level
    return MIN_CHARACTER_LEVEL


def get_xp_for_level(level: int) -> int:
    """Threshold of ``level``, clamping out-of-range levels."""
    if level < MIN_CHARACTER_LEVEL:
        return XP_THRESHOLDS[0]
    if level > MAX_CHARACTER_LEVEL:
        return MAX_LEVEL_XP
    return XP_THRESHOLDS[level - 1]


def get_xp_for_next_level(current_level: int) -> int:
    """Threshold of the level after ``current_level``; level 20 maps to itself."""
    if current_level >= MAX_CHARACTER_LEVEL:
        return MAX_LEVEL_XP
    return get_xp_for_level(current_level + 1)


def get_xp_to_next_level(current_xp: int, current_level: int) -> int:
    if current_level >= MAX_CHARACTER_LEVEL:
        return 0
    return max(0, get_xp_for_next_level(current_level) - current_xp)


def get_xp_between_levels(from_level: int, to_level: int) -> int:
    if from_level >= to_level:
        return 0
    return get_xp_for_level(to_level) - get_xp_for_level(from_level)


def get_experience_milestones() -> list[ExperienceMilestone]:
    return [
        ExperienceMilestone(level=index + 1, xp=xp) for index, xp in enumerate(XP_THRESHOLDS)
    ]


# =============================================================================
# Validation
# =============================================================================


def validate_experience_points(xp: int | float) -> ValidationResult[int]:
    """Validate an XP amount.

    Reports ``INVALID_XP_NEGATIVE``, ``INVALID_XP_NOT_INTEGER`` and
    ``WARNING_XP_VERY_HIGH`` (above the configured multiple of the level-20
    threshold). The warning is returned as a failure like the others.
    """
    errors: list[ValidationIssue] = []
    max_recommended = MAX_LEVEL_XP * get_rules().xp_warning_multiplier

    if xp < 0:
        errors.append(
            validation_error(
                "current_xp",
                "Experience points cannot be negative",
                "INVALID_XP_NEGATIVE",
            )
        )
    if not _is_whole(xp):
        errors.append(
            validation_error(
                "current_xp",
                "Experience points must be a whole number",
                "INVALID_XP_NOT_INTEGER",
            )
        )
    if xp > max_recommended:
        errors.append(
            validation_error(
                "current_xp",
                f"Experience points are unusually high ({xp})",
                "WARNING_XP_VERY_HIGH",
                {"max_recommended": max_recommended},
            )
        )

    if errors:
        return validation_failure(errors)
    return validation_success(xp)


def validate_level(level: int | float) -> ValidationResult[int]:
    errors: list[ValidationIssue] = []

    if not _is_whole(level):
        errors.append(
            validation_error("level", "Level must be a whole number", "INVALID_LEVEL_NOT_INTEGER")
        )
    if level < MIN_CHARACTER_LEVEL:
        errors.append(
            validation_error(
                "level",
                f"Level cannot be less than {MIN_CHARACTER_LEVEL}",
                "INVALID_LEVEL_TOO_LOW",
                {"min_level": MIN_CHARACTER_LEVEL},
            )
        )
    if level > MAX_CHARACTER_LEVEL:
        errors.append(
            validation_error(
                "level",
                f"Level cannot be greater than {MAX_CHARACTER_LEVEL}",
                "INVALID_LEVEL_TOO_HIGH",
                {"max_level": MAX_CHARACTER_LEVEL},
            )
        )

    if errors:
        return validation_failure(errors)
    return validation_success(level)


def validate_xp_level_consistency(xp: int, level: int) -> ValidationResult[dict[str, int]]:
    calculated = calculate_level_from_xp(xp)
    if calculated != level:
        return validation_failure(
            [
                validation_error(
                    "level",
                    f"Level {level} does not match experience points {xp} "
                    f"(should be level {calculated})",
                    "INCONSISTENT_XP_LEVEL",
                    {"provided_level": level, "calculated_level": calculated, "xp": xp},
                )
            ]
        )
    return validation_success({"xp": xp, "level": level})


# =============================================================================
# State Transitions
# =============================================================================


def create_experience_data(current_xp: int) -> ExperienceData:
    current_level = calculate_level_from_xp(current_xp)
    return ExperienceData(
        current_xp=current_xp,
        current_level=current_level,
        next_level_xp=get_xp_for_next_level(current_level),
        current_level_xp=get_xp_for_level(current_level),
        max_level_xp=MAX_LEVEL_XP,
    )


def calculate_level_advancement(
    current_xp: int,
    current_level: int,
    xp_gained: int,
) -> LevelAdvancement:
    """Work out the level reached after gaining XP.

    The result is marked invalid, with every reason attached, when the gain
    is negative or ``current_level`` does not match ``current_xp``.
    """
    errors: list[ValidationIssue] = []

    if xp_gained < 0:
        errors.append(
            validation_error(
                "xp_gained",
                "Experience gained cannot be negative",
                "INVALID_XP_GAIN_NEGATIVE",
            )
        )

    new_level = calculate_level_from_xp(current_xp + xp_gained)

    if calculate_level_from_xp(current_xp) != current_level:
        errors.append(
            validation_error(
                "current_level",
                f"Current level {current_level} does not match current XP {current_xp}",
                "INCONSISTENT_CURRENT_LEVEL",
            )
        )

    advancement = LevelAdvancement(
        from_level=current_level,
        to_level=new_level,
        xp_gained=xp_gained,
        is_valid=not errors,
        errors=errors or None,
    )
    logger.debug(
        "Level advancement calculated",
        from_level=current_level,
        to_level=new_level,
        xp_gained=xp_gained,
        is_valid=advancement.is_valid,
    )
    return advancement


def add_experience(
    experience: ExperienceData,
    xp_gained: int,
) -> ValidationResult[ExperienceData]:
    """Add XP and return the resulting experience data.

    Args:
        experience: Current experience data.
        xp_gained: XP to add; must be a non-negative whole number.

    Returns:
        Success with new experience data, or failure with the reasons.
    """
    validation = validate_experience_points(xp_gained)
    if not validation.success:
        return validation

    updated = create_experience_data(experience.current_xp + int(xp_gained))
    if updated.current_level > experience.current_level:
        logger.info(
            "Level threshold reached",
            from_level=experience.current_level,
            to_level=updated.current_level,
            current_xp=updated.current_xp,
        )
    return validation_success(updated)


def set_experience(xp: int) -> ValidationResult[ExperienceData]:
    """Set XP directly, e.g. at character creation."""
    validation = validate_experience_points(xp)
    if not validation.success:
        return validation
    return validation_success(create_experience_data(int(xp)))


def can_level_up(experience: ExperienceData) -> bool:
    return (
        experience.current_level < MAX_CHARACTER_LEVEL
        and experience.current_xp >= experience.next_level_xp
    )


def get_levels_available(experience: ExperienceData) -> int:
    return max(0, calculate_level_from_xp(experience.current_xp) - experience.current_level)


# =============================================================================
# Level-Up Choices
# =============================================================================


def create_default_level_up_choices(level: int) -> LevelUpChoices:
    return LevelUpChoices(
        level=level,
        hit_points_gained=0,
        hit_point_method=HitPointMethod.AVERAGE,
        ability_score_improvements=[],
        class_feature_choices=[],
        spells_learned=[],
        skills_gained=[],
        other_choices={},
    )


def validate_level_up_choices(choices: LevelUpChoices) -> ValidationResult[LevelUpChoices]:
    """Validate level-up choices, reporting every problem found."""
    errors: list[ValidationIssue] = []
    max_points = get_rules().max_asi_points

    level_validation = validate_level(choices.level)
    if not level_validation.success:
        errors.extend(level_validation.errors)

    if choices.hit_points_gained < 0:
        errors.append(
            validation_error(
                "hit_points_gained",
                "Hit points gained cannot be negative",
                "INVALID_HP_GAIN_NEGATIVE",
            )
        )
    if not _is_whole(choices.hit_points_gained):
        errors.append(
            validation_error(
                "hit_points_gained",
                "Hit points gained must be a whole number",
                "INVALID_HP_GAIN_NOT_INTEGER",
            )
        )

    if choices.ability_score_improvements:
        total = 0
        for improvement in choices.ability_score_improvements:
            total += improvement.improvement
            if improvement.improvement < 0:
                errors.append(
                    validation_error(
                        "ability_score_improvements",
                        "Ability score improvements cannot be negative",
                        "INVALID_ASI_NEGATIVE",
                    )
                )
        if total > max_points:
            errors.append(
                validation_error(
                    "ability_score_improvements",
                    f"Cannot improve ability scores by more than {max_points} points total",
                    "INVALID_ASI_TOO_MANY",
                    {"total_improvements": total, "max_allowed": max_points},
                )
            )

    if errors:
        return validation_failure(errors)
    return validation_success(choices)


def apply_level_up_choices(
    experience: ExperienceData,
    choices: LevelUpChoices,
) -> ValidationResult[ExperienceData]:
    """Confirm the character has the XP for the chosen level.

    Returns:
        Fresh experience data for the current XP, or a failure listing
        choice errors or ``INSUFFICIENT_XP_FOR_LEVEL``.
    """
    validation = validate_level_up_choices(choices)
    if not validation.success:
        return validation

    target_level = int(choices.level)
    required_xp = get_xp_for_level(target_level)
    if experience.current_xp < required_xp:
        return validation_failure(
            [
                validation_error(
                    "level",
                    f"Not enough experience points to reach level {target_level}",
                    "INSUFFICIENT_XP_FOR_LEVEL",
                    {
                        "current_xp": experience.current_xp,
                        "required_xp": required_xp,
                        "target_level": target_level,
                    },
                )
            ]
        )

    logger.info("Level-up choices applied", level=target_level)
    return validation_success(create_experience_data(experience.current_xp))


def get_experience_progress_summary(experience: ExperienceData) -> ExperienceProgressSummary:
    """Display summary of progress through the current level band."""
    band = experience.next_level_xp - experience.current_level_xp
    into_band = experience.current_xp - experience.current_level_xp
    percent = min(100.0, into_band / band * 100) if band > 0 else 100.0

    return ExperienceProgressSummary(
        level=experience.current_level,
        xp=experience.current_xp,
        xp_to_next=get_xp_to_next_level(experience.current_xp, experience.current_level),
        progress_percent=round(percent, 2),
        can_level_up=can_level_up(experience),
        levels_available=get_levels_available(experience),
    )


__all__ = [
    "calculate_level_from_xp",
    "get_xp_for_level",
    "get_xp_for_next_level",
    "get_xp_to_next_level",
    "get_xp_between_levels",
    "get_experience_milestones",
    "validate_experience_points",
    "validate_level",
    "validate_xp_level_consistency",
    "create_experience_data",
    "calculate_level_advancement",
    "add_experience",
    "set_experience",
    "can_level_up",
    "get_levels_available",
    "create_default_level_up_choices",
    "validate_level_up_choices",
    "apply_level_up_choices",
    "get_experience_progress_summary",
]
