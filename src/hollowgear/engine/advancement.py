"""Level-up options and validation of the choices a player makes.

Flow: :func:`get_advancement_options` lists what a level offers, the
player fills in :class:`AdvancementChoices`,
:func:`validate_advancement_choices` and
:func:`are_advancement_choices_complete` check them, and
:func:`apply_advancement_choices` applies ability score improvements.
"""

from __future__ import annotations

import math

from hollowgear.core.config import get_rules
from hollowgear.core.constants import ASI_LEVELS, MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL
from hollowgear.core.logging import get_logger
from hollowgear.core.validation import (
    ValidationIssue,
    ValidationResult,
    validation_error,
    validation_failure,
    validation_success,
)
from hollowgear.data.class_data import get_class_info, resolve_class
from hollowgear.data.feats import HOLLOW_GEAR_FEATS
from hollowgear.engine.features import get_class_features_for_level
from hollowgear.models.abilities import AbilityScores
from hollowgear.models.classes import ClassFeature
from hollowgear.models.enums import Ability, DieType, HitPointMethod, HollowGearClass
from hollowgear.models.progression import (
    AbilityScoreImprovement,
    AdvancementChoices,
    AdvancementChoicesSummary,
    AdvancementOptions,
    ArchetypeSelection,
    FeatChoice,
    FeatDefinition,
    LevelUpChoices,
    SkillChoice,
    SpellChoice,
)


logger = get_logger(__name__)

CLASS_ASI_LEVELS: dict[HollowGearClass, frozenset[int]] = {}
"""Extra ASI levels granted by individual classes. No class has any yet."""


def is_asi_level(level: int, class_name: HollowGearClass | str) -> bool:
    class_levels = CLASS_ASI_LEVELS.get(resolve_class(class_name), frozenset())
    return level in ASI_LEVELS or level in class_levels


# =============================================================================
# Options
# =============================================================================


def _feat_prerequisites_met(
    feat: FeatDefinition,
    level: int,
    ability_scores: AbilityScores | None,
) -> bool:
    if level < feat.min_level:
        return False
    if ability_scores is None:
        return True
    return all(
        ability_scores.get_score(ability) >= minimum
        for ability, minimum in feat.ability_requirements.items()
    )


def get_available_feats(
    level: int,
    class_name: HollowGearClass | str,
    ability_scores: AbilityScores | None = None,
) -> list[FeatChoice]:
    """Feats whose prerequisites the character meets.

    Without ability scores only level requirements are checked.
    """
    resolve_class(class_name)
    return [
        FeatChoice(
            feat_id=feat.feat_id,
            name=feat.name,
            description=feat.description,
            prerequisites_met=True,
        )
        for feat in HOLLOW_GEAR_FEATS.values()
        if _feat_prerequisites_met(feat, level, ability_scores)
    ]


def get_automatic_class_features(
    level: int,
    class_name: HollowGearClass | str,
) -> list[ClassFeature]:
    """Base class features gained exactly at ``level``."""
    return [
        feature
        for feature in get_class_features_for_level(class_name, level)
        if feature.level == level
    ]


def get_archetype_selection(
    level: int,
    class_name: HollowGearClass | str,
) -> ArchetypeSelection | None:
    info = get_class_info(class_name)
    if level != info.archetype_selection_level:
        return None
    return ArchetypeSelection(level=level, available_archetypes=info.archetypes)


def get_advancement_options(
    level: int,
    class_name: HollowGearClass | str,
    ability_scores: AbilityScores | None = None,
) -> AdvancementOptions:
    """Everything a level in ``class_name`` offers.

    Args:
        level: The class level being gained.
        class_name: The advancing class.
        ability_scores: Optional scores used to filter feats.

    Raises:
        UnknownClassError: If the class is unknown.
    """
    info = get_class_info(class_name)
    options = AdvancementOptions(
        level=level,
        advancing_class=info.class_name,
        ability_score_improvement_available=is_asi_level(level, info.class_name),
        available_feats=tuple(get_available_feats(level, info.class_name, ability_scores)),
        automatic_class_features=tuple(get_automatic_class_features(level, info.class_name)),
        archetype_selection=get_archetype_selection(level, info.class_name),
        hit_die=info.hit_die.sides,
    )
    logger.debug(
        "Advancement options built",
        level=level,
        class_name=info.class_name,
        asi=options.ability_score_improvement_available,
        archetype_selection=options.archetype_selection is not None,
    )
    return options


# =============================================================================
# Choices
# =============================================================================


def create_default_advancement_choices(
    level: int,
    class_name: HollowGearClass | str,
) -> AdvancementChoices:
    options = get_advancement_options(level, class_name)
    return AdvancementChoices(
        level=level,
        advancing_class=options.advancing_class,
        hit_points_gained=0,
        hit_point_method=HitPointMethod.AVERAGE,
        class_features=options.automatic_class_features,
    )


def create_advancement_choices_from_level_up(
    level_up: LevelUpChoices,
    class_name: HollowGearClass | str,
) -> AdvancementChoices:
    """Convert lightweight level-up choices into advancement choices.

    Spell ids become first-level :class:`SpellChoice` entries named after
    their id, and skills are attributed to the class.
    """
    advancing_class = resolve_class(class_name)
    return AdvancementChoices(
        level=int(level_up.level),
        advancing_class=advancing_class,
        hit_points_gained=int(level_up.hit_points_gained),
        hit_point_method=level_up.hit_point_method,
        ability_score_improvements=level_up.ability_score_improvements,
        spells_learned=[
            SpellChoice(spell_id=spell_id, name=spell_id, level=1, source_class=advancing_class)
            for spell_id in level_up.spells_learned
        ],
        skills_gained=[SkillChoice(skill=skill, source="class") for skill in level_up.skills_gained],
    )


def calculate_hit_points_gained(
    hit_die: DieType | int,
    method: HitPointMethod | str,
    rolled_value: int | None = None,
) -> ValidationResult[int]:
    """Hit points gained for one level.

    Average is ``ceil((die + 1) / 2)``, so a d6 gives 4 and a d12 gives 7.
    Rolled values must fall within the die.
    """
    sides = hit_die.sides if isinstance(hit_die, DieType) else hit_die

    if method == HitPointMethod.AVERAGE:
        return validation_success(math.ceil((sides + 1) / 2))

    if method == HitPointMethod.ROLLED:
        if rolled_value is None:
            return validation_failure(
                [
                    validation_error(
                        "rolled_value",
                        "Rolled value required when using rolled method",
                        "MISSING_ROLLED_VALUE",
                    )
                ]
            )
        if rolled_value < 1 or rolled_value > sides:
            return validation_failure(
                [
                    validation_error(
                        "rolled_value",
                        f"Rolled value must be between 1 and {sides}",
                        "INVALID_ROLLED_VALUE",
                        {"rolled_value": rolled_value, "hit_die": sides},
                    )
                ]
            )
        return validation_success(rolled_value)

    return validation_failure(
        [validation_error("method", "Invalid hit point calculation method", "INVALID_HP_METHOD")]
    )


def validate_advancement_choices(
    choices: AdvancementChoices,
) -> ValidationResult[AdvancementChoices]:
    """Validate one level's choices, reporting every problem found."""
    errors: list[ValidationIssue] = []
    max_points = get_rules().max_asi_points

    if not MIN_CHARACTER_LEVEL <= choices.level <= MAX_CHARACTER_LEVEL:
        errors.append(
            validation_error(
                "level",
                f"Level must be between {MIN_CHARACTER_LEVEL} and {MAX_CHARACTER_LEVEL}",
                "INVALID_LEVEL_RANGE",
            )
        )

    if choices.hit_points_gained < 0:
        errors.append(
            validation_error(
                "hit_points_gained",
                "Hit points gained cannot be negative",
                "INVALID_HP_GAIN",
            )
        )

    improvements = choices.ability_score_improvements
    if improvements is not None:
        total = sum(asi.improvement for asi in improvements)
        if total > max_points:
            errors.append(
                validation_error(
                    "ability_score_improvements",
                    f"Cannot improve ability scores by more than {max_points} points total",
                    "INVALID_ASI_TOTAL",
                    {"total_improvements": total, "max_allowed": max_points},
                )
            )
        abilities = [asi.ability for asi in improvements]
        if len(abilities) != len(set(abilities)):
            errors.append(
                validation_error(
                    "ability_score_improvements",
                    "Cannot improve the same ability score multiple times",
                    "DUPLICATE_ASI",
                )
            )

    if improvements is not None and choices.feat_selected is not None:
        errors.append(
            validation_error(
                "feat_selected",
                "Cannot select both ability score improvements and a feat",
                "ASI_AND_FEAT_CONFLICT",
            )
        )

    if choices.feat_selected is not None and not choices.feat_selected.prerequisites_met:
        errors.append(
            validation_error(
                "feat_selected",
                f"Prerequisites not met for feat: {choices.feat_selected.name}",
                "FEAT_PREREQUISITES_NOT_MET",
                {"feat_id": choices.feat_selected.feat_id},
            )
        )

    if errors:
        return validation_failure(errors)
    return validation_success(choices)


def apply_ability_score_improvements(
    scores: AbilityScores,
    improvements: list[AbilityScoreImprovement],
) -> ValidationResult[AbilityScores]:
    """Add improvements to ability scores.

    A score pushed past the cap is reported, never clamped; the failure
    lists one error per offending ability.
    """
    cap = get_rules().ability_score_cap
    errors: list[ValidationIssue] = []
    updates: dict[Ability, int] = {}

    for improvement in improvements:
        current = updates.get(improvement.ability, scores.get_score(improvement.ability))
        new_score = current + improvement.improvement
        if new_score > cap:
            errors.append(
                validation_error(
                    "ability_score_improvements",
                    f"{improvement.ability.value} cannot exceed {cap} (would be {new_score})",
                    "ABILITY_SCORE_MAX_EXCEEDED",
                    {"ability": improvement.ability.value, "new_score": new_score, "cap": cap},
                )
            )
        else:
            updates[improvement.ability] = new_score

    if errors:
        return validation_failure(errors)
    return validation_success(scores.with_scores(updates))


def are_advancement_choices_complete(
    choices: AdvancementChoices,
    options: AdvancementOptions,
) -> ValidationResult[bool]:
    """Check that every decision ``options`` requires has been made."""
    errors: list[ValidationIssue] = []

    if choices.hit_points_gained == 0:
        errors.append(
            validation_error(
                "hit_points_gained",
                "Hit points must be determined before applying advancement",
                "MISSING_HIT_POINTS",
            )
        )

    if (
        options.ability_score_improvement_available
        and choices.ability_score_improvements is None
        and choices.feat_selected is None
    ):
        errors.append(
            validation_error(
                "advancement",
                "Must select either ability score improvements or a feat",
                "MISSING_ASI_OR_FEAT",
            )
        )

    if options.archetype_selection is not None and choices.archetype_selected is None:
        errors.append(
            validation_error(
                "archetype_selected",
                "Must select an archetype at this level",
                "MISSING_ARCHETYPE_SELECTION",
            )
        )

    made = choices.class_specific_choices or {}
    for feature_choice in options.choice_class_features:
        if not made.get(feature_choice.feature_id):
            errors.append(
                validation_error(
                    "class_specific_choices",
                    f"Must make choice for class feature: {feature_choice.feature_id}",
                    "MISSING_CLASS_FEATURE_CHOICE",
                    {"feature_id": feature_choice.feature_id},
                )
            )

    if errors:
        return validation_failure(errors)
    return validation_success(True)


def apply_advancement_choices(
    scores: AbilityScores,
    choices: AdvancementChoices,
) -> ValidationResult[tuple[AbilityScores, AdvancementChoices]]:
    """Validate choices and apply their ability score improvements.

    Returns:
        Success with the new scores and a copy of the choices marked
        applied, or the validation failure.
    """
    validation = validate_advancement_choices(choices)
    if not validation.success:
        return validation

    new_scores = scores
    if choices.ability_score_improvements:
        applied = apply_ability_score_improvements(scores, choices.ability_score_improvements)
        if not applied.success:
            return applied
        new_scores = applied.data

    logger.info(
        "Advancement applied",
        level=choices.level,
        class_name=choices.advancing_class,
        hit_points_gained=choices.hit_points_gained,
        feat=choices.feat_selected.feat_id if choices.feat_selected else None,
    )
    return validation_success((new_scores, choices.model_copy(update={"applied": True})))


def get_advancement_choices_summary(choices: AdvancementChoices) -> AdvancementChoicesSummary:
    return AdvancementChoicesSummary(
        level=choices.level,
        class_name=choices.advancing_class.value,
        hit_points_gained=choices.hit_points_gained,
        ability_improvements=[
            f"{asi.ability.value} +{asi.improvement}"
            for asi in choices.ability_score_improvements or []
        ],
        feat_selected=choices.feat_selected.name if choices.feat_selected else None,
        archetype_selected=choices.archetype_selected.name if choices.archetype_selected else None,
        spells_learned=len(choices.spells_learned or []),
        skills_gained=len(choices.skills_gained or []),
        is_complete=choices.applied,
    )


__all__ = [
    "CLASS_ASI_LEVELS",
    "is_asi_level",
    "get_available_feats",
    "get_automatic_class_features",
    "get_archetype_selection",
    "get_advancement_options",
    "create_default_advancement_choices",
    "create_advancement_choices_from_level_up",
    "calculate_hit_points_gained",
    "validate_advancement_choices",
    "apply_ability_score_improvements",
    "are_advancement_choices_complete",
    "apply_advancement_choices",
    "get_advancement_choices_summary",
]
