"""Multiclass prerequisites, combined spellcasting and progression assembly.

:func:`create_character_progression` is the entry point most callers
want: it derives total level, proficiency bonus, features, combined
spellcasting and resource pools from a list of class entries.
"""

from __future__ import annotations

from collections.abc import Sequence

from hollowgear.core.constants import (
    MAX_CHARACTER_LEVEL,
    MULTICLASS_PREREQUISITE_SCORE,
    SPELL_SLOT_TABLE,
)
from hollowgear.core.exceptions import UnknownClassError
from hollowgear.core.logging import get_logger
from hollowgear.data.class_data import get_class_info, resolve_class
from hollowgear.engine.features import get_all_features, get_class_features_for_level
from hollowgear.engine.resources import calculate_proficiency_bonus, calculate_resource_pools
from hollowgear.models.abilities import AbilityScores
from hollowgear.models.classes import (
    CharacterClass,
    CharacterProgression,
    CombinedSpellcasting,
    MulticlassPrerequisites,
)
from hollowgear.models.enums import Ability, HollowGearClass, SpellcastingProgression


logger = get_logger(__name__)


_PREREQUISITE_ABILITIES: dict[HollowGearClass, tuple[Ability, ...]] = {
    HollowGearClass.ARCANIST: (Ability.INT,),
    HollowGearClass.TEMPLAR: (Ability.CHA,),
    HollowGearClass.TWEAKER: (Ability.CON,),
    HollowGearClass.SHADEHAND: (Ability.DEX,),
    HollowGearClass.VANGUARD: (Ability.STR,),
    HollowGearClass.ARTIFEX: (Ability.INT,),
    HollowGearClass.MINDWEAVER: (Ability.INT, Ability.WIS),
}


def calculate_total_level(classes: Sequence[CharacterClass]) -> int:
    return sum(character_class.level for character_class in classes)


# =============================================================================
# Prerequisites
# =============================================================================


def get_multiclass_prerequisites(class_name: HollowGearClass | str) -> MulticlassPrerequisites:
    """Ability minimums for taking a level in ``class_name``."""
    class_name = resolve_class(class_name)
    abilities = _PREREQUISITE_ABILITIES[class_name]
    any_of = class_name is HollowGearClass.MINDWEAVER
    return MulticlassPrerequisites(
        class_name=class_name,
        abilities={ability: MULTICLASS_PREREQUISITE_SCORE for ability in abilities},
        any_of=any_of,
        notes="Must have Intelligence 13 OR Wisdom 13" if any_of else "",
    )


def meets_multiclass_prerequisites(
    class_name: HollowGearClass | str,
    ability_scores: AbilityScores,
) -> bool:
    """Check whether ``ability_scores`` allow multiclassing into a class.

    Mindweaver accepts intelligence 13 or wisdom 13; every other class
    requires its single listed ability at 13.
    """
    prerequisites = get_multiclass_prerequisites(class_name)
    checks = (
        ability_scores.get_score(ability) >= minimum
        for ability, minimum in prerequisites.abilities.items()
    )
    return any(checks) if prerequisites.any_of else all(checks)


# =============================================================================
# Spellcasting
# =============================================================================


def calculate_spell_slots(caster_level: int) -> list[int]:
    """Slots per spell level for a combined caster level.

    A caster level of 0 has no slots. Other levels are clamped to 1-20.

    Example:
        >>> calculate_spell_slots(5)
        [4, 3, 2, 0, 0, 0, 0, 0, 0]
    """
    if caster_level == 0:
        return []
    clamped = min(max(caster_level, 1), MAX_CHARACTER_LEVEL)
    return list(SPELL_SLOT_TABLE[clamped - 1])


def _caster_level_contribution(progression: SpellcastingProgression, level: int) -> int:
    match progression:
        case SpellcastingProgression.FULL:
            return level
        case SpellcastingProgression.HALF:
            return level // 2
        case SpellcastingProgression.THIRD:
            return level // 3
        case _:
            return 0


def calculate_combined_spellcasting(
    classes: Sequence[CharacterClass],
) -> CombinedSpellcasting | None:
    """Combine every spellcasting class entry into one caster level.

    Returns:
        None when no entry casts spells; otherwise the combined caster
        level, its slot row and the casting ability of each class.
    """
    casters = [c for c in classes if c.spellcasting is not None]
    if not casters:
        return None

    caster_level = 0
    abilities: dict[HollowGearClass, Ability] = {}
    for character_class in casters:
        spellcasting = character_class.spellcasting
        caster_level += _caster_level_contribution(spellcasting.progression, character_class.level)
        abilities[character_class.class_name] = spellcasting.ability

    logger.debug("Combined caster level", caster_level=caster_level, casters=len(casters))
    return CombinedSpellcasting(
        caster_level=caster_level,
        spell_slots=tuple(calculate_spell_slots(caster_level)),
        spellcasting_abilities=abilities,
    )


# =============================================================================
# Assembly
# =============================================================================


def create_character_class(
    class_name: HollowGearClass | str,
    level: int,
    archetype_id: str | None = None,
) -> CharacterClass:
    """Build a class entry from the registry.

    Args:
        class_name: The class.
        level: Levels held in the class (>= 1).
        archetype_id: Optional archetype id; it must belong to the class.

    Raises:
        UnknownClassError: If the class is unknown, or the archetype is
            not one of the class's archetypes.
    """
    info = get_class_info(class_name)

    archetype = None
    if archetype_id is not None:
        archetype = next((a for a in info.archetypes if a.id == archetype_id), None)
        if archetype is None:
            raise UnknownClassError(
                f"Archetype {archetype_id!r} does not belong to {info.class_name}",
                class_name=info.class_name.value,
                details={"archetype_id": archetype_id},
            )

    return CharacterClass(
        class_name=info.class_name,
        level=level,
        hit_die=info.hit_die,
        primary_ability=info.primary_ability,
        archetype=archetype,
        spellcasting=info.spellcasting,
        psionics=info.psionics,
        features=tuple(get_class_features_for_level(info.class_name, level)),
    )


def create_character_progression(
    classes: Sequence[CharacterClass],
    ability_scores: AbilityScores | None = None,
) -> CharacterProgression:
    """Derive everything that follows from a character's class list."""
    total_level = calculate_total_level(classes)
    progression = CharacterProgression(
        classes=tuple(classes),
        total_level=total_level,
        proficiency_bonus=calculate_proficiency_bonus(total_level),
        all_features=tuple(get_all_features(classes)),
        combined_spellcasting=calculate_combined_spellcasting(classes),
        resource_pools=tuple(calculate_resource_pools(classes, ability_scores)),
    )
    logger.info(
        "Character progression created",
        total_level=total_level,
        classes=[c.class_name.value for c in classes],
        features=len(progression.all_features),
    )
    return progression


__all__ = [
    "calculate_total_level",
    "get_multiclass_prerequisites",
    "meets_multiclass_prerequisites",
    "calculate_spell_slots",
    "calculate_combined_spellcasting",
    "create_character_class",
    "create_character_progression",
]
