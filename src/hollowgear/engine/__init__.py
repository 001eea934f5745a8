"""Rules engine for Hollow Gear character progression.

Submodules:
    resources: Proficiency bonus and class resource maximums
    features: Level-based class and archetype feature acquisition
    multiclass: Prerequisites, combined spellcasting, progression assembly
    experience: XP thresholds and the level-up state machine
    advancement: Per-level choices (ASI, feats, archetype, hit points)
    dice: Dice rolling through the d20 library

Example:
    >>> from hollowgear.engine import create_character_class, create_character_progression
    >>>
    >>> classes = [create_character_class("arcanist", 3), create_character_class("templar", 4)]
    >>> progression = create_character_progression(classes)
    >>> progression.total_level, progression.combined_spellcasting.caster_level
    (7, 5)
"""

from __future__ import annotations

# =============================================================================
# Dice Rolling
# =============================================================================
from hollowgear.engine.dice import (
    DiceExpression,
    DiceRoller,
    get_default_roller,
    roll,
)

# =============================================================================
# Resources & Features
# =============================================================================
from hollowgear.engine.resources import (
    calculate_proficiency_bonus,
    calculate_resource_maximum,
    calculate_resource_pools,
)
from hollowgear.engine.features import (
    get_all_features,
    get_archetype_features_for_level,
    get_class_features_for_level,
)

# =============================================================================
# Multiclassing
# =============================================================================
from hollowgear.engine.multiclass import (
    calculate_combined_spellcasting,
    calculate_spell_slots,
    calculate_total_level,
    create_character_class,
    create_character_progression,
    get_multiclass_prerequisites,
    meets_multiclass_prerequisites,
)

# =============================================================================
# Experience
# =============================================================================
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

# =============================================================================
# Advancement
# =============================================================================
from hollowgear.engine.advancement import (
    CLASS_ASI_LEVELS,
    apply_ability_score_improvements,
    apply_advancement_choices,
    are_advancement_choices_complete,
    calculate_hit_points_gained,
    create_advancement_choices_from_level_up,
    create_default_advancement_choices,
    get_advancement_choices_summary,
    get_advancement_options,
    get_archetype_selection,
    get_automatic_class_features,
    get_available_feats,
    is_asi_level,
    validate_advancement_choices,
)


__all__ = [
    # Dice
    "DiceExpression",
    "DiceRoller",
    "get_default_roller",
    "roll",
    # Resources & features
    "calculate_proficiency_bonus",
    "calculate_resource_maximum",
    "calculate_resource_pools",
    "get_class_features_for_level",
    "get_archetype_features_for_level",
    "get_all_features",
    # Multiclassing
    "calculate_total_level",
    "get_multiclass_prerequisites",
    "meets_multiclass_prerequisites",
    "calculate_spell_slots",
    "calculate_combined_spellcasting",
    "create_character_class",
    "create_character_progression",
    # Experience
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
    # Advancement
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
