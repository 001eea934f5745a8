"""Static Hollow Gear reference data: classes, archetypes, features and feats."""

from __future__ import annotations

from hollowgear.data.class_data import (
    ARCHETYPE_SELECTION_LEVELS,
    CLASS_DATA,
    get_all_classes,
    get_archetype,
    get_archetype_selection_level,
    get_class_archetypes,
    get_class_hit_die,
    get_class_info,
    get_class_primary_ability,
    get_classes_by_hit_die,
    get_classes_by_primary_ability,
    get_classes_by_psionics,
    get_classes_by_spellcasting,
    has_psionics,
    has_spellcasting,
    is_valid_class,
    resolve_class,
)
from hollowgear.data.class_features import build_feature, get_class_feature_table
from hollowgear.data.feats import HOLLOW_GEAR_FEATS, get_feat


__all__ = [
    "ARCHETYPE_SELECTION_LEVELS",
    "CLASS_DATA",
    "HOLLOW_GEAR_FEATS",
    "build_feature",
    "get_all_classes",
    "get_archetype",
    "get_archetype_selection_level",
    "get_class_archetypes",
    "get_class_feature_table",
    "get_class_hit_die",
    "get_class_info",
    "get_class_primary_ability",
    "get_classes_by_hit_die",
    "get_classes_by_primary_ability",
    "get_classes_by_psionics",
    "get_classes_by_spellcasting",
    "get_feat",
    "has_psionics",
    "has_spellcasting",
    "is_valid_class",
    "resolve_class",
]
