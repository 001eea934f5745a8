"""Level-based feature acquisition."""

from __future__ import annotations

from collections.abc import Iterable

from hollowgear.core.logging import get_logger
from hollowgear.data.class_features import get_class_feature_table
from hollowgear.models.classes import CharacterClass, ClassArchetype, ClassFeature
from hollowgear.models.enums import HollowGearClass


logger = get_logger(__name__)


def get_class_features_for_level(
    class_name: HollowGearClass | str,
    level: int,
) -> list[ClassFeature]:
    """Base class features unlocked at or below ``level``.

    Raises:
        UnknownClassError: If ``class_name`` is not a Hollow Gear class.
    """
    table = get_class_feature_table(class_name, level)
    return [feature for feature in table if feature.level <= level]


def get_archetype_features_for_level(
    archetype: ClassArchetype,
    level: int,
) -> list[ClassFeature]:
    """Archetype features unlocked at or below ``level``."""
    return [feature for feature in archetype.features if feature.level <= level]


def get_all_features(classes: Iterable[CharacterClass]) -> list[ClassFeature]:
    """Every feature granted by a list of class entries.

    Features are listed per entry in input order, base class features
    first, then archetype features. Duplicates are kept.
    """
    features: list[ClassFeature] = []
    for character_class in classes:
        features.extend(
            get_class_features_for_level(character_class.class_name, character_class.level)
        )
        if character_class.archetype is not None:
            features.extend(
                get_archetype_features_for_level(character_class.archetype, character_class.level)
            )

    logger.debug("Features collected", count=len(features))
    return features


__all__ = [
    "get_class_features_for_level",
    "get_archetype_features_for_level",
    "get_all_features",
]
