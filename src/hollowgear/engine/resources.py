"""Resource maximums and proficiency bonus.

Every class resource scales one of four ways (see :class:`ScalingType`).
Results are clamped, never rejected: a maximum below zero becomes zero.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from hollowgear.core.config import get_rules
from hollowgear.core.logging import get_logger
from hollowgear.data.class_data import get_class_info
from hollowgear.models.abilities import AbilityScores
from hollowgear.models.classes import CharacterClass, ClassResourceInfo, ResourcePool
from hollowgear.models.enums import ScalingType


logger = get_logger(__name__)


def calculate_proficiency_bonus(total_level: int) -> int:
    """Proficiency bonus for a total character level.

    ``ceil(level / 4) + 1`` with no upper clamp; levels at or below zero
    give the minimum bonus of 1.

    Example:
        >>> [calculate_proficiency_bonus(lv) for lv in (1, 5, 9, 13, 17, 21)]
        [2, 3, 4, 5, 6, 7]
    """
    if total_level <= 0:
        return 1
    return math.ceil(total_level / 4) + 1


def calculate_resource_maximum(
    resource: ClassResourceInfo,
    level: int,
    ability_modifier: int | None = None,
) -> int:
    """Maximum of a class resource at a class level.

    Args:
        resource: Static description of the resource.
        level: Levels held in the owning class.
        ability_modifier: Modifier of the resource's scaling ability. When
            omitted, ability-scaled resources use the configured
            placeholder modifier.

    Returns:
        The maximum, floored at 0.
    """
    scaling = resource.scaling
    maximum = resource.base_amount

    match scaling.type:
        case ScalingType.LINEAR:
            maximum += (level - 1) * scaling.value
        case ScalingType.TABLE:
            table = scaling.value
            if level < 1 or not table:
                entry = 0
            else:
                entry = table[min(level - 1, len(table) - 1)]
            # A missing or zero entry falls back to the base amount.
            maximum = entry or resource.base_amount
        case ScalingType.PROFICIENCY_BONUS:
            maximum += calculate_proficiency_bonus(level) * scaling.value
        case ScalingType.ABILITY_MODIFIER:
            if ability_modifier is None:
                ability_modifier = get_rules().ability_modifier_placeholder
            maximum += ability_modifier

    maximum = max(maximum, 0)
    logger.debug(
        "Resource maximum calculated",
        resource=resource.name,
        scaling=scaling.type,
        level=level,
        maximum=maximum,
    )
    return maximum


def calculate_resource_pools(
    classes: Iterable[CharacterClass],
    ability_scores: AbilityScores | None = None,
) -> list[ResourcePool]:
    """Build a full pool for every resource of every class entry.

    Args:
        classes: The character's class entries.
        ability_scores: Optional scores; when given, ability-scaled
            resources use the real modifier of their scaling ability.

    Returns:
        One pool per resource, in class order, each starting full.
    """
    pools: list[ResourcePool] = []
    for character_class in classes:
        info = get_class_info(character_class.class_name)
        for resource in info.class_resources:
            modifier = None
            ability = resource.scaling.ability_modifier
            if ability_scores is not None and ability is not None:
                modifier = ability_scores.get_modifier(ability)

            maximum = calculate_resource_maximum(resource, character_class.level, modifier)
            pools.append(
                ResourcePool(
                    current=maximum,
                    maximum=maximum,
                    temporary=0,
                    recovery=resource.recovery,
                    resource_type=resource.type,
                    name=resource.name,
                )
            )
    return pools


__all__ = [
    "calculate_proficiency_bonus",
    "calculate_resource_maximum",
    "calculate_resource_pools",
]
