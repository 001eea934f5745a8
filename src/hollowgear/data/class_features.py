"""Base class feature tables.

Each class has one function returning its complete feature table for a
given class level; the level only matters where a feature's value scales
(shadehand sneak attack dice). Filtering by unlock level happens in
:mod:`hollowgear.engine.features`.
"""

from __future__ import annotations

import math

from hollowgear.core.exceptions import UnknownClassError
from hollowgear.models.classes import (
    ClassFeature,
    FeatureActivation,
    FeatureMechanics,
    FeatureUses,
)
from hollowgear.models.enums import FeatureMechanicType, HollowGearClass, RecoveryTiming


def build_feature(
    feature_id: str,
    name: str,
    level: int,
    description: str,
    mechanic: FeatureMechanicType,
    *effects: str,
    value: str | None = None,
    duration: str | None = None,
    range: str | None = None,
    cost: dict[str, int] | None = None,
    uses: int | None = None,
    restore_on: RecoveryTiming = RecoveryTiming.LONG,
) -> ClassFeature:
    """Build a :class:`ClassFeature` from flat arguments.

    Args:
        feature_id: Globally unique feature id.
        name: Display name.
        level: Unlock level.
        description: Rules text.
        mechanic: Activation category.
        *effects: Short effect summaries.
        value: Scaled value such as damage dice.
        duration: Effect duration.
        range: Effect range.
        cost: Resource cost per activation.
        uses: Maximum uses, if limited.
        restore_on: When limited uses come back.

    Returns:
        The feature.
    """
    activation = None
    if cost is not None:
        activation = FeatureActivation(action_type=mechanic, cost=cost)
    return ClassFeature(
        id=feature_id,
        name=name,
        level=level,
        description=description,
        mechanics=FeatureMechanics(
            type=mechanic,
            effects=effects,
            activation=activation,
            duration=duration,
            range=range,
            value=value,
        ),
        uses=(
            FeatureUses(maximum=uses, current=uses, restore_on=restore_on)
            if uses is not None
            else None
        ),
    )


# =============================================================================
# Per-Class Tables
# =============================================================================


def arcanist_features(level: int) -> list[ClassFeature]:
    return [
        build_feature(
            "arcanist_spellcasting",
            "Spellcasting",
            1,
            "You can cast spells using Aether Formulae.",
            FeatureMechanicType.PASSIVE,
            "Spellcasting ability",
        ),
        build_feature(
            "arcanist_tinker_savant",
            "Tinker Savant",
            1,
            "You gain proficiency in Tinker's Tools.",
            FeatureMechanicType.PASSIVE,
            "Tinker's Tools",
        ),
        build_feature(
            "arcanist_spell_recharge",
            "Spell Recharge",
            2,
            "Recover one spent slot after a short rest by burning 1 gear worth of materials.",
            FeatureMechanicType.ACTION,
            "Spell slot recovery",
            uses=1,
            restore_on=RecoveryTiming.SHORT,
        ),
    ]


def templar_features(level: int) -> list[ClassFeature]:
    return [
        build_feature(
            "templar_resonant_smite",
            "Resonant Smite",
            1,
            "Consume 1 Resonance Charge to deal +2d8 radiant or lightning damage.",
            FeatureMechanicType.FREE,
            "2d8 radiant or lightning",
            value="2d8",
            cost={"resonance_charge": 1},
        ),
        build_feature(
            "templar_faith_engine",
            "Faith Engine",
            1,
            "Your armor or weapon acts as a psionic focus.",
            FeatureMechanicType.PASSIVE,
            "Equipment as psionic focus",
        ),
        build_feature(
            "templar_spellcasting",
            "Spellcasting",
            2,
            "You can cast spells using Resonance Charges.",
            FeatureMechanicType.PASSIVE,
            "Spellcasting ability",
        ),
    ]


def tweaker_features(level: int) -> list[ClassFeature]:
    return [
        build_feature(
            "tweaker_adrenal_surge",
            "Adrenal Surge",
            1,
            "Bonus action, gain +2 STR and +10 ft speed for 1 minute (1/short rest).",
            FeatureMechanicType.BONUS_ACTION,
            "+2 STR",
            "+10 ft speed",
            duration="1 minute",
            uses=1,
            restore_on=RecoveryTiming.SHORT,
        ),
        build_feature(
            "tweaker_enhanced_metabolism",
            "Enhanced Metabolism",
            1,
            "You regain an extra 1d4 HP whenever you consume a healing effect.",
            FeatureMechanicType.PASSIVE,
            "Extra healing",
            value="1d4",
        ),
    ]


def shadehand_features(level: int) -> list[ClassFeature]:
    sneak_attack_dice = f"{math.ceil(level / 2)}d6"
    return [
        build_feature(
            "shadehand_sneak_attack",
            "Sneak Attack",
            1,
            "Deal extra damage when you have advantage or an ally is adjacent to your target.",
            FeatureMechanicType.PASSIVE,
            f"{sneak_attack_dice} extra damage",
            value=sneak_attack_dice,
        ),
        build_feature(
            "shadehand_silent_tools",
            "Silent Tools",
            1,
            "You have proficiency with Thieves' Tools and Disguise Kit.",
            FeatureMechanicType.PASSIVE,
            "Thieves' Tools, Disguise Kit",
        ),
    ]


def vanguard_features(level: int) -> list[ClassFeature]:
    return [
        build_feature(
            "vanguard_defensive_stance",
            "Defensive Stance",
            1,
            "Add +2 AC when you take the Dodge action.",
            FeatureMechanicType.PASSIVE,
            "+2 AC while dodging",
        ),
        build_feature(
            "vanguard_steam_charge",
            "Steam Charge",
            1,
            "Dash as a bonus action; next melee attack deals +1d6 damage.",
            FeatureMechanicType.BONUS_ACTION,
            "Dash",
            "+1d6 on next melee attack",
            value="1d6",
        ),
    ]


def artifex_features(level: int) -> list[ClassFeature]:
    return [
        build_feature(
            "artifex_tinkers_expertise",
            "Tinker's Expertise",
            1,
            "Double proficiency in Tinker's Tools.",
            FeatureMechanicType.PASSIVE,
            "Expertise: Tinker's Tools",
        ),
        build_feature(
            "artifex_deploy_drone",
            "Deploy Drone",
            1,
            "Create a small construct familiar (AC 12, HP 10, range 60 ft).",
            FeatureMechanicType.ACTION,
            "Deploy construct drone",
            range="60 ft",
        ),
    ]


def mindweaver_features(level: int) -> list[ClassFeature]:
    return [
        build_feature(
            "mindweaver_aether_flux_pool",
            "Aether Flux Pool",
            1,
            "Used to manifest psionic powers.",
            FeatureMechanicType.PASSIVE,
            "AFP resource pool",
        ),
        build_feature(
            "mindweaver_telepathic_whispers",
            "Telepathic Whispers",
            1,
            "Communicate mentally within 30 ft.",
            FeatureMechanicType.PASSIVE,
            "Telepathic communication",
            range="30 ft",
        ),
        build_feature(
            "mindweaver_psionic_awareness",
            "Psionic Awareness",
            1,
            "Sense Aetheric signatures within 30 ft.",
            FeatureMechanicType.PASSIVE,
            "Detect psionic signatures",
            range="30 ft",
        ),
    ]


def get_class_feature_table(class_name: HollowGearClass | str, level: int) -> list[ClassFeature]:
    """Return the complete, unfiltered feature table of a class.

    Raises:
        UnknownClassError: If ``class_name`` is not a Hollow Gear class.
    """
    match class_name:
        case HollowGearClass.ARCANIST:
            return arcanist_features(level)
        case HollowGearClass.TEMPLAR:
            return templar_features(level)
        case HollowGearClass.TWEAKER:
            return tweaker_features(level)
        case HollowGearClass.SHADEHAND:
            return shadehand_features(level)
        case HollowGearClass.VANGUARD:
            return vanguard_features(level)
        case HollowGearClass.ARTIFEX:
            return artifex_features(level)
        case HollowGearClass.MINDWEAVER:
            return mindweaver_features(level)
        case _:
            raise UnknownClassError(
                f"No feature table for class {class_name!r}",
                class_name=str(class_name),
            )


__all__ = [
    "build_feature",
    "arcanist_features",
    "templar_features",
    "tweaker_features",
    "shadehand_features",
    "vanguard_features",
    "artifex_features",
    "mindweaver_features",
    "get_class_feature_table",
]
