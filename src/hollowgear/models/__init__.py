"""Pydantic models for Hollow Gear rules data and character state."""

from __future__ import annotations

from hollowgear.models.abilities import AbilityScore, AbilityScores, calculate_modifier
from hollowgear.models.classes import (
    CharacterClass,
    CharacterProgression,
    ClassArchetype,
    ClassFeature,
    ClassInfo,
    ClassResourceInfo,
    CombinedSpellcasting,
    FeatureActivation,
    FeatureMechanics,
    FeatureUses,
    MulticlassPrerequisites,
    PsionicsInfo,
    ResourcePool,
    ResourceScaling,
    SpellcastingInfo,
)
from hollowgear.models.enums import (
    Ability,
    DieType,
    EmotionalState,
    FeatureMechanicType,
    FocusBreakCause,
    HitPointMethod,
    HollowGearClass,
    PowerEffectType,
    PsionicDiscipline,
    PsionicFeedbackType,
    RecoveryTiming,
    ResourceType,
    RestType,
    ScalingType,
    SignatureIntensity,
    SpellcastingProgression,
    SpellcastingType,
)
from hollowgear.models.progression import (
    AbilityScoreImprovement,
    AdvancementChoices,
    AdvancementChoicesSummary,
    AdvancementOptions,
    ArchetypeSelection,
    ClassFeatureChoice,
    ExperienceData,
    ExperienceMilestone,
    ExperienceProgressSummary,
    FeatChoice,
    FeatDefinition,
    LevelAdvancement,
    LevelUpChoices,
    ProficiencyChoice,
    SkillChoice,
    SpellChoice,
)
from hollowgear.models.psionics import (
    AfpSpendResult,
    ElapsedTime,
    FocusBreakResult,
    MaintainedPower,
    OverloadCheck,
    OverloadRecoveryState,
    OverloadState,
    PsionicData,
    PsionicFeedbackEffect,
    PsionicFocusState,
    PsionicPower,
    PsionicSignature,
    PsionicSurgeState,
    SignatureManifestation,
    TimedDuration,
)


__all__ = [
    # Abilities
    "AbilityScore",
    "AbilityScores",
    "calculate_modifier",
    # Enums
    "Ability",
    "DieType",
    "EmotionalState",
    "FeatureMechanicType",
    "FocusBreakCause",
    "HitPointMethod",
    "HollowGearClass",
    "PowerEffectType",
    "PsionicDiscipline",
    "PsionicFeedbackType",
    "RecoveryTiming",
    "ResourceType",
    "RestType",
    "ScalingType",
    "SignatureIntensity",
    "SpellcastingProgression",
    "SpellcastingType",
    # Classes
    "CharacterClass",
    "CharacterProgression",
    "ClassArchetype",
    "ClassFeature",
    "ClassInfo",
    "ClassResourceInfo",
    "CombinedSpellcasting",
    "FeatureActivation",
    "FeatureMechanics",
    "FeatureUses",
    "MulticlassPrerequisites",
    "PsionicsInfo",
    "ResourcePool",
    "ResourceScaling",
    "SpellcastingInfo",
    # Progression
    "AbilityScoreImprovement",
    "AdvancementChoices",
    "AdvancementChoicesSummary",
    "AdvancementOptions",
    "ArchetypeSelection",
    "ClassFeatureChoice",
    "ExperienceData",
    "ExperienceMilestone",
    "ExperienceProgressSummary",
    "FeatChoice",
    "FeatDefinition",
    "LevelAdvancement",
    "LevelUpChoices",
    "ProficiencyChoice",
    "SkillChoice",
    "SpellChoice",
    # Psionics
    "AfpSpendResult",
    "ElapsedTime",
    "FocusBreakResult",
    "MaintainedPower",
    "OverloadCheck",
    "OverloadRecoveryState",
    "OverloadState",
    "PsionicData",
    "PsionicFeedbackEffect",
    "PsionicFocusState",
    "PsionicPower",
    "PsionicSignature",
    "PsionicSurgeState",
    "SignatureManifestation",
    "TimedDuration",
]
