"""Enumeration types for the Hollow Gear progression engine.

Every closed set of names used by the rules (abilities, classes, resource
kinds, psionic disciplines) is a ``StrEnum`` so values compare equal to the
plain strings found in serialized character records.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """The six ability scores."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Capitalized name, e.g. 'Intelligence'."""
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Three-letter abbreviation, e.g. 'INT'."""
        return self.name


class DieType(StrEnum):
    """Hit dice available to Hollow Gear classes."""

    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"

    @property
    def sides(self) -> int:
        """Number of faces on the die."""
        return int(self.value[1:])


class HollowGearClass(StrEnum):
    """The seven playable classes."""

    ARCANIST = "arcanist"
    TEMPLAR = "templar"
    TWEAKER = "tweaker"
    SHADEHAND = "shadehand"
    VANGUARD = "vanguard"
    ARTIFEX = "artifex"
    MINDWEAVER = "mindweaver"

    @property
    def display_name(self) -> str:
        """Capitalized class name."""
        return self.value.capitalize()


# =============================================================================
# Resources
# =============================================================================


class ResourceType(StrEnum):
    """Kinds of per-class spendable resources."""

    SPELL_SLOT = "spell_slot"
    RESONANCE_CHARGE = "resonance_charge"
    AFP = "afp"
    CUSTOM = "custom"


class ScalingType(StrEnum):
    """How a resource maximum grows with level."""

    LINEAR = "linear"
    TABLE = "table"
    PROFICIENCY_BONUS = "proficiency_bonus"
    ABILITY_MODIFIER = "ability_modifier"


class RecoveryTiming(StrEnum):
    """When an expended resource or feature use comes back."""

    SHORT = "short"
    LONG = "long"
    DAWN = "dawn"
    NEVER = "never"


class RestType(StrEnum):
    """Rest lengths."""

    SHORT = "short"
    LONG = "long"


# =============================================================================
# Spellcasting & Features
# =============================================================================


class SpellcastingType(StrEnum):
    """Spellcasting traditions."""

    ARCANIST = "arcanist"
    TEMPLAR = "templar"


class SpellcastingProgression(StrEnum):
    """Caster progression, used to weight multiclass caster level."""

    FULL = "full"
    HALF = "half"
    THIRD = "third"
    WARLOCK = "warlock"


class FeatureMechanicType(StrEnum):
    """Activation category of a class feature."""

    PASSIVE = "passive"
    ACTION = "action"
    BONUS_ACTION = "bonus_action"
    REACTION = "reaction"
    FREE = "free"
    RITUAL = "ritual"
    RESOURCE = "resource"


class HitPointMethod(StrEnum):
    """How hit points are determined on level-up."""

    AVERAGE = "average"
    ROLLED = "rolled"


# =============================================================================
# Psionics
# =============================================================================


class PsionicDiscipline(StrEnum):
    """The six psionic disciplines."""

    FLUX = "flux"
    ECHO = "echo"
    EIDOLON = "eidolon"
    EMPYRIC = "empyric"
    VEIL = "veil"
    KINESIS = "kinesis"


class PowerEffectType(StrEnum):
    """Broad category of a psionic power effect."""

    DAMAGE = "damage"
    HEALING = "healing"
    MOVEMENT = "movement"
    CONTROL = "control"
    UTILITY = "utility"
    DEFENSIVE = "defensive"
    MENTAL = "mental"
    ILLUSION = "illusion"


class FocusBreakCause(StrEnum):
    """Reasons a maintained power can be lost."""

    DAMAGE_TAKEN = "damage_taken"
    FAILED_SAVE = "failed_save"
    VOLUNTARY = "voluntary"
    OVERLOAD = "overload"
    UNCONSCIOUS = "unconscious"
    DEATH = "death"
    NEW_POWER_CONFLICT = "new_power_conflict"


class PsionicFeedbackType(StrEnum):
    """Outcomes of the overload feedback roll."""

    MINOR_HEADACHE = "minor_headache"
    STATIC_ECHO = "static_echo"
    NEURAL_SPARK = "neural_spark"
    AETHER_FLARE = "aether_flare"
    MINDFRACTURE = "mindfracture"
    COLLAPSE = "collapse"


class EmotionalState(StrEnum):
    """Emotions that color a psionic signature."""

    RAGE = "rage"
    CALM = "calm"
    CURIOSITY = "curiosity"
    DESPAIR = "despair"
    JOY = "joy"
    FEAR = "fear"
    DETERMINATION = "determination"
    CONFUSION = "confusion"


class SignatureIntensity(StrEnum):
    """How strongly a signature can be sensed."""

    FAINT = "faint"
    MODERATE = "moderate"
    STRONG = "strong"
    OVERWHELMING = "overwhelming"


__all__ = [
    "Ability",
    "DieType",
    "HollowGearClass",
    "ResourceType",
    "ScalingType",
    "RecoveryTiming",
    "RestType",
    "SpellcastingType",
    "SpellcastingProgression",
    "FeatureMechanicType",
    "HitPointMethod",
    "PsionicDiscipline",
    "PowerEffectType",
    "FocusBreakCause",
    "PsionicFeedbackType",
    "EmotionalState",
    "SignatureIntensity",
]
