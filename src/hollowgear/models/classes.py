"""Class reference data and per-character class state.

Reference models (:class:`ClassInfo`, :class:`ClassArchetype`,
:class:`ClassFeature`) describe the rules and never change at runtime.
State models (:class:`CharacterClass`, :class:`ResourcePool`,
:class:`CharacterProgression`) are frozen as well; operations return new
instances instead of mutating.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hollowgear.core.constants import MAX_CHARACTER_LEVEL
from hollowgear.models.enums import (
    Ability,
    DieType,
    FeatureMechanicType,
    HollowGearClass,
    PsionicDiscipline,
    RecoveryTiming,
    ResourceType,
    ScalingType,
    SpellcastingProgression,
    SpellcastingType,
)


ClassLevel = Annotated[int, Field(ge=1, description="Levels held in a class")]


# =============================================================================
# Features
# =============================================================================


class FeatureActivation(BaseModel):
    """Action economy and resource cost of activating a feature."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    action_type: FeatureMechanicType
    cost: dict[str, int] | None = Field(
        default=None,
        description="Resource name to amount spent per activation",
    )


class FeatureMechanics(BaseModel):
    """Structured mechanics of a feature."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: FeatureMechanicType
    effects: tuple[str, ...] = ()
    activation: FeatureActivation | None = None
    duration: str | None = None
    range: str | None = None
    value: str | None = Field(
        default=None,
        description="Scaled value, e.g. sneak attack dice",
    )


class FeatureUses(BaseModel):
    """Limited uses of a feature."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    maximum: int = Field(ge=0)
    current: int = Field(ge=0)
    restore_on: RecoveryTiming


class ClassFeature(BaseModel):
    """A class or archetype feature.

    A feature is visible at character level ``L`` iff ``level <= L``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str
    level: int = Field(ge=1, le=MAX_CHARACTER_LEVEL)
    description: str = ""
    mechanics: FeatureMechanics | None = None
    uses: FeatureUses | None = None

    @property
    def has_uses(self) -> bool:
        """True when the feature is unlimited or has uses left."""
        if self.uses is None:
            return True
        return self.uses.current > 0

    def is_available_at(self, level: int) -> bool:
        return self.level <= level


class ClassArchetype(BaseModel):
    """A subclass specialization chosen at ``selection_level``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    parent_class: HollowGearClass
    selection_level: int = Field(ge=1, le=MAX_CHARACTER_LEVEL)
    description: str = ""
    features: tuple[ClassFeature, ...] = ()


# =============================================================================
# Resources
# =============================================================================


class ResourceScaling(BaseModel):
    """How a resource maximum scales with level.

    ``value`` is an integer step for linear, proficiency and ability
    scaling, or the per-level table for table scaling.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ScalingType
    value: int | tuple[int, ...]
    ability_modifier: Ability | None = None

    @model_validator(mode="after")
    def validate_value_shape(self) -> "ResourceScaling":
        """Table scaling takes a list; every other type takes a single step."""
        is_table = isinstance(self.value, tuple)
        if self.type is ScalingType.TABLE and not is_table:
            raise ValueError("table scaling requires a list of values")
        if self.type is not ScalingType.TABLE and is_table:
            raise ValueError(f"{self.type} scaling requires a single integer value")
        return self


class ClassResourceInfo(BaseModel):
    """Static description of a per-class resource."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ResourceType
    name: str
    description: str = ""
    base_amount: int = Field(ge=0)
    scaling: ResourceScaling
    recovery: RecoveryTiming


class ResourcePool(BaseModel):
    """Runtime pool of a spendable resource.

    ``temporary`` sits on top of ``current`` and is spent first.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    current: int = Field(ge=0)
    maximum: int = Field(ge=0)
    temporary: int = Field(default=0, ge=0)
    recovery: RecoveryTiming | None = None
    resource_type: ResourceType | None = None
    name: str | None = None

    @property
    def total(self) -> int:
        """Spendable amount including temporary points."""
        return self.current + self.temporary


# =============================================================================
# Spellcasting & Psionics Descriptors
# =============================================================================


class SpellcastingInfo(BaseModel):
    """Spellcasting descriptor of a class."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: SpellcastingType
    ability: Ability
    progression: SpellcastingProgression
    spells_known: tuple[int, ...] | None = None
    spell_slots: tuple[tuple[int, ...], ...] | None = None
    ritual_casting: bool = False
    focus: str | None = None


class PsionicsInfo(BaseModel):
    """Psionic descriptor of a class."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ability: Ability
    disciplines: tuple[PsionicDiscipline, ...]
    afp_progression: tuple[int, ...]
    powers_known: tuple[int, ...] | None = None
    focus_limit: int = Field(default=1, ge=1)

    @field_validator("afp_progression", mode="after")
    @classmethod
    def validate_progression_length(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if len(value) != MAX_CHARACTER_LEVEL:
            raise ValueError(
                f"afp_progression must have {MAX_CHARACTER_LEVEL} entries, got {len(value)}"
            )
        return value


# =============================================================================
# Class Info
# =============================================================================


class ClassInfo(BaseModel):
    """Static rules for one class.

    Attributes:
        class_name: Registry key of the class.
        display_name: Name shown to players.
        description: Flavor description.
        role: Party role summary.
        hit_die: The class hit die.
        primary_ability: Key ability of the class.
        saving_throw_proficiencies: Exactly two proficient saves.
        archetypes: At least two archetypes.
        spellcasting: Spellcasting descriptor, if the class casts spells.
        psionics: Psionic descriptor, if the class manifests powers.
        class_resources: Spendable resources the class grants.
        archetype_selection_level: Level at which an archetype is chosen.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    class_name: HollowGearClass
    display_name: str
    description: str = ""
    role: str = ""
    hit_die: DieType
    primary_ability: Ability
    saving_throw_proficiencies: tuple[Ability, ...]
    archetypes: tuple[ClassArchetype, ...]
    spellcasting: SpellcastingInfo | None = None
    psionics: PsionicsInfo | None = None
    class_resources: tuple[ClassResourceInfo, ...] = ()
    archetype_selection_level: int = Field(ge=1, le=MAX_CHARACTER_LEVEL)

    @field_validator("saving_throw_proficiencies", mode="after")
    @classmethod
    def validate_saving_throws(cls, value: tuple[Ability, ...]) -> tuple[Ability, ...]:
        if len(value) != 2 or len(set(value)) != 2:
            raise ValueError("a class has exactly two distinct saving throw proficiencies")
        return value

    @field_validator("archetypes", mode="after")
    @classmethod
    def validate_archetypes(
        cls, value: tuple[ClassArchetype, ...]
    ) -> tuple[ClassArchetype, ...]:
        if len(value) < 2:
            raise ValueError("a class offers at least two archetypes")
        return value

    @model_validator(mode="after")
    def validate_archetype_parents(self) -> "ClassInfo":
        """Every archetype must belong to this class."""
        for archetype in self.archetypes:
            if archetype.parent_class != self.class_name:
                raise ValueError(
                    f"archetype {archetype.id} belongs to {archetype.parent_class}, "
                    f"not {self.class_name}"
                )
        return self


# =============================================================================
# Character State
# =============================================================================


class CharacterClass(BaseModel):
    """Levels a character holds in one class."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    class_name: HollowGearClass
    level: ClassLevel
    hit_die: DieType
    primary_ability: Ability
    archetype: ClassArchetype | None = None
    spellcasting: SpellcastingInfo | None = None
    psionics: PsionicsInfo | None = None
    features: tuple[ClassFeature, ...] = ()


class CombinedSpellcasting(BaseModel):
    """Aggregate spellcasting across every casting class."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    caster_level: int = Field(ge=0)
    spell_slots: tuple[int, ...]
    spellcasting_abilities: dict[HollowGearClass, Ability]
    all_known_spells: tuple[str, ...] = ()


class MulticlassPrerequisites(BaseModel):
    """Ability minimums for multiclassing into a class."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    class_name: HollowGearClass
    abilities: dict[Ability, int]
    any_of: bool = Field(
        default=False,
        description="True when meeting any single listed ability suffices",
    )
    notes: str = ""


class CharacterProgression(BaseModel):
    """Everything derived from a character's class list."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    classes: tuple[CharacterClass, ...]
    total_level: int = Field(ge=0)
    proficiency_bonus: int
    all_features: tuple[ClassFeature, ...]
    combined_spellcasting: CombinedSpellcasting | None = None
    resource_pools: tuple[ResourcePool, ...] = ()


__all__ = [
    "ClassLevel",
    "FeatureActivation",
    "FeatureMechanics",
    "FeatureUses",
    "ClassFeature",
    "ClassArchetype",
    "ResourceScaling",
    "ClassResourceInfo",
    "ResourcePool",
    "SpellcastingInfo",
    "PsionicsInfo",
    "ClassInfo",
    "CharacterClass",
    "CombinedSpellcasting",
    "MulticlassPrerequisites",
    "CharacterProgression",
]
