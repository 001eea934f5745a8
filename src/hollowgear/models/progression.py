"""Experience and level-up advancement models.

Numeric fields that validators are expected to reject (negative hit
points, out-of-range levels, fractional XP) are left unconstrained here so
that the violation reaches the validator and is reported as a
:class:`~hollowgear.core.validation.ValidationIssue` instead of failing
model construction.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hollowgear.core.constants import MAX_LEVEL_XP
from hollowgear.core.validation import ValidationIssue
from hollowgear.models.classes import ClassArchetype, ClassFeature
from hollowgear.models.enums import Ability, HitPointMethod, HollowGearClass


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


# =============================================================================
# Experience
# =============================================================================


class ExperienceData(BaseModel):
    """XP total and the level it implies.

    ``current_level`` is the unique level whose threshold is at or below
    ``current_xp`` while the next threshold is above it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    current_xp: int = Field(ge=0)
    current_level: int = Field(ge=1)
    next_level_xp: int
    current_level_xp: int
    max_level_xp: int = MAX_LEVEL_XP


class LevelAdvancement(BaseModel):
    """Outcome of granting XP to a character."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    from_level: int
    to_level: int
    xp_gained: int
    is_valid: bool
    errors: list[ValidationIssue] | None = None

    @property
    def levels_gained(self) -> int:
        return max(0, self.to_level - self.from_level)


class ExperienceMilestone(BaseModel):
    """XP threshold of one level."""

    model_config = ConfigDict(frozen=True)

    level: int
    xp: int


class ExperienceProgressSummary(BaseModel):
    """Display summary of a character's XP progress."""

    model_config = ConfigDict(frozen=True)

    level: int
    xp: int
    xp_to_next: int
    progress_percent: float
    can_level_up: bool
    levels_available: int


# =============================================================================
# Level-Up Choices
# =============================================================================


class AbilityScoreImprovement(BaseModel):
    """Points added to one ability during an ASI."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ability: Ability
    improvement: int


class ClassFeatureChoice(BaseModel):
    """A choice required by a class feature."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    feature_id: str
    choice: str = ""
    data: dict[str, Any] | None = None


class LevelUpChoices(BaseModel):
    """Lightweight record of the choices made when gaining a level."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: int | float
    hit_points_gained: int | float = 0
    hit_point_method: HitPointMethod = HitPointMethod.AVERAGE
    ability_score_improvements: list[AbilityScoreImprovement] | None = None
    feat_selected: str | None = None
    class_feature_choices: list[ClassFeatureChoice] = Field(default_factory=list)
    spells_learned: list[str] = Field(default_factory=list)
    skills_gained: list[str] = Field(default_factory=list)
    other_choices: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Advancement Choices
# =============================================================================


class FeatDefinition(BaseModel):
    """A feat and its prerequisites."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    feat_id: str
    name: str
    description: str = ""
    min_level: int = Field(default=1, ge=1)
    ability_requirements: dict[Ability, int] = Field(default_factory=dict)


class FeatChoice(BaseModel):
    """A feat offered to or selected by a character."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    feat_id: str
    name: str
    description: str = ""
    prerequisites_met: bool = True
    sub_choices: dict[str, Any] | None = None


class SpellChoice(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    spell_id: str
    name: str
    level: int = Field(ge=0, le=9)
    source_class: HollowGearClass
    replaces_spell: str | None = None


class SkillChoice(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    skill: str
    source: str
    expertise: bool = False


class ProficiencyChoice(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(pattern=r"^(tool|language|weapon|armor)$")
    name: str
    source: str


class ArchetypeSelection(BaseModel):
    """Archetypes offered at the class's selection level."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: int
    available_archetypes: tuple[ClassArchetype, ...]


class AdvancementChoices(BaseModel):
    """Everything decided when a character gains one level in a class."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: int
    advancing_class: HollowGearClass
    hit_points_gained: int = 0
    hit_point_method: HitPointMethod = HitPointMethod.AVERAGE
    ability_score_improvements: list[AbilityScoreImprovement] | None = None
    feat_selected: FeatChoice | None = None
    class_features: tuple[ClassFeature, ...] = ()
    archetype_selected: ClassArchetype | None = None
    spells_learned: list[SpellChoice] | None = None
    skills_gained: list[SkillChoice] | None = None
    proficiencies_gained: list[ProficiencyChoice] | None = None
    class_specific_choices: dict[str, Any] | None = None
    choices_made_at: datetime = Field(default_factory=utc_now)
    applied: bool = False


class AdvancementOptions(BaseModel):
    """Options open to a character gaining a level in a class."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: int
    advancing_class: HollowGearClass
    ability_score_improvement_available: bool
    available_feats: tuple[FeatChoice, ...] = ()
    automatic_class_features: tuple[ClassFeature, ...] = ()
    choice_class_features: tuple[ClassFeatureChoice, ...] = ()
    archetype_selection: ArchetypeSelection | None = None
    available_spells: tuple[SpellChoice, ...] = ()
    available_skills: tuple[SkillChoice, ...] = ()
    available_proficiencies: tuple[ProficiencyChoice, ...] = ()
    hit_die: int


class AdvancementChoicesSummary(BaseModel):
    """Display summary of one set of advancement choices."""

    model_config = ConfigDict(frozen=True)

    level: int
    class_name: str
    hit_points_gained: int
    ability_improvements: list[str]
    feat_selected: str | None = None
    archetype_selected: str | None = None
    spells_learned: int = 0
    skills_gained: int = 0
    is_complete: bool = False


__all__ = [
    "utc_now",
    "ExperienceData",
    "LevelAdvancement",
    "ExperienceMilestone",
    "ExperienceProgressSummary",
    "AbilityScoreImprovement",
    "ClassFeatureChoice",
    "LevelUpChoices",
    "FeatDefinition",
    "FeatChoice",
    "SpellChoice",
    "SkillChoice",
    "ProficiencyChoice",
    "ArchetypeSelection",
    "AdvancementChoices",
    "AdvancementOptions",
    "AdvancementChoicesSummary",
]
