"""Hollow Gear - character progression engine for the Hollow Gear RPG.

Computes what a character's class levels grant them: features, class
resources, multiclass spellcasting, experience and level-up state,
per-level advancement choices and psionic state.

Everything is a pure function over frozen pydantic models. Operations
that change state return a new value; rule violations come back as
:class:`~hollowgear.core.validation.ValidationResult` failures, while
programming errors raise :class:`~hollowgear.core.exceptions.HollowGearError`
subclasses.

Example:
    >>> from hollowgear import AbilityScores, create_character_class, create_character_progression
    >>>
    >>> scores = AbilityScores(intelligence=16, wisdom=13)
    >>> mindweaver = create_character_class("mindweaver", 5, archetype_id="path_of_echo")
    >>> progression = create_character_progression([mindweaver], scores)
    >>> progression.proficiency_bonus
    3

Modules:
    core: Configuration, logging, exceptions and validation results.
    models: Pydantic V2 schemas for classes, progression and psionics.
    data: Static class, archetype, feature and feat tables.
    engine: Resource, feature, multiclass, experience and advancement rules.
    psionics: AFP, focus, overload, surges and signatures.
"""

from __future__ import annotations

# Core
from hollowgear.core.config import Settings, get_settings
from hollowgear.core.exceptions import HollowGearError
from hollowgear.core.logging import configure_logging, get_logger
from hollowgear.core.validation import ValidationIssue, ValidationResult

# Models
from hollowgear.models import (
    Ability,
    AbilityScores,
    CharacterClass,
    CharacterProgression,
    ExperienceData,
    HollowGearClass,
    PsionicData,
    ResourcePool,
)

# Engine
from hollowgear.engine import (
    add_experience,
    apply_advancement_choices,
    apply_level_up_choices,
    calculate_proficiency_bonus,
    create_character_class,
    create_character_progression,
    create_experience_data,
    get_advancement_options,
)

# Psionics
from hollowgear.psionics import create_psionic_data, rest_psionic_data


__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "Settings",
    "get_settings",
    "HollowGearError",
    "configure_logging",
    "get_logger",
    "ValidationIssue",
    "ValidationResult",
    # Models
    "Ability",
    "AbilityScores",
    "CharacterClass",
    "CharacterProgression",
    "ExperienceData",
    "HollowGearClass",
    "PsionicData",
    "ResourcePool",
    # Engine
    "calculate_proficiency_bonus",
    "create_character_class",
    "create_character_progression",
    "create_experience_data",
    "add_experience",
    "apply_level_up_choices",
    "get_advancement_options",
    "apply_advancement_choices",
    # Psionics
    "create_psionic_data",
    "rest_psionic_data",
]
