"""Rules constants for the Hollow Gear progression engine.

Tables that never vary by configuration live here: the XP threshold table,
the combined spell slot table, ASI levels and psionic thresholds.
"""

from __future__ import annotations

# =============================================================================
# Levels & Experience
# =============================================================================

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level."""

XP_THRESHOLDS: tuple[int, ...] = (
    0,
    300,
    900,
    2_700,
    6_500,
    14_000,
    23_000,
    34_000,
    48_000,
    64_000,
    85_000,
    100_000,
    120_000,
    140_000,
    165_000,
    195_000,
    225_000,
    265_000,
    305_000,
    355_000,
)
"""Cumulative XP required for levels 1 through 20 (index = level - 1)."""

MAX_LEVEL_XP = XP_THRESHOLDS[-1]
"""XP required for level 20."""

ASI_LEVELS: frozenset[int] = frozenset({4, 8, 12, 16, 19})
"""Levels at which every class gains an ability score improvement."""

# =============================================================================
# Ability Scores
# =============================================================================

MIN_ABILITY_SCORE = 1
"""Minimum ability score."""

MAX_ABILITY_SCORE = 30
"""Hard upper bound for any ability score."""

DEFAULT_ABILITY_SCORE = 10
"""Score assumed when none is supplied."""

MULTICLASS_PREREQUISITE_SCORE = 13
"""Minimum score in the gating ability to multiclass into a class."""

# =============================================================================
# Spellcasting
# =============================================================================

SPELL_SLOT_TABLE: tuple[tuple[int, ...], ...] = (
    (2, 0, 0, 0, 0, 0, 0, 0, 0),
    (3, 0, 0, 0, 0, 0, 0, 0, 0),
    (4, 2, 0, 0, 0, 0, 0, 0, 0),
    (4, 3, 0, 0, 0, 0, 0, 0, 0),
    (4, 3, 2, 0, 0, 0, 0, 0, 0),
    (4, 3, 3, 0, 0, 0, 0, 0, 0),
    (4, 3, 3, 1, 0, 0, 0, 0, 0),
    (4, 3, 3, 2, 0, 0, 0, 0, 0),
    (4, 3, 3, 3, 1, 0, 0, 0, 0),
    (4, 3, 3, 3, 2, 0, 0, 0, 0),
    (4, 3, 3, 3, 2, 1, 0, 0, 0),
    (4, 3, 3, 3, 2, 1, 0, 0, 0),
    (4, 3, 3, 3, 2, 1, 1, 0, 0),
    (4, 3, 3, 3, 2, 1, 1, 0, 0),
    (4, 3, 3, 3, 2, 1, 1, 1, 0),
    (4, 3, 3, 3, 2, 1, 1, 1, 0),
    (4, 3, 3, 3, 2, 1, 1, 1, 1),
    (4, 3, 3, 3, 3, 1, 1, 1, 1),
    (4, 3, 3, 3, 3, 2, 1, 1, 1),
    (4, 3, 3, 3, 3, 2, 2, 1, 1),
)
"""Slots per spell level (1st..9th) for caster levels 1 through 20."""

# =============================================================================
# Psionics
# =============================================================================

MIN_AFP = 2
"""Floor for any single class's Aether Flux Point maximum."""

OVERLOAD_BASE_DC = 12
"""Save DC for an overload before the excess AFP is added."""

OVERLOAD_RECOVERY_MINUTES_PER_AFP = 10
"""Recovery minutes per AFP spent beyond the safe limit."""

MIN_CONCENTRATION_DC = 10
"""Floor for a concentration save DC."""

SIGNATURE_DETECTABILITY_RANGE = 30
"""Base range in feet at which a psionic signature can be sensed."""

FOCUS_LIMIT_THRESHOLDS: tuple[tuple[int, int], ...] = (
    (10, 3),
    (6, 2),
    (1, 1),
)
"""(minimum level, focus limit) pairs, highest level first."""


__all__ = [
    # Levels
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "XP_THRESHOLDS",
    "MAX_LEVEL_XP",
    "ASI_LEVELS",
    # Ability scores
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "DEFAULT_ABILITY_SCORE",
    "MULTICLASS_PREREQUISITE_SCORE",
    # Spellcasting
    "SPELL_SLOT_TABLE",
    # Psionics
    "MIN_AFP",
    "OVERLOAD_BASE_DC",
    "OVERLOAD_RECOVERY_MINUTES_PER_AFP",
    "MIN_CONCENTRATION_DC",
    "SIGNATURE_DETECTABILITY_RANGE",
    "FOCUS_LIMIT_THRESHOLDS",
]
