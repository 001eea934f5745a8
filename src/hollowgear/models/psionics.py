"""Psionic powers and per-character psionic state.

All state models are frozen; the functions in :mod:`hollowgear.psionics`
return updated copies.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hollowgear.core.constants import SIGNATURE_DETECTABILITY_RANGE
from hollowgear.models.classes import ResourcePool
from hollowgear.models.enums import (
    Ability,
    EmotionalState,
    FocusBreakCause,
    PowerEffectType,
    PsionicDiscipline,
    PsionicFeedbackType,
    SignatureIntensity,
)


# =============================================================================
# Powers
# =============================================================================


class TimedDuration(BaseModel):
    """A duration measured in exactly one of rounds, minutes or hours."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    rounds: int | None = Field(default=None, ge=0)
    minutes: int | None = Field(default=None, ge=0)
    hours: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_single_unit(self) -> "TimedDuration":
        units = [u for u in (self.rounds, self.minutes, self.hours) if u is not None]
        if len(units) != 1:
            raise ValueError("a timed duration uses exactly one of rounds, minutes or hours")
        return self

    @property
    def unit(self) -> Literal["rounds", "minutes", "hours"]:
        if self.rounds is not None:
            return "rounds"
        if self.minutes is not None:
            return "minutes"
        return "hours"

    @property
    def amount(self) -> int:
        return getattr(self, self.unit)


PowerDuration = Literal["instantaneous", "concentration", "sustained"] | TimedDuration


class ElapsedTime(BaseModel):
    """Time passed since the last maintained-power update."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    rounds: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)

    @property
    def is_zero(self) -> bool:
        return self.rounds == 0 and self.minutes == 0 and self.hours == 0


class DamageRoll(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    dice: str
    type: str


class SavingThrow(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    ability: Ability
    on_success: Literal["half", "negates", "partial"]


class PowerEffect(BaseModel):
    """One mechanical effect of a power."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: PowerEffectType
    description: str
    damage: DamageRoll | None = None
    healing: str | None = None
    saving_throw: SavingThrow | None = None
    conditions: tuple[str, ...] = ()


class PowerScaling(BaseModel):
    """Bonus bought by amplifying a power with extra AFP."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    additional_afp: int = Field(ge=1)
    effect: Literal["damage", "range", "duration", "save_dc"]
    bonus: str


class PsionicPower(BaseModel):
    """A psionic power. ``afp_cost`` always equals ``tier``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    discipline: PsionicDiscipline
    tier: int = Field(ge=1, le=5)
    afp_cost: int = Field(ge=1)
    range: str
    duration: PowerDuration
    description: str = ""
    effects: tuple[PowerEffect, ...] = ()
    scaling_options: tuple[PowerScaling, ...] = ()
    requires_concentration: bool = False
    requires_focus: bool = False

    @model_validator(mode="after")
    def validate_cost_matches_tier(self) -> "PsionicPower":
        if self.afp_cost != self.tier:
            raise ValueError(f"power {self.id} costs {self.afp_cost} AFP but is tier {self.tier}")
        return self


# =============================================================================
# Focus
# =============================================================================


class TargetInfo(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    target_id: str | None = None
    target_name: str | None = None
    area: str | None = None


class MaintainedPower(BaseModel):
    """A power that is still in effect."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    power_id: str
    power: PsionicPower
    start_time: datetime
    duration: PowerDuration
    remaining_duration: int | None = None
    concentration_required: bool = False
    focus_required: bool = False
    amplification_level: int | None = None
    target_info: TargetInfo | None = None


class FocusBreak(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    time: datetime
    cause: FocusBreakCause
    powers_lost: tuple[str, ...]


class PsionicFocusState(BaseModel):
    """Maintained powers and the focus and concentration slots they occupy."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    focus_limit: int = Field(ge=1)
    maintained_powers: tuple[MaintainedPower, ...] = ()
    concentration_power: str | None = None
    last_focus_break: FocusBreak | None = None


class FocusBreakResult(BaseModel):
    """Outcome of dropping one or more maintained powers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool
    psychic_backlash: bool = False
    backlash_damage: str | None = None
    powers_dropped: tuple[str, ...] = ()
    cause: FocusBreakCause


class FocusUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    used: int
    limit: int
    available: int
    concentration_used: bool


class MaintainCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    can_maintain: bool
    reason: str | None = None


# =============================================================================
# Overload & Feedback
# =============================================================================


class AreaEffect(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    radius: int
    effect: str


class PsionicFeedbackEffect(BaseModel):
    """A feedback result from the overload table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: PsionicFeedbackType
    description: str
    damage: DamageRoll | None = None
    conditions: tuple[str, ...] = ()
    duration: str | None = None
    area_effect: AreaEffect | None = None
    stackable: bool = False
    persistent: bool = False


class OverloadCheck(BaseModel):
    """Result of checking a single expenditure against the safe limit."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_overloaded: bool
    excess_afp: int = Field(ge=0)
    save_dc: int = Field(ge=0)
    feedback_risk: bool
    last_overload_time: datetime | None = None


class OverloadRecoveryState(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    is_recovering: bool
    recovery_start_time: datetime
    recovery_duration: int = Field(ge=0, description="Minutes")
    penalties_active: bool
    next_afp_recovery_time: datetime | None = None


class OverloadState(BaseModel):
    """Current overload status including recovery and accumulated feedback."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_overloaded: bool = False
    excess_afp: int = Field(default=0, ge=0)
    save_dc: int = Field(default=0, ge=0)
    feedback_risk: bool = False
    last_overload_time: datetime | None = None
    recovery: OverloadRecoveryState | None = None
    accumulated_feedback: tuple[PsionicFeedbackEffect, ...] = ()


class RecoveryCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_complete: bool
    updated_recovery: OverloadRecoveryState | None = None


# =============================================================================
# Surge & Signature
# =============================================================================


class PsionicSurgeState(BaseModel):
    """Once-per-rest surge gate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    available: bool = True
    last_used: datetime | None = None
    bonus_active: bool = False
    free_afp_used: bool = False
    backlash_pending: bool = False
    afp_recovery_blocked: bool = False


class SignatureManifestation(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    visual: str
    auditory: str
    emotional: str
    intensity: SignatureIntensity


class PsionicSignature(BaseModel):
    """Detectable trace a character leaves when manifesting powers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    character_id: str
    base_emotion: EmotionalState
    manifestation: SignatureManifestation
    detectability_range: int = SIGNATURE_DETECTABILITY_RANGE
    last_used: datetime | None = None
    power_level: int = Field(default=1, ge=1)


# =============================================================================
# Aggregate
# =============================================================================


class AfpSpendResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    pool: ResourcePool
    remaining: int


class PsionicData(BaseModel):
    """All psionic state for one character."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    known_disciplines: tuple[PsionicDiscipline, ...] = ()
    known_powers: tuple[str, ...] = ()
    aether_flux_points: ResourcePool
    focus_state: PsionicFocusState
    overload_state: OverloadState = Field(default_factory=OverloadState)
    surge_state: PsionicSurgeState = Field(default_factory=PsionicSurgeState)
    signature: PsionicSignature
    psionic_level: int = Field(ge=1)
    primary_ability: Ability = Ability.INT

    @field_validator("primary_ability", mode="after")
    @classmethod
    def validate_primary_ability(cls, value: Ability) -> Ability:
        if value not in (Ability.INT, Ability.WIS):
            raise ValueError("psionic primary ability is intelligence or wisdom")
        return value


__all__ = [
    "TimedDuration",
    "PowerDuration",
    "ElapsedTime",
    "DamageRoll",
    "SavingThrow",
    "PowerEffect",
    "PowerScaling",
    "PsionicPower",
    "TargetInfo",
    "MaintainedPower",
    "FocusBreak",
    "PsionicFocusState",
    "FocusBreakResult",
    "FocusUsage",
    "MaintainCheck",
    "AreaEffect",
    "PsionicFeedbackEffect",
    "OverloadCheck",
    "OverloadRecoveryState",
    "OverloadState",
    "RecoveryCheck",
    "PsionicSurgeState",
    "SignatureManifestation",
    "PsionicSignature",
    "AfpSpendResult",
    "PsionicData",
]
