"""Overload aftermath, psionic surges and psionic signatures.

:mod:`hollowgear.psionics.flux` decides whether a manifestation
overloads; this module tracks what follows: recovery time, accumulated
feedback, the once-per-rest surge and the signature left behind.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta
from types import MappingProxyType

from hollowgear.core.config import get_rules
from hollowgear.core.constants import OVERLOAD_RECOVERY_MINUTES_PER_AFP
from hollowgear.core.logging import get_logger
from hollowgear.models.enums import EmotionalState, RestType, SignatureIntensity
from hollowgear.models.progression import utc_now
from hollowgear.models.psionics import (
    OverloadCheck,
    OverloadRecoveryState,
    OverloadState,
    PsionicFeedbackEffect,
    PsionicSignature,
    PsionicSurgeState,
    RecoveryCheck,
    SignatureManifestation,
)


logger = get_logger(__name__)


# =============================================================================
# Signatures
# =============================================================================

SIGNATURE_MANIFESTATIONS: MappingProxyType[EmotionalState, SignatureManifestation] = MappingProxyType(
    {
        EmotionalState.RAGE: SignatureManifestation(
            visual="Red flickers of heat and vibration",
            auditory="Low rumbling and crackling sounds",
            emotional="Waves of anger and aggression",
            intensity=SignatureIntensity.STRONG,
        ),
        EmotionalState.CALM: SignatureManifestation(
            visual="Cool, blue-hued resonance",
            auditory="Gentle humming and soft chimes",
            emotional="Peaceful, centering presence",
            intensity=SignatureIntensity.MODERATE,
        ),
        EmotionalState.CURIOSITY: SignatureManifestation(
            visual="Rapid, flickering pulses of yellow-white light",
            auditory="Metallic chimes and quick tonal shifts",
            emotional="Inquisitive, probing sensation",
            intensity=SignatureIntensity.MODERATE,
        ),
        EmotionalState.DESPAIR: SignatureManifestation(
            visual="Distorted shadows and faint afterimages",
            auditory="Hollow echoes and mournful tones",
            emotional="Heavy sadness and hopelessness",
            intensity=SignatureIntensity.STRONG,
        ),
        EmotionalState.JOY: SignatureManifestation(
            visual="Bright golden sparkles and warm glows",
            auditory="Musical harmonies and uplifting tones",
            emotional="Infectious happiness and energy",
            intensity=SignatureIntensity.MODERATE,
        ),
        EmotionalState.FEAR: SignatureManifestation(
            visual="Erratic purple flashes and trembling edges",
            auditory="Sharp discordant notes and whispers",
            emotional="Anxiety and unease",
            intensity=SignatureIntensity.STRONG,
        ),
        EmotionalState.DETERMINATION: SignatureManifestation(
            visual="Steady silver-white radiance",
            auditory="Rhythmic pulses and resolute tones",
            emotional="Unwavering resolve and focus",
            intensity=SignatureIntensity.STRONG,
        ),
        EmotionalState.CONFUSION: SignatureManifestation(
            visual="Swirling multicolored patterns",
            auditory="Overlapping tones and static",
            emotional="Disorientation and uncertainty",
            intensity=SignatureIntensity.FAINT,
        ),
    }
)


def create_psionic_signature(
    character_id: str,
    base_emotion: EmotionalState | str,
    power_level: int = 1,
) -> PsionicSignature:
    base_emotion = EmotionalState(base_emotion)
    return PsionicSignature(
        character_id=character_id,
        base_emotion=base_emotion,
        manifestation=SIGNATURE_MANIFESTATIONS[base_emotion],
        power_level=power_level,
    )


def calculate_signature_intensity(power_tier: int, power_level: int) -> SignatureIntensity:
    """Intensity of a manifestation from its tier and the manifester's power level.

    Example:
        >>> calculate_signature_intensity(1, 1), calculate_signature_intensity(5, 6)
        (<SignatureIntensity.FAINT: 'faint'>, <SignatureIntensity.OVERWHELMING: 'overwhelming'>)
    """
    score = power_tier + power_level // 3
    if score >= 7:
        return SignatureIntensity.OVERWHELMING
    if score >= 5:
        return SignatureIntensity.STRONG
    if score >= 3:
        return SignatureIntensity.MODERATE
    return SignatureIntensity.FAINT


def update_signature_after_power_use(
    signature: PsionicSignature,
    power_tier: int,
    current_emotion: EmotionalState | str | None = None,
    now: datetime | None = None,
) -> PsionicSignature:
    """Record a manifestation on the signature.

    If ``current_emotion`` differs from the base emotion, the signature
    takes on that emotion's manifestation. Either way the intensity is
    recalculated from ``power_tier``.
    """
    manifestation = signature.manifestation
    if current_emotion is not None:
        current_emotion = EmotionalState(current_emotion)
        if current_emotion is not signature.base_emotion:
            manifestation = SIGNATURE_MANIFESTATIONS[current_emotion]

    intensity = calculate_signature_intensity(power_tier, signature.power_level)
    return signature.model_copy(
        update={
            "last_used": now or utc_now(),
            "manifestation": manifestation.model_copy(update={"intensity": intensity}),
        }
    )


def calculate_signature_linger_duration(power_tier: int, power_level: int) -> int:
    """Minutes a signature stays detectable after a manifestation."""
    return power_tier * power_level * 10


def is_signature_detectable(
    signature: PsionicSignature,
    power_tier: int,
    now: datetime | None = None,
) -> bool:
    if signature.last_used is None:
        return False
    linger = timedelta(
        minutes=calculate_signature_linger_duration(power_tier, signature.power_level)
    )
    return (now or utc_now()) - signature.last_used < linger


# =============================================================================
# Psionic Surge
# =============================================================================


def create_initial_surge_state() -> PsionicSurgeState:
    return PsionicSurgeState()


def activate_psionic_surge(
    state: PsionicSurgeState,
    now: datetime | None = None,
) -> tuple[PsionicSurgeState, bool]:
    """Trigger the surge if it is available.

    A surge grants its bonus for the turn, leaves 1d4 psychic backlash
    pending and blocks AFP recovery until the next rest.

    Returns:
        ``(new_state, activated)``. An unavailable surge returns the
        state unchanged and ``False``.
    """
    if not state.available:
        return state, False

    surged = PsionicSurgeState(
        available=False,
        last_used=now or utc_now(),
        bonus_active=True,
        free_afp_used=False,
        backlash_pending=True,
        afp_recovery_blocked=True,
    )
    logger.info("Psionic surge activated")
    return surged, True


def end_psionic_surge_turn(state: PsionicSurgeState) -> PsionicSurgeState:
    """Close the surge turn; any pending backlash is considered applied."""
    return state.model_copy(update={"bonus_active": False, "backlash_pending": False})


def restore_psionic_surge(state: PsionicSurgeState, rest_type: RestType | str) -> PsionicSurgeState:
    """Either rest resets the surge to a fresh, available state."""
    RestType(rest_type)
    return PsionicSurgeState()


# =============================================================================
# Overload Recovery
# =============================================================================


def calculate_overload_recovery(
    excess_afp: int,
    now: datetime | None = None,
) -> OverloadRecoveryState:
    """Recovery window after an overload: 10 minutes per excess AFP."""
    start = now or utc_now()
    duration = excess_afp * OVERLOAD_RECOVERY_MINUTES_PER_AFP
    return OverloadRecoveryState(
        is_recovering=True,
        recovery_start_time=start,
        recovery_duration=duration,
        penalties_active=True,
        next_afp_recovery_time=start + timedelta(minutes=duration),
    )


def check_overload_recovery(
    recovery: OverloadRecoveryState,
    now: datetime | None = None,
) -> RecoveryCheck:
    """Check whether the recovery window has passed.

    Returns:
        A complete check carries the recovery with penalties lifted; an
        incomplete one carries no update.
    """
    elapsed = (now or utc_now()) - recovery.recovery_start_time
    if elapsed < timedelta(minutes=recovery.recovery_duration):
        return RecoveryCheck(is_complete=False)

    return RecoveryCheck(
        is_complete=True,
        updated_recovery=recovery.model_copy(
            update={"is_recovering": False, "penalties_active": False}
        ),
    )


def create_initial_overload_state() -> OverloadState:
    return OverloadState()


def apply_overload(
    state: OverloadState,
    check: OverloadCheck,
    now: datetime | None = None,
) -> OverloadState:
    """Fold an overload check into the running overload state.

    A check that did not overload leaves the state as it is. Otherwise the
    state takes the check's values and starts a new recovery window.
    Accumulated feedback is kept.
    """
    if not check.is_overloaded:
        return state

    timestamp = check.last_overload_time or now or utc_now()
    logger.info("Overload applied", excess_afp=check.excess_afp, save_dc=check.save_dc)
    return state.model_copy(
        update={
            "is_overloaded": True,
            "excess_afp": check.excess_afp,
            "save_dc": check.save_dc,
            "feedback_risk": check.feedback_risk,
            "last_overload_time": timestamp,
            "recovery": calculate_overload_recovery(check.excess_afp, now=timestamp),
        }
    )


# =============================================================================
# Feedback Bookkeeping
# =============================================================================


def accumulate_feedback_effects(
    current: Sequence[PsionicFeedbackEffect],
    new_effect: PsionicFeedbackEffect,
) -> tuple[PsionicFeedbackEffect, ...]:
    """Add a feedback effect to those already in play.

    Stackable effects pile up; any other effect replaces earlier effects
    of the same type.
    """
    if new_effect.stackable:
        return (*current, new_effect)
    return (*(e for e in current if e.type != new_effect.type), new_effect)


def clear_expired_feedback_effects(
    effects: Sequence[PsionicFeedbackEffect],
    minutes_elapsed: int,
) -> tuple[PsionicFeedbackEffect, ...]:
    """Drop non-persistent effects once their expiry window has passed."""
    if minutes_elapsed < get_rules().feedback_expiry_minutes:
        return tuple(effects)
    return tuple(e for e in effects if e.persistent)


__all__ = [
    "SIGNATURE_MANIFESTATIONS",
    "create_psionic_signature",
    "calculate_signature_intensity",
    "update_signature_after_power_use",
    "calculate_signature_linger_duration",
    "is_signature_detectable",
    "create_initial_surge_state",
    "activate_psionic_surge",
    "end_psionic_surge_turn",
    "restore_psionic_surge",
    "calculate_overload_recovery",
    "check_overload_recovery",
    "create_initial_overload_state",
    "apply_overload",
    "accumulate_feedback_effects",
    "clear_expired_feedback_effects",
]
