"""Psionic focus: which powers a character is maintaining.

A character can hold as many focus-requiring powers as their focus limit
and at most one concentration power. Powers dropped for any reason other
than a voluntary release cause psychic backlash if they required focus.
"""

from __future__ import annotations

from datetime import datetime

from hollowgear.core.config import get_rules
from hollowgear.core.constants import FOCUS_LIMIT_THRESHOLDS, MIN_CONCENTRATION_DC
from hollowgear.core.exceptions import FocusLimitError
from hollowgear.core.logging import get_logger
from hollowgear.engine.dice import DiceRoller, get_default_roller
from hollowgear.models.enums import FocusBreakCause
from hollowgear.models.progression import utc_now
from hollowgear.models.psionics import (
    ElapsedTime,
    FocusBreak,
    FocusBreakResult,
    FocusUsage,
    MaintainCheck,
    MaintainedPower,
    PsionicFocusState,
    PsionicPower,
    TargetInfo,
    TimedDuration,
)


logger = get_logger(__name__)


def calculate_focus_limit(character_level: int) -> int:
    """Focus slots at a character level: 1, 2 from level 6, 3 from level 10."""
    for threshold, limit in FOCUS_LIMIT_THRESHOLDS:
        if character_level >= threshold:
            return limit
    return 1


def create_initial_focus_state(character_level: int) -> PsionicFocusState:
    return PsionicFocusState(focus_limit=calculate_focus_limit(character_level))


def _focus_used(state: PsionicFocusState) -> int:
    return sum(1 for maintained in state.maintained_powers if maintained.focus_required)


def _backlash_dice(backlash: bool) -> str | None:
    return get_rules().psychic_backlash_dice if backlash else None


# =============================================================================
# Adding & Removing
# =============================================================================


def can_maintain_additional_power(state: PsionicFocusState, power: PsionicPower) -> MaintainCheck:
    """Check whether ``power`` fits alongside what is already maintained."""
    used = _focus_used(state)
    if power.requires_focus and used >= state.focus_limit:
        return MaintainCheck(
            can_maintain=False,
            reason=f"Focus limit reached ({used}/{state.focus_limit})",
        )
    if power.requires_concentration and state.concentration_power is not None:
        return MaintainCheck(can_maintain=False, reason="Already concentrating on another power")
    return MaintainCheck(can_maintain=True)


def add_maintained_power(
    state: PsionicFocusState,
    power: PsionicPower,
    amplification_level: int | None = None,
    target_info: TargetInfo | None = None,
    now: datetime | None = None,
) -> PsionicFocusState:
    """Start maintaining ``power``.

    Args:
        state: Current focus state.
        power: The power being manifested.
        amplification_level: Extra AFP spent amplifying it, if any.
        target_info: What the power affects.
        now: Start time; defaults to the current UTC time.

    Returns:
        New state with the power appended. A concentration power also
        takes the concentration slot.

    Raises:
        FocusLimitError: If :func:`can_maintain_additional_power` rejects it.
    """
    check = can_maintain_additional_power(state, power)
    if not check.can_maintain:
        raise FocusLimitError(
            f"Cannot maintain {power.id}: {check.reason}",
            power_id=power.id,
            focus_limit=state.focus_limit,
        )

    duration = power.duration
    maintained = MaintainedPower(
        power_id=power.id,
        power=power,
        start_time=now or utc_now(),
        duration=duration,
        remaining_duration=duration.amount if isinstance(duration, TimedDuration) else None,
        concentration_required=power.requires_concentration,
        focus_required=power.requires_focus,
        amplification_level=amplification_level,
        target_info=target_info,
    )

    update: dict[str, object] = {"maintained_powers": (*state.maintained_powers, maintained)}
    if power.requires_concentration:
        update["concentration_power"] = power.id

    logger.debug(
        "Power maintained",
        power_id=power.id,
        concentration=power.requires_concentration,
        focus=power.requires_focus,
    )
    return state.model_copy(update=update)


def remove_maintained_power(
    state: PsionicFocusState,
    power_id: str,
    cause: FocusBreakCause = FocusBreakCause.VOLUNTARY,
    now: datetime | None = None,
) -> tuple[PsionicFocusState, FocusBreakResult]:
    """Stop maintaining one power.

    Returns:
        ``(new_state, result)``. An unknown ``power_id`` gives the state
        back unchanged with ``result.success`` False.
    """
    removed = next((p for p in state.maintained_powers if p.power_id == power_id), None)
    if removed is None:
        return state, FocusBreakResult(success=False, cause=cause)

    backlash = cause is not FocusBreakCause.VOLUNTARY and removed.focus_required
    result = FocusBreakResult(
        success=True,
        psychic_backlash=backlash,
        backlash_damage=_backlash_dice(backlash),
        powers_dropped=(power_id,),
        cause=cause,
    )
    new_state = state.model_copy(
        update={
            "maintained_powers": tuple(
                p for p in state.maintained_powers if p.power_id != power_id
            ),
            "concentration_power": (
                None if state.concentration_power == power_id else state.concentration_power
            ),
            "last_focus_break": FocusBreak(
                time=now or utc_now(),
                cause=cause,
                powers_lost=(power_id,),
            ),
        }
    )
    logger.info("Maintained power dropped", power_id=power_id, cause=cause, backlash=backlash)
    return new_state, result


def break_all_maintained_powers(
    state: PsionicFocusState,
    cause: FocusBreakCause,
    now: datetime | None = None,
) -> tuple[PsionicFocusState, FocusBreakResult]:
    """Drop every maintained power at once.

    Backlash happens when the cause is not voluntary and at least one of
    the dropped powers required focus.
    """
    dropped = tuple(p.power_id for p in state.maintained_powers)
    backlash = cause is not FocusBreakCause.VOLUNTARY and _focus_used(state) > 0

    result = FocusBreakResult(
        success=True,
        psychic_backlash=backlash,
        backlash_damage=_backlash_dice(backlash),
        powers_dropped=dropped,
        cause=cause,
    )
    new_state = state.model_copy(
        update={
            "maintained_powers": (),
            "concentration_power": None,
            "last_focus_break": FocusBreak(time=now or utc_now(), cause=cause, powers_lost=dropped),
        }
    )
    logger.info("Focus broken", cause=cause, powers_dropped=len(dropped), backlash=backlash)
    return new_state, result


# =============================================================================
# Durations
# =============================================================================


def _tick(maintained: MaintainedPower, elapsed: ElapsedTime) -> MaintainedPower | None:
    duration = maintained.duration
    if not isinstance(duration, TimedDuration):
        # Concentration and sustained powers last until dropped.
        return None if duration == "instantaneous" else maintained

    # Only time in the power's own unit counts against it.
    reduction = getattr(elapsed, duration.unit)
    remaining = max(0, (maintained.remaining_duration or 0) - reduction)
    if remaining <= 0:
        return None
    return maintained.model_copy(update={"remaining_duration": remaining})


def update_maintained_powers(state: PsionicFocusState, elapsed: ElapsedTime) -> PsionicFocusState:
    """Advance maintained powers by ``elapsed`` and drop the expired ones.

    Timed powers lose only the elapsed amount in their own unit. A zero
    ``elapsed`` leaves the state untouched. If the concentration power
    expires, the concentration slot is freed.
    """
    if elapsed.is_zero:
        return state

    powers = tuple(
        ticked
        for ticked in (_tick(p, elapsed) for p in state.maintained_powers)
        if ticked is not None
    )
    concentration = state.concentration_power
    if concentration is not None and all(p.power_id != concentration for p in powers):
        concentration = None

    expired = len(state.maintained_powers) - len(powers)
    if expired:
        logger.debug("Maintained powers expired", count=expired)
    return state.model_copy(update={"maintained_powers": powers, "concentration_power": concentration})


# =============================================================================
# Concentration
# =============================================================================


def calculate_concentration_save(damage: int) -> int:
    """Constitution save DC to keep concentration after taking ``damage``."""
    return max(MIN_CONCENTRATION_DC, damage // 2)


def handle_concentration_failure(
    state: PsionicFocusState,
    now: datetime | None = None,
) -> tuple[PsionicFocusState, FocusBreakResult]:
    """Drop the concentration power after a failed save."""
    if state.concentration_power is None:
        return state, FocusBreakResult(success=False, cause=FocusBreakCause.FAILED_SAVE)
    return remove_maintained_power(
        state,
        state.concentration_power,
        FocusBreakCause.FAILED_SAVE,
        now=now,
    )


def get_current_focus_usage(state: PsionicFocusState) -> FocusUsage:
    used = _focus_used(state)
    return FocusUsage(
        used=used,
        limit=state.focus_limit,
        available=state.focus_limit - used,
        concentration_used=state.concentration_power is not None,
    )


def roll_backlash_damage(result: FocusBreakResult, roller: DiceRoller | None = None) -> int:
    """Roll the psychic backlash of a focus break, or 0 when there is none."""
    if not result.psychic_backlash or result.backlash_damage is None:
        return 0
    roller = roller or get_default_roller()
    damage = roller.roll(result.backlash_damage).total
    logger.info("Psychic backlash", damage=damage, cause=result.cause)
    return damage


__all__ = [
    "calculate_focus_limit",
    "create_initial_focus_state",
    "can_maintain_additional_power",
    "add_maintained_power",
    "remove_maintained_power",
    "break_all_maintained_powers",
    "update_maintained_powers",
    "calculate_concentration_save",
    "handle_concentration_failure",
    "get_current_focus_usage",
    "roll_backlash_damage",
]
