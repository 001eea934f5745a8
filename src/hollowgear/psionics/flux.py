"""Aether Flux Point pools, overload checks and the feedback table.

AFP pools are :class:`ResourcePool` values. Temporary points sit on top
of current points and are always spent first. Spending more AFP in one
manifestation than the character's level is an overload.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from types import MappingProxyType

from hollowgear.core.constants import MIN_AFP, OVERLOAD_BASE_DC
from hollowgear.core.exceptions import PsionicsError
from hollowgear.core.logging import get_logger
from hollowgear.engine.dice import DiceRoller, get_default_roller
from hollowgear.models.classes import ResourcePool
from hollowgear.models.enums import PsionicFeedbackType, RecoveryTiming, ResourceType, RestType
from hollowgear.models.progression import utc_now
from hollowgear.models.psionics import (
    AfpSpendResult,
    AreaEffect,
    DamageRoll,
    OverloadCheck,
    PsionicFeedbackEffect,
)


logger = get_logger(__name__)

AFP_POOL_NAME = "Aether Flux Points"


# =============================================================================
# Maximums
# =============================================================================


def calculate_maximum_afp(class_level: int, ability_modifier: int) -> int:
    """Maximum AFP for one psionic class: level plus modifier, at least 2.

    Example:
        >>> calculate_maximum_afp(1, -3)
        2
        >>> calculate_maximum_afp(5, 3)
        8
    """
    return max(MIN_AFP, class_level + ability_modifier)


def calculate_multiclass_afp(psionic_classes: Iterable[tuple[int, int]]) -> int:
    """Total AFP for several psionic classes.

    Args:
        psionic_classes: ``(class_level, ability_modifier)`` pairs. Each
            pair is floored at the minimum on its own before summing.
    """
    return sum(calculate_maximum_afp(level, modifier) for level, modifier in psionic_classes)


# =============================================================================
# Pool Operations
# =============================================================================


def create_resource_pool(maximum: int, current: int | None = None) -> ResourcePool:
    """A fresh AFP pool, full unless ``current`` is given."""
    return ResourcePool(
        current=maximum if current is None else current,
        maximum=maximum,
        temporary=0,
        recovery=RecoveryTiming.SHORT,
        resource_type=ResourceType.AFP,
        name=AFP_POOL_NAME,
    )


def get_total_afp(pool: ResourcePool) -> int:
    return pool.current + pool.temporary


def can_afford_power(pool: ResourcePool, afp_cost: int) -> bool:
    return get_total_afp(pool) >= afp_cost


def spend_afp(pool: ResourcePool, amount: int) -> AfpSpendResult:
    """Spend AFP, temporary points first.

    Args:
        pool: Pool to spend from.
        amount: Points to spend.

    Returns:
        On success the updated pool and what is left in it. When the pool
        cannot cover ``amount`` the result has ``success=False`` and
        carries the unchanged pool.

    Raises:
        PsionicsError: If ``amount`` is negative.
    """
    if amount < 0:
        raise PsionicsError(
            f"Cannot spend a negative amount of AFP: {amount}",
            details={"amount": amount},
        )

    available = get_total_afp(pool)
    if amount > available:
        logger.debug("AFP spend refused", amount=amount, available=available)
        return AfpSpendResult(success=False, pool=pool, remaining=available)

    from_temporary = min(amount, pool.temporary)
    updated = pool.model_copy(
        update={
            "temporary": pool.temporary - from_temporary,
            "current": pool.current - (amount - from_temporary),
        }
    )
    remaining = get_total_afp(updated)
    logger.debug("AFP spent", amount=amount, from_temporary=from_temporary, remaining=remaining)
    return AfpSpendResult(success=True, pool=updated, remaining=remaining)


def restore_afp(pool: ResourcePool, rest_type: RestType | str) -> ResourcePool:
    """Refill a pool after a rest.

    Both rests restore current AFP to the maximum. A long rest also
    clears temporary points.
    """
    rest_type = RestType(rest_type)
    temporary = 0 if rest_type is RestType.LONG else pool.temporary
    return pool.model_copy(update={"current": pool.maximum, "temporary": temporary})


def add_temporary_afp(pool: ResourcePool, amount: int) -> ResourcePool:
    return pool.model_copy(update={"temporary": pool.temporary + amount})


def get_afp_recovery_amount(pool: ResourcePool, rest_type: RestType | str) -> int:
    """Points a rest of ``rest_type`` would give back."""
    RestType(rest_type)
    return max(0, pool.maximum - pool.current)


def check_afp_fatigue(pool: ResourcePool) -> bool:
    """True when a psionic pool has been fully drained.

    A drained pool gives a level of fatigue until the next long rest. A
    pool whose maximum is zero never causes fatigue.
    """
    return pool.maximum > 0 and get_total_afp(pool) == 0


# =============================================================================
# Overload
# =============================================================================


def get_safe_afp_limit(character_level: int) -> int:
    """Most AFP a character can put into one manifestation without overloading."""
    return character_level


def check_overload_risk(
    afp_spent: int,
    character_level: int,
    max_afp: int,
    now: datetime | None = None,
) -> OverloadCheck:
    """Check a single expenditure against the safe limit.

    Args:
        afp_spent: AFP put into the manifestation.
        character_level: The manifester's level, which is the safe limit.
        max_afp: The manifester's pool maximum. Recorded for logging only.
        now: Timestamp for the overload; defaults to the current UTC time.

    Returns:
        The check. ``save_dc`` is ``12 + excess`` when overloaded, else 0.

    Example:
        >>> check = check_overload_risk(7, 5, 10)
        >>> check.excess_afp, check.save_dc
        (2, 14)
    """
    excess = max(0, afp_spent - get_safe_afp_limit(character_level))
    is_overloaded = excess > 0

    if not is_overloaded:
        return OverloadCheck(is_overloaded=False, excess_afp=0, save_dc=0, feedback_risk=False)

    check = OverloadCheck(
        is_overloaded=True,
        excess_afp=excess,
        save_dc=OVERLOAD_BASE_DC + excess,
        feedback_risk=True,
        last_overload_time=now or utc_now(),
    )
    logger.info(
        "Psionic overload",
        afp_spent=afp_spent,
        character_level=character_level,
        max_afp=max_afp,
        excess_afp=excess,
        save_dc=check.save_dc,
    )
    return check


# =============================================================================
# Feedback
# =============================================================================

FEEDBACK_TABLE: MappingProxyType[int, PsionicFeedbackEffect] = MappingProxyType(
    {
        1: PsionicFeedbackEffect(
            type=PsionicFeedbackType.MINOR_HEADACHE,
            description="Minor headache: disadvantage on next roll",
            conditions=("disadvantage_next_roll",),
        ),
        2: PsionicFeedbackEffect(
            type=PsionicFeedbackType.STATIC_ECHO,
            description="Static echo: random nearby device malfunctions",
            conditions=("device_malfunction",),
        ),
        3: PsionicFeedbackEffect(
            type=PsionicFeedbackType.NEURAL_SPARK,
            description="Neural spark: take 1d6 psychic damage",
            damage=DamageRoll(dice="1d6", type="psychic"),
            stackable=True,
        ),
        4: PsionicFeedbackEffect(
            type=PsionicFeedbackType.AETHER_FLARE,
            description="Aether flare: emit 10-ft light, all in area take 1d4 fire",
            damage=DamageRoll(dice="1d4", type="fire"),
            area_effect=AreaEffect(radius=10, effect="bright light and fire damage"),
            stackable=True,
        ),
        5: PsionicFeedbackEffect(
            type=PsionicFeedbackType.MINDFRACTURE,
            description="Mindfracture: lose concentration, drop active powers",
            conditions=("lose_concentration", "drop_active_powers"),
            persistent=True,
        ),
        6: PsionicFeedbackEffect(
            type=PsionicFeedbackType.COLLAPSE,
            description="Collapse: stunned until end of next turn",
            conditions=("stunned",),
            duration="end of next turn",
        ),
    }
)


def get_feedback_effect(roll: int) -> PsionicFeedbackEffect:
    """Look up the feedback for a d6 result.

    Raises:
        PsionicsError: If ``roll`` is not between 1 and 6.
    """
    try:
        return FEEDBACK_TABLE[roll]
    except KeyError:
        raise PsionicsError(
            f"Feedback roll must be between 1 and 6, got {roll}",
            details={"roll": roll},
        ) from None


def roll_psionic_feedback(roller: DiceRoller | None = None) -> PsionicFeedbackEffect:
    """Roll 1d6 on the feedback table."""
    roller = roller or get_default_roller()
    result = roller.roll("1d6").total
    effect = get_feedback_effect(result)
    logger.info("Psionic feedback rolled", roll=result, feedback=effect.type)
    return effect


__all__ = [
    "AFP_POOL_NAME",
    "calculate_maximum_afp",
    "calculate_multiclass_afp",
    "create_resource_pool",
    "get_total_afp",
    "can_afford_power",
    "spend_afp",
    "restore_afp",
    "add_temporary_afp",
    "get_afp_recovery_amount",
    "check_afp_fatigue",
    "get_safe_afp_limit",
    "check_overload_risk",
    "FEEDBACK_TABLE",
    "get_feedback_effect",
    "roll_psionic_feedback",
]
