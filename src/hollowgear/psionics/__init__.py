"""Psionic subsystem: AFP, focus, overload, surges and signatures.

:func:`create_psionic_data` assembles a character's complete psionic
state; the submodules operate on its parts.
"""

from __future__ import annotations

from collections.abc import Iterable

from hollowgear.core.logging import get_logger
from hollowgear.models.enums import Ability, EmotionalState, PsionicDiscipline, RestType
from hollowgear.models.psionics import PsionicData
from hollowgear.psionics.disciplines import (
    DISCIPLINE_POWERS,
    calculate_amplified_cost,
    get_power_by_id,
    get_powers_by_tier,
    get_powers_for_discipline,
)
from hollowgear.psionics.flux import (
    FEEDBACK_TABLE,
    add_temporary_afp,
    calculate_maximum_afp,
    calculate_multiclass_afp,
    can_afford_power,
    check_afp_fatigue,
    check_overload_risk,
    create_resource_pool,
    get_afp_recovery_amount,
    get_feedback_effect,
    get_safe_afp_limit,
    get_total_afp,
    restore_afp,
    roll_psionic_feedback,
    spend_afp,
)
from hollowgear.psionics.focus import (
    add_maintained_power,
    break_all_maintained_powers,
    calculate_concentration_save,
    calculate_focus_limit,
    can_maintain_additional_power,
    create_initial_focus_state,
    get_current_focus_usage,
    handle_concentration_failure,
    remove_maintained_power,
    roll_backlash_damage,
    update_maintained_powers,
)
from hollowgear.psionics.overload import (
    SIGNATURE_MANIFESTATIONS,
    accumulate_feedback_effects,
    activate_psionic_surge,
    apply_overload,
    calculate_overload_recovery,
    calculate_signature_intensity,
    calculate_signature_linger_duration,
    check_overload_recovery,
    clear_expired_feedback_effects,
    create_initial_overload_state,
    create_initial_surge_state,
    create_psionic_signature,
    end_psionic_surge_turn,
    is_signature_detectable,
    restore_psionic_surge,
    update_signature_after_power_use,
)


logger = get_logger(__name__)


def create_psionic_data(
    character_id: str,
    level: int,
    ability_modifier: int,
    primary_ability: Ability | str,
    base_emotion: EmotionalState | str,
    known_disciplines: Iterable[PsionicDiscipline | str] = (),
    known_powers: Iterable[str] = (),
) -> PsionicData:
    """Build the starting psionic state of a character.

    Args:
        character_id: Owner of the signature.
        level: Psionic level; drives AFP, focus limit and signature power.
        ability_modifier: Modifier of ``primary_ability``.
        primary_ability: Intelligence or wisdom.
        base_emotion: Emotion coloring the signature.
        known_disciplines: Disciplines the character has learned.
        known_powers: Ids of the powers the character knows.

    Returns:
        A full AFP pool, an empty focus state, fresh overload and surge
        states and a new signature.
    """
    data = PsionicData(
        known_disciplines=tuple(PsionicDiscipline(d) for d in known_disciplines),
        known_powers=tuple(known_powers),
        aether_flux_points=create_resource_pool(calculate_maximum_afp(level, ability_modifier)),
        focus_state=create_initial_focus_state(level),
        overload_state=create_initial_overload_state(),
        surge_state=create_initial_surge_state(),
        signature=create_psionic_signature(character_id, base_emotion, power_level=level),
        psionic_level=level,
        primary_ability=Ability(primary_ability),
    )
    logger.info(
        "Psionic data created",
        character_id=character_id,
        level=level,
        max_afp=data.aether_flux_points.maximum,
    )
    return data


def rest_psionic_data(data: PsionicData, rest_type: RestType | str) -> PsionicData:
    """Apply a rest to a character's psionic state.

    A surge blocks AFP recovery only until the next rest, so every rest
    refills AFP and resets the surge. Either rest clears accumulated
    feedback; a long rest also ends overload penalties.
    """
    rest_type = RestType(rest_type)
    afp = restore_afp(data.aether_flux_points, rest_type)

    overload = data.overload_state.model_copy(update={"accumulated_feedback": ()})
    if rest_type is RestType.LONG:
        overload = create_initial_overload_state()

    logger.info(
        "Psionic rest",
        rest_type=rest_type,
        afp_recovered=afp.current - data.aether_flux_points.current,
        surge_block_lifted=data.surge_state.afp_recovery_blocked,
    )
    return data.model_copy(
        update={
            "aether_flux_points": afp,
            "overload_state": overload,
            "surge_state": restore_psionic_surge(data.surge_state, rest_type),
        }
    )


__all__ = [
    # Aggregate
    "create_psionic_data",
    "rest_psionic_data",
    # Disciplines
    "DISCIPLINE_POWERS",
    "get_powers_for_discipline",
    "get_power_by_id",
    "get_powers_by_tier",
    "calculate_amplified_cost",
    # Flux
    "FEEDBACK_TABLE",
    "calculate_maximum_afp",
    "calculate_multiclass_afp",
    "create_resource_pool",
    "spend_afp",
    "restore_afp",
    "add_temporary_afp",
    "can_afford_power",
    "get_total_afp",
    "check_afp_fatigue",
    "get_safe_afp_limit",
    "get_afp_recovery_amount",
    "check_overload_risk",
    "get_feedback_effect",
    "roll_psionic_feedback",
    # Focus
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
    # Overload, surge & signature
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
