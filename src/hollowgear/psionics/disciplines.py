"""Psionic disciplines and their power lists.

Every discipline has five powers, one per tier. A power costs as many
Aether Flux Points as its tier.
"""

from __future__ import annotations

from types import MappingProxyType

from hollowgear.models.enums import Ability, PowerEffectType, PsionicDiscipline
from hollowgear.models.psionics import (
    DamageRoll,
    PowerDuration,
    PowerEffect,
    PsionicPower,
    SavingThrow,
    TimedDuration,
)


def _power(
    power_id: str,
    name: str,
    discipline: PsionicDiscipline,
    tier: int,
    range: str,
    duration: PowerDuration,
    description: str,
    *effects: PowerEffect,
    concentration: bool = False,
) -> PsionicPower:
    return PsionicPower(
        id=power_id,
        name=name,
        discipline=discipline,
        tier=tier,
        afp_cost=tier,
        range=range,
        duration=duration,
        description=description,
        effects=effects,
        requires_concentration=concentration,
    )


def _damage(description: str, dice: str, damage_type: str, **kwargs) -> PowerEffect:
    return PowerEffect(
        type=PowerEffectType.DAMAGE,
        description=description,
        damage=DamageRoll(dice=dice, type=damage_type),
        **kwargs,
    )


def _effect(effect_type: PowerEffectType, description: str, **kwargs) -> PowerEffect:
    return PowerEffect(type=effect_type, description=description, **kwargs)


def _save(ability: Ability, on_success: str = "negates") -> SavingThrow:
    return SavingThrow(ability=ability, on_success=on_success)


_ONE_MINUTE = TimedDuration(minutes=1)
_TEN_MINUTES = TimedDuration(minutes=10)
_ONE_HOUR = TimedDuration(hours=1)


# =============================================================================
# Power Lists
# =============================================================================

_FLUX = PsionicDiscipline.FLUX
_ECHO = PsionicDiscipline.ECHO
_EIDOLON = PsionicDiscipline.EIDOLON
_EMPYRIC = PsionicDiscipline.EMPYRIC
_VEIL = PsionicDiscipline.VEIL
_KINESIS = PsionicDiscipline.KINESIS

_FLUX_POWERS = (
    _power(
        "entropy-lash", "Entropy Lash", _FLUX, 1, "touch", "instantaneous",
        "Melee spell attack that deals necrotic damage and pushes the target.",
        _damage("Melee spell attack: 1d8 necrotic + push 5 ft", "1d8", "necrotic"),
    ),
    _power(
        "aether-push", "Aether Push", _FLUX, 2, "30 ft", "instantaneous",
        "10-ft force push; STR save or knocked prone.",
        _effect(
            PowerEffectType.CONTROL,
            "10-ft force push; STR save or knocked prone",
            saving_throw=_save(Ability.STR),
            conditions=("prone",),
        ),
    ),
    _power(
        "plasma-burst", "Plasma Burst", _FLUX, 3, "15 ft cone", "instantaneous",
        "15-ft cone of fire/force damage.",
        _damage("15-ft cone, 3d8 fire/force damage", "3d8", "fire"),
    ),
    _power(
        "kinetic-barrier", "Kinetic Barrier", _FLUX, 4, "30 ft", _ONE_MINUTE,
        "Create 10-ft wall of telekinetic force for 1 minute.",
        _effect(PowerEffectType.DEFENSIVE, "Create 10-ft wall of telekinetic force"),
        concentration=True,
    ),
    _power(
        "collapse-field", "Collapse Field", _FLUX, 5, "60 ft", "instantaneous",
        "20-ft radius implosion dealing massive force damage.",
        _damage(
            "20-ft radius implosion (6d10 force, Dex save half)",
            "6d10",
            "force",
            saving_throw=_save(Ability.DEX, "half"),
        ),
    ),
)

_ECHO_POWERS = (
    _power(
        "resonant-pulse", "Resonant Pulse", _ECHO, 1, "15 ft cone", "instantaneous",
        "15-ft cone of thunder damage that removes reactions.",
        _damage("15-ft cone, 1d8 thunder dmg; creatures lose reactions", "1d8", "thunder"),
    ),
    _power(
        "echo-step", "Echo Step", _ECHO, 2, "self", "instantaneous",
        "Teleport up to 15 ft as bonus action.",
        _effect(PowerEffectType.MOVEMENT, "Teleport up to 15 ft as bonus action"),
    ),
    _power(
        "dissonant-strike", "Dissonant Strike", _ECHO, 3, "touch", "instantaneous",
        "Add thunder damage to melee hit; next attack vs target has advantage.",
        _damage(
            "Add 2d8 thunder to melee hit; next attack vs target has advantage",
            "2d8",
            "thunder",
        ),
    ),
    _power(
        "waveform-shatter", "Waveform Shatter", _ECHO, 4, "30 ft", "instantaneous",
        "Break crystal, glass, or armor with focused sound.",
        _damage("Break crystal, glass, or armor (2d10 thunder, 10-ft radius)", "2d10", "thunder"),
    ),
    _power(
        "harmonic-collapse", "Harmonic Collapse", _ECHO, 5, "60 ft", "instantaneous",
        "Create a resonance storm in a large area.",
        _damage(
            "Create a resonance storm; 30-ft sphere deals 5d10 thunder + deafened",
            "5d10",
            "thunder",
            conditions=("deafened",),
        ),
    ),
)

_EIDOLON_POWERS = (
    _power(
        "spectral-hand", "Spectral Hand", _EIDOLON, 1, "30 ft", _ONE_MINUTE,
        "Create spectral appendage for manipulation within 30 ft.",
        _effect(PowerEffectType.UTILITY, "Create spectral appendage for manipulation within 30 ft"),
        concentration=True,
    ),
    _power(
        "soul-anchor", "Soul Anchor", _EIDOLON, 2, "30 ft", "instantaneous",
        "Transfer HP to an ally or pull HP from self.",
        _effect(
            PowerEffectType.HEALING,
            "Transfer 1d8 HP to an ally (or pull 1d8 HP from self)",
            healing="1d8",
        ),
    ),
    _power(
        "astral-shard", "Astral Shard", _EIDOLON, 3, "30 ft", _ONE_MINUTE,
        "Create a duplicate that mimics your attacks.",
        _effect(PowerEffectType.UTILITY, "Create a duplicate (HP 10 + Int mod) that mimics your attacks"),
        concentration=True,
    ),
    _power(
        "phantom-strike", "Phantom Strike", _EIDOLON, 4, "60 ft", "instantaneous",
        "Attack through walls or cover.",
        _effect(
            PowerEffectType.UTILITY,
            "Attack through walls or cover (ignore half and three-quarters cover)",
        ),
    ),
    _power(
        "reunion-of-thought", "Reunion of Thought", _EIDOLON, 5, "30 ft", _ONE_MINUTE,
        "Merge your soul with another; share HP and senses.",
        _effect(PowerEffectType.UTILITY, "Merge your soul with another; share HP and senses for 1 min"),
        concentration=True,
    ),
)

_EMPYRIC_POWERS = (
    _power(
        "empathic-link", "Empathic Link", _EMPYRIC, 1, "30 ft", _ONE_MINUTE,
        "Telepathically communicate emotion with 1 creature.",
        _effect(PowerEffectType.MENTAL, "Telepathically communicate emotion with 1 creature (1 min)"),
    ),
    _power(
        "mind-dull", "Mind Dull", _EMPYRIC, 2, "30 ft", _ONE_MINUTE,
        "Target has disadvantage on INT and WIS checks.",
        _effect(
            PowerEffectType.MENTAL,
            "Target has disadvantage on INT and WIS checks for 1 min",
            saving_throw=_save(Ability.WIS),
        ),
    ),
    _power(
        "calm-hostility", "Calm Hostility", _EMPYRIC, 3, "20 ft", _ONE_MINUTE,
        "Suppress hostility in 20-ft radius.",
        _effect(
            PowerEffectType.MENTAL,
            "Suppress hostility in 20-ft radius (WIS save negates)",
            saving_throw=_save(Ability.WIS),
        ),
    ),
    _power(
        "memory-echo", "Memory Echo", _EMPYRIC, 4, "touch", "instantaneous",
        "See a 10-second vision of an object's last owner.",
        _effect(PowerEffectType.UTILITY, "See a 10-second vision of an object's last owner"),
    ),
    _power(
        "mass-link", "Mass Link", _EMPYRIC, 5, "30 ft", _ONE_HOUR,
        "Form telepathic bond with up to 6 creatures.",
        _effect(PowerEffectType.MENTAL, "Form telepathic bond with up to 6 creatures for 1 hour"),
        concentration=True,
    ),
)

_VEIL_POWERS = (
    _power(
        "veil-touch", "Veil Touch", _VEIL, 1, "touch", _TEN_MINUTES,
        "Alter minor sensory details (color, sound, scent).",
        _effect(PowerEffectType.ILLUSION, "Alter minor sensory details (color, sound, scent)"),
    ),
    _power(
        "phase-blur", "Phase Blur", _VEIL, 2, "self", TimedDuration(rounds=1),
        "Disadvantage on attacks against you until next turn.",
        _effect(PowerEffectType.DEFENSIVE, "Disadvantage on attacks against you until next turn"),
    ),
    _power(
        "mirage-step", "Mirage Step", _VEIL, 3, "self", _ONE_MINUTE,
        "Create illusionary duplicate (mirror image effect).",
        _effect(PowerEffectType.ILLUSION, "Create illusionary duplicate for 1 min (mirror image effect)"),
        concentration=True,
    ),
    _power(
        "aether-veil", "Aether Veil", _VEIL, 4, "self", _TEN_MINUTES,
        "Invisible 10-ft radius sphere; creatures inside gain advantage on Stealth.",
        _effect(
            PowerEffectType.ILLUSION,
            "Invisible 10-ft radius sphere; creatures inside gain advantage on Stealth",
        ),
        concentration=True,
    ),
    _power(
        "false-horizon", "False Horizon", _VEIL, 5, "120 ft", _ONE_HOUR,
        "Create vast illusory landscape.",
        _effect(PowerEffectType.ILLUSION, "Create vast illusory landscape; DC 16 Insight to disbelieve"),
        concentration=True,
    ),
)

_KINESIS_POWERS = (
    _power(
        "telekinetic-grip", "Telekinetic Grip", _KINESIS, 1, "30 ft", _ONE_MINUTE,
        "Move 1 small object within 30 ft.",
        _effect(PowerEffectType.UTILITY, "Move 1 small object within 30 ft"),
        concentration=True,
    ),
    _power(
        "force-pull", "Force Pull", _KINESIS, 2, "30 ft", "instantaneous",
        "Pull one creature or object 10 ft.",
        _effect(
            PowerEffectType.CONTROL,
            "Pull one creature or object 10 ft (STR save resists)",
            saving_throw=_save(Ability.STR),
        ),
    ),
    _power(
        "levitate-self", "Levitate Self", _KINESIS, 3, "self", _TEN_MINUTES,
        "Float 20 ft for up to 10 minutes.",
        _effect(PowerEffectType.MOVEMENT, "Float 20 ft for up to 10 minutes"),
        concentration=True,
    ),
    _power(
        "crush-field", "Crush Field", _KINESIS, 4, "60 ft", "instantaneous",
        "15-ft cube of crushing force.",
        _damage(
            "15-ft cube, 3d8 force damage, restrained on failed STR save",
            "3d8",
            "force",
            saving_throw=_save(Ability.STR),
            conditions=("restrained",),
        ),
    ),
    _power(
        "mass-lift", "Mass Lift", _KINESIS, 5, "20 ft", _ONE_MINUTE,
        "Levitate all objects/creatures within 20 ft.",
        _effect(
            PowerEffectType.CONTROL,
            "Levitate all objects/creatures within 20 ft (Concentration 1 min)",
        ),
        concentration=True,
    ),
)


DISCIPLINE_POWERS: MappingProxyType[PsionicDiscipline, tuple[PsionicPower, ...]] = MappingProxyType(
    {
        PsionicDiscipline.FLUX: _FLUX_POWERS,
        PsionicDiscipline.ECHO: _ECHO_POWERS,
        PsionicDiscipline.EIDOLON: _EIDOLON_POWERS,
        PsionicDiscipline.EMPYRIC: _EMPYRIC_POWERS,
        PsionicDiscipline.VEIL: _VEIL_POWERS,
        PsionicDiscipline.KINESIS: _KINESIS_POWERS,
    }
)


# =============================================================================
# Lookups
# =============================================================================


def get_powers_for_discipline(discipline: PsionicDiscipline | str) -> list[PsionicPower]:
    """All powers of a discipline, lowest tier first.

    Unknown discipline names yield an empty list.
    """
    try:
        discipline = PsionicDiscipline(discipline)
    except ValueError:
        return []
    return list(DISCIPLINE_POWERS[discipline])


def get_power_by_id(power_id: str) -> PsionicPower | None:
    for powers in DISCIPLINE_POWERS.values():
        for power in powers:
            if power.id == power_id:
                return power
    return None


def get_powers_by_tier(tier: int) -> list[PsionicPower]:
    """Every power of ``tier`` across all disciplines, in discipline order."""
    return [power for powers in DISCIPLINE_POWERS.values() for power in powers if power.tier == tier]


def calculate_amplified_cost(base_cost: int, amplification_level: int) -> int:
    """AFP cost of an amplified power; amplification never more than doubles it.

    Example:
        >>> calculate_amplified_cost(3, 1), calculate_amplified_cost(3, 5)
        (4, 6)
    """
    return min(base_cost * 2, base_cost + amplification_level)


__all__ = [
    "DISCIPLINE_POWERS",
    "get_powers_for_discipline",
    "get_power_by_id",
    "get_powers_by_tier",
    "calculate_amplified_cost",
]
