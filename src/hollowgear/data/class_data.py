"""Static registry of the seven Hollow Gear classes.

``CLASS_DATA`` is built once at import time and validated by the pydantic
models, so malformed reference data fails loudly on import rather than
at first use.

Example:
    >>> from hollowgear.data.class_data import get_class_hit_die
    >>> get_class_hit_die("tweaker")
    <DieType.D12: 'd12'>
"""

from __future__ import annotations

from types import MappingProxyType

from hollowgear.core.constants import SPELL_SLOT_TABLE
from hollowgear.core.exceptions import UnknownClassError
from hollowgear.data.class_features import build_feature
from hollowgear.models.classes import (
    ClassArchetype,
    ClassInfo,
    ClassResourceInfo,
    PsionicsInfo,
    ResourceScaling,
    SpellcastingInfo,
)
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


ARCHETYPE_SELECTION_LEVELS: dict[HollowGearClass, int] = {
    HollowGearClass.ARCANIST: 2,
    HollowGearClass.TEMPLAR: 3,
    HollowGearClass.TWEAKER: 3,
    HollowGearClass.SHADEHAND: 3,
    HollowGearClass.VANGUARD: 3,
    HollowGearClass.ARTIFEX: 3,
    HollowGearClass.MINDWEAVER: 1,
}

_PASSIVE = FeatureMechanicType.PASSIVE
_ACTION = FeatureMechanicType.ACTION
_BONUS = FeatureMechanicType.BONUS_ACTION
_REACTION = FeatureMechanicType.REACTION

_TEMPLAR_SLOTS: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0),
    (2, 0, 0, 0, 0),
    (3, 0, 0, 0, 0),
    (3, 0, 0, 0, 0),
    (4, 2, 0, 0, 0),
    (4, 2, 0, 0, 0),
    (4, 3, 0, 0, 0),
    (4, 3, 0, 0, 0),
    (4, 3, 2, 0, 0),
    (4, 3, 2, 0, 0),
    (4, 3, 3, 0, 0),
    (4, 3, 3, 0, 0),
    (4, 3, 3, 1, 0),
    (4, 3, 3, 1, 0),
    (4, 3, 3, 2, 0),
    (4, 3, 3, 2, 0),
    (4, 3, 3, 3, 1),
    (4, 3, 3, 3, 1),
    (4, 3, 3, 3, 2),
    (4, 3, 3, 3, 2),
)


def _archetype(
    archetype_id: str,
    name: str,
    parent: HollowGearClass,
    description: str,
    *features,
) -> ClassArchetype:
    return ClassArchetype(
        id=archetype_id,
        name=name,
        parent_class=parent,
        selection_level=ARCHETYPE_SELECTION_LEVELS[parent],
        description=description,
        features=features,
    )


# =============================================================================
# Class Definitions
# =============================================================================


_ARCANIST = ClassInfo(
    class_name=HollowGearClass.ARCANIST,
    display_name="Arcanist",
    description="Scholar, manipulator of Aether, experimental technomage.",
    role="Spellcaster and magical researcher",
    hit_die=DieType.D6,
    primary_ability=Ability.INT,
    saving_throw_proficiencies=(Ability.INT, Ability.WIS),
    archetypes=(
        _archetype(
            "aethermancer",
            "Aethermancer",
            HollowGearClass.ARCANIST,
            "Psionically fuses mind and magic. May trade one spell per level for a psionic power.",
            build_feature(
                "aethermancer_psionic_conversion",
                "Psionic Conversion",
                2,
                "Convert spell slots into Aether Flux Points (AFP). Learn 1 psionic Discipline.",
                FeatureMechanicType.RESOURCE,
                "Convert spell slots to AFP",
            ),
            build_feature(
                "aethermancer_resonant_pulse",
                "Resonant Pulse",
                6,
                "Gain Resonant Pulse as a bonus action once per short rest.",
                _BONUS,
                "Resonant pulse effect",
                uses=1,
                restore_on=RecoveryTiming.SHORT,
            ),
        ),
        _archetype(
            "gearwright",
            "Gearwright",
            HollowGearClass.ARCANIST,
            "A mechanical magician; crafts sentient constructs known as Aether Familiars.",
            build_feature(
                "gearwright_aether_familiar",
                "Aether Familiar",
                2,
                "Build a mechanical companion (HP = 5 x your proficiency bonus).",
                _PASSIVE,
                "Mechanical companion",
            ),
            build_feature(
                "gearwright_infuse_device",
                "Infuse Device",
                2,
                "Infuse devices with low-level spell effects.",
                _ACTION,
                "Spell infusion",
            ),
            build_feature(
                "gearwright_temporary_constructs",
                "Temporary Constructs",
                10,
                "Create temporary constructs as action (CR 1/2 or lower).",
                _ACTION,
                "Temporary construct creation",
            ),
        ),
    ),
    spellcasting=SpellcastingInfo(
        type=SpellcastingType.ARCANIST,
        ability=Ability.INT,
        progression=SpellcastingProgression.FULL,
        spells_known=(2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 12, 13, 13, 14, 14, 15, 15, 15, 15),
        spell_slots=SPELL_SLOT_TABLE,
        ritual_casting=True,
        focus="arcane_focus",
    ),
    class_resources=(
        ClassResourceInfo(
            type=ResourceType.SPELL_SLOT,
            name="Spell Slots",
            description="Aether-powered magical energy",
            base_amount=2,
            scaling=ResourceScaling(
                type=ScalingType.TABLE,
                value=(2, 3) + (4,) * 18,
            ),
            recovery=RecoveryTiming.LONG,
        ),
    ),
    archetype_selection_level=ARCHETYPE_SELECTION_LEVELS[HollowGearClass.ARCANIST],
)

_TEMPLAR = ClassInfo(
    class_name=HollowGearClass.TEMPLAR,
    display_name="Templar",
    description="Psionic paladin, relic guardian, and holy engineer.",
    role="Divine warrior and support",
    hit_die=DieType.D10,
    primary_ability=Ability.CHA,
    saving_throw_proficiencies=(Ability.WIS, Ability.CHA),
    archetypes=(
        _archetype(
            "relic_knight",
            "Relic Knight",
            HollowGearClass.TEMPLAR,
            "Defender of lost Aether temples.",
            build_feature(
                "relic_knight_aura_of_focus",
                "Aura of Focus",
                3,
                "Allies in 10 ft gain +1 to saving throws vs psionic effects.",
                _PASSIVE,
                "+1 saves vs psionics",
                range="10 ft",
            ),
            build_feature(
                "relic_knight_channel_healing",
                "Channel Healing",
                3,
                "Can channel healing energy through armor or shield.",
                _ACTION,
                "Healing through equipment",
            ),
            build_feature(
                "relic_knight_faith_barrier",
                "Faith Barrier",
                7,
                "Project a Faith Barrier once per long rest (temporary HP = 2 x level).",
                _ACTION,
                "Temporary HP",
                value="level * 2",
                uses=1,
            ),
        ),
        _archetype(
            "iron_saint",
            "Iron Saint",
            HollowGearClass.TEMPLAR,
            "Crusader who sees perfection in steel.",
            build_feature(
                "iron_saint_runic_armor",
                "Runic Armor",
                3,
                "Your armor gains +1 AC and glows with runes of faith.",
                _PASSIVE,
                "+1 AC",
            ),
            build_feature(
                "iron_saint_faithful_resolve",
                "Faithful Resolve",
                3,
                "Spend 1 Charge to gain advantage on a saving throw.",
                _REACTION,
                "Advantage on saving throws",
                cost={"resonance_charge": 1},
            ),
            build_feature(
                "iron_saint_divine_immunity",
                "Divine Immunity",
                10,
                "Become immune to fear and psychic damage for 1 minute.",
                _ACTION,
                "Immunity: fear, psychic",
                duration="1 minute",
                uses=1,
            ),
        ),
    ),
    spellcasting=SpellcastingInfo(
        type=SpellcastingType.TEMPLAR,
        ability=Ability.CHA,
        progression=SpellcastingProgression.HALF,
        spells_known=(0, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 7, 8, 8, 9, 9, 10, 10, 11, 11),
        spell_slots=_TEMPLAR_SLOTS,
        ritual_casting=False,
        focus="holy_symbol",
    ),
    class_resources=(
        ClassResourceInfo(
            type=ResourceType.RESONANCE_CHARGE,
            name="Resonance Charges",
            description="Faith-fueled psionic energy",
            base_amount=1,
            scaling=ResourceScaling(
                type=ScalingType.ABILITY_MODIFIER,
                value=1,
                ability_modifier=Ability.CHA,
            ),
            recovery=RecoveryTiming.LONG,
        ),
    ),
    archetype_selection_level=ARCHETYPE_SELECTION_LEVELS[HollowGearClass.TEMPLAR],
)

_TWEAKER = ClassInfo(
    class_name=HollowGearClass.TWEAKER,
    display_name="Tweaker",
    description="Brawler, chemist, reckless modder of the flesh.",
    role="Melee combatant with chemical enhancement",
    hit_die=DieType.D12,
    primary_ability=Ability.CON,
    saving_throw_proficiencies=(Ability.STR, Ability.CON),
    archetypes=(
        _archetype(
            "boilerheart",
            "Boilerheart",
            HollowGearClass.TWEAKER,
            "Relies on controlled overpressure.",
            build_feature(
                "boilerheart_pressure_surge",
                "Pressure Surge",
                3,
                "When reduced to half HP, gain +1 attack each turn.",
                _PASSIVE,
                "Extra attack when bloodied",
            ),
            build_feature(
                "boilerheart_explosion_death",
                "Explosion Death Throes",
                3,
                "If reduced to 0 HP, emit 10-ft burst (2d6 fire).",
                _PASSIVE,
                "2d6 fire damage in 10ft burst",
                value="2d6",
            ),
            build_feature(
                "boilerheart_heat_immunity",
                "Heat Immunity",
                3,
                "Immune to exhaustion effects caused by heat.",
                _PASSIVE,
                "Immunity: heat exhaustion",
            ),
        ),
        _archetype(
            "neurospike",
            "Neurospike",
            HollowGearClass.TWEAKER,
            "Focuses on reflex and precision.",
            build_feature(
                "neurospike_enhanced_strikes",
                "Enhanced Strikes",
                3,
                "Add CON to attack rolls for unarmed strikes.",
                _PASSIVE,
                "Constitution modifier to unarmed attacks",
            ),
            build_feature(
                "neurospike_reactive_defense",
                "Reactive Defense",
                3,
                "Reaction: Gain +2 AC when attacked once per round.",
                _REACTION,
                "+2 AC",
            ),
            build_feature(
                "neurospike_hyperfocus",
                "Hyperfocus",
                7,
                "Enter Hyperfocus: take two bonus actions per turn for 3 rounds (1/long rest).",
                _ACTION,
                "Two bonus actions per turn",
                duration="3 rounds",
                uses=1,
            ),
        ),
    ),
    class_resources=(
        ClassResourceInfo(
            type=ResourceType.CUSTOM,
            name="Adrenal Surges",
            description="Combat injectors for enhanced performance",
            base_amount=1,
            scaling=ResourceScaling(type=ScalingType.PROFICIENCY_BONUS, value=1),
            recovery=RecoveryTiming.SHORT,
        ),
    ),
    archetype_selection_level=ARCHETYPE_SELECTION_LEVELS[HollowGearClass.TWEAKER],
)

_SHADEHAND = ClassInfo(
    class_name=HollowGearClass.SHADEHAND,
    display_name="Shadehand",
    description="Stealth, infiltration, sabotage, precision strikes.",
    role="Stealth specialist and precision striker",
    hit_die=DieType.D8,
    primary_ability=Ability.DEX,
    saving_throw_proficiencies=(Ability.DEX, Ability.INT),
    archetypes=(
        _archetype(
            "circuitbreaker",
            "Circuitbreaker",
            HollowGearClass.SHADEHAND,
            "Anti-tech infiltrator.",
            build_feature(
                "circuitbreaker_disable_tech",
                "Disable Technology",
                3,
                "Once per turn, disable a mod or device within 5 ft as a bonus action.",
                _BONUS,
                "Disable mod or device",
                range="5 ft",
            ),
            build_feature(
                "circuitbreaker_construct_bane",
                "Construct Bane",
                3,
                "Critical hits against constructs deal double damage.",
                _PASSIVE,
                "Double critical damage vs constructs",
            ),
            build_feature(
                "circuitbreaker_aether_resistance",
                "Aether Resistance",
                9,
                "Gain advantage on Dex saves vs traps and Aether pulses.",
                _PASSIVE,
                "Advantage on Dex saves vs traps and Aether",
            ),
        ),
        _archetype(
            "mirage_operative",
            "Mirage Operative",
            HollowGearClass.SHADEHAND,
            "Specialist in psionic deception.",
            build_feature(
                "mirage_operative_blur",
                "Blur",
                3,
                "Cast Blur once per long rest using goggles or focus.",
                _ACTION,
                "Blur spell effect",
                uses=1,
            ),
            build_feature(
                "mirage_operative_deception_expert",
                "Deception Expert",
                3,
                "Gain proficiency in Deception and Sleight of Hand.",
                _PASSIVE,
                "Deception, Sleight of Hand",
            ),
            build_feature(
                "mirage_operative_mirror_image",
                "Mirror Image",
                7,
                "Create illusory duplicates for 1 minute (mirror image effect).",
                _ACTION,
                "Mirror image duplicates",
                duration="1 minute",
            ),
        ),
    ),
    archetype_selection_level=ARCHETYPE_SELECTION_LEVELS[HollowGearClass.SHADEHAND],
)

_VANGUARD = ClassInfo(
    class_name=HollowGearClass.VANGUARD,
    display_name="Vanguard",
    description="Frontline fighter, tactical commander, and steam-powered bruiser.",
    role="Tank and battlefield controller",
    hit_die=DieType.D10,
    primary_ability=Ability.STR,
    saving_throw_proficiencies=(Ability.STR, Ability.CON),
    archetypes=(
        _archetype(
            "bulwark_sentinel",
            "Bulwark Sentinel",
            HollowGearClass.VANGUARD,
            "Specializes in protection and counterattack.",
            build_feature(
                "bulwark_sentinel_protective_aura",
                "Protective Aura",
                3,
                "Allies within 5 ft gain +1 AC.",
                _PASSIVE,
                "+1 AC to adjacent allies",
                range="5 ft",
            ),
            build_feature(
                "bulwark_sentinel_intercept",
                "Intercept",
                3,
                "Reaction: Impose disadvantage on attack against an ally (1/round).",
                _REACTION,
                "Disadvantage on attack rolls vs ally",
            ),
            build_feature(
                "bulwark_sentinel_expanded_guard",
                "Expanded Guard",
                10,
                "Can guard 10-ft radius instead.",
                _PASSIVE,
                "Expand protective aura to 10ft",
                range="10 ft",
            ),
        ),
        _archetype(
            "shockbreaker",
            "Shockbreaker",
            HollowGearClass.VANGUARD,
            "Steam warrior using volatile pressure systems.",
            build_feature(
                "shockbreaker_electrified_strikes",
                "Electrified Strikes",
                3,
                "Melee attacks deal +1d4 lightning damage.",
                _PASSIVE,
                "+1d4 lightning",
                value="1d4",
            ),
            build_feature(
                "shockbreaker_static_burst",
                "Static Burst",
                3,
                "Once per long rest, unleash Static Burst (15-ft cone, 2d8 lightning).",
                _ACTION,
                "2d8 lightning in 15ft cone",
                value="2d8",
                range="15 ft cone",
                uses=1,
            ),
            build_feature(
                "shockbreaker_electrical_resistance",
                "Electrical Resistance",
                3,
                "Resistant to lightning and thunder damage.",
                _PASSIVE,
                "Resistance: lightning, thunder",
            ),
        ),
    ),
    class_resources=(
        ClassResourceInfo(
            type=ResourceType.CUSTOM,
            name="Steam Charges",
            description="Steam-powered enhancement charges",
            base_amount=1,
            scaling=ResourceScaling(type=ScalingType.PROFICIENCY_BONUS, value=1),
            recovery=RecoveryTiming.SHORT,
        ),
    ),
    archetype_selection_level=ARCHETYPE_SELECTION_LEVELS[HollowGearClass.VANGUARD],
)

_ARTIFEX = ClassInfo(
    class_name=HollowGearClass.ARTIFEX,
    display_name="Artifex",
    description="Inventor, field engineer, and battlefield support specialist.",
    role="Support specialist and inventor",
    hit_die=DieType.D8,
    primary_ability=Ability.INT,
    saving_throw_proficiencies=(Ability.CON, Ability.INT),
    archetypes=(
        _archetype(
            "fieldwright",
            "Fieldwright",
            HollowGearClass.ARTIFEX,
            "Support specialist.",
            build_feature(
                "fieldwright_repair_ally",
                "Repair Ally",
                3,
                "Repair ally's mod as bonus action.",
                _BONUS,
                "Repair equipment mod",
            ),
            build_feature(
                "fieldwright_assist_attack",
                "Assist Attack",
                3,
                "Ally's next attack deals +1d6 damage if assisted.",
                _ACTION,
                "+1d6 damage to assisted ally",
                value="1d6",
            ),
            build_feature(
                "fieldwright_drone_turrets",
                "Drone Turrets",
                10,
                "Deploy temporary drone turrets (AC 15, HP 15, dmg 1d10).",
                _ACTION,
                "Deploy drone turrets",
            ),
        ),
        _archetype(
            "aetherforger",
            "Aetherforger",
            HollowGearClass.ARTIFEX,
            "Infuses Aether Dust into machinery.",
            build_feature(
                "aetherforger_imbue_weapon",
                "Imbue Weapon",
                3,
                "Spend 1 gear worth of Aether Dust to imbue weapon with energy (1 minute).",
                _ACTION,
                "Energy weapon imbue",
                duration="1 minute",
                cost={"invention_points": 1},
            ),
            build_feature(
                "aetherforger_create_cores",
                "Create Aether Cores",
                3,
                "Create Aether Cores to power other devices (3 uses/day).",
                _ACTION,
                "Create Aether Core",
                uses=3,
                restore_on=RecoveryTiming.DAWN,
            ),
            build_feature(
                "aetherforger_arcane_immunity",
                "Arcane Immunity",
                3,
                "Immune to arcane feedback.",
                _PASSIVE,
                "Immunity: arcane feedback",
            ),
        ),
    ),
    class_resources=(
        ClassResourceInfo(
            type=ResourceType.CUSTOM,
            name="Invention Points",
            description="Points for creating and maintaining inventions",
            base_amount=2,
            scaling=ResourceScaling(
                type=ScalingType.ABILITY_MODIFIER,
                value=1,
                ability_modifier=Ability.INT,
            ),
            recovery=RecoveryTiming.LONG,
        ),
    ),
    archetype_selection_level=ARCHETYPE_SELECTION_LEVELS[HollowGearClass.ARTIFEX],
)

_MINDWEAVER = ClassInfo(
    class_name=HollowGearClass.MINDWEAVER,
    display_name="Mindweaver",
    description="Psionic specialist; manipulator of will, energy, and space.",
    role="Psionic specialist and reality manipulator",
    hit_die=DieType.D8,
    # Wisdom may replace intelligence, chosen at character creation.
    primary_ability=Ability.INT,
    saving_throw_proficiencies=(Ability.INT, Ability.WIS),
    archetypes=(
        _archetype(
            "path_of_echo",
            "Path of the Echo",
            HollowGearClass.MINDWEAVER,
            "Masters of resonance and vibration.",
            build_feature(
                "echo_resonant_pulse",
                "Resonant Pulse",
                2,
                "Gain Resonant Pulse power.",
                _ACTION,
                "Resonant pulse effect",
            ),
            build_feature(
                "echo_step",
                "Echo Step",
                2,
                "Gain Echo Step power.",
                _BONUS,
                "Teleportation via sound",
            ),
            build_feature(
                "echo_psychic_feedback",
                "Psychic Feedback",
                2,
                "When you manifest a power, nearby enemies take psychic damage equal to your mod.",
                _PASSIVE,
                "Psychic damage on power use",
            ),
        ),
        _archetype(
            "path_of_flux",
            "Path of Flux",
            HollowGearClass.MINDWEAVER,
            "Harness entropy and raw energy.",
            build_feature(
                "flux_entropy_lash",
                "Entropy Lash",
                2,
                "Learn Entropy Lash power.",
                _ACTION,
                "Entropy damage attack",
            ),
            build_feature(
                "flux_aether_drain",
                "Aether Drain",
                2,
                "Learn Aether Drain power.",
                _ACTION,
                "Drain enemy resources",
            ),
            build_feature(
                "flux_energy_recovery",
                "Energy Recovery",
                2,
                "Recover 1 AFP when damaging psionic or magical foes.",
                _PASSIVE,
                "AFP recovery on damage",
            ),
        ),
        _archetype(
            "path_of_eidolon",
            "Path of Eidolon",
            HollowGearClass.MINDWEAVER,
            "Specializes in projection and soul constructs.",
            build_feature(
                "eidolon_spectral_hand",
                "Spectral Hand",
                2,
                "Gain Spectral Hand power.",
                _ACTION,
                "Spectral hand projection",
            ),
            build_feature(
                "eidolon_soul_anchor",
                "Soul Anchor",
                2,
                "Gain Soul Anchor power.",
                _ACTION,
                "Soul anchoring effect",
            ),
            build_feature(
                "eidolon_astral_duplicate",
                "Astral Duplicate",
                2,
                "Project an astral duplicate once per short rest for 1 minute.",
                _ACTION,
                "Astral projection",
                duration="1 minute",
                uses=1,
                restore_on=RecoveryTiming.SHORT,
            ),
        ),
    ),
    psionics=PsionicsInfo(
        ability=Ability.INT,
        disciplines=tuple(PsionicDiscipline),
        afp_progression=tuple(range(2, 22)),
        powers_known=tuple(range(2, 22)),
        focus_limit=1,
    ),
    class_resources=(
        ClassResourceInfo(
            type=ResourceType.AFP,
            name="Aether Flux Points",
            description="Psionic energy for manifesting powers",
            base_amount=2,
            scaling=ResourceScaling(type=ScalingType.LINEAR, value=1),
            recovery=RecoveryTiming.LONG,
        ),
    ),
    archetype_selection_level=ARCHETYPE_SELECTION_LEVELS[HollowGearClass.MINDWEAVER],
)


CLASS_DATA: MappingProxyType[HollowGearClass, ClassInfo] = MappingProxyType(
    {
        info.class_name: info
        for info in (
            _ARCANIST,
            _TEMPLAR,
            _TWEAKER,
            _SHADEHAND,
            _VANGUARD,
            _ARTIFEX,
            _MINDWEAVER,
        )
    }
)


# =============================================================================
# Lookups
# =============================================================================


def resolve_class(class_name: HollowGearClass | str) -> HollowGearClass:
    """Coerce a class name to :class:`HollowGearClass`.

    Raises:
        UnknownClassError: If the name is not a Hollow Gear class.
    """
    try:
        return HollowGearClass(class_name)
    except ValueError as exc:
        raise UnknownClassError(
            f"Unknown class {class_name!r}",
            class_name=str(class_name),
            details={"valid_classes": [c.value for c in HollowGearClass]},
        ) from exc


def get_class_info(class_name: HollowGearClass | str) -> ClassInfo:
    return CLASS_DATA[resolve_class(class_name)]


def get_class_archetypes(class_name: HollowGearClass | str) -> tuple[ClassArchetype, ...]:
    return get_class_info(class_name).archetypes


def get_archetype(archetype_id: str) -> ClassArchetype | None:
    """Find an archetype of any class by id, or None."""
    for info in CLASS_DATA.values():
        for archetype in info.archetypes:
            if archetype.id == archetype_id:
                return archetype
    return None


def get_archetype_selection_level(class_name: HollowGearClass | str) -> int:
    return get_class_info(class_name).archetype_selection_level


def has_spellcasting(class_name: HollowGearClass | str) -> bool:
    return get_class_info(class_name).spellcasting is not None


def has_psionics(class_name: HollowGearClass | str) -> bool:
    return get_class_info(class_name).psionics is not None


def get_class_primary_ability(class_name: HollowGearClass | str) -> Ability:
    return get_class_info(class_name).primary_ability


def get_class_hit_die(class_name: HollowGearClass | str) -> DieType:
    return get_class_info(class_name).hit_die


def get_all_classes() -> list[HollowGearClass]:
    return list(CLASS_DATA)


def is_valid_class(class_name: str) -> bool:
    return class_name in {c.value for c in CLASS_DATA}


def get_classes_by_spellcasting(spellcasting_type: SpellcastingType | str) -> list[HollowGearClass]:
    return [
        name
        for name, info in CLASS_DATA.items()
        if info.spellcasting is not None and info.spellcasting.type == spellcasting_type
    ]


def get_classes_by_psionics() -> list[HollowGearClass]:
    return [name for name, info in CLASS_DATA.items() if info.psionics is not None]


def get_classes_by_hit_die(hit_die: DieType | str) -> list[HollowGearClass]:
    return [name for name, info in CLASS_DATA.items() if info.hit_die == hit_die]


def get_classes_by_primary_ability(ability: Ability | str) -> list[HollowGearClass]:
    return [name for name, info in CLASS_DATA.items() if info.primary_ability == ability]


__all__ = [
    "ARCHETYPE_SELECTION_LEVELS",
    "CLASS_DATA",
    "resolve_class",
    "get_class_info",
    "get_class_archetypes",
    "get_archetype",
    "get_archetype_selection_level",
    "has_spellcasting",
    "has_psionics",
    "get_class_primary_ability",
    "get_class_hit_die",
    "get_all_classes",
    "is_valid_class",
    "get_classes_by_spellcasting",
    "get_classes_by_psionics",
    "get_classes_by_hit_die",
    "get_classes_by_primary_ability",
]
