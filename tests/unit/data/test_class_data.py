"""Tests for the static class registry."""

from __future__ import annotations

import pytest

from hollowgear.core.exceptions import UnknownClassError
from hollowgear.data.class_data import (
    ARCHETYPE_SELECTION_LEVELS,
    CLASS_DATA,
    get_all_classes,
    get_archetype,
    get_archetype_selection_level,
    get_class_archetypes,
    get_class_hit_die,
    get_class_info,
    get_class_primary_ability,
    get_classes_by_hit_die,
    get_classes_by_primary_ability,
    get_classes_by_psionics,
    get_classes_by_spellcasting,
    has_psionics,
    has_spellcasting,
    is_valid_class,
    resolve_class,
)
from hollowgear.models.enums import (
    Ability,
    DieType,
    HollowGearClass,
    SpellcastingProgression,
    SpellcastingType,
)


class TestRegistry:
    """Tests for registry completeness and invariants."""

    def test_every_class_registered(self) -> None:
        """Test all seven classes have registry entries."""
        assert set(CLASS_DATA) == set(HollowGearClass)
        assert get_all_classes() == list(HollowGearClass)

    def test_registry_is_read_only(self) -> None:
        """Test the registry cannot be modified."""
        with pytest.raises(TypeError):
            CLASS_DATA[HollowGearClass.ARCANIST] = None  # type: ignore[index]

    @pytest.mark.parametrize("class_name", list(HollowGearClass))
    def test_archetypes_belong_to_class(self, class_name: HollowGearClass) -> None:
        """Test each class has at least two archetypes of its own."""
        archetypes = get_class_archetypes(class_name)

        assert len(archetypes) >= 2
        assert all(a.parent_class is class_name for a in archetypes)
        assert all(
            a.selection_level == ARCHETYPE_SELECTION_LEVELS[class_name] for a in archetypes
        )

    def test_feature_ids_unique(self) -> None:
        """Test archetype feature ids are unique across the registry."""
        ids = [
            feature.id
            for info in CLASS_DATA.values()
            for archetype in info.archetypes
            for feature in archetype.features
        ]
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize(
        ("class_name", "hit_die", "ability"),
        [
            ("arcanist", DieType.D6, Ability.INT),
            ("templar", DieType.D10, Ability.CHA),
            ("tweaker", DieType.D12, Ability.CON),
            ("shadehand", DieType.D8, Ability.DEX),
            ("vanguard", DieType.D10, Ability.STR),
            ("artifex", DieType.D8, Ability.INT),
            ("mindweaver", DieType.D8, Ability.INT),
        ],
    )
    def test_hit_die_and_primary_ability(
        self,
        class_name: str,
        hit_die: DieType,
        ability: Ability,
    ) -> None:
        """Test hit die and primary ability per class."""
        assert get_class_hit_die(class_name) is hit_die
        assert get_class_primary_ability(class_name) is ability


class TestLookups:
    """Tests for registry lookup helpers."""

    def test_resolve_class_accepts_strings(self) -> None:
        """Test string names resolve to the enum."""
        assert resolve_class("shadehand") is HollowGearClass.SHADEHAND
        assert resolve_class(HollowGearClass.ARTIFEX) is HollowGearClass.ARTIFEX

    def test_unknown_class_raises(self) -> None:
        """Test an unknown class name raises with context."""
        with pytest.raises(UnknownClassError) as exc_info:
            get_class_info("bard")

        assert exc_info.value.details["class_name"] == "bard"
        assert "arcanist" in exc_info.value.details["valid_classes"]

    def test_is_valid_class(self) -> None:
        """Test class name validity checks."""
        assert is_valid_class("templar")
        assert not is_valid_class("bard")

    def test_get_archetype(self) -> None:
        """Test archetype lookup across classes."""
        archetype = get_archetype("iron_saint")

        assert archetype is not None
        assert archetype.parent_class is HollowGearClass.TEMPLAR
        assert get_archetype("nonexistent") is None

    @pytest.mark.parametrize(
        ("class_name", "level"),
        [("mindweaver", 1), ("arcanist", 2), ("templar", 3), ("vanguard", 3)],
    )
    def test_archetype_selection_level(self, class_name: str, level: int) -> None:
        """Test archetype selection levels."""
        assert get_archetype_selection_level(class_name) == level

    def test_spellcasting_and_psionics_flags(self) -> None:
        """Test casting and manifesting flags."""
        assert has_spellcasting("arcanist")
        assert has_spellcasting("templar")
        assert not has_spellcasting("vanguard")
        assert has_psionics("mindweaver")
        assert not has_psionics("arcanist")

    def test_spellcasting_progressions(self) -> None:
        """Test arcanist is a full caster and templar a half caster."""
        assert get_class_info("arcanist").spellcasting.progression is SpellcastingProgression.FULL
        assert get_class_info("templar").spellcasting.progression is SpellcastingProgression.HALF

    def test_filters(self) -> None:
        """Test the registry filter helpers."""
        assert get_classes_by_spellcasting(SpellcastingType.ARCANIST) == [HollowGearClass.ARCANIST]
        assert get_classes_by_psionics() == [HollowGearClass.MINDWEAVER]
        assert get_classes_by_hit_die("d12") == [HollowGearClass.TWEAKER]
        assert set(get_classes_by_primary_ability(Ability.INT)) == {
            HollowGearClass.ARCANIST,
            HollowGearClass.ARTIFEX,
            HollowGearClass.MINDWEAVER,
        }

    def test_mindweaver_psionics(self) -> None:
        """Test the mindweaver psionic descriptor."""
        psionics = get_class_info("mindweaver").psionics

        assert psionics is not None
        assert psionics.afp_progression[0] == 2
        assert psionics.afp_progression[-1] == 21
        assert len(psionics.disciplines) == 6
