"""Tests for level-based feature acquisition."""

from __future__ import annotations

import pytest

from hollowgear.core.exceptions import UnknownClassError
from hollowgear.data.class_data import get_archetype
from hollowgear.engine.features import (
    get_all_features,
    get_archetype_features_for_level,
    get_class_features_for_level,
)
from hollowgear.engine.multiclass import create_character_class
from hollowgear.models.enums import HollowGearClass


class TestClassFeatures:
    """Tests for base class feature filtering."""

    def test_level_gating(self) -> None:
        """Test features above the class level are hidden."""
        level_one = {f.id for f in get_class_features_for_level("arcanist", 1)}
        level_two = {f.id for f in get_class_features_for_level("arcanist", 2)}

        assert "arcanist_spell_recharge" not in level_one
        assert "arcanist_spell_recharge" in level_two
        assert level_one < level_two

    @pytest.mark.parametrize("class_name", list(HollowGearClass))
    def test_features_never_exceed_level(self, class_name: HollowGearClass) -> None:
        """Test every returned feature is available at the requested level."""
        for level in range(1, 21):
            features = get_class_features_for_level(class_name, level)
            assert all(feature.level <= level for feature in features)

    def test_unknown_class(self) -> None:
        """Test unknown classes raise."""
        with pytest.raises(UnknownClassError):
            get_class_features_for_level("bard", 3)


class TestArchetypeFeatures:
    """Tests for archetype feature filtering."""

    def test_monotonic_in_level(self) -> None:
        """Test raising the level never removes an archetype feature."""
        archetype = get_archetype("gearwright")
        assert archetype is not None

        previous: set[str] = set()
        for level in range(1, 21):
            current = {f.id for f in get_archetype_features_for_level(archetype, level)}
            assert previous <= current
            previous = current

        assert "gearwright_temporary_constructs" in previous

    def test_before_selection_level(self) -> None:
        """Test no archetype features below their first unlock."""
        archetype = get_archetype("relic_knight")
        assert archetype is not None

        assert get_archetype_features_for_level(archetype, 2) == []


class TestAllFeatures:
    """Tests for gathering features across class entries."""

    def test_multiclass_features(self, sample_classes: list) -> None:
        """Test base and archetype features from every entry."""
        ids = [f.id for f in get_all_features(sample_classes)]

        assert ids[:3] == [
            "arcanist_spellcasting",
            "arcanist_tinker_savant",
            "arcanist_spell_recharge",
        ]
        assert "aethermancer_psionic_conversion" in ids
        assert "aethermancer_resonant_pulse" not in ids
        assert "relic_knight_aura_of_focus" in ids
        assert "relic_knight_faith_barrier" not in ids
        assert len(ids) == 9

    def test_entry_without_archetype(self) -> None:
        """Test entries without an archetype only contribute base features."""
        features = get_all_features([create_character_class("vanguard", 5)])

        assert all(f.id.startswith("vanguard_") for f in features)

    def test_empty_list(self) -> None:
        """Test no classes means no features."""
        assert get_all_features([]) == []
