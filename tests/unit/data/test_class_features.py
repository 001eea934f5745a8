"""Tests for base class feature tables and feats."""

from __future__ import annotations

import pytest

from hollowgear.core.exceptions import UnknownClassError
from hollowgear.data.class_features import build_feature, get_class_feature_table
from hollowgear.data.feats import HOLLOW_GEAR_FEATS, get_feat
from hollowgear.models.enums import Ability, FeatureMechanicType, HollowGearClass, RecoveryTiming


class TestBuildFeature:
    """Tests for the feature builder."""

    def test_limited_feature(self) -> None:
        """Test uses and activation are built from flat arguments."""
        feature = build_feature(
            "test_surge",
            "Surge",
            1,
            "Go faster.",
            FeatureMechanicType.BONUS_ACTION,
            "+10 ft speed",
            cost={"Surge Points": 1},
            uses=2,
            restore_on=RecoveryTiming.SHORT,
        )

        assert feature.mechanics.effects == ("+10 ft speed",)
        assert feature.mechanics.activation.cost == {"Surge Points": 1}
        assert feature.uses.maximum == 2
        assert feature.uses.current == 2
        assert feature.uses.restore_on is RecoveryTiming.SHORT

    def test_unlimited_feature(self) -> None:
        """Test a feature without uses or cost."""
        feature = build_feature("p", "Passive", 1, "", FeatureMechanicType.PASSIVE)

        assert feature.uses is None
        assert feature.mechanics.activation is None


class TestClassFeatureTables:
    """Tests for per-class feature tables."""

    @pytest.mark.parametrize("class_name", list(HollowGearClass))
    def test_every_class_has_level_one_features(self, class_name: HollowGearClass) -> None:
        """Test each class grants something at level 1."""
        table = get_class_feature_table(class_name, 1)
        assert any(feature.level == 1 for feature in table)

    @pytest.mark.parametrize(
        ("level", "dice"),
        [(1, "1d6"), (2, "1d6"), (3, "2d6"), (10, "5d6"), (19, "10d6"), (20, "10d6")],
    )
    def test_sneak_attack_scales(self, level: int, dice: str) -> None:
        """Test sneak attack dice are ceil(level / 2) d6."""
        table = get_class_feature_table("shadehand", level)
        sneak_attack = next(f for f in table if f.id == "shadehand_sneak_attack")

        assert sneak_attack.mechanics.value == dice

    def test_unknown_class(self) -> None:
        """Test an unknown class raises."""
        with pytest.raises(UnknownClassError):
            get_class_feature_table("bard", 1)


class TestFeats:
    """Tests for the feat catalog."""

    def test_catalog(self) -> None:
        """Test the known feats are present."""
        assert set(HOLLOW_GEAR_FEATS) == {
            "aether_sensitive",
            "steam_engineer",
            "gear_savant",
            "psionic_adept",
        }

    def test_psionic_adept_requires_intelligence(self) -> None:
        """Test psionic adept's ability requirement."""
        feat = get_feat("psionic_adept")

        assert feat is not None
        assert feat.ability_requirements == {Ability.INT: 13}

    def test_unknown_feat(self) -> None:
        """Test unknown feat ids return None."""
        assert get_feat("nope") is None
