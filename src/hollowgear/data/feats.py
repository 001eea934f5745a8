"""Feats that may be taken in place of an ability score improvement."""

from __future__ import annotations

from types import MappingProxyType

from hollowgear.models.enums import Ability
from hollowgear.models.progression import FeatDefinition


HOLLOW_GEAR_FEATS: MappingProxyType[str, FeatDefinition] = MappingProxyType(
    {
        feat.feat_id: feat
        for feat in (
            FeatDefinition(
                feat_id="aether_sensitive",
                name="Aether Sensitive",
                description="Increase sensitivity to Aetheric energies, gain +1 to psionic saves",
            ),
            FeatDefinition(
                feat_id="steam_engineer",
                name="Steam Engineer",
                description="Expertise with steam-powered devices, reduce heat stress by 1",
            ),
            FeatDefinition(
                feat_id="gear_savant",
                name="Gear Savant",
                description="Proficiency with all artisan tools, +1 to equipment modification rolls",
            ),
            FeatDefinition(
                feat_id="psionic_adept",
                name="Psionic Adept",
                description="Learn one 1st-tier psionic power from any discipline",
                ability_requirements={Ability.INT: 13},
            ),
        )
    }
)


def get_feat(feat_id: str) -> FeatDefinition | None:
    return HOLLOW_GEAR_FEATS.get(feat_id)


__all__ = ["HOLLOW_GEAR_FEATS", "get_feat"]
