"""Configuration management for the Hollow Gear engine.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file. Rule knobs that the tabletop rules leave to the
table (the placeholder ability modifier, feedback expiry) live in
:class:`RulesSettings`.

Example:
    >>> from hollowgear.core.config import get_settings
    >>> get_settings().rules.ability_score_cap
    20

Environment Variables:
    HOLLOWGEAR_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    HOLLOWGEAR_JSON_LOGS: Emit JSON log lines
    HOLLOWGEAR_RULES_ABILITY_MODIFIER_PLACEHOLDER: Modifier used when none is supplied
    HOLLOWGEAR_RULES_FEEDBACK_EXPIRY_MINUTES: Lifetime of non-persistent feedback
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hollowgear.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Tunable rule constants.

    Attributes:
        ability_modifier_placeholder: Modifier assumed for ability-scaled
            resources when the caller does not pass one.
        xp_warning_multiplier: Multiple of the level-20 threshold above
            which an XP total is flagged as suspicious.
        ability_score_cap: Highest score an ability score improvement may reach.
        max_asi_points: Points granted by one ability score improvement.
        feedback_expiry_minutes: Minutes before non-persistent psionic
            feedback effects are cleared.
        psychic_backlash_dice: Damage expression for a broken focus.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOLLOWGEAR_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ability_modifier_placeholder: int = Field(
        default=3,
        ge=-5,
        le=10,
        description="Ability modifier used when none is supplied",
    )
    xp_warning_multiplier: int = Field(
        default=2,
        ge=1,
        le=10,
        description="Multiple of max-level XP that triggers a warning",
    )
    ability_score_cap: int = Field(
        default=20,
        ge=1,
        le=30,
        description="Maximum score reachable through improvements",
    )
    max_asi_points: int = Field(
        default=2,
        ge=1,
        le=4,
        description="Points granted by one ability score improvement",
    )
    feedback_expiry_minutes: int = Field(
        default=10,
        ge=1,
        description="Lifetime of non-persistent feedback effects",
    )
    psychic_backlash_dice: str = Field(
        default="1d4",
        description="Damage dice for psychic backlash",
    )

    @field_validator("psychic_backlash_dice", mode="after")
    @classmethod
    def validate_backlash_dice(cls, value: str) -> str:
        """Reject blank backlash expressions.

        Raises:
            ConfigurationError: If the expression is empty.
        """
        if not value.strip():
            raise ConfigurationError(
                "psychic_backlash_dice must not be empty",
                config_key="psychic_backlash_dice",
            )
        return value.strip()

    @model_validator(mode="after")
    def validate_asi_fits_cap(self) -> "RulesSettings":
        """Ensure a single improvement cannot exceed the score cap on its own.

        Raises:
            ConfigurationError: If max_asi_points >= ability_score_cap.
        """
        if self.max_asi_points >= self.ability_score_cap:
            raise ConfigurationError(
                f"max_asi_points ({self.max_asi_points}) must be less than "
                f"ability_score_cap ({self.ability_score_cap})",
                config_key="max_asi_points",
            )
        return self


class Settings(BaseSettings):
    """Top-level engine settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Logging level passed to ``configure_logging``.
        json_logs: Emit JSON log lines.
        rules: Tunable rule constants.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOLLOWGEAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Hollow Gear Progression Engine",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)

    @property
    def is_production(self) -> bool:
        """True when not running in debug mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings singleton.

    Returns:
        The engine Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load engine settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def get_rules() -> RulesSettings:
    """Shortcut for ``get_settings().rules``."""
    return get_settings().rules


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "Settings",
    "get_settings",
    "get_rules",
    "clear_settings_cache",
]
