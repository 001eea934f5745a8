"""Core infrastructure: configuration, logging, exceptions and result types.

Exports:
    Exceptions:
        HollowGearError: Base exception for all engine errors.
        ConfigurationError: Configuration-related errors.
        UnknownClassError: Unresolvable class names.

    Configuration:
        Settings: Top-level engine settings.
        RulesSettings: Tunable rule constants.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        character_context: Scope log context to one character.

    Validation:
        ValidationResult: Tagged success/failure outcome.
        ValidationIssue: A single rule violation.
"""

from __future__ import annotations

from hollowgear.core.config import (
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_rules,
    get_settings,
)
from hollowgear.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    EngineError,
    FocusLimitError,
    HollowGearError,
    PsionicsError,
    RulesDataError,
    UnknownClassError,
)
from hollowgear.core.logging import (
    bind_context,
    character_context,
    clear_context,
    configure_logging,
    get_logger,
)
from hollowgear.core.validation import (
    ValidationIssue,
    ValidationResult,
    validation_error,
    validation_failure,
    validation_success,
)


__all__ = [
    # Exceptions
    "HollowGearError",
    "ConfigurationError",
    "RulesDataError",
    "UnknownClassError",
    "EngineError",
    "DiceRollError",
    "PsionicsError",
    "FocusLimitError",
    # Configuration
    "Settings",
    "RulesSettings",
    "get_settings",
    "get_rules",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "character_context",
    # Validation
    "ValidationIssue",
    "ValidationResult",
    "validation_error",
    "validation_failure",
    "validation_success",
]
