"""Exception hierarchy for the Hollow Gear progression engine.

Rule violations a player can cause (too little XP, an ability score pushed
past the cap, a missing level-up choice) are reported through
:mod:`hollowgear.core.validation` results and never raise. The exceptions
below signal programming or data errors: an unknown class name, malformed
static reference data, bad configuration or an unparseable dice expression.

Example:
    >>> from hollowgear.core.exceptions import UnknownClassError
    >>> raise UnknownClassError("No such class", class_name="bard")
"""

from __future__ import annotations

from typing import Any


class HollowGearError(Exception):
    """Base exception for all Hollow Gear engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration
# =============================================================================


class ConfigurationError(HollowGearError):
    """Raised when engine configuration is invalid or cannot be loaded."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Rules Data
# =============================================================================


class RulesDataError(HollowGearError):
    """Raised when static class, archetype or power data is inconsistent."""


class UnknownClassError(RulesDataError):
    """Raised when a class name is not part of the Hollow Gear registry."""

    def __init__(
        self,
        message: str,
        *,
        class_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown class error.

        Args:
            message: Human-readable error description.
            class_name: The class name that failed to resolve.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if class_name:
            combined_details["class_name"] = class_name
        super().__init__(message, details=combined_details)


# =============================================================================
# Engine
# =============================================================================


class EngineError(HollowGearError):
    """Base exception for progression engine failures."""


class DiceRollError(EngineError):
    """Raised when a dice expression cannot be parsed or rolled."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


# =============================================================================
# Psionics
# =============================================================================


class PsionicsError(EngineError):
    """Base exception for psionic subsystem failures."""


class FocusLimitError(PsionicsError):
    """Raised when a power is added to a focus state that cannot hold it.

    Callers are expected to check ``can_maintain_additional_power`` first;
    reaching this error means that check was skipped.
    """

    def __init__(
        self,
        message: str,
        *,
        power_id: str | None = None,
        focus_limit: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize focus limit error.

        Args:
            message: Human-readable error description.
            power_id: The power that could not be maintained.
            focus_limit: The focus limit in effect.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if power_id:
            combined_details["power_id"] = power_id
        if focus_limit is not None:
            combined_details["focus_limit"] = focus_limit
        super().__init__(message, details=combined_details)


__all__ = [
    "HollowGearError",
    "ConfigurationError",
    "RulesDataError",
    "UnknownClassError",
    "EngineError",
    "DiceRollError",
    "PsionicsError",
    "FocusLimitError",
]
