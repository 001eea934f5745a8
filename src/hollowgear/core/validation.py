"""Result types for expected rule violations.

Validators in the engine never raise for something a player can do wrong.
They return a :class:`ValidationResult` that is either a success carrying
data or a failure carrying every :class:`ValidationIssue` found.

Example:
    >>> result = validation_failure([validation_error("level", "Too low", "INVALID_LEVEL_TOO_LOW")])
    >>> result.success
    False
    >>> result.error_codes
    ['INVALID_LEVEL_TOO_LOW']
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


class ValidationIssue(BaseModel):
    """A single rule violation.

    Attributes:
        field: Name of the offending input.
        message: Human-readable description.
        code: Stable machine-readable error code.
        context: Optional extra values (limits, offending amounts).
    """

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    code: str
    context: dict[str, Any] | None = None


class ValidationResult(BaseModel, Generic[T]):
    """Tagged success/failure outcome of a validator."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    data: T | None = None
    errors: list[ValidationIssue] = Field(default_factory=list)

    @property
    def error_codes(self) -> list[str]:
        """Codes of all errors in report order."""
        return [issue.code for issue in self.errors]

    def has_error(self, code: str) -> bool:
        """Check whether an error with the given code was reported."""
        return any(issue.code == code for issue in self.errors)


def validation_success(data: T) -> ValidationResult[T]:
    """Build a successful result carrying ``data``."""
    return ValidationResult(success=True, data=data)


def validation_failure(errors: list[ValidationIssue]) -> ValidationResult[Any]:
    """Build a failed result carrying every issue found."""
    return ValidationResult(success=False, errors=list(errors))


def validation_error(
    field: str,
    message: str,
    code: str,
    context: dict[str, Any] | None = None,
) -> ValidationIssue:
    """Build a single :class:`ValidationIssue`."""
    return ValidationIssue(field=field, message=message, code=code, context=context)


__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "validation_success",
    "validation_failure",
    "validation_error",
]
