"""Tests for validation result types."""

from __future__ import annotations

from hollowgear.core.validation import (
    ValidationIssue,
    validation_error,
    validation_failure,
    validation_success,
)


class TestValidationResults:
    """Tests for success and failure construction."""

    def test_success_carries_data(self) -> None:
        """Test a success result keeps its payload and has no errors."""
        result = validation_success({"level": 3})

        assert result.success is True
        assert result.data == {"level": 3}
        assert result.errors == []

    def test_failure_keeps_every_issue(self) -> None:
        """Test a failure keeps all issues in report order."""
        result = validation_failure(
            [
                validation_error("level", "Too low", "INVALID_LEVEL_TOO_LOW"),
                validation_error("xp", "Negative", "INVALID_XP_NEGATIVE", {"xp": -5}),
            ]
        )

        assert result.success is False
        assert result.data is None
        assert result.error_codes == ["INVALID_LEVEL_TOO_LOW", "INVALID_XP_NEGATIVE"]
        assert result.has_error("INVALID_XP_NEGATIVE")
        assert not result.has_error("SOMETHING_ELSE")

    def test_validation_error_builds_issue(self) -> None:
        """Test validation_error builds an issue with optional context."""
        issue = validation_error("feat", "Unknown feat", "INVALID_FEAT", {"feat_id": "nope"})

        assert isinstance(issue, ValidationIssue)
        assert issue.field == "feat"
        assert issue.context == {"feat_id": "nope"}
