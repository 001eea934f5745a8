"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

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


class TestHollowGearError:
    """Tests for the base HollowGearError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = HollowGearError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = HollowGearError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(HollowGearError("Test", details={"x": 1}))
        assert "HollowGearError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestDomainExceptions:
    """Tests for domain-specific context fields."""

    def test_configuration_error_with_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad value", config_key="max_asi_points")
        assert exc.details["config_key"] == "max_asi_points"

    def test_unknown_class_error_with_name(self) -> None:
        """Test UnknownClassError with class name."""
        exc = UnknownClassError("No such class", class_name="bard")
        assert exc.details["class_name"] == "bard"
        assert "bard" in str(exc)

    def test_dice_roll_error_with_expression(self) -> None:
        """Test DiceRollError with expression."""
        exc = DiceRollError("Invalid", expression="1dX")
        assert exc.details["expression"] == "1dX"

    def test_focus_limit_error_context(self) -> None:
        """Test FocusLimitError keeps power id and limit."""
        exc = FocusLimitError("Full", power_id="spectral-hand", focus_limit=1)
        assert exc.details == {"power_id": "spectral-hand", "focus_limit": 1}

    def test_details_are_merged(self) -> None:
        """Test explicit details are kept alongside context fields."""
        exc = UnknownClassError("Nope", class_name="bard", details={"valid_classes": ["arcanist"]})
        assert exc.details == {"valid_classes": ["arcanist"], "class_name": "bard"}


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        ("exc_class", "parent"),
        [
            (ConfigurationError, HollowGearError),
            (RulesDataError, HollowGearError),
            (UnknownClassError, RulesDataError),
            (EngineError, HollowGearError),
            (DiceRollError, EngineError),
            (PsionicsError, EngineError),
            (FocusLimitError, PsionicsError),
        ],
    )
    def test_inheritance(self, exc_class: type[Exception], parent: type[Exception]) -> None:
        """Test each exception inherits from its parent."""
        assert issubclass(exc_class, parent)

    def test_catch_all_with_base(self) -> None:
        """Test that every engine error can be caught as HollowGearError."""
        with pytest.raises(HollowGearError):
            raise FocusLimitError("Full", power_id="x", focus_limit=1)
