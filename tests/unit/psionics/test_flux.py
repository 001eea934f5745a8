"""Tests for AFP pools, overload and feedback."""

from __future__ import annotations

from datetime import datetime

import pytest

from hollowgear.core.exceptions import PsionicsError
from hollowgear.models.enums import PsionicFeedbackType, RecoveryTiming, ResourceType, RestType
from hollowgear.psionics.flux import (
    AFP_POOL_NAME,
    FEEDBACK_TABLE,
    add_temporary_afp,
    calculate_maximum_afp,
    calculate_multiclass_afp,
    can_afford_power,
    check_afp_fatigue,
    check_overload_risk,
    create_resource_pool,
    get_afp_recovery_amount,
    get_feedback_effect,
    get_safe_afp_limit,
    get_total_afp,
    restore_afp,
    roll_psionic_feedback,
    spend_afp,
)


class TestMaximumAfp:
    """Tests for AFP maximums."""

    @pytest.mark.parametrize(
        ("level", "modifier", "expected"),
        [(1, 3, 4), (5, 3, 8), (1, -3, 2), (1, 0, 2), (20, 5, 25)],
    )
    def test_level_plus_modifier(self, level: int, modifier: int, expected: int) -> None:
        """Test the maximum is level plus modifier with a floor of 2."""
        assert calculate_maximum_afp(level, modifier) == expected

    def test_multiclass_floors_each_class(self) -> None:
        """Test each psionic class is floored before summing."""
        assert calculate_multiclass_afp([(5, 3), (1, -4)]) == 10
        assert calculate_multiclass_afp([]) == 0


class TestPool:
    """Tests for pool operations."""

    def test_create_pool(self) -> None:
        """Test a new pool is full and labelled."""
        pool = create_resource_pool(8)

        assert pool.current == 8
        assert pool.name == AFP_POOL_NAME
        assert pool.resource_type is ResourceType.AFP
        assert pool.recovery is RecoveryTiming.SHORT
        assert create_resource_pool(8, current=3).current == 3

    def test_spend_temporary_first(self) -> None:
        """Test temporary points are spent before current points."""
        pool = add_temporary_afp(create_resource_pool(8), 2)

        result = spend_afp(pool, 3)

        assert result.success
        assert result.pool.temporary == 0
        assert result.pool.current == 7
        assert result.remaining == 7

    def test_spend_exact_total(self) -> None:
        """Test spending everything leaves an empty pool."""
        result = spend_afp(add_temporary_afp(create_resource_pool(2), 1), 3)

        assert result.success
        assert get_total_afp(result.pool) == 0
        assert check_afp_fatigue(result.pool)

    def test_spend_too_much(self) -> None:
        """Test an unaffordable spend leaves the pool unchanged."""
        pool = create_resource_pool(4, current=1)

        result = spend_afp(pool, 2)

        assert not result.success
        assert result.pool == pool
        assert result.remaining == 1
        assert not can_afford_power(pool, 2)

    def test_spend_negative(self) -> None:
        """Test negative spends raise."""
        with pytest.raises(PsionicsError):
            spend_afp(create_resource_pool(4), -1)

    def test_short_rest_keeps_temporary(self) -> None:
        """Test a short rest refills current and keeps temporary points."""
        pool = add_temporary_afp(create_resource_pool(6, current=1), 2)

        restored = restore_afp(pool, RestType.SHORT)

        assert restored.current == 6
        assert restored.temporary == 2

    def test_long_rest_clears_temporary(self) -> None:
        """Test a long rest drops temporary points."""
        pool = add_temporary_afp(create_resource_pool(6, current=1), 2)

        restored = restore_afp(pool, "long")

        assert restored.current == 6
        assert restored.temporary == 0

    def test_recovery_amount(self) -> None:
        """Test the points a rest gives back."""
        assert get_afp_recovery_amount(create_resource_pool(6, current=1), RestType.SHORT) == 5
        assert get_afp_recovery_amount(create_resource_pool(6), RestType.LONG) == 0

    def test_fatigue(self) -> None:
        """Test fatigue only for a drained pool with a maximum."""
        assert not check_afp_fatigue(create_resource_pool(6, current=1))
        assert not check_afp_fatigue(create_resource_pool(0))
        assert check_afp_fatigue(create_resource_pool(6, current=0))


class TestOverload:
    """Tests for overload checks."""

    def test_safe_limit(self) -> None:
        """Test the safe limit is the character level."""
        assert get_safe_afp_limit(7) == 7

    def test_within_limit(self) -> None:
        """Test spending up to the level is safe."""
        check = check_overload_risk(5, 5, 10)

        assert not check.is_overloaded
        assert check.excess_afp == 0
        assert check.save_dc == 0
        assert check.last_overload_time is None

    def test_overload(self, fixed_now: datetime) -> None:
        """Test the save DC is 12 plus the excess."""
        check = check_overload_risk(7, 5, 10, now=fixed_now)

        assert check.is_overloaded
        assert check.excess_afp == 2
        assert check.save_dc == 14
        assert check.feedback_risk
        assert check.last_overload_time == fixed_now


class TestFeedback:
    """Tests for the feedback table."""

    def test_table_shape(self) -> None:
        """Test six entries with the stacking and persistence flags."""
        assert sorted(FEEDBACK_TABLE) == [1, 2, 3, 4, 5, 6]
        assert [FEEDBACK_TABLE[i].stackable for i in range(1, 7)] == [
            False, False, True, True, False, False,
        ]
        assert FEEDBACK_TABLE[5].persistent
        assert FEEDBACK_TABLE[6].duration == "end of next turn"

    @pytest.mark.parametrize("roll", [0, 7])
    def test_out_of_range(self, roll: int) -> None:
        """Test rolls outside 1-6 raise."""
        with pytest.raises(PsionicsError):
            get_feedback_effect(roll)

    def test_roll_feedback(self, fixed_roller) -> None:
        """Test the feedback roll uses a d6."""
        roller = fixed_roller(4)

        effect = roll_psionic_feedback(roller)

        assert effect.type is PsionicFeedbackType.AETHER_FLARE
        assert effect.area_effect.radius == 10
        assert roller.expressions == ["1d6"]

    def test_roll_feedback_default_roller(self) -> None:
        """Test rolling with the shared roller."""
        assert roll_psionic_feedback() in FEEDBACK_TABLE.values()
