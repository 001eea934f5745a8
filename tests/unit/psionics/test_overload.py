"""Tests for overload recovery, surges and signatures."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from hollowgear.models.enums import EmotionalState, PsionicFeedbackType, RestType, SignatureIntensity
from hollowgear.psionics.flux import FEEDBACK_TABLE, check_overload_risk
from hollowgear.psionics.overload import (
    SIGNATURE_MANIFESTATIONS,
    accumulate_feedback_effects,
    activate_psionic_surge,
    apply_overload,
    calculate_overload_recovery,
    calculate_signature_intensity,
    calculate_signature_linger_duration,
    check_overload_recovery,
    clear_expired_feedback_effects,
    create_initial_overload_state,
    create_initial_surge_state,
    create_psionic_signature,
    end_psionic_surge_turn,
    is_signature_detectable,
    restore_psionic_surge,
    update_signature_after_power_use,
)


class TestSignature:
    """Tests for psionic signatures."""

    def test_every_emotion_has_a_manifestation(self) -> None:
        """Test the manifestation table covers all emotions."""
        assert set(SIGNATURE_MANIFESTATIONS) == set(EmotionalState)

    def test_create_signature(self) -> None:
        """Test a new signature takes its base emotion's manifestation."""
        signature = create_psionic_signature("pc-7", "rage", power_level=4)

        assert signature.base_emotion is EmotionalState.RAGE
        assert signature.manifestation.intensity is SignatureIntensity.STRONG
        assert signature.power_level == 4
        assert signature.last_used is None

    @pytest.mark.parametrize(
        ("tier", "level", "intensity"),
        [
            (1, 1, SignatureIntensity.FAINT),
            (3, 5, SignatureIntensity.MODERATE),
            (4, 3, SignatureIntensity.STRONG),
            (5, 6, SignatureIntensity.OVERWHELMING),
        ],
    )
    def test_intensity(self, tier: int, level: int, intensity: SignatureIntensity) -> None:
        """Test intensity from tier plus a third of the power level."""
        assert calculate_signature_intensity(tier, level) is intensity

    def test_update_with_new_emotion(self, fixed_now: datetime) -> None:
        """Test a different emotion replaces the manifestation."""
        signature = create_psionic_signature("pc-7", EmotionalState.CALM, power_level=6)

        updated = update_signature_after_power_use(signature, 5, "fear", now=fixed_now)

        assert updated.last_used == fixed_now
        assert updated.manifestation.visual == SIGNATURE_MANIFESTATIONS[EmotionalState.FEAR].visual
        assert updated.manifestation.intensity is SignatureIntensity.OVERWHELMING
        assert updated.base_emotion is EmotionalState.CALM

    def test_update_with_base_emotion(self, fixed_now: datetime) -> None:
        """Test the base emotion keeps its manifestation."""
        signature = create_psionic_signature("pc-7", EmotionalState.CALM)

        updated = update_signature_after_power_use(signature, 1, EmotionalState.CALM, now=fixed_now)

        assert updated.manifestation.visual == signature.manifestation.visual
        assert updated.manifestation.intensity is SignatureIntensity.FAINT

    def test_detectability_window(self, fixed_now: datetime) -> None:
        """Test signatures linger tier x level x 10 minutes."""
        signature = update_signature_after_power_use(
            create_psionic_signature("pc-7", "joy", power_level=2), 3, now=fixed_now
        )

        assert calculate_signature_linger_duration(3, 2) == 60
        assert is_signature_detectable(signature, 3, now=fixed_now + timedelta(minutes=59))
        assert not is_signature_detectable(signature, 3, now=fixed_now + timedelta(minutes=60))

    def test_unused_signature_not_detectable(self, fixed_now: datetime) -> None:
        """Test a signature that was never used cannot be sensed."""
        signature = create_psionic_signature("pc-7", "joy")

        assert not is_signature_detectable(signature, 5, now=fixed_now)


class TestSurge:
    """Tests for the psionic surge."""

    def test_activate(self, fixed_now: datetime) -> None:
        """Test a surge grants its bonus and blocks AFP recovery."""
        state, activated = activate_psionic_surge(create_initial_surge_state(), now=fixed_now)

        assert activated
        assert not state.available
        assert state.bonus_active
        assert state.backlash_pending
        assert state.afp_recovery_blocked
        assert state.last_used == fixed_now

    def test_activate_twice(self) -> None:
        """Test a spent surge cannot be used again."""
        state, _ = activate_psionic_surge(create_initial_surge_state())

        again, activated = activate_psionic_surge(state)

        assert not activated
        assert again is state

    def test_end_turn(self) -> None:
        """Test ending the turn clears the bonus but keeps the block."""
        state, _ = activate_psionic_surge(create_initial_surge_state())

        ended = end_psionic_surge_turn(state)

        assert not ended.bonus_active
        assert not ended.backlash_pending
        assert ended.afp_recovery_blocked

    @pytest.mark.parametrize("rest_type", list(RestType))
    def test_restore(self, rest_type: RestType, fixed_now: datetime) -> None:
        """Test any rest resets the surge and forgets when it was used."""
        state, _ = activate_psionic_surge(create_initial_surge_state(), now=fixed_now)

        restored = restore_psionic_surge(state, rest_type)

        assert restored.available
        assert not restored.afp_recovery_blocked
        assert not restored.backlash_pending
        assert not restored.free_afp_used
        assert restored.last_used is None


class TestOverloadState:
    """Tests for overload recovery."""

    def test_recovery_window(self, fixed_now: datetime) -> None:
        """Test recovery lasts ten minutes per excess AFP."""
        recovery = calculate_overload_recovery(3, now=fixed_now)

        assert recovery.recovery_duration == 30
        assert recovery.penalties_active
        assert recovery.next_afp_recovery_time == fixed_now + timedelta(minutes=30)

    def test_recovery_check(self, fixed_now: datetime) -> None:
        """Test recovery completes once the window has passed."""
        recovery = calculate_overload_recovery(2, now=fixed_now)

        pending = check_overload_recovery(recovery, now=fixed_now + timedelta(minutes=19))
        done = check_overload_recovery(recovery, now=fixed_now + timedelta(minutes=20))

        assert not pending.is_complete
        assert pending.updated_recovery is None
        assert done.is_complete
        assert not done.updated_recovery.penalties_active
        assert not done.updated_recovery.is_recovering

    def test_apply_safe_check(self) -> None:
        """Test a safe expenditure leaves the state alone."""
        state = create_initial_overload_state()

        assert apply_overload(state, check_overload_risk(3, 5, 8)) is state

    def test_apply_overload(self, fixed_now: datetime) -> None:
        """Test an overload starts recovery and keeps feedback."""
        state = create_initial_overload_state().model_copy(
            update={"accumulated_feedback": (FEEDBACK_TABLE[1],)}
        )
        check = check_overload_risk(8, 5, 8, now=fixed_now)

        overloaded = apply_overload(state, check)

        assert overloaded.is_overloaded
        assert overloaded.save_dc == 15
        assert overloaded.last_overload_time == fixed_now
        assert overloaded.recovery.recovery_duration == 30
        assert overloaded.accumulated_feedback == (FEEDBACK_TABLE[1],)


class TestFeedbackBookkeeping:
    """Tests for accumulating and clearing feedback."""

    def test_stackable_effects_pile_up(self) -> None:
        """Test stackable feedback accumulates."""
        effects = accumulate_feedback_effects((), FEEDBACK_TABLE[3])
        effects = accumulate_feedback_effects(effects, FEEDBACK_TABLE[3])

        assert len(effects) == 2

    def test_non_stackable_replaces_same_type(self) -> None:
        """Test non-stackable feedback replaces its own type only."""
        effects = (FEEDBACK_TABLE[1], FEEDBACK_TABLE[3])

        effects = accumulate_feedback_effects(effects, FEEDBACK_TABLE[1])

        assert [e.type for e in effects] == [
            PsionicFeedbackType.NEURAL_SPARK,
            PsionicFeedbackType.MINOR_HEADACHE,
        ]

    def test_clear_keeps_persistent(self) -> None:
        """Test only persistent effects survive the expiry window."""
        effects = (FEEDBACK_TABLE[1], FEEDBACK_TABLE[5], FEEDBACK_TABLE[6])

        assert clear_expired_feedback_effects(effects, 9) == effects
        assert clear_expired_feedback_effects(effects, 10) == (FEEDBACK_TABLE[5],)

    def test_expiry_from_environment(self, mock_env_vars: dict[str, str]) -> None:
        """Test the expiry window can be configured."""
        effects = (FEEDBACK_TABLE[1],)

        assert clear_expired_feedback_effects(effects, 5) == ()
