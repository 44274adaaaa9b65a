"""Tests for the phase transition table and counters."""

from __future__ import annotations

import pytest

from pomobox.core.models.state import Phase, SessionState
from pomobox.core.transitions import complete_phase, enter_phase, next_phase, phase_duration


class TestPhaseDuration:
    def test_each_phase(self, timer_config):
        assert phase_duration(timer_config, Phase.WORK) == 1500
        assert phase_duration(timer_config, Phase.SHORT_BREAK) == 300
        assert phase_duration(timer_config, Phase.LONG_BREAK) == 900

    def test_idle_and_config_preview_work(self, timer_config):
        assert phase_duration(timer_config, Phase.IDLE) == 1500
        assert phase_duration(timer_config, Phase.CONFIG) == 1500


class TestNextPhase:
    def test_idle_goes_to_work(self, timer_config):
        assert next_phase(SessionState.new(timer_config)) is Phase.WORK

    def test_breaks_go_to_work(self, timer_config):
        for phase in (Phase.SHORT_BREAK, Phase.LONG_BREAK):
            assert next_phase(SessionState.new(timer_config, phase)) is Phase.WORK

    def test_work_goes_to_short_break_mid_set(self, timer_config):
        state = SessionState.new(timer_config, Phase.WORK)
        state.completed_sessions = 1
        assert next_phase(state) is Phase.SHORT_BREAK

    def test_work_goes_to_long_break_at_set_end(self, timer_config):
        state = SessionState.new(timer_config, Phase.WORK)
        state.completed_sessions = 3
        assert next_phase(state) is Phase.LONG_BREAK

    def test_config_has_no_successor(self, timer_config):
        with pytest.raises(ValueError):
            next_phase(SessionState.new(timer_config, Phase.CONFIG))


class TestEnterPhase:
    def test_reseeds_remaining(self, timer_config):
        state = SessionState.new(timer_config, Phase.WORK)
        state.remaining_seconds = 12
        enter_phase(state, Phase.SHORT_BREAK)
        assert state.phase is Phase.SHORT_BREAK
        assert state.remaining_seconds == 300

    def test_uses_current_config(self, timer_config):
        state = SessionState.new(timer_config)
        state.config.long_break_seconds = 1200
        enter_phase(state, Phase.LONG_BREAK)
        assert state.remaining_seconds == 1200


class TestCompletePhase:
    def test_work_counts_session(self, timer_config, full_profile):
        state = SessionState.new(timer_config, Phase.WORK)
        assert complete_phase(state, full_profile) is Phase.SHORT_BREAK
        assert state.completed_sessions == 1
        assert state.completed_sets == 0
        assert state.timer_active is True

    def test_break_does_not_count(self, timer_config, full_profile):
        state = SessionState.new(timer_config, Phase.SHORT_BREAK)
        complete_phase(state, full_profile)
        assert state.completed_sessions == 0
        assert state.phase is Phase.WORK

    def test_manual_profile_stops(self, timer_config, minimal_profile):
        state = SessionState.new(timer_config, Phase.WORK)
        state.timer_active = True
        complete_phase(state, minimal_profile)
        assert state.timer_active is False

    def test_four_session_cycle(self, timer_config, full_profile):
        state = SessionState.new(timer_config, Phase.WORK)
        visited = []
        for _ in range(8):
            visited.append(complete_phase(state, full_profile))

        assert visited == [
            Phase.SHORT_BREAK, Phase.WORK,
            Phase.SHORT_BREAK, Phase.WORK,
            Phase.SHORT_BREAK, Phase.WORK,
            Phase.LONG_BREAK, Phase.WORK,
        ]
        assert state.completed_sessions == 4
        assert state.completed_sets == 1

    def test_single_session_sets(self, timer_config, full_profile):
        timer_config.sessions_per_set = 1
        state = SessionState.new(timer_config, Phase.WORK)
        assert complete_phase(state, full_profile) is Phase.LONG_BREAK
        assert state.completed_sets == 1
