"""Tests for InputDispatcher — key handling on the timer and settings screens."""

from __future__ import annotations

import pytest

from pomobox.core.input_dispatcher import InputDispatcher
from pomobox.core.models.config import PhaseColor
from pomobox.core.models.state import Key, Phase, SessionState
from pomobox.core.timer_engine import TimerEngine

TPS = 60


@pytest.fixture
def dispatcher(engine, full_profile) -> InputDispatcher:
    return InputDispatcher(engine, full_profile)


@pytest.fixture
def minimal_dispatcher(minimal_profile) -> InputDispatcher:
    return InputDispatcher(TimerEngine(minimal_profile, ticks_per_second=TPS), minimal_profile)


@pytest.fixture
def idle_state(timer_config) -> SessionState:
    return SessionState.new(timer_config)


class TestStartPause:
    def test_start_from_idle_enters_work(self, dispatcher, idle_state):
        dispatcher.dispatch(idle_state, {Key.A}, now=500)
        assert idle_state.phase is Phase.WORK
        assert idle_state.timer_active is True
        assert idle_state.remaining_seconds == 1500
        assert idle_state.last_sampled_tick == 500

    def test_start_from_idle_stays_idle_when_disabled(self, engine, idle_state, full_profile):
        profile = full_profile.model_copy(update={"activate_from_idle_enters_work": False})
        InputDispatcher(engine, profile).dispatch(idle_state, {Key.A}, now=0)
        assert idle_state.phase is Phase.IDLE
        assert idle_state.timer_active is True

    def test_pause_then_resume(self, dispatcher, work_state):
        dispatcher.dispatch(work_state, {Key.A}, now=10)
        assert work_state.timer_active is False
        dispatcher.dispatch(work_state, {Key.A}, now=900)
        assert work_state.timer_active is True
        assert work_state.last_sampled_tick == 900

    def test_start_with_stale_zero_transitions(self, dispatcher, work_state):
        work_state.timer_active = False
        work_state.remaining_seconds = 0
        outcomes = dispatcher.dispatch(work_state, {Key.A}, now=0)
        assert len(outcomes) == 1
        assert outcomes[0].completed_phase is Phase.WORK
        assert work_state.phase is Phase.SHORT_BREAK
        assert work_state.completed_sessions == 1


class TestReset:
    def test_full_reset_clears_counters(self, dispatcher, work_state):
        work_state.completed_sessions = 3
        work_state.completed_sets = 2
        work_state.remaining_seconds = 10
        dispatcher.dispatch(work_state, {Key.B}, now=0)
        assert work_state.phase is Phase.IDLE
        assert work_state.timer_active is False
        assert work_state.completed_sessions == 0
        assert work_state.completed_sets == 0
        assert work_state.remaining_seconds == 1500

    def test_minimal_reset_keeps_phase_and_counters(self, minimal_dispatcher, timer_config):
        state = SessionState.new(timer_config, Phase.SHORT_BREAK)
        state.timer_active = True
        state.completed_sessions = 2
        state.remaining_seconds = 42
        minimal_dispatcher.dispatch(state, {Key.B}, now=0)
        assert state.phase is Phase.SHORT_BREAK
        assert state.remaining_seconds == 300
        assert state.completed_sessions == 2
        assert state.timer_active is False


class TestSkip:
    def test_skip_work_counts_session(self, dispatcher, work_state):
        outcomes = dispatcher.dispatch(work_state, {Key.START}, now=7)
        assert outcomes[0].expired is True
        assert work_state.phase is Phase.SHORT_BREAK
        assert work_state.completed_sessions == 1
        assert work_state.timer_active is True
        assert work_state.last_sampled_tick == 7

    def test_skip_while_paused_still_advances(self, minimal_dispatcher, work_state):
        work_state.timer_active = False
        minimal_dispatcher.dispatch(work_state, {Key.START}, now=0)
        assert work_state.phase is Phase.SHORT_BREAK
        assert work_state.timer_active is False

    def test_skip_while_paused_stays_paused_with_auto_continue(self, dispatcher, work_state):
        work_state.timer_active = False
        outcomes = dispatcher.dispatch(work_state, {Key.START}, now=0)
        assert outcomes[0].completed_phase is Phase.WORK
        assert work_state.phase is Phase.SHORT_BREAK
        assert work_state.completed_sessions == 1
        assert work_state.timer_active is False

    def test_skip_in_idle_is_noop(self, dispatcher, idle_state):
        assert dispatcher.dispatch(idle_state, {Key.START}, now=0) == []
        assert idle_state.phase is Phase.IDLE


class TestSettings:
    def test_select_enters_settings(self, dispatcher, work_state):
        dispatcher.dispatch(work_state, {Key.SELECT}, now=0)
        assert work_state.phase is Phase.CONFIG
        assert work_state.timer_active is False
        assert work_state.remaining_seconds == 1500

    def test_round_trip_to_idle(self, dispatcher, work_state):
        work_state.remaining_seconds = 30
        dispatcher.dispatch(work_state, {Key.SELECT}, now=0)
        dispatcher.dispatch(work_state, {Key.B}, now=0)
        assert work_state.phase is Phase.IDLE
        assert work_state.remaining_seconds == work_state.config.work_seconds

    def test_select_also_exits(self, dispatcher, work_state):
        dispatcher.dispatch(work_state, {Key.SELECT}, now=0)
        dispatcher.dispatch(work_state, {Key.SELECT}, now=0)
        assert work_state.phase is Phase.IDLE

    def test_navigate_and_adjust(self, dispatcher, idle_state):
        dispatcher.dispatch(idle_state, {Key.SELECT}, now=0)
        dispatcher.dispatch(idle_state, {Key.DOWN}, now=0)
        dispatcher.dispatch(idle_state, {Key.RIGHT}, now=0)
        assert idle_state.config.short_break_seconds == 360

    def test_up_wraps_to_last_color_field(self, dispatcher, idle_state):
        dispatcher.dispatch(idle_state, {Key.SELECT}, now=0)
        dispatcher.dispatch(idle_state, {Key.UP}, now=0)
        assert idle_state.config_selection == 6
        dispatcher.dispatch(idle_state, {Key.RIGHT}, now=0)
        assert idle_state.config.long_break_color is PhaseColor.RED

    def test_minimal_wraps_at_four(self, minimal_dispatcher, idle_state):
        minimal_dispatcher.dispatch(idle_state, {Key.SELECT}, now=0)
        minimal_dispatcher.dispatch(idle_state, {Key.UP}, now=0)
        assert idle_state.config_selection == 3

    def test_up_wins_over_down(self, dispatcher, idle_state):
        dispatcher.dispatch(idle_state, {Key.SELECT}, now=0)
        dispatcher.dispatch(idle_state, {Key.UP, Key.DOWN}, now=0)
        assert idle_state.config_selection == 6

    def test_left_wins_over_right(self, dispatcher, idle_state):
        dispatcher.dispatch(idle_state, {Key.SELECT}, now=0)
        dispatcher.dispatch(idle_state, {Key.LEFT, Key.RIGHT}, now=0)
        assert idle_state.config.work_seconds == 1440

    def test_timer_keys_ignored_in_settings(self, dispatcher, idle_state):
        dispatcher.dispatch(idle_state, {Key.SELECT}, now=0)
        dispatcher.dispatch(idle_state, {Key.A, Key.START}, now=0)
        assert idle_state.phase is Phase.CONFIG
        assert idle_state.timer_active is False

    def test_edit_applies_on_next_phase_entry(self, dispatcher, idle_state):
        dispatcher.dispatch(idle_state, {Key.SELECT}, now=0)
        dispatcher.dispatch(idle_state, {Key.RIGHT}, now=0)
        dispatcher.dispatch(idle_state, {Key.B}, now=0)
        dispatcher.dispatch(idle_state, {Key.A}, now=0)
        assert idle_state.phase is Phase.WORK
        assert idle_state.remaining_seconds == 1560


def test_no_keys_does_nothing(dispatcher, work_state):
    assert dispatcher.dispatch(work_state, frozenset(), now=0) == []
    assert work_state.remaining_seconds == 1500
