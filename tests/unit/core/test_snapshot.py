"""Tests for TimerSnapshot construction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pomobox.core.models.config import PhaseColor
from pomobox.core.models.state import Phase, SessionState
from pomobox.core.snapshot import build_snapshot, format_mmss


class TestFormatMmss:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "00:00"), (59, "00:59"), (60, "01:00"), (1500, "25:00"), (6000, "100:00")],
    )
    def test_format(self, seconds, expected):
        assert format_mmss(seconds) == expected


class TestBuildSnapshot:
    def test_idle(self, timer_config, full_profile):
        snap = build_snapshot(SessionState.new(timer_config), full_profile)
        assert snap.label == "READY"
        assert snap.mmss == "25:00"
        assert snap.progress_percent == 0
        assert snap.color is None
        assert snap.config_items == ()

    def test_work_progress_and_color(self, work_state, full_profile):
        work_state.remaining_seconds = 750
        snap = build_snapshot(work_state, full_profile)
        assert snap.label == "WORK"
        assert snap.progress_percent == 50
        assert snap.color is PhaseColor.RED
        assert (snap.minutes, snap.seconds) == (12, 30)

    def test_progress_capped_when_config_shrinks(self, work_state, full_profile):
        work_state.remaining_seconds = 1500
        work_state.config.work_seconds = 600
        snap = build_snapshot(work_state, full_profile)
        assert snap.progress_percent == 0
        work_state.remaining_seconds = 0
        assert build_snapshot(work_state, full_profile).progress_percent == 100

    def test_break_colors(self, timer_config, full_profile):
        timer_config.short_break_color = PhaseColor.BLUE
        snap = build_snapshot(SessionState.new(timer_config, Phase.SHORT_BREAK), full_profile)
        assert snap.color is PhaseColor.BLUE
        snap = build_snapshot(SessionState.new(timer_config, Phase.LONG_BREAK), full_profile)
        assert snap.color is PhaseColor.BLUE

    def test_sessions_in_set(self, work_state, full_profile):
        work_state.completed_sessions = 6
        work_state.completed_sets = 1
        snap = build_snapshot(work_state, full_profile)
        assert snap.sessions_in_set == 2
        assert snap.sessions_per_set == 4
        assert snap.completed_sets == 1

    def test_config_items_full(self, timer_config, full_profile):
        state = SessionState.new(timer_config, Phase.CONFIG)
        state.config_selection = 4
        snap = build_snapshot(state, full_profile)
        assert snap.label == "SETTINGS"
        assert len(snap.config_items) == 7
        assert snap.config_items[0].value == "25m"
        assert snap.config_items[4].selected is True
        assert sum(item.selected for item in snap.config_items) == 1

    def test_config_items_minimal(self, timer_config, minimal_profile):
        snap = build_snapshot(SessionState.new(timer_config, Phase.CONFIG), minimal_profile)
        assert [item.label for item in snap.config_items] == [
            "WORK TIME",
            "SHORT BREAK",
            "LONG BREAK",
            "SESSIONS PER SET",
        ]

    def test_snapshot_is_frozen(self, work_state, full_profile):
        snap = build_snapshot(work_state, full_profile)
        with pytest.raises(ValidationError):
            snap.remaining_seconds = 3

    def test_building_does_not_mutate_state(self, work_state, full_profile):
        before = work_state.model_dump()
        build_snapshot(work_state, full_profile)
        assert work_state.model_dump() == before
