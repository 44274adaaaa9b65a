"""Phase transition table.

Every phase change in the timer goes through :func:`enter_phase`, and every
expiry goes through :func:`complete_phase`; render and input code never
assign ``state.phase`` on their own.
"""

from __future__ import annotations

import logging
from typing import Callable

from pomobox.core.models.config import ProfileConfig, TimerConfig
from pomobox.core.models.state import Phase, SessionState

_log = logging.getLogger(__name__)


def _after_work(state: SessionState) -> Phase:
    if (state.completed_sessions + 1) % state.config.sessions_per_set == 0:
        return Phase.LONG_BREAK
    return Phase.SHORT_BREAK


def _to_work(_state: SessionState) -> Phase:
    return Phase.WORK


# phase that just ended -> chooser of the next phase
TRANSITIONS: dict[Phase, Callable[[SessionState], Phase]] = {
    Phase.IDLE: _to_work,
    Phase.WORK: _after_work,
    Phase.SHORT_BREAK: _to_work,
    Phase.LONG_BREAK: _to_work,
}


def phase_duration(config: TimerConfig, phase: Phase) -> int:
    """Countdown length for *phase*; Idle and Config preview the work duration."""
    if phase is Phase.SHORT_BREAK:
        return config.short_break_seconds
    if phase is Phase.LONG_BREAK:
        return config.long_break_seconds
    return config.work_seconds


def next_phase(state: SessionState) -> Phase:
    """Return the phase that follows the current one (Config has no successor)."""
    chooser = TRANSITIONS.get(state.phase)
    if chooser is None:
        raise ValueError(f"No transition out of {state.phase.value!r}")
    return chooser(state)


def enter_phase(state: SessionState, phase: Phase) -> None:
    """Switch to *phase* and re-seed the countdown from the configuration."""
    state.phase = phase
    state.remaining_seconds = phase_duration(state.config, phase)


def complete_phase(state: SessionState, profile: ProfileConfig) -> Phase:
    """Apply the transition for an expired phase and return the phase entered.

    A completed Work session is counted before the switch; when it closes
    a set the set counter advances too.  The timer keeps running into the
    next phase only if the profile auto-continues.
    """
    finished = state.phase
    target = next_phase(state)

    if finished is Phase.WORK:
        state.completed_sessions += 1
        if target is Phase.LONG_BREAK:
            state.completed_sets += 1

    enter_phase(state, target)
    state.timer_active = profile.auto_continue
    _log.info(
        "Phase %s -> %s (sessions=%d sets=%d active=%s)",
        finished.value,
        target.value,
        state.completed_sessions,
        state.completed_sets,
        state.timer_active,
    )
    return target
