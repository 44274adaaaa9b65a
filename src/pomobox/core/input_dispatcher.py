"""InputDispatcher — maps keys pressed this frame to timer operations.

Normal phases:  A start/pause, B reset, START skip, SELECT settings.
Settings menu:  UP/DOWN move, LEFT/RIGHT change value, B or SELECT exit.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from pomobox.core import config_editor
from pomobox.core.models.config import ProfileConfig
from pomobox.core.models.state import COUNTDOWN_PHASES, Key, Phase, SessionState
from pomobox.core.timer_engine import TickOutcome, TimerEngine
from pomobox.core.transitions import enter_phase, next_phase

_log = logging.getLogger(__name__)


class InputDispatcher:
    """Applies edge-triggered key presses to a :class:`SessionState`.

    Args:
        engine: Timer engine (its expiry path backs skip and stale-zero starts).
        profile: Behavioural profile (reset and activation policies, field set).
    """

    def __init__(self, engine: TimerEngine, profile: ProfileConfig) -> None:
        self._engine = engine
        self._profile = profile
        self._fields = config_editor.editable_fields(profile)

    @property
    def field_count(self) -> int:
        return len(self._fields)

    def dispatch(self, state: SessionState, pressed: Collection[Key], now: int) -> list[TickOutcome]:
        """Apply every key in *pressed*; return the outcomes of any expiries fired."""
        if not pressed:
            return []
        if state.phase is Phase.CONFIG:
            self._dispatch_config(state, pressed)
            return []
        return self._dispatch_timer(state, pressed, now)

    # ------------------------------------------------------------------
    # Timer screen
    # ------------------------------------------------------------------

    def _dispatch_timer(self, state: SessionState, pressed: Collection[Key], now: int) -> list[TickOutcome]:
        outcomes: list[TickOutcome] = []
        if Key.A in pressed:
            outcome = self.toggle_active(state, now)
            if outcome.expired:
                outcomes.append(outcome)
        if Key.B in pressed:
            self.reset(state)
        if Key.START in pressed:
            outcome = self.skip(state, now)
            if outcome.expired:
                outcomes.append(outcome)
        if Key.SELECT in pressed:
            self.enter_config(state)
        return outcomes

    def toggle_active(self, state: SessionState, now: int) -> TickOutcome:
        """Start or pause the countdown."""
        state.timer_active = not state.timer_active
        if not state.timer_active:
            _log.info("Paused %s at %ds", state.phase.value, state.remaining_seconds)
            return TickOutcome()

        # Idle time must not count once the countdown starts.
        state.last_sampled_tick = now
        if state.phase is Phase.IDLE and self._profile.activate_from_idle_enters_work:
            enter_phase(state, next_phase(state))
        _log.info("Started %s at %ds", state.phase.value, state.remaining_seconds)

        if state.phase in COUNTDOWN_PHASES and state.remaining_seconds == 0:
            return self._engine.expire(state)
        return TickOutcome()

    def reset(self, state: SessionState) -> None:
        """Stop the timer and return to the phase default (counters per profile)."""
        state.timer_active = False
        if self._profile.reset_clears_counters:
            state.completed_sessions = 0
            state.completed_sets = 0
            enter_phase(state, Phase.IDLE)
        else:
            enter_phase(state, state.phase)
        _log.info(
            "Reset to %s (sessions=%d sets=%d)",
            state.phase.value,
            state.completed_sessions,
            state.completed_sets,
        )

    def skip(self, state: SessionState, now: int) -> TickOutcome:
        """Jump straight to the end of the current phase."""
        if state.phase not in COUNTDOWN_PHASES:
            return TickOutcome()
        _log.info("Skipping %s with %ds left", state.phase.value, state.remaining_seconds)
        was_active = state.timer_active
        state.remaining_seconds = 0
        outcome = self._engine.expire(state)
        # A paused timer stays paused in the next phase.
        state.timer_active = was_active and self._profile.auto_continue
        if state.timer_active:
            state.last_sampled_tick = now
        return outcome

    def enter_config(self, state: SessionState) -> None:
        state.timer_active = False
        enter_phase(state, Phase.CONFIG)
        _log.info("Entered settings")

    # ------------------------------------------------------------------
    # Settings menu
    # ------------------------------------------------------------------

    def _dispatch_config(self, state: SessionState, pressed: Collection[Key]) -> None:
        if Key.UP in pressed:
            config_editor.select_previous(state, self.field_count)
        elif Key.DOWN in pressed:
            config_editor.select_next(state, self.field_count)

        if Key.LEFT in pressed or Key.RIGHT in pressed:
            delta = -1 if Key.LEFT in pressed else 1
            config_editor.adjust_field(state.config, state.config_selection, delta, self._fields)

        if Key.B in pressed or Key.SELECT in pressed:
            self.exit_config(state)

    def exit_config(self, state: SessionState) -> None:
        """Leave the settings menu to Idle, previewing the work duration."""
        enter_phase(state, Phase.IDLE)
        _log.info("Left settings (work=%ds)", state.remaining_seconds)
