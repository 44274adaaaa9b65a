"""TimerEngine — whole-second countdown driven by a tick clock.

The engine never reads the clock itself: the frame loop samples
``clock.elapsed_ticks()`` once per frame and passes it to :meth:`tick`,
which keeps the countdown independent of frame rate.

Second boundaries are tracked drift-free: ``last_sampled_tick`` advances
by exactly ``seconds * ticks_per_second`` so the sub-second remainder is
carried into the next frame instead of being dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pomobox.core.interfaces.hardware import BuzzerInterface
from pomobox.core.models.config import ProfileConfig
from pomobox.core.models.state import COUNTDOWN_PHASES, Phase, SessionState
from pomobox.core.transitions import complete_phase

_log = logging.getLogger(__name__)

# (frequency Hz, duration ms)
EXPIRY_TONE = (2000, 30)
MINUTE_TONE = (1000, 5)


@dataclass(frozen=True)
class TickOutcome:
    """What a single :meth:`TimerEngine.tick` call did."""

    seconds_elapsed: int = 0
    expired: bool = False
    completed_phase: Phase | None = None
    entered_phase: Phase | None = None


_NOTHING = TickOutcome()


class TimerEngine:
    """Advances :class:`SessionState` countdowns from clock ticks.

    Args:
        profile: Behavioural profile (auto-continue, minute chime).
        ticks_per_second: Clock resolution.
        buzzer: Optional audio collaborator; ``None`` disables cues.
        counter_modulus: Roll-over value of a wrapping tick counter.
    """

    def __init__(
        self,
        profile: ProfileConfig,
        ticks_per_second: int,
        buzzer: BuzzerInterface | None = None,
        counter_modulus: int | None = None,
    ) -> None:
        if ticks_per_second <= 0:
            raise ValueError("ticks_per_second must be greater than zero")
        self._profile = profile
        self._tps = ticks_per_second
        self._buzzer = buzzer
        self._modulus = counter_modulus

    @property
    def ticks_per_second(self) -> int:
        return self._tps

    def tick(self, state: SessionState, now: int) -> TickOutcome:
        """Advance *state* to clock value *now*."""
        if state.phase not in COUNTDOWN_PHASES or not state.timer_active:
            state.last_sampled_tick = now
            return _NOTHING

        if state.remaining_seconds == 0:
            state.last_sampled_tick = now
            return self.expire(state)

        elapsed = self._elapsed(state.last_sampled_tick, now)
        if elapsed is None:
            _log.debug("Clock went backwards (last=%d now=%d), resync", state.last_sampled_tick, now)
            state.last_sampled_tick = now
            return _NOTHING
        if elapsed < self._tps:
            return _NOTHING

        seconds = elapsed // self._tps
        state.last_sampled_tick = self._advance(state.last_sampled_tick, seconds * self._tps)

        before = state.remaining_seconds
        state.remaining_seconds = max(0, before - seconds)
        _log.debug("Tick: -%ds remaining=%d", seconds, state.remaining_seconds)

        if state.remaining_seconds == 0:
            outcome = self.expire(state)
            return TickOutcome(
                seconds_elapsed=seconds,
                expired=True,
                completed_phase=outcome.completed_phase,
                entered_phase=outcome.entered_phase,
            )

        if self._profile.minute_chime and _crossed_minute(before, state.remaining_seconds):
            self._play(*MINUTE_TONE)
        return TickOutcome(seconds_elapsed=seconds)

    def expire(self, state: SessionState) -> TickOutcome:
        """Run the expiry path: cue, deactivate, hand over to the transition table."""
        finished = state.phase
        if finished not in COUNTDOWN_PHASES:
            return _NOTHING

        state.remaining_seconds = 0
        state.timer_active = False
        self._play(*EXPIRY_TONE)
        entered = complete_phase(state, self._profile)
        return TickOutcome(expired=True, completed_phase=finished, entered_phase=entered)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _elapsed(self, last: int, now: int) -> int | None:
        if self._modulus:
            return (now - last) % self._modulus
        delta = now - last
        return delta if delta >= 0 else None

    def _advance(self, last: int, ticks: int) -> int:
        if self._modulus:
            return (last + ticks) % self._modulus
        return last + ticks

    def _play(self, frequency: int, duration_ms: int) -> None:
        if self._buzzer is None:
            return
        try:
            self._buzzer.play_tone(frequency, duration_ms)
        except Exception:
            _log.warning("Buzzer failed to play %d Hz tone, ignored", frequency, exc_info=True)


def _crossed_minute(before: int, after: int) -> bool:
    """``True`` if a whole-minute mark lies in ``[after, before)`` and above zero."""
    return after > 0 and (before - 1) // 60 != (after - 1) // 60
