"""Runtime state models and enumerations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from pomobox.core.models.config import TimerConfig


class Phase(str, Enum):
    """Current mode of the timer."""

    IDLE = "idle"
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"
    CONFIG = "config"


# Phases with a running countdown.
COUNTDOWN_PHASES: frozenset[Phase] = frozenset(
    {Phase.WORK, Phase.SHORT_BREAK, Phase.LONG_BREAK}
)


class Key(str, Enum):
    """The eight keypad keys."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    A = "a"
    B = "b"
    SELECT = "select"
    START = "start"


class SessionState(BaseModel):
    """Mutable per-process timer state.

    Created once at start-up and threaded explicitly through every frame
    call.  ``remaining_seconds`` is re-seeded from :attr:`config` on every
    phase entry (see :mod:`pomobox.core.transitions`).
    """

    config: TimerConfig = Field(default_factory=TimerConfig)
    phase: Phase = Field(default=Phase.IDLE)
    remaining_seconds: int = Field(default=0, ge=0)
    completed_sessions: int = Field(default=0, ge=0)
    completed_sets: int = Field(default=0, ge=0)
    timer_active: bool = Field(default=False)
    config_selection: int = Field(default=0, ge=0)
    last_sampled_tick: int = Field(default=0)

    @classmethod
    def new(cls, config: TimerConfig, initial_phase: Phase = Phase.IDLE) -> "SessionState":
        """Return a fresh session in *initial_phase* seeded with the work duration."""
        return cls(
            config=config,
            phase=initial_phase,
            remaining_seconds=config.work_seconds,
        )
