"""FrameLoop — the per-frame control loop that owns the session state.

Each frame: drain keys → dispatch → tick → snapshot → render.  The loop is
single-threaded; the only state shared with other threads is the keypad
latch inside :class:`KeypadBridge`.
"""

from __future__ import annotations

import asyncio
import time

from pomobox.core.input_dispatcher import InputDispatcher
from pomobox.core.interfaces.hardware import (
    ClockInterface,
    DisplayInterface,
    HardwareFactory,
    LedInterface,
    ScreenInterface,
)
from pomobox.core.keypad_bridge import KeypadBridge
from pomobox.core.models.config import PhaseColor, PomoboxConfig, ProfileConfig
from pomobox.core.models.state import Phase, SessionState
from pomobox.core.snapshot import TimerSnapshot, build_snapshot
from pomobox.core.timer_engine import TickOutcome, TimerEngine
from pomobox.log_config import ContextualLogger, get_logger


class FrameLoop:
    """Runs the timer one frame at a time.

    Args:
        state: The session state, owned by this loop from now on.
        profile: Behavioural profile.
        clock: Tick source sampled once per frame.
        bridge: Keypad latch.
        engine: Timer engine.
        dispatcher: Input dispatcher.
        screen: Snapshot renderer.
        display: 7-segment ``MM:SS`` readout (optional).
        leds: Phase LEDs (optional).
        frame_rate: Frames per second for :meth:`run_forever` / :meth:`run_async`.
    """

    def __init__(
        self,
        state: SessionState,
        profile: ProfileConfig,
        clock: ClockInterface,
        bridge: KeypadBridge,
        engine: TimerEngine,
        dispatcher: InputDispatcher,
        screen: ScreenInterface,
        display: DisplayInterface | None = None,
        leds: LedInterface | None = None,
        frame_rate: int = 60,
    ) -> None:
        self.state = state
        self._profile = profile
        self._clock = clock
        self._bridge = bridge
        self._engine = engine
        self._dispatcher = dispatcher
        self._screen = screen
        self._display = display
        self._leds = leds
        self._frame_period = 1.0 / frame_rate
        self._log = ContextualLogger(get_logger(__name__), profile=profile.name)

        self._shown_time: tuple[int, int] | None = None
        self._lit_color: PhaseColor | None = None
        self._last_snapshot: TimerSnapshot | None = None
        self.frames = 0

        self.state.last_sampled_tick = clock.elapsed_ticks()

    @classmethod
    def from_factory(cls, config: PomoboxConfig, factory: HardwareFactory) -> "FrameLoop":
        """Wire a complete loop from *config* and the platform's hardware."""
        profile = config.profile
        clock = factory.create_clock()
        buzzer = factory.create_buzzer() if config.hardware.audio_enabled else None
        engine = TimerEngine(
            profile,
            ticks_per_second=clock.ticks_per_second,
            buzzer=buzzer,
            counter_modulus=clock.counter_modulus,
        )
        display = factory.create_display()
        display.set_brightness(config.hardware.display_brightness)
        state = SessionState.new(config.timer.model_copy(), Phase(profile.initial_phase))
        return cls(
            state=state,
            profile=profile,
            clock=clock,
            bridge=KeypadBridge(factory.create_keypad()),
            engine=engine,
            dispatcher=InputDispatcher(engine, profile),
            screen=factory.create_screen(),
            display=display,
            leds=factory.create_leds(),
            frame_rate=config.system.frame_rate,
        )

    @property
    def last_snapshot(self) -> TimerSnapshot | None:
        return self._last_snapshot

    # ------------------------------------------------------------------
    # One frame
    # ------------------------------------------------------------------

    def step(self) -> TimerSnapshot:
        """Run a single frame and return the snapshot handed to the renderers."""
        now = self._clock.elapsed_ticks()
        pressed = self._bridge.drain()

        outcomes = self._dispatcher.dispatch(self.state, pressed, now)
        outcomes.append(self._engine.tick(self.state, now))
        for outcome in outcomes:
            self._log_outcome(outcome)

        snapshot = build_snapshot(self.state, self._profile)
        self._render(snapshot)
        self._last_snapshot = snapshot
        self.frames += 1
        return snapshot

    # ------------------------------------------------------------------
    # Loops
    # ------------------------------------------------------------------

    def run_forever(self, max_frames: int | None = None) -> None:
        """Blocking fixed-rate loop (headless / GPIO kiosk without NiceGUI)."""
        self._log.info("Frame loop started (%.1f fps)", 1.0 / self._frame_period)
        next_frame = time.monotonic()
        while max_frames is None or self.frames < max_frames:
            self.step()
            next_frame += self._frame_period
            delay = next_frame - time.monotonic()
            if delay > 0:
                time.sleep(delay)
            else:
                # Fell behind; don't try to catch up with a burst of frames.
                next_frame = time.monotonic()

    async def run_async(self, stop_event: asyncio.Event) -> None:
        """Cooperative loop for the NiceGUI / asyncio event loop."""
        self._log.info("Async frame loop started (%.1f fps)", 1.0 / self._frame_period)
        while not stop_event.is_set():
            self.step()
            await asyncio.sleep(self._frame_period)
        self._log.info("Async frame loop stopped after %d frames", self.frames)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _render(self, snapshot: TimerSnapshot) -> None:
        try:
            self._screen.render(snapshot)
        except Exception:
            self._log.exception("Screen render failed")

        if self._display is not None:
            shown = (snapshot.minutes, snapshot.seconds)
            if shown != self._shown_time:
                try:
                    self._display.show_time(*shown)
                    self._shown_time = shown
                except Exception:
                    self._log.exception("7-segment update failed")

        if self._leds is not None and snapshot.color != self._lit_color:
            try:
                for color in PhaseColor:
                    self._leds.set_led(color, color == snapshot.color)
                self._lit_color = snapshot.color
            except Exception:
                self._log.exception("LED update failed")

    def _log_outcome(self, outcome: TickOutcome) -> None:
        if outcome.expired and outcome.completed_phase is not None:
            self._log.debug(
                "%s expired -> %s",
                outcome.completed_phase.value,
                outcome.entered_phase.value if outcome.entered_phase else "?",
            )
