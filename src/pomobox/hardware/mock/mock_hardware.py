"""Mock hardware implementations for development and testing.

Each class implements the corresponding ABC from
:mod:`pomobox.core.interfaces.hardware` with in-memory state and
``simulate_*()`` helpers for the dev panel and tests.
"""

from __future__ import annotations

import logging
from typing import Callable

from pomobox.core.interfaces.hardware import (
    BuzzerInterface,
    ClockInterface,
    DisplayInterface,
    KeypadInterface,
    LedInterface,
)
from pomobox.core.models.config import PhaseColor
from pomobox.core.models.state import Key

_log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

class ManualClock(ClockInterface):
    """Clock that only moves when told to.

    Attributes:
        now: Current tick value returned by :meth:`elapsed_ticks`.
    """

    def __init__(
        self,
        ticks_per_second: int = 60,
        start: int = 0,
        counter_modulus: int | None = None,
    ) -> None:
        self.ticks_per_second = ticks_per_second
        self.counter_modulus = counter_modulus
        self.now = start

    def elapsed_ticks(self) -> int:
        return self.now

    def advance(self, ticks: int) -> int:
        """Move the clock forward by *ticks* (wrapping if a modulus is set)."""
        self.now += ticks
        if self.counter_modulus:
            self.now %= self.counter_modulus
        return self.now

    def advance_seconds(self, seconds: int) -> int:
        return self.advance(seconds * self.ticks_per_second)


# ---------------------------------------------------------------------------
# Keypad
# ---------------------------------------------------------------------------

class MockKeypad(KeypadInterface):
    """In-memory keypad with a ``simulate_press`` helper."""

    def __init__(self) -> None:
        self._press_callbacks: dict[str, Callable[[], None]] = {}

    def register_press_callback(self, key: Key, callback: Callable[[], None]) -> None:
        self._press_callbacks[key.value] = callback

    def simulate_press(self, key: str) -> None:
        """Trigger the press callback for *key* (e.g. ``"start"``)."""
        cb = self._press_callbacks.get(key)
        if cb:
            cb()
        else:
            _log.debug("No press callback registered for %s", key)


# ---------------------------------------------------------------------------
# LEDs
# ---------------------------------------------------------------------------

class MockLeds(LedInterface):
    """In-memory LED bank, dict-backed."""

    def __init__(self) -> None:
        self._state: dict[str, bool] = {c.value: False for c in PhaseColor}

    def set_led(self, color: PhaseColor, on: bool) -> None:
        self._state[color.value] = on

    def get_state(self, color: PhaseColor) -> bool:
        return self._state.get(color.value, False)

    def all_off(self) -> None:
        for color in PhaseColor:
            self._state[color.value] = False


# ---------------------------------------------------------------------------
# 7-segment Display
# ---------------------------------------------------------------------------

class MockDisplay(DisplayInterface):
    """In-memory TM1637 display.

    Attributes:
        last_time: The last ``(minutes, seconds)`` shown, or ``None`` after clear.
        brightness: Current brightness (0–7).
    """

    def __init__(self) -> None:
        self.last_time: tuple[int, int] | None = None
        self.brightness: int = 7

    @property
    def text(self) -> str:
        """Readout as it would appear on the digits (``"----"`` when blank)."""
        if self.last_time is None:
            return "----"
        minutes, seconds = self.last_time
        return f"{minutes % 100:02d}:{seconds:02d}"

    def show_time(self, minutes: int, seconds: int) -> None:
        self.last_time = (minutes, seconds)

    def clear(self) -> None:
        self.last_time = None

    def set_brightness(self, level: int) -> None:
        self.brightness = max(0, min(7, level))


# ---------------------------------------------------------------------------
# Buzzer
# ---------------------------------------------------------------------------

class MockBuzzer(BuzzerInterface):
    """Log-only buzzer that remembers every tone requested.

    Attributes:
        tones: ``(frequency, duration_ms)`` tuples in call order.
    """

    def __init__(self) -> None:
        self.tones: list[tuple[int, int]] = []

    def play_tone(self, frequency: int, duration_ms: int) -> None:
        self.tones.append((frequency, duration_ms))
        _log.info("MockBuzzer: play_tone(%d Hz, %d ms)", frequency, duration_ms)

    def stop(self) -> None:
        _log.debug("MockBuzzer: stop()")
