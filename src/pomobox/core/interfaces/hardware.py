"""Hardware abstraction interfaces (ABCs).

Every hardware component has a matching abstract base class here.  The GPIO
and Mock backends both implement these interfaces, so the timer core runs
identically on the Pi, on a development machine and under pytest.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

from pomobox.core.models.config import PhaseColor
from pomobox.core.models.state import Key

if TYPE_CHECKING:
    from pomobox.core.snapshot import TimerSnapshot


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

class ClockInterface(ABC):
    """Monotonic tick counter.

    ``counter_modulus`` is ``None`` for counters that never wrap, otherwise
    the value at which the counter rolls over to zero.
    """

    ticks_per_second: int
    counter_modulus: int | None = None

    @abstractmethod
    def elapsed_ticks(self) -> int:
        """Return the current tick count (non-blocking)."""


# ---------------------------------------------------------------------------
# Keypad
# ---------------------------------------------------------------------------

class KeypadInterface(ABC):
    """Eight-key pad: D-pad, A, B, Select, Start."""

    @abstractmethod
    def register_press_callback(self, key: Key, callback: Callable[[], None]) -> None:
        """Register *callback* to fire when *key* goes down (edge, not level)."""


# ---------------------------------------------------------------------------
# LEDs
# ---------------------------------------------------------------------------

class LedInterface(ABC):
    """Three phase LEDs (red, green, blue)."""

    @abstractmethod
    def set_led(self, color: PhaseColor, on: bool) -> None:
        """Turn the LED of *color* on or off."""

    @abstractmethod
    def get_state(self, color: PhaseColor) -> bool:
        """Return ``True`` if the LED of *color* is currently on."""

    @abstractmethod
    def all_off(self) -> None:
        """Turn all LEDs off."""


# ---------------------------------------------------------------------------
# 7-segment display (TM1637)
# ---------------------------------------------------------------------------

class DisplayInterface(ABC):
    """TM1637 4-digit 7-segment display."""

    @abstractmethod
    def show_time(self, minutes: int, seconds: int) -> None:
        """Show ``MM:SS`` with the colon lit."""

    @abstractmethod
    def clear(self) -> None:
        """Blank the display."""

    @abstractmethod
    def set_brightness(self, level: int) -> None:
        """Set brightness (0–7)."""


# ---------------------------------------------------------------------------
# Screen
# ---------------------------------------------------------------------------

class ScreenInterface(ABC):
    """Rendering surface for the timer.

    The core never draws; it hands the screen a read-only
    :class:`~pomobox.core.snapshot.TimerSnapshot` once per frame.
    """

    @abstractmethod
    def render(self, snapshot: "TimerSnapshot") -> None:
        """Draw *snapshot*."""

    @abstractmethod
    def clear(self) -> None:
        """Clear all content from the screen."""


# ---------------------------------------------------------------------------
# Buzzer
# ---------------------------------------------------------------------------

class BuzzerInterface(ABC):
    """Fire-and-forget tone output."""

    @abstractmethod
    def play_tone(self, frequency: int, duration_ms: int) -> None:
        """Start a tone; must return immediately."""

    @abstractmethod
    def stop(self) -> None:
        """Silence any tone currently playing."""


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

class HardwareFactory(ABC):
    """Creates all hardware interface implementations for the current platform."""

    @abstractmethod
    def create_clock(self) -> ClockInterface: ...

    @abstractmethod
    def create_keypad(self) -> KeypadInterface: ...

    @abstractmethod
    def create_leds(self) -> LedInterface: ...

    @abstractmethod
    def create_display(self) -> DisplayInterface: ...

    @abstractmethod
    def create_screen(self) -> ScreenInterface: ...

    @abstractmethod
    def create_buzzer(self) -> BuzzerInterface: ...

    @abstractmethod
    def set_screen(self, screen: ScreenInterface) -> None:
        """Inject the screen implementation before the loop starts."""

    def cleanup(self) -> None:
        """Release hardware resources.  No-op by default (mock)."""
