"""MockHardwareFactory — creates in-memory hardware for dev and test.

All created instances are stored as public attributes so the dev panel
and tests can access ``simulate_*()`` helpers directly.
"""

from __future__ import annotations

from pomobox.core.interfaces.hardware import (
    BuzzerInterface,
    ClockInterface,
    DisplayInterface,
    HardwareFactory,
    KeypadInterface,
    LedInterface,
    ScreenInterface,
)
from pomobox.hardware.clock import MonotonicClock
from pomobox.hardware.mock.mock_hardware import MockBuzzer, MockDisplay, MockKeypad, MockLeds
from pomobox.hardware.mock.mock_screen import InMemoryScreen


class MockHardwareFactory(HardwareFactory):
    """Factory that returns in-memory mock implementations.

    After creation, the individual mock objects are available as attributes
    (e.g. ``factory.keypad``, ``factory.leds``) for direct access in
    the dev panel and tests.

    Args:
        clock: Tick source.  Defaults to a real-time :class:`MonotonicClock`
            so the dev box counts down at wall-clock speed; tests pass a
            :class:`~pomobox.hardware.mock.mock_hardware.ManualClock`.
        ticks_per_second: Resolution of the default clock.
    """

    def __init__(self, clock: ClockInterface | None = None, ticks_per_second: int = 1000) -> None:
        self.clock = clock or MonotonicClock(ticks_per_second)
        self.keypad = MockKeypad()
        self.leds = MockLeds()
        self.display = MockDisplay()
        self.buzzer = MockBuzzer()
        self._screen: ScreenInterface = InMemoryScreen()

    def set_screen(self, screen: ScreenInterface) -> None:
        """Replace the default :class:`InMemoryScreen` with *screen*.

        Must be called **before** the frame loop is built.
        """
        self._screen = screen

    # -- Factory interface --

    def create_clock(self) -> ClockInterface:
        return self.clock

    def create_keypad(self) -> KeypadInterface:
        return self.keypad

    def create_leds(self) -> LedInterface:
        return self.leds

    def create_display(self) -> DisplayInterface:
        return self.display

    def create_screen(self) -> ScreenInterface:
        return self._screen

    def create_buzzer(self) -> BuzzerInterface:
        return self.buzzer
