"""GPIOHardwareFactory — creates real GPIO hardware on Raspberry Pi.

Sets the ``gpiozero`` pin factory to ``LGPIOFactory`` once during
construction, then eagerly creates all hardware component instances.

The screen is injected from :func:`pomobox.main.main` via
:meth:`set_screen`; the GPIO layer never creates its own screen.
"""

from __future__ import annotations

import logging as _logging

from pomobox.core.interfaces.hardware import (
    BuzzerInterface,
    ClockInterface,
    DisplayInterface,
    HardwareFactory,
    KeypadInterface,
    LedInterface,
    ScreenInterface,
)
from pomobox.core.models.config import PomoboxConfig
from pomobox.hardware.clock import MonotonicClock
from pomobox.hardware.gpio.gpio_hardware import GPIOBuzzer, GPIODisplay, GPIOKeypad, GPIOLeds

_log = _logging.getLogger(__name__)


def _setup_pin_factory() -> None:
    """Configure gpiozero to use ``LGPIOFactory`` (for Pi 5 compat)."""
    try:
        from gpiozero import Device  # type: ignore[import-untyped]
        from gpiozero.pins.lgpio import LGPIOFactory  # type: ignore[import-untyped]

        Device.pin_factory = LGPIOFactory()
        _log.info("gpiozero pin factory set to LGPIOFactory")
    except ImportError:
        _log.warning("LGPIOFactory not available, using gpiozero default pin factory")


class GPIOHardwareFactory(HardwareFactory):
    """Factory that creates real GPIO-backed hardware components.

    All components are created eagerly in ``__init__`` so that
    :meth:`cleanup` can reliably close every resource.

    Args:
        config: Full configuration (pin numbers in ``config.hardware``).
    """

    def __init__(self, config: PomoboxConfig) -> None:
        _setup_pin_factory()

        hw = config.hardware
        self._clock = MonotonicClock(hw.ticks_per_second)
        self._keypad = GPIOKeypad(hw)
        self._leds = GPIOLeds(hw)
        self._display = GPIODisplay(hw)
        self._buzzer = GPIOBuzzer(hw)
        self._screen: ScreenInterface | None = None

        _log.info("GPIOHardwareFactory ready")

    def set_screen(self, screen: ScreenInterface) -> None:
        """Inject the screen before the frame loop is built."""
        self._screen = screen

    # -- Factory interface --

    def create_clock(self) -> ClockInterface:
        return self._clock

    def create_keypad(self) -> KeypadInterface:
        return self._keypad

    def create_leds(self) -> LedInterface:
        return self._leds

    def create_display(self) -> DisplayInterface:
        return self._display

    def create_screen(self) -> ScreenInterface:
        if self._screen is None:
            raise RuntimeError("Screen not injected: call set_screen() before building the loop")
        return self._screen

    def create_buzzer(self) -> BuzzerInterface:
        return self._buzzer

    # -- Lifecycle --

    def cleanup(self) -> None:
        """Release all GPIO resources."""
        for name, component in [
            ("keypad", self._keypad),
            ("leds", self._leds),
            ("display", self._display),
            ("buzzer", self._buzzer),
        ]:
            try:
                component.cleanup()
            except Exception:
                _log.exception("Error cleaning up %s", name)
        _log.info("GPIOHardwareFactory cleanup complete")
