"""GPIO hardware implementations for Raspberry Pi.

Each class implements the corresponding ABC from
:mod:`pomobox.core.interfaces.hardware` using ``gpiozero`` for the keypad,
the phase LEDs and the piezo buzzer, and ``raspberrypi-tm1637`` for the
4-digit 7-segment display.

Pin factory (``LGPIOFactory``) is set **once** by
:class:`~pomobox.hardware.gpio.gpio_factory.GPIOHardwareFactory` before
any objects in this module are instantiated.

.. note::

   The ``gpiozero`` and ``tm1637`` imports are guarded so the module
   can be imported (but not instantiated) on non-Pi platforms for
   testing with ``unittest.mock.patch``.
"""

from __future__ import annotations

import logging as _logging
import threading
from typing import Callable

from pomobox.core.interfaces.hardware import (
    BuzzerInterface,
    DisplayInterface,
    KeypadInterface,
    LedInterface,
)
from pomobox.core.models.config import HardwareConfig, PhaseColor
from pomobox.core.models.state import Key

_log = _logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Guarded imports, patched by unit tests on non-Pi platforms.
# The names below become module-level attributes that tests can
# ``@patch("pomobox.hardware.gpio.gpio_hardware.Button")`` etc.
# ---------------------------------------------------------------------------
try:
    from gpiozero import LED, Button, TonalBuzzer  # type: ignore[import-untyped]
    from gpiozero.tones import Tone  # type: ignore[import-untyped]
except ImportError:  # pragma: no cover (non-Pi)
    Button = None  # type: ignore[assignment,misc]
    LED = None  # type: ignore[assignment,misc]
    TonalBuzzer = None  # type: ignore[assignment,misc]
    Tone = None  # type: ignore[assignment,misc]

try:
    from tm1637 import TM1637  # type: ignore[import-untyped]
except ImportError:  # pragma: no cover
    TM1637 = None  # type: ignore[assignment,misc]


# ---------------------------------------------------------------------------
# Keypad
# ---------------------------------------------------------------------------

class GPIOKeypad(KeypadInterface):
    """Eight pushbuttons via ``gpiozero.Button``.

    ``bounce_time=0.05`` provides adequate debounce for tactile switches.
    ``when_pressed`` fires once per press edge, which is what gives the
    frame loop its "pressed this frame" semantics.
    """

    def __init__(self, config: HardwareConfig) -> None:
        self._buttons: dict[str, object] = {}
        for key in Key:
            pin = config.key_pins[key.value]
            self._buttons[key.value] = Button(pin, pull_up=True, bounce_time=0.05)

        _log.info("GPIOKeypad initialised: %s", dict(config.key_pins))

    def register_press_callback(self, key: Key, callback: Callable[[], None]) -> None:
        self._buttons[key.value].when_pressed = callback  # type: ignore[attr-defined]

    def cleanup(self) -> None:
        for btn in self._buttons.values():
            btn.close()  # type: ignore[attr-defined]
        self._buttons.clear()
        _log.debug("GPIOKeypad cleaned up")


# ---------------------------------------------------------------------------
# LEDs
# ---------------------------------------------------------------------------

class GPIOLeds(LedInterface):
    """Three phase LEDs via ``gpiozero.LED``."""

    def __init__(self, config: HardwareConfig) -> None:
        self._leds: dict[str, object] = {}
        self._states: dict[str, bool] = {}
        for color in PhaseColor:
            self._leds[color.value] = LED(config.led_pins[color.value])
            self._states[color.value] = False

        _log.info("GPIOLeds initialised: %s", dict(config.led_pins))

    def set_led(self, color: PhaseColor, on: bool) -> None:
        led = self._leds.get(color.value)
        if led is None:
            return
        if on:
            led.on()  # type: ignore[attr-defined]
        else:
            led.off()  # type: ignore[attr-defined]
        self._states[color.value] = on

    def get_state(self, color: PhaseColor) -> bool:
        return self._states.get(color.value, False)

    def all_off(self) -> None:
        for color in PhaseColor:
            self.set_led(color, False)

    def cleanup(self) -> None:
        self.all_off()
        for led in self._leds.values():
            led.close()  # type: ignore[attr-defined]
        self._leds.clear()
        _log.debug("GPIOLeds cleaned up")


# ---------------------------------------------------------------------------
# TM1637 7-segment display
# ---------------------------------------------------------------------------

class GPIODisplay(DisplayInterface):
    """TM1637 4-digit 7-segment display showing ``MM:SS``.

    Minutes above 99 show their last two digits; the screen always has
    the full value.
    """

    def __init__(self, config: HardwareConfig) -> None:
        clk = config.display_clk_pin
        dio = config.display_dio_pin
        self._tm = TM1637(clk=clk, dio=dio)
        self._tm.brightness(config.display_brightness)
        self.clear()
        _log.info("GPIODisplay initialised (CLK=%d, DIO=%d)", clk, dio)

    def show_time(self, minutes: int, seconds: int) -> None:
        if self._tm is None:
            return
        minutes %= 100
        try:
            if hasattr(self._tm, "numbers"):
                self._tm.numbers(minutes, seconds, colon=True)
            else:
                self._tm.show(f"{minutes:02d}{seconds:02d}", colon=True)
        except Exception:
            _log.exception("Error showing %02d:%02d on TM1637", minutes, seconds)

    def clear(self) -> None:
        if self._tm is None:
            return
        try:
            self._tm.show("    ")
        except Exception:
            _log.exception("Error clearing TM1637")

    def set_brightness(self, level: int) -> None:
        if self._tm is None:
            return
        try:
            self._tm.brightness(max(0, min(7, level)))
        except Exception:
            _log.exception("Error setting TM1637 brightness")

    def cleanup(self) -> None:
        if self._tm is not None:
            self.clear()
            self._tm = None
        _log.debug("GPIODisplay cleaned up")


# ---------------------------------------------------------------------------
# Buzzer
# ---------------------------------------------------------------------------

class GPIOBuzzer(BuzzerInterface):
    """Piezo buzzer via ``gpiozero.TonalBuzzer``.

    ``play_tone`` starts the tone and schedules :meth:`stop` on a
    :class:`threading.Timer`, so the caller never waits for the tone.
    Frequencies outside the buzzer's range are clamped to it.
    """

    def __init__(self, config: HardwareConfig) -> None:
        # A5 ± 2 octaves → 220 Hz … 3520 Hz
        self._buzzer = TonalBuzzer(config.buzzer_pin, mid_tone=Tone("A5"), octaves=2)
        self._stop_timer: threading.Timer | None = None
        _log.info("GPIOBuzzer initialised on pin %d", config.buzzer_pin)

    def play_tone(self, frequency: int, duration_ms: int) -> None:
        low = self._buzzer.min_tone.frequency
        high = self._buzzer.max_tone.frequency
        self._cancel_stop_timer()
        self._buzzer.play(Tone(frequency=max(low, min(high, float(frequency)))))
        self._stop_timer = threading.Timer(duration_ms / 1000.0, self.stop)
        self._stop_timer.daemon = True
        self._stop_timer.start()

    def stop(self) -> None:
        self._buzzer.stop()

    def _cancel_stop_timer(self) -> None:
        if self._stop_timer is not None:
            self._stop_timer.cancel()
            self._stop_timer = None

    def cleanup(self) -> None:
        self._cancel_stop_timer()
        self._buzzer.stop()
        self._buzzer.close()
        _log.debug("GPIOBuzzer cleaned up")
