"""Abstract interfaces for the hardware the timer talks to."""

from pomobox.core.interfaces.hardware import (
    BuzzerInterface,
    ClockInterface,
    DisplayInterface,
    HardwareFactory,
    KeypadInterface,
    LedInterface,
    ScreenInterface,
)

__all__ = [
    "BuzzerInterface",
    "ClockInterface",
    "DisplayInterface",
    "HardwareFactory",
    "KeypadInterface",
    "LedInterface",
    "ScreenInterface",
]
