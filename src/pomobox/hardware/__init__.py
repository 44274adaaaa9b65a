"""Hardware abstraction: factory, tick clock and platform backends (gpio, mock)."""

from pomobox.hardware.clock import MonotonicClock
from pomobox.hardware.factory import create_hardware_factory

__all__ = ["MonotonicClock", "create_hardware_factory"]
