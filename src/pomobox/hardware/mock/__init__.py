"""Mock hardware backend for development and testing."""

from pomobox.hardware.mock.mock_factory import MockHardwareFactory
from pomobox.hardware.mock.mock_hardware import (
    ManualClock,
    MockBuzzer,
    MockDisplay,
    MockKeypad,
    MockLeds,
)
from pomobox.hardware.mock.mock_screen import InMemoryScreen

__all__ = [
    "InMemoryScreen",
    "ManualClock",
    "MockBuzzer",
    "MockDisplay",
    "MockHardwareFactory",
    "MockKeypad",
    "MockLeds",
]
