"""Hardware factory — platform detection and factory creation.

Selects GPIO on Raspberry Pi, Mock on everything else (Windows, Mac, CI).
"""

from __future__ import annotations

import logging

from pomobox.core.interfaces.hardware import HardwareFactory
from pomobox.core.models.config import PomoboxConfig

_log = logging.getLogger(__name__)


def _is_raspberry_pi() -> bool:
    """Return ``True`` if running on a Raspberry Pi."""
    try:
        with open("/sys/firmware/devicetree/base/model") as f:
            model = f.read().lower()
        return "raspberry pi" in model
    except OSError:
        return False


def create_hardware_factory(config: PomoboxConfig) -> HardwareFactory:
    """Return the appropriate :class:`HardwareFactory` for the platform.

    * On Raspberry Pi (detected via device-tree) → ``GPIOHardwareFactory``.
    * Everywhere else (or if ``dev_mode`` is ``True``) → ``MockHardwareFactory``,
      and ``config.system.dev_mode`` is switched on so the on-screen keypad
      is shown.
    """
    is_pi = _is_raspberry_pi()
    if config.system.dev_mode or not is_pi:
        from pomobox.hardware.mock.mock_factory import MockHardwareFactory

        _log.info("Using MockHardwareFactory (dev_mode=%s, is_pi=%s)", config.system.dev_mode, is_pi)
        config.system.dev_mode = True
        return MockHardwareFactory(ticks_per_second=config.hardware.ticks_per_second)

    try:
        from pomobox.hardware.gpio.gpio_factory import GPIOHardwareFactory

        _log.info("Using GPIOHardwareFactory")
        return GPIOHardwareFactory(config)
    except Exception:
        _log.warning("GPIOHardwareFactory failed, falling back to mock", exc_info=True)
        from pomobox.hardware.mock.mock_factory import MockHardwareFactory

        config.system.dev_mode = True
        return MockHardwareFactory(ticks_per_second=config.hardware.ticks_per_second)
