"""KeypadBridge — latches hardware key callbacks into per-frame press sets.

gpiozero fires ``when_pressed`` on its own callback thread, once per press
edge.  The bridge records those presses under a lock; the frame loop
drains them once per frame, so a key held across several frames counts
as a single press.
"""

from __future__ import annotations

import logging as _logging
import threading

from pomobox.core.interfaces.hardware import KeypadInterface
from pomobox.core.models.state import Key

_log = _logging.getLogger(__name__)


class KeypadBridge:
    """Translates raw keypad callbacks into "pressed this frame" sets.

    Args:
        keypad: Keypad interface whose press callbacks are wired here.
    """

    def __init__(self, keypad: KeypadInterface) -> None:
        self._lock = threading.Lock()
        self._pressed: set[Key] = set()

        for key in Key:
            keypad.register_press_callback(key, lambda k=key: self._on_key_pressed(k))

    # ------------------------------------------------------------------
    # Hardware callbacks (may be called from GPIO threads)
    # ------------------------------------------------------------------

    def _on_key_pressed(self, key: Key) -> None:
        with self._lock:
            self._pressed.add(key)
        _log.debug("Key %s pressed", key.value)

    # ------------------------------------------------------------------
    # Frame loop side
    # ------------------------------------------------------------------

    def drain(self) -> frozenset[Key]:
        """Return the keys pressed since the previous call and clear the latch."""
        with self._lock:
            pressed = frozenset(self._pressed)
            self._pressed.clear()
        return pressed
