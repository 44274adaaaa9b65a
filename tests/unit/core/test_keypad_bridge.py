"""Tests for KeypadBridge — press latching between GPIO callbacks and frames."""

from __future__ import annotations

import threading

from pomobox.core.keypad_bridge import KeypadBridge
from pomobox.core.models.state import Key
from pomobox.hardware.mock.mock_hardware import MockKeypad


class TestKeypadBridge:
    def test_registers_every_key(self) -> None:
        keypad = MockKeypad()
        KeypadBridge(keypad)
        assert set(keypad._press_callbacks) == {k.value for k in Key}

    def test_drain_returns_pressed_keys(self) -> None:
        keypad = MockKeypad()
        bridge = KeypadBridge(keypad)
        keypad.simulate_press("a")
        keypad.simulate_press("start")
        assert bridge.drain() == {Key.A, Key.START}

    def test_drain_clears_latch(self) -> None:
        keypad = MockKeypad()
        bridge = KeypadBridge(keypad)
        keypad.simulate_press("b")
        bridge.drain()
        assert bridge.drain() == frozenset()

    def test_repeated_edge_within_a_frame_counts_once(self) -> None:
        keypad = MockKeypad()
        bridge = KeypadBridge(keypad)
        keypad.simulate_press("up")
        keypad.simulate_press("up")
        assert bridge.drain() == {Key.UP}

    def test_presses_from_other_threads(self) -> None:
        keypad = MockKeypad()
        bridge = KeypadBridge(keypad)
        threads = [
            threading.Thread(target=keypad.simulate_press, args=(key.value,))
            for key in Key
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert bridge.drain() == frozenset(Key)
