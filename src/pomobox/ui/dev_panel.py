"""Dev panel — keypad simulation for development without the physical box.

Provides the eight keys, the three phase LEDs and a 7-segment readout
rendered below the timer screen.  Every key press is routed through
:class:`~pomobox.hardware.mock.mock_hardware.MockKeypad`, so the keypad
bridge and frame loop see exactly what the GPIO keypad would produce.

Only rendered when the hardware factory is :class:`MockHardwareFactory`.
"""

from __future__ import annotations

import logging as _logging

from nicegui import ui

from pomobox.core.models.config import PhaseColor
from pomobox.core.models.state import Key
from pomobox.hardware.mock.mock_factory import MockHardwareFactory

_log = _logging.getLogger(__name__)

_LED_COLORS: dict[str, str] = {
    "red": "#ff4444",
    "green": "#44ff44",
    "blue": "#4488ff",
}

# Browser key name → keypad key
KEYBOARD_SHORTCUTS: dict[str, Key] = {
    "ArrowUp": Key.UP,
    "ArrowDown": Key.DOWN,
    "ArrowLeft": Key.LEFT,
    "ArrowRight": Key.RIGHT,
    "z": Key.A,
    "x": Key.B,
    "Backspace": Key.SELECT,
    "Enter": Key.START,
}

_KEY_CAPTIONS: dict[Key, str] = {
    Key.UP: "▲",
    Key.DOWN: "▼",
    Key.LEFT: "◀",
    Key.RIGHT: "▶",
    Key.A: "A",
    Key.B: "B",
    Key.SELECT: "SELECT",
    Key.START: "START",
}


class DevPanel:
    """Keypad simulation panel wired to mock hardware objects.

    Args:
        factory: The :class:`MockHardwareFactory` whose objects drive
            the simulation.
        screen_width: Maximum pixel width to constrain the panel to.
    """

    _REFRESH_SECONDS = 0.2

    def __init__(self, factory: MockHardwareFactory, screen_width: int = 800) -> None:
        self._factory = factory
        self._screen_width = screen_width

        self._led_badges: dict[str, ui.badge] = {}
        self._display_label: ui.label | None = None

    def build(self) -> None:
        """Render the dev panel inline below the screen."""
        with ui.column().classes("w-full items-center").style(
            f"max-width: {self._screen_width}px; gap: 4px; padding: 2px 0;"
        ):
            ui.separator().style("background: #444444; margin: 0;")
            with ui.row().classes("w-full items-center justify-between").style(
                "padding: 2px 12px; gap: 12px; flex-wrap: nowrap;"
            ):
                self._build_dpad()
                self._build_status()
                self._build_action_keys()

        ui.keyboard(on_key=self._handle_key)
        ui.timer(self._REFRESH_SECONDS, self._refresh)

    # ------------------------------------------------------------------
    # Build sections
    # ------------------------------------------------------------------

    def _build_dpad(self) -> None:
        with ui.grid(columns=3).style("gap: 4px;"):
            for key in (None, Key.UP, None, Key.LEFT, None, Key.RIGHT, None, Key.DOWN, None):
                if key is None:
                    ui.label("")
                else:
                    self._key_button(key)

    def _build_status(self) -> None:
        with ui.column().classes("items-center").style("gap: 8px;"):
            self._display_label = ui.label(self._factory.display.text).style(
                "font-family: 'Courier New', monospace; font-size: 28px; "
                "color: #ff2020; background: #111111; padding: 4px 12px; "
                "border-radius: 4px; text-shadow: 0 0 8px #ff2020; "
                "letter-spacing: 6px; min-width: 120px; text-align: center;"
            )
            with ui.row().style("gap: 10px;"):
                for color in PhaseColor:
                    self._led_badges[color.value] = ui.badge("").style(
                        "width: 18px; height: 18px; border-radius: 50%; "
                        "background: #444444; min-width: 18px;"
                    )

    def _build_action_keys(self) -> None:
        with ui.column().classes("items-end").style("gap: 6px;"):
            with ui.row().style("gap: 6px;"):
                self._key_button(Key.SELECT)
                self._key_button(Key.START)
            with ui.row().style("gap: 10px;"):
                self._key_button(Key.B)
                self._key_button(Key.A)

    def _key_button(self, key: Key) -> None:
        shortcut = next((k for k, v in KEYBOARD_SHORTCUTS.items() if v is key), "")
        ui.button(
            _KEY_CAPTIONS[key],
            on_click=lambda _, k=key: self.press(k),
        ).style(
            "background: #333333 !important; color: white; "
            "min-width: 44px; height: 36px; font-weight: bold; padding: 0 8px;"
        ).tooltip(f"{key.value.upper()} (key: {shortcut})")

    # ------------------------------------------------------------------
    # Actions (route through mock hardware)
    # ------------------------------------------------------------------

    def press(self, key: Key) -> None:
        """Simulate a keypad press via mock hardware."""
        self._factory.keypad.simulate_press(key.value)

    def _handle_key(self, e) -> None:
        if not e.action.keydown or e.action.repeat:
            return
        key = KEYBOARD_SHORTCUTS.get(e.key.name)
        if key is not None:
            self.press(key)

    # ------------------------------------------------------------------
    # Periodic refresh from mock outputs
    # ------------------------------------------------------------------

    def _refresh(self) -> None:
        """Mirror the mock LEDs and 7-segment display.

        The elements may already be torn down when the browser tab closes;
        writing to them then raises ``RuntimeError``, which is ignored.
        """
        try:
            if self._display_label is not None:
                self._display_label.text = self._factory.display.text
            for color, badge in self._led_badges.items():
                hex_color = _LED_COLORS[color]
                if self._factory.leds.get_state(PhaseColor(color)):
                    badge.style(
                        f"background: {hex_color}; box-shadow: 0 0 12px {hex_color};"
                    )
                else:
                    badge.style("background: #444444; box-shadow: none;")
        except RuntimeError:
            _log.debug("dev panel client gone, ignoring refresh")
