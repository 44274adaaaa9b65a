"""Main page layout — single-page NiceGUI kiosk.

Provides the ``@ui.page('/')`` route with a dark full-bleed timer screen
and, in dev mode, the keypad simulation panel underneath it.
"""

from __future__ import annotations

import logging as _logging

from nicegui import ui

from pomobox.core.models.config import PomoboxConfig
from pomobox.ui.dev_panel import DevPanel
from pomobox.ui.screen import NiceGUIScreen

_log = _logging.getLogger(__name__)


class PomoboxLayout:
    """Builds the page and binds the screen into it.

    Args:
        screen: The NiceGUI screen to bind into the timer container.
        config: Full configuration (screen size, dev mode).
        dev_panel: Keypad simulation panel, or ``None`` on real hardware.
    """

    def __init__(
        self,
        screen: NiceGUIScreen,
        config: PomoboxConfig,
        dev_panel: DevPanel | None = None,
    ) -> None:
        self._screen = screen
        self._config = config
        self._dev_panel = dev_panel

    def setup_page(self) -> None:
        """Register the ``@ui.page('/')`` route."""

        @ui.page("/")
        def index():
            self._build_page()

    def _build_page(self) -> None:
        ui.dark_mode().enable()

        width = self._config.hardware.screen_width
        height = self._config.hardware.screen_height
        dev_mode = self._config.system.dev_mode

        # Kiosk hides the scrollbar; dev mode scrolls so the keypad stays reachable.
        overflow_value = "auto" if dev_mode else "hidden"
        ui.query("body").style(f"background: #000000; margin: 0; padding: 0; overflow: {overflow_value};")

        with ui.column().classes("w-full items-center").style("min-height: 100vh; gap: 0;"):
            if dev_mode:
                width_rule = f"min(100%, {width}px)"
            else:
                width_rule = f"min(100%, calc(100vh * {width / height:.6f}))"

            with ui.column().classes("items-center justify-center").style(
                "background: #000000; "
                f"width: {width_rule}; max-width: {width}px; "
                f"aspect-ratio: {width}/{height}; margin: 0; overflow: hidden; gap: 0;"
            ) as container:
                pass  # Content rendered by NiceGUIScreen

            self._screen.bind_container(container)

            if self._dev_panel is not None:
                self._dev_panel.build()
