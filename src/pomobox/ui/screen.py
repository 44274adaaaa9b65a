"""NiceGUIScreen — renders timer snapshots into NiceGUI pages.

The frame loop runs on the NiceGUI event loop (see :mod:`pomobox.main`),
so :meth:`NiceGUIScreen.render` is always called on that loop and can
rebuild elements directly.  Containers are only rebuilt when the snapshot
actually changed, which at 60 fps is about once per second.
"""

from __future__ import annotations

import logging

from nicegui import ui

from pomobox.core.interfaces.hardware import ScreenInterface
from pomobox.core.models.config import PhaseColor
from pomobox.core.models.state import Phase
from pomobox.core.snapshot import TimerSnapshot
from pomobox.ui.text_layout import layout_lines

_log = logging.getLogger(__name__)

COLOR_HEX: dict[PhaseColor | None, str] = {
    PhaseColor.RED: "#ff3b3b",
    PhaseColor.GREEN: "#3bff5a",
    PhaseColor.BLUE: "#3b7bff",
    None: "#ffffff",
}

_SELECTED_HEX = "#00ffff"

_LINE_STYLE = (
    "font-family: 'Courier New', monospace; white-space: pre; "
    "width: 100%; text-align: center; line-height: 1.4; "
)


class NiceGUIScreen(ScreenInterface):
    """Renders snapshots into every bound NiceGUI container.

    Supports multiple connected clients; each calls :meth:`bind_container`
    and all bound containers are updated together.

    Typical lifecycle::

        screen = NiceGUIScreen()
        # Later, inside @ui.page('/'):
        with ui.column() as container:
            ...
        screen.bind_container(container)
    """

    def __init__(self, font_size: int = 24) -> None:
        self._containers: set[ui.element] = set()
        self._font_size = font_size
        self._last: TimerSnapshot | None = None

    def bind_container(self, container: ui.element) -> None:
        """Bind a container and draw the latest snapshot into it."""
        self._containers.add(container)
        if self._last is not None:
            self._draw(container, self._last)
        _log.debug("NiceGUIScreen bound container (total=%d)", len(self._containers))

    def unbind_container(self, container: ui.element) -> None:
        """Remove a container binding (call on client disconnect)."""
        self._containers.discard(container)

    # ------------------------------------------------------------------
    # ScreenInterface implementation
    # ------------------------------------------------------------------

    def render(self, snapshot: TimerSnapshot) -> None:
        if snapshot == self._last:
            return
        self._last = snapshot
        for container in list(self._containers):
            self._draw(container, snapshot)

    def clear(self) -> None:
        self._last = None
        for container in list(self._containers):
            try:
                container.clear()
            except RuntimeError:
                self._containers.discard(container)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _draw(self, container: ui.element, snapshot: TimerSnapshot) -> None:
        phase_hex = COLOR_HEX[snapshot.color]
        try:
            container.clear()
            with container:
                for index, line in enumerate(layout_lines(snapshot)):
                    ui.label(line).style(
                        _LINE_STYLE
                        + f"font-size: {self._line_size(index, snapshot)}px; "
                        + f"color: {self._line_color(index, line, phase_hex)};"
                    )
        except RuntimeError:
            # Client disconnected; its elements are gone.
            self._containers.discard(container)

    def _line_size(self, index: int, snapshot: TimerSnapshot) -> int:
        # Countdown row is the third line on the timer screen.
        if index == 2 and snapshot.phase is not Phase.CONFIG:
            return self._font_size * 2
        return self._font_size

    @staticmethod
    def _line_color(index: int, line: str, phase_hex: str) -> str:
        if line.startswith(">"):
            return _SELECTED_HEX
        if index == 0:
            return "#ffffff"
        return phase_hex
