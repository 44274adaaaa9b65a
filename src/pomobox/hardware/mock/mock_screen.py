"""In-memory screen implementation for testing and headless runs.

Stores the last rendered snapshot and its text layout so tests can assert
on them without requiring NiceGUI or any UI event loop.
"""

from __future__ import annotations

from pomobox.core.interfaces.hardware import ScreenInterface
from pomobox.core.snapshot import TimerSnapshot
from pomobox.ui.text_layout import layout_lines


class InMemoryScreen(ScreenInterface):
    """A lightweight screen that records renders in memory.

    Attributes:
        last_snapshot: The last snapshot passed to :meth:`render`, or ``None``.
        last_lines: Text layout of :attr:`last_snapshot`.
        render_count: Number of :meth:`render` calls.
        cleared: ``True`` after :meth:`clear` is called (reset on next render).
    """

    def __init__(self) -> None:
        self.last_snapshot: TimerSnapshot | None = None
        self.last_lines: list[str] = []
        self.render_count = 0
        self.cleared = False

    def render(self, snapshot: TimerSnapshot) -> None:
        self.last_snapshot = snapshot
        self.last_lines = layout_lines(snapshot)
        self.render_count += 1
        self.cleared = False

    def clear(self) -> None:
        self.last_snapshot = None
        self.last_lines = []
        self.cleared = True

    @property
    def text(self) -> str:
        return "\n".join(self.last_lines)
