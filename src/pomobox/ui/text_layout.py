"""Plain-text layout of a :class:`TimerSnapshot`.

Shared by every screen backend so the kiosk page, the in-memory test
screen and the log all show the same lines.
"""

from __future__ import annotations

from pomobox.core.models.state import Phase
from pomobox.core.snapshot import ConfigItem, TimerSnapshot

PROGRESS_BAR_WIDTH = 20

TIMER_HELP = ("A: START/PAUSE  B: RESET", "SELECT: SETTINGS  START: SKIP")
CONFIG_HELP = ("UP/DOWN: NAVIGATE", "LEFT/RIGHT: CHANGE VALUE", "SELECT/B: EXIT SETTINGS")


def progress_bar(percent: int, width: int = PROGRESS_BAR_WIDTH) -> str:
    """``[=====     ]`` with one cell per ``100 / width`` percent."""
    step = 100 // width
    cells = "".join("=" if i * step < percent else " " for i in range(width))
    return f"[{cells}]"


def session_line(snapshot: TimerSnapshot) -> str:
    return (
        f"Sessions: {snapshot.sessions_in_set}/{snapshot.sessions_per_set}"
        f" Sets: {snapshot.completed_sets}"
    )


def config_line(item: ConfigItem) -> str:
    cursor = ">" if item.selected else " "
    if item.kind == "color":
        return f"{cursor} {item.label} [{item.value.upper()}]"
    return f"{cursor} {item.label}: {item.value}"


def layout_lines(snapshot: TimerSnapshot) -> list[str]:
    """Return the screen contents for *snapshot*, top to bottom."""
    if snapshot.phase is Phase.CONFIG:
        return ["SETTINGS", *(config_line(item) for item in snapshot.config_items), *CONFIG_HELP]

    status = snapshot.label
    if not snapshot.timer_active and snapshot.phase is not Phase.IDLE:
        status += " (PAUSED)"
    return [
        "POMODORO TIMER",
        status,
        snapshot.mmss,
        progress_bar(snapshot.progress_percent),
        session_line(snapshot),
        *TIMER_HELP,
    ]
