"""Read-only views of the timer for renderers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pomobox.core import config_editor
from pomobox.core.models.config import PhaseColor, ProfileConfig
from pomobox.core.models.state import Phase, SessionState
from pomobox.core.transitions import phase_duration

PHASE_LABELS: dict[Phase, str] = {
    Phase.IDLE: "READY",
    Phase.WORK: "WORK",
    Phase.SHORT_BREAK: "SHORT BREAK",
    Phase.LONG_BREAK: "LONG BREAK",
    Phase.CONFIG: "SETTINGS",
}


class ConfigItem(BaseModel):
    """One settings-menu row."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    kind: str
    selected: bool = False


class TimerSnapshot(BaseModel):
    """Everything a renderer needs for one frame.  Never written back."""

    model_config = ConfigDict(frozen=True)

    phase: Phase
    label: str
    remaining_seconds: int
    total_seconds: int
    progress_percent: int = Field(ge=0, le=100)
    sessions_in_set: int
    sessions_per_set: int
    completed_sessions: int
    completed_sets: int
    timer_active: bool
    color: PhaseColor | None = Field(default=None, description="None renders white")
    config_selection: int = 0
    config_items: tuple[ConfigItem, ...] = ()

    @property
    def minutes(self) -> int:
        return self.remaining_seconds // 60

    @property
    def seconds(self) -> int:
        return self.remaining_seconds % 60

    @property
    def mmss(self) -> str:
        return format_mmss(self.remaining_seconds)


def format_mmss(seconds: int) -> str:
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


def phase_color(state: SessionState) -> PhaseColor | None:
    config = state.config
    if state.phase is Phase.WORK:
        return config.work_color
    if state.phase is Phase.SHORT_BREAK:
        return config.short_break_color
    if state.phase is Phase.LONG_BREAK:
        return config.long_break_color
    return None


def build_snapshot(state: SessionState, profile: ProfileConfig) -> TimerSnapshot:
    """Freeze *state* into a :class:`TimerSnapshot`."""
    total = phase_duration(state.config, state.phase)
    elapsed = max(0, total - state.remaining_seconds)
    progress = min(100, elapsed * 100 // total) if total > 0 else 0

    items: tuple[ConfigItem, ...] = ()
    if state.phase is Phase.CONFIG:
        fields = config_editor.editable_fields(profile)
        items = tuple(
            ConfigItem(
                label=field.label,
                value=config_editor.format_field_value(state.config, field),
                kind=field.kind,
                selected=index == state.config_selection,
            )
            for index, field in enumerate(fields)
        )

    return TimerSnapshot(
        phase=state.phase,
        label=PHASE_LABELS[state.phase],
        remaining_seconds=state.remaining_seconds,
        total_seconds=total,
        progress_percent=progress,
        sessions_in_set=state.completed_sessions % state.config.sessions_per_set,
        sessions_per_set=state.config.sessions_per_set,
        completed_sessions=state.completed_sessions,
        completed_sets=state.completed_sets,
        timer_active=state.timer_active,
        color=phase_color(state),
        config_selection=state.config_selection,
        config_items=items,
    )
