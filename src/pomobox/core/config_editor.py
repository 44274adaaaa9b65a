"""Config-menu operations: field table, selection movement and adjustment.

All adjustments clamp silently (durations never below 60 s, sessions per
set never below 1) so an invalid :class:`TimerConfig` is unreachable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from pomobox.core.models.config import (
    MIN_DURATION_SECONDS,
    MIN_SESSIONS_PER_SET,
    PhaseColor,
    ProfileConfig,
    TimerConfig,
)
from pomobox.core.models.state import SessionState

_log = logging.getLogger(__name__)

FieldKind = Literal["duration", "count", "color"]

DURATION_STEP_SECONDS = 60


@dataclass(frozen=True)
class EditableField:
    """One row of the settings menu."""

    label: str
    attribute: str
    kind: FieldKind


MINIMAL_FIELDS: tuple[EditableField, ...] = (
    EditableField("WORK TIME", "work_seconds", "duration"),
    EditableField("SHORT BREAK", "short_break_seconds", "duration"),
    EditableField("LONG BREAK", "long_break_seconds", "duration"),
    EditableField("SESSIONS PER SET", "sessions_per_set", "count"),
)

FULL_FIELDS: tuple[EditableField, ...] = MINIMAL_FIELDS + (
    EditableField("WORK COLOR", "work_color", "color"),
    EditableField("SHORT BREAK COLOR", "short_break_color", "color"),
    EditableField("LONG BREAK COLOR", "long_break_color", "color"),
)


def editable_fields(profile: ProfileConfig) -> tuple[EditableField, ...]:
    """Return the ordered field table for *profile*."""
    return FULL_FIELDS if profile.config_fields == "full" else MINIMAL_FIELDS


def adjust_field(
    config: TimerConfig,
    field_index: int,
    delta: int,
    fields: tuple[EditableField, ...] = FULL_FIELDS,
) -> None:
    """Apply *delta* steps to the field at *field_index*.

    Durations move in 60-second steps, the session count in steps of 1 and
    colours cycle through the palette.  Does not touch any running
    countdown; the new value takes effect on the next phase entry.
    """
    field = fields[field_index % len(fields)]
    current = getattr(config, field.attribute)

    if field.kind == "duration":
        new_value: object = max(MIN_DURATION_SECONDS, current + delta * DURATION_STEP_SECONDS)
    elif field.kind == "count":
        new_value = max(MIN_SESSIONS_PER_SET, current + delta)
    else:
        new_value = PhaseColor(current).shifted(delta)

    if new_value != current:
        setattr(config, field.attribute, new_value)
        _log.info("Config %s: %s -> %s", field.attribute, _plain(current), _plain(new_value))


def select_next(state: SessionState, field_count: int) -> None:
    """Move the menu cursor down one row, wrapping to the top."""
    state.config_selection = (state.config_selection + 1) % field_count


def select_previous(state: SessionState, field_count: int) -> None:
    """Move the menu cursor up one row, wrapping to the bottom."""
    state.config_selection = (state.config_selection + field_count - 1) % field_count


def format_field_value(config: TimerConfig, field: EditableField) -> str:
    """Human-readable value of *field* (``25m``, ``4``, ``red``)."""
    value = getattr(config, field.attribute)
    if field.kind == "duration":
        return f"{value // 60}m"
    if field.kind == "color":
        return PhaseColor(value).value
    return str(value)


def _plain(value: object) -> object:
    return value.value if isinstance(value, PhaseColor) else value
