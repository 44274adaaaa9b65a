"""Pydantic models for configuration and session state."""
from pomobox.core.models.config import (
    PROFILES,
    HardwareConfig,
    PhaseColor,
    PomoboxConfig,
    ProfileConfig,
    SystemConfig,
    TimerConfig,
)
from pomobox.core.models.state import COUNTDOWN_PHASES, Key, Phase, SessionState

__all__ = [
    "PROFILES",
    "HardwareConfig",
    "PhaseColor",
    "PomoboxConfig",
    "ProfileConfig",
    "SystemConfig",
    "TimerConfig",
    "COUNTDOWN_PHASES",
    "Key",
    "Phase",
    "SessionState",
]
