"""Configuration Pydantic models: PomoboxConfig, TimerConfig, ProfileConfig, …"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MIN_DURATION_SECONDS = 60
MIN_SESSIONS_PER_SET = 1


class PhaseColor(str, Enum):
    """Selectable per-phase colours (also the three phase LEDs)."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    def shifted(self, steps: int) -> "PhaseColor":
        """Return the colour *steps* positions along red → green → blue (cyclic)."""
        members = list(PhaseColor)
        return members[(members.index(self) + steps) % len(members)]


class TimerConfig(BaseModel):
    """Durations, cycle size and per-phase colours.

    Durations are seconds but always whole minutes in practice; the
    config editor adjusts them in 60-second steps.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    work_seconds: int = Field(default=25 * 60, ge=MIN_DURATION_SECONDS)
    short_break_seconds: int = Field(default=5 * 60, ge=MIN_DURATION_SECONDS)
    long_break_seconds: int = Field(default=15 * 60, ge=MIN_DURATION_SECONDS)
    sessions_per_set: int = Field(
        default=4,
        ge=MIN_SESSIONS_PER_SET,
        description="Work sessions before a long break",
    )
    work_color: PhaseColor = Field(default=PhaseColor.RED)
    short_break_color: PhaseColor = Field(default=PhaseColor.GREEN)
    long_break_color: PhaseColor = Field(default=PhaseColor.BLUE)


class ProfileConfig(BaseModel):
    """Behavioural variant of the timer, fixed at start-up.

    See :data:`PROFILES` for the two shipped presets.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="full")
    config_fields: Literal["minimal", "full"] = Field(
        default="full",
        description="'minimal' edits 4 fields, 'full' adds the 3 colour pickers",
    )
    initial_phase: Literal["idle", "work"] = Field(default="idle")
    auto_continue: bool = Field(
        default=True,
        description="Keep the timer running when a phase expires",
    )
    reset_clears_counters: bool = Field(
        default=True,
        description="Reset returns to idle and zeroes session/set counters",
    )
    activate_from_idle_enters_work: bool = Field(default=True)
    minute_chime: bool = Field(
        default=True,
        description="Short tone every time a whole minute elapses",
    )


PROFILES: dict[str, ProfileConfig] = {
    "minimal": ProfileConfig(
        name="minimal",
        config_fields="minimal",
        initial_phase="work",
        auto_continue=False,
        reset_clears_counters=False,
        activate_from_idle_enters_work=True,
        minute_chime=False,
    ),
    "full": ProfileConfig(),
}


class HardwareConfig(BaseModel):
    """Pin assignments and hardware parameters.

    All pin numbers are BCM GPIO numbers.
    """

    model_config = ConfigDict(extra="forbid")

    key_pins: dict[str, int] = Field(
        default_factory=lambda: {
            "up": 0, "down": 0, "left": 0, "right": 0,
            "a": 0, "b": 0, "select": 0, "start": 0,
        },
        description="GPIO pin per keypad key",
    )
    led_pins: dict[str, int] = Field(
        default_factory=lambda: {"red": 0, "green": 0, "blue": 0},
        description="GPIO pin per phase LED",
    )
    buzzer_pin: int = Field(default=0, description="GPIO pin for the piezo buzzer")

    # TM1637 7-segment display
    display_clk_pin: int = Field(default=0, description="TM1637 CLK pin")
    display_dio_pin: int = Field(default=0, description="TM1637 DIO pin")
    display_brightness: int = Field(default=7, ge=0, le=7)

    # Screen
    screen_width: int = Field(default=800, description="Kiosk screen width in px")
    screen_height: int = Field(default=480, description="Kiosk screen height in px")

    # Clock / audio
    ticks_per_second: int = Field(default=1000, ge=1, description="Clock resolution")
    audio_enabled: bool = Field(default=True, description="Enable buzzer output")


class SystemConfig(BaseModel):
    """Non-hardware runtime settings."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")
    frame_rate: int = Field(default=60, ge=1, le=240, description="Frames per second")
    webui_port: int = Field(default=8080, description="NiceGUI listen port")
    headless: bool = Field(default=False, description="Run the frame loop without NiceGUI")
    dev_mode: bool = Field(default=False, description="Enable dev panel (auto-set on non-Pi)")
    test_mode: bool = Field(default=False, description="Console-only logging, no rotating log file")


class PomoboxConfig(BaseModel):
    """Top-level configuration loaded from ``pomobox_config.json``."""

    model_config = ConfigDict(extra="forbid")

    timer: TimerConfig = Field(default_factory=TimerConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    hardware: HardwareConfig = Field(default_factory=HardwareConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)
