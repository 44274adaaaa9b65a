"""Shared pytest fixtures for Pomobox tests."""

from __future__ import annotations

import pytest

from pomobox.core.models.config import PROFILES, PomoboxConfig, ProfileConfig, TimerConfig
from pomobox.core.models.state import Key, Phase, SessionState
from pomobox.core.timer_engine import TimerEngine
from pomobox.hardware.mock.mock_factory import MockHardwareFactory
from pomobox.hardware.mock.mock_hardware import ManualClock, MockBuzzer

TPS = 60


@pytest.fixture(scope="session")
def pomobox_config() -> PomoboxConfig:
    """Session-scoped default config (no file I/O)."""
    return PomoboxConfig()


@pytest.fixture
def full_profile() -> ProfileConfig:
    return PROFILES["full"]


@pytest.fixture
def minimal_profile() -> ProfileConfig:
    return PROFILES["minimal"]


@pytest.fixture
def timer_config() -> TimerConfig:
    """Fresh default timer config (mutated by settings tests)."""
    return TimerConfig()


@pytest.fixture
def buzzer() -> MockBuzzer:
    return MockBuzzer()


@pytest.fixture
def engine(full_profile, buzzer) -> TimerEngine:
    return TimerEngine(full_profile, ticks_per_second=TPS, buzzer=buzzer)


@pytest.fixture
def work_state(timer_config) -> SessionState:
    """A running Work session sampled at tick 0."""
    state = SessionState.new(timer_config, Phase.WORK)
    state.timer_active = True
    return state


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock(ticks_per_second=TPS)


@pytest.fixture
def mock_factory(manual_clock) -> MockHardwareFactory:
    return MockHardwareFactory(clock=manual_clock)


@pytest.fixture
def press(mock_factory):
    """Return a helper that simulates one press of each key given."""

    def _press(*keys: Key) -> None:
        for key in keys:
            mock_factory.keypad.simulate_press(key.value)

    return _press
