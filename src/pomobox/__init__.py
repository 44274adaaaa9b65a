"""Pomobox — a frame-driven Pomodoro timer for a small button box."""

__version__ = "1.0.0"
