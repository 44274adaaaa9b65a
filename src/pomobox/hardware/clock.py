"""Monotonic tick clock shared by the mock and GPIO backends."""

from __future__ import annotations

import time

from pomobox.core.interfaces.hardware import ClockInterface


class MonotonicClock(ClockInterface):
    """Ticks derived from :func:`time.monotonic_ns`.

    Args:
        ticks_per_second: Resolution of the returned counter.
        counter_bits: If set, the counter wraps at ``2 ** counter_bits`` like
            a fixed-width hardware timer register.
    """

    def __init__(self, ticks_per_second: int = 1000, counter_bits: int | None = None) -> None:
        if ticks_per_second <= 0:
            raise ValueError("ticks_per_second must be greater than zero")
        self.ticks_per_second = ticks_per_second
        self.counter_modulus = 1 << counter_bits if counter_bits else None
        self._origin_ns = time.monotonic_ns()

    def elapsed_ticks(self) -> int:
        ticks = (time.monotonic_ns() - self._origin_ns) * self.ticks_per_second // 1_000_000_000
        if self.counter_modulus:
            return ticks % self.counter_modulus
        return ticks
