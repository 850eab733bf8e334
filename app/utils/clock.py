"""Timestamp helpers producing nanosecond precision values."""

from __future__ import annotations

import threading
import time

_clock_lock = threading.Lock()
_last_timestamp_ns = 0


def now_ns() -> int:
    """Return the current time in nanoseconds since the epoch.

    Values never go backwards within a process: when the wall clock is
    adjusted, the last timestamp handed out is repeated until the clock
    catches up.
    """

    global _last_timestamp_ns

    with _clock_lock:
        current = time.time_ns()
        if current < _last_timestamp_ns:
            current = _last_timestamp_ns
        _last_timestamp_ns = current
        return current


__all__ = ["now_ns"]
