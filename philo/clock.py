"""Millisecond wall-clock time and a precise busy-waiting sleep."""

from __future__ import annotations

import time

_POLL_SECONDS = 0.0001


def current_time() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(milliseconds: int) -> None:
    """Block for at least *milliseconds*, polling the clock in short steps."""
    start = current_time()
    while current_time() - start < milliseconds:
        time.sleep(_POLL_SECONDS)