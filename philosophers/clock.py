"""Millisecond wall-clock time and precise sleeping."""

from __future__ import annotations

import time

_POLL_SECONDS = 0.0005


def timestamp_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def msleep(ms: int) -> None:
    """Sleep for ``ms`` milliseconds, polling the clock in short steps."""
    target = timestamp_ms() + ms
    while timestamp_ms() < target:
        time.sleep(_POLL_SECONDS)